# app/models/__init__.py
# Import models here so they can be imported from app.models
from app.models.team import Team
from app.models.user import User, UserRole
from app.models.discussion import Discussion
from app.models.comment import Comment
