from app.schemas.base import MessageResponse, PageMeta, OffsetMeta
from app.schemas.team import Team, TeamList
from app.schemas.user import User, UserCreate, UserUpdate, UserRoleUpdate, UserList, UserEnvelope
from app.schemas.auth import RegisterRequest, LoginRequest, AuthResponse
from app.schemas.discussion import Discussion, DiscussionIn, DiscussionList, DiscussionEnvelope
from app.schemas.comment import Comment, CommentCreate, CommentList
