# app/services/accounts.py
from typing import Optional

from sqlalchemy.orm import Session

from app.models.user import User


def email_taken(db: Session, email: str, exclude_user_id: Optional[str] = None) -> bool:
    """Email uniqueness is global, not per team."""
    query = db.query(User).filter(User.email == email)
    if exclude_user_id is not None:
        query = query.filter(User.id != exclude_user_id)
    return db.query(query.exists()).scalar()
