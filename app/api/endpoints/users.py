# app/api/endpoints/users.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.exceptions import EmailInUse, UserAlreadyExists
from app.core.logging import logger
from app.core.permissions import (
    AuthContext,
    ensure_can_change_role,
    ensure_can_delete_user,
    ensure_user_visible,
)
from app.core.security import hash_password
from app.db.session import commit_or_raise, get_db
from app.middleware.auth import get_current_user, require_admin
from app.models.user import User
from app.schemas.base import MessageResponse
from app.schemas.user import User as UserSchema, UserCreate, UserList, UserRoleUpdate, UserUpdate
from app.services.accounts import email_taken
from app.services.pagination import DEFAULT_USER_LIMIT, MAX_USER_LIMIT, apply_search, paginate_offset

router = APIRouter()


def apply_user_update(user: User, user_in: UserUpdate) -> None:
    update_data = user_in.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(user, field, value)


@router.get("", response_model=UserList)
def get_users(
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
    search: Optional[str] = None,
    limit: int = Query(DEFAULT_USER_LIMIT, ge=1, le=MAX_USER_LIMIT),
    offset: int = Query(0, ge=0),
):
    """
    List the members of the caller's team, optionally filtered by name or email
    """
    query = db.query(User).filter(User.team_id == current_user.team_id)
    query = apply_search(query, search, User.first_name, User.last_name, User.email)
    query = query.order_by(User.first_name.asc(), User.last_name.asc())

    users, meta = paginate_offset(query, limit, offset)
    return {"data": users, "meta": meta}


@router.patch("/profile", response_model=UserSchema)
def update_profile(
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
):
    """
    Update the caller's own profile
    """
    user = db.query(User).filter(User.id == current_user.id).first()
    user = ensure_user_visible(current_user, user)

    if user_in.email != user.email and email_taken(db, user_in.email, exclude_user_id=user.id):
        raise EmailInUse()

    apply_user_update(user, user_in)
    commit_or_raise(db, EmailInUse())
    db.refresh(user)
    return user


@router.get("/{user_id}", response_model=UserSchema)
def get_user(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
):
    """
    Get a specific user by ID. Users of other teams are reported as not found.
    """
    user = db.query(User).filter(User.id == user_id).first()
    return ensure_user_visible(current_user, user)


@router.post("", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(require_admin),
):
    """
    Create a user in the caller's team (admin only)
    """
    if email_taken(db, user_in.email):
        raise UserAlreadyExists()

    user = User(
        first_name=user_in.first_name,
        last_name=user_in.last_name,
        email=user_in.email,
        password_hash=hash_password(user_in.password),
        role=user_in.role,
        bio=user_in.bio,
        team_id=current_user.team_id,
    )
    db.add(user)
    commit_or_raise(db, UserAlreadyExists())
    db.refresh(user)

    logger.info(f"Admin {current_user.id} created user {user.id} in team {user.team_id}")
    return user


@router.put("/{user_id}", response_model=UserSchema)
def update_user(
    user_id: str,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(require_admin),
):
    """
    Update a member of the caller's team (admin only)
    """
    user = db.query(User).filter(User.id == user_id).first()
    user = ensure_user_visible(current_user, user)

    if user_in.email != user.email and email_taken(db, user_in.email, exclude_user_id=user.id):
        raise EmailInUse()

    apply_user_update(user, user_in)
    commit_or_raise(db, EmailInUse())
    db.refresh(user)
    return user


@router.put("/{user_id}/role", response_model=UserSchema)
def update_user_role(
    user_id: str,
    role_in: UserRoleUpdate,
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(require_admin),
):
    """
    Change the role of a member of the caller's team (admin only).
    Admins cannot demote themselves.
    """
    user = db.query(User).filter(User.id == user_id).first()
    user = ensure_can_change_role(current_user, user, role_in.role)

    user.role = role_in.role
    db.commit()
    db.refresh(user)

    logger.info(f"Admin {current_user.id} set role of user {user.id} to {user.role.value}")
    return user


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(require_admin),
):
    """
    Delete a member of the caller's team (admin only).
    Admins cannot delete their own account.
    """
    user = db.query(User).filter(User.id == user_id).first()
    user = ensure_can_delete_user(current_user, user)

    db.delete(user)
    db.commit()

    logger.info(f"Admin {current_user.id} deleted user {user_id}")
    return {"message": "User deleted successfully"}
