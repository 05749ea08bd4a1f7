# app/api/endpoints/auth.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import InvalidCredentials, TeamNotFound, UserAlreadyExists, UserNotFound
from app.core.logging import logger
from app.core.permissions import AuthContext
from app.core.security import create_access_token, hash_password, verify_password
from app.db.session import commit_or_raise, get_db
from app.middleware.auth import TOKEN_COOKIE_NAME, get_current_user
from app.models.team import Team
from app.models.user import User, UserRole
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.schemas.base import MessageResponse
from app.schemas.user import UserEnvelope
from app.services.accounts import email_taken

router = APIRouter()


def issue_session(response: Response, user: User) -> str:
    """Create a token for the user and set it as the session cookie."""
    token = create_access_token(user.id, user.email, user.role.value)
    response.set_cookie(
        key=TOKEN_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite=settings.cookie_samesite,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
    return token


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    register_in: RegisterRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Register a new user.
    - Without teamId a new team is created and the user becomes its ADMIN
    - With the id of an existing team the user joins it as USER
    """
    if email_taken(db, register_in.email):
        raise UserAlreadyExists()

    if not register_in.team_id:
        team = Team(
            name=register_in.team_name or f"{register_in.first_name} Team",
            description="",
        )
        db.add(team)
        db.flush()  # Flush to get team ID
        role = UserRole.ADMIN
    else:
        team = db.query(Team).filter(Team.id == register_in.team_id).first()
        if not team:
            raise TeamNotFound()
        role = UserRole.USER

    user = User(
        first_name=register_in.first_name,
        last_name=register_in.last_name,
        email=register_in.email,
        password_hash=hash_password(register_in.password),
        role=role,
        team_id=team.id,
    )
    db.add(user)
    commit_or_raise(db, UserAlreadyExists())
    db.refresh(user)

    logger.info(f"Registered user {user.id} as {role.value} of team {team.id}")
    token = issue_session(response, user)
    return {"user": user, "jwt": token}


@router.post("/login", response_model=AuthResponse)
def login(
    login_in: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Log in with email and password.
    Unknown email and wrong password fail the same way.
    """
    user = db.query(User).filter(User.email == login_in.email).first()

    if not user or not verify_password(login_in.password, user.password_hash):
        logger.warning("Failed login attempt")
        raise InvalidCredentials()

    token = issue_session(response, user)
    return {"user": user, "jwt": token}


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    """
    Clear the session cookie
    """
    response.delete_cookie(
        key=TOKEN_COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite=settings.cookie_samesite,
    )
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserEnvelope)
def get_me(
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
):
    """
    Get current user details
    """
    user = db.query(User).filter(User.id == current_user.id).first()
    if not user:
        raise UserNotFound()
    return {"data": user}
