# app/core/permissions.py
"""
Team-scoped access rules.

Every rule is a pure predicate over the caller's ``AuthContext`` and the
target row. The ``ensure_*`` helpers wrap the predicates and raise the
matching typed error so handlers stay one call per check.

A target that lives in another team is always reported as not found, never
as forbidden: callers must not be able to tell "does not exist" from
"exists elsewhere". The one 403 left on a same-team row is comment deletion
by someone who is neither the author nor an admin.
"""
from dataclasses import dataclass
from typing import Optional

from app.core.exceptions import (
    AdminRequired,
    CannotSelfDelete,
    CannotSelfDemote,
    CommentNotFound,
    DiscussionNotFound,
    NotAuthorized,
    UserNotFound,
)
from app.core.logging import logger
from app.models.comment import Comment
from app.models.discussion import Discussion
from app.models.user import User, UserRole


@dataclass(frozen=True)
class AuthContext:
    """Identity of the caller, as loaded from the database for this request."""
    id: str
    email: str
    role: UserRole
    team_id: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def from_user(cls, user: User) -> "AuthContext":
        return cls(id=user.id, email=user.email, role=user.role, team_id=user.team_id)


# Predicates

def same_team(caller: AuthContext, team_id: Optional[str]) -> bool:
    return team_id is not None and caller.team_id == team_id


def can_view_user(caller: AuthContext, target: Optional[User]) -> bool:
    return target is not None and same_team(caller, target.team_id)


def can_manage_user(caller: AuthContext, target: Optional[User]) -> bool:
    return caller.is_admin and can_view_user(caller, target)


def is_self_demotion(caller: AuthContext, target: User, new_role: UserRole) -> bool:
    return target.id == caller.id and new_role == UserRole.USER


def can_delete_user(caller: AuthContext, target: User) -> bool:
    return can_manage_user(caller, target) and target.id != caller.id


def can_view_discussion(caller: AuthContext, discussion: Optional[Discussion]) -> bool:
    return discussion is not None and same_team(caller, discussion.team_id)


def can_manage_discussion(caller: AuthContext, discussion: Optional[Discussion]) -> bool:
    return caller.is_admin and can_view_discussion(caller, discussion)


def can_view_comment(caller: AuthContext, comment: Optional[Comment]) -> bool:
    # Comments have no team of their own; go through the discussion
    return comment is not None and can_view_discussion(caller, comment.discussion)


def can_delete_comment(caller: AuthContext, comment: Comment) -> bool:
    return can_view_comment(caller, comment) and (comment.author_id == caller.id or caller.is_admin)


# Guards

def ensure_admin(caller: AuthContext) -> None:
    if not caller.is_admin:
        logger.warning(f"Admin access denied for user {caller.id}")
        raise AdminRequired()


def ensure_user_visible(caller: AuthContext, target: Optional[User]) -> User:
    if not can_view_user(caller, target):
        raise UserNotFound()
    return target


def ensure_can_change_role(caller: AuthContext, target: Optional[User], new_role: UserRole) -> User:
    ensure_admin(caller)
    target = ensure_user_visible(caller, target)
    if is_self_demotion(caller, target, new_role):
        raise CannotSelfDemote()
    return target


def ensure_can_delete_user(caller: AuthContext, target: Optional[User]) -> User:
    ensure_admin(caller)
    target = ensure_user_visible(caller, target)
    if not can_delete_user(caller, target):
        raise CannotSelfDelete()
    return target


def ensure_discussion_visible(caller: AuthContext, discussion: Optional[Discussion]) -> Discussion:
    if not can_view_discussion(caller, discussion):
        raise DiscussionNotFound()
    return discussion


def ensure_can_manage_discussion(caller: AuthContext, discussion: Optional[Discussion]) -> Discussion:
    ensure_admin(caller)
    return ensure_discussion_visible(caller, discussion)


def ensure_can_delete_comment(caller: AuthContext, comment: Optional[Comment]) -> Comment:
    if not can_view_comment(caller, comment):
        raise CommentNotFound()
    if not can_delete_comment(caller, comment):
        logger.warning(f"User {caller.id} denied deleting comment {comment.id}")
        raise NotAuthorized()
    return comment
