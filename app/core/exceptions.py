# app/core/exceptions.py
from typing import Any, Dict, List, Optional


class AppError(Exception):
    """
    Base class for errors that map onto a client-facing HTTP response.

    Subclasses pin the status code; the named cases below also pin the message
    so handlers and tests agree on the exact wording.
    """
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None):
        if message is not None:
            self.message = message
        self.errors = errors
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        if self.errors is not None:
            body["errors"] = self.errors
        return body


class ValidationError(AppError):
    status_code = 400
    message = "Validation error"


class ConflictError(AppError):
    status_code = 400
    message = "Resource already exists"


class BusinessRuleError(AppError):
    status_code = 400
    message = "Operation not allowed"


class AuthenticationError(AppError):
    status_code = 401
    message = "Authentication required"


class AuthorizationError(AppError):
    status_code = 403
    message = "Forbidden"


class NotFoundError(AppError):
    status_code = 404
    message = "Not found"


# Authentication
class MissingCredentials(AuthenticationError):
    message = "Access token is required"


class InvalidToken(AuthenticationError):
    message = "Invalid token"


class UnknownUser(AuthenticationError):
    message = "User not found"


class InvalidCredentials(AuthenticationError):
    message = "Invalid credentials"


# Authorization
class AdminRequired(AuthorizationError):
    message = "Admin access required"


class NotAuthorized(AuthorizationError):
    message = "Not authorized to delete this comment"


# Not found (also used for team mismatches)
class UserNotFound(NotFoundError):
    message = "User not found"


class DiscussionNotFound(NotFoundError):
    message = "Discussion not found"


class CommentNotFound(NotFoundError):
    message = "Comment not found"


# Conflicts and business rules
class UserAlreadyExists(ConflictError):
    message = "User already exists"


class EmailInUse(ConflictError):
    message = "Email already in use"


class TeamNotFound(BusinessRuleError):
    message = "The team you are trying to join does not exist!"


class CannotSelfDemote(BusinessRuleError):
    message = "Cannot remove your own admin role"


class CannotSelfDelete(BusinessRuleError):
    message = "Cannot delete your own account"
