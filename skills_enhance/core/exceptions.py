"""Custom exception classes for the Skills Enhance access service."""

from fastapi import HTTPException, status


class SkillsEnhanceError(Exception):
    """Base exception for Skills Enhance."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class AuthenticationError(SkillsEnhanceError):
    """Raised when login fails."""
    status_code = status.HTTP_401_UNAUTHORIZED


class AuthorizationError(SkillsEnhanceError):
    """Raised when the current actor lacks a permission."""
    status_code = status.HTTP_403_FORBIDDEN


class ResourceNotFoundError(SkillsEnhanceError):
    """Raised when a requested resource is not found."""
    status_code = status.HTTP_404_NOT_FOUND


class RoleNotFoundError(ResourceNotFoundError):
    """Raised when a role id is not in the registry."""
    pass


class UserNotFoundError(ResourceNotFoundError):
    """Raised when a user id is not in the directory."""
    pass


class ResourceConflictError(SkillsEnhanceError):
    """Raised when an operation conflicts with current state."""
    status_code = status.HTTP_409_CONFLICT


class RoleInUseError(ResourceConflictError):
    """Raised when deleting a role that users still hold."""
    pass


class RoleNotAssignedError(ResourceConflictError):
    """Raised when a user does not hold the role an operation targets."""
    pass


class LastRoleError(ResourceConflictError):
    """Raised when removing the only role a user holds."""
    pass


class PredefinedRoleError(AuthorizationError):
    """Raised when editing or deleting one of the built-in roles."""
    pass


class ValidationError(SkillsEnhanceError):
    """Raised when input validation fails."""
    pass


# HTTP exception shortcuts
def not_found(detail: str = "Resource not found") -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def forbidden(detail: str = "Insufficient permissions") -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def unauthorized(detail: str = "Not authenticated") -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
