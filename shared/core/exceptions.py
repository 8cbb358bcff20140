"""
Error kinds raised by the lifecycle managers.

Managers raise these untransformed; ``setup_exception_handlers`` maps each kind
to its HTTP status and the ``JsonOutResult`` failure envelope.
"""
from typing import Any, Dict, Optional

from shared.utils.app_status_code import AppStatusCode


class AppError(Exception):
    http_status: int = 400
    status_code: str = AppStatusCode.OPERATION_FAILED

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(AppError):
    """Caller supplied data failed a precondition."""
    http_status = 400
    status_code = AppStatusCode.INVALID_INPUT


class AuthenticationError(AppError):
    http_status = 401
    status_code = AppStatusCode.AUTHENTICATION_CREDENTIALS_INVALID


class AuthorizationError(AppError):
    """Actor is not a party allowed to touch the resource."""
    http_status = 403
    status_code = AppStatusCode.ACCESS_FORBIDDEN


class NotFoundError(AppError):
    http_status = 404
    status_code = AppStatusCode.NOT_FOUND


class ConflictError(AppError):
    """Operation would break an invariant; ``details`` says how to resolve it."""
    http_status = 409
    status_code = AppStatusCode.CONFLICT


class PersistenceError(AppError):
    http_status = 500
    status_code = AppStatusCode.DATABASE_ERROR
