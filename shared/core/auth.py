from datetime import datetime, timedelta, timezone
from fastapi import status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from shared.core.config import settings
from shared.helpers.json_response_helper import error_response
from shared.core.schemas import UserToken
from shared.core.database import get_db

security = HTTPBearer()


def create_access_token(user: Users, expires_minutes: int | None = None) -> str:
    expires = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes or settings.JWT_EXPIRE_MINUTES)
    payload = {
        "user_id": str(user.user_id),
        "email": user.email,
        "name": user.full_name,
        "exp": expires,
    }
    return jwt.encode(payload, settings.JWT_SECRET,
                      algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> UserToken:
    """Verify and decode a JWT token."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET,
                             algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        return error_response(
            message="Token has expired",
            status_code=str(AppStatusCode.AUTHENTICATION_TOKEN_EXPIRED),
            http_status=status.HTTP_401_UNAUTHORIZED
        )
    except JWTError:
        return error_response(
            message="Invalid or expired token",
            status_code=str(AppStatusCode.AUTHENTICATION_TOKEN_INVALID),
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    try:
        return UserToken(**payload)
    except PydanticValidationError:
        return error_response(
            message="Invalid token structure",
            status_code=str(AppStatusCode.AUTHENTICATION_TOKEN_INVALID),
            http_status=status.HTTP_401_UNAUTHORIZED
        )


def validate_current_token(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> UserToken:
    user_data = verify_token(credentials.credentials)

    try:
        user_uuid = user_data.user_uuid
    except ValueError:
        return error_response(
            message="Invalid token structure",
            status_code=str(AppStatusCode.AUTHENTICATION_TOKEN_INVALID),
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    user = db.query(Users).filter(Users.user_id == user_uuid).first()

    if not user:
        return error_response(
            message="User not found",
            status_code=str(AppStatusCode.AUTHENTICATION_USER_INVALID),
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    return user_data
