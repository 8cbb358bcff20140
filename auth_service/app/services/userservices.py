import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from shared.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from shared.helpers.db_helper import commit_or_raise
from shared.models.users import Users
from ..schemas.userschema import PasswordChange, ProfileUpdate, UserResponse

logger = logging.getLogger(__name__)


def get_user_by_id(db: Session, user_id: UUID) -> Optional[Users]:
    return db.query(Users).filter(Users.user_id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[Users]:
    return db.query(Users).filter(Users.email == email.lower()).first()


def _require_user(db: Session, user_id: UUID) -> Users:
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def get_profile(db: Session, user_id: UUID) -> UserResponse:
    return UserResponse.model_validate(_require_user(db, user_id))


def update_profile(db: Session, user_id: UUID, profile: ProfileUpdate) -> UserResponse:
    user = _require_user(db, user_id)

    update_data = {
        key: value
        for key, value in profile.model_dump(exclude_unset=True).items()
        if value is not None
    }
    for key, value in update_data.items():
        setattr(user, key, value)

    commit_or_raise(db, "updating profile")
    db.refresh(user)
    return UserResponse.model_validate(user)


def change_password(db: Session, user_id: UUID, request: PasswordChange) -> dict:
    if not request.current_password or not request.new_password:
        raise ValidationError("Both current and new password are required")

    user = _require_user(db, user_id)

    if not user.verify_password(request.current_password):
        raise AuthenticationError("Current password is incorrect")

    user.set_password(request.new_password)
    commit_or_raise(db, "changing password")

    logger.info("Password changed for user %s", user_id)
    return {"message": "Password changed successfully"}
