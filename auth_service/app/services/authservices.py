import logging

from sqlalchemy.orm import Session

from shared.core import auth
from shared.core.exceptions import AuthenticationError, ConflictError
from shared.helpers.db_helper import commit_or_raise
from shared.models.users import Users
from ..schemas.authschema import AuthenticationResponse, LoginRequest
from ..schemas.userschema import UserCreate, UserResponse
from . import userservices

logger = logging.getLogger(__name__)


def get_user_token(user: Users) -> AuthenticationResponse:
    return AuthenticationResponse(
        user=UserResponse.model_validate(user),
        token=auth.create_access_token(user),
    )


#### EMAIL & PASSWORD ###


def register(db: Session, new_user: UserCreate) -> AuthenticationResponse:
    if userservices.get_user_by_email(db, new_user.email):
        raise ConflictError("User already exists", {"field": "email"})

    user = Users(
        email=new_user.email.lower(),
        first_name=new_user.first_name.strip(),
        last_name=new_user.last_name.strip(),
    )
    user.set_password(new_user.password)
    db.add(user)
    commit_or_raise(db, "registering user")
    db.refresh(user)

    logger.info("Registered user %s", user.user_id)
    return get_user_token(user)


def login(db: Session, request: LoginRequest) -> AuthenticationResponse:
    user = userservices.get_user_by_email(db, request.email)

    # Same message for unknown email and wrong password
    if not user or not user.verify_password(request.password):
        raise AuthenticationError("Invalid credentials")

    return get_user_token(user)
