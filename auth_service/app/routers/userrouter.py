from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from ..schemas import userschema
from ..services import userservices

router = APIRouter(
    prefix="/api/user",
    tags=["User"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("/me", response_model=userschema.UserResponse)
def get_profile(
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    return userservices.get_profile(db, current_user.user_uuid)


@router.put("/me", response_model=userschema.UserResponse)
def update_profile(
        profile: userschema.ProfileUpdate,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    return userservices.update_profile(db, current_user.user_uuid, profile)


@router.put("/me/password")
def change_password(
        request: userschema.PasswordChange,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    return userservices.change_password(db, current_user.user_uuid, request)
