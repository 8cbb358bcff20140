from pydantic import BaseModel, EmailStr
from typing import Optional
from uuid import UUID
from datetime import datetime

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

# Shared properties


class UserBase(BaseModel):
    email: EmailStr
    first_name: str
    last_name: str


class UserCreate(UserBase):
    password: str


# For reading a user (response model)
class UserResponse(UserBase):
    user_id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # allows Pydantic to work with SQLAlchemy objects


class ProfileUpdate(EmptyStringModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class PasswordChange(EmptyStringModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None
