from pydantic import BaseModel, EmailStr

from ..schemas.userschema import UserResponse


# -------- Email & Password


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class AuthenticationResponse(BaseModel):
    user: UserResponse
    token: str
    token_type: str = "bearer"
