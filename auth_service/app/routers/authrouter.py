from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from shared.core.database import get_db
from ..schemas import authschema, userschema
from ..services import authservices

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", response_model=authschema.AuthenticationResponse, status_code=status.HTTP_201_CREATED)
def register(
        new_user: userschema.UserCreate,
        db: Session = Depends(get_db)):
    return authservices.register(db, new_user)


@router.post("/login", response_model=authschema.AuthenticationResponse)
def login(
        request: authschema.LoginRequest,
        db: Session = Depends(get_db)):
    return authservices.login(db, request)
