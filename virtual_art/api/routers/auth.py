# virtual_art/api/routers/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from virtual_art.api.deps import get_current_user
from virtual_art.api.errors import translate_errors
from virtual_art.data.database import get_db
from virtual_art.data.models.user import UserModel
from virtual_art.domain.schemas import RegisterIn, LoginIn, AuthOut, UserRead
from virtual_art.domain.serializers import user_read
from virtual_art.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthOut, status_code=201)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    with translate_errors():
        return UserService(db).register(payload)


@router.post("/login", response_model=AuthOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    with translate_errors():
        return UserService(db).login(payload)


@router.post("/logout")
def logout(user: UserModel = Depends(get_current_user)):
    # JWT jest bezstanowy, klient sam usuwa token
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserRead)
def me(user: UserModel = Depends(get_current_user)):
    return user_read(user)


@router.get("/profile", response_model=UserRead)
def profile(user: UserModel = Depends(get_current_user)):
    return user_read(user)
