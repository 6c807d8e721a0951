# virtual_art/api/routers/profiles.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from virtual_art.api.deps import get_current_user
from virtual_art.api.errors import translate_errors
from virtual_art.data.database import get_db
from virtual_art.data.models.user import UserModel
from virtual_art.domain.schemas import UserRead, ProfileUpdate
from virtual_art.services.user_service import UserService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/", response_model=List[UserRead])
def list_profiles(user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    return UserService(db).list_users()


@router.get("/{user_id}", response_model=UserRead)
def get_profile(user_id: int, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    with translate_errors():
        return UserService(db).get_user(user_id)


@router.put("/{user_id}", response_model=UserRead)
def update_profile(
    user_id: int,
    payload: ProfileUpdate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    with translate_errors():
        return UserService(db).update_profile(user, user_id, payload)
