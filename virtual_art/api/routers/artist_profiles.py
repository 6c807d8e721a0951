# virtual_art/api/routers/artist_profiles.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from virtual_art.api.deps import get_current_user
from virtual_art.api.errors import translate_errors
from virtual_art.data.database import get_db
from virtual_art.data.models.user import UserModel
from virtual_art.domain.schemas import ArtistProfileIn, ArtistProfileUpdate, ArtistProfileOut
from virtual_art.services.user_service import UserService

router = APIRouter(prefix="/artist-profiles", tags=["artist-profiles"])


@router.get("/", response_model=List[ArtistProfileOut])
def list_artist_profiles(user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    return UserService(db).list_artist_profiles()


@router.post("/", response_model=ArtistProfileOut, status_code=201)
def create_artist_profile(
    payload: ArtistProfileIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    with translate_errors():
        return UserService(db).create_artist_profile(user, payload)


@router.get("/{user_id}", response_model=ArtistProfileOut)
def get_artist_profile(user_id: int, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    Profil artysty po id uzytkownika (wlasciciela), nie po id profilu.
    """
    with translate_errors():
        return UserService(db).get_artist_profile_by_user(user_id)


@router.put("/{profile_id}", response_model=ArtistProfileOut)
def update_artist_profile(
    profile_id: int,
    payload: ArtistProfileUpdate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    with translate_errors():
        return UserService(db).update_artist_profile(user, profile_id, payload)
