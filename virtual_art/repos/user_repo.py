# virtual_art/repos/user_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from virtual_art.data.models.user import UserModel
from virtual_art.data.models.artist_profile import ArtistProfileModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    def list_users(self) -> List[UserModel]:
        return list(self.db.execute(select(UserModel).order_by(UserModel.id)).scalars())

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def save(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    # profile artysty 1:1 z uzytkownikiem
    def get_artist_profile_by_user(self, user_id: int) -> ArtistProfileModel | None:
        return self.db.execute(
            select(ArtistProfileModel).where(ArtistProfileModel.user_id == user_id)
        ).scalar_one_or_none()

    def get_artist_profile(self, profile_id: int) -> ArtistProfileModel | None:
        return self.db.get(ArtistProfileModel, profile_id)

    def list_artist_profiles(self) -> List[ArtistProfileModel]:
        return list(self.db.execute(select(ArtistProfileModel).order_by(ArtistProfileModel.id)).scalars())

    def save_artist_profile(self, profile: ArtistProfileModel) -> ArtistProfileModel:
        self.db.add(profile)
        self.db.commit()
        self.db.refresh(profile)
        return profile
