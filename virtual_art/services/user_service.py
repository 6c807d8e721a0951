# virtual_art/services/user_service.py
from typing import Dict, Any, List

from sqlalchemy.orm import Session

from virtual_art.data.models.user import UserModel
from virtual_art.data.models.artist_profile import ArtistProfileModel
from virtual_art.repos.user_repo import UserRepo
from virtual_art.domain.schemas import (
    RegisterIn,
    LoginIn,
    ProfileUpdate,
    ArtistProfileIn,
    ArtistProfileUpdate,
)
from virtual_art.domain.serializers import user_summary, user_read, artist_profile_dict
from virtual_art.services.auth_service import hash_password, verify_password, create_access_token
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    """
    Rejestracja, logowanie, profile uzytkownikow i artystow.
    Uzytkownicy nigdy nie sa usuwani, admin zmienia tylko status (suspended).
    """

    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    # =====================================================
    # AUTH
    # =====================================================
    def register(self, payload: RegisterIn) -> Dict[str, Any]:
        email = payload.email.lower()
        if self.repo.get_by_email(email):
            raise ValueError("User already exists")

        user = self.repo.create_user(
            UserModel(
                email=email,
                password_hash=hash_password(payload.password),
                full_name=payload.full_name,
                user_type=payload.user_type,
                phone=payload.phone,
                address=payload.address,
                status="active",
            )
        )
        logger.info(f"Registered {user.user_type} {user.id} ({email})")

        # profil artysty tylko gdy podano nazwe i bio
        if user.user_type == "artist" and payload.artist_name and payload.bio:
            self.repo.save_artist_profile(
                ArtistProfileModel(
                    user_id=user.id,
                    artist_name=payload.artist_name,
                    bio=payload.bio,
                    portfolio_link=payload.portfolio_link,
                    social_links={},
                )
            )
            logger.info(f"Created artist profile for user {user.id}")

        return {"token": create_access_token(user.id), "user": user_summary(user)}

    def login(self, payload: LoginIn) -> Dict[str, Any]:
        user = self.repo.get_by_email(payload.email.lower())
        if not user or not verify_password(payload.password, user.password_hash):
            raise ValueError("Invalid credentials")

        if user.status == "suspended":
            raise PermissionError("Account suspended")

        logger.info(f"User {user.id} logged in")
        return {"token": create_access_token(user.id), "user": user_summary(user)}

    def ensure_default_admin(self, email: str, password: str) -> UserModel:
        existing = self.repo.get_by_email(email)
        if existing:
            logger.info(f"Default admin account verified: {email}")
            return existing

        admin = self.repo.create_user(
            UserModel(
                email=email,
                password_hash=hash_password(password),
                full_name="Admin User",
                user_type="admin",
                status="active",
            )
        )
        logger.info(f"Default admin account created: {email}")
        return admin

    # =====================================================
    # PROFILES
    # =====================================================
    def get_user(self, user_id: int) -> Dict[str, Any]:
        user = self.repo.get_user(user_id)
        if not user:
            raise LookupError("User not found")
        return user_read(user)

    def list_users(self) -> List[Dict[str, Any]]:
        return [user_read(u) for u in self.repo.list_users()]

    def update_profile(self, actor: UserModel, user_id: int, payload: ProfileUpdate) -> Dict[str, Any]:
        user = self.repo.get_user(user_id)
        if not user:
            raise LookupError("User not found")

        is_admin = actor.user_type == "admin"
        if actor.id != user.id and not is_admin:
            raise PermissionError("Not authorized")

        updates = payload.model_dump(exclude_unset=True)
        if not is_admin and ({"status", "user_type"} & updates.keys()):
            raise PermissionError("Only admins can change account status or role")

        for field, value in updates.items():
            setattr(user, field, value)

        user = self.repo.save(user)
        logger.info(f"Profile {user.id} updated by {actor.id}: {sorted(updates)}")
        return user_read(user)

    # =====================================================
    # ARTIST PROFILES
    # =====================================================
    def list_artist_profiles(self) -> List[Dict[str, Any]]:
        return [artist_profile_dict(p) for p in self.repo.list_artist_profiles()]

    def get_artist_profile_by_user(self, user_id: int) -> Dict[str, Any]:
        profile = self.repo.get_artist_profile_by_user(user_id)
        if not profile:
            raise LookupError("Artist profile not found")
        return artist_profile_dict(profile)

    def create_artist_profile(self, actor: UserModel, payload: ArtistProfileIn) -> Dict[str, Any]:
        if actor.user_type != "artist":
            raise PermissionError("Only artists can create artist profiles")

        if self.repo.get_artist_profile_by_user(actor.id):
            raise ValueError("Artist profile already exists")

        profile = self.repo.save_artist_profile(
            ArtistProfileModel(user_id=actor.id, **payload.model_dump())
        )
        logger.info(f"Artist profile {profile.id} created for user {actor.id}")
        return artist_profile_dict(profile)

    def update_artist_profile(
        self,
        actor: UserModel,
        profile_id: int,
        payload: ArtistProfileUpdate,
    ) -> Dict[str, Any]:
        profile = self.repo.get_artist_profile(profile_id)
        if not profile:
            raise LookupError("Artist profile not found")

        if profile.user_id != actor.id and actor.user_type != "admin":
            raise PermissionError("Not authorized")

        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(profile, field, value)

        return artist_profile_dict(self.repo.save_artist_profile(profile))
