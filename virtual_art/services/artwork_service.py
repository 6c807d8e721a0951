# virtual_art/services/artwork_service.py
import hashlib
import os
from typing import Dict, Any, List, Optional

from sqlalchemy.orm import Session

from virtual_art.data.models.user import UserModel
from virtual_art.data.models.artwork import ArtworkModel
from virtual_art.repos.artwork_repo import ArtworkRepo
from virtual_art.repos.user_repo import UserRepo
from virtual_art.domain.schemas import ArtworkIn, ArtworkUpdate
from virtual_art.domain.serializers import artwork_dict
from virtual_art.utils.settings import UPLOAD_DIR
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)

ALLOWED_IMAGE_TYPES = {"image/jpeg": ".jpg", "image/png": ".png", "image/gif": ".gif", "image/webp": ".webp"}


class ArtworkService:
    """
    Dziela sztuki: katalog, upload artysty, moderacja przez admina.
    Przejscia statusu: pending -> published | rejected (admin), published -> sold (zamowienie).
    """

    def __init__(self, db: Session, upload_dir: str | None = None):
        self.repo = ArtworkRepo(db)
        self.users = UserRepo(db)
        self.upload_dir = upload_dir or UPLOAD_DIR

    #query
    def list_artworks(
        self,
        actor: UserModel,
        status: Optional[str] = None,
        category: Optional[str] = None,
        artist_id: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        # admin widzi wszystko, reszta opublikowane + swoje
        visible_to = None if actor.user_type == "admin" else actor.id
        artworks = self.repo.list_artworks(
            status=status,
            category=category,
            artist_id=artist_id,
            visible_to=visible_to,
        )
        logger.info(f"Artwork query by {actor.id}: {len(artworks)} found")
        return [artwork_dict(a) for a in artworks]

    def list_all(self) -> List[Dict[str, Any]]:
        return [artwork_dict(a) for a in self.repo.list_artworks()]

    def list_my_artworks(self, actor: UserModel) -> List[Dict[str, Any]]:
        if actor.user_type != "artist":
            raise PermissionError("Only artists can access their artworks")
        return [artwork_dict(a) for a in self.repo.list_by_artist(actor.id)]

    def get_artwork(self, actor: UserModel, artwork_id: int) -> Dict[str, Any]:
        artwork = self.repo.get_artwork(artwork_id)
        if not artwork:
            raise LookupError("Artwork not found")

        if not self._can_view(actor, artwork):
            raise PermissionError("Not authorized")

        return artwork_dict(artwork)

    #commands
    def create_artwork(self, actor: UserModel, payload: ArtworkIn) -> Dict[str, Any]:
        if actor.user_type != "artist":
            raise PermissionError("Only artists can create artworks")

        artwork = self.repo.save(
            ArtworkModel(artist_id=actor.id, status="pending", **payload.model_dump())
        )
        self._bump_artwork_count(actor.id, 1)

        logger.info(f"Artwork {artwork.id} created by artist {actor.id}")
        return artwork_dict(artwork)

    def upload_artwork(
        self,
        actor: UserModel,
        payload: ArtworkIn,
        content: bytes,
        content_type: str,
    ) -> Dict[str, Any]:
        """
        Upload z plikiem: zapis na dysk, sha256 blokuje ponowne wgranie tego samego obrazka.
        payload.image_url jest nadpisywany sciezka do pliku.
        """
        if actor.user_type != "artist":
            raise PermissionError("Only artists can create artworks")

        if content_type not in ALLOWED_IMAGE_TYPES:
            raise ValueError("Only image files are allowed")
        if not content:
            raise ValueError("Image file is required")

        digest = hashlib.sha256(content).hexdigest()
        duplicate = self.repo.get_by_hash(digest)
        if duplicate:
            raise RuntimeError(f"This image has already been uploaded (artwork {duplicate.id})")

        os.makedirs(self.upload_dir, exist_ok=True)
        filename = f"{digest}{ALLOWED_IMAGE_TYPES[content_type]}"
        with open(os.path.join(self.upload_dir, filename), "wb") as fh:
            fh.write(content)

        data = payload.model_dump()
        data["image_url"] = f"/uploads/{filename}"

        artwork = self.repo.save(
            ArtworkModel(artist_id=actor.id, status="pending", image_hash=digest, **data)
        )
        self._bump_artwork_count(actor.id, 1)

        logger.info(f"Artwork {artwork.id} uploaded by artist {actor.id} as {filename}")
        return artwork_dict(artwork)

    def update_artwork(self, actor: UserModel, artwork_id: int, payload: ArtworkUpdate) -> Dict[str, Any]:
        artwork = self.repo.get_artwork(artwork_id)
        if not artwork:
            raise LookupError("Artwork not found")

        is_admin = actor.user_type == "admin"
        if artwork.artist_id != actor.id and not is_admin:
            raise PermissionError("Not authorized")

        updates = payload.model_dump(exclude_unset=True)
        if "status" in updates and not is_admin:
            raise PermissionError("Only admins can change artwork status")

        for field, value in updates.items():
            setattr(artwork, field, value)

        artwork = self.repo.save(artwork)

        if "status" in updates:
            logger.info(f"Artwork {artwork.id} status set to {artwork.status} by admin {actor.id}")

        return artwork_dict(artwork)

    def delete_artwork(self, actor: UserModel, artwork_id: int):
        artwork = self.repo.get_artwork(artwork_id)
        if not artwork:
            raise LookupError("Artwork not found")

        if artwork.artist_id != actor.id and actor.user_type != "admin":
            raise PermissionError("Not authorized")

        artist_id = artwork.artist_id
        self.repo.delete(artwork)
        self._bump_artwork_count(artist_id, -1)

        logger.info(f"Artwork {artwork_id} deleted by {actor.id}")

    def _can_view(self, actor: UserModel, artwork: ArtworkModel) -> bool:
        return (
            artwork.status == "published"
            or artwork.artist_id == actor.id
            or actor.user_type == "admin"
        )

    def _bump_artwork_count(self, artist_id: int, delta: int):
        # artworks_sold w profilu liczy wystawione dziela, nie sprzedane
        profile = self.users.get_artist_profile_by_user(artist_id)
        if profile:
            profile.artworks_sold = max(0, (profile.artworks_sold or 0) + delta)
            self.users.save_artist_profile(profile)
