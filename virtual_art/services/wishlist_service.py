# virtual_art/services/wishlist_service.py
from typing import Dict, Any, List

from sqlalchemy.orm import Session

from virtual_art.data.models.user import UserModel
from virtual_art.data.models.wishlist import WishlistModel
from virtual_art.domain.serializers import wishlist_dict
from virtual_art.repos.wishlist_repo import WishlistRepo
from virtual_art.repos.artwork_repo import ArtworkRepo


class WishlistService:
    def __init__(self, db: Session):
        self.repo = WishlistRepo(db)
        self.artworks = ArtworkRepo(db)

    def list_items(self, actor: UserModel) -> List[Dict[str, Any]]:
        return [wishlist_dict(i) for i in self.repo.list_for_user(actor.id)]

    def add(self, actor: UserModel, artwork_id: int) -> Dict[str, Any]:
        artwork = self.artworks.get_artwork(artwork_id)
        if not artwork or artwork.status != "published":
            raise ValueError("Artwork not available")

        if self.repo.find(actor.id, artwork_id):
            raise ValueError("Artwork already in wishlist")

        item = self.repo.save(WishlistModel(user_id=actor.id, artwork_id=artwork_id))
        return wishlist_dict(item)

    def remove(self, actor: UserModel, artwork_id: int):
        item = self.repo.find(actor.id, artwork_id)
        if not item:
            raise LookupError("Item not found in wishlist")
        self.repo.delete(item)

    def contains(self, actor: UserModel, artwork_id: int) -> bool:
        return self.repo.find(actor.id, artwork_id) is not None
