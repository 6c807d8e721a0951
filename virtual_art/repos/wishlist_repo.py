# virtual_art/repos/wishlist_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from virtual_art.data.models.wishlist import WishlistModel


class WishlistRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_for_user(self, user_id: int) -> List[WishlistModel]:
        return list(
            self.db.execute(
                select(WishlistModel)
                .where(WishlistModel.user_id == user_id)
                .order_by(WishlistModel.created_at.desc(), WishlistModel.id.desc())
            ).scalars()
        )

    def find(self, user_id: int, artwork_id: int) -> WishlistModel | None:
        return self.db.execute(
            select(WishlistModel).where(
                WishlistModel.user_id == user_id,
                WishlistModel.artwork_id == artwork_id,
            )
        ).scalar_one_or_none()

    def save(self, item: WishlistModel) -> WishlistModel:
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete(self, item: WishlistModel):
        self.db.delete(item)
        self.db.commit()
