# virtual_art/repos/artwork_repo.py
from typing import List, Optional

from sqlalchemy import select, or_
from sqlalchemy.orm import Session

from virtual_art.data.models.artwork import ArtworkModel


class ArtworkRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_artwork(self, artwork_id: int) -> ArtworkModel | None:
        return self.db.get(ArtworkModel, artwork_id)

    def get_by_hash(self, image_hash: str) -> ArtworkModel | None:
        return self.db.execute(
            select(ArtworkModel).where(ArtworkModel.image_hash == image_hash)
        ).scalar_one_or_none()

    def list_artworks(
        self,
        status: Optional[str] = None,
        category: Optional[str] = None,
        artist_id: Optional[int] = None,
        visible_to: Optional[int] = None,
    ) -> List[ArtworkModel]:
        """
        visible_to: id uzytkownika (nie-admina) - widzi opublikowane + swoje.
        None oznacza brak ograniczen (admin).
        """
        query = select(ArtworkModel)

        if status:
            query = query.where(ArtworkModel.status == status)
        if category:
            query = query.where(ArtworkModel.category == category)
        if artist_id is not None:
            query = query.where(ArtworkModel.artist_id == artist_id)
        if visible_to is not None:
            query = query.where(
                or_(ArtworkModel.status == "published", ArtworkModel.artist_id == visible_to)
            )

        return list(self.db.execute(query.order_by(ArtworkModel.id)).scalars())

    def list_by_artist(self, artist_id: int) -> List[ArtworkModel]:
        return list(
            self.db.execute(
                select(ArtworkModel)
                .where(ArtworkModel.artist_id == artist_id)
                .order_by(ArtworkModel.created_at.desc(), ArtworkModel.id.desc())
            ).scalars()
        )

    def save(self, artwork: ArtworkModel) -> ArtworkModel:
        self.db.add(artwork)
        self.db.commit()
        self.db.refresh(artwork)
        return artwork

    def delete(self, artwork: ArtworkModel):
        self.db.delete(artwork)
        self.db.commit()
