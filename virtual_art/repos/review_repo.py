# virtual_art/repos/review_repo.py
from typing import List

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from virtual_art.data.models.review import ReviewModel


class ReviewRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_review(self, review_id: int) -> ReviewModel | None:
        return self.db.get(ReviewModel, review_id)

    def find(self, user_id: int, artwork_id: int) -> ReviewModel | None:
        return self.db.execute(
            select(ReviewModel).where(ReviewModel.user_id == user_id, ReviewModel.artwork_id == artwork_id)
        ).scalar_one_or_none()

    def list_all(self) -> List[ReviewModel]:
        return list(self.db.execute(select(ReviewModel).order_by(ReviewModel.id)).scalars())

    def list_by(self, **criteria) -> List[ReviewModel]:
        query = select(ReviewModel)
        for column, value in criteria.items():
            query = query.where(getattr(ReviewModel, column) == value)
        return list(self.db.execute(query.order_by(ReviewModel.created_at.desc())).scalars())

    def average_for_artist(self, artist_id: int) -> float:
        avg = self.db.execute(
            select(func.avg(ReviewModel.rating)).where(ReviewModel.artist_id == artist_id)
        ).scalar()
        return float(avg or 0)

    def save(self, review: ReviewModel) -> ReviewModel:
        self.db.add(review)
        self.db.commit()
        self.db.refresh(review)
        return review

    def delete(self, review: ReviewModel):
        self.db.delete(review)
        self.db.commit()
