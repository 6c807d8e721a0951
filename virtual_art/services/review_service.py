# virtual_art/services/review_service.py
from typing import Dict, Any, List

from sqlalchemy.orm import Session

from virtual_art.data.models.user import UserModel
from virtual_art.data.models.review import ReviewModel
from virtual_art.domain.schemas import ReviewIn, ReviewUpdate
from virtual_art.domain.serializers import review_dict
from virtual_art.repos.review_repo import ReviewRepo
from virtual_art.repos.artwork_repo import ArtworkRepo
from virtual_art.repos.order_repo import OrderRepo
from virtual_art.repos.user_repo import UserRepo
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)


class ReviewService:
    def __init__(self, db: Session):
        self.repo = ReviewRepo(db)
        self.artworks = ArtworkRepo(db)
        self.orders = OrderRepo(db)
        self.users = UserRepo(db)

    def list_reviews(self, actor: UserModel) -> List[Dict[str, Any]]:
        if actor.user_type == "admin":
            reviews = self.repo.list_all()
        elif actor.user_type == "artist":
            reviews = self.repo.list_by(artist_id=actor.id)
        else:
            reviews = self.repo.list_by(user_id=actor.id)
        return [review_dict(r) for r in reviews]

    def list_all(self) -> List[Dict[str, Any]]:
        return [review_dict(r) for r in self.repo.list_all()]

    def list_for_artwork(self, artwork_id: int) -> List[Dict[str, Any]]:
        return [review_dict(r) for r in self.repo.list_by(artwork_id=artwork_id)]

    def get_review(self, review_id: int) -> Dict[str, Any]:
        review = self.repo.get_review(review_id)
        if not review:
            raise LookupError("Review not found")
        return review_dict(review)

    def create_review(self, actor: UserModel, payload: ReviewIn) -> Dict[str, Any]:
        artwork = self.artworks.get_artwork(payload.artwork_id)
        if not artwork:
            raise LookupError("Artwork not found")

        # recenzja tylko po zrealizowanym zakupie
        if actor.user_type != "admin" and not self.orders.has_completed_purchase(actor.id, artwork.id):
            raise PermissionError("Can only review purchased artworks")

        if self.repo.find(actor.id, artwork.id):
            raise ValueError("Review already exists for this artwork")

        review = self.repo.save(
            ReviewModel(
                user_id=actor.id,
                artist_id=artwork.artist_id,
                artwork_id=artwork.id,
                rating=payload.rating,
                comment=payload.comment,
            )
        )
        self._refresh_artist_rating(review.artist_id)

        logger.info(f"Review {review.id} ({review.rating}/5) for artwork {artwork.id} by {actor.id}")
        return review_dict(review)

    def update_review(self, actor: UserModel, review_id: int, payload: ReviewUpdate) -> Dict[str, Any]:
        review = self._owned(actor, review_id)

        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(review, field, value)

        review = self.repo.save(review)
        self._refresh_artist_rating(review.artist_id)
        return review_dict(review)

    def delete_review(self, actor: UserModel, review_id: int):
        review = self._owned(actor, review_id)
        artist_id = review.artist_id
        self.repo.delete(review)
        self._refresh_artist_rating(artist_id)

    def _owned(self, actor: UserModel, review_id: int) -> ReviewModel:
        review = self.repo.get_review(review_id)
        if not review:
            raise LookupError("Review not found")
        if review.user_id != actor.id and actor.user_type != "admin":
            raise PermissionError("Not authorized")
        return review

    def _refresh_artist_rating(self, artist_id: int):
        profile = self.users.get_artist_profile_by_user(artist_id)
        if profile:
            profile.avg_rating = round(self.repo.average_for_artist(artist_id), 2)
            self.users.save_artist_profile(profile)
