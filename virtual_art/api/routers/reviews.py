# virtual_art/api/routers/reviews.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from virtual_art.api.deps import get_current_user
from virtual_art.api.errors import translate_errors
from virtual_art.data.database import get_db
from virtual_art.data.models.user import UserModel
from virtual_art.domain.schemas import ReviewIn, ReviewUpdate, ReviewOut
from virtual_art.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("/", response_model=List[ReviewOut])
def list_reviews(user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    return ReviewService(db).list_reviews(user)


@router.get("/artwork/{artwork_id}", response_model=List[ReviewOut])
def reviews_for_artwork(artwork_id: int, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    return ReviewService(db).list_for_artwork(artwork_id)


@router.get("/{review_id}", response_model=ReviewOut)
def get_review(review_id: int, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    with translate_errors():
        return ReviewService(db).get_review(review_id)


@router.post("/", response_model=ReviewOut, status_code=201)
def create_review(payload: ReviewIn, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    with translate_errors():
        return ReviewService(db).create_review(user, payload)


@router.put("/{review_id}", response_model=ReviewOut)
def update_review(
    review_id: int,
    payload: ReviewUpdate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    with translate_errors():
        return ReviewService(db).update_review(user, review_id, payload)


@router.delete("/{review_id}")
def delete_review(review_id: int, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    with translate_errors():
        ReviewService(db).delete_review(user, review_id)
    return {"message": "Review deleted successfully"}
