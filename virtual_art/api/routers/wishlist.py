# virtual_art/api/routers/wishlist.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from virtual_art.api.deps import get_current_user
from virtual_art.api.errors import translate_errors
from virtual_art.data.database import get_db
from virtual_art.data.models.user import UserModel
from virtual_art.domain.schemas import WishlistIn, WishlistOut
from virtual_art.services.wishlist_service import WishlistService

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@router.get("/", response_model=List[WishlistOut])
def get_wishlist(user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    return WishlistService(db).list_items(user)


@router.post("/", response_model=WishlistOut, status_code=201)
def add_to_wishlist(payload: WishlistIn, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    with translate_errors():
        return WishlistService(db).add(user, payload.artwork_id)


@router.delete("/{artwork_id}")
def remove_from_wishlist(artwork_id: int, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    with translate_errors():
        WishlistService(db).remove(user, artwork_id)
    return {"message": "Removed from wishlist"}


@router.get("/check/{artwork_id}")
def check_wishlist(artwork_id: int, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"inWishlist": WishlistService(db).contains(user, artwork_id)}
