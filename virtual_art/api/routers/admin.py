# virtual_art/api/routers/admin.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from virtual_art.api.deps import require_admin
from virtual_art.data.database import get_db
from virtual_art.domain.schemas import UserRead, ArtworkOut, OrderOut, ReviewOut
from virtual_art.services.user_service import UserService
from virtual_art.services.artwork_service import ArtworkService
from virtual_art.services.order_service import OrderService
from virtual_art.services.review_service import ReviewService
from virtual_art.api.routers.orders import get_service as get_order_service

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/users", response_model=List[UserRead])
def all_users(db: Session = Depends(get_db)):
    return UserService(db).list_users()


@router.get("/artworks", response_model=List[ArtworkOut])
def all_artworks(db: Session = Depends(get_db)):
    return ArtworkService(db).list_all()


@router.get("/orders", response_model=List[OrderOut])
def all_orders(svc: OrderService = Depends(get_order_service)):
    return svc.list_all()


@router.get("/reviews", response_model=List[ReviewOut])
def all_reviews(db: Session = Depends(get_db)):
    return ReviewService(db).list_all()
