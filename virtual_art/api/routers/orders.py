# virtual_art/api/routers/orders.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from virtual_art.api.deps import get_current_user
from virtual_art.api.errors import translate_errors
from virtual_art.data.database import get_db
from virtual_art.data.models.user import UserModel
from virtual_art.domain.schemas import OrderCreate, OrderStatusIn, OrderOut
from virtual_art.services.order_service import OrderService
from virtual_art.services.lock_service import LockService, get_lock_service
from virtual_art.services.notification_service import NotificationService, get_notification_service

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
    notification_service: NotificationService = Depends(get_notification_service),
) -> OrderService:
    return OrderService(
        db=db,
        lock_service=lock_service,
        notification_service=notification_service,
    )


@router.get("/")
def list_orders(user: UserModel = Depends(get_current_user), svc: OrderService = Depends(get_service)):
    """
    Zamowienia zalezne od roli: admin wszystkie, artysta ze swoimi dzielami, kupujacy swoje.
    """
    return {"success": True, "orders": [OrderOut(**o).model_dump(by_alias=True) for o in svc.list_orders(user)]}


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: int, user: UserModel = Depends(get_current_user), svc: OrderService = Depends(get_service)):
    with translate_errors():
        return svc.get_order(user, order_id)


@router.post("/")
def create_order(
    payload: OrderCreate,
    user: UserModel = Depends(get_current_user),
    svc: OrderService = Depends(get_service),
):
    """
    Tworzy zamowienie z koszyka storefrontu.
    COD zwraca zamowienie, platnosc online dodatkowo url przekierowania.
    Wysyla powiadomienie asynchronicznie.
    """
    with translate_errors():
        result = svc.create_order(user, payload)
    result["order"] = OrderOut(**result["order"]).model_dump(by_alias=True)
    return result


@router.put("/{order_id}", response_model=OrderOut)
def update_order_status(
    order_id: int,
    payload: OrderStatusIn,
    user: UserModel = Depends(get_current_user),
    svc: OrderService = Depends(get_service),
):
    with translate_errors():
        return svc.update_status(user, order_id, payload.status)


@router.delete("/{order_id}")
def delete_order(order_id: int, user: UserModel = Depends(get_current_user), svc: OrderService = Depends(get_service)):
    with translate_errors():
        svc.delete_order(user, order_id)
    return {"message": "Order deleted successfully"}
