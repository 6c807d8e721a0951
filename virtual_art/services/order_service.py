# virtual_art/services/order_service.py
import uuid
from decimal import Decimal
from typing import Dict, Any, List

from sqlalchemy.orm import Session

from virtual_art.data.models.user import UserModel
from virtual_art.data.models.order import OrderModel
from virtual_art.data.models.order_item import OrderItemModel
from virtual_art.domain.pricing import subtotal, grand_total
from virtual_art.domain.schemas import OrderCreate
from virtual_art.domain.serializers import order_dict
from virtual_art.repos.order_repo import OrderRepo
from virtual_art.repos.artwork_repo import ArtworkRepo
from virtual_art.repos.address_repo import AddressRepo
from virtual_art.repos.user_repo import UserRepo
from virtual_art.services.lock_service import LockService
from virtual_art.services.notification_service import NotificationService
from virtual_art.utils.settings import PAYMENT_REDIRECT_URL
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)

ONLINE_PAYMENT_METHOD = "stripe"


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Jedno zlozenie koszyka = dokladnie jedno zamowienie (lock per uzytkownik).
    """

    def __init__(
        self,
        db: Session,
        lock_service: LockService,
        notification_service: NotificationService,
    ):
        self.repo = OrderRepo(db)
        self.artworks = ArtworkRepo(db)
        self.addresses = AddressRepo(db)
        self.users = UserRepo(db)
        self.lock_service = lock_service
        self.notification_service = notification_service

    # =====================================================
    # COMMANDS
    # =====================================================
    def create_order(self, actor: UserModel, payload: OrderCreate) -> Dict[str, Any]:
        """
        Use Case: Zlozenie zamowienia ze storefrontu.

        1. Walidacja (uprawnienia, pozycje, adres, metoda platnosci)
        2. Lock checkoutu dla uzytkownika
        3. Sprawdzenie dostepnosci dziel + kwota z podatkiem 2%
        4. Zapis zamowienia i powiadomienie (async)
        """
        if actor.id != payload.user_id and actor.user_type != "admin":
            raise PermissionError("Not authorized")

        if not payload.items:
            raise ValueError("Invalid items")

        for item in payload.items:
            if item.quantity < 1:
                raise ValueError("Invalid quantity in items")

        if payload.payment_method and payload.payment_method != ONLINE_PAYMENT_METHOD:
            raise ValueError("Invalid paymentMethod")

        address = self.addresses.get_owned(payload.address, payload.user_id)
        if not address:
            raise ValueError("Invalid address")

        token = uuid.uuid4().hex
        if not self.lock_service.acquire_checkout_lock(payload.user_id, token):
            raise RuntimeError("An order is already being placed")

        try:
            lines = []
            for item in payload.items:
                artwork = self.artworks.get_artwork(item.product)
                if not artwork or artwork.status != "published":
                    raise ValueError(f"Artwork {item.product} not available")

                if artwork.artist_id == payload.user_id:
                    raise ValueError("Cannot order your own artwork")

                lines.append((artwork, item.quantity))

            amount = grand_total(subtotal((a.price, qty) for a, qty in lines))
            payment_type = "Online" if payload.payment_method else "COD"

            order = OrderModel(
                user_id=payload.user_id,
                address_id=address.id,
                amount=amount,
                status="pending",
                payment_type=payment_type,
                items=[OrderItemModel(product_id=a.id, quantity=qty) for a, qty in lines],
            )
            created = self.repo.create_order(order)
        finally:
            self.lock_service.release_checkout_lock(payload.user_id, token)

        logger.info(f"Order {created.id} created for user {created.user_id}, amount {amount} ({payment_type})")

        # Wyslij powiadomienie asynchronicznie
        self.notification_service.send_order_notification(created.user_id, created.id, payment_type)

        if payment_type == "Online":
            return {
                "success": True,
                "message": "Order created, proceed to payment",
                "url": PAYMENT_REDIRECT_URL,
                "order": order_dict(created),
            }

        return {"success": True, "message": "Order placed successfully", "order": order_dict(created)}

    def update_status(self, actor: UserModel, order_id: int, status: str) -> Dict[str, Any]:
        order = self.repo.get_order(order_id)
        if not order:
            raise LookupError("Order not found")

        if actor.user_type != "admin":
            # artysta moze zmieniac tylko zamowienia ze swoimi dzielami
            if actor.user_type != "artist" or not any(i.product.artist_id == actor.id for i in order.items):
                raise PermissionError("Not authorized")

        old_status = order.status
        order.status = status

        if status == "completed" and old_status != "completed":
            self._apply_sales(order, sign=1)
        elif status == "cancelled" and old_status == "completed":
            self._apply_sales(order, sign=-1)

        self.repo.commit()

        logger.info(f"Order {order.id} status {old_status} -> {status} by {actor.id}")

        if old_status != status:
            self.notification_service.send_status_notification(order.user_id, order.id, status)

        return order_dict(order)

    def delete_order(self, actor: UserModel, order_id: int):
        if actor.user_type != "admin":
            raise PermissionError("Admin access required")

        order = self.repo.get_order(order_id)
        if not order:
            raise LookupError("Order not found")

        self.repo.delete(order)
        logger.info(f"Order {order_id} deleted by admin {actor.id}")

    # =====================================================
    # QUERY
    # =====================================================
    def list_orders(self, actor: UserModel) -> List[Dict[str, Any]]:
        if actor.user_type == "admin":
            orders = self.repo.list_orders()
        elif actor.user_type == "artist":
            orders = self.repo.list_for_artist(actor.id)
        else:
            orders = self.repo.list_for_user(actor.id)
        return [order_dict(o) for o in orders]

    def list_all(self) -> List[Dict[str, Any]]:
        return [order_dict(o) for o in self.repo.list_orders()]

    def get_order(self, actor: UserModel, order_id: int) -> Dict[str, Any]:
        order = self.repo.get_order(order_id)
        if not order:
            raise LookupError("Order not found")

        involved_artist = any(i.product.artist_id == actor.id for i in order.items)
        if actor.user_type != "admin" and order.user_id != actor.id and not involved_artist:
            raise PermissionError("Not authorized")

        return order_dict(order)

    def _apply_sales(self, order: OrderModel, sign: int):
        """
        completed: sprzedaz doliczana artystom, dziela oznaczone jako sold.
        completed -> cancelled: odwrotnie.
        """
        for item in order.items:
            artwork = item.product
            profile = self.users.get_artist_profile_by_user(artwork.artist_id)
            if profile:
                delta = Decimal(artwork.price) * item.quantity * sign
                profile.total_sales = Decimal(profile.total_sales or 0) + delta

            if sign > 0:
                artwork.status = "sold"
            elif artwork.status == "sold":
                artwork.status = "published"
