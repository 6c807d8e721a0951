# virtual_art/client/checkout.py
import enum
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from virtual_art.client.api_client import ApiClient
from virtual_art.client.cancellation import CancelToken
from virtual_art.client.cart import CartReconciler, CartView
from virtual_art.client.errors import ApiError, RequestCancelled, ValidationFailed
from virtual_art.client.events import EventBus, EventName, AddressAdded
from virtual_art.client.navigation import Navigator, Notifier
from virtual_art.client.session import SessionStore
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)

ORDERS_PATH = "/my-orders"
ONLINE_PAYMENT_METHOD = "stripe"


class PaymentMode(str, enum.Enum):
    COD = "COD"
    ONLINE = "Online"


@dataclass(frozen=True)
class PlacementResult:
    ok: bool
    message: str
    order: Optional[Dict[str, Any]] = None
    redirect_url: Optional[str] = None


class Checkout:
    """
    Koszyk + wybrany adres + metoda platnosci -> dokladnie jedno zamowienie.
    """

    def __init__(
        self,
        api: ApiClient,
        cart: CartReconciler,
        session: SessionStore,
        bus: EventBus,
        navigator: Navigator,
        notifier: Notifier,
    ):
        self.api = api
        self.cart = cart
        self.session = session
        self.bus = bus
        self.navigator = navigator
        self.notifier = notifier

        self.addresses: List[Dict[str, Any]] = []
        self.selected_address: Optional[Dict[str, Any]] = None
        self.view = CartView()
        self.payment_mode = PaymentMode.COD

        self._token = CancelToken()
        self._unsubscribe = bus.subscribe(EventName.ADDRESS_ADDED, self._on_address_added)

    def close(self):
        self._token.cancel()
        self._unsubscribe()

    # =====================================================
    # LOADING
    # =====================================================
    def load_cart(self) -> CartView:
        token = self._token
        self.cart.load()
        try:
            catalog = self.api.get_artworks(cancel=token)
        except RequestCancelled:
            return self.view
        except ApiError as e:
            if token.cancelled:
                return self.view
            logger.error(f"Error fetching artworks for cart: {e}")
            self.notifier.error(e.message)
            catalog = []
        if token.cancelled:
            return self.view
        self.view = self.cart.view(catalog)
        return self.view

    def load_addresses(self) -> List[Dict[str, Any]]:
        token = self._token
        try:
            data = self.api.get_addresses(cancel=token)
        except RequestCancelled:
            return self.addresses
        except ApiError as e:
            if not token.cancelled:
                logger.error(f"Error fetching addresses: {e}")
            return self.addresses

        if token.cancelled:
            return self.addresses
        if not data.get("success"):
            self.notifier.error(data.get("message") or "Could not load addresses")
            return self.addresses

        self.addresses = data.get("addresses") or []
        self.selected_address = self.addresses[0] if self.addresses else None
        return self.addresses

    def select_address(self, address: Dict[str, Any]):
        self.selected_address = address

    def _on_address_added(self, event: AddressAdded):
        self.load_addresses()

    # =====================================================
    # PLACE ORDER
    # =====================================================
    def _build_request(self, mode: PaymentMode) -> Dict[str, Any]:
        if not self.selected_address:
            raise ValidationFailed("Please select an address")
        if self.view.is_empty:
            raise ValidationFailed("Your cart is empty")

        body = {
            "userId": self.session.user_id,
            "items": [{"product": line.artwork["id"], "quantity": line.quantity} for line in self.view.lines],
            "address": self.selected_address["id"],
        }
        if mode is PaymentMode.ONLINE:
            body["paymentMethod"] = ONLINE_PAYMENT_METHOD
        return body

    def place_order(self, mode: Optional[PaymentMode] = None) -> PlacementResult:
        mode = mode or self.payment_mode

        try:
            body = self._build_request(mode)
        except ValidationFailed as e:
            self.notifier.error(str(e))
            return PlacementResult(ok=False, message=str(e))

        try:
            data = self.api.create_order(body)
        except ApiError as e:
            logger.error(f"Order placement failed: {e}")
            self.notifier.error(e.message)
            return PlacementResult(ok=False, message=e.message)

        message = data.get("message") or ""
        if not data.get("success"):
            self.notifier.error(message)
            return PlacementResult(ok=False, message=message)

        if mode is PaymentMode.ONLINE:
            # koszyk czyszczony dopiero po potwierdzeniu platnosci
            url = data.get("url")
            if not url:
                self.notifier.error("Missing payment redirect")
                return PlacementResult(ok=False, message="Missing payment redirect", order=data.get("order"))
            self.navigator.redirect(url)
            return PlacementResult(ok=True, message=message, order=data.get("order"), redirect_url=url)

        self.notifier.success(message)
        self.cart.clear()
        self.view = self.cart.view([])
        self.navigator.navigate(ORDERS_PATH)
        return PlacementResult(ok=True, message=message, order=data.get("order"))
