# virtual_art/client/cart.py
import json
import threading
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping

from virtual_art.client.events import EventBus, EventName, CartUpdated
from virtual_art.client.storage import DurableStorage, CART_KEY
from virtual_art.domain.pricing import SHIPPING_FEE, subtotal, tax_for, to_decimal
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)

MIN_QUANTITY = 1
MAX_QUANTITY = 99
SELECTOR_MIN_OPTIONS = 10

EMPTY_CART_LABEL = "Your cart is empty"
BROWSE_ARTWORKS_PATH = "/user/dashboard"


@dataclass(frozen=True)
class CartLine:
    artwork: Dict[str, Any]
    quantity: int
    subtotal: Decimal

    @property
    def artwork_id(self) -> str:
        return str(self.artwork["id"])


@dataclass(frozen=True)
class CartTotals:
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal


@dataclass(frozen=True)
class CartView:
    lines: List[CartLine] = field(default_factory=list)
    totals: CartTotals = None
    count: int = 0

    @property
    def is_empty(self) -> bool:
        # pusty widok -> ekran "Browse Artworks" zamiast pustej siatki
        return not self.lines


def _valid_quantity(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    qty = int(value)
    return qty if MIN_QUANTITY <= qty <= MAX_QUANTITY else None


def sanitize(raw: Mapping[str, Any]) -> Dict[str, int]:
    cleaned = {}
    for key, value in raw.items():
        qty = _valid_quantity(value)
        if qty is not None:
            cleaned[str(key)] = qty
    return cleaned


def compute_totals(lines: Iterable[CartLine]) -> CartTotals:
    amount = subtotal((line.artwork["price"], line.quantity) for line in lines)
    tax = tax_for(amount)
    return CartTotals(subtotal=amount, tax=tax, shipping=SHIPPING_FEE, total=amount + tax + SHIPPING_FEE)


def quantity_options(current: int) -> List[int]:
    # lista rozwijana: 1..10, rosnie gdy ilosc w koszyku jest wieksza
    return list(range(1, max(SELECTOR_MIN_OPTIONS, current) + 1))


class CartReconciler:
    """
    Koszyk klienta: mapa id dziela -> ilosc w trwalym magazynie (klucz cartItems),
    laczona z katalogiem z serwera w liste z aktualnymi cenami.

    Kazda mutacja najpierw zapisuje magazyn, potem publikuje CartUpdated.
    """

    def __init__(self, storage: DurableStorage, bus: EventBus):
        self.storage = storage
        self.bus = bus
        self.items: Dict[str, int] = {}
        self._lock = threading.Lock()

    # =====================================================
    # LOAD / QUERY
    # =====================================================
    def load(self) -> Dict[str, int]:
        raw = self.storage.get_item(CART_KEY)
        if raw is None:
            self.items = {}
            return {}

        try:
            parsed = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.error(f"Corrupted cart in storage, clearing it: {e}")
            self.storage.remove_item(CART_KEY)
            self.items = {}
            return {}

        if not isinstance(parsed, dict):
            logger.error(f"Cart in storage is not an object ({type(parsed).__name__}), clearing it")
            self.storage.remove_item(CART_KEY)
            self.items = {}
            return {}

        cleaned = sanitize(parsed)
        dropped = set(parsed) - set(cleaned)
        if dropped:
            logger.warning(f"Dropped invalid cart entries: {sorted(dropped)}")

        with self._lock:
            self.items = cleaned
            if cleaned:
                self._persist()
            else:
                # zaden wpis nie przetrwal -> kasujemy caly klucz
                self.storage.remove_item(CART_KEY)

        return dict(cleaned)

    def count(self) -> int:
        return sum(self.items.values())

    def reconcile(self, catalog: Iterable[Mapping[str, Any]]) -> List[CartLine]:
        """
        Pozycje bez dziela w katalogu (usuniete / niepublikowane) sa pomijane,
        ale zostaja w magazynie do nastepnej jawnej zmiany koszyka.
        """
        by_id = {str(a["id"]): a for a in catalog}
        lines = []
        for artwork_id, qty in self.items.items():
            artwork = by_id.get(artwork_id)
            if artwork is None:
                continue
            price = to_decimal(artwork["price"])
            lines.append(CartLine(artwork=dict(artwork), quantity=qty, subtotal=price * qty))
        return lines

    def view(self, catalog: Iterable[Mapping[str, Any]]) -> CartView:
        lines = self.reconcile(catalog)
        return CartView(lines=lines, totals=compute_totals(lines), count=self.count())

    # =====================================================
    # COMMANDS
    # =====================================================
    def set_quantity(self, artwork_id, quantity: int):
        qty = _valid_quantity(quantity)
        if qty is None:
            raise ValueError(f"Quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}")

        with self._lock:
            self.items[str(artwork_id)] = qty
            self._persist()
        self._announce("quantity")

    def add(self, artwork_id, quantity: int = 1):
        current = self.items.get(str(artwork_id), 0)
        self.set_quantity(artwork_id, min(MAX_QUANTITY, current + quantity))

    def remove(self, artwork_id):
        with self._lock:
            self.items.pop(str(artwork_id), None)
            self._persist()
        self._announce("remove")

    def clear(self):
        with self._lock:
            self.items = {}
            self.storage.remove_item(CART_KEY)
        self._announce("clear")

    def _persist(self):
        self.storage.set_item(CART_KEY, json.dumps(self.items))

    def _announce(self, detail: str):
        self.bus.publish(CartUpdated(count=self.count(), detail=detail))


class CartBadge:
    """Licznik w naglowku, odswiezany tylko zdarzeniami z szyny."""

    def __init__(self, cart: CartReconciler, bus: EventBus):
        self.cart = cart
        cart.load()
        self.count = cart.count()
        self._unsubscribe = [
            bus.subscribe(EventName.CART_UPDATED, self._on_cart_updated),
            bus.subscribe(EventName.STORAGE, self._on_storage),
        ]

    def _on_cart_updated(self, event: CartUpdated):
        self.count = event.count

    def _on_storage(self, event):
        # np. wylogowanie skasowalo koszyk
        self.cart.load()
        self.count = self.cart.count()

    def close(self):
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []
