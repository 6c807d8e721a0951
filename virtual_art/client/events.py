# virtual_art/client/events.py
import enum
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type, Union

from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)


class EventName(str, enum.Enum):
    STORAGE = "storage"
    CART_UPDATED = "cartUpdated"
    ADDRESS_ADDED = "addressAdded"
    ARTWORK_UPLOADED = "artworkUploaded"
    WISHLIST_UPDATED = "wishlistUpdated"
    NAVIGATE = "navigate"


@dataclass(frozen=True)
class StorageChanged:
    key: Optional[str] = None
    detail: Optional[str] = None


@dataclass(frozen=True)
class CartUpdated:
    count: int
    detail: Optional[str] = None


@dataclass(frozen=True)
class AddressAdded:
    address_id: Optional[int] = None
    detail: Optional[str] = None


@dataclass(frozen=True)
class ArtworkUploaded:
    artwork_id: Optional[int] = None
    detail: Optional[str] = None


@dataclass(frozen=True)
class WishlistUpdated:
    artwork_id: str
    in_wishlist: bool
    detail: Optional[str] = None


@dataclass(frozen=True)
class Navigate:
    path: str
    detail: Optional[str] = None


Event = Union[StorageChanged, CartUpdated, AddressAdded, ArtworkUploaded, WishlistUpdated, Navigate]

# jeden typ payloadu na nazwe zdarzenia
PAYLOAD_TYPES: Dict[EventName, Type] = {
    EventName.STORAGE: StorageChanged,
    EventName.CART_UPDATED: CartUpdated,
    EventName.ADDRESS_ADDED: AddressAdded,
    EventName.ARTWORK_UPLOADED: ArtworkUploaded,
    EventName.WISHLIST_UPDATED: WishlistUpdated,
    EventName.NAVIGATE: Navigate,
}
EVENT_NAMES: Dict[Type, EventName] = {payload: name for name, payload in PAYLOAD_TYPES.items()}

Handler = Callable[[Event], None]


class EventBus:
    """
    Jawna szyna zdarzen miedzy komponentami storefrontu.
    Nazwa zdarzenia wynika z typu payloadu, wiec literowka w nazwie nie jest mozliwa.
    """

    def __init__(self):
        self._handlers: Dict[EventName, List[Handler]] = {name: [] for name in EventName}
        self._lock = threading.Lock()

    def subscribe(self, name: EventName, handler: Handler) -> Callable[[], None]:
        with self._lock:
            self._handlers[name].append(handler)

        def unsubscribe():
            with self._lock:
                if handler in self._handlers[name]:
                    self._handlers[name].remove(handler)

        return unsubscribe

    def publish(self, event: Event):
        name = EVENT_NAMES.get(type(event))
        if name is None:
            raise TypeError(f"Unknown event payload {type(event).__name__}")

        with self._lock:
            handlers = list(self._handlers[name])

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                # jeden zepsuty subskrybent nie blokuje pozostalych
                logger.exception(f"Handler for {name.value} failed")

    def subscriber_count(self, name: EventName) -> int:
        with self._lock:
            return len(self._handlers[name])
