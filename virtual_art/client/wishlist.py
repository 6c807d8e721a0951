# virtual_art/client/wishlist.py
from typing import Any, Dict, List, Optional, Set

from virtual_art.client.api_client import ApiClient
from virtual_art.client.cancellation import CancelToken
from virtual_art.client.errors import ApiError, RequestCancelled
from virtual_art.client.events import EventBus, WishlistUpdated
from virtual_art.client.navigation import Notifier
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)


class WishlistStore:
    def __init__(self, api: ApiClient, bus: EventBus, notifier: Notifier):
        self.api = api
        self.bus = bus
        self.notifier = notifier
        self.items: List[Dict[str, Any]] = []

    @property
    def artwork_ids(self) -> Set[str]:
        return {str(item["artwork_id"]) for item in self.items}

    def load(self, cancel: Optional[CancelToken] = None) -> List[Dict[str, Any]]:
        try:
            items = self.api.get_wishlist(cancel=cancel) or []
        except RequestCancelled:
            return self.items
        except ApiError as e:
            if not (cancel and cancel.cancelled):
                logger.error(f"Error fetching wishlist: {e}")
            return self.items
        if cancel and cancel.cancelled:
            return self.items
        self.items = items
        return self.items

    def contains(self, artwork_id) -> bool:
        return str(artwork_id) in self.artwork_ids

    def toggle(self, artwork_id) -> bool:
        """Dodaje albo usuwa dzielo; zwraca nowy stan (True = na liscie)."""
        in_wishlist = self.contains(artwork_id)
        try:
            if in_wishlist:
                self.api.remove_from_wishlist(artwork_id)
            else:
                self.api.add_to_wishlist(artwork_id)
        except ApiError as e:
            logger.error(f"Error updating wishlist: {e}")
            self.notifier.error(e.message)
            return in_wishlist

        self.notifier.success("Removed from wishlist" if in_wishlist else "Added to wishlist")
        self.load()
        self.bus.publish(WishlistUpdated(artwork_id=str(artwork_id), in_wishlist=not in_wishlist))
        return not in_wishlist
