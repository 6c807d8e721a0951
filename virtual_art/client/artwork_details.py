# virtual_art/client/artwork_details.py
from typing import Any, Dict, List, Optional

from virtual_art.client.api_client import ApiClient
from virtual_art.client.cancellation import CancelToken
from virtual_art.client.cart import CartReconciler
from virtual_art.client.errors import ApiError, RequestCancelled
from virtual_art.client.navigation import Navigator, Notifier
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)

RELATED_LIMIT = 4
CART_PATH = "/cart"


class ArtworkDetails:
    """
    Widok szczegolow dziela. Token anulowania zyje tyle co widok:
    po close() spoznione odpowiedzi sa porzucane bez zmiany stanu.
    """

    def __init__(self, api: ApiClient, cart: CartReconciler, navigator: Navigator, notifier: Notifier):
        self.api = api
        self.cart = cart
        self.navigator = navigator
        self.notifier = notifier

        self.artwork: Optional[Dict[str, Any]] = None
        self.artist: Optional[Dict[str, Any]] = None
        self.related: List[Dict[str, Any]] = []
        self.reviews: List[Dict[str, Any]] = []
        self.in_wishlist = False
        self.loading = False
        self.error: Optional[str] = None

        self._token: Optional[CancelToken] = None

    def close(self):
        if self._token:
            self._token.cancel()

    def load(self, artwork_id):
        # nowy load anuluje poprzedni
        self.close()
        token = self._token = CancelToken()

        self.loading = True
        self.error = None
        try:
            artwork = self.api.get_artwork(artwork_id, cancel=token)
            token.raise_if_cancelled()
            self.artwork = artwork

            self._load_artist(artwork, token)
            self._load_related(artwork, token)
            self._load_reviews(artwork_id, token)
            self._check_wishlist(artwork_id, token)
        except RequestCancelled:
            return
        except ApiError as e:
            if token.cancelled:
                return
            logger.error(f"Error fetching artwork details: {e}")
            self.error = e.message or "Failed to load artwork details. Please try again."
        finally:
            if not token.cancelled:
                self.loading = False

    def _load_artist(self, artwork: Dict[str, Any], token: CancelToken):
        artist_id = artwork.get("artist_id")
        if not artist_id:
            return
        try:
            artist = self.api.get_artist_profile(artist_id, cancel=token)
        except ApiError as e:
            logger.error(f"Error fetching artist profile: {e}")
            return
        token.raise_if_cancelled()
        self.artist = artist

    def _load_related(self, artwork: Dict[str, Any], token: CancelToken):
        try:
            catalog = self.api.get_artworks({"status": "published"}, cancel=token)
        except ApiError as e:
            logger.error(f"Error fetching related artworks: {e}")
            return
        token.raise_if_cancelled()
        self.related = [
            a for a in catalog
            if a.get("category") == artwork.get("category") and a.get("id") != artwork.get("id")
        ][:RELATED_LIMIT]

    def _load_reviews(self, artwork_id, token: CancelToken):
        try:
            reviews = self.api.get_reviews_for_artwork(artwork_id, cancel=token)
        except ApiError as e:
            logger.error(f"Error fetching reviews: {e}")
            return
        token.raise_if_cancelled()
        self.reviews = reviews

    def _check_wishlist(self, artwork_id, token: CancelToken):
        try:
            data = self.api.check_wishlist(artwork_id, cancel=token)
        except ApiError as e:
            logger.error(f"Error checking wishlist status: {e}")
            return
        token.raise_if_cancelled()
        self.in_wishlist = bool(data.get("inWishlist"))

    def add_to_cart(self):
        if not self.artwork:
            return
        try:
            self.cart.load()
            self.cart.add(self.artwork["id"])
        except ValueError as e:
            self.notifier.error(str(e))
            return
        self.notifier.success(f'Added "{self.artwork.get("title")}" to cart!')
        self.navigator.navigate(CART_PATH)
