# virtual_art/client/api_client.py
import os
from typing import Any, Dict, Optional

import requests
from requests import RequestException

from virtual_art.client.cancellation import CancelToken
from virtual_art.client.errors import ApiError
from virtual_art.utils.settings import API_BASE_URL
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)


class ApiClient:
    """
    Klient REST API storefrontu.
    Bez automatycznych ponowien: kazdy blad trafia do wywolujacego.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int = 10,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.token: Optional[str] = None

    def set_token(self, token: Optional[str]):
        logger.info(f"API: Setting token: {'***' if token else 'null'}")
        self.token = token

    def clear_token(self):
        logger.info("API: Clearing token")
        self.token = None

    def _headers(self, json_body: bool = True) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"} if json_body else {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def request(
        self,
        method: str,
        endpoint: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
        cancel: Optional[CancelToken] = None,
    ) -> Any:
        url = f"{self.base_url}{endpoint}"
        if cancel:
            cancel.raise_if_cancelled()

        logger.info(f"API {method} {url}")
        try:
            resp = self.session.request(
                method,
                url,
                json=body,
                params=params,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except RequestException as e:
            raise ApiError(f"Network error: {e}") from e

        if cancel:
            cancel.raise_if_cancelled()
        return self._handle(resp)

    @staticmethod
    def _handle(resp) -> Any:
        if resp.status_code >= 400:
            try:
                payload = resp.json()
            except ValueError:
                payload = {}
            message = None
            if isinstance(payload, dict):
                message = payload.get("message") or payload.get("detail")
            raise ApiError(str(message) if message else f"HTTP {resp.status_code}", resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON response (HTTP {resp.status_code})", resp.status_code) from e

    # =====================================================
    # AUTH
    # =====================================================
    def register(self, data: Dict[str, Any]) -> Dict[str, Any]:
        response = self.request("POST", "/auth/register", data)
        self.set_token(response["token"])
        return response

    def login(self, credentials: Dict[str, Any]) -> Dict[str, Any]:
        response = self.request("POST", "/auth/login", credentials)
        self.set_token(response["token"])
        return response

    def logout(self):
        try:
            self.request("POST", "/auth/logout")
        except ApiError as e:
            logger.error(f"Logout API error: {e}")
        finally:
            self.clear_token()

    def get_current_user(self) -> Dict[str, Any]:
        return self.request("GET", "/auth/me")

    # =====================================================
    # PROFILES
    # =====================================================
    def get_profiles(self):
        return self.request("GET", "/profiles/")

    def get_profile(self, user_id):
        return self.request("GET", f"/profiles/{user_id}")

    def update_profile(self, user_id, updates: Dict[str, Any]):
        return self.request("PUT", f"/profiles/{user_id}", updates)

    def get_artist_profiles(self):
        return self.request("GET", "/artist-profiles/")

    def get_artist_profile(self, user_id, cancel: Optional[CancelToken] = None):
        return self.request("GET", f"/artist-profiles/{user_id}", cancel=cancel)

    def create_artist_profile(self, data: Dict[str, Any]):
        return self.request("POST", "/artist-profiles/", data)

    def update_artist_profile(self, profile_id, updates: Dict[str, Any]):
        return self.request("PUT", f"/artist-profiles/{profile_id}", updates)

    # =====================================================
    # ARTWORKS
    # =====================================================
    def get_artworks(self, params: Optional[Dict[str, Any]] = None, cancel: Optional[CancelToken] = None):
        return self.request("GET", "/artworks/", params=params, cancel=cancel)

    def get_artwork(self, artwork_id, cancel: Optional[CancelToken] = None):
        return self.request("GET", f"/artworks/{artwork_id}", cancel=cancel)

    def get_my_artworks(self, cancel: Optional[CancelToken] = None):
        return self.request("GET", "/artworks/my-artworks", cancel=cancel)

    def create_artwork(self, data: Dict[str, Any]):
        return self.request("POST", "/artworks/", data)

    def update_artwork(self, artwork_id, updates: Dict[str, Any]):
        return self.request("PUT", f"/artworks/{artwork_id}", updates)

    def delete_artwork(self, artwork_id):
        return self.request("DELETE", f"/artworks/{artwork_id}")

    def upload_artwork(self, image_path: str, fields: Dict[str, Any], content_type: str = "image/jpeg"):
        """
        Multipart upload. Content-Type nie jest ustawiany recznie,
        requests sam dodaje boundary.
        """
        url = f"{self.base_url}/artworks/upload"
        logger.info(f"API POST {url} (multipart)")

        with open(image_path, "rb") as fh:
            files = {"image": (os.path.basename(image_path), fh, content_type)}
            try:
                resp = self.session.post(
                    url,
                    data={k: str(v) for k, v in fields.items() if v is not None},
                    files=files,
                    headers=self._headers(json_body=False),
                    timeout=self.timeout,
                )
            except RequestException as e:
                raise ApiError(f"Network error: {e}") from e

        return self._handle(resp)

    # =====================================================
    # ORDERS
    # =====================================================
    def get_orders(self, cancel: Optional[CancelToken] = None):
        return self.request("GET", "/orders/", cancel=cancel)

    def create_order(self, data: Dict[str, Any]):
        return self.request("POST", "/orders/", data)

    def update_order_status(self, order_id, status: str):
        return self.request("PUT", f"/orders/{order_id}", {"status": status})

    # =====================================================
    # REVIEWS
    # =====================================================
    def get_reviews_for_artwork(self, artwork_id, cancel: Optional[CancelToken] = None):
        return self.request("GET", f"/reviews/artwork/{artwork_id}", cancel=cancel)

    def get_reviews(self, cancel: Optional[CancelToken] = None):
        return self.request("GET", "/reviews/", cancel=cancel)

    def create_review(self, data: Dict[str, Any]):
        return self.request("POST", "/reviews/", data)

    # =====================================================
    # WISHLIST
    # =====================================================
    def get_wishlist(self, cancel: Optional[CancelToken] = None):
        return self.request("GET", "/wishlist/", cancel=cancel)

    def add_to_wishlist(self, artwork_id):
        return self.request("POST", "/wishlist/", {"artwork_id": artwork_id})

    def remove_from_wishlist(self, artwork_id):
        return self.request("DELETE", f"/wishlist/{artwork_id}")

    def check_wishlist(self, artwork_id, cancel: Optional[CancelToken] = None):
        return self.request("GET", f"/wishlist/check/{artwork_id}", cancel=cancel)

    # =====================================================
    # ADDRESS
    # =====================================================
    def create_address(self, address: Dict[str, Any]):
        return self.request("POST", "/address/add", address)

    def get_addresses(self, cancel: Optional[CancelToken] = None):
        return self.request("GET", "/address/get", cancel=cancel)

    # =====================================================
    # ADMIN
    # =====================================================
    def get_all_users_admin(self, cancel: Optional[CancelToken] = None):
        return self.request("GET", "/admin/users", cancel=cancel)

    def get_all_artworks_admin(self, cancel: Optional[CancelToken] = None):
        return self.request("GET", "/admin/artworks", cancel=cancel)

    def get_all_orders_admin(self, cancel: Optional[CancelToken] = None):
        return self.request("GET", "/admin/orders", cancel=cancel)

    def get_all_reviews_admin(self, cancel: Optional[CancelToken] = None):
        return self.request("GET", "/admin/reviews", cancel=cancel)
