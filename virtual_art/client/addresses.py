# virtual_art/client/addresses.py
from typing import Any, Dict, Optional

from virtual_art.client.api_client import ApiClient
from virtual_art.client.errors import ApiError, ValidationFailed
from virtual_art.client.events import EventBus, AddressAdded
from virtual_art.client.navigation import Navigator, Notifier
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("firstName", "lastName", "email", "street", "city", "state", "zipCode", "country", "phone")
CART_PATH = "/cart"


class AddressBook:
    def __init__(self, api: ApiClient, bus: EventBus, navigator: Navigator, notifier: Notifier):
        self.api = api
        self.bus = bus
        self.navigator = navigator
        self.notifier = notifier

    @staticmethod
    def validate(address: Dict[str, Any]):
        missing = [f for f in REQUIRED_FIELDS if not str(address.get(f) or "").strip()]
        if missing:
            raise ValidationFailed(f"Missing fields: {', '.join(missing)}")

    def add(self, address: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            self.validate(address)
        except ValidationFailed as e:
            self.notifier.error(str(e))
            return None

        try:
            data = self.api.create_address(address)
        except ApiError as e:
            logger.error(f"Error adding address: {e}")
            self.notifier.error(e.message)
            return None

        if not data.get("success"):
            self.notifier.error(data.get("message") or "Could not add address")
            return None

        created = data.get("address") or {}
        self.notifier.success(data.get("message") or "Address added")
        # koszyk odswieza liste adresow
        self.bus.publish(AddressAdded(address_id=created.get("id")))
        self.navigator.navigate(CART_PATH, detail="cart")
        return created
