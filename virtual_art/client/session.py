# virtual_art/client/session.py
import enum
import threading
from typing import Any, Callable, Dict, List, Optional

from virtual_art.client.api_client import ApiClient
from virtual_art.client.errors import ApiError
from virtual_art.client.events import EventBus, StorageChanged
from virtual_art.client.storage import DurableStorage, TOKEN_KEY, CART_KEY
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)


class Role(str, enum.Enum):
    USER = "user"
    ARTIST = "artist"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Role"]:
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"Unknown user_type {value!r}")
            return None


class SessionStore:
    """
    Stan sesji: token, profil uzytkownika i (dla artystow) profil artysty.

    Cykl zycia: init() przy starcie (token z trwalego magazynu),
    refresh() na zadanie, logout() czysci token, koszyk i stan w pamieci.
    Sluchacze z on_change sa wolani po zakonczeniu kazdego z tych krokow.
    """

    def __init__(self, api: ApiClient, storage: DurableStorage, bus: EventBus):
        self.api = api
        self.storage = storage
        self.bus = bus

        self.user: Optional[Dict[str, Any]] = None
        self.profile: Optional[Dict[str, Any]] = None
        self.artist_profile: Optional[Dict[str, Any]] = None
        self.loading = True

        self._listeners: List[Callable[["SessionStore"], None]] = []
        self._lock = threading.RLock()

    # =====================================================
    # QUERY
    # =====================================================
    @property
    def role(self) -> Optional[Role]:
        return Role.parse(self.profile.get("user_type")) if self.profile else None

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @property
    def user_id(self):
        return self.profile.get("id") if self.profile else None

    def on_change(self, listener: Callable[["SessionStore"], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def remove():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def _notify(self):
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Session listener failed")

    # =====================================================
    # COMMANDS
    # =====================================================
    def init(self):
        token = self.storage.get_item(TOKEN_KEY)
        if not token:
            with self._lock:
                self.loading = False
            self._notify()
            return

        self.api.set_token(token)
        try:
            current = self.api.get_current_user()
            with self._lock:
                self.user = current
            self._load_profile(current)
        except ApiError as e:
            logger.error(f"Error initializing auth: {e}")
            # niewazny token
            self.storage.remove_item(TOKEN_KEY)
            self.api.clear_token()
        finally:
            with self._lock:
                self.loading = False
            self._notify()

    def login(self, credentials: Dict[str, Any]) -> Dict[str, Any]:
        response = self.api.login(credentials)
        self._start(response)
        return response

    def register(self, data: Dict[str, Any]) -> Dict[str, Any]:
        response = self.api.register(data)
        self._start(response)
        return response

    def _start(self, response: Dict[str, Any]):
        self.storage.set_item(TOKEN_KEY, response["token"])
        with self._lock:
            self.user = response["user"]
        try:
            self._load_profile(self.api.get_current_user())
        except ApiError as e:
            logger.error(f"Error loading profile after sign-in: {e}")
            self.storage.remove_item(TOKEN_KEY)
            self.api.clear_token()
            with self._lock:
                self.user = None
            raise
        finally:
            with self._lock:
                self.loading = False
            self._notify()

    def refresh(self):
        if self.user is None:
            return
        try:
            self._load_profile(self.api.get_current_user())
        except ApiError as e:
            # poprzedni profil zostaje
            logger.error(f"Error refreshing profile: {e}")
        self._notify()

    def _load_profile(self, profile: Dict[str, Any]):
        artist_profile = None
        if Role.parse(profile.get("user_type")) is Role.ARTIST:
            try:
                artist_profile = self.api.get_artist_profile(profile["id"])
            except ApiError:
                # artysta moze jeszcze nie miec profilu
                artist_profile = None

        with self._lock:
            self.profile = profile
            self.artist_profile = artist_profile

    def logout(self):
        try:
            self.api.logout()
        finally:
            with self._lock:
                self.user = None
                self.profile = None
                self.artist_profile = None
                self.loading = False
            self.storage.remove_item(TOKEN_KEY)
            self.storage.remove_item(CART_KEY)
            self.bus.publish(StorageChanged(key=CART_KEY, detail="logout"))
            self._notify()
