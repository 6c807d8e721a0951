# virtual_art/client/navigation.py
import threading
from dataclasses import dataclass
from typing import List, Optional

from virtual_art.client.events import EventBus, Navigate
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)


class Navigator:
    """
    Biezaca sciezka widoku. navigate() to zmiana trasy wewnatrz aplikacji,
    redirect() to pelne przejscie na zewnetrzny adres (np. platnosc).
    """

    def __init__(self, bus: EventBus, path: str = "/"):
        self.bus = bus
        self.path = path
        self.history: List[str] = [path]
        self.external_redirects: List[str] = []

    def navigate(self, path: str, detail: Optional[str] = None):
        logger.info(f"Navigate: {self.path} -> {path}")
        self.path = path
        self.history.append(path)
        self.bus.publish(Navigate(path=path, detail=detail))

    def redirect(self, url: str):
        logger.info(f"External redirect: {url}")
        self.external_redirects.append(url)


@dataclass(frozen=True)
class Toast:
    level: str
    message: str


class Notifier:
    """Powiadomienia dla uzytkownika (toasty), zapisywane w kolejnosci."""

    def __init__(self):
        self.toasts: List[Toast] = []
        self._lock = threading.Lock()

    def success(self, message: str):
        logger.info(f"Toast success: {message}")
        self._push(Toast("success", message))

    def error(self, message: str):
        logger.error(f"Toast error: {message}")
        self._push(Toast("error", message))

    def _push(self, toast: Toast):
        with self._lock:
            self.toasts.append(toast)

    @property
    def last(self) -> Optional[Toast]:
        with self._lock:
            return self.toasts[-1] if self.toasts else None
