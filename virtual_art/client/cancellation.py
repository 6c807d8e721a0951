# virtual_art/client/cancellation.py
import threading

from virtual_art.client.errors import RequestCancelled


class CancelToken:
    """
    Odpowiednik AbortSignal: jeden token na czas zycia widoku.
    Sprawdzany przed kazda zmiana stanu w lancuchu wywolan.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self):
        if self._event.is_set():
            raise RequestCancelled()
