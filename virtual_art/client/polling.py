# virtual_art/client/polling.py
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional

from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)


class Poller:
    """
    Staly interwal jak setInterval: kolejny tick startuje o czasie,
    nawet gdy poprzednie zapytanie jeszcze trwa (bez deduplikacji).
    """

    def __init__(self, tick: Callable[[], None], interval: float, name: str = "poller", max_workers: int = 4):
        self.tick = tick
        self.interval = interval
        self.name = name
        self.max_workers = max_workers

        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._executor: Optional[ThreadPoolExecutor] = None
        self.in_flight: List[Future] = []

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.running:
            return
        self._stop.clear()
        self._executor = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix=self.name)
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        logger.info(f"{self.name}: polling every {self.interval}s")

    def stop(self):
        if self._thread is None:
            return
        self._stop.set()
        if self._thread is not threading.current_thread():
            self._thread.join(timeout=self.interval + 1)
        self._thread = None
        if self._executor:
            # trwajace zapytania nie sa przerywane, nowe nie startuja
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None
        logger.info(f"{self.name}: polling stopped")

    def _run(self):
        while not self._stop.wait(self.interval):
            executor = self._executor
            if executor is None:
                break
            try:
                future = executor.submit(self._safe_tick)
            except RuntimeError:
                # executor zamkniety w trakcie stop()
                break
            self.in_flight = [f for f in self.in_flight if not f.done()] + [future]

    def _safe_tick(self):
        try:
            self.tick()
        except Exception:
            logger.exception(f"{self.name}: tick failed")
