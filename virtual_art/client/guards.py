# virtual_art/client/guards.py
import enum
from dataclasses import dataclass
from typing import Callable, Dict, Optional, TypeVar

from virtual_art.client.session import Role, SessionStore
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

HOME_PATH = "/"
ADMIN_LOGIN_PATH = "/admin/login"


class GuardState(str, enum.Enum):
    LOADING = "loading"
    DENIED = "denied"
    GRANTED = "granted"


@dataclass(frozen=True)
class GuardDecision:
    state: GuardState
    redirect: Optional[str] = None

    @property
    def granted(self) -> bool:
        return self.state is GuardState.GRANTED


LOADING = GuardDecision(GuardState.LOADING)
GRANTED = GuardDecision(GuardState.GRANTED)


def admin_guard(session: SessionStore) -> GuardDecision:
    if session.loading:
        return LOADING

    if not session.profile:
        logger.info("Admin guard: no profile, redirecting to admin login")
        return GuardDecision(GuardState.DENIED, ADMIN_LOGIN_PATH)

    if session.role is not Role.ADMIN:
        logger.info("Admin guard: not admin, redirecting to home")
        return GuardDecision(GuardState.DENIED, HOME_PATH)

    return GRANTED


def artist_guard(session: SessionStore) -> GuardDecision:
    """
    Bez profilu dostep jest przyznawany (brak przekierowania),
    inaczej niz w admin_guard. Zachowane celowo do czasu decyzji produktowej.
    """
    if session.loading:
        return LOADING

    if session.profile and session.role is not Role.ARTIST:
        logger.info("Artist guard: not an artist, redirecting to home")
        return GuardDecision(GuardState.DENIED, HOME_PATH)

    return GRANTED


def user_guard(session: SessionStore) -> GuardDecision:
    # koszyk, zamowienia, adresy: bez profilu nic nie jest renderowane
    if session.loading:
        return LOADING

    if not session.profile:
        return GuardDecision(GuardState.DENIED)

    return GRANTED


def render_for_role(role: Role, handlers: Dict[Role, Callable[[], T]]) -> T:
    """Wywoluje handler dla roli; brak handlera dla ktorejkolwiek roli to blad."""
    missing = [r.value for r in Role if r not in handlers]
    if missing:
        raise ValueError(f"Missing role handlers: {', '.join(missing)}")
    return handlers[role]()
