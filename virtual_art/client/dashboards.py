# virtual_art/client/dashboards.py
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Optional

from virtual_art.client.api_client import ApiClient
from virtual_art.client.cancellation import CancelToken
from virtual_art.client.cart import CartReconciler
from virtual_art.client.errors import ApiError, RequestCancelled
from virtual_art.client.events import EventBus, EventName
from virtual_art.client.polling import Poller
from virtual_art.client.session import Role, SessionStore
from virtual_art.domain.pricing import to_decimal
from virtual_art.utils.settings import ADMIN_POLL_SECONDS
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
ARTIST_POLL_SECONDS = 30.0
USER_POLL_SECONDS = 30.0


@dataclass(frozen=True)
class MonthBucket:
    month: str
    value: Decimal


@dataclass(frozen=True)
class DashboardStats:
    total_users: int = 0
    total_artists: int = 0
    total_artworks: int = 0
    total_orders: int = 0
    total_revenue: Decimal = Decimal("0")


@dataclass(frozen=True)
class AdminSnapshot:
    stats: DashboardStats = field(default_factory=DashboardStats)
    users: List[Dict[str, Any]] = field(default_factory=list)
    artworks: List[Dict[str, Any]] = field(default_factory=list)
    orders: List[Dict[str, Any]] = field(default_factory=list)
    reviews: List[Dict[str, Any]] = field(default_factory=list)
    user_growth: List[MonthBucket] = field(default_factory=list)
    sales_by_month: List[MonthBucket] = field(default_factory=list)
    status_distribution: Dict[str, int] = field(default_factory=dict)


# =====================================================
# METRYKI
# =====================================================
def order_total(order: Dict[str, Any]) -> Decimal:
    # total_amount, a gdy brak to amount
    return to_decimal(order.get("total_amount") or order.get("amount") or 0)


def _month_of(value) -> Optional[str]:
    if not value:
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            logger.warning(f"Unparsable date {value!r}, skipping")
            return None
    return MONTHS[dt.month - 1]


def bucket_by_month(records: Iterable[Dict[str, Any]], date_of: Callable, value_of: Callable) -> List[MonthBucket]:
    """
    Sumy po nazwie miesiaca (Jan..Dec). Rok jest pomijany, wiec dane
    z wielu lat trafiaja do tych samych 12 kubelkow.
    """
    totals: Dict[str, Decimal] = {}
    for record in records:
        month = _month_of(date_of(record))
        if month is None:
            continue
        totals[month] = totals.get(month, Decimal("0")) + to_decimal(value_of(record))
    return [MonthBucket(m, totals[m]) for m in MONTHS if m in totals]


def status_distribution(artworks: Iterable[Dict[str, Any]]) -> Dict[str, int]:
    counts = {"Published": 0, "Pending": 0, "Sold": 0, "Rejected": 0}
    for artwork in artworks:
        key = str(artwork.get("status", "")).capitalize()
        if key in counts:
            counts[key] += 1
    return counts


def build_admin_snapshot(users, artworks, orders, reviews) -> AdminSnapshot:
    stats = DashboardStats(
        total_users=len(users),
        total_artists=sum(1 for u in users if Role.parse(u.get("user_type")) is Role.ARTIST),
        total_artworks=len(artworks),
        total_orders=len(orders),
        total_revenue=sum((order_total(o) for o in orders), Decimal("0")),
    )
    return AdminSnapshot(
        stats=stats,
        users=list(users),
        artworks=list(artworks),
        orders=list(orders),
        reviews=list(reviews),
        user_growth=bucket_by_month(users, lambda u: u.get("created_at"), lambda u: 1),
        sales_by_month=bucket_by_month(orders, lambda o: o.get("order_date") or o.get("created_at"), order_total),
        status_distribution=status_distribution(artworks),
    )


# =====================================================
# CYKL ZYCIA
# =====================================================
class PollingView:
    """
    mount() -> pierwsze pobranie + polling, tylko dla uprawnionej roli.
    Zmiana sesji na inna role zatrzymuje polling; unmount() zawsze sprzata.

    Token anulowania zyje tyle co widok: unmount() albo utrata roli
    anuluje trwajace zapytania, ich wyniki nie zmieniaja juz stanu.
    """

    role: Role

    def __init__(self, session: SessionStore, interval: float, name: str):
        self.session = session
        self.poller = Poller(self.refresh, interval, name=name)
        self.mounted = False
        self._token = CancelToken()
        self._lock = threading.Lock()
        self._remove_listener: Optional[Callable[[], None]] = None

    def refresh(self):
        raise NotImplementedError

    def _allowed(self) -> bool:
        return self.session.role is self.role

    def mount(self):
        if self.mounted:
            return
        self.mounted = True
        self._token = CancelToken()
        self._remove_listener = self.session.on_change(self._on_session_change)
        self._sync()

    def unmount(self):
        self.mounted = False
        if self._remove_listener:
            self._remove_listener()
            self._remove_listener = None
        self._token.cancel()
        self.poller.stop()

    def _on_session_change(self, session: SessionStore):
        self._sync()

    def _sync(self):
        if not self.mounted or not self._allowed():
            self._token.cancel()
            self.poller.stop()
            return
        if not self.poller.running:
            if self._token.cancelled:
                self._token = CancelToken()
            self.refresh()
            self._on_started()
            self.poller.start()

    def _on_started(self):
        pass

    def _commit(self, token: CancelToken, attr: str, value) -> bool:
        # stan zmieniany tylko gdy widok nie zostal w miedzyczasie zamkniety
        with self._lock:
            if token.cancelled:
                return False
            setattr(self, attr, value)
            return True


class AdminDashboard(PollingView):
    role = Role.ADMIN

    def __init__(self, api: ApiClient, session: SessionStore, interval: float = ADMIN_POLL_SECONDS, workers: int = 4):
        super().__init__(session, interval, name="admin-dashboard")
        self.api = api
        self.workers = workers
        self.snapshot = AdminSnapshot()
        self.loading = False

    def refresh(self) -> AdminSnapshot:
        token = self._token
        if not self._commit(token, "loading", True):
            return self.snapshot
        try:
            with ThreadPoolExecutor(max_workers=self.workers) as ex:
                futures = [
                    ex.submit(self.api.get_all_users_admin, cancel=token),
                    ex.submit(self.api.get_all_artworks_admin, cancel=token),
                    ex.submit(self.api.get_all_orders_admin, cancel=token),
                    ex.submit(self.api.get_all_reviews_admin, cancel=token),
                ]
                users, artworks, orders, reviews = [f.result() for f in futures]
        except RequestCancelled:
            return self.snapshot
        except ApiError as e:
            if not token.cancelled:
                logger.error(f"Error fetching dashboard data: {e}")
            return self.snapshot
        finally:
            self._commit(token, "loading", False)

        snapshot = build_admin_snapshot(users, artworks, orders, reviews)
        if not self._commit(token, "snapshot", snapshot):
            logger.info("Dashboard closed, dropping late response")
            return self.snapshot
        logger.info(
            f"Dashboard: {snapshot.stats.total_users} users, {snapshot.stats.total_orders} orders, "
            f"revenue {snapshot.stats.total_revenue}"
        )
        return snapshot

    def approve(self, artwork_id) -> bool:
        return self._set_status(artwork_id, "published")

    def reject(self, artwork_id) -> bool:
        return self._set_status(artwork_id, "rejected")

    def _set_status(self, artwork_id, status: str) -> bool:
        try:
            self.api.update_artwork(artwork_id, {"status": status})
        except ApiError as e:
            logger.error(f"Error setting artwork {artwork_id} to {status}: {e}")
            return False
        # pelne odswiezenie zamiast lokalnej poprawki
        self.refresh()
        return True


@dataclass(frozen=True)
class ArtistStats:
    total_artworks: int = 0
    published: int = 0
    pending: int = 0
    artworks_sold: int = 0
    total_sales: Decimal = Decimal("0")
    avg_rating: float = 0.0


@dataclass(frozen=True)
class ArtistSnapshot:
    stats: ArtistStats = field(default_factory=ArtistStats)
    artworks: List[Dict[str, Any]] = field(default_factory=list)
    orders: List[Dict[str, Any]] = field(default_factory=list)
    reviews: List[Dict[str, Any]] = field(default_factory=list)


def build_artist_snapshot(artist_id, artworks, orders, reviews) -> ArtistSnapshot:
    mine = [
        o for o in orders
        if any((item.get("product") or {}).get("artist_id") == artist_id for item in o.get("items") or [])
    ]
    my_reviews = [r for r in reviews if r.get("artist_id") == artist_id]

    completed = [o for o in mine if o.get("status") == "completed"]
    sales = Decimal("0")
    for order in completed:
        for item in order.get("items") or []:
            product = item.get("product") or {}
            if product.get("artist_id") == artist_id:
                sales += to_decimal(product.get("price", 0)) * item.get("quantity", 0)

    ratings = [r["rating"] for r in my_reviews if r.get("rating") is not None]
    stats = ArtistStats(
        total_artworks=len(artworks),
        published=sum(1 for a in artworks if a.get("status") == "published"),
        pending=sum(1 for a in artworks if a.get("status") == "pending"),
        artworks_sold=len(completed),
        total_sales=sales,
        avg_rating=round(sum(ratings) / len(ratings), 1) if ratings else 0.0,
    )
    return ArtistSnapshot(stats=stats, artworks=list(artworks), orders=mine, reviews=my_reviews)


class ArtistDashboard(PollingView):
    role = Role.ARTIST

    def __init__(self, api: ApiClient, session: SessionStore, bus: EventBus, interval: float = ARTIST_POLL_SECONDS):
        super().__init__(session, interval, name="artist-dashboard")
        self.api = api
        self.bus = bus
        self.snapshot = ArtistSnapshot()
        self._unsubscribe: Optional[Callable[[], None]] = None

    def mount(self):
        if self.mounted:
            return
        self._unsubscribe = self.bus.subscribe(EventName.ARTWORK_UPLOADED, lambda event: self.refresh())
        super().mount()

    def unmount(self):
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
        super().unmount()

    def refresh(self) -> ArtistSnapshot:
        artist_id = self.session.user_id
        if artist_id is None:
            return self.snapshot

        token = self._token
        try:
            with ThreadPoolExecutor(max_workers=3) as ex:
                f_artworks = ex.submit(self.api.get_my_artworks, cancel=token)
                f_orders = ex.submit(self.api.get_orders, cancel=token)
                f_reviews = ex.submit(self.api.get_reviews, cancel=token)
                artworks, orders, reviews = f_artworks.result(), f_orders.result(), f_reviews.result()
        except RequestCancelled:
            return self.snapshot
        except ApiError as e:
            if not token.cancelled:
                logger.error(f"Error fetching artist dashboard data: {e}")
            return self.snapshot

        if isinstance(orders, dict):
            orders = orders.get("orders") or []

        self._commit(token, "snapshot", build_artist_snapshot(artist_id, artworks, orders, reviews))
        return self.snapshot


@dataclass(frozen=True)
class CatalogFilter:
    category: str = ""
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    min_rating: Optional[float] = None


def filter_catalog(artworks: Iterable[Dict[str, Any]], criteria: CatalogFilter) -> List[Dict[str, Any]]:
    items = list(artworks)
    if criteria.category:
        wanted = criteria.category.lower()
        items = [a for a in items if str(a.get("category") or "").lower() == wanted]
    if criteria.min_price is not None:
        items = [a for a in items if to_decimal(a.get("price", 0)) >= to_decimal(criteria.min_price)]
    if criteria.max_price is not None:
        items = [a for a in items if to_decimal(a.get("price", 0)) <= to_decimal(criteria.max_price)]
    if criteria.min_rating is not None:
        # dzielo bez oceny odpada, gdy filtr oceny jest ustawiony
        items = [a for a in items if a.get("rating") is not None and a["rating"] >= criteria.min_rating]
    return items


class UserDashboard(PollingView):
    """
    Katalog dla kupujacego: opublikowane dziela (polling), wishlista i licznik koszyka.
    Upload dziela odswieza katalog, zmiana wishlisty ja przeladowuje,
    zmiany koszyka aktualizuja licznik.
    """

    role = Role.USER

    def __init__(
        self,
        api: ApiClient,
        session: SessionStore,
        bus: EventBus,
        cart: CartReconciler,
        interval: float = USER_POLL_SECONDS,
    ):
        super().__init__(session, interval, name="user-dashboard")
        self.api = api
        self.bus = bus
        self.cart = cart

        self.artworks: List[Dict[str, Any]] = []
        self.wishlist: List[Dict[str, Any]] = []
        self.cart_count = 0
        self.filters = CatalogFilter()
        self.loading = True
        self._unsubscribe: List[Callable[[], None]] = []

    @property
    def filtered(self) -> List[Dict[str, Any]]:
        return filter_catalog(self.artworks, self.filters)

    def set_filters(self, **changes) -> List[Dict[str, Any]]:
        self.filters = replace(self.filters, **changes)
        return self.filtered

    def in_wishlist(self, artwork_id) -> bool:
        return any(str(item.get("artwork_id")) == str(artwork_id) for item in self.wishlist)

    def mount(self):
        if self.mounted:
            return
        self._unsubscribe = [
            self.bus.subscribe(EventName.ARTWORK_UPLOADED, lambda event: self._when_active(self.refresh)),
            self.bus.subscribe(EventName.WISHLIST_UPDATED, lambda event: self._when_active(self.load_wishlist)),
            self.bus.subscribe(EventName.STORAGE, lambda event: self._when_active(self.update_cart_count)),
            self.bus.subscribe(EventName.CART_UPDATED, self._on_cart_updated),
        ]
        super().mount()

    def unmount(self):
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []
        super().unmount()

    def _when_active(self, action: Callable[[], Any]):
        if self.mounted and self._allowed():
            action()

    def _on_started(self):
        self.load_wishlist()
        self.update_cart_count()

    def _on_cart_updated(self, event):
        if self.mounted:
            self.cart_count = event.count

    def refresh(self) -> List[Dict[str, Any]]:
        token = self._token
        try:
            artworks = self.api.get_artworks({"status": "published"}, cancel=token) or []
        except RequestCancelled:
            return self.artworks
        except ApiError as e:
            if token.cancelled:
                return self.artworks
            logger.error(f"Error fetching artworks: {e}")
            artworks = self.artworks

        self._commit(token, "artworks", artworks)
        self._commit(token, "loading", False)
        return self.artworks

    def load_wishlist(self) -> List[Dict[str, Any]]:
        token = self._token
        try:
            items = self.api.get_wishlist(cancel=token) or []
        except RequestCancelled:
            return self.wishlist
        except ApiError as e:
            if token.cancelled:
                return self.wishlist
            logger.error(f"Error fetching wishlist: {e}")
            items = []

        self._commit(token, "wishlist", items)
        return self.wishlist

    def update_cart_count(self) -> int:
        self.cart.load()
        self.cart_count = self.cart.count()
        return self.cart_count
