# storefront: stan sesji, koszyk, zamowienia i widoki nad REST API

from virtual_art.client.api_client import ApiClient
from virtual_art.client.cart import CartReconciler, CartBadge
from virtual_art.client.checkout import Checkout, PaymentMode, PlacementResult
from virtual_art.client.dashboards import AdminDashboard, ArtistDashboard, UserDashboard
from virtual_art.client.errors import ApiError, RequestCancelled, ValidationFailed
from virtual_art.client.events import EventBus, EventName
from virtual_art.client.guards import admin_guard, artist_guard, user_guard, render_for_role
from virtual_art.client.navigation import Navigator, Notifier
from virtual_art.client.session import Role, SessionStore
from virtual_art.client.storage import FileStorage, MemoryStorage

__all__ = [
    "ApiClient",
    "CartReconciler",
    "CartBadge",
    "Checkout",
    "PaymentMode",
    "PlacementResult",
    "AdminDashboard",
    "ArtistDashboard",
    "UserDashboard",
    "ApiError",
    "RequestCancelled",
    "ValidationFailed",
    "EventBus",
    "EventName",
    "admin_guard",
    "artist_guard",
    "user_guard",
    "render_for_role",
    "Navigator",
    "Notifier",
    "Role",
    "SessionStore",
    "FileStorage",
    "MemoryStorage",
]
