# tests/test_client_e2e.py
import json

import pytest

from virtual_art.client.api_client import ApiClient
from virtual_art.client.cart import CartReconciler
from virtual_art.client.checkout import Checkout, PaymentMode
from virtual_art.client.dashboards import AdminDashboard
from virtual_art.client.events import EventBus
from virtual_art.client.guards import admin_guard, user_guard
from virtual_art.client.navigation import Navigator, Notifier
from virtual_art.client.session import Role, SessionStore
from virtual_art.client.storage import CART_KEY, TOKEN_KEY, FileStorage, MemoryStorage

BASE_URL = "http://testserver/api"


@pytest.fixture
def storefront(client, tmp_path):
    """Sesja storefrontu podpieta pod TestClient zamiast requests.Session."""

    def _make(storage=None):
        api = ApiClient(BASE_URL, session=client)
        bus = EventBus()
        storage = storage or FileStorage(str(tmp_path / "storage.json"))
        session = SessionStore(api, storage, bus)
        return api, session, storage, bus

    return _make


def test_buyer_checkout_flow(storefront, publish_artwork, address_payload):
    a1 = publish_artwork("North", price=500)
    a2 = publish_artwork("South", price=100)

    api, session, storage, bus = storefront()
    session.register(
        {"email": "shopper@example.com", "password": "secret123", "full_name": "Shopper", "user_type": "user"}
    )
    assert session.role is Role.USER
    assert user_guard(session).granted
    assert storage.get_item(TOKEN_KEY)

    api.create_address(address_payload)

    # a2 ma za duza ilosc w magazynie i zostaje odrzucone przy wczytaniu
    storage.set_item(CART_KEY, json.dumps({str(a1["id"]): 2, str(a2["id"]): 101}))
    cart = CartReconciler(storage, bus)
    navigator = Navigator(bus, path="/cart")
    checkout = Checkout(api, cart, session, bus, navigator, Notifier())

    view = checkout.load_cart()
    assert [(l.artwork_id, l.quantity) for l in view.lines] == [(str(a1["id"]), 2)]
    assert view.totals.total == 1020
    checkout.load_addresses()

    result = checkout.place_order(PaymentMode.COD)

    assert result.ok, result.message
    assert result.order["amount"] == 1020
    assert storage.get_item(CART_KEY) is None
    assert navigator.path == "/my-orders"

    orders = api.get_orders()["orders"]
    assert [o["id"] for o in orders] == [result.order["id"]]


def test_session_restored_from_persisted_token(storefront, register):
    user = register("returning@example.com")
    storage = MemoryStorage({TOKEN_KEY: user["token"]})

    _, session, _, _ = storefront(storage)
    session.init()

    assert session.profile["email"] == "returning@example.com"
    assert session.loading is False


def test_admin_dashboard_against_backend(storefront, publish_artwork):
    publish_artwork()
    api, session, _, _ = storefront(MemoryStorage())
    session.login({"email": "admin@example.com", "password": "admin123"})
    assert admin_guard(session).granted

    # jedno polaczenie SQLite w testach, zapytania po kolei
    dash = AdminDashboard(api, session, interval=60, workers=1)
    snap = dash.refresh()

    assert snap.stats.total_users == 2
    assert snap.stats.total_artists == 1
    assert snap.stats.total_artworks == 1
    assert snap.status_distribution["Published"] == 1

    artwork_id = snap.artworks[0]["id"]
    assert dash.reject(artwork_id)
    assert dash.snapshot.status_distribution["Rejected"] == 1
