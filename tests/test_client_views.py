# tests/test_client_views.py
import json
from unittest.mock import MagicMock

import pytest

from virtual_art.client.addresses import AddressBook
from virtual_art.client.api_client import ApiClient
from virtual_art.client.artwork_details import ArtworkDetails
from virtual_art.client.cancellation import CancelToken
from virtual_art.client.cart import CartReconciler
from virtual_art.client.errors import ApiError
from virtual_art.client.events import AddressAdded, ArtworkUploaded, EventBus, EventName, Navigate, WishlistUpdated
from virtual_art.client.navigation import Navigator, Notifier
from virtual_art.client.storage import CART_KEY, FileStorage, MemoryStorage
from virtual_art.client.uploads import ArtworkUploader
from virtual_art.client.wishlist import WishlistStore

ARTWORK = {"id": 5, "title": "Dune", "category": "painting", "artist_id": 2, "price": 300}


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def api():
    return MagicMock(spec=ApiClient)


def _details(api, bus, storage=None):
    cart = CartReconciler(storage or MemoryStorage(), bus)
    return ArtworkDetails(api, cart, Navigator(bus), Notifier())


def test_details_load(api, bus):
    api.get_artwork.return_value = ARTWORK
    api.get_artist_profile.return_value = {"id": 1, "user_id": 2}
    api.get_artworks.return_value = [ARTWORK] + [
        {"id": i, "category": "painting"} for i in range(10, 16)
    ] + [{"id": 30, "category": "sculpture"}]
    api.get_reviews_for_artwork.return_value = [{"id": 1, "rating": 5}]
    api.check_wishlist.return_value = {"inWishlist": True}

    view = _details(api, bus)
    view.load(5)

    assert view.artwork == ARTWORK
    assert view.artist == {"id": 1, "user_id": 2}
    assert [a["id"] for a in view.related] == [10, 11, 12, 13]
    assert view.reviews == [{"id": 1, "rating": 5}]
    assert view.in_wishlist is True
    assert view.loading is False
    assert view.error is None


def test_details_discards_late_response_after_close(api, bus):
    view = _details(api, bus)

    def artwork_then_navigate_away(artwork_id, cancel=None):
        view.close()
        return ARTWORK

    api.get_artwork.side_effect = artwork_then_navigate_away

    view.load(5)

    assert view.artwork is None
    assert view.error is None
    api.get_artist_profile.assert_not_called()


def test_details_cancel_mid_chain(api, bus):
    view = _details(api, bus)
    api.get_artwork.return_value = ARTWORK

    def artist_then_close(user_id, cancel=None):
        view.close()
        return {"id": 1}

    api.get_artist_profile.side_effect = artist_then_close

    view.load(5)

    assert view.artwork == ARTWORK
    assert view.artist is None
    api.get_artworks.assert_not_called()
    assert view.loading is True


def test_details_error_is_surfaced(api, bus):
    api.get_artwork.side_effect = ApiError("Artwork not found", 404)
    view = _details(api, bus)
    view.load(99)
    assert view.error == "Artwork not found"
    assert view.loading is False


def test_add_to_cart_increments_and_navigates(api, bus):
    storage = MemoryStorage({CART_KEY: json.dumps({"5": 1})})
    view = _details(api, bus, storage)
    view.artwork = ARTWORK
    navs = []
    bus.subscribe(EventName.NAVIGATE, navs.append)

    view.add_to_cart()

    assert json.loads(storage.get_item(CART_KEY)) == {"5": 2}
    assert navs == [Navigate(path="/cart")]
    assert view.notifier.last.message == 'Added "Dune" to cart!'


def test_wishlist_toggle(api, bus):
    api.get_wishlist.side_effect = [[], [{"artwork_id": 5}], []]
    store = WishlistStore(api, bus, Notifier())
    store.load()
    events = []
    bus.subscribe(EventName.WISHLIST_UPDATED, events.append)

    assert store.toggle(5) is True
    api.add_to_wishlist.assert_called_once_with(5)
    assert store.toggle(5) is False
    api.remove_from_wishlist.assert_called_once_with(5)
    assert events == [
        WishlistUpdated(artwork_id="5", in_wishlist=True),
        WishlistUpdated(artwork_id="5", in_wishlist=False),
    ]


def test_wishlist_toggle_failure_keeps_state(api, bus):
    api.get_wishlist.return_value = []
    api.add_to_wishlist.side_effect = ApiError("Artwork not available", 400)
    notifier = Notifier()
    store = WishlistStore(api, bus, notifier)
    store.load()

    assert store.toggle(5) is False
    assert notifier.last.message == "Artwork not available"


def test_address_book_add_broadcasts(api, bus):
    api.create_address.return_value = {"success": True, "message": "Address added successfully", "address": {"id": 3}}
    navigator = Navigator(bus)
    book = AddressBook(api, bus, navigator, Notifier())
    added = []
    bus.subscribe(EventName.ADDRESS_ADDED, added.append)

    address = {
        "firstName": "Jan", "lastName": "K", "email": "j@example.com", "street": "S", "city": "C",
        "state": "St", "zipCode": "00-001", "country": "PL", "phone": "1",
    }
    assert book.add(address) == {"id": 3}
    assert added == [AddressAdded(address_id=3)]
    assert navigator.path == "/cart"


def test_address_book_validates_before_request(api, bus):
    notifier = Notifier()
    book = AddressBook(api, bus, Navigator(bus), notifier)
    assert book.add({"firstName": "Jan"}) is None
    api.create_address.assert_not_called()
    assert notifier.last.level == "error"


def test_uploader_publishes_event(api, bus, tmp_path):
    image = tmp_path / "sea.jpg"
    image.write_bytes(b"jpeg")
    api.upload_artwork.return_value = {"id": 42}
    uploaded = []
    bus.subscribe(EventName.ARTWORK_UPLOADED, uploaded.append)

    result = ArtworkUploader(api, bus, Notifier()).upload(str(image), {"title": "Sea", "category": "photo", "price": 5})

    assert result == {"id": 42}
    api.upload_artwork.assert_called_once_with(
        str(image), {"title": "Sea", "category": "photo", "price": 5}, content_type="image/jpeg"
    )
    assert uploaded == [ArtworkUploaded(artwork_id=42)]


def test_uploader_rejects_non_images(api, bus, tmp_path):
    doc = tmp_path / "notes.txt"
    doc.write_text("hi")
    notifier = Notifier()
    assert ArtworkUploader(api, bus, notifier).upload(str(doc), {"title": "N", "category": "x", "price": 1}) is None
    api.upload_artwork.assert_not_called()
    assert notifier.last.message == "Only image files are allowed"


def test_uploader_duplicate_image(api, bus, tmp_path):
    image = tmp_path / "sea.png"
    image.write_bytes(b"png")
    api.upload_artwork.side_effect = ApiError("This image has already been uploaded (artwork 1)", 409)
    notifier = Notifier()
    assert ArtworkUploader(api, bus, notifier).upload(str(image), {"title": "S", "category": "x", "price": 1}) is None
    assert "already been uploaded" in notifier.last.message


def test_file_storage_persists(tmp_path):
    path = tmp_path / "state" / "storage.json"
    storage = FileStorage(str(path))
    storage.set_item("token", "abc")
    storage.set_item(CART_KEY, '{"1": 2}')

    reopened = FileStorage(str(path))
    assert reopened.get_item("token") == "abc"
    reopened.remove_item("token")
    assert FileStorage(str(path)).get_item("token") is None
    assert FileStorage(str(path)).get_item(CART_KEY) == '{"1": 2}'


def test_file_storage_survives_corrupt_file(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{broken")
    storage = FileStorage(str(path))
    assert storage.get_item("token") is None
    storage.set_item("token", "x")
    assert storage.get_item("token") == "x"


def test_wishlist_load_respects_cancelled_token(api, bus):
    api.get_wishlist.return_value = [{"artwork_id": 5}]
    store = WishlistStore(api, bus, Notifier())
    token = CancelToken()
    token.cancel()

    assert store.load(cancel=token) == []
    assert store.items == []
