# tests/test_client_events.py
from dataclasses import dataclass

import pytest

from virtual_art.client.events import (
    ArtworkUploaded,
    CartUpdated,
    EventBus,
    EventName,
    Navigate,
    WishlistUpdated,
)


def test_publish_routes_by_payload_type():
    bus = EventBus()
    carts, navs = [], []
    bus.subscribe(EventName.CART_UPDATED, carts.append)
    bus.subscribe(EventName.NAVIGATE, navs.append)

    bus.publish(CartUpdated(count=3))
    bus.publish(Navigate(path="/cart", detail="cart"))

    assert carts == [CartUpdated(count=3)]
    assert navs == [Navigate(path="/cart", detail="cart")]


def test_unknown_payload_rejected():
    @dataclass
    class Custom:
        detail: str = ""

    with pytest.raises(TypeError):
        EventBus().publish(Custom())


def test_failing_handler_does_not_block_others():
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(EventName.ARTWORK_UPLOADED, broken)
    bus.subscribe(EventName.ARTWORK_UPLOADED, received.append)

    bus.publish(ArtworkUploaded(artwork_id=4))
    assert received == [ArtworkUploaded(artwork_id=4)]


def test_unsubscribe():
    bus = EventBus()
    received = []
    unsubscribe = bus.subscribe(EventName.WISHLIST_UPDATED, received.append)
    assert bus.subscriber_count(EventName.WISHLIST_UPDATED) == 1

    unsubscribe()
    unsubscribe()
    bus.publish(WishlistUpdated(artwork_id="1", in_wishlist=True))
    assert received == []
    assert bus.subscriber_count(EventName.WISHLIST_UPDATED) == 0


def test_every_event_name_has_payload():
    from virtual_art.client.events import PAYLOAD_TYPES

    assert set(PAYLOAD_TYPES) == set(EventName)
    assert EventName.CART_UPDATED.value == "cartUpdated"
