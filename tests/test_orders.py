# tests/test_orders.py


def _order(client, buyer, address, items, **extra):
    return client.post(
        "/api/orders/",
        json={"userId": buyer["id"], "items": items, "address": address["id"], **extra},
        headers=buyer["headers"],
    )


def test_cod_order_amount_includes_tax(client, buyer, buyer_address, publish_artwork, notifications):
    a1 = publish_artwork("A1", price=500)
    a2 = publish_artwork("A2", price=1250)

    resp = _order(
        client,
        buyer,
        buyer_address,
        [{"product": a1["id"], "quantity": 2}, {"product": a2["id"], "quantity": 1}],
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Order placed successfully"
    assert "url" not in body

    order = body["order"]
    # 2250 + round(2250 * 0.02) = 2250 + 45
    assert order["amount"] == 2295
    assert order["payment_type"] == "COD"
    assert order["status"] == "pending"
    assert order["address"]["firstName"] == "Jan"
    assert [(i["product"]["id"], i["quantity"]) for i in order["items"]] == [(a1["id"], 2), (a2["id"], 1)]

    notifications.send_order_notification.assert_called_once_with(buyer["id"], order["id"], "COD")


def test_tax_rounds_half_up(client, buyer, buyer_address, publish_artwork):
    artwork = publish_artwork("Small", price=25)
    resp = _order(client, buyer, buyer_address, [{"product": artwork["id"], "quantity": 1}])
    # 25 * 0.02 = 0.5 -> 1
    assert resp.json()["order"]["amount"] == 26


def test_stripe_order_returns_redirect_url(client, buyer, buyer_address, publish_artwork):
    artwork = publish_artwork()
    resp = _order(client, buyer, buyer_address, [{"product": artwork["id"], "quantity": 1}], paymentMethod="stripe")
    assert resp.status_code == 200
    body = resp.json()
    assert body["url"] == "https://stripe-payment-url.com"
    assert body["order"]["payment_type"] == "Online"


def test_unknown_payment_method_rejected(client, buyer, buyer_address, publish_artwork):
    artwork = publish_artwork()
    resp = _order(client, buyer, buyer_address, [{"product": artwork["id"], "quantity": 1}], paymentMethod="paypal")
    assert resp.status_code == 400


def test_empty_items_rejected(client, buyer, buyer_address):
    resp = _order(client, buyer, buyer_address, [])
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid items"


def test_zero_quantity_rejected(client, buyer, buyer_address, publish_artwork):
    artwork = publish_artwork()
    resp = _order(client, buyer, buyer_address, [{"product": artwork["id"], "quantity": 0}])
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid quantity in items"


def test_foreign_address_rejected(client, buyer, register, publish_artwork, address_payload):
    other = register("other@example.com")
    foreign = client.post("/api/address/add", json=address_payload, headers=other["headers"]).json()["address"]
    artwork = publish_artwork()
    resp = _order(client, buyer, foreign, [{"product": artwork["id"], "quantity": 1}])
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid address"


def test_cannot_order_for_someone_else(client, buyer, register, buyer_address, publish_artwork):
    other = register("other@example.com")
    artwork = publish_artwork()
    resp = client.post(
        "/api/orders/",
        json={"userId": buyer["id"], "items": [{"product": artwork["id"], "quantity": 1}], "address": buyer_address["id"]},
        headers=other["headers"],
    )
    assert resp.status_code == 403


def test_pending_artwork_cannot_be_ordered(client, buyer, buyer_address, artist):
    pending = client.post(
        "/api/artworks/",
        json={"title": "Draft", "category": "painting", "price": 10, "image_url": "/img/d.jpg"},
        headers=artist["headers"],
    ).json()
    resp = _order(client, buyer, buyer_address, [{"product": pending["id"], "quantity": 1}])
    assert resp.status_code == 400


def test_artist_cannot_buy_own_artwork(client, artist, publish_artwork, address_payload):
    artwork = publish_artwork()
    address = client.post("/api/address/add", json=address_payload, headers=artist["headers"]).json()["address"]
    resp = _order(client, artist, address, [{"product": artwork["id"], "quantity": 1}])
    assert resp.status_code == 400
    assert resp.json()["message"] == "Cannot order your own artwork"


def test_concurrent_checkout_is_rejected(client, buyer, buyer_address, publish_artwork, lock_service):
    artwork = publish_artwork()
    # inne zlozenie zamowienia w toku
    lock_service.held.add(buyer["id"])

    resp = _order(client, buyer, buyer_address, [{"product": artwork["id"], "quantity": 1}])
    assert resp.status_code == 409
    assert resp.json()["message"] == "An order is already being placed"

    orders = client.get("/api/orders/", headers=buyer["headers"]).json()
    assert orders == {"success": True, "orders": []}


def test_lock_released_after_failure(client, buyer, buyer_address, artist, lock_service):
    pending = client.post(
        "/api/artworks/",
        json={"title": "Draft", "category": "painting", "price": 10, "image_url": "/img/d.jpg"},
        headers=artist["headers"],
    ).json()
    _order(client, buyer, buyer_address, [{"product": pending["id"], "quantity": 1}])
    assert buyer["id"] not in lock_service.held


def test_orders_are_role_scoped(client, buyer, register, buyer_address, publish_artwork, artist, admin):
    artwork = publish_artwork()
    _order(client, buyer, buyer_address, [{"product": artwork["id"], "quantity": 1}])
    stranger = register("stranger@example.com")

    assert len(client.get("/api/orders/", headers=buyer["headers"]).json()["orders"]) == 1
    assert len(client.get("/api/orders/", headers=artist["headers"]).json()["orders"]) == 1
    assert len(client.get("/api/orders/", headers=admin["headers"]).json()["orders"]) == 1
    assert client.get("/api/orders/", headers=stranger["headers"]).json()["orders"] == []


def test_complete_then_cancel_adjusts_artist_sales(client, register, buyer, buyer_address, admin, notifications):
    bio = "x" * 250
    painter = register("painter@example.com", user_type="artist", artist_name="Painter", bio=bio)
    artwork = client.post(
        "/api/artworks/",
        json={"title": "Oak", "category": "painting", "price": 400, "image_url": "/img/oak.jpg"},
        headers=painter["headers"],
    ).json()
    client.put(f"/api/artworks/{artwork['id']}", json={"status": "published"}, headers=admin["headers"])

    order = _order(client, buyer, buyer_address, [{"product": artwork["id"], "quantity": 2}]).json()["order"]

    resp = client.put(f"/api/orders/{order['id']}", json={"status": "completed"}, headers=painter["headers"])
    assert resp.status_code == 200
    assert resp.json()["status"] == "completed"

    profile = client.get(f"/api/artist-profiles/{painter['id']}", headers=painter["headers"]).json()
    assert profile["total_sales"] == 800
    sold = client.get(f"/api/artworks/{artwork['id']}", headers=admin["headers"]).json()
    assert sold["status"] == "sold"

    client.put(f"/api/orders/{order['id']}", json={"status": "cancelled"}, headers=admin["headers"])
    profile = client.get(f"/api/artist-profiles/{painter['id']}", headers=painter["headers"]).json()
    assert profile["total_sales"] == 0
    assert notifications.send_status_notification.call_count == 2


def test_buyer_cannot_change_status(client, buyer, buyer_address, publish_artwork):
    artwork = publish_artwork()
    order = _order(client, buyer, buyer_address, [{"product": artwork["id"], "quantity": 1}]).json()["order"]
    resp = client.put(f"/api/orders/{order['id']}", json={"status": "completed"}, headers=buyer["headers"])
    assert resp.status_code == 403


def test_only_admin_deletes_orders(client, buyer, buyer_address, publish_artwork, admin):
    artwork = publish_artwork()
    order = _order(client, buyer, buyer_address, [{"product": artwork["id"], "quantity": 1}]).json()["order"]
    assert client.delete(f"/api/orders/{order['id']}", headers=buyer["headers"]).status_code == 403
    assert client.delete(f"/api/orders/{order['id']}", headers=admin["headers"]).status_code == 200
    assert client.get(f"/api/orders/{order['id']}", headers=admin["headers"]).status_code == 404
