# tests/test_address_admin.py


def test_address_roundtrip_uses_camel_case(client, buyer, address_payload):
    resp = client.post("/api/address/add", json=address_payload, headers=buyer["headers"])
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["address"]["firstName"] == "Jan"
    assert body["address"]["zipCode"] == "30-001"

    listed = client.get("/api/address/get", headers=buyer["headers"]).json()
    assert listed["success"] is True
    assert [a["id"] for a in listed["addresses"]] == [body["address"]["id"]]


def test_address_requires_all_fields(client, buyer, address_payload):
    del address_payload["city"]
    resp = client.post("/api/address/add", json=address_payload, headers=buyer["headers"])
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_address_update_and_delete_only_own(client, buyer, register, buyer_address):
    other = register("other@example.com")
    update = {"street": "Krotka 2", "city": "Gdansk", "state": "Pomorskie", "zipCode": "80-001", "country": "Poland"}

    assert client.put(f"/api/address/update/{buyer_address['id']}", json=update, headers=other["headers"]).status_code == 404

    resp = client.put(f"/api/address/update/{buyer_address['id']}", json=update, headers=buyer["headers"])
    assert resp.status_code == 200
    assert resp.json()["address"]["city"] == "Gdansk"

    assert client.delete(f"/api/address/delete/{buyer_address['id']}", headers=buyer["headers"]).status_code == 200
    assert client.get("/api/address/get", headers=buyer["headers"]).json()["addresses"] == []


def test_admin_routes_require_admin(client, buyer):
    for path in ("/api/admin/users", "/api/admin/artworks", "/api/admin/orders", "/api/admin/reviews"):
        resp = client.get(path, headers=buyer["headers"])
        assert resp.status_code == 403
        assert resp.json()["message"] == "Admin access required"


def test_admin_collections(client, admin, buyer, artist, publish_artwork):
    publish_artwork()
    users = client.get("/api/admin/users", headers=admin["headers"]).json()
    assert {u["user_type"] for u in users} == {"admin", "user", "artist"}
    assert len(client.get("/api/admin/artworks", headers=admin["headers"]).json()) == 1
    assert client.get("/api/admin/orders", headers=admin["headers"]).json() == []
    assert client.get("/api/admin/reviews", headers=admin["headers"]).json() == []
