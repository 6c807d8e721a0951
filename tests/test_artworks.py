# tests/test_artworks.py
import os


def _create(client, headers, title="Blue", price=100):
    return client.post(
        "/api/artworks/",
        json={"title": title, "category": "painting", "price": price, "image_url": "/img/blue.jpg"},
        headers=headers,
    )


def test_artist_creates_pending_artwork(client, artist):
    resp = _create(client, artist["headers"])
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "pending"
    assert body["artist_id"] == artist["id"]


def test_plain_user_cannot_create_artwork(client, buyer):
    resp = _create(client, buyer["headers"])
    assert resp.status_code == 403


def test_pending_artwork_hidden_from_other_users(client, artist, buyer):
    artwork_id = _create(client, artist["headers"]).json()["id"]

    listing = client.get("/api/artworks/", headers=buyer["headers"]).json()
    assert artwork_id not in [a["id"] for a in listing]
    assert client.get(f"/api/artworks/{artwork_id}", headers=buyer["headers"]).status_code == 403

    own = client.get("/api/artworks/", headers=artist["headers"]).json()
    assert artwork_id in [a["id"] for a in own]


def test_admin_approves_artwork(client, artist, buyer, admin):
    artwork_id = _create(client, artist["headers"]).json()["id"]

    resp = client.put(f"/api/artworks/{artwork_id}", json={"status": "published"}, headers=admin["headers"])
    assert resp.status_code == 200
    assert resp.json()["status"] == "published"

    listing = client.get("/api/artworks/", params={"status": "published"}, headers=buyer["headers"]).json()
    assert [a["id"] for a in listing] == [artwork_id]


def test_artist_cannot_publish_own_artwork(client, artist):
    artwork_id = _create(client, artist["headers"]).json()["id"]
    resp = client.put(f"/api/artworks/{artwork_id}", json={"status": "published"}, headers=artist["headers"])
    assert resp.status_code == 403


def test_artist_edits_and_deletes_own_artwork(client, artist):
    artwork_id = _create(client, artist["headers"]).json()["id"]

    resp = client.put(f"/api/artworks/{artwork_id}", json={"price": 250}, headers=artist["headers"])
    assert resp.status_code == 200
    assert resp.json()["price"] == 250

    assert client.delete(f"/api/artworks/{artwork_id}", headers=artist["headers"]).status_code == 200
    assert client.get(f"/api/artworks/{artwork_id}", headers=artist["headers"]).status_code == 404


def test_my_artworks_only_for_artists(client, artist, buyer):
    _create(client, artist["headers"])
    assert len(client.get("/api/artworks/my-artworks", headers=artist["headers"]).json()) == 1
    assert client.get("/api/artworks/my-artworks", headers=buyer["headers"]).status_code == 403


def test_upload_stores_file_and_rejects_duplicate(client, artist):
    files = {"image": ("wave.png", b"\x89PNG fake image bytes", "image/png")}
    form = {"title": "Wave", "category": "digital", "price": "300"}

    resp = client.post("/api/artworks/upload", data=form, files=files, headers=artist["headers"])
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["status"] == "pending"
    assert body["image_url"].startswith("/uploads/")
    assert os.path.exists(os.path.join(os.environ["UPLOAD_DIR"], os.path.basename(body["image_url"])))

    files = {"image": ("copy.png", b"\x89PNG fake image bytes", "image/png")}
    again = client.post("/api/artworks/upload", data=form, files=files, headers=artist["headers"])
    assert again.status_code == 409


def test_upload_rejects_non_image(client, artist):
    files = {"image": ("notes.txt", b"hello", "text/plain")}
    form = {"title": "Notes", "category": "digital", "price": "10"}
    resp = client.post("/api/artworks/upload", data=form, files=files, headers=artist["headers"])
    assert resp.status_code == 400
    assert resp.json()["message"] == "Only image files are allowed"
