def _shield(client, headers, storage, title, **fields):
    key = f"shields/{title}.png"
    storage.put_bytes(key, b"png")
    payload = {
        "title": title,
        "description": f"Escudo {title}",
        "imageUrl": storage.public_url(key),
        **fields,
    }
    r = client.post("/api/admin/shields", json=payload, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_main_shield_missing_is_404(client):
    r = client.get("/api/admin/shields/main")
    assert r.status_code == 404
    assert r.json()["detail"] == "Main shield not found"


def test_create_fills_storage_key(client, admin_headers, storage):
    body = _shield(client, admin_headers, storage, "institucional")
    assert body["imageS3Key"] == "shields/institucional.png"
    assert body["isMainShield"] is False


def test_set_main_is_exclusive(client, admin_headers, storage):
    first = _shield(client, admin_headers, storage, "primero", isMainShield=True)
    second = _shield(client, admin_headers, storage, "segundo")

    r = client.put(f"/api/admin/shields/{second['id']}/set-main", headers=admin_headers)

    assert r.status_code == 200
    assert r.json()["isMainShield"] is True
    assert client.get("/api/admin/shields/main").json()["id"] == second["id"]
    assert client.get(f"/api/admin/shields/{first['id']}").json()["isMainShield"] is False


def test_set_main_unknown_is_404(client, admin_headers):
    r = client.put("/api/admin/shields/missing/set-main", headers=admin_headers)
    assert r.status_code == 404


def test_invalid_image_url_is_400(client, admin_headers):
    r = client.post(
        "/api/admin/shields",
        json={"title": "x", "description": "y", "imageUrl": "http://evil.example/x.png"},
        headers=admin_headers,
    )
    assert r.status_code == 400


def test_set_main_requires_auth(client):
    r = client.put("/api/admin/shields/any/set-main")
    assert r.status_code == 401
