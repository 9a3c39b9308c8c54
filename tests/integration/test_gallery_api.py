PNG = b"\x89PNG\r\n\x1a\nfake"


def _upload(client, headers, title="Desfile", **fields):
    data = {"title": title, **fields}
    return client.post(
        "/api/admin/gallery",
        data=data,
        files={"image": ("desfile.png", PNG, "image/png")},
        headers=headers,
    )


def _category(client, headers, name="Desfiles"):
    r = client.post("/api/admin/gallery-categories", json={"name": name}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_multipart_create_stores_image(client, admin_headers, storage):
    r = _upload(client, admin_headers, description="15 de septiembre", year="2023", displayOrder="2")

    assert r.status_code == 201, r.text
    body = r.json()
    assert body["title"] == "Desfile"
    assert body["year"] == "2023"
    assert body["displayOrder"] == 2
    assert body["imageUrl"].startswith("/uploads/gallery/")
    assert body["imageUrl"].endswith(".png")
    assert storage.exists(body["imageS3Key"])

    served = client.get(body["imageUrl"])
    assert served.status_code == 200
    assert served.content == PNG


def test_multipart_create_requires_image(client, admin_headers):
    r = client.post("/api/admin/gallery", data={"title": "Sin foto"}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["detail"] == "Image file is required"


def test_multipart_create_rejects_non_image(client, admin_headers):
    r = client.post(
        "/api/admin/gallery",
        data={"title": "Documento"},
        files={"image": ("acta.pdf", b"%PDF", "application/pdf")},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "Only image files are allowed"


def test_create_with_url(client, admin_headers, storage):
    storage.put_bytes("gallery/existing.jpg", b"jpg")

    r = client.post(
        "/api/admin/gallery/with-url",
        json={"title": "Acto cívico", "imageUrl": "/uploads/gallery/existing.jpg"},
        headers=admin_headers,
    )

    assert r.status_code == 201, r.text
    assert r.json()["imageS3Key"] == "gallery/existing.jpg"


def test_create_with_foreign_url_is_400(client, admin_headers):
    r = client.post(
        "/api/admin/gallery/with-url",
        json={"title": "Acto cívico", "imageUrl": "https://example.com/photo.jpg"},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert r.json()["detail"].startswith("Invalid image URL")


def test_category_and_uncategorized_listings(client, admin_headers):
    category = _category(client, admin_headers)
    filed = _upload(client, admin_headers, title="Con categoría", categoryId=category["id"]).json()
    loose = _upload(client, admin_headers, title="Suelta").json()

    by_category = client.get(f"/api/admin/gallery/category/{category['id']}").json()
    uncategorized = client.get("/api/admin/gallery/uncategorized").json()

    assert [item["id"] for item in by_category] == [filed["id"]]
    assert [item["id"] for item in uncategorized] == [loose["id"]]


def test_multipart_update_replaces_image(client, admin_headers, storage):
    created = _upload(client, admin_headers).json()

    r = client.put(
        f"/api/admin/gallery/{created['id']}",
        data={"title": "Desfile patrio"},
        files={"image": ("nuevo.webp", b"webp", "image/webp")},
        headers=admin_headers,
    )

    assert r.status_code == 200, r.text
    body = r.json()
    assert body["title"] == "Desfile patrio"
    assert body["imageS3Key"].endswith(".webp")
    assert storage.exists(body["imageS3Key"])
    assert not storage.exists(created["imageS3Key"])


def test_multipart_update_without_image_keeps_it(client, admin_headers):
    created = _upload(client, admin_headers).json()

    r = client.put(f"/api/admin/gallery/{created['id']}", data={"year": "1999"}, headers=admin_headers)

    assert r.status_code == 200
    assert r.json()["year"] == "1999"
    assert r.json()["imageUrl"] == created["imageUrl"]


def test_update_missing_item_is_404(client, admin_headers):
    r = client.put("/api/admin/gallery/missing", data={"title": "x"}, headers=admin_headers)
    assert r.status_code == 404
    assert r.json()["detail"] == "Gallery item not found"


def test_delete_removes_stored_image(client, admin_headers, storage):
    created = _upload(client, admin_headers).json()

    r = client.delete(f"/api/admin/gallery/{created['id']}", headers=admin_headers)

    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert not storage.exists(created["imageS3Key"])
    assert client.get(f"/api/admin/gallery/{created['id']}").status_code == 404


def test_deleting_category_removes_its_items(client, admin_headers):
    category = _category(client, admin_headers)
    item = _upload(client, admin_headers, categoryId=category["id"]).json()

    r = client.delete(f"/api/admin/gallery-categories/{category['id']}", headers=admin_headers)

    assert r.status_code == 200
    assert client.get(f"/api/admin/gallery/{item['id']}").status_code == 404


def test_category_slug_is_derived(client, admin_headers):
    body = _category(client, admin_headers, name="Actos Cívicos")
    assert body["slug"] == "actos-civicos"
