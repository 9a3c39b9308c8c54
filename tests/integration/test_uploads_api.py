def test_presigned_url_requires_file_type(client, admin_headers):
    r = client.post("/api/admin/upload/presigned-url", json={"folder": "gallery"}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["detail"] == "fileType is required"


def test_presigned_url_rejects_non_image(client, admin_headers):
    r = client.post(
        "/api/admin/upload/presigned-url",
        json={"fileType": "application/pdf", "folder": "gallery"},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "Only image files are allowed"


def test_presigned_url_rejects_traversal(client, admin_headers):
    r = client.post(
        "/api/admin/upload/presigned-url",
        json={"fileType": "image/png", "folder": "../secrets"},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid folder"


def test_presigned_url_unsupported_on_local_storage(client, admin_headers):
    r = client.post(
        "/api/admin/upload/presigned-url",
        json={"fileType": "image/png", "folder": "gallery"},
        headers=admin_headers,
    )
    assert r.status_code == 400


def test_presigned_url_from_s3_backend(client, admin_headers, container, monkeypatch):
    captured = {}

    def fake_presign(file_type, folder, expires_in):
        captured.update(file_type=file_type, folder=folder, expires_in=expires_in)
        return {
            "uploadUrl": "https://bucket.s3.us-east-1.amazonaws.com/gallery/x.png?sig=1",
            "fileKey": "gallery/x.png",
            "publicUrl": "https://cdn.example.org/gallery/x.png",
        }

    monkeypatch.setattr(type(container.storage), "generate_presigned_upload", lambda self, *a: fake_presign(*a))

    r = client.post(
        "/api/admin/upload/presigned-url",
        json={"fileType": "image/png", "folder": "/gallery/"},
        headers=admin_headers,
    )

    assert r.status_code == 200, r.text
    assert r.json()["fileKey"] == "gallery/x.png"
    assert captured == {"file_type": "image/png", "folder": "gallery", "expires_in": 300}
