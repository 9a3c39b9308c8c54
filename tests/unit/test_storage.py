from unittest.mock import MagicMock, patch

import pytest

from banderas.errors import StorageError
from banderas.services.storage import (
    LocalStorage,
    S3Storage,
    extension_for,
    is_image_type,
    new_object_key,
    storage_from_env,
)


@pytest.fixture
def s3():
    return S3Storage(
        region="us-east-1",
        bucket="banderas-data",
        access_key_id="AKIA",
        secret_access_key="secret",
        public_domain="cdn.banderas.cr",
    )


def test_extension_for_known_and_unknown_types():
    assert extension_for("image/png") == ".png"
    assert extension_for("IMAGE/JPEG") == ".jpg"
    assert extension_for("image/svg+xml") == ".svg"
    assert extension_for("image/x-unknown") == ".jpg"


def test_is_image_type():
    assert is_image_type("image/webp")
    assert not is_image_type("application/pdf")
    assert not is_image_type(None)


def test_new_object_key_layout():
    key = new_object_key("shields", "image/webp")
    folder, _, filename = key.partition("/")
    assert folder == "shields"
    assert filename.endswith(".webp")
    assert len(filename) == len("00000000-0000-0000-0000-000000000000.webp")


def test_local_storage_round_trip(tmp_path):
    storage = LocalStorage(root=tmp_path, base_url="/uploads")
    url, key = storage.upload(b"data", "image/png", "gallery")

    assert url == f"/uploads/{key}"
    assert storage.exists(key)
    assert storage.key_from_url(url) == key

    storage.delete(key)
    assert not storage.exists(key)
    storage.delete(key)


def test_local_storage_rejects_traversal(tmp_path):
    storage = LocalStorage(root=tmp_path, base_url="/uploads")
    assert storage.key_from_url("/uploads/../secrets.txt") is None
    assert storage.key_from_url("https://elsewhere.example/gallery/a.jpg") is None
    with pytest.raises(StorageError):
        storage.put_bytes("../escape.jpg", b"x")


def test_local_storage_has_no_presigned_uploads(tmp_path):
    storage = LocalStorage(root=tmp_path)
    with pytest.raises(StorageError):
        storage.generate_presigned_upload("image/png", "gallery")


def test_s3_public_url_uses_cloudfront(s3):
    assert s3.public_url("gallery/a.jpg") == "https://cdn.banderas.cr/gallery/a.jpg"


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://cdn.banderas.cr/gallery/a.jpg", "gallery/a.jpg"),
        ("https://banderas-data.s3.us-east-1.amazonaws.com/shields/b.png", "shields/b.png"),
        ("https://s3.us-east-1.amazonaws.com/banderas-data/leadership/c.jpg", "leadership/c.jpg"),
        ("http://banderas-data.s3.us-east-1.amazonaws.com/shields/b.png", None),
        ("https://other-bucket.s3.us-east-1.amazonaws.com/shields/b.png", None),
        ("https://banderas-data.s3.eu-west-1.amazonaws.com/shields/b.png", None),
        ("https://s3.us-east-1.amazonaws.com/banderas-data/../etc/passwd", None),
        ("https://example.com/gallery/a.jpg", None),
        ("not a url", None),
        ("", None),
    ],
)
def test_s3_key_from_url(s3, url, expected):
    assert s3.key_from_url(url) == expected


def test_s3_presigned_upload(s3):
    client = MagicMock()
    client.generate_presigned_url.return_value = "https://signed.example/upload"
    with patch("banderas.services.storage.boto3.client", return_value=client) as factory:
        result = s3.generate_presigned_upload("image/png", "gallery", 300)

    factory.assert_called_once()
    assert result["uploadUrl"] == "https://signed.example/upload"
    assert result["fileKey"].startswith("gallery/") and result["fileKey"].endswith(".png")
    assert result["publicUrl"] == f"https://cdn.banderas.cr/{result['fileKey']}"
    _, kwargs = client.generate_presigned_url.call_args
    assert kwargs["ExpiresIn"] == 300
    assert kwargs["Params"]["Bucket"] == "banderas-data"
    assert kwargs["Params"]["ContentType"] == "image/png"


def test_s3_put_and_delete_use_bucket(s3):
    client = MagicMock()
    with patch("banderas.services.storage.boto3.client", return_value=client):
        s3.put_bytes("gallery/a.jpg", b"img", content_type="image/jpeg")
        s3.delete("gallery/a.jpg")

    client.put_object.assert_called_once_with(
        Bucket="banderas-data", Key="gallery/a.jpg", Body=b"img", ContentType="image/jpeg"
    )
    client.delete_object.assert_called_once_with(Bucket="banderas-data", Key="gallery/a.jpg")


def test_delete_quietly_swallows_backend_errors(s3):
    client = MagicMock()
    client.delete_object.side_effect = RuntimeError("denied")
    with patch("banderas.services.storage.boto3.client", return_value=client):
        s3.delete_quietly("gallery/a.jpg")
        s3.delete_quietly(None)
    assert client.delete_object.call_count == 1


def test_storage_from_env(monkeypatch, tmp_path):
    monkeypatch.delenv("AWS_S3_BUCKET", raising=False)
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    monkeypatch.setenv("LOCAL_STORAGE_DIR", str(tmp_path))
    local = storage_from_env()
    assert isinstance(local, LocalStorage)
    assert local.root == tmp_path

    monkeypatch.setenv("AWS_S3_BUCKET", "banderas-data")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("CLOUDFRONT_DOMAIN", "cdn.banderas.cr")
    remote = storage_from_env()
    assert isinstance(remote, S3Storage)
    assert remote.public_url("a.jpg") == "https://cdn.banderas.cr/a.jpg"

    monkeypatch.delenv("AWS_REGION")
    with pytest.raises(ValueError):
        storage_from_env()
