"""
File storage backends for uploaded images.

``S3Storage`` keeps objects in a bucket served through CloudFront and can
issue presigned browser uploads. ``LocalStorage`` writes under a directory
served by the app itself and is meant for development and tests.
"""
from __future__ import annotations

import logging
import os
import re
import uuid
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import boto3

from banderas.errors import StorageError

logger = logging.getLogger(__name__)

MIME_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/svg+xml": ".svg",
}

_VIRTUAL_HOSTED = re.compile(r"^([^.]+)\.s3\.([^.]+)\.amazonaws\.com$")
_PATH_STYLE = re.compile(r"^s3\.([^.]+)\.amazonaws\.com$")


def is_image_type(content_type: Optional[str]) -> bool:
    return bool(content_type) and content_type.lower().startswith("image/")


def extension_for(content_type: str) -> str:
    return MIME_EXTENSIONS.get((content_type or "").lower(), ".jpg")


def new_object_key(folder: str, content_type: str) -> str:
    """Random key under ``folder`` with an extension matching the MIME type."""
    folder = (folder or "uploads").strip("/") or "uploads"
    return f"{folder}/{uuid.uuid4()}{extension_for(content_type)}"


def _safe_key(key: Optional[str]) -> Optional[str]:
    if not key or ".." in key or key.startswith("/"):
        return None
    return key


class Storage:
    def put_bytes(self, key: str, data: bytes, *, content_type: str | None = None) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def public_url(self, key: str) -> str:
        raise NotImplementedError

    def key_from_url(self, url: str) -> Optional[str]:
        raise NotImplementedError

    def generate_presigned_upload(self, file_type: str, folder: str = "uploads", expires_in: int = 300) -> dict:
        raise StorageError("Presigned uploads are not supported by this storage backend")

    def upload(self, data: bytes, content_type: str, folder: str) -> tuple[str, str]:
        """Store ``data`` under a fresh key; return ``(public_url, key)``."""
        key = new_object_key(folder, content_type)
        self.put_bytes(key, data, content_type=content_type)
        return self.public_url(key), key

    def delete_quietly(self, key: Optional[str]) -> None:
        """Best-effort delete used after the owning row is already gone."""
        if not key:
            return
        try:
            self.delete(key)
        except Exception:
            logger.warning("Failed to delete stored object %s", key, exc_info=True)


@dataclass(frozen=True)
class LocalStorage(Storage):
    root: Path
    base_url: str = "/uploads"

    def _path(self, key: str) -> Path:
        safe_key = _safe_key(key.lstrip("/").replace("\\", "/"))
        if safe_key is None:
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.root / safe_key

    def put_bytes(self, key: str, data: bytes, *, content_type: str | None = None) -> None:
        p = self._path(key)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def exists(self, key: str) -> bool:
        return self._path(key).exists()

    def public_url(self, key: str) -> str:
        return f"{self.base_url.rstrip('/')}/{key}"

    def key_from_url(self, url: str) -> Optional[str]:
        prefix = f"{self.base_url.rstrip('/')}/"
        if not url or not url.startswith(prefix):
            return None
        return _safe_key(url[len(prefix):])


@dataclass(frozen=True)
class S3Storage(Storage):
    region: str
    bucket: str
    access_key_id: str
    secret_access_key: str
    public_domain: str = ""

    @cached_property
    def _client(self):
        return boto3.client(
            "s3",
            region_name=self.region,
            aws_access_key_id=self.access_key_id or None,
            aws_secret_access_key=self.secret_access_key or None,
        )

    def put_bytes(self, key: str, data: bytes, *, content_type: str | None = None) -> None:
        extra: dict[str, object] = {}
        if content_type:
            extra["ContentType"] = content_type
        self._client.put_object(Bucket=self.bucket, Key=key, Body=data, **extra)

    def delete(self, key: str) -> None:
        self._client.delete_object(Bucket=self.bucket, Key=key)

    def public_url(self, key: str) -> str:
        if self.public_domain:
            return f"https://{self.public_domain}/{key}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    def key_from_url(self, url: str) -> Optional[str]:
        """Return the object key when ``url`` points into this bucket.

        Accepts the public (CloudFront) domain plus virtual-hosted
        (``bucket.s3.region.amazonaws.com/key``) and path-style
        (``s3.region.amazonaws.com/bucket/key``) S3 URLs, HTTPS only.
        """
        if not url or not isinstance(url, str):
            return None
        parsed = urlparse(url)
        if parsed.scheme != "https" or not parsed.hostname:
            return None
        host = parsed.hostname.lower()
        path = parsed.path[1:] if parsed.path.startswith("/") else parsed.path

        if self.public_domain and host == self.public_domain.lower():
            return _safe_key(path)

        match = _VIRTUAL_HOSTED.match(host)
        if match:
            bucket, region, key = match.group(1), match.group(2), path
        else:
            match = _PATH_STYLE.match(host)
            if not match:
                return None
            region = match.group(1)
            bucket, _, key = path.partition("/")

        if bucket != self.bucket or region != self.region:
            return None
        return _safe_key(key)

    def generate_presigned_upload(self, file_type: str, folder: str = "uploads", expires_in: int = 300) -> dict:
        key = new_object_key(folder, file_type)
        upload_url = self._client.generate_presigned_url(
            "put_object",
            Params={"Bucket": self.bucket, "Key": key, "ContentType": file_type},
            ExpiresIn=expires_in,
        )
        return {"uploadUrl": upload_url, "fileKey": key, "publicUrl": self.public_url(key)}


def storage_from_env() -> Storage:
    """Build the storage backend from ``STORAGE_BACKEND`` and AWS settings.

    Defaults to S3 when ``AWS_S3_BUCKET`` is set, local files otherwise.
    """
    default_backend = "s3" if os.getenv("AWS_S3_BUCKET") else "local"
    backend = (os.getenv("STORAGE_BACKEND") or default_backend).strip().lower()
    if backend == "s3":
        region = (os.getenv("AWS_REGION") or "").strip()
        bucket = (os.getenv("AWS_S3_BUCKET") or "").strip()
        if not region or not bucket:
            raise ValueError("Missing AWS configuration. Ensure AWS_REGION and AWS_S3_BUCKET are set.")
        return S3Storage(
            region=region,
            bucket=bucket,
            access_key_id=(os.getenv("AWS_ACCESS_KEY_ID") or "").strip(),
            secret_access_key=(os.getenv("AWS_SECRET_ACCESS_KEY") or "").strip(),
            public_domain=(os.getenv("CLOUDFRONT_DOMAIN") or "").strip(),
        )
    root = Path(os.getenv("LOCAL_STORAGE_DIR") or Path(os.getcwd()) / "storage")
    return LocalStorage(root=root, base_url=os.getenv("LOCAL_STORAGE_BASE_URL", "/uploads"))
