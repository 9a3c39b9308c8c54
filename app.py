"""ASGI entry point: ``uvicorn app:app``."""
from banderas.api.main import app  # noqa: F401
