from typing import Any, Optional

from sqlalchemy.orm import sessionmaker

from banderas.db import models


class SiteConfigRepository:
    """Access to the single ``site_config`` row."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get_config(self) -> Optional[models.SiteConfig]:
        with self._session_factory() as db:
            return db.query(models.SiteConfig).order_by(models.SiteConfig.updated_at.asc()).first()

    def create_config(self, data: dict[str, Any]) -> models.SiteConfig:
        with self._session_factory() as db:
            config = models.SiteConfig(**data)
            db.add(config)
            db.commit()
            db.refresh(config)
            return config

    def update_config(self, config_id: str, data: dict[str, Any]) -> Optional[models.SiteConfig]:
        with self._session_factory() as db:
            config = db.get(models.SiteConfig, config_id)
            if config is None:
                return None
            for key, value in data.items():
                setattr(config, key, value)
            config.updated_at = models.now_utc()
            db.commit()
            db.refresh(config)
            return config
