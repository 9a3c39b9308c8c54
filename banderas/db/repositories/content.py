"""
Repositories for the content resources (shield values, milestones,
leadership periods, shields, historical images).
"""
from typing import Optional

from banderas.db import models

from .base import ReorderableRepository


class ShieldValueRepository(ReorderableRepository[models.ShieldValue]):
    model = models.ShieldValue


class HistoryRepository(ReorderableRepository[models.HistoricalMilestone]):
    model = models.HistoricalMilestone


class LeadershipRepository(ReorderableRepository[models.LeadershipPeriod]):
    model = models.LeadershipPeriod


class HistoricalImageRepository(ReorderableRepository[models.HistoricalImage]):
    model = models.HistoricalImage


class ShieldRepository(ReorderableRepository[models.Shield]):
    model = models.Shield

    def get_main(self) -> Optional[models.Shield]:
        with self._session() as db:
            return (
                db.query(models.Shield)
                .filter(models.Shield.is_main_shield.is_(True))
                .order_by(models.Shield.display_order.asc())
                .first()
            )

    def clear_main(self) -> None:
        with self._session() as db:
            db.query(models.Shield).filter(models.Shield.is_main_shield.is_(True)).update(
                {models.Shield.is_main_shield: False}, synchronize_session=False
            )
            db.commit()

    def set_main(self, shield_id: str) -> Optional[models.Shield]:
        """Make ``shield_id`` the only main shield, in one transaction."""
        with self._session() as db:
            shield = db.get(models.Shield, shield_id)
            if shield is None:
                return None
            db.query(models.Shield).filter(models.Shield.id != shield_id).update(
                {models.Shield.is_main_shield: False}, synchronize_session=False
            )
            shield.is_main_shield = True
            db.commit()
            db.refresh(shield)
            return shield
