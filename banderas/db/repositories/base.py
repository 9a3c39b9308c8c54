"""
Generic repository for resources listed by ``display_order``.

Each repository holds the session factory it was built with and opens a
short-lived session per call, so returned rows are detached snapshots.
"""
import logging
from typing import Any, Generic, Iterable, Optional, Type, TypeVar

from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class ReorderableRepository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, session_factory: sessionmaker, model: Optional[Type[ModelT]] = None):
        self._session_factory = session_factory
        if model is not None:
            self.model = model

    def _session(self) -> Session:
        return self._session_factory()

    def get_all(self) -> list[ModelT]:
        with self._session() as db:
            return db.query(self.model).order_by(self.model.display_order.asc()).all()

    def get_by_id(self, item_id: str) -> Optional[ModelT]:
        with self._session() as db:
            return db.get(self.model, item_id)

    def create(self, data: dict[str, Any]) -> ModelT:
        with self._session() as db:
            db_obj = self.model(**data)
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
            return db_obj

    def update(self, item_id: str, data: dict[str, Any]) -> Optional[ModelT]:
        with self._session() as db:
            db_obj = db.get(self.model, item_id)
            if db_obj is None:
                return None
            for key, value in data.items():
                setattr(db_obj, key, value)
            db.commit()
            db.refresh(db_obj)
            return db_obj

    def delete(self, item_id: str) -> bool:
        with self._session() as db:
            db_obj = db.get(self.model, item_id)
            if db_obj is None:
                return False
            db.delete(db_obj)
            db.commit()
            return True

    def update_display_order(self, items: Iterable[tuple[str, int]]) -> None:
        """Write each ``(id, display_order)`` pair in its own commit.

        Not atomic: a failure part-way leaves earlier writes in place.
        Unknown ids match no row and are skipped.
        """
        with self._session() as db:
            for item_id, display_order in items:
                updated = (
                    db.query(self.model)
                    .filter(self.model.id == item_id)
                    .update({self.model.display_order: display_order}, synchronize_session=False)
                )
                db.commit()
                if not updated:
                    logger.debug("Reorder skipped unknown %s id %s", self.model.__tablename__, item_id)
