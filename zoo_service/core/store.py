from __future__ import annotations

from typing import Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError as RecordValidationError
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from zoo_service.core.errors import StorageError
from zoo_service.utils.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V", bound=BaseModel)


class OrderedStore(Generic[V]):
    """
    Durable key-value map of entity records, iterated in key order.

    Each store is bound to its own table, so two stores never see each
    other's keys. Every call opens a session and commits or rolls back
    as a unit.

    Args:
        session_factory: Session factory bound to the service engine
        row_model: Table model with ``id`` and ``value`` columns
        value_model: Pydantic model the stored JSON is decoded into
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        row_model: Type,
        value_model: Type[V],
    ) -> None:
        self._session_factory = session_factory
        self._row_model = row_model
        self._value_model = value_model

    @property
    def namespace(self) -> str:
        return self._row_model.__tablename__

    def _encode(self, value: V) -> dict:
        return value.model_dump(mode="json", by_alias=True)

    def _decode(self, data: dict) -> V:
        try:
            return self._value_model.model_validate(data)
        except RecordValidationError as e:
            logger.error(f"Unreadable record in {self.namespace}: {e}")
            raise StorageError(f"Unreadable record in {self.namespace}") from e

    def _fail(self, db: Session, action: str, key: Optional[str], error: Exception):
        db.rollback()
        target = f"{self.namespace}:{key}" if key is not None else self.namespace
        logger.error(f"Storage failure during {action} on {target}: {error}")
        raise StorageError(f"Storage failure during {action} on {target}") from error

    def get(self, key: str) -> Optional[V]:
        db: Session = self._session_factory()
        try:
            row = db.get(self._row_model, key)
            return self._decode(row.value) if row is not None else None
        except SQLAlchemyError as e:
            self._fail(db, "get", key, e)
        finally:
            db.close()

    def insert(self, key: str, value: V) -> Optional[V]:
        """Insert or replace ``key``; returns the value it replaced."""
        db: Session = self._session_factory()
        try:
            row = db.get(self._row_model, key)
            previous = None
            if row is None:
                db.add(self._row_model(id=key, value=self._encode(value)))
            else:
                previous = self._decode(row.value)
                row.value = self._encode(value)
            db.commit()
            return previous
        except SQLAlchemyError as e:
            self._fail(db, "insert", key, e)
        finally:
            db.close()

    def remove(self, key: str) -> Optional[V]:
        db: Session = self._session_factory()
        try:
            row = db.get(self._row_model, key)
            if row is None:
                return None
            previous = self._decode(row.value)
            db.delete(row)
            db.commit()
            return previous
        except SQLAlchemyError as e:
            self._fail(db, "remove", key, e)
        finally:
            db.close()

    def values(self) -> list[V]:
        db: Session = self._session_factory()
        try:
            rows = db.scalars(select(self._row_model).order_by(self._row_model.id))
            return [self._decode(row.value) for row in rows]
        except SQLAlchemyError as e:
            self._fail(db, "values", None, e)
        finally:
            db.close()

    def size(self) -> int:
        db: Session = self._session_factory()
        try:
            return db.scalar(select(func.count()).select_from(self._row_model))
        except SQLAlchemyError as e:
            self._fail(db, "size", None, e)
        finally:
            db.close()

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
