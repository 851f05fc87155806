from __future__ import annotations

import threading
import time
import uuid
from typing import Callable, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from zoo_service.core.configs import Settings, settings as default_settings
from zoo_service.core.db import Base, build_engine, build_session_factory
from zoo_service.core.errors import StorageError
from zoo_service.core.store import OrderedStore
from zoo_service.models.animal import Animal
from zoo_service.models.schema import AnimalRow, ZooRow
from zoo_service.models.zoo import Zoo
from zoo_service.utils.logging import get_logger

logger = get_logger(__name__)


def generate_id() -> str:
    return str(uuid.uuid4())


class ServiceContext:
    """
    Process-wide owner of the two entity stores.

    ``open`` allocates the engine and creates missing tables, ``close``
    disposes the engine. Repositories receive the context explicitly.

    Args:
        settings: Service settings; the database URL and ownership policy
            are read from here
        id_factory: Returns a fresh, statistically unique id
        clock: Returns the current time in nanoseconds
        engine: Pre-built engine, mostly for tests sharing one connection
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        id_factory: Callable[[], str] = generate_id,
        clock: Callable[[], int] = time.time_ns,
        engine: Optional[Engine] = None,
    ) -> None:
        self.settings = settings or default_settings
        self.id_factory = id_factory
        self.clock = clock
        # Serializes every mutating operation, reads stay lock-free
        self.write_lock = threading.RLock()
        self._engine = engine
        self._owns_engine = engine is None
        self._zoos: Optional[OrderedStore[Zoo]] = None
        self._animals: Optional[OrderedStore[Animal]] = None

    @property
    def enforce_zoo_ownership(self) -> bool:
        return self.settings.enforce_zoo_ownership

    @property
    def is_open(self) -> bool:
        return self._zoos is not None

    @property
    def zoos(self) -> OrderedStore[Zoo]:
        if self._zoos is None:
            raise StorageError("Storage is not open")
        return self._zoos

    @property
    def animals(self) -> OrderedStore[Animal]:
        if self._animals is None:
            raise StorageError("Storage is not open")
        return self._animals

    def open(self) -> "ServiceContext":
        if self.is_open:
            return self

        if self._engine is None:
            self._engine = build_engine(
                self.settings.database_url, echo=self.settings.sql_echo
            )

        try:
            Base.metadata.create_all(bind=self._engine)
        except SQLAlchemyError as e:
            logger.error(f"Failed to prepare storage: {e}")
            raise StorageError("Failed to prepare storage") from e

        session_factory = build_session_factory(self._engine)
        self._zoos = OrderedStore(session_factory, ZooRow, Zoo)
        self._animals = OrderedStore(session_factory, AnimalRow, Animal)

        logger.info(f"Service context opened on {self._engine.url!r}")
        return self

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Service context closed")
        if self._owns_engine:
            self._engine = None
        self._zoos = None
        self._animals = None

    def now(self) -> int:
        return self.clock()

    def __enter__(self) -> "ServiceContext":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
