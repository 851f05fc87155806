import itertools

import pytest

from zoo_service.core.configs import Settings
from zoo_service.core.context import ServiceContext
from zoo_service.models.animal import AnimalPayload
from zoo_service.models.zoo import ZooPayload

OWNER = "owner-principal"
STRANGER = "stranger-principal"


class FakeClock:
    """Deterministic nanosecond clock; ``set`` lets a test move it backwards."""

    def __init__(self, start: int = 1_000):
        self.current = start

    def __call__(self) -> int:
        self.current += 1
        return self.current

    def set(self, value: int) -> None:
        self.current = value


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'zoo.db'}")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter):04d}"


@pytest.fixture
def context(settings, clock, id_factory):
    ctx = ServiceContext(settings, id_factory=id_factory, clock=clock)
    with ctx:
        yield ctx


@pytest.fixture
def zoo_payload():
    return ZooPayload(name="Central Park Zoo", location="NYC", image="url")


@pytest.fixture
def animal_payload():
    def build(zoo_id: str = "zoo-ref", **overrides) -> AnimalPayload:
        fields = {"age": 5, "animal_type": "Lion", "name": "Leo", "zoo_id": zoo_id}
        fields.update(overrides)
        return AnimalPayload(**fields)

    return build
