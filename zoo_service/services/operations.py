from typing import Callable, TypeVar, Union

from zoo_service.core.context import ServiceContext
from zoo_service.core.errors import ZooServiceError
from zoo_service.models.animal import Animal, AnimalPayload
from zoo_service.models.result import Err, Ok, Result
from zoo_service.models.zoo import Zoo, ZooPayload
from zoo_service.services.animals import AnimalRepository
from zoo_service.services.queries import QueryFacade
from zoo_service.services.relationships import RelationshipManager
from zoo_service.services.zoos import ZooRepository

T = TypeVar("T")


def attempt(action: Callable[[], T]) -> Result[T]:
    """Run ``action`` and fold service errors into an ``Err``."""
    try:
        return Ok(action())
    except ZooServiceError as e:
        return Err(kind=e.kind, message=e.message)


class ZooOperations:
    """
    The exposed operation surface of the zoo service.

    Every method returns ``Ok`` or ``Err``; service errors never propagate
    to the caller. ``caller`` is the already-authenticated principal.
    """

    def __init__(self, context: ServiceContext):
        self.context = context
        self.zoos = ZooRepository(context)
        self.animals = AnimalRepository(context)
        self.relationships = RelationshipManager(context)
        self.queries = QueryFacade(context)

    # Zoos

    def create_zoo(self, payload: ZooPayload, caller: str) -> Result[Zoo]:
        return attempt(lambda: self.zoos.create(payload, caller))

    def get_zoo(self, zoo_id: str) -> Result[Zoo]:
        return attempt(lambda: self.zoos.get_by_id(zoo_id))

    def get_all_zoos(self) -> Result[list[Zoo]]:
        return attempt(self.zoos.get_all)

    def update_zoo(self, zoo_id: str, payload: ZooPayload, caller: str) -> Result[Zoo]:
        return attempt(lambda: self.zoos.update(zoo_id, payload, caller))

    def delete_zoo(self, zoo_id: str, caller: str) -> Result[Zoo]:
        return attempt(lambda: self.zoos.delete(zoo_id, caller))

    # Animals

    def create_animal(self, payload: AnimalPayload) -> Result[Animal]:
        return attempt(lambda: self.animals.create(payload))

    def get_animal(self, animal_id: str) -> Result[Animal]:
        return attempt(lambda: self.animals.get_by_id(animal_id))

    def get_all_animals(self) -> Result[list[Animal]]:
        return attempt(self.animals.get_all)

    def update_animal(self, animal_id: str, payload: AnimalPayload) -> Result[Animal]:
        return attempt(lambda: self.animals.update(animal_id, payload))

    def delete_animal(self, animal_id: str) -> Result[Animal]:
        return attempt(lambda: self.animals.delete(animal_id))

    # Membership

    def add_animal_to_zoo(self, animal_id: str, zoo_id: str, caller: str) -> Result[Zoo]:
        return attempt(
            lambda: self.relationships.add_animal_to_zoo(animal_id, zoo_id, caller)
        )

    def delete_animal_from_zoo(
        self, animal_id: str, zoo_id: str, caller: str
    ) -> Result[Zoo]:
        return attempt(
            lambda: self.relationships.remove_animal_from_zoo(animal_id, zoo_id, caller)
        )

    # Queries

    def get_animals_in_zoo(self, zoo_id: str) -> Result[list[Animal]]:
        return attempt(lambda: self.queries.animals_in_zoo(zoo_id))

    def get_zoo_owner(self, zoo_id: str) -> Result[str]:
        return attempt(lambda: self.queries.zoo_owner(zoo_id))

    def get_animal_count_in_zoo(self, zoo_id: str) -> Result[int]:
        return attempt(lambda: self.queries.animal_count_in_zoo(zoo_id))

    def get_animal_age(self, animal_id: str) -> Result[Union[int, float]]:
        return attempt(lambda: self.queries.animal_age(animal_id))

    def get_zoo_count(self) -> Result[int]:
        return attempt(self.queries.zoo_count)

    def get_animal_count(self) -> Result[int]:
        return attempt(self.queries.animal_count)
