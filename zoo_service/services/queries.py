from typing import Union

from zoo_service.core.context import ServiceContext
from zoo_service.models.animal import Animal
from zoo_service.services.animals import AnimalRepository
from zoo_service.services.zoos import ZooRepository
from zoo_service.utils.logging import get_logger

logger = get_logger(__name__)


class QueryFacade:
    """Read-only lookups composed from the zoo and animal repositories."""

    def __init__(self, context: ServiceContext):
        self.zoos = ZooRepository(context)
        self.animals = AnimalRepository(context)

    def animals_in_zoo(self, zoo_id: str) -> list[Animal]:
        """
        Resolve the zoo's membership list to animal records.

        Ids that no longer resolve (the animal was deleted) are skipped.
        """
        zoo = self.zoos.get_by_id(zoo_id)

        found = []
        for animal_id in zoo.animal_species:
            animal = self.animals.store.get(animal_id)
            if animal is None:
                logger.debug(f"Zoo {zoo_id} lists missing animal {animal_id}")
                continue
            found.append(animal)
        return found

    def zoo_owner(self, zoo_id: str) -> str:
        return self.zoos.get_by_id(zoo_id).owner

    def animal_age(self, animal_id: str) -> Union[int, float]:
        return self.animals.get_by_id(animal_id).age

    def animal_count_in_zoo(self, zoo_id: str) -> int:
        # Counts listed ids, including any that no longer resolve
        return len(self.zoos.get_by_id(zoo_id).animal_species)

    def zoo_count(self) -> int:
        return self.zoos.store.size()

    def animal_count(self) -> int:
        return self.animals.store.size()
