from zoo_service.core.context import ServiceContext
from zoo_service.core.errors import NotFoundError
from zoo_service.models.animal import Animal, AnimalPayload, new_animal, updated_animal
from zoo_service.services.rules import next_timestamp, validate_animal_payload
from zoo_service.utils.logging import get_logger

logger = get_logger(__name__)


def animal_not_found(animal_id: str) -> NotFoundError:
    return NotFoundError(f"Animal with ID={animal_id} not found.")


class AnimalRepository:
    """
    CRUD over Animal records.

    ``zoo_id`` is stored as given: the referenced zoo is not required to
    exist, and membership is tracked on the zoo side only.
    """

    def __init__(self, context: ServiceContext):
        self.context = context

    @property
    def store(self):
        return self.context.animals

    def create(self, payload: AnimalPayload) -> Animal:
        """
        Create a new animal record.

        Args:
            payload: age, animal type, name and zoo id of the animal

        Returns:
            Animal: The persisted record, with ``updated_at`` unset

        Raises:
            ValidationError: a field is missing or empty, or age is not positive
        """
        validate_animal_payload(payload)

        with self.context.write_lock:
            animal = new_animal(
                animal_id=self.context.id_factory(),
                payload=payload,
                now=self.context.now(),
            )
            self.store.insert(animal.id, animal)

        logger.info(f"Created animal {animal.id} ({animal.animal_type}) for zoo {animal.zoo_id}")
        return animal

    def get_by_id(self, animal_id: str) -> Animal:
        animal = self.store.get(animal_id)
        if animal is None:
            logger.warning(f"Animal with id {animal_id} not found")
            raise animal_not_found(animal_id)
        return animal

    def get_all(self) -> list[Animal]:
        return self.store.values()

    def update(self, animal_id: str, payload: AnimalPayload) -> Animal:
        validate_animal_payload(payload)

        with self.context.write_lock:
            existing = self.get_by_id(animal_id)
            animal = updated_animal(
                existing, payload, next_timestamp(self.context, existing)
            )
            self.store.insert(animal.id, animal)

        logger.info(f"Updated animal {animal_id}")
        return animal

    def delete(self, animal_id: str) -> Animal:
        # Any zoo still listing this id keeps the dangling reference
        with self.context.write_lock:
            existing = self.get_by_id(animal_id)
            self.store.remove(animal_id)

        logger.info(f"Deleted animal {animal_id}")
        return existing
