from zoo_service.core.context import ServiceContext
from zoo_service.core.errors import ConflictError
from zoo_service.models.zoo import Zoo, with_species
from zoo_service.services.animals import AnimalRepository
from zoo_service.services.rules import next_timestamp
from zoo_service.services.zoos import ZooRepository
from zoo_service.utils.logging import get_logger

logger = get_logger(__name__)


class RelationshipManager:
    """
    Maintains the animal membership list stored on each zoo.

    The membership check and the write happen under the context's write
    lock, so two concurrent adds can never leave a duplicate id behind.
    """

    def __init__(self, context: ServiceContext):
        self.context = context
        self.zoos = ZooRepository(context)
        self.animals = AnimalRepository(context)

    def add_animal_to_zoo(self, animal_id: str, zoo_id: str, caller: str) -> Zoo:
        with self.context.write_lock:
            self.animals.get_by_id(animal_id)
            zoo = self.zoos.get_by_id(zoo_id)
            self.zoos.check_owner(zoo, caller, "add animals to")

            if animal_id in zoo.animal_species:
                logger.warning(f"Animal {animal_id} already listed in zoo {zoo_id}")
                raise ConflictError(f"Animal with ID={animal_id} is already in the zoo.")

            updated = with_species(
                zoo,
                zoo.animal_species + [animal_id],
                next_timestamp(self.context, zoo),
            )
            self.zoos.store.insert(zoo_id, updated)

        logger.info(f"Added animal {animal_id} to zoo {zoo_id}")
        return updated

    def remove_animal_from_zoo(self, animal_id: str, zoo_id: str, caller: str) -> Zoo:
        """
        Drop ``animal_id`` from the zoo's membership list.

        The animal record itself does not have to exist any more, which is
        how dangling ids left behind by animal deletion get cleaned up.
        """
        with self.context.write_lock:
            zoo = self.zoos.get_by_id(zoo_id)
            self.zoos.check_owner(zoo, caller, "remove animals from")

            if animal_id not in zoo.animal_species:
                logger.warning(f"Animal {animal_id} not listed in zoo {zoo_id}")
                raise ConflictError(f"Animal with ID={animal_id} is not in the zoo.")

            updated = with_species(
                zoo,
                [member for member in zoo.animal_species if member != animal_id],
                next_timestamp(self.context, zoo),
            )
            self.zoos.store.insert(zoo_id, updated)

        logger.info(f"Removed animal {animal_id} from zoo {zoo_id}")
        return updated
