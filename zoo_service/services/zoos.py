from zoo_service.core.context import ServiceContext
from zoo_service.core.errors import AuthorizationError, NotFoundError
from zoo_service.models.zoo import Zoo, ZooPayload, new_zoo, updated_zoo
from zoo_service.services.rules import next_timestamp, validate_zoo_payload
from zoo_service.utils.logging import get_logger

logger = get_logger(__name__)


def zoo_not_found(zoo_id: str) -> NotFoundError:
    return NotFoundError(f"Zoo with ID={zoo_id} not found.")


class ZooRepository:
    """CRUD over Zoo records, including field validation and ownership checks."""

    def __init__(self, context: ServiceContext):
        self.context = context

    @property
    def store(self):
        return self.context.zoos

    def create(self, payload: ZooPayload, caller: str) -> Zoo:
        """
        Create a new zoo owned by ``caller``.

        Raises:
            ValidationError: name, location or image is missing or empty
        """
        validate_zoo_payload(payload)

        with self.context.write_lock:
            zoo = new_zoo(
                zoo_id=self.context.id_factory(),
                payload=payload,
                owner=caller,
                now=self.context.now(),
            )
            self.store.insert(zoo.id, zoo)

        logger.info(f"Created zoo {zoo.id} owned by {caller}")
        return zoo

    def get_by_id(self, zoo_id: str) -> Zoo:
        zoo = self.store.get(zoo_id)
        if zoo is None:
            logger.warning(f"Zoo with id {zoo_id} not found")
            raise zoo_not_found(zoo_id)
        return zoo

    def get_all(self) -> list[Zoo]:
        return self.store.values()

    def check_owner(self, zoo: Zoo, caller: str, action: str) -> None:
        """Raise AuthorizationError if ownership is enforced and ``caller`` is not the owner."""
        if not self.context.enforce_zoo_ownership:
            return
        if zoo.owner != caller:
            logger.warning(f"Caller {caller} denied {action} on zoo {zoo.id}")
            raise AuthorizationError(
                f"Only the owner of zoo with ID={zoo.id} may {action} it."
            )

    def update(self, zoo_id: str, payload: ZooPayload, caller: str) -> Zoo:
        """
        Replace name, location and image of an existing zoo.

        id, owner, animal_species and created_at are carried over unchanged.
        """
        validate_zoo_payload(payload)

        with self.context.write_lock:
            existing = self.get_by_id(zoo_id)
            self.check_owner(existing, caller, "update")
            zoo = updated_zoo(existing, payload, next_timestamp(self.context, existing))
            self.store.insert(zoo.id, zoo)

        logger.info(f"Updated zoo {zoo_id}")
        return zoo

    def delete(self, zoo_id: str, caller: str) -> Zoo:
        # Animals referencing this zoo are left in place
        with self.context.write_lock:
            existing = self.get_by_id(zoo_id)
            self.check_owner(existing, caller, "delete")
            self.store.remove(zoo_id)

        logger.info(f"Deleted zoo {zoo_id}")
        return existing
