import math
from typing import Optional, Union

from zoo_service.core.context import ServiceContext
from zoo_service.core.errors import ValidationError
from zoo_service.models.animal import Animal, AnimalPayload
from zoo_service.models.zoo import Zoo, ZooPayload


def require_text(label: str, value: Optional[str]) -> None:
    if value is None or not str(value).strip():
        raise ValidationError(f"{label} is required")


def validate_zoo_payload(payload: ZooPayload) -> None:
    require_text("Name", payload.name)
    require_text("Location", payload.location)
    require_text("Image", payload.image)


def validate_animal_payload(payload: AnimalPayload) -> None:
    if payload.age is None:
        raise ValidationError("Age is required")
    if isinstance(payload.age, bool) or not isinstance(payload.age, (int, float)):
        raise ValidationError("Age must be a number")
    if not math.isfinite(payload.age) or payload.age <= 0:
        raise ValidationError("Age must be greater than zero")
    require_text("Animal type", payload.animal_type)
    require_text("Name", payload.name)
    require_text("Zoo ID", payload.zoo_id)


def next_timestamp(context: ServiceContext, record: Union[Zoo, Animal]) -> int:
    """Current time, clamped so a record's updated_at never moves backwards."""
    floor = record.updated_at if record.updated_at is not None else record.created_at
    return max(context.now(), floor)
