from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AnimalPayload(BaseModel):
    """Caller-supplied Animal fields. Presence is checked by the repository."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Left untyped so bools, strings and non-finite numbers reach the age check
    age: Any = None
    animal_type: Optional[str] = None
    name: Optional[str] = None
    zoo_id: Optional[str] = None


class Animal(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    age: Union[int, float]
    animal_type: str
    name: str
    # Back reference only, the zoo's animal_species list is authoritative
    zoo_id: str
    created_at: int
    updated_at: Optional[int] = None


def new_animal(animal_id: str, payload: AnimalPayload, now: int) -> Animal:
    return Animal(
        id=animal_id,
        age=payload.age,
        animal_type=payload.animal_type,
        name=payload.name,
        zoo_id=payload.zoo_id,
        created_at=now,
        updated_at=None,
    )


def updated_animal(existing: Animal, payload: AnimalPayload, now: int) -> Animal:
    return Animal(
        id=existing.id,
        age=payload.age,
        animal_type=payload.animal_type,
        name=payload.name,
        zoo_id=payload.zoo_id,
        created_at=existing.created_at,
        updated_at=now,
    )
