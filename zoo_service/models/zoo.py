from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ZooPayload(BaseModel):
    """Caller-editable Zoo fields. Presence is checked by the repository."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    location: Optional[str] = None
    image: Optional[str] = None


class Zoo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    location: str
    image: str
    owner: str
    animal_species: list[str] = Field(default_factory=list)
    created_at: int
    updated_at: Optional[int] = None


def new_zoo(zoo_id: str, payload: ZooPayload, owner: str, now: int) -> Zoo:
    return Zoo(
        id=zoo_id,
        name=payload.name,
        location=payload.location,
        image=payload.image,
        owner=owner,
        animal_species=[],
        created_at=now,
        updated_at=None,
    )


def updated_zoo(existing: Zoo, payload: ZooPayload, now: int) -> Zoo:
    return Zoo(
        id=existing.id,
        name=payload.name,
        location=payload.location,
        image=payload.image,
        owner=existing.owner,
        animal_species=list(existing.animal_species),
        created_at=existing.created_at,
        updated_at=now,
    )


def with_species(existing: Zoo, animal_species: list[str], now: int) -> Zoo:
    """Copy of ``existing`` carrying a new membership list."""
    return Zoo(
        id=existing.id,
        name=existing.name,
        location=existing.location,
        image=existing.image,
        owner=existing.owner,
        animal_species=animal_species,
        created_at=existing.created_at,
        updated_at=now,
    )
