from fastapi import APIRouter, Depends

from zoo_service.models.animal import AnimalPayload
from zoo_service.routes.deps import get_operations, respond
from zoo_service.services.operations import ZooOperations

router = APIRouter(prefix="/animals", tags=["Animals"])


@router.post("")
def create_animal_route(
    payload: AnimalPayload, operations: ZooOperations = Depends(get_operations)
):
    return respond(operations.create_animal(payload), success_status=201)


@router.get("")
def get_all_animals_route(operations: ZooOperations = Depends(get_operations)):
    return respond(operations.get_all_animals())


@router.get("/count")
def get_animal_count_route(operations: ZooOperations = Depends(get_operations)):
    return respond(operations.get_animal_count())


@router.get("/{animal_id}")
def get_animal_route(animal_id: str, operations: ZooOperations = Depends(get_operations)):
    return respond(operations.get_animal(animal_id))


@router.put("/{animal_id}")
def update_animal_route(
    animal_id: str,
    payload: AnimalPayload,
    operations: ZooOperations = Depends(get_operations),
):
    return respond(operations.update_animal(animal_id, payload))


@router.delete("/{animal_id}")
def delete_animal_route(
    animal_id: str, operations: ZooOperations = Depends(get_operations)
):
    return respond(operations.delete_animal(animal_id))


@router.get("/{animal_id}/age")
def get_animal_age_route(
    animal_id: str, operations: ZooOperations = Depends(get_operations)
):
    return respond(operations.get_animal_age(animal_id))
