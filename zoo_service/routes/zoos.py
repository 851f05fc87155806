from fastapi import APIRouter, Depends

from zoo_service.models.zoo import ZooPayload
from zoo_service.routes.deps import get_caller, get_operations, respond
from zoo_service.services.operations import ZooOperations

router = APIRouter(prefix="/zoos", tags=["Zoos"])


@router.post("")
def create_zoo_route(
    payload: ZooPayload,
    caller: str = Depends(get_caller),
    operations: ZooOperations = Depends(get_operations),
):
    return respond(operations.create_zoo(payload, caller), success_status=201)


@router.get("")
def get_all_zoos_route(operations: ZooOperations = Depends(get_operations)):
    return respond(operations.get_all_zoos())


@router.get("/count")
def get_zoo_count_route(operations: ZooOperations = Depends(get_operations)):
    return respond(operations.get_zoo_count())


@router.get("/{zoo_id}")
def get_zoo_route(zoo_id: str, operations: ZooOperations = Depends(get_operations)):
    return respond(operations.get_zoo(zoo_id))


@router.put("/{zoo_id}")
def update_zoo_route(
    zoo_id: str,
    payload: ZooPayload,
    caller: str = Depends(get_caller),
    operations: ZooOperations = Depends(get_operations),
):
    return respond(operations.update_zoo(zoo_id, payload, caller))


@router.delete("/{zoo_id}")
def delete_zoo_route(
    zoo_id: str,
    caller: str = Depends(get_caller),
    operations: ZooOperations = Depends(get_operations),
):
    return respond(operations.delete_zoo(zoo_id, caller))


@router.get("/{zoo_id}/owner")
def get_zoo_owner_route(zoo_id: str, operations: ZooOperations = Depends(get_operations)):
    return respond(operations.get_zoo_owner(zoo_id))


@router.get("/{zoo_id}/animals")
def get_animals_in_zoo_route(
    zoo_id: str, operations: ZooOperations = Depends(get_operations)
):
    return respond(operations.get_animals_in_zoo(zoo_id))


@router.get("/{zoo_id}/animals/count")
def get_animal_count_in_zoo_route(
    zoo_id: str, operations: ZooOperations = Depends(get_operations)
):
    return respond(operations.get_animal_count_in_zoo(zoo_id))


@router.post("/{zoo_id}/animals/{animal_id}")
def add_animal_to_zoo_route(
    zoo_id: str,
    animal_id: str,
    caller: str = Depends(get_caller),
    operations: ZooOperations = Depends(get_operations),
):
    return respond(operations.add_animal_to_zoo(animal_id, zoo_id, caller))


@router.delete("/{zoo_id}/animals/{animal_id}")
def delete_animal_from_zoo_route(
    zoo_id: str,
    animal_id: str,
    caller: str = Depends(get_caller),
    operations: ZooOperations = Depends(get_operations),
):
    return respond(operations.delete_animal_from_zoo(animal_id, zoo_id, caller))
