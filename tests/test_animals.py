import pytest

from zoo_service.core.errors import NotFoundError, ValidationError
from zoo_service.services.animals import AnimalRepository


@pytest.fixture
def repo(context):
    return AnimalRepository(context)


def test_create_does_not_require_existing_zoo(repo, animal_payload):
    animal = repo.create(animal_payload(zoo_id="no-such-zoo"))

    assert animal.zoo_id == "no-such-zoo"
    assert animal.age == 5
    assert animal.updated_at is None
    assert repo.get_by_id(animal.id) == animal


@pytest.mark.parametrize("age", [0, -3])
def test_create_rejects_non_positive_age(repo, context, animal_payload, age):
    with pytest.raises(ValidationError, match="Age must be greater than zero"):
        repo.create(animal_payload(age=age))
    assert context.animals.size() == 0


@pytest.mark.parametrize("field", ["age", "animal_type", "name", "zoo_id"])
def test_create_rejects_missing_fields(repo, animal_payload, field):
    with pytest.raises(ValidationError):
        repo.create(animal_payload(**{field: None}))


def test_update_replaces_payload_fields(repo, animal_payload):
    animal = repo.create(animal_payload())

    updated = repo.update(
        animal.id, animal_payload(zoo_id="other", age=6, name="Leonard")
    )

    assert (updated.age, updated.name, updated.zoo_id) == (6, "Leonard", "other")
    assert updated.id == animal.id
    assert updated.created_at == animal.created_at
    assert updated.updated_at >= animal.created_at
    assert repo.get_by_id(animal.id) == updated


def test_update_validates_age(repo, animal_payload):
    animal = repo.create(animal_payload())

    with pytest.raises(ValidationError):
        repo.update(animal.id, animal_payload(age=0))
    assert repo.get_by_id(animal.id).age == 5


def test_update_missing(repo, animal_payload):
    with pytest.raises(NotFoundError, match="Animal with ID=nope not found."):
        repo.update("nope", animal_payload())


def test_delete_returns_prior_value(repo, animal_payload):
    animal = repo.create(animal_payload())

    assert repo.delete(animal.id) == animal
    with pytest.raises(NotFoundError):
        repo.delete(animal.id)


@pytest.mark.parametrize("age", [float("nan"), float("inf"), float("-inf")])
def test_create_rejects_non_finite_age(repo, context, animal_payload, age):
    with pytest.raises(ValidationError, match="Age must be greater than zero"):
        repo.create(animal_payload(age=age))
    assert context.animals.size() == 0


@pytest.mark.parametrize("age", [True, "5"])
def test_create_rejects_non_numeric_age(repo, context, animal_payload, age):
    with pytest.raises(ValidationError, match="Age must be a number"):
        repo.create(animal_payload(age=age))
    assert context.animals.size() == 0


def test_update_rejects_nan_age(repo, animal_payload):
    animal = repo.create(animal_payload())

    with pytest.raises(ValidationError):
        repo.update(animal.id, animal_payload(age=float("nan")))
    assert repo.get_by_id(animal.id).age == 5


def test_age_keeps_its_numeric_type(repo, animal_payload):
    whole = repo.create(animal_payload(age=5))
    fractional = repo.create(animal_payload(age=2.5))

    assert isinstance(repo.get_by_id(whole.id).age, int)
    assert repo.get_by_id(fractional.id).age == 2.5
