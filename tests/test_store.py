import pytest
from sqlalchemy import create_engine

from zoo_service.core.context import ServiceContext
from zoo_service.core.db import Base
from zoo_service.core.errors import StorageError
from zoo_service.models.schema import ZooRow
from zoo_service.models.zoo import Zoo


def make_zoo(zoo_id: str, name: str = "Zoo") -> Zoo:
    return Zoo(
        id=zoo_id,
        name=name,
        location="Somewhere",
        image="img",
        owner="owner",
        created_at=1,
    )


def test_insert_returns_previous_value(context):
    store = context.zoos

    assert store.insert("a", make_zoo("a", "First")) is None
    previous = store.insert("a", make_zoo("a", "Second"))

    assert previous.name == "First"
    assert store.get("a").name == "Second"
    assert store.size() == 1


def test_get_missing_key_returns_none(context):
    assert context.zoos.get("missing") is None
    assert "missing" not in context.zoos


def test_remove_returns_removed_value(context):
    store = context.zoos
    store.insert("a", make_zoo("a"))

    removed = store.remove("a")

    assert removed.id == "a"
    assert store.get("a") is None
    assert store.remove("a") is None


def test_values_are_in_key_order(context):
    store = context.zoos
    for key in ["c", "a", "b"]:
        store.insert(key, make_zoo(key))

    assert [zoo.id for zoo in store.values()] == ["a", "b", "c"]


def test_stores_do_not_share_keys(context):
    context.zoos.insert("shared", make_zoo("shared"))

    assert context.animals.get("shared") is None
    assert context.animals.size() == 0
    assert context.zoos.namespace != context.animals.namespace


def test_round_trip_keeps_optional_timestamp_absent(context):
    context.zoos.insert("a", make_zoo("a"))

    stored = context.zoos.get("a")

    assert stored.updated_at is None
    assert stored.animal_species == []


def test_records_survive_restart(settings):
    with ServiceContext(settings) as first:
        first.zoos.insert("a", make_zoo("a", "Persistent"))

    with ServiceContext(settings) as second:
        assert second.zoos.get("a").name == "Persistent"
        assert second.zoos.size() == 1


def test_missing_table_raises_storage_error(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'broken.db'}")
    ctx = ServiceContext(engine=engine).open()
    Base.metadata.drop_all(bind=engine)

    with pytest.raises(StorageError):
        ctx.zoos.insert("a", make_zoo("a"))
    with pytest.raises(StorageError):
        ctx.zoos.size()

    ctx.close()


def test_closed_context_refuses_store_access(settings):
    ctx = ServiceContext(settings)

    with pytest.raises(StorageError, match="Storage is not open"):
        ctx.zoos


def test_unreadable_record_raises_storage_error(context):
    db = context.zoos._session_factory()
    db.add(ZooRow(id="bad", value={"id": "bad"}))
    db.commit()
    db.close()

    with pytest.raises(StorageError, match="Unreadable record"):
        context.zoos.get("bad")
    with pytest.raises(StorageError):
        context.zoos.values()
