from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union


T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def to_response(self) -> dict:
        return {"status": "success", "data": _jsonable(self.value)}


@dataclass(frozen=True)
class Err:
    kind: str
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    def to_response(self) -> dict:
        return {"status": "error", "kind": self.kind, "message": self.message}


Result = Union[Ok[T], Err]


def _jsonable(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_jsonable(item) for item in value]
    return value
