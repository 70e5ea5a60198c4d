# =============================================================================
# core/models/result.py - Success/Failure Result Type
# =============================================================================
# Every people operation returns a Result:
# - Success(value): the operation worked, `value` is a pydantic model
# - Failure(message): the operation failed, `message` says why
#
# The JSON form flattens the success payload next to the "result" tag:
#   Success(PersonId(id=5))        -> {"result": "success", "id": 5}
#   Success(Empty())               -> {"result": "success"}
#   Failure("Person not found.")   -> {"result": "failure", "message": "Person not found."}
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying the operation's return value."""
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def to_json(self) -> dict[str, Any]:
        """
        Encode as a flat JSON object.

        The payload's fields are merged into the same object as the
        "result" tag, using their wire aliases. Fields set to None are
        left out rather than written as null.
        """
        payload = self.value.model_dump(mode="json", by_alias=True, exclude_none=True)
        return {"result": "success", **payload}


@dataclass(frozen=True)
class Failure:
    """Failed outcome with a human-readable message."""
    message: str

    @property
    def is_success(self) -> bool:
        return False

    def to_json(self) -> dict[str, Any]:
        return {"result": "failure", "message": self.message}


Result = Union[Success[T], Failure]
