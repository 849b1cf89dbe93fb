"""Conversion between results and plain dictionaries.

The dictionary shape is ``{"kind": "ok", "value": ...}`` for a success and
``{"kind": "err", "error": ...}`` for a failure. Payloads are passed through
as-is: choosing an encoding for them belongs to the embedding application.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, Literal, TypedDict

from pydantic import Field, TypeAdapter, ValidationError

from resultwire.errors import ShapeError
from resultwire.result import FAILURE_TAG, Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["FailureData", "ResultData", "SuccessData", "as_dict", "from_dict"]


class SuccessData(TypedDict):
    kind: Literal["ok"]
    value: Any


class FailureData(TypedDict):
    kind: Literal["err"]
    error: Any


ResultData = Annotated[SuccessData | FailureData, Field(discriminator="kind")]

_result_data_adapter: TypeAdapter[SuccessData | FailureData] = TypeAdapter(ResultData)


def as_dict(result: Result[Any, Any]) -> SuccessData | FailureData:
    """Return the plain-data form of ``result``."""
    if isinstance(result, Failure):
        return {"kind": result.kind, "error": result.error}
    return {"kind": result.kind, "value": result.value}


def from_dict(data: Mapping[str, Any]) -> Result[Any, Any]:
    """Rebuild a result from its plain-data form.

    Raises:
        ShapeError: ``data`` has no valid ``kind`` tag or lacks the payload
            field that tag requires.
    """
    try:
        validated = _result_data_adapter.validate_python(dict(data))
    except (ValidationError, TypeError, ValueError) as exc:
        raise ShapeError(
            f"Not a serialized result: {exc}",
            hint='Expected {"kind": "ok", "value": ...} or {"kind": "err", "error": ...}.',
        ) from exc
    if validated["kind"] == FAILURE_TAG:
        return Failure(validated["error"])
    return Success(validated["value"])
