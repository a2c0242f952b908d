"""Wire encoding for Result values.

A Result travels as a mapping with exactly one key naming the active variant:

    {"Ok": 123}
    {"Err": "error message"}

Decoding applies the same strict-arity rule as ``is_ok``/``is_err``: a
mapping with both keys, extra keys or no keys is rejected.
"""

import logging
from typing import Annotated, Any

import pydantic_core
from pydantic import PlainSerializer, PlainValidator

from okerr.exceptions import NonResultError
from okerr.result import Result, encode_nested, narrow, render

logger = logging.getLogger(__name__)


def to_wire(result: Result[Any, Any]) -> dict[str, Any]:
    """Encode a Result as its single-key wire mapping.

    Results nested inside the payload are encoded as well.

    Raises:
        NonResultError: If ``result`` is not a Result
    """
    narrowed = narrow(result)
    if narrowed is None:
        raise NonResultError(f"Encoding a non-result value: {render(result)}", result)
    return encode_nested(narrowed)


def from_wire(data: Any) -> Result[Any, Any]:
    """Decode a wire mapping into Ok or Err.

    Payloads are kept as decoded; nested wire mappings stay plain mappings
    and can be narrowed on their own.

    Raises:
        NonResultError: If ``data`` does not have the shape of a Result
    """
    narrowed = narrow(data)
    if narrowed is None:
        logger.debug(f"Rejected non-result wire value of type {type(data).__name__}")
        raise NonResultError(f"Decoding a non-result value: {render(data)}", data)
    return narrowed


def to_json(result: Result[Any, Any], indent: int | None = None) -> str:
    """Serialize a Result to JSON text."""
    return pydantic_core.to_json(to_wire(result), indent=indent).decode()


def from_json(data: str | bytes) -> Result[Any, Any]:
    """Deserialize JSON text into a Result.

    Raises:
        ValueError: If ``data`` is not valid JSON
        NonResultError: If the decoded value is not a Result
    """
    return from_wire(pydantic_core.from_json(data))


def _validate_field(value: Any) -> Result[Any, Any]:
    try:
        return from_wire(value)
    except NonResultError as e:
        raise ValueError(str(e)) from e


# Pydantic field type carrying a Result in wire shape:
#
#     class Envelope(BaseModel):
#         outcome: ResultField
ResultField = Annotated[
    Any,
    PlainValidator(_validate_field),
    PlainSerializer(to_wire),
]
