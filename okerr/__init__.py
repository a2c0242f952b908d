"""
Result type for fallible operations.

This package provides a two-variant Result (``Ok`` / ``Err``) together with
constructors, strict narrowing predicates for untyped (e.g. JSON-decoded)
values, extraction helpers, combinators and a wire codec.
"""

from okerr.codec import ResultField, from_json, from_wire, to_json, to_wire
from okerr.exceptions import NonResultError, ResultError, UnwrapError, UnwrapOkError
from okerr.result import (
    ERR_KEY,
    OK_KEY,
    Err,
    Ok,
    Result,
    err,
    expect,
    if_ok,
    if_ok_or,
    is_err,
    is_ok,
    is_result,
    map_err,
    map_result,
    narrow,
    ok,
    render,
    try_unwrap,
    try_unwrap_err,
    unwrap,
    unwrap_err,
    unwrap_or,
)

__all__ = [
    "Ok",
    "Err",
    "Result",
    "OK_KEY",
    "ERR_KEY",
    "ok",
    "err",
    "is_result",
    "is_ok",
    "is_err",
    "narrow",
    "unwrap",
    "unwrap_err",
    "expect",
    "unwrap_or",
    "try_unwrap",
    "try_unwrap_err",
    "map_result",
    "map_err",
    "if_ok",
    "if_ok_or",
    "render",
    "to_wire",
    "from_wire",
    "to_json",
    "from_json",
    "ResultField",
    "ResultError",
    "NonResultError",
    "UnwrapError",
    "UnwrapOkError",
]
