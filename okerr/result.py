"""Result type for functional error handling.

A Result is either ``Ok`` carrying a success payload or ``Err`` carrying a
failure payload. In memory the two variants are distinct classes; on the wire
a Result is a mapping with exactly one key, ``"Ok"`` or ``"Err"``, and no
explicit tag. Every operation here accepts either form and narrows it with
the same strict-arity rule, so a mapping carrying any extra key is never
mistaken for a Result.

Usage:
    from okerr import err, map_result, ok, unwrap

    unwrap(map_result(ok(123), lambda x: x * 2))  # 246
    unwrap(err("error message"))  # raises UnwrapError
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeGuard, TypeVar, Union

from pydantic_core import to_json

from okerr.config import get_settings
from okerr.exceptions import NonResultError, UnwrapError, UnwrapOkError

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Map target type
R = TypeVar("R")  # Callback return type

OK_KEY = "Ok"
ERR_KEY = "Err"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Any:
        """Raise, because this is Ok."""
        return unwrap_err(self)

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        """Transform the success value."""
        return Ok(func(self.value))

    def map_err(self, func: Callable[[Any], Any]) -> "Ok[T]":
        """Transform the error value (does nothing for Ok)."""
        return self

    def to_wire(self) -> dict[str, Any]:
        return encode_nested(self)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing a failure payload of any type."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raise UnwrapError, because this is Err."""
        return unwrap(self)

    def unwrap_err(self) -> E:
        return self.error

    def expect(self, message: str) -> Any:
        """Raise UnwrapError prefixed with ``message``, because this is Err."""
        return expect(self, message)

    def unwrap_or(self, default: U) -> U:
        return default

    def map(self, func: Callable[[Any], Any]) -> "Err[E]":
        """Transform the success value (does nothing for Err)."""
        return self

    def map_err(self, func: Callable[[E], U]) -> "Err[U]":
        """Transform the error value."""
        return Err(func(self.error))

    def to_wire(self) -> dict[str, Any]:
        return encode_nested(self)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for clearer function signatures
Result = Union[Ok[T], Err[E]]


# ============================================================================
# Constructors
# ============================================================================


def ok(value: T) -> Ok[T]:
    """Create an Ok result wrapping ``value``."""
    return Ok(value)


def err(value: E) -> Err[E]:
    """Create an Err result wrapping ``value``."""
    return Err(value)


# ============================================================================
# Predicates
# ============================================================================


def _wire_key(value: object) -> str | None:
    """Return the variant key of a wire mapping, or None if it is not one.

    A wire mapping has exactly one key and that key is OK_KEY or ERR_KEY.
    """
    if not isinstance(value, Mapping) or len(value) != 1:
        return None

    key = next(iter(value))
    if key == OK_KEY or key == ERR_KEY:
        return key
    return None


def is_ok(value: object) -> TypeGuard[Ok[Any] | Mapping[str, Any]]:
    """Check if value is an Ok result (instance or ``{"Ok": ...}`` mapping).

    A wire mapping has no ``.value`` attribute; use ``narrow`` for typed access.
    """
    if isinstance(value, Ok):
        return True
    return _wire_key(value) == OK_KEY


def is_err(value: object) -> TypeGuard[Err[Any] | Mapping[str, Any]]:
    """Check if value is an Err result (instance or ``{"Err": ...}`` mapping).

    A wire mapping has no ``.error`` attribute; use ``narrow`` for typed access.
    """
    if isinstance(value, Err):
        return True
    return _wire_key(value) == ERR_KEY


def is_result(value: object) -> bool:
    """Check if value is a Result of either variant."""
    return is_ok(value) or is_err(value)


def narrow(value: object) -> Result[Any, Any] | None:
    """Narrow an untyped value to a Result.

    Args:
        value: Anything, typically data decoded from JSON

    Returns:
        ``value`` itself if it is already Ok or Err, a new Ok/Err built from a
        wire mapping, or None if ``value`` is not a Result
    """
    if isinstance(value, (Ok, Err)):
        return value

    key = _wire_key(value)
    if key == OK_KEY:
        return Ok(value[OK_KEY])  # type: ignore[index]
    if key == ERR_KEY:
        return Err(value[ERR_KEY])  # type: ignore[index]
    return None


# ============================================================================
# Rendering
# ============================================================================


def encode_nested(value: Any) -> Any:
    """Replace every Result inside ``value`` with its wire mapping.

    Raises:
        ValueError: If ``value`` contains itself
    """
    return _encode(value, set())


def _encode(value: Any, active: set[int]) -> Any:
    if not isinstance(value, (Ok, Err, Mapping, list, tuple)):
        return value

    # ids of the containers on the current path, so shared children are fine
    if id(value) in active:
        raise ValueError(f"Circular reference in {type(value).__name__} payload")
    active.add(id(value))
    try:
        if isinstance(value, Ok):
            return {OK_KEY: _encode(value.value, active)}
        if isinstance(value, Err):
            return {ERR_KEY: _encode(value.error, active)}
        if isinstance(value, Mapping):
            return {key: _encode(item, active) for key, item in value.items()}
        return [_encode(item, active) for item in value]
    finally:
        active.discard(id(value))


def render(value: Any) -> str:
    """Render a value as JSON text for inclusion in error messages.

    Values JSON cannot express (exceptions, arbitrary objects, self-referencing
    containers) are rendered with ``repr``. Output is truncated to
    ``Settings.render_max_length``.

    Args:
        value: Payload or raw input to render

    Returns:
        JSON text
    """
    settings = get_settings()

    try:
        text = to_json(
            encode_nested(value), indent=settings.render_indent, fallback=repr
        ).decode()
    except ValueError as e:  # includes PydanticSerializationError
        logger.debug(f"JSON rendering failed, using repr: {e}")
        text = repr(value)

    max_length = settings.render_max_length
    if max_length and len(text) > max_length:
        text = text[:max_length] + "..."
    return text


# ============================================================================
# Extraction
# ============================================================================


def unwrap(result: Any) -> Any:
    """Retrieve the value from an Ok result.

    Args:
        result: Result to unwrap the value from

    Returns:
        The success payload

    Raises:
        NonResultError: If ``result`` is not a Result
        UnwrapError: If ``result`` is an Err result
    """
    narrowed = narrow(result)

    if narrowed is None:
        logger.debug(f"Unwrapping a non-result value of type {type(result).__name__}")
        raise NonResultError(f"Unwrapping a non-result value: {render(result)}", result)

    if isinstance(narrowed, Err):
        logger.debug("Unwrapping an error result")
        error = UnwrapError(
            f"Unwrapping an error result: {render(narrowed.error)}", narrowed.error
        )
        if isinstance(narrowed.error, BaseException):
            raise error from narrowed.error
        raise error

    return narrowed.value


def unwrap_err(result: Any) -> Any:
    """Retrieve the error from an Err result.

    Raises:
        NonResultError: If ``result`` is not a Result
        UnwrapOkError: If ``result`` is an Ok result
    """
    narrowed = narrow(result)

    if narrowed is None:
        logger.debug(f"Unwrapping a non-result value of type {type(result).__name__}")
        raise NonResultError(f"Unwrapping a non-result value: {render(result)}", result)

    if isinstance(narrowed, Ok):
        logger.debug("Unwrapping an ok result")
        raise UnwrapOkError(f"Unwrapping an ok result: {render(narrowed.value)}", narrowed.value)

    return narrowed.error


def expect(result: Any, message: str) -> Any:
    """Retrieve the value from an Ok result, failing with a custom message.

    Args:
        result: Result to unwrap the value from
        message: Prefix for the raised error message

    Returns:
        The success payload

    Raises:
        NonResultError: ``"<message>: Expecting result from a non-result value: ..."``
        UnwrapError: ``"<message>: <rendered error>"``
    """
    narrowed = narrow(result)

    if narrowed is None:
        logger.debug(f"{message}: expecting result from {type(result).__name__}")
        raise NonResultError(
            f"{message}: Expecting result from a non-result value: {render(result)}", result
        )

    if isinstance(narrowed, Err):
        logger.debug(f"{message}: expecting result from an error result")
        error = UnwrapError(f"{message}: {render(narrowed.error)}", narrowed.error)
        if isinstance(narrowed.error, BaseException):
            raise error from narrowed.error
        raise error

    return narrowed.value


def unwrap_or(result: Any, default: Any) -> Any:
    """Retrieve the value from an Ok result, or ``default`` for anything else."""
    narrowed = narrow(result)
    if isinstance(narrowed, Ok):
        return narrowed.value
    return default


def try_unwrap(result: Any) -> Any | None:
    """Retrieve the value from an Ok result, or None for anything else."""
    return unwrap_or(result, None)


def try_unwrap_err(result: Any) -> Any | None:
    """Retrieve the error from an Err result, or None for anything else."""
    narrowed = narrow(result)
    if isinstance(narrowed, Err):
        return narrowed.error
    return None


# ============================================================================
# Transformation
# ============================================================================


def map_result(result: Any, fn: Callable[[Any], U]) -> Any:
    """Map an Ok result to a new value.

    Args:
        result: Result to map
        fn: Mapping function, called with the success payload

    Returns:
        ``Ok(fn(value))`` for an Ok result, otherwise ``result`` itself
    """
    narrowed = narrow(result)
    if isinstance(narrowed, Ok):
        return Ok(fn(narrowed.value))
    return result


def map_err(result: Any, fn: Callable[[Any], U]) -> Any:
    """Map an Err result to a new error.

    Args:
        result: Result to map
        fn: Mapping function, called with the failure payload

    Returns:
        ``Err(fn(error))`` for an Err result, otherwise ``result`` itself
    """
    narrowed = narrow(result)
    if isinstance(narrowed, Err):
        return Err(fn(narrowed.error))
    return result


# ============================================================================
# Conditional execution
# ============================================================================


def if_ok(value: Any, fn: Callable[[Any], R]) -> R | None:
    """Run ``fn`` with the success payload if ``value`` is an Ok result.

    The return value of ``fn`` is passed through, so an async ``fn`` yields a
    coroutine for the caller to await.
    """
    narrowed = narrow(value)
    if isinstance(narrowed, Ok):
        return fn(narrowed.value)
    return None


def if_ok_or(value: Any, ok_fn: Callable[[Any], R], err_fn: Callable[[Any], R]) -> R:
    """Run ``ok_fn`` for an Ok result, otherwise ``err_fn``.

    ``err_fn`` receives the failure payload of an Err result, or the raw value
    when ``value`` is not a Result at all.
    """
    narrowed = narrow(value)
    if isinstance(narrowed, Ok):
        return ok_fn(narrowed.value)
    if isinstance(narrowed, Err):
        return err_fn(narrowed.error)
    return err_fn(value)
