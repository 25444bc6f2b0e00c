"""Coercion capability: pluggable conversion of loosely-typed input to T."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

import msgspec

from optional_value._config import get_config
from optional_value._logging import get_logger

__all__ = ["Coercer", "FunctionCoercer", "TypeCoercer", "coerce_to"]

logger = get_logger(__name__)


@runtime_checkable
class Coercer[T](Protocol):
    """Anything that can convert an arbitrary value into a T.

    Failures are raised by the coercer itself and reach the caller unmodified.
    """

    def coerce(self, value: Any) -> T: ...


class TypeCoercer[T](msgspec.Struct, frozen=True, gc=False):
    """Coercer backed by msgspec's type conversion.

    Examples:
        >>> TypeCoercer(int).coerce(3)
        3
        >>> TypeCoercer(int, strict=False).coerce("3")
        3
        >>> TypeCoercer(list[str]).coerce(("a", "b"))
        ['a', 'b']
    """

    target: Any
    strict: bool | None = None

    def coerce(self, value: Any) -> T:
        """Convert value to the target type.

        Raises:
            msgspec.ValidationError: If value cannot be converted.
        """
        strict = get_config().strict_coercion if self.strict is None else self.strict
        logger.debug("coercing value", target=repr(self.target), strict=strict)
        return msgspec.convert(value, type=self.target, strict=strict)


class FunctionCoercer[T](msgspec.Struct, frozen=True, gc=False):
    """Adapt a plain callable to the Coercer protocol.

    Examples:
        >>> FunctionCoercer(str.upper).coerce("foo")
        'FOO'
    """

    func: Callable[[Any], T]

    def coerce(self, value: Any) -> T:
        logger.debug("coercing value", target=getattr(self.func, "__name__", repr(self.func)))
        return self.func(value)


def coerce_to[T](target: type[T], *, strict: bool | None = None) -> TypeCoercer[T]:
    """Shorthand for TypeCoercer(target, strict)."""
    return TypeCoercer(target, strict)
