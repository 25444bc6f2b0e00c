"""Optional type: Present[T] | EmptyType for values that may be absent."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, NoReturn, TypeIs

import msgspec

from optional_value._logging import get_logger
from optional_value._render import render
from optional_value.coercion import Coercer
from optional_value.errors import NoSuchElementError

__all__ = [
    "EmptyType",
    "Optional",
    "Present",
    "empty",
    "of",
    "of_nullable",
    "of_optional_key",
]

logger = get_logger(__name__)


def _no_value(operation: str) -> NoReturn:
    logger.debug("no value present", operation=operation)
    raise NoSuchElementError()


class Present[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Optional holding a value of type T.

    A Present built directly (or with ``of``) may hold None. Such an
    instance still reports ``is_present()`` but refuses to hand the value
    out through ``get()`` and renders as empty.

    Examples:
        >>> opt = of("foobarbazbiz")
        >>> opt.filter(lambda v: "baz" in v).map(lambda v: v[:3]).get()
        'foo'
        >>> str(of(["foo", "bar"]))
        'Optional[[foo, bar]]'
        >>> of(None).is_present()
        True
    """

    value: T

    def is_present(self) -> TypeIs[Present[T]]:
        """Return True since this is Present.

        This method provides type narrowing - after checking is_present(),
        the type checker knows the optional is Present[T].
        """
        return True

    def is_empty(self) -> TypeIs[EmptyType]:
        """Return False since this is Present."""
        return False

    def get(self) -> T:
        """Return the contained value.

        Raises:
            NoSuchElementError: If the contained value is None.
        """
        if self.value is None:
            _no_value("get")
        return self.value

    def if_present(self, action: Callable[[T], object]) -> None:
        """Call action with the contained value."""
        action(self.value)

    def if_present_or_else(
        self, action: Callable[[T], object], fallback: Callable[[None], object]  # noqa: ARG002
    ) -> None:
        """Call action with the contained value; the fallback is not used."""
        action(self.value)

    def apply(self, action: Callable[[T], object]) -> None:
        """Same as if_present()."""
        action(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Present[T] | EmptyType:
        """Keep self if predicate(value) holds, else return a new Empty.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            self if predicate(value) is truthy, else a fresh EmptyType.
        """
        if predicate(self.value):
            return self
        return EmptyType()

    def map[U](self, transform: Callable[[T], U | None]) -> Present[U] | EmptyType:
        """Apply transform to the contained value.

        A transform returning None collapses the result to Empty.

        Args:
            transform: Function to apply to the value.

        Returns:
            of_nullable(transform(value)).
        """
        return of_nullable(transform(self.value))

    def or_(self, alternative: Optional[T]) -> Present[T]:  # noqa: ARG002
        """Return self since this is Present."""
        return self

    def or_else(self, fallback: T) -> T:  # noqa: ARG002
        """Return the contained value as is, ignoring the fallback."""
        return self.value

    def or_else_get(self, other: Optional[T]) -> T:  # noqa: ARG002
        """Return get(), ignoring the other optional."""
        return self.get()

    def or_else_throw(self, on_empty: Callable[[], object] | None = None) -> T:  # noqa: ARG002
        """Return the contained value; the callback is not used."""
        return self.value

    def equals(self, other: object) -> bool:
        """Compare contained values, fetched through get().

        Returns False for anything that is not an Optional.

        Raises:
            NoSuchElementError: If either side cannot supply a value.
        """
        return _equals(self, other)

    def __str__(self) -> str:
        if self.value is None:
            return "Optional[empty]"
        return f"Optional[{render(self.value)}]"


class EmptyType(msgspec.Struct, frozen=True, gc=False):
    """Empty variant of Optional representing absence of a value.

    Each call to ``empty()`` builds a new instance; all instances compare
    equal. Combinators documented as returning "a new Empty" never hand
    back self.

    Examples:
        >>> empty().is_empty()
        True
        >>> empty().or_else(0)
        0
        >>> str(empty())
        'Optional[empty]'
    """

    def is_present(self) -> TypeIs[Present[Any]]:
        """Return False since this is Empty."""
        return False

    def is_empty(self) -> TypeIs[EmptyType]:
        """Return True since this is Empty.

        This method provides type narrowing - after checking is_empty(),
        the type checker knows the optional is EmptyType.
        """
        return True

    def get(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            NoSuchElementError: Always.
        """
        _no_value("get")

    def if_present(self, action: Callable[[Any], object]) -> None:  # noqa: ARG002
        """Do nothing since there is no value."""

    def if_present_or_else(
        self, action: Callable[[Any], object], fallback: Callable[[None], object]  # noqa: ARG002
    ) -> None:
        """Call fallback with None in place of the missing value."""
        fallback(None)

    def apply(self, action: Callable[[Any], object]) -> None:  # noqa: ARG002
        """Do nothing since there is no value."""

    def filter(self, predicate: Callable[[Any], bool]) -> EmptyType:  # noqa: ARG002
        """Return self since there's no value to filter."""
        return self

    def map(self, transform: Callable[[Any], Any]) -> EmptyType:  # noqa: ARG002
        """Return a new Empty since there's no value to map."""
        return EmptyType()

    def or_[T](self, alternative: Optional[T]) -> Present[T]:
        """Wrap the alternative's value in a new Present.

        Raises:
            NoSuchElementError: If the alternative cannot supply a value.
        """
        return Present(alternative.get())

    def or_else[T](self, fallback: T) -> T:
        """Return the fallback since this is Empty."""
        return fallback

    def or_else_get[T](self, other: Optional[T]) -> T:
        """Return other.get().

        Raises:
            NoSuchElementError: If other cannot supply a value.
        """
        return other.get()

    def or_else_throw(self, on_empty: Callable[[], object] | None = None) -> NoReturn:
        """Run on_empty, if given, then raise.

        on_empty may raise an exception of its own, which then propagates
        in place of NoSuchElementError.

        Raises:
            NoSuchElementError: Unless on_empty raised first.
        """
        if on_empty is not None:
            on_empty()
        _no_value("or_else_throw")

    def equals(self, other: object) -> bool:
        """Compare contained values, fetched through get().

        Only ``self.equals(self)`` and comparisons against non-Optionals
        succeed; anything else raises.

        Raises:
            NoSuchElementError: When other is an Optional other than self.
        """
        return _equals(self, other)

    def __str__(self) -> str:
        return "Optional[empty]"


type Optional[T] = Present[T] | EmptyType


def _equals(this: Present[Any] | EmptyType, other: object) -> bool:
    if this is other:
        return True
    if not isinstance(other, Present | EmptyType):
        return False
    return this.get() == other.get()


def empty() -> EmptyType:
    """Return a new Empty optional."""
    return EmptyType()


def of[T](value: T, coercer: Coercer[T] | None = None) -> Present[T]:
    """Wrap value without checking it for None.

    Args:
        value: Value to wrap.
        coercer: Optional coercion applied to value before it is stored.

    Returns:
        Present holding value, or coercer.coerce(value).
    """
    if coercer is not None:
        value = coercer.coerce(value)
    return Present(value)


def of_nullable[T](
    value: T | None = None, coercer: Coercer[T] | None = None
) -> Present[T] | EmptyType:
    """Wrap value, or return Empty when it is None.

    The coercer is never called for None.
    """
    if value is None:
        return EmptyType()
    return of(value, coercer)


def of_optional_key[K, T](
    mapping: Mapping[K, Any], key: K, coercer: Coercer[T]
) -> Present[T] | EmptyType:
    """Look up key in mapping and coerce what is found.

    A key that exists is always Present, even when it maps to None.

    Args:
        mapping: Source of loosely-typed values.
        key: Key to look up.
        coercer: Coercion applied to the found value.

    Returns:
        Present(coercer.coerce(mapping[key])), or Empty if key is missing.
    """
    if key not in mapping:
        return EmptyType()
    return Present(coercer.coerce(mapping[key]))
