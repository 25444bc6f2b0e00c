"""Error types: dual struct+exception for data-carrying and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    "DEFAULT_MESSAGE",
    "NoSuchElement",
    "NoSuchElementError",
]

DEFAULT_MESSAGE = "No value present."


class NoSuchElement(msgspec.Struct, frozen=True, gc=False):
    """No value could be supplied - struct variant for Result[T, NoSuchElement]."""

    message: str = DEFAULT_MESSAGE

    def to_exception(self) -> NoSuchElementError:
        """Convert to exception for raise-based code."""
        return NoSuchElementError(self.message)


class NoSuchElementError(Exception):
    """No value could be supplied - exception variant.

    Raised whenever a value is requested from an Optional that cannot
    supply one: an empty Optional, or a present one holding None.
    """

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        self.message = message
        super().__init__(message)

    def to_struct(self) -> NoSuchElement:
        """Convert to struct for Result-based code."""
        return NoSuchElement(self.message)
