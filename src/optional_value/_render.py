"""Text rendering of contained values for Optional.__str__."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import msgspec

__all__ = ["render"]

_SCALARS = (str, bytes, bytearray, int, float, complex, bool)
_SEQUENCES = (list, tuple, set, frozenset)


def _enc_hook(obj: Any) -> Any:
    """Serialize objects msgspec doesn't know through their attributes."""
    try:
        return vars(obj)
    except TypeError:
        return str(obj)


def _to_builtins(value: Any) -> Any:
    return msgspec.to_builtins(value, builtin_types=(bytes, bytearray), enc_hook=_enc_hook)


def render(value: Any) -> str:
    """Render value the way Optional shows its contents.

    Collections render as their elements joined by ", " inside square
    brackets (mappings contribute their values). Structs, dataclasses and
    plain objects are serialized to builtins first, keeping bytes as they
    are. A nested None renders as the empty string; every other scalar
    renders with str(), at any depth.

    Examples:
        >>> render("foo")
        'foo'
        >>> render(["foo", "bar"])
        '[foo, bar]'
        >>> render({"a": 1, "b": [2, 3]})
        '[1, [2, 3]]'
    """
    if value is None:
        return ""
    if isinstance(value, _SCALARS):
        return str(value)
    if isinstance(value, Mapping):
        return _join(value.values())
    if isinstance(value, _SEQUENCES):
        return _join(value)

    builtin = _to_builtins(value)
    if isinstance(builtin, (Mapping, list)):
        return render(builtin)
    return str(builtin)


def _join(items: Any) -> str:
    return "[{}]".format(", ".join(render(item) for item in items))
