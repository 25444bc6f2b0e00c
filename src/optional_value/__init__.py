"""optional-value: an explicit, composable Optional type for Python 3.13+.

Flat imports (preferred):
    from optional_value import Optional, Present, EmptyType
    from optional_value import empty, of, of_nullable, of_optional_key
    from optional_value import NoSuchElementError, coerce_to

Submodule imports (for organization):
    from optional_value.optional import Optional, of
    from optional_value.coercion import Coercer, TypeCoercer
    from optional_value.errors import NoSuchElementError
"""

# Types
from optional_value.optional import (
    EmptyType,
    Optional,
    Present,
    empty,
    of,
    of_nullable,
    of_optional_key,
)

# Coercion
from optional_value.coercion import Coercer, FunctionCoercer, TypeCoercer, coerce_to

# Errors
from optional_value.errors import NoSuchElement, NoSuchElementError

# Configuration and logging
from optional_value._config import OptionalConfig, get_config, init
from optional_value._logging import configure_logging, get_logger

__all__ = [
    "Coercer",
    "EmptyType",
    "FunctionCoercer",
    "NoSuchElement",
    "NoSuchElementError",
    "Optional",
    "OptionalConfig",
    "Present",
    "TypeCoercer",
    "coerce_to",
    "configure_logging",
    "empty",
    "get_config",
    "get_logger",
    "init",
    "of",
    "of_nullable",
    "of_optional_key",
]
