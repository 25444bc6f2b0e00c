"""Library configuration: OptionalConfig, environment detection, and init()."""

from __future__ import annotations

import os
from dataclasses import dataclass

from optional_value._logging import configure_logging, get_logger

__all__ = [
    "OptionalConfig",
    "get_config",
    "init",
    "reset_config",
]

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

logger = get_logger(__name__)


@dataclass(frozen=True)
class OptionalConfig:
    """Configuration for optional-value.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs if True, colored console output otherwise.
        strict_coercion: Default strictness for msgspec-backed coercers.
            When False, lax conversions such as "1" -> 1 are accepted.
    """

    log_level: str | None = None
    json_logs: bool = True
    strict_coercion: bool = True


_config: OptionalConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment.

    Unknown values are reported and the default is used.
    """
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    logger.warning("unknown boolean environment value", variable=name, value=raw, default=default)
    return default


def _env_log_level() -> str | None:
    raw = os.environ.get("OPTIONAL_VALUE_LOG_LEVEL", "").strip()
    return raw.upper() or None


def _resolve(
    log_level: str | None,
    json_logs: bool | None,
    strict_coercion: bool | None,
) -> OptionalConfig:
    """Build a config, filling unset fields from the environment."""
    resolved_level = log_level.upper() if log_level is not None else _env_log_level()
    if json_logs is None:
        json_logs = _env_flag("OPTIONAL_VALUE_JSON_LOGS", True)
    if strict_coercion is None:
        strict_coercion = _env_flag("OPTIONAL_VALUE_STRICT_COERCION", True)
    return OptionalConfig(
        log_level=resolved_level,
        json_logs=json_logs,
        strict_coercion=strict_coercion,
    )


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    strict_coercion: bool | None = None,
) -> OptionalConfig:
    """Initialize optional-value with the specified configuration.

    Fields left as None are resolved from the environment:

    - ``OPTIONAL_VALUE_LOG_LEVEL``
    - ``OPTIONAL_VALUE_JSON_LOGS``
    - ``OPTIONAL_VALUE_STRICT_COERCION``

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Render logs as JSON.
        strict_coercion: Default strictness for TypeCoercer.

    Returns:
        The OptionalConfig that was set.

    Example:
        ```python
        from optional_value import init

        init(log_level="DEBUG", json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = _resolve(log_level, json_logs, strict_coercion)

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> OptionalConfig:
    """Get the current configuration.

    If init() hasn't been called, the configuration is read from the
    environment. Logging is only ever configured by an explicit init().
    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = _resolve(None, None, None)
    return _config


def reset_config() -> None:
    """Forget the current configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
