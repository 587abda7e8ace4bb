"""
Configuration for undirected graphs.

This module holds the settings that change graph behaviour and the helpers
that load them. Settings can be built directly, from a dictionary validated
against ``CONFIG_SCHEMA``, or from ``UNDIGRAPH_*`` environment variables.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate

from .core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
ENV_PREFIX = "UNDIGRAPH_"

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "allow_self_loops": {"type": "boolean"},
        "check_integrity": {"type": "boolean"},
        "log_level": {"type": "string", "enum": LOG_LEVELS},
    },
    "additionalProperties": False,
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class GraphConfig:
    """
    Configuration for graph behaviour.

    Attributes:
        allow_self_loops: Whether ``add_edge`` accepts an edge from a vertex
            to itself. When False such edges raise ``SelfLoopError``.
        check_integrity: Whether the graph validates its invariants after
            every mutation. Meant for debugging and tests.
        log_level: Level applied by ``configure_logging``
    """

    def __init__(
        self,
        allow_self_loops: bool = False,
        check_integrity: bool = False,
        log_level: str = "WARNING",
    ):
        self.allow_self_loops = allow_self_loops
        self.check_integrity = check_integrity
        self.log_level = log_level

    def __repr__(self) -> str:
        return (
            f"GraphConfig(allow_self_loops={self.allow_self_loops}, "
            f"check_integrity={self.check_integrity}, log_level={self.log_level!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a plain dictionary."""
        return {
            "allow_self_loops": self.allow_self_loops,
            "check_integrity": self.check_integrity,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphConfig":
        """
        Build a configuration from a dictionary.

        Args:
            data: Mapping with any subset of the configuration keys

        Returns:
            GraphConfig: The validated configuration

        Raises:
            ConfigurationError: If ``data`` does not match ``CONFIG_SCHEMA``
        """
        try:
            validate(instance=dict(data), schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph configuration: {e.message}") from e
        return cls(**data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GraphConfig":
        """
        Build a configuration from ``UNDIGRAPH_*`` environment variables.

        Recognised variables are ``UNDIGRAPH_ALLOW_SELF_LOOPS``,
        ``UNDIGRAPH_CHECK_INTEGRITY`` and ``UNDIGRAPH_LOG_LEVEL``. Unset
        variables keep their defaults.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            GraphConfig: The validated configuration

        Raises:
            ConfigurationError: If a variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        data: Dict[str, Any] = {}

        for name in ("allow_self_loops", "check_integrity"):
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is not None:
                data[name] = _parse_bool(ENV_PREFIX + name.upper(), raw)

        level = env.get(ENV_PREFIX + "LOG_LEVEL")
        if level is not None:
            data["log_level"] = level.strip().upper()

        return cls.from_dict(data)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")


def configure_logging(level: Optional[str] = None, config: Optional[GraphConfig] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Log level name. Takes precedence over ``config``.
        config: Configuration whose ``log_level`` is used when ``level`` is None

    Returns:
        logging.Logger: The ``undigraph`` package logger
    """
    if level is None:
        level = (config or GraphConfig()).log_level
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {level}")

    package_logger = logging.getLogger("undigraph")
    if not any(getattr(h, "_undigraph_handler", False) for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._undigraph_handler = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    logger.debug(f"Logging configured at level {level}")
    return package_logger
