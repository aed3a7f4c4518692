"""
Configuration management for MDB_INDEX.

Rendering works without any configuration; an IndexConfig only adjusts
how option documents are produced for a particular deployment.
"""

import os

from .constants import DEFAULT_BACKGROUND, DEFAULT_INCLUDE_DROP_DUPS
from .exceptions import ConfigurationError

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def _read_flag(env_key: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.getenv(env_key)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"{env_key} must be a boolean value, got {raw!r}",
        config_key=env_key,
        config_value=raw,
    )


class IndexConfig:
    """
    Index rendering configuration.

    Example:
        # Using environment variables
        config = IndexConfig()
        options = definition.render_options(config)

        # Targeting only modern servers, which reject dropDups
        config = IndexConfig(include_drop_dups=False)
    """

    def __init__(
        self,
        include_drop_dups: bool | None = None,
        default_background: bool | None = None,
    ):
        """
        Initialize configuration.

        Args:
            include_drop_dups: Render the legacy dropDups option (defaults to
                MDB_INDEX_INCLUDE_DROP_DUPS or True)
            default_background: Build every index in the background (defaults
                to MDB_INDEX_DEFAULT_BACKGROUND or False)

        Raises:
            ConfigurationError: If an environment value is not a boolean
        """
        if include_drop_dups is None:
            include_drop_dups = _read_flag("MDB_INDEX_INCLUDE_DROP_DUPS", DEFAULT_INCLUDE_DROP_DUPS)
        if default_background is None:
            default_background = _read_flag("MDB_INDEX_DEFAULT_BACKGROUND", DEFAULT_BACKGROUND)
        self.include_drop_dups = include_drop_dups
        self.default_background = default_background

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If a value has the wrong type
        """
        for key in ("include_drop_dups", "default_background"):
            value = getattr(self, key)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"{key} must be a bool, got {type(value).__name__}",
                    config_key=key,
                    config_value=value,
                )

    def __repr__(self) -> str:
        return (
            f"IndexConfig(include_drop_dups={self.include_drop_dups}, "
            f"default_background={self.default_background})"
        )
