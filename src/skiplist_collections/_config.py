"""
config - Runtime configuration for skiplist_collections

This module provides runtime configuration for the containers in this
package: default level ceiling, duplicate-element policy, default random
seed and optional invariant checking. Values are read from the environment
at import time and can be changed through validated property setters.
"""

import os
import threading
from enum import Enum
from typing import Optional


class ConfigurationError(ValueError):
    """Raised when a container or the global config gets an invalid setting."""
    pass


class DuplicatePolicy(Enum):
    """How a skip list treats an element equal to one already present."""
    ALLOW = "allow"
    REJECT = "reject"


# Level ceiling used when a list is built without an explicit one
DEFAULT_LEVELS = 4


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable with prefix."""
    full_name = f"SKIPLIST_COLLECTIONS_{name}"
    return os.environ.get(full_name, default)


def _get_env_bool(name: str, default: bool = False) -> bool:
    """Get boolean environment variable."""
    value = _get_env(name)
    if value is None:
        return default
    return value.lower() in ('1', 'true', 'yes', 'on')


def _get_env_int(name: str, default: Optional[int]) -> Optional[int]:
    """Get integer environment variable."""
    value = _get_env(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def validate_levels(value: object) -> int:
    """Check a level ceiling and return it.

    Args:
        value: Candidate ceiling

    Returns:
        The ceiling as an int

    Raises:
        ConfigurationError: If value is not an int or is less than 1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"Level ceiling must be an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ConfigurationError(f"Level ceiling must be >= 1, got {value}")
    return value


def resolve_policy(value: object) -> DuplicatePolicy:
    """Turn a policy name or enum member into a DuplicatePolicy.

    Raises:
        ConfigurationError: If value names no policy
    """
    if isinstance(value, DuplicatePolicy):
        return value
    if isinstance(value, str):
        try:
            return DuplicatePolicy(value.lower())
        except ValueError:
            pass
    raise ConfigurationError(
        f"Invalid duplicates policy: {value!r}. Must be 'allow' or 'reject'"
    )


class Config:
    """Global configuration for skiplist_collections.

    Thread Safety:
        All reads are thread-safe. Writes use a lock and affect
        only containers created after the write.
    """

    __slots__ = (
        '_lock',
        '_default_levels',
        '_duplicates',
        '_seed',
        '_debug_checks',
    )

    def __init__(self) -> None:
        """Initialize configuration from the environment."""
        self._lock = threading.Lock()
        self.reload()

    def reload(self) -> None:
        """Re-read every setting from the environment.

        Invalid values fall back to the built-in defaults.
        """
        levels = _get_env_int('DEFAULT_LEVELS', DEFAULT_LEVELS)
        if levels is None or levels < 1:
            levels = DEFAULT_LEVELS

        duplicates_str = _get_env('DUPLICATES', 'allow')
        try:
            duplicates = DuplicatePolicy(duplicates_str.lower())
        except ValueError:
            duplicates = DuplicatePolicy.ALLOW

        with self._lock:
            self._default_levels = levels
            self._duplicates = duplicates
            self._seed = _get_env_int('SEED', None)
            self._debug_checks = _get_env_bool('DEBUG_CHECKS', False)

    @property
    def default_levels(self) -> int:
        """Level ceiling for lists created without max_levels."""
        return self._default_levels

    @default_levels.setter
    def default_levels(self, value: int) -> None:
        """Set the default level ceiling.

        Raises:
            ConfigurationError: If value is not a positive integer
        """
        value = validate_levels(value)
        with self._lock:
            self._default_levels = value

    @property
    def duplicates(self) -> str:
        """Duplicate policy ('allow' or 'reject')."""
        return self._duplicates.value

    @duplicates.setter
    def duplicates(self, value: str) -> None:
        policy = resolve_policy(value)
        with self._lock:
            self._duplicates = policy

    @property
    def seed(self) -> Optional[int]:
        """Default seed for new level generators (None = unseeded)."""
        return self._seed

    @seed.setter
    def seed(self, value: Optional[int]) -> None:
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            raise ConfigurationError("seed must be an integer or None")
        with self._lock:
            self._seed = value

    @property
    def debug_checks(self) -> bool:
        """Whether lists verify their invariants after every mutation."""
        return self._debug_checks

    @debug_checks.setter
    def debug_checks(self, value: bool) -> None:
        with self._lock:
            self._debug_checks = bool(value)

    def __repr__(self) -> str:
        """String representation of configuration."""
        return (
            f"Config("
            f"default_levels={self.default_levels}, "
            f"duplicates='{self.duplicates}', "
            f"seed={self.seed!r}, "
            f"debug_checks={self.debug_checks})"
        )


# Global configuration instance (initialized at module import)
config = Config()
