"""ContextVar-based configuration for streamreplace.

Provides thread-local configuration using Python's ContextVars (PEP 567).
An engine reads the active config once, when it is constructed, so changing
the config afterwards never affects a stream already in flight.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from streamreplace import replace_all
    from streamreplace.config import ReplaceConfig, replace_config_context

    with replace_config_context(ReplaceConfig(trace=True)):
        out = list(replace_all(tokens, [("ab", "AB")]))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReplaceConfig:
    """Immutable engine configuration.

    Attributes:
        strict_patterns: Raise PatternError for an empty search pattern.
            When False, the pattern is dropped and a warning is logged.
        trace: Emit debug log records for every commit, flush and
            end-of-stream drain.

    """

    strict_patterns: bool = True
    trace: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ReplaceConfig":
        """Create ReplaceConfig from dictionary.

        Only includes keys that are valid ReplaceConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ReplaceConfig attribute names.

        Returns:
            New ReplaceConfig instance with values from dict.

        Example:
            >>> config = ReplaceConfig.from_dict({"trace": True, "other": 1})
            >>> config.trace
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ReplaceConfig = ReplaceConfig()

_replace_config: ContextVar[ReplaceConfig] = ContextVar(
    "replace_config",
    default=_DEFAULT_CONFIG,
)


def get_replace_config() -> ReplaceConfig:
    """Get current replace configuration (thread-local)."""
    return _replace_config.get()


def set_replace_config(config: ReplaceConfig) -> None:
    """Set replace configuration for current context.

    Args:
        config: ReplaceConfig instance to use for this context.

    """
    _replace_config.set(config)


def reset_replace_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.

    """
    _replace_config.set(_DEFAULT_CONFIG)


@contextmanager
def replace_config_context(config: ReplaceConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ReplaceConfig to use within the context.

    Yields:
        None

    Example:
        >>> with replace_config_context(ReplaceConfig(strict_patterns=False)):
        ...     engine = replace_all("abc", [("", "x"), ("b", "B")])
        >>> "".join(engine)
        'aBc'

    Thread Safety:
        Only affects the current thread's context. Restores the previous
        config even if an exception is raised.

    """
    previous = _replace_config.get()
    _replace_config.set(config)
    try:
        yield
    finally:
        _replace_config.set(previous)


__all__ = [
    "ReplaceConfig",
    "get_replace_config",
    "set_replace_config",
    "reset_replace_config",
    "replace_config_context",
]
