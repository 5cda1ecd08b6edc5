"""ContextVar-based configuration for treetext.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The renderer reads the empty-tree placeholder from it and the controller
reads the label it puts in front of error messages.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from treetext.config import TreeTextConfig, config_context

    with config_context(TreeTextConfig(empty_placeholder="(nothing)")):
        text = render(None)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class TreeTextConfig:
    """Immutable treetext configuration.

    Attributes:
        empty_placeholder: Text rendered when there is no tree
        error_label: Label the controller prefixes error messages with

    """

    empty_placeholder: str = "Empty tree"
    error_label: str = "Error"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TreeTextConfig":
        """Create TreeTextConfig from dictionary.

        Only includes keys that are valid TreeTextConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = TreeTextConfig.from_dict({
            ...     "error_label": "Oops",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.error_label
            'Oops'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TreeTextConfig = TreeTextConfig()

_config: ContextVar[TreeTextConfig] = ContextVar(
    "treetext_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> TreeTextConfig:
    """Get current configuration (thread-local)."""
    return _config.get()


def set_config(config: TreeTextConfig) -> None:
    """Set configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _config.set(config)


def reset_config() -> None:
    """Reset to the module-level default configuration."""
    _config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: TreeTextConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with config_context(TreeTextConfig(error_label="Fehler")):
        ...     get_config().error_label
        'Fehler'

    """
    previous = _config.get()
    _config.set(config)
    try:
        yield
    finally:
        _config.set(previous)


__all__ = [
    "TreeTextConfig",
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
]
