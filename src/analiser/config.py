"""ContextVar-based scan configuration for analiser.

Provides context-local defaults for new scanners using Python's ContextVars
(PEP 567). A Scanner created without explicit options reads the active
config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from analiser.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(tab_size=8)):
        scanner = Scanner(source)  # tab_size == 8

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from analiser.errors import ConfigError, InvalidTabSizeError

DEFAULT_TAB_SIZE = 4


def validate_tab_size(tab_size: object) -> int:
    """Return tab_size if it is a positive int, else raise InvalidTabSizeError."""
    if isinstance(tab_size, bool) or not isinstance(tab_size, int) or tab_size <= 0:
        raise InvalidTabSizeError(tab_size)
    return tab_size


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        tab_size: Columns advanced per tab character in whitespace
        strict: Raise LexicalError from tokenize() on unrecognized characters
            instead of logging and skipping them
        track_comment_lines: Advance the line across newlines inside block
            comments (off: a comment only moves the column by its length)

    """

    tab_size: int = DEFAULT_TAB_SIZE
    strict: bool = True
    track_comment_lines: bool = False

    def __post_init__(self) -> None:
        validate_tab_size(self.tab_size)
        for name in ("strict", "track_comment_lines"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigError(f"{name} must be a bool, {value!r} given.")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ScanConfig.from_dict({"tab_size": 2, "color": "red"}).tab_size
            2

        """
        valid_fields = {f for f in cls.__dataclass_fields__}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context."""
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the module-level default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(tab_size=2)):
        ...     get_scan_config().tab_size
        2

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "DEFAULT_TAB_SIZE",
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "validate_tab_size",
]
