"""ContextVar-based scan configuration for Scanlet.

Provides context-local configuration using Python's ContextVars (PEP 567).
Configuration only steers the package-level ``scanlet.lex`` driver; the
Lexer class always follows its non-aborting contract.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from scanlet import lex
    from scanlet.config import IllegalPolicy, ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(illegal_policy=IllegalPolicy.RAISE)):
        tokens = lex(source)  # raises IllegalCharacterError on "@"

"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator


class IllegalPolicy(Enum):
    """What the driver does with ILLEGAL tokens."""

    KEEP = "keep"  # Return them as data
    SKIP = "skip"  # Drop them (logged at WARNING)
    RAISE = "raise"  # Raise IllegalCharacterError for the first one


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        illegal_policy: Handling of ILLEGAL tokens by ``scanlet.lex``

    """

    illegal_policy: IllegalPolicy = IllegalPolicy.KEEP

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Unknown keys are silently ignored. ``illegal_policy`` may be given
        as an IllegalPolicy member or its string value.

        Example:
            >>> ScanConfig.from_dict({"illegal_policy": "skip", "x": 1}).illegal_policy
            <IllegalPolicy.SKIP: 'skip'>

        Raises:
            ValueError: If illegal_policy is not a known policy value.
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "illegal_policy" in filtered:
            filtered["illegal_policy"] = IllegalPolicy(filtered["illegal_policy"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
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
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(illegal_policy=IllegalPolicy.SKIP)):
        ...     get_scan_config().illegal_policy
        <IllegalPolicy.SKIP: 'skip'>

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "IllegalPolicy",
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
