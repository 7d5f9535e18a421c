"""ContextVar-based parse configuration for modfile.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read by every Lexer and Parser created in the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and concurrent parses never observe each other's
    configuration.

Usage:
    from modfile.config import parse_config_context, ParseConfig

    with parse_config_context(ParseConfig(comments_enabled=False)):
        doc = parse(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# 10 MiB; real manifests are a few kilobytes
DEFAULT_MAX_SOURCE_SIZE = 10 * 1024 * 1024


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is intentionally excluded. It's per-call state,
    not configuration, and stays on the Parser instance.

    Attributes:
        comments_enabled: Skip ``//`` line comments. When False, ``//``
            is lexed as invalid input.
        max_source_size: Reject sources longer than this many characters
            before lexing. None disables the limit.

    """

    comments_enabled: bool = True
    max_source_size: int | None = DEFAULT_MAX_SOURCE_SIZE

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "comments_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.comments_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "modfile_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(max_source_size=None)):
        ...     doc = parse(huge_source)

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_MAX_SOURCE_SIZE",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
