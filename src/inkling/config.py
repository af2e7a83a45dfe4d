"""ContextVar-based render configuration for Inkling.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per ``Markup`` instance or scope, and read by every
renderer created without an explicit config.

The delimiter set is fixed; only output (tag names, escaping, text hooks) is
configurable.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from inkling.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(tags={"Emphasis": "em"})):
        html = render("_hi_")  # <em>hi</em>

"""

import re
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType

from inkling.errors import ConfigError

# Tag emitted for each container node, keyed by node class name
DEFAULT_TAGS: Mapping[str, str] = MappingProxyType(
    {
        "Strong": "strong",
        "Emphasis": "i",
        "Strikethrough": "del",
    }
)


# ASCII letter first; hyphens only between alphanumeric runs
_TAG_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*(?:-[A-Za-z0-9]+)*")


def _validate_tags(tags: Mapping[str, str]) -> None:
    for name, tag in tags.items():
        if name not in DEFAULT_TAGS:
            raise ConfigError("tags", f"unknown node type {name!r}")
        if not isinstance(tag, str) or not _TAG_NAME_PATTERN.fullmatch(tag):
            raise ConfigError("tags", f"invalid tag name {tag!r} for {name}")


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        tags: Tag name per container node class name. Missing entries fall
            back to DEFAULT_TAGS.
        escape_html: Escape ``& < > "`` in text content
        text_transformer: Optional callback applied to every text node

    """

    tags: Mapping[str, str] = field(default_factory=dict)
    escape_html: bool = False
    text_transformer: Callable[[str], str] | None = None

    def tag_for(self, node_name: str) -> str:
        """Tag name for a container node class name."""
        return self.tags.get(node_name) or DEFAULT_TAGS[node_name]

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored. Tag entries are validated.

        Args:
            config_dict: Dictionary with config values. Keys should match
                RenderConfig attribute names.

        Returns:
            New RenderConfig instance with values from dict.

        Raises:
            ConfigError: If ``tags`` names an unknown node type or an
                invalid tag.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "tags": {"Emphasis": "em"},
            ...     "unknown_key": "ignored",
            ... })
            >>> config.tag_for("Emphasis")
            'em'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "tags" in filtered:
            tags = filtered["tags"]
            if not isinstance(tags, Mapping):
                raise ConfigError("tags", f"expected a mapping, got {type(tags).__name__}")
            _validate_tags(tags)
            filtered["tags"] = MappingProxyType(dict(tags))
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

# Thread-local configuration via ContextVar
_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: RenderConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "DEFAULT_TAGS",
    "RenderConfig",
    "get_render_config",
    "reset_render_config",
    "render_config_context",
    "set_render_config",
]
