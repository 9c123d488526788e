"""ContextVar-based render configuration for mdtohtml.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per conversion, read by the renderer in the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and concurrent conversions never see each other's
    options.

Usage:
    # Direct renderer usage (advanced)
    from mdtohtml.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(theme="dark", highlight=False)):
        html = HtmlRenderer().render(doc)

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Literal

THEMES: tuple[str, ...] = ("light", "dark")


def normalize_theme(theme: object) -> Literal["light", "dark"]:
    """Return "dark" for "dark" and "light" for anything else."""
    return "dark" if theme == "dark" else "light"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        highlight: Try syntax highlighting for fenced code with a language
        theme: "light" or "dark"; any other value is stored as "light"
        title: Text of the page <title>
        stylesheet: href of the page stylesheet link

    """

    highlight: bool = True
    theme: Literal["light", "dark"] = "light"
    title: str = "Markdown Document"
    stylesheet: str = "styles.css"

    def __post_init__(self) -> None:
        # Safe mutation of frozen field during construction
        object.__setattr__(self, "theme", normalize_theme(self.theme))

    @property
    def theme_class(self) -> str:
        """CSS class applied to the page's root element."""
        return f"{self.theme}-theme"

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> RenderConfig:
        """Create RenderConfig from a mapping.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Mapping with config values. Keys should match
                RenderConfig attribute names.

        Returns:
            New RenderConfig instance with values from the mapping.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "theme": "dark",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.theme_class
            'dark-theme'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


def coerce_options(options: RenderConfig | Mapping[str, Any] | None) -> RenderConfig:
    """Turn None, a mapping or a RenderConfig into a RenderConfig."""
    if options is None:
        return _DEFAULT_CONFIG
    if isinstance(options, RenderConfig):
        return options
    return RenderConfig.from_dict(options)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

# Thread-local configuration via ContextVar
_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local).

    Returns:
        The active RenderConfig for this thread/context.

    """
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: RenderConfig to use within the context.

    Yields:
        None

    Example:
        >>> with render_config_context(RenderConfig(theme="dark")):
        ...     get_render_config().theme
        'dark'

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
    "THEMES",
    "RenderConfig",
    "coerce_options",
    "normalize_theme",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
