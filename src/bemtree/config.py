"""ContextVar-based generation configuration for bemtree.

Configuration is set once per call (or once per BemTree instance) and read
by the tokenizer, builder and renderer running in that context.

Usage:
    # High-level
    tree = BemTree(indent="  ", strict=True)
    scss = tree('<div class="card card--wide"></div>')

    # Direct stage usage (advanced)
    from bemtree.config import GenerateConfig, generate_config_context

    with generate_config_context(GenerateConfig(sort_children=False)):
        forest = parse(markup)
        scss = render(forest)

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from bemtree.errors import ConfigError


def validate_indent(indent: str) -> str:
    """Return indent unchanged if it is a usable indent unit.

    Raises:
        ConfigError: If indent is empty or contains non-whitespace.
    """
    if not indent or not indent.isspace():
        raise ConfigError("indent", f"expected non-empty whitespace, got {indent!r}")
    return indent


@dataclass(frozen=True, slots=True)
class GenerateConfig:
    """Immutable generation configuration.

    Attributes:
        indent: Indent unit repeated once per nesting level. Must be
            non-empty and whitespace only.
        sort_children: Order each block's direct children modifiers-first,
            then by name ignoring case. When False, insertion order is kept.
        strict: Only accept tokens shaped exactly like
            ``block[__element][--modifier]``.

    """

    indent: str = "\t"
    sort_children: bool = True
    strict: bool = False

    def __post_init__(self) -> None:
        validate_indent(self.indent)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> GenerateConfig:
        """Create GenerateConfig from a mapping.

        Only keys naming GenerateConfig fields are used; unknown keys are
        silently ignored.

        Example:
            >>> GenerateConfig.from_dict({"indent": "  ", "theme": "dark"}).indent
            '  '

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: GenerateConfig = GenerateConfig()

_generate_config: ContextVar[GenerateConfig] = ContextVar(
    "generate_config",
    default=_DEFAULT_CONFIG,
)


def get_generate_config() -> GenerateConfig:
    """Get the generation configuration active in this context."""
    return _generate_config.get()


def set_generate_config(config: GenerateConfig) -> None:
    """Set generation configuration for the current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _generate_config.set(config)


def reset_generate_config() -> None:
    """Reset to the default configuration singleton."""
    _generate_config.set(_DEFAULT_CONFIG)


@contextmanager
def generate_config_context(config: GenerateConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with generate_config_context(GenerateConfig(indent="    ")):
        ...     get_generate_config().indent
        '    '

    """
    previous = _generate_config.get()
    _generate_config.set(config)
    try:
        yield
    finally:
        _generate_config.set(previous)


__all__ = [
    "GenerateConfig",
    "generate_config_context",
    "get_generate_config",
    "reset_generate_config",
    "set_generate_config",
    "validate_indent",
]
