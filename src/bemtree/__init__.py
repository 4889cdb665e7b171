"""
bemtree — BEM class names to nested SCSS skeletons

Scans HTML/JSX markup for class attributes, splits each class into its
Block__Element--Modifier parts and renders the resulting selector tree as
nested SCSS with ``&`` parent references. Zero runtime dependencies.

Quick Start:
    >>> from bemtree import generate
    >>> scss = generate('<div class="card card__title card--wide">')
    >>> [line.strip() for line in scss.splitlines() if line.strip()]
    ['.card {', '&--wide {', '}', '&__title {', '}', '}']

    >>> # Or work with the tree directly
    >>> from bemtree import parse, render
    >>> forest = parse('<p className="note note__icon"></p>')
    >>> forest.blocks
    ('note',)
    >>> scss = render(forest)

    >>> # Reusable, configured generator
    >>> from bemtree import BemTree
    >>> tree = BemTree(indent="  ", strict=True)
    >>> scss = tree('<div class="card card__body">')

Command Line:
    bemtree page.html          # SCSS to stdout
    pbpaste | bemtree --indent 2
"""

from bemtree.builder import build_forest, build_forest_from_classes, sort_block_children
from bemtree.config import (
    GenerateConfig,
    generate_config_context,
    get_generate_config,
    reset_generate_config,
    set_generate_config,
)
from bemtree.errors import BemTreeError, ConfigError, InputError, SerializationError
from bemtree.extractor import extract_classes, iter_class_attributes
from bemtree.nodes import SelectorForest, SelectorNode
from bemtree.renderers.protocol import ForestRenderer
from bemtree.renderers.scss import ScssRenderer
from bemtree.serialization import from_dict, from_json, to_dict, to_json
from bemtree.tokenizer import split_class_name
from bemtree.tokens import BemComponents, ClassToken

__version__ = "0.1.0"


def parse(text: str) -> SelectorForest:
    """Build the selector forest for every BEM class in text.

    Reads ``strict`` and ``sort_children`` from the active GenerateConfig.

    Args:
        text: Markup fragment

    Returns:
        SelectorForest, empty if text has no class attributes

    Example:
        >>> forest = parse('<div class="view-card"><img class="view-cart__image"></div>')
        >>> forest.blocks
        ('view-card', 'view-cart')
    """
    config = get_generate_config()
    return build_forest_from_classes(
        extract_classes(text),
        strict=config.strict,
        sort_children=config.sort_children,
    )


def render(forest: SelectorForest, *, indent: str | None = None) -> str:
    """Render a selector forest to SCSS.

    Args:
        forest: Forest from parse() or build_forest()
        indent: Indent unit (defaults to the active GenerateConfig's)

    Returns:
        SCSS text
    """
    return ScssRenderer(indent=indent).render(forest)


def generate(text: str, *, config: GenerateConfig | None = None) -> str:
    """Generate SCSS for every BEM class found in text.

    This is the whole pipeline as one pure function: markup in, SCSS out.

    Args:
        text: Markup fragment
        config: Configuration for this call (uses the active one if None)

    Returns:
        SCSS text, empty if no BEM class was found
    """
    if config is None:
        return render(parse(text))
    with generate_config_context(config):
        return render(parse(text))


class BemTree:
    """Reusable generator holding one immutable configuration.

    Usage:
        >>> tree = BemTree(indent="    ")
        >>> scss = tree('<nav class="menu menu__item menu__item--active">')

        >>> # Access the forest
        >>> forest = tree.parse('<nav class="menu">')
        >>> forest["menu"].children
        ()

    Thread Safety:
        Sets config via ContextVar (thread-local) for each call and resets
        it afterwards. Safe to share across threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        indent: str = "\t",
        sort_children: bool = True,
        strict: bool = False,
    ) -> None:
        self._config = GenerateConfig(indent=indent, sort_children=sort_children, strict=strict)

    @classmethod
    def from_config(cls, config: GenerateConfig) -> "BemTree":
        return cls(indent=config.indent, sort_children=config.sort_children, strict=config.strict)

    @property
    def config(self) -> GenerateConfig:
        return self._config

    def __call__(self, text: str) -> str:
        """Parse and render in one call."""
        return generate(text, config=self._config)

    def parse(self, text: str) -> SelectorForest:
        with generate_config_context(self._config):
            return parse(text)

    def render(self, forest: SelectorForest) -> str:
        return render(forest, indent=self._config.indent)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "generate",
    "parse",
    "render",
    "BemTree",
    # Pipeline stages
    "extract_classes",
    "iter_class_attributes",
    "split_class_name",
    "build_forest",
    "build_forest_from_classes",
    "sort_block_children",
    # Data model
    "BemComponents",
    "ClassToken",
    "SelectorForest",
    "SelectorNode",
    # Renderers
    "ForestRenderer",
    "ScssRenderer",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration (ContextVar-based)
    "GenerateConfig",
    "generate_config_context",
    "get_generate_config",
    "reset_generate_config",
    "set_generate_config",
    # Errors
    "BemTreeError",
    "ConfigError",
    "InputError",
    "SerializationError",
]
