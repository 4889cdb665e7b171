"""Selector tree builder.

Folds BemComponents into a SelectorForest:

1. Components without a block are skipped.
2. Every block gets a root, even with no element or modifier.
3. An element becomes a child of its block.
4. A modifier nests under its element when the class has one, otherwise
   directly under the block.

Children are deduplicated by exact name within their immediate parent, so
``--active`` under ``__tab`` and ``--active`` under ``__panel`` are two
distinct nodes.

The builder drafts into nested insertion-ordered dicts (name -> children)
and freezes the result into SelectorNode tuples once the fold is done.

Ordering:
With ``sort_children`` (the default) each block root's direct children are
sorted modifiers first, then by name ignoring case. Deeper levels keep
insertion order.

"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from bemtree.nodes import SelectorForest, SelectorNode
from bemtree.tokenizer import split_class_name
from bemtree.tokens import MODIFIER_MARKER, BemComponents, ClassToken
from bemtree.utils.logger import get_logger

logger = get_logger(__name__)

_Draft: TypeAlias = dict[str, "_Draft"]


def _child_sort_key(node: SelectorNode) -> tuple[bool, str, str]:
    # False sorts first: modifiers before elements, then case-insensitive by name.
    return (not node.name.startswith(MODIFIER_MARKER), node.name.casefold(), node.name)


def _freeze(name: str, draft: _Draft) -> SelectorNode:
    return SelectorNode(
        name=name,
        children=tuple(_freeze(child, grandchildren) for child, grandchildren in draft.items()),
    )


def sort_block_children(root: SelectorNode) -> SelectorNode:
    """Return root with its direct children in canonical order."""
    return SelectorNode(root.name, tuple(sorted(root.children, key=_child_sort_key)))


def build_forest(
    components: Iterable[BemComponents],
    *,
    sort_children: bool = True,
) -> SelectorForest:
    """Fold BEM components into a selector forest.

    Args:
        components: Components in source order
        sort_children: Apply canonical ordering to each block's children

    Returns:
        SelectorForest with one root per distinct block

    Example:
        >>> forest = build_forest([
        ...     BemComponents("card"),
        ...     BemComponents("card", "__title"),
        ...     BemComponents("card", None, "--wide"),
        ... ])
        >>> [child.name for child in forest["card"].children]
        ['--wide', '__title']
    """
    drafts: dict[str, _Draft] = {}

    for parts in components:
        if parts.block is None:
            continue

        block = drafts.setdefault(parts.block, {})
        if parts.element is not None:
            element = block.setdefault(parts.element, {})
            if parts.modifier is not None:
                element.setdefault(parts.modifier, {})
        elif parts.modifier is not None:
            block.setdefault(parts.modifier, {})

    roots = [_freeze(name, draft) for name, draft in drafts.items()]
    if sort_children:
        roots = [sort_block_children(root) for root in roots]

    return SelectorForest(tuple(roots))


def build_forest_from_classes(
    class_names: Iterable[ClassToken],
    *,
    strict: bool = False,
    sort_children: bool = True,
) -> SelectorForest:
    """Tokenize class names and build the forest in one step.

    Tokens without a leading block name are skipped and logged at DEBUG.
    """
    components: list[BemComponents] = []
    skipped = 0
    for name in class_names:
        parts = split_class_name(name, strict=strict)
        if not parts.is_valid:
            skipped += 1
            logger.debug("Skipping non-BEM class %r", name)
            continue
        components.append(parts)

    forest = build_forest(components, sort_children=sort_children)
    logger.debug(
        "Built %d blocks from %d classes (%d skipped)",
        len(forest),
        len(components) + skipped,
        skipped,
    )
    return forest


__all__ = ["build_forest", "build_forest_from_classes", "sort_block_children"]
