"""Selector tree nodes.

SelectorNode is the unit of the tree; SelectorForest holds one root per
BEM block in first-seen order.

Tree Shape:
SelectorForest
└── SelectorNode "card"            (block root, rendered ".card")
    ├── SelectorNode "--wide"      (block modifier, rendered "&--wide")
    └── SelectorNode "__body"      (element, rendered "&__body")
        └── SelectorNode "--muted" (element modifier)

Node names are the raw captured substrings. Whether a node renders with
``.`` or ``&`` depends on its position in the tree, not on its name.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from bemtree.tokens import ELEMENT_MARKER, MODIFIER_MARKER


@dataclass(frozen=True, slots=True)
class SelectorNode:
    """One selector and its nested selectors.

    Invariant: no two children share a name.

    """

    name: str
    children: tuple[SelectorNode, ...] = ()

    @property
    def is_modifier(self) -> bool:
        return self.name.startswith(MODIFIER_MARKER)

    @property
    def is_element(self) -> bool:
        return self.name.startswith(ELEMENT_MARKER)

    def child(self, name: str) -> SelectorNode | None:
        """Return the direct child called name, if any."""
        for node in self.children:
            if node.name == name:
                return node
        return None

    def walk(self) -> Iterator[SelectorNode]:
        """Yield this node and all descendants, depth first."""
        yield self
        for node in self.children:
            yield from node.walk()


@dataclass(frozen=True, slots=True)
class SelectorForest:
    """Block roots in first-seen order.

    Reads like a mapping from block name to root node:

        >>> forest["card"].children[0].name
        '--wide'
        >>> "card" in forest
        True

    """

    roots: tuple[SelectorNode, ...] = ()
    _index: dict[str, SelectorNode] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {root.name: root for root in self.roots})

    @property
    def blocks(self) -> tuple[str, ...]:
        """Block names in serialization order."""
        return tuple(root.name for root in self.roots)

    def get(self, block: str) -> SelectorNode | None:
        return self._index.get(block)

    def __getitem__(self, block: str) -> SelectorNode:
        return self._index[block]

    def __contains__(self, block: object) -> bool:
        return block in self._index

    def __iter__(self) -> Iterator[SelectorNode]:
        return iter(self.roots)

    def __len__(self) -> int:
        return len(self.roots)

    def __bool__(self) -> bool:
        return bool(self.roots)


__all__ = ["SelectorForest", "SelectorNode"]
