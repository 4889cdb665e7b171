"""BEM component triple produced by the tokenizer.

A class name such as ``header__title--large`` splits into a block
(``header``), an element (``__title``) and a modifier (``--large``).
Element and modifier keep their leading markers; the renderer relies on
that to emit ``&__title`` and ``&--large`` without re-deriving them.

Thread Safety:
BemComponents is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

ClassToken: TypeAlias = str

ELEMENT_MARKER = "__"
MODIFIER_MARKER = "--"


@dataclass(frozen=True, slots=True)
class BemComponents:
    """Block, element and modifier parts of one class name.

    Attributes:
        block: Leading block name, or None when the token does not start
            with a valid name. Such tokens are skipped by the builder.
        element: ``__element`` substring including its marker, or None
        modifier: ``--modifier`` substring including its marker, or None

    """

    block: str | None
    element: str | None = None
    modifier: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if the token produced a block and should be kept."""
        return self.block is not None

    @classmethod
    def invalid(cls) -> BemComponents:
        """Components for a token that has no leading block."""
        return cls(block=None)

    def __repr__(self) -> str:
        return f"BemComponents({self.block!r}, {self.element!r}, {self.modifier!r})"
