"""Class attribute extraction from HTML/JSX markup.

Scans raw text for ``class="..."`` and ``className="..."`` attributes and
returns the individual class names in source order. This is a pure scan:
the markup is never validated and may be any fragment a user selected.

Matching rules:
- Single or double quotes; the closing quote must match the opening one.
- Whitespace is allowed around ``=``.
- The attribute name must stand alone, so ``subclass="x"``, ``data-class="x"``
  and Vue's ``:class="x"`` are ignored.

Example:
    >>> extract_classes('<div class="card card--wide"><p className=\\'card__body\\'>')
    ['card', 'card--wide', 'card__body']

"""

from __future__ import annotations

import re
from collections.abc import Iterator

from bemtree.tokens import ClassToken
from bemtree.utils.logger import get_logger

logger = get_logger(__name__)

_CLASS_ATTRIBUTE_RE = re.compile(
    r"""(?<![\w:.-])class(?:Name)?\s*=\s*(?:"(?P<double>[^"]*)"|'(?P<single>[^']*)')"""
)


def iter_class_attributes(text: str) -> Iterator[str]:
    """Yield the raw value of every class attribute, in source order."""
    for match in _CLASS_ATTRIBUTE_RE.finditer(text):
        value = match.group("double")
        yield value if value is not None else match.group("single")


def extract_classes(text: str) -> list[ClassToken]:
    """Extract every class name from every class attribute in text.

    Args:
        text: Markup fragment (HTML, JSX, templates...)

    Returns:
        Class names in order of appearance. Empty if no class attribute
        was found.
    """
    tokens: list[ClassToken] = []
    attributes = 0
    for value in iter_class_attributes(text):
        attributes += 1
        tokens.extend(value.split())

    logger.debug("Found %d class names in %d class attributes", len(tokens), attributes)
    return tokens


__all__ = ["extract_classes", "iter_class_attributes"]
