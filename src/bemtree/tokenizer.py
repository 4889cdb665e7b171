"""BEM tokenizer: split one class name into block, element and modifier.

A BEM name is ``NAME = [a-zA-Z0-9]+(-[a-zA-Z0-9]+)*``. Three parts are
located in a single left-to-right pass over the token:

- Block: the longest leading NAME. Without one the token is invalid.
- Element: the first ``__NAME`` anywhere in the token.
- Modifier: the leftmost ``--NAME`` that runs to the end of the token.

Because NAME never contains ``_``, a modifier anchored at the end cannot
contain an element marker. The element span therefore always ends before
the modifier span starts, and the two never overlap.

Lenient mode (the default) accepts anything between the parts, so
``card_x__body`` still yields ``("card", "__body", None)``. Strict mode
requires the token to be exactly ``block[__element][--modifier]``.

No regex: the scanner walks characters once and slices spans.

"""

from __future__ import annotations

from bemtree.tokens import ELEMENT_MARKER, MODIFIER_MARKER, BemComponents, ClassToken

_NAME_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")


def scan_name(token: str, pos: int) -> int:
    """Return the end of the longest NAME starting at pos.

    Returns pos itself when no NAME starts there.

    Example:
        >>> scan_name("view-cart__image", 0)
        9
        >>> scan_name("a--b", 0)
        1
    """
    n = len(token)
    end = pos
    while end < n and token[end] in _NAME_CHARS:
        end += 1
    if end == pos:
        return pos

    # A single hyphen continues the name only if an alphanumeric follows.
    while end + 1 < n and token[end] == "-" and token[end + 1] in _NAME_CHARS:
        end += 2
        while end < n and token[end] in _NAME_CHARS:
            end += 1
    return end


def _find_element(token: str, start: int) -> str | None:
    pos = token.find(ELEMENT_MARKER, start)
    while pos != -1:
        name_start = pos + len(ELEMENT_MARKER)
        end = scan_name(token, name_start)
        if end > name_start:
            return token[pos:end]
        pos = token.find(ELEMENT_MARKER, pos + 1)
    return None


def _find_modifier(token: str, start: int) -> str | None:
    n = len(token)
    pos = token.find(MODIFIER_MARKER, start)
    while pos != -1:
        name_start = pos + len(MODIFIER_MARKER)
        if name_start < n and scan_name(token, name_start) == n:
            return token[pos:]
        pos = token.find(MODIFIER_MARKER, pos + 1)
    return None


def _split_strict(token: str, block_end: int) -> BemComponents:
    n = len(token)
    pos = block_end
    element = modifier = None

    if token.startswith(ELEMENT_MARKER, pos):
        end = scan_name(token, pos + len(ELEMENT_MARKER))
        if end == pos + len(ELEMENT_MARKER):
            return BemComponents.invalid()
        element = token[pos:end]
        pos = end

    if token.startswith(MODIFIER_MARKER, pos):
        end = scan_name(token, pos + len(MODIFIER_MARKER))
        if end == pos + len(MODIFIER_MARKER):
            return BemComponents.invalid()
        modifier = token[pos:end]
        pos = end

    if pos != n:
        return BemComponents.invalid()
    return BemComponents(token[:block_end], element, modifier)


def split_class_name(token: ClassToken, *, strict: bool = False) -> BemComponents:
    """Split a class name into its BEM components.

    Args:
        token: One class name as found in markup
        strict: Reject tokens with text between or after the BEM parts

    Returns:
        BemComponents. ``block`` is None when the token must be skipped.

    Examples:
        >>> split_class_name("header__title--large")
        BemComponents('header', '__title', '--large')
        >>> split_class_name("__orphan")
        BemComponents(None, None, None)
    """
    block_end = scan_name(token, 0)
    if block_end == 0:
        return BemComponents.invalid()

    if strict:
        return _split_strict(token, block_end)

    return BemComponents(
        token[:block_end],
        _find_element(token, block_end),
        _find_modifier(token, block_end),
    )


__all__ = ["scan_name", "split_class_name"]
