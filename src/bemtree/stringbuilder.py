"""Line-oriented StringBuilder for rendered stylesheet text.

Appends indented lines to a list and joins once at the end, keeping
rendering O(n) in the size of the output instead of O(n²) for repeated
string concatenation.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Accumulates lines indented by nesting depth.

    Usage:
        >>> sb = StringBuilder(indent="  ")
        >>> _ = sb.line(".card {", 0).line("&__body {", 1).line("}", 1).line("}", 0)
        >>> print(sb.build(), end="")
        .card {
          &__body {
          }
        }

    """

    __slots__ = ("_indent", "_parts")

    def __init__(self, indent: str = "\t") -> None:
        self._indent = indent
        self._parts: list[str] = []

    def line(self, text: str = "", depth: int = 0) -> StringBuilder:
        """Append text on its own line, indented depth units.

        Returns:
            self for method chaining
        """
        self._parts.append(f"{self._indent * depth}{text}\n")
        return self

    def blank(self) -> StringBuilder:
        """Append an empty line."""
        self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all lines into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
