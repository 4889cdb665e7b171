"""SCSS renderer using the StringBuilder pattern.

Renders a SelectorForest into nested SCSS rules that use ``&`` to
concatenate with the parent selector (tab indent shown as four spaces):

    .app {

        &__header {

            &--mobile {

            }
        }
    }

Each rule opens with its selector, reserves one line for declarations
(indented one level deeper, ready for the cursor) and then nests its
children. Top-level blocks are separated by one blank line.

Thread Safety:
The renderer holds only its indent unit. Every render() call builds its
own StringBuilder, so one instance can be shared across threads.

"""

from __future__ import annotations

from bemtree.config import get_generate_config, validate_indent
from bemtree.nodes import SelectorForest, SelectorNode
from bemtree.stringbuilder import StringBuilder
from bemtree.utils.logger import get_logger

logger = get_logger(__name__)

ROOT_PREFIX = "."
NESTED_PREFIX = "&"


class ScssRenderer:
    """Render a selector forest as nested SCSS.

    Args:
        indent: Indent unit per nesting level. Defaults to the active
            GenerateConfig's indent.

    """

    __slots__ = ("_indent",)

    def __init__(self, indent: str | None = None) -> None:
        if indent is None:
            indent = get_generate_config().indent
        self._indent = validate_indent(indent)

    @property
    def indent(self) -> str:
        return self._indent

    def render(self, forest: SelectorForest) -> str:
        """Render every block in forest order.

        Returns:
            SCSS text, or an empty string for an empty forest.
        """
        sb = StringBuilder(self._indent)
        for i, root in enumerate(forest):
            if i:
                sb.blank()
            self._render_rule(root, sb, depth=0)

        logger.debug("Rendered %d blocks", len(forest))
        return sb.build()

    def render_node(self, node: SelectorNode) -> str:
        """Render a single block root and its descendants."""
        sb = StringBuilder(self._indent)
        self._render_rule(node, sb, depth=0)
        return sb.build()

    def _render_rule(self, node: SelectorNode, sb: StringBuilder, depth: int) -> None:
        prefix = ROOT_PREFIX if depth == 0 else NESTED_PREFIX
        sb.line(f"{prefix}{node.name} {{", depth)
        sb.line("", depth + 1)
        for child in node.children:
            self._render_rule(child, sb, depth + 1)
        sb.line("}", depth)
