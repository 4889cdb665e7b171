"""ForestRenderer protocol — stable interface for selector forest renderers.

Any renderer that implements ``render(forest) -> str`` conforms to this
protocol. The built-in ``ScssRenderer`` is the reference implementation.

Example:
    from bemtree.renderers.protocol import ForestRenderer

    def to_clipboard(renderer: ForestRenderer, forest: SelectorForest) -> str:
        return renderer.render(forest)

"""

from typing import Protocol

from bemtree.nodes import SelectorForest


class ForestRenderer(Protocol):
    """Protocol for selector forest renderers."""

    def render(self, forest: SelectorForest) -> str:
        """Render a SelectorForest to a string.

        Args:
            forest: The selector forest to render.

        Returns:
            Rendered string output.

        """
        ...
