"""Renderers turning a SelectorForest into stylesheet text."""

from bemtree.renderers.protocol import ForestRenderer
from bemtree.renderers.scss import ScssRenderer

__all__ = ["ForestRenderer", "ScssRenderer"]
