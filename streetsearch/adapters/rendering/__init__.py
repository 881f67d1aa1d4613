"""Rendering adapters - Implementations of GraphRendererPort.

Available implementations:
- DotGraphRenderer: Graphviz DOT text rendering
"""

from .dot_renderer import DotGraphRenderer

__all__ = ["DotGraphRenderer"]
