"""Rendering port - Abstraction for textual graph rendering.

This protocol defines the contract for graph rendering, allowing
different output formats to be plugged in.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from .graph import GraphPort


class GraphRendererPort(Protocol):
    """Port for graph rendering.

    Implementation: adapters/rendering/dot_renderer.py
    """

    def render(self, graph: GraphPort[Any, Any]) -> str:
        """Render a graph as text.

        Args:
            graph: The graph to render.

        Returns:
            The rendered document.
        """
        ...

    def render_to_file(self, graph: GraphPort[Any, Any], output_path: Path) -> Path:
        """Render a graph and save it to file.

        Args:
            graph: The graph to render.
            output_path: Where to save the document.

        Returns:
            Path to the generated file.
        """
        ...
