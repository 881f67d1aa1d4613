"""DOT graph renderer adapter.

Renders a graph as a Graphviz ``digraph`` document: one line per
vertex, then one line per edge labelled with the edge payload.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...domain.errors import RenderingError
from ...ports.graph import GraphPort


def _quote(value: Any) -> str:
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


@dataclass
class DotGraphRenderer:
    """Graphviz DOT renderer.

    This adapter implements GraphRendererPort.

    Attributes:
        indent: Prefix for every statement inside the digraph block
    """

    indent: str = "  "
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, graph: GraphPort[Any, Any]) -> str:
        """Render a graph as DOT text.

        Args:
            graph: The graph to render.

        Returns:
            The DOT document, vertices and edges in insertion order.
        """
        lines = ["digraph {"]
        for v in graph.vertices():
            lines.append(f"{self.indent}{_quote(graph.get(v))}")
        for e in graph.edges():
            lines.append(
                f"{self.indent}{_quote(graph.get(graph.source(e)))} -> "
                f"{_quote(graph.get(graph.destination(e)))} "
                f"[label={_quote(graph.get(e))}];"
            )
        lines.append("}")
        return "\n".join(lines)

    def render_to_file(self, graph: GraphPort[Any, Any], output_path: Path) -> Path:
        """Render a graph and save it to file.

        Args:
            graph: The graph to render.
            output_path: Where to save the DOT document.

        Returns:
            Path to the generated file.

        Raises:
            RenderingError: If the file cannot be written.
        """
        output_path = Path(output_path)
        document = self.render(graph)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(document + "\n", encoding="utf-8")
        except OSError as e:
            self._logger.error(
                "Graph rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Graph rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="dot",
                cause=e,
            )

        self._logger.info(
            "Graph rendered",
            extra={"output_path": str(output_path)},
        )
        return output_path
