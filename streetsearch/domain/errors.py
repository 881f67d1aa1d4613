"""Typed domain errors for the street searcher.

Graph errors are raised synchronously to the immediate caller and are
never retried internally. A failed mutating operation leaves the graph
exactly as it was before the call.

All errors inherit from StreetSearchError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class StreetSearchError(Exception):
    """Base error for the street searcher domain.

    All domain-specific errors inherit from this class.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidPositionError(StreetSearchError):
    """A vertex or edge handle is null, foreign to the graph, or removed.

    Always a caller bug.

    Attributes:
        handle: The offending handle
    """

    handle: Any = None


@dataclass
class InvalidInsertionError(StreetSearchError):
    """An edge insertion would create a self-loop or a duplicate edge.

    Attributes:
        reason: Either "self_loop" or "duplicate_edge"
    """

    reason: str = ""


@dataclass
class NotRemovableError(StreetSearchError):
    """A vertex still has incident edges and cannot be removed.

    Attributes:
        incident_edges: Number of incoming plus outgoing edges
    """

    incident_edges: int = 0


@dataclass
class UnknownEndpointError(StreetSearchError):
    """A search endpoint is not present in the graph.

    Attributes:
        endpoint: The endpoint name or handle that was not found
    """

    endpoint: Any = None


@dataclass
class InvalidWeightError(StreetSearchError):
    """An edge label cannot be used as a search weight.

    Attributes:
        weight: The label value found on the edge
    """

    weight: Any = None


@dataclass
class NoPathFoundError(StreetSearchError):
    """No path exists between the requested endpoints.

    Attributes:
        source: Source endpoint
        target: Target endpoint
    """

    source: Any = None
    target: Any = None


@dataclass
class SearchCancelledError(StreetSearchError):
    """A search was aborted through its cancellation callback.

    Attributes:
        finalized: Number of vertices finalized before the abort
    """

    finalized: int = 0


@dataclass
class NetworkLoadError(StreetSearchError):
    """Network file could not be read or parsed.

    Attributes:
        file_path: Path to the network file
        line_number: 1-based line of the malformed record, if any
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class RenderingError(StreetSearchError):
    """Graph rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
