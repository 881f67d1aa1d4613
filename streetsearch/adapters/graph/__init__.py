"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- SparseGraph: Directed graph store with generation-checked handles
- DijkstraPathFinder: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraPathFinder
from .sparse_graph import SparseGraph

__all__ = ["SparseGraph", "DijkstraPathFinder"]
