"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Graph storage and path finding (sparse graph, Dijkstra)
- Network files (whitespace-separated text)
- Rendering (Graphviz DOT)
"""
