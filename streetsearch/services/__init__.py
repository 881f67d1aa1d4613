"""Services layer - Application orchestration.

This module contains the application services that orchestrate
the flow of data through adapters to fulfill use cases.

Available services:
- StreetSearcherService: Loads road networks and finds shortest paths
"""

from .street_searcher import StreetSearcherService

__all__ = ["StreetSearcherService"]
