"""Network adapters - Implementations of NetworkRepositoryPort.

Available implementations:
- TextNetworkRepository: Reads whitespace-separated road files
"""

from .text_repository import TextNetworkRepository

__all__ = ["TextNetworkRepository"]
