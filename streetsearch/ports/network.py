"""Network port - Abstraction for reading road network descriptions.

The repository turns a persisted network description into a stream
of road records. Inserting those records into a graph is the
service's job.
"""

from __future__ import annotations

from typing import Iterator, Protocol

from ..domain.models import RoadRecord


class NetworkRepositoryPort(Protocol):
    """Port for loading road records.

    Implementation: adapters/network/text_repository.py
    """

    def load_roads(self) -> Iterator[RoadRecord]:
        """Yield the road records of the network.

        Raises:
            NetworkLoadError: If the source cannot be read or parsed.
        """
        ...
