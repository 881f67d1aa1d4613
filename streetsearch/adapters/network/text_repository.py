"""Text network repository adapter.

Reads road networks stored one road per line:

    <endpoint-a> <endpoint-b> <distance> <road name>

Fields are separated by whitespace and the road name runs to the end
of the line. Blank lines and comment lines are skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from ...config import NetworkConfig, get_config
from ...domain.errors import NetworkLoadError
from ...domain.models import RoadRecord


@dataclass
class TextNetworkRepository:
    """Network repository that reads whitespace-separated text files.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        config: Network configuration (paths, encoding, comment prefix)
        path: Optional explicit file path overriding the configured one
    """

    config: NetworkConfig = field(default_factory=lambda: get_config().network)
    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is not None:
            self.path = Path(self.path)

    @property
    def network_path(self) -> Path:
        """File the repository reads from."""
        return self.path if self.path is not None else self.config.network_path

    def load_roads(self) -> Iterator[RoadRecord]:
        """Yield road records in file order.

        Yields:
            One RoadRecord per non-blank, non-comment line.

        Raises:
            NetworkLoadError: If the file cannot be read or a line is malformed.
        """
        path = self.network_path
        self._logger.debug("Loading network", extra={"network_path": str(path)})

        count = 0
        try:
            with path.open(encoding=self.config.encoding) as f:
                for line_number, line in enumerate(f, start=1):
                    stripped = line.strip()
                    if not stripped or stripped.startswith(self.config.comment_prefix):
                        continue
                    yield self._parse_line(stripped, path, line_number)
                    count += 1
        except OSError as e:
            raise NetworkLoadError(
                f"Failed to read network file {path}",
                file_path=str(path),
                cause=e,
            )

        self._logger.info(
            "Network file read",
            extra={"network_path": str(path), "records": count},
        )

    @staticmethod
    def _parse_line(line: str, path: Path, line_number: int) -> RoadRecord:
        tokens = line.split(maxsplit=3)
        if len(tokens) < 4:
            raise NetworkLoadError(
                f"Expected '<from> <to> <distance> <road>' at line {line_number}",
                file_path=str(path),
                line_number=line_number,
            )

        from_name, to_name, distance_str, road_name = tokens
        try:
            return RoadRecord(
                from_name=from_name,
                to_name=to_name,
                distance=float(distance_str),
                road_name=road_name,
            )
        except ValueError as e:
            raise NetworkLoadError(
                f"Invalid distance {distance_str!r} at line {line_number}",
                file_path=str(path),
                line_number=line_number,
                cause=e,
            )
