from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("streetsearch")


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    level: Optional[str] = None,
) -> None:
    """Apply the logging configuration to the root logger.

    ``level`` overrides the configured level (e.g. from a CLI flag).
    Calling this again replaces the previous configuration.
    """
    config = config or get_config().observability
    effective = (level or config.level).upper()
    logging.basicConfig(level=effective, format=config.format, force=True)
    logger.debug("Logging configured", extra={"level": effective})
