from __future__ import annotations

import logging
from dataclasses import dataclass, field


@dataclass
class LoggingObserver:
    """Debug trace of a walk through the standard logging module.

    Only paths are logged, never values, so enabling the trace cannot leak
    the data being masked.
    """
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("pathmask.walk"))

    def node_visited(self, path: str) -> None:
        self.logger.debug("visit %s", path)

    def node_masked(self, path: str, canonical_path: str) -> None:
        self.logger.debug("mask %s (rule %s)", path, canonical_path)
