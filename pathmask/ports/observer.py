from __future__ import annotations

from typing import Protocol


class WalkObserver(Protocol):
    """Trace boundary for tree walks."""
    def node_visited(self, path: str) -> None:
        """Report that the walker reached a node.

        Args:
            path (str): Concrete path of the node, including array indices.
        """
        ...

    def node_masked(self, path: str, canonical_path: str) -> None:
        """Report that a node was replaced by the mask function.

        Args:
            path (str): Concrete path of the masked node.
            canonical_path (str): Rule that matched the node.
        """
        ...
