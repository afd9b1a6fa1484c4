from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RecordingObserver:
    """In-memory trace for tests and local inspection."""
    visited: list[str] = field(default_factory=list)
    masked: list[tuple[str, str]] = field(default_factory=list)

    def node_visited(self, path: str) -> None:
        self.visited.append(path)

    def node_masked(self, path: str, canonical_path: str) -> None:
        self.masked.append((path, canonical_path))
