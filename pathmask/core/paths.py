from __future__ import annotations

import re
from typing import Iterable, Iterator


ROOT_PATH = "$"
ANY_INDEX = "[]"


class PathNormalizer:
    """Collapse concrete array indices so paths can be matched against rules."""
    def __init__(self) -> None:
        self._index_re = re.compile(r"\[[0-9]+\]")

    def normalize(self, path: str) -> str:
        """Return the canonical form of a traversal path.

        Args:
            path (str): Concrete path such as ``$.jobs[3].name``.

        Returns:
            str: Path with every bracketed index replaced by ``[]``.
        """
        return self._index_re.sub(ANY_INDEX, path)

    __call__ = normalize


def normalize_path(path: str) -> str:
    """Canonicalize a single path without building a rule set."""
    return PathNormalizer().normalize(path)


class RuleSet:
    """Immutable set of canonical paths that must be masked.

    Membership is only ever tested against the canonical form of a path, so
    ``$.items[]`` covers every element of ``items`` regardless of length.
    """
    def __init__(self, patterns: Iterable[str]) -> None:
        self._patterns = frozenset(patterns)
        self._normalizer = PathNormalizer()

    def contains(self, canonical_path: str) -> bool:
        return canonical_path in self._patterns

    def canonicalize(self, path: str) -> str:
        return self._normalizer.normalize(path)

    def matches(self, path: str) -> bool:
        """Check a concrete path against the rules.

        Notes:
            Matching is exact on the canonical path; there is no prefix or
            substring matching.
        """
        return self.contains(self.canonicalize(path))

    def __contains__(self, canonical_path: object) -> bool:
        return canonical_path in self._patterns

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._patterns))

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"RuleSet({sorted(self._patterns)!r})"
