from __future__ import annotations

from typing import Any, Iterable

from pathmask.adapters.observer_logging import LoggingObserver
from pathmask.core.codec import decode_document, encode_document
from pathmask.core.config import MaskerConfig, MaskProfile
from pathmask.core.paths import RuleSet
from pathmask.core.walker import TreeWalker
from pathmask.ports.observer import WalkObserver


class Masker:
    """Path-addressed JSON masker.

    Holds only the caller's patterns and options. Each call builds its own
    rule set and walker, so one instance can be shared between callers.
    """
    def __init__(
        self,
        mask_paths: Iterable[str],
        config: MaskerConfig | None = None,
        observer: WalkObserver | None = None,
    ) -> None:
        if isinstance(mask_paths, str):
            raise TypeError("mask_paths must be an iterable of path strings, not a single string")
        self.mask_paths = tuple(mask_paths)
        self.config = config or MaskerConfig()
        if observer is None and self.config.debug:
            observer = LoggingObserver()
        self.observer = observer

    @classmethod
    def from_profile(cls, profile: MaskProfile, observer: WalkObserver | None = None) -> "Masker":
        return cls(profile.mask_paths, profile.config, observer)

    @classmethod
    def from_file(cls, path: str, observer: WalkObserver | None = None) -> "Masker":
        """Build a masker from a YAML or JSON rule file."""
        return cls.from_profile(MaskProfile.from_file(path), observer)

    def mask(self, document: str | bytes) -> str:
        """Mask a JSON document.

        Args:
            document (str | bytes): JSON text to mask.

        Returns:
            str: Compact JSON text with every matching node replaced.

        Raises:
            DecodeError: If ``document`` is not valid JSON. Nothing is masked.
            EncodeError: If the masked tree cannot be serialized.

        Notes:
            The document is decoded in full before the walk starts and encoded
            only after it finishes; there is no partial output on failure.
        """
        value = decode_document(document)
        masked = self.mask_value(value)
        return encode_document(masked, sort_keys=self.config.sort_keys)

    def mask_value(self, value: Any) -> Any:
        """Mask an already decoded tree and return the masked copy."""
        walker = TreeWalker(
            RuleSet(self.mask_paths),
            self.config.resolve_mask_function(),
            self.observer,
        )
        return walker.walk(value)


def mask_document(
    document: str | bytes,
    mask_paths: Iterable[str],
    config: MaskerConfig | None = None,
    observer: WalkObserver | None = None,
) -> str:
    """Mask ``document`` with a one-off masker.

    Example:
        >>> mask_document('{"name":"John","age":30}', ["$.name"])
        '{"name":"[REDACTED]","age":30}'
    """
    return Masker(mask_paths, config, observer).mask(document)
