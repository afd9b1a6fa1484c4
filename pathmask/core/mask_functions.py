
from __future__ import annotations

import hashlib
import json
from typing import Any, Callable


DEFAULT_MASK_STRING = "[REDACTED]"

MaskFunction = Callable[[Any], Any]


def fixed_string(text: str = DEFAULT_MASK_STRING) -> MaskFunction:
    """Build a mask function that replaces every masked value with ``text``."""
    def _mask(_value: Any) -> Any:
        return text

    return _mask


def preserve_type(text: str = DEFAULT_MASK_STRING) -> MaskFunction:
    """Build a mask function that keeps the JSON type of the original value.

    Notes:
        Strings become ``text``, numbers ``0``, booleans ``False``, objects
        ``{}`` and arrays ``[]``. Consumers that validate field types keep
        working on redacted documents.
    """
    def _mask(value: Any) -> Any:
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float)):
            return 0
        if isinstance(value, dict):
            return {}
        if isinstance(value, list):
            return []
        return text

    return _mask


def hash_value(salt: str = "") -> MaskFunction:
    """Build a mask function that replaces values with a salted SHA-256 digest.

    Equal inputs produce equal digests, so redacted values can still be
    correlated across records without being revealed.
    """
    def _mask(value: Any) -> Any:
        payload = json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
        digest = hashlib.sha256((salt + payload).encode("utf-8")).hexdigest()
        return f"sha256:{digest}"

    return _mask
