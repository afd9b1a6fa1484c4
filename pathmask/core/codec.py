from __future__ import annotations

import json
import math
from typing import Any

from pathmask.core.errors import DecodeError, EncodeError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def decode_document(text: str | bytes) -> Any:
    """Decode a JSON document into plain Python values.

    Args:
        text (str | bytes): Document text; bytes must be UTF-8.

    Returns:
        Any: Decoded tree of dict, list, str, int, float, bool and None.

    Raises:
        DecodeError: If the text is not a valid JSON document.

    Notes:
        ``NaN`` and ``Infinity`` are rejected even though the stdlib decoder
        accepts them, since they are not part of JSON. Numbers too large for
        a float are rejected too, instead of decoding to infinity.
    """
    try:
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        return json.loads(text, parse_float=_parse_finite_float, parse_constant=_reject_constant)
    except (ValueError, TypeError) as exc:
        raise DecodeError(f"failed to decode input: {exc}") from exc
    except RecursionError as exc:
        raise DecodeError("failed to decode input: document is nested too deeply") from exc


def encode_document(value: Any, sort_keys: bool = False) -> str:
    """Encode a tree as compact JSON.

    Args:
        value (Any): Tree to encode.
        sort_keys (bool): Sort object keys instead of keeping decode order.

    Returns:
        str: JSON text without insignificant whitespace.

    Raises:
        EncodeError: If the tree holds a value JSON cannot represent.
    """
    try:
        return json.dumps(
            value,
            sort_keys=sort_keys,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodeError(f"failed to encode masked document: {exc}") from exc
