
from __future__ import annotations


class MaskError(Exception):
    """Base class for failures raised by the masking engine."""


class DecodeError(MaskError):
    """Input text is not a valid JSON document."""


class EncodeError(MaskError):
    """Masked tree could not be serialized back to JSON."""


class ConfigError(MaskError):
    """Rule file could not be loaded or failed validation."""
