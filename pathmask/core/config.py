from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from jsonschema import ValidationError, validate

from pathmask.core.errors import ConfigError
from pathmask.core.mask_functions import DEFAULT_MASK_STRING, MaskFunction, fixed_string


MASK_PROFILE_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["mask_paths"],
    "additionalProperties": False,
    "properties": {
        "mask_paths": {
            "type": "array",
            "items": {
                "type": "string",
                "pattern": r"^\$(?!.*\[[0-9]+\])",
            },
        },
        "mask_string": {"type": "string"},
        "debug": {"type": "boolean"},
        "sort_keys": {"type": "boolean"},
    },
}


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean from the environment with a safe default."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes"}


@dataclass
class MaskerConfig:
    mask_string: str = DEFAULT_MASK_STRING
    mask_function: MaskFunction | None = None
    debug: bool = field(default_factory=lambda: _env_bool("PATHMASK_DEBUG", False))
    sort_keys: bool = False

    def resolve_mask_function(self) -> MaskFunction:
        """Return the custom mask function, or a fixed-string one by default."""
        if self.mask_function is not None:
            return self.mask_function
        return fixed_string(self.mask_string)


@dataclass
class MaskProfile:
    """Rule file contents: the paths to mask plus masker options."""
    mask_paths: list[str]
    config: MaskerConfig = field(default_factory=MaskerConfig)

    @staticmethod
    def from_file(path: str) -> "MaskProfile":
        """Load and validate a YAML or JSON rule file.

        Args:
            path (str): Path to a ``.yaml``, ``.yml`` or ``.json`` file.

        Returns:
            MaskProfile: Parsed rules and options.

        Raises:
            ConfigError: If the file cannot be read, parsed or validated.
        """
        ext = Path(path).suffix.lower()
        if ext not in {".yaml", ".yml", ".json"}:
            raise ConfigError(f"Unsupported rule file extension: {ext}")
        try:
            with open(path, "r", encoding="utf-8") as handle:
                if ext == ".json":
                    data = json.load(handle)
                else:
                    data = yaml.safe_load(handle)
        except OSError as exc:
            raise ConfigError(f"failed to read rule file {path}: {exc}") from exc
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigError(f"failed to parse rule file {path}: {exc}") from exc

        try:
            validate(instance=data, schema=MASK_PROFILE_SCHEMA)
        except ValidationError as exc:
            raise ConfigError(f"invalid rule file {path}: {exc.message}") from exc

        config = MaskerConfig(
            mask_string=str(data.get("mask_string", DEFAULT_MASK_STRING)),
            sort_keys=bool(data.get("sort_keys", False)),
        )
        if "debug" in data:
            config.debug = bool(data["debug"])
        return MaskProfile(mask_paths=list(data["mask_paths"]), config=config)

    def snapshot(self) -> dict:
        return {
            "mask_paths": list(self.mask_paths),
            "mask_string": self.config.mask_string,
            "debug": self.config.debug,
            "sort_keys": self.config.sort_keys,
        }
