"""
OBJDIST Run Configuration

A RunConfig carries every location and layout knob of a run. Defaults come
from objdist.config.defaults; a YAML manifest can override any of them:

    input_dir: /data/objects
    output_path: /data/distances.data
    point_offset: 2
    strict_names: false
    parquet_path: /data/distances.parquet
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from objdist.config import defaults


@dataclass(frozen=True)
class RunConfig:
    """Configuration for one distance run."""
    input_dir: Path = Path(defaults.INPUT_DIR)
    output_path: Path = Path(defaults.OUTPUT_PATH)
    point_offset: int = defaults.POINT_OFFSET
    strict_names: bool = False
    parquet_path: Optional[Path] = None

    def __post_init__(self):
        # Accept plain strings from manifests and CLI arguments
        object.__setattr__(self, 'input_dir', Path(self.input_dir))
        object.__setattr__(self, 'output_path', Path(self.output_path))
        if self.parquet_path is not None:
            object.__setattr__(self, 'parquet_path', Path(self.parquet_path))
        if self.point_offset < 0:
            raise ValueError(f"point_offset must be >= 0, got {self.point_offset}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfig":
        """
        Build a config from a mapping, rejecting unknown keys.

        Args:
            data: Mapping of RunConfig field name -> value

        Returns:
            RunConfig with defaults for missing keys
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown config keys: {', '.join(unknown)}. "
                f"Allowed: {', '.join(sorted(known))}"
            )
        return cls(**data)

    @classmethod
    def from_manifest(cls, manifest_path: Union[str, Path]) -> "RunConfig":
        """Load a config from a YAML manifest. An empty manifest means defaults."""
        with open(manifest_path, 'r') as f:
            manifest = yaml.safe_load(f)

        if manifest is None:
            manifest = {}
        if not isinstance(manifest, dict):
            raise ValueError(f"Manifest must be a mapping: {manifest_path}")

        return cls.from_dict(manifest)

    def with_overrides(self, **overrides: Any) -> "RunConfig":
        """Return a copy with the given fields replaced. None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
