"""
Configuration and defaults for track tables.

Projection default:
- "+proj=longlat" is what most GPS trackers produce
- It is only applied when a caller explicitly asks for the default
  (e.g. `trackdf summary data.csv --proj`); tables are never silently
  given a projection
"""

from dataclasses import dataclass
from typing import Dict, Any
import json
from pathlib import Path


@dataclass
class Config:
    """
    Global configuration for track table operations.
    """

    # Projection used when the caller asks for "the default"
    default_projection: str = "+proj=longlat"

    # Backend that mixed-backend row binds are coerced to
    canonical_table_kind: str = "pandas"

    # Error annotation codes
    error_ok_code: str = "OK"
    error_separator: str = "+"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_projection": self.default_projection,
            "canonical_table_kind": self.canonical_table_kind,
            "error_ok_code": self.error_ok_code,
            "error_separator": self.error_separator
        }

    @classmethod
    def from_json(cls, path: Path) -> "Config":
        """Load config from JSON file."""
        with open(path) as f:
            data = json.load(f)
        return cls(**data)

    def save(self, path: Path) -> None:
        """Save config to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


# Global default config
DEFAULT_CONFIG = Config()
