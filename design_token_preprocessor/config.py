"""
Configuration for the design token preprocessing pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SchemaType(str, Enum):
    """Kind of document being preprocessed."""

    FORMAT = "format"  # Token document: resolve references, then inherit types
    RESOLVER = "resolver"  # Resolver document: semantic checks only


@dataclass
class OutputConfig:
    """Configuration for writing the preprocessed document as JSON."""

    # JSON indentation (0 or less writes a single line)
    indent: int = 2

    # Sort object keys in the output
    sort_keys: bool = False


@dataclass
class PreprocessorConfig:
    """Configuration options for preprocessing."""

    # Replace aliases, JSON Pointers and $extends with concrete values
    resolve_references: bool = True

    # Stamp inherited $type onto every token
    inherit_types: bool = True

    # Which document shape is being processed
    schema_type: SchemaType = SchemaType.FORMAT

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> PreprocessorConfig:
        """Create a config from a dictionary."""
        config = PreprocessorConfig()
        for k, v in d.items():
            if k == "schema_type":
                config.schema_type = SchemaType(v)
            elif k == "output" and isinstance(v, dict):
                config.output = OutputConfig(
                    indent=v.get("indent", 2),
                    sort_keys=v.get("sort_keys", False),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "resolve_references": self.resolve_references,
            "inherit_types": self.inherit_types,
            "schema_type": self.schema_type.value,
            "output": {
                "indent": self.output.indent,
                "sort_keys": self.output.sort_keys,
            },
        }
