"""
Node classification and reference parsing for design token documents.

A node is a token when it carries $value or $ref, a group when it is any
other mapping, and anything else (lists, primitives) only ever appears
inside token values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import InvalidExtendsError

VALUE_KEY = "$value"
REF_KEY = "$ref"
TYPE_KEY = "$type"
EXTENDS_KEY = "$extends"
METADATA_PREFIX = "$"


class NodeKind(Enum):
    TOKEN = "token"
    GROUP = "group"
    OTHER = "other"


def is_plain_object(value: Any) -> bool:
    """Check if a value is a JSON object (not a list or primitive)."""
    return isinstance(value, dict)


def is_token(node: Any) -> bool:
    """Check if a node is a design token (has a $value or $ref key)."""
    return is_plain_object(node) and (VALUE_KEY in node or REF_KEY in node)


def is_group(node: Any) -> bool:
    """Check if a node is a group (a mapping without $value or $ref)."""
    return is_plain_object(node) and VALUE_KEY not in node and REF_KEY not in node


def classify(node: Any) -> NodeKind:
    if is_token(node):
        return NodeKind.TOKEN
    if is_group(node):
        return NodeKind.GROUP
    return NodeKind.OTHER


def is_metadata_key(key: str) -> bool:
    return key.startswith(METADATA_PREFIX)


@dataclass(frozen=True)
class Reference:
    """Base class for parsed references."""

    # The reference exactly as written in the document
    raw: str = ""

    # Path segments from the document root
    segments: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AliasReference(Reference):
    """Curly brace reference such as "{colors.primary}"."""

    pass


@dataclass(frozen=True)
class PointerReference(Reference):
    """JSON Pointer reference such as "#/colors/primary/$value"."""

    @property
    def targets_value(self) -> bool:
        """Whether the pointer addresses a token's $value member."""
        return bool(self.segments) and self.segments[-1] == VALUE_KEY


def is_alias_reference(value: Any) -> bool:
    """Check if a value is a curly brace reference (e.g., "{group.token}")."""
    return isinstance(value, str) and value.startswith("{") and value.endswith("}") and len(value) > 2


def is_pointer_reference(token: Any) -> bool:
    """Check if a token uses a JSON Pointer reference (non-empty string $ref)."""
    return is_plain_object(token) and isinstance(token.get(REF_KEY), str) and len(token[REF_KEY]) > 0


def has_ref_property(value: Any) -> bool:
    """Check if a value is an object with a string $ref (composite value leaves)."""
    return is_plain_object(value) and isinstance(value.get(REF_KEY), str)


def parse_alias_reference(reference: str) -> AliasReference:
    """
    Parse a curly brace reference into path segments.

    Example: "{colors.primary}" -> ("colors", "primary")
    """
    return AliasReference(raw=reference, segments=tuple(reference[1:-1].split(".")))


def parse_json_pointer(pointer: str) -> PointerReference:
    """
    Parse a JSON Pointer into unescaped path segments.

    Example: "#/colors/primary/$value" -> ("colors", "primary", "$value")

    A bare "#" or "#/" addresses the document root.
    """
    path = pointer
    if path.startswith("#/"):
        path = path[2:]
    elif path.startswith("#"):
        path = path[1:]

    if path == "":
        return PointerReference(raw=pointer, segments=())

    # ~1 must be decoded before ~0 so that "~01" becomes "~1", not "/"
    segments = tuple(segment.replace("~1", "/").replace("~0", "~") for segment in path.split("/"))
    return PointerReference(raw=pointer, segments=segments)


def parse_extends_reference(extends: Any) -> Reference:
    """
    Parse a group's $extends value.

    Accepts "{group}" aliases, "#/group" pointers and {"$ref": "#/group"} objects.
    """
    if isinstance(extends, str):
        if extends.startswith("{") and extends.endswith("}"):
            return parse_alias_reference(extends)
        if extends.startswith("#"):
            return parse_json_pointer(extends)
        raise InvalidExtendsError(f"Invalid $extends reference format: {extends}")

    if has_ref_property(extends):
        return parse_json_pointer(extends[REF_KEY])

    raise InvalidExtendsError(f"Invalid $extends reference: {extends!r}")
