"""
Path navigation helpers shared by the design token preprocessors.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .nodes import TYPE_KEY


class _Missing:
    """Sentinel for a path that leads nowhere (distinct from a JSON null)."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def _list_index(segment: str, size: int) -> int | None:
    # Only canonical indices: "0", "12" (no sign, no leading zeros)
    if not segment.isdigit() or (len(segment) > 1 and segment[0] == "0"):
        return None
    index = int(segment)
    return index if index < size else None


def navigate_to_path(root: Any, segments: Sequence[str]) -> Any:
    """
    Navigate through a document using path segments.

    Args:
        root: The root object to navigate from
        segments: Property names (or list indices) to traverse

    Returns:
        The value at the path, or MISSING if any step does not exist
    """
    current = root

    for segment in segments:
        if isinstance(current, dict):
            if segment not in current:
                return MISSING
            current = current[segment]
        elif isinstance(current, list):
            index = _list_index(segment, len(current))
            if index is None:
                return MISSING
            current = current[index]
        else:
            return MISSING

    return current


def resolve_inherited_type(root: Any, segments: Sequence[str]) -> str | None:
    """
    Find the $type a node inherits by walking up its ancestors.

    Args:
        root: The document root
        segments: Path segments to the node itself (the node is not inspected)

    Returns:
        The nearest ancestor's string $type, or None if no ancestor declares one
    """
    for depth in range(len(segments) - 1, -1, -1):
        parent = navigate_to_path(root, segments[:depth])
        if isinstance(parent, dict) and isinstance(parent.get(TYPE_KEY), str):
            return parent[TYPE_KEY]

    return None
