"""
Resolver document semantic validator.

Resolver documents describe named token ``sets``, ``modifiers`` and a
``resolutionOrder``. JSON Schema checks their shape; this module checks the
rules it cannot express:

1. No duplicate names among inline resolutionOrder entries
2. No circular references between sets
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import CircularSetReferenceError, DuplicateNameError
from .nodes import REF_KEY, is_plain_object, is_pointer_reference

logger = logging.getLogger(__name__)

SET_POINTER_PREFIX = "#/sets/"


def validate_resolver_semantics(document: dict[str, Any]) -> dict[str, Any]:
    """
    Validate resolver semantics.

    Args:
        document: A parsed resolver document

    Returns:
        The same document, untouched

    Raises:
        DuplicateNameError: If two inline resolutionOrder entries share a name
        CircularSetReferenceError: If set sources reference each other in a loop
    """
    if not is_plain_object(document):
        return document

    check_duplicate_names(document.get("resolutionOrder"))

    sets = document.get("sets")
    if is_plain_object(sets):
        for set_name, set_def in sets.items():
            _check_set_references(sets, set_name, set_def, ())

    logger.debug("Resolver document passed semantic validation")
    return document


def check_duplicate_names(resolution_order: Any) -> None:
    """Fail on the first inline resolutionOrder name seen twice."""
    if not isinstance(resolution_order, list):
        return

    names: set[str] = set()
    for item in resolution_order:
        # $ref entries carry no name of their own
        if not is_plain_object(item) or not isinstance(item.get("name"), str):
            continue

        name = item["name"]
        if name in names:
            raise DuplicateNameError(f'Duplicate name in resolutionOrder: "{name}"', name=name)
        names.add(name)


def _set_name_from_pointer(pointer: str) -> str | None:
    if not pointer.startswith(SET_POINTER_PREFIX):
        return None
    return pointer[len(SET_POINTER_PREFIX) :].replace("~1", "/").replace("~0", "~")


def _check_set_references(
    sets: dict[str, Any],
    set_name: str,
    set_def: Any,
    visited: tuple[str, ...],
) -> None:
    """Depth-first walk of a set's sources, following references to other sets."""
    if set_name in visited:
        chain = (*visited, set_name)
        raise CircularSetReferenceError(f"Circular reference detected in sets: {' -> '.join(chain)}", chain=chain)

    visited = (*visited, set_name)

    if not is_plain_object(set_def) or not isinstance(set_def.get("sources"), list):
        return

    for source in set_def["sources"]:
        if not is_pointer_reference(source):
            continue

        target_name = _set_name_from_pointer(source[REF_KEY])
        if target_name is not None and target_name in sets:
            _check_set_references(sets, target_name, sets[target_name], visited)
