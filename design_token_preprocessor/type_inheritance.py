"""
Design token $type inheritance.

Tokens inherit $type from their closest parent group when they do not declare
one. JSON Schema cannot look at parent objects, so this pass writes the
inherited type onto every token explicitly. It must run after reference
resolution: a type copied from a referenced token counts as explicit and is
never overwritten.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from .errors import MissingTypeError
from .nodes import TYPE_KEY, is_group, is_metadata_key, is_plain_object, is_token

logger = logging.getLogger(__name__)


def process_type_inheritance(
    document: dict[str, Any],
    inherited_type: str | None = None,
    path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """
    Add an explicit $type to every token in a design token document.

    Args:
        document: The document (or group) to process. It is not modified.
        inherited_type: The $type inherited from parent groups
        path: Path segments of ``document``, used for error messages

    Returns:
        A new document where every token has a $type

    Raises:
        MissingTypeError: If a token has no $type and no ancestor declares one

    Example:
        >>> process_type_inheritance({"colors": {"$type": "color", "primary": {"$value": "#fff"}}})
        {'colors': {'$type': 'color', 'primary': {'$value': '#fff', '$type': 'color'}}}
    """
    if not is_plain_object(document):
        return copy.deepcopy(document)

    current_type = document.get(TYPE_KEY) or inherited_type
    processed: dict[str, Any] = {}

    for key, value in document.items():
        if is_metadata_key(key):
            processed[key] = copy.deepcopy(value)
        elif is_token(value):
            processed[key] = _type_token(value, current_type, (*path, key))
        elif is_group(value):
            processed[key] = process_type_inheritance(value, current_type, (*path, key))
        else:
            processed[key] = copy.deepcopy(value)

    return processed


def _type_token(token: dict[str, Any], current_type: str | None, path: tuple[str, ...]) -> dict[str, Any]:
    typed = copy.deepcopy(token)

    if typed.get(TYPE_KEY):
        return typed

    name = ".".join(path)
    if not current_type:
        raise MissingTypeError(
            f'Token "{name}" has no $type and no inherited type from any ancestor group',
            token_name=name,
        )

    logger.debug("Token %s inherits $type %s", name, current_type)
    typed[TYPE_KEY] = current_type
    return typed


# Alias kept for callers that think of this pass as "adding" types
add_type_inheritance = process_type_inheritance
