"""
Preprocessing pipeline.

Turns a parsed design token document into one a structural JSON Schema
validator can check:

1. Reference resolution: aliases, JSON Pointers and $extends
2. Type inheritance: explicit $type on every token

Resolver documents take a separate path: semantic validation only.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from .config import PreprocessorConfig, SchemaType
from .reference_resolver import resolve_references
from .resolver_validator import validate_resolver_semantics
from .type_inheritance import process_type_inheritance

logger = logging.getLogger(__name__)


def apply_preprocessors(document: dict[str, Any], config: PreprocessorConfig | None = None) -> dict[str, Any]:
    """
    Apply the configured preprocessors to a parsed document.

    Args:
        document: The parsed document. It is copied first and never modified.
        config: Which passes to run (defaults to all of them, format document)

    Returns:
        The preprocessed document

    Raises:
        PreprocessorError: On the first problem found by any pass
    """
    if config is None:
        config = PreprocessorConfig()

    result = copy.deepcopy(document)

    if config.schema_type == SchemaType.RESOLVER:
        logger.debug("Validating resolver semantics")
        return validate_resolver_semantics(result)

    # Type inheritance must see the types copied from referenced tokens
    if config.resolve_references:
        logger.debug("Resolving references")
        result = resolve_references(result)

    if config.inherit_types:
        logger.debug("Applying type inheritance")
        result = process_type_inheritance(result)

    return result
