"""Design Token Preprocessor

Resolves references and type inheritance in DTCG design token documents so
that they can be checked by a plain structural JSON Schema validator, and
checks resolver documents for semantic errors JSON Schema cannot express.
"""

__version__ = "1.0.0"

from .config import OutputConfig, PreprocessorConfig, SchemaType
from .errors import (
    AmbiguousPointerError,
    CircularReferenceError,
    CircularSetReferenceError,
    DuplicateNameError,
    InvalidExtendsError,
    MalformedTokenError,
    MissingTypeError,
    PreprocessorError,
    ResolverSemanticError,
    UnresolvedReferenceError,
)
from .nodes import NodeKind, classify, is_group, is_token
from .pipeline import apply_preprocessors
from .reference_resolver import ReferenceResolver, deep_merge, resolve_references
from .resolver_validator import validate_resolver_semantics
from .type_inheritance import process_type_inheritance

__all__ = [
    "apply_preprocessors",
    "resolve_references",
    "process_type_inheritance",
    "validate_resolver_semantics",
    "ReferenceResolver",
    "deep_merge",
    "classify",
    "is_token",
    "is_group",
    "NodeKind",
    "PreprocessorConfig",
    "OutputConfig",
    "SchemaType",
    "PreprocessorError",
    "MalformedTokenError",
    "UnresolvedReferenceError",
    "AmbiguousPointerError",
    "CircularReferenceError",
    "MissingTypeError",
    "InvalidExtendsError",
    "ResolverSemanticError",
    "DuplicateNameError",
    "CircularSetReferenceError",
]
