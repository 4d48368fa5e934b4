"""
Design token reference resolver.

Replaces every reference in a design token document with the value it points
to. This runs BEFORE type inheritance so that a token which aliases another
token can pick up the referenced token's $type.

Supported reference syntaxes:
- Curly brace aliases: "$value": "{group.token}"
- JSON Pointer references: "$ref": "#/group/token/$value"
- Group extension: "$extends": "{group}" (or a JSON Pointer), deep merged

Chained references are followed, and every chain is checked for cycles.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .errors import (
    AmbiguousPointerError,
    CircularReferenceError,
    InvalidExtendsError,
    MalformedTokenError,
    PreprocessorError,
    UnresolvedReferenceError,
)
from .nodes import (
    EXTENDS_KEY,
    REF_KEY,
    TYPE_KEY,
    VALUE_KEY,
    has_ref_property,
    is_alias_reference,
    is_group,
    is_metadata_key,
    is_plain_object,
    is_pointer_reference,
    is_token,
    parse_alias_reference,
    parse_extends_reference,
    parse_json_pointer,
)
from .utils import MISSING, navigate_to_path, resolve_inherited_type

logger = logging.getLogger(__name__)


@dataclass
class ResolveResult:
    """The value a reference resolves to, and the type it carries (if known)."""

    value: Any = None
    type: str | None = None


def _enter(reference: str, visited: tuple[str, ...]) -> tuple[str, ...]:
    """Push a reference onto the active chain, failing if it is already there."""
    if reference in visited:
        chain = (*visited, reference)
        raise CircularReferenceError(f"Circular reference detected: {' -> '.join(chain)}", chain=chain)
    return (*visited, reference)


def _format_path(path: Sequence[str]) -> str:
    return ".".join(path) if path else "(root)"


def deep_merge(inherited: dict[str, Any], local: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two groups for $extends resolution.

    Local properties override inherited properties at the same key: $ keys and
    tokens replace wholesale, groups present on both sides merge recursively.
    $extends itself is never copied. Neither input is modified.

    Args:
        inherited: The (already resolved) group being extended
        local: The group carrying the $extends relation

    Returns:
        A new merged group
    """
    result = dict(inherited)

    for key, value in local.items():
        if key == EXTENDS_KEY:
            continue

        if is_metadata_key(key):
            result[key] = value
        elif is_group(value) and is_group(result.get(key)):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


class ReferenceResolver:
    """Resolves aliases, JSON Pointers and $extends against one document root."""

    def __init__(self, root: dict[str, Any]):
        """
        Initialize the resolver.

        Args:
            root: The document every reference is resolved against. It is
                only read, never modified.
        """
        self.root = root

    def resolve(self) -> dict[str, Any]:
        """Resolve the whole document and return a new tree."""
        return self.resolve_group(self.root, (), ())

    def resolve_alias(self, reference: str, visited: tuple[str, ...] = ()) -> ResolveResult:
        """
        Resolve a curly brace reference to the $value of the token it names.

        Args:
            reference: The alias, e.g. "{colors.primary}"
            visited: References already active in this chain

        Returns:
            ResolveResult with the target's value and its declared or inherited type
        """
        visited = _enter(reference, visited)
        alias = parse_alias_reference(reference)
        target = navigate_to_path(self.root, alias.segments)

        if not is_token(target):
            raise UnresolvedReferenceError(f'Curly brace reference "{reference}" does not point to a valid token')

        if is_alias_reference(target.get(VALUE_KEY)):
            return self.resolve_alias(target[VALUE_KEY], visited)

        if is_pointer_reference(target):
            return self.resolve_pointer(target[REF_KEY], visited)

        logger.debug("Resolved alias %s", reference)
        return ResolveResult(
            value=self.resolve_value(target.get(VALUE_KEY), visited),
            type=self._token_type(target, alias.segments),
        )

    def resolve_pointer(self, pointer: str, visited: tuple[str, ...] = ()) -> ResolveResult:
        """
        Resolve a JSON Pointer, which may address any node or sub-value.

        A pointer ending in /$value is equivalent to a curly brace alias: the
        type is taken from the token owning that $value. Pointers into the
        middle of a value carry no type.

        Args:
            pointer: The pointer, e.g. "#/colors/primary/$value"
            visited: References already active in this chain

        Returns:
            ResolveResult with the addressed value and the inferred type (if any)
        """
        visited = _enter(pointer, visited)
        reference = parse_json_pointer(pointer)
        target = navigate_to_path(self.root, reference.segments)

        if target is MISSING:
            raise UnresolvedReferenceError(f'JSON Pointer reference "{pointer}" could not be resolved')

        if is_token(target):
            if is_alias_reference(target.get(VALUE_KEY)):
                return self.resolve_alias(target[VALUE_KEY], visited)

            if is_pointer_reference(target):
                return self.resolve_pointer(target[REF_KEY], visited)

            # Unlike aliases, pointers must address $value explicitly
            raise AmbiguousPointerError(
                f'JSON Pointer reference "{pointer}" points to a token object. '
                f'Use "{pointer}/$value" to reference the token\'s value, or use curly brace syntax.'
            )

        inferred_type = None
        if reference.targets_value:
            owner_segments = reference.segments[:-1]
            owner = navigate_to_path(self.root, owner_segments)
            if is_token(owner):
                inferred_type = self._token_type(owner, owner_segments)

        if VALUE_KEY in reference.segments:
            value = self.resolve_value(target, visited)
        else:
            # Group or metadata: copied as found, tokens inside are not values
            value = copy.deepcopy(target)

        logger.debug("Resolved pointer %s", pointer)
        return ResolveResult(value=value, type=inferred_type)

    def resolve_value(self, value: Any, visited: tuple[str, ...] = ()) -> Any:
        """
        Resolve every reference inside a (possibly composite) token value.

        Alias strings and {"$ref": ...} objects are replaced wherever they
        appear in nested objects and arrays; other leaves are kept as is.

        Args:
            value: A token $value
            visited: References already active in this chain

        Returns:
            A new value with no references left
        """
        if is_alias_reference(value):
            return self.resolve_alias(value, visited).value

        if isinstance(value, list):
            return [self.resolve_value(item, visited) for item in value]

        if has_ref_property(value):
            return self.resolve_pointer(value[REF_KEY], visited).value

        if is_plain_object(value):
            return {key: self.resolve_value(item, visited) for key, item in value.items()}

        return value

    def resolve_token(self, token: dict[str, Any], path: Sequence[str]) -> dict[str, Any]:
        """
        Resolve the references carried by a single token.

        Args:
            token: The token object
            path: Path segments of the token, used for error messages

        Returns:
            A new token with a concrete $value and no $ref
        """
        name = ".".join(path)
        resolved = copy.deepcopy(token)

        try:
            if REF_KEY in token and VALUE_KEY in token:
                raise MalformedTokenError(
                    f'Token "{name}" has both $ref and $value properties. These are mutually exclusive.'
                )

            if is_pointer_reference(token):
                result = self.resolve_pointer(resolved.pop(REF_KEY))
                resolved[VALUE_KEY] = result.value
                self._adopt_type(resolved, result)
            elif REF_KEY in token:
                raise MalformedTokenError(f'Token "{name}" has an invalid $ref: expected a non-empty JSON Pointer string')
            elif is_alias_reference(token[VALUE_KEY]):
                result = self.resolve_alias(token[VALUE_KEY])
                resolved[VALUE_KEY] = result.value
                self._adopt_type(resolved, result)
            elif isinstance(token[VALUE_KEY], (dict, list)):
                resolved[VALUE_KEY] = self.resolve_value(token[VALUE_KEY])
        except PreprocessorError as error:
            raise error.with_token_context(name) from error

        return resolved

    def resolve_group(
        self,
        group: dict[str, Any],
        visited_extends: tuple[tuple[str, ...], ...],
        path: tuple[str, ...],
    ) -> dict[str, Any]:
        """
        Resolve a group: apply its $extends, then resolve every child.

        Args:
            group: The group object
            visited_extends: Paths of groups whose $extends is being resolved
                on the current branch. Each child gets its own copy.
            path: Path segments of the group

        Returns:
            A new group with $extends merged in and all references resolved
        """
        working = group

        if group.get(EXTENDS_KEY) is not None:
            working = self._apply_extends(group, visited_extends, path)
            visited_extends = (*visited_extends, path)

        processed: dict[str, Any] = {}

        for key, value in working.items():
            if is_metadata_key(key):
                processed[key] = copy.deepcopy(value)
            elif is_token(value):
                processed[key] = self.resolve_token(value, (*path, key))
            elif is_group(value):
                processed[key] = self.resolve_group(value, visited_extends, (*path, key))
            else:
                processed[key] = copy.deepcopy(value)

        return processed

    def _apply_extends(
        self,
        group: dict[str, Any],
        visited_extends: tuple[tuple[str, ...], ...],
        path: tuple[str, ...],
    ) -> dict[str, Any]:
        """Merge the group named by $extends (resolved first) under this group."""
        location = _format_path(path)

        if path in visited_extends:
            chain = tuple(_format_path(p) for p in (*visited_extends, path))
            raise CircularReferenceError(
                f"Circular $extends reference detected at path: {location} ({' -> '.join(chain)})",
                chain=chain,
            )

        extends = group[EXTENDS_KEY]
        target_ref = parse_extends_reference(extends)
        raw = target_ref.raw
        target = navigate_to_path(self.root, target_ref.segments)

        if target is MISSING or target is None:
            raise UnresolvedReferenceError(f'$extends reference "{raw}" could not be resolved at path: {location}')

        if is_token(target):
            raise InvalidExtendsError(f'$extends reference "{raw}" points to a token, not a group at path: {location}')

        if not is_group(target):
            raise InvalidExtendsError(f'$extends reference "{raw}" does not point to a group at path: {location}')

        # Chained extends: the target's own $extends is resolved first
        resolved_target = self.resolve_group(target, (*visited_extends, path), tuple(target_ref.segments))

        logger.debug("Merged group %s into %s", _format_path(target_ref.segments), location)
        return deep_merge(resolved_target, group)

    def _token_type(self, token: dict[str, Any], segments: Sequence[str]) -> str | None:
        """A token's own $type, or the type it inherits from its ancestors."""
        if token.get(TYPE_KEY) is not None:
            return token[TYPE_KEY]
        return resolve_inherited_type(self.root, segments)

    @staticmethod
    def _adopt_type(token: dict[str, Any], result: ResolveResult) -> None:
        # An explicit $type on the referencing token always wins
        if not token.get(TYPE_KEY) and result.type:
            token[TYPE_KEY] = result.type


def resolve_references(document: dict[str, Any]) -> dict[str, Any]:
    """
    Resolve all references in a design token document.

    Args:
        document: The document root (a group). It is not modified.

    Returns:
        A new document in which every alias, JSON Pointer and $extends has been
        replaced by the value it refers to

    Raises:
        PreprocessorError: On the first malformed, unresolvable or cyclic reference

    Example:
        >>> doc = {
        ...     "colors": {"blue": {"$type": "color", "$value": "#0066cc"}},
        ...     "semantic": {"primary": {"$value": "{colors.blue}"}},
        ... }
        >>> resolve_references(doc)["semantic"]["primary"]
        {'$value': '#0066cc', '$type': 'color'}
    """
    if not is_plain_object(document):
        return copy.deepcopy(document)

    return ReferenceResolver(document).resolve()
