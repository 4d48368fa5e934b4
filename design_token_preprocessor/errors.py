"""
Exceptions raised by the design token preprocessors.

Every failure aborts the whole transform; there is no partial result.
"""

from __future__ import annotations


class PreprocessorError(Exception):
    """Base class for all preprocessing failures."""

    def __init__(self, message: str, token_name: str | None = None):
        super().__init__(message)
        self.token_name = token_name

    def with_token_context(self, token_name: str) -> PreprocessorError:
        """Return a copy of this error prefixed with the enclosing token's name."""
        wrapped = _copy_error(self, f'Error resolving references in token "{token_name}": {self}')
        wrapped.token_name = token_name
        return wrapped


class MalformedTokenError(PreprocessorError):
    """A token carries both $value and $ref, or an unusable $ref."""

    pass


class UnresolvedReferenceError(PreprocessorError):
    """An alias or JSON Pointer does not lead to a usable target."""

    pass


class AmbiguousPointerError(PreprocessorError):
    """A JSON Pointer addresses a token object instead of its $value."""

    pass


class CircularReferenceError(PreprocessorError):
    """A reference or $extends chain revisits an entry that is still being resolved.

    Attributes:
        chain: The ordered references visited, ending with the repeated one
    """

    def __init__(self, message: str, chain: tuple[str, ...] = (), token_name: str | None = None):
        super().__init__(message, token_name)
        self.chain = chain


class MissingTypeError(PreprocessorError):
    """A token has no $type and no ancestor group supplies one."""

    pass


class InvalidExtendsError(PreprocessorError):
    """A $extends relation uses an unknown syntax or targets a token."""

    pass


class ResolverSemanticError(PreprocessorError):
    """A resolver document breaks a rule JSON Schema cannot express."""

    pass


class DuplicateNameError(ResolverSemanticError):
    """Two inline resolutionOrder entries share a name."""

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name


class CircularSetReferenceError(ResolverSemanticError):
    """Set sources reference each other in a loop."""

    def __init__(self, message: str, chain: tuple[str, ...] = ()):
        super().__init__(message)
        self.chain = chain


def _copy_error(error: PreprocessorError, message: str) -> PreprocessorError:
    # Keep the concrete class and its extra attributes, swap the message
    wrapped = error.__class__.__new__(error.__class__)
    wrapped.__dict__.update(error.__dict__)
    wrapped.args = (message,)
    return wrapped
