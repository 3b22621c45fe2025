"""Diagnostic keys and data structures.

Defines the closed set of diagnostic (meta error) keys and the immutable
record that carries a diagnostic from the failure point to the renderer.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticKey",
]


class DiagnosticKey(StrEnum):
    """Keys of the internal diagnostic bundle.

    Each member is also the message key of a template in the internal
    bundle, so ``str(key)`` is what gets looked up. The comment on each
    member lists its positional arguments in order.
    """

    DEFAULT_PACKAGE = "defaultPackage"
    """Context has no package separator: (context, key)."""

    MISSING_BUNDLE = "missingBundle"
    """No bundle at the derived path: (bundle_path, key)."""

    MISSING_KEY = "missingKey"
    """Bundle has no entry for the key: (key, bundle_path)."""

    BLANK_MESSAGE = "blankMessage"
    """Entry is empty after trimming: (key, bundle_path)."""

    BAD_FORMAT_ARGUMENT = "badFormatArgument"
    """Selector has an illegal path segment: (token, key, bundle_path)."""

    MISSING_ARGUMENT = "missingArgument"
    """Selector does not resolve: (token, key, bundle_path)."""

    FORMAT_EXCEPTION = "formatException"
    """Formatter rejected the arguments: (description, key, bundle_path)."""


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A failure converted into renderable form.

    Attributes:
        key: Diagnostic bundle key
        arguments: Positional arguments, in the order the template expects.
            Usually text, but a caller-supplied message key is kept as given.
    """

    key: DiagnosticKey
    arguments: tuple[object, ...]

    def __str__(self) -> str:
        """Return a compact description for logs."""
        return f"{self.key}({', '.join(map(str, self.arguments))})"
