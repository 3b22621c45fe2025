"""Verbiage exception hierarchy.

Only two failures ever leave the library as exceptions: a malformed path
passed to ``get()`` and misuse of constructors. Everything that goes wrong
inside ``render()`` is converted into diagnostic text instead; the
exceptions below are how the pipeline stages report to the renderer.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ElementNotFoundError",
    "MalformedPathError",
    "TemplateFormatError",
    "VerbiageError",
]


class VerbiageError(Exception):
    """Base exception for all Verbiage errors."""


class MalformedPathError(VerbiageError, ValueError):
    """A path segment is neither a legal identifier nor a legal index.

    Indicates a template authoring bug or a caller bug, never absent data.
    Subclasses ValueError so callers can treat it as an invalid argument.

    Attributes:
        path: The full dotted path
        segment: The offending segment
    """

    def __init__(self, path: str, segment: str) -> None:
        """Initialize MalformedPathError.

        Args:
            path: The full dotted path
            segment: The offending segment
        """
        super().__init__(f"Illegal segment {segment!r} in path {path!r}")
        self.path = path
        self.segment = segment


class ElementNotFoundError(VerbiageError, LookupError):
    """A path does not lead to a value.

    Raised when descending past a missing or scalar value, when a list
    index is out of range, or when a list is indexed by a name.

    Attributes:
        path: The full dotted path
        segment: The segment that could not be followed
    """

    def __init__(self, path: str, segment: str) -> None:
        """Initialize ElementNotFoundError.

        Args:
            path: The full dotted path
            segment: The segment that could not be followed
        """
        super().__init__(f"No element {segment!r} in path {path!r}")
        self.path = path
        self.segment = segment


class TemplateFormatError(VerbiageError):
    """The format string and the resolved arguments are incompatible.

    Attributes:
        description: Formatter's own description of the failure
    """

    def __init__(self, description: str) -> None:
        """Initialize TemplateFormatError.

        Args:
            description: Formatter's own description of the failure
        """
        super().__init__(description)
        self.description = description
