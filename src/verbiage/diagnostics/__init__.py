"""Diagnostics for Verbiage.

Provides the exception hierarchy, the closed set of diagnostic keys and
the internal bundle of diagnostic templates.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticKey
from .errors import (
    ElementNotFoundError,
    MalformedPathError,
    TemplateFormatError,
    VerbiageError,
)
from .templates import DIAGNOSTIC_TEMPLATES

__all__ = [
    "DIAGNOSTIC_TEMPLATES",
    "Diagnostic",
    "DiagnosticKey",
    "ElementNotFoundError",
    "MalformedPathError",
    "TemplateFormatError",
    "VerbiageError",
]
