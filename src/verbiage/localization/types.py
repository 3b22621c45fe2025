"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating provider implementations.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "BundlePath",
    "LocaleCode",
    "MessageKey",
    "TemplateText",
]

BundlePath: TypeAlias = str
"""Dotted bundle identifier (e.g., 'com.acme.exceptions')."""

MessageKey: TypeAlias = str
"""Key of a template entry within a bundle (e.g., 'missingFile')."""

LocaleCode: TypeAlias = str
"""POSIX locale code (e.g., 'en', 'de_AT', 'zh_Hant_TW')."""

TemplateText: TypeAlias = str
"""Raw template entry text as stored in a bundle."""
