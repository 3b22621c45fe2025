"""Shared constants for Verbiage.

Centralized configuration constants for the template syntax, the path
micro-language, the internal diagnostic bundle and the caching layer.
Placing constants here avoids circular imports between the runtime and
localization packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template syntax
    "SELECTOR_SEPARATOR",
    "ARGUMENT_SEPARATOR",
    "PATH_SEPARATOR",
    "EXPAND_POSITIONAL",
    "POSITIONAL_PREFIX",
    # Internal diagnostic bundle
    "INTERNAL_CONTEXT",
    "INTERNAL_BUNDLE_NAME",
    "INTERNAL_BUNDLE_PATH",
    "META_ERROR_SUFFIX",
    # Cache limits
    "DEFAULT_BUNDLE_CACHE_SIZE",
    # Storage
    "BUNDLE_FILE_SUFFIX",
    "DEFAULT_LOCALE",
]

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================
#
#   threadId,duration~The launch sequence in thread %d lasted %10.3f seconds.
#   ^^^^^^^^^^^^^^^^^ ^
#   selector list     first separator, everything after is the format string
#
# Only the FIRST separator splits; later separators belong to the format.

SELECTOR_SEPARATOR: str = "~"
"""Separates the selector list from the printf format string."""

ARGUMENT_SEPARATOR: str = ","
"""Hard delimiter between selectors. No escaping, no trimming."""

PATH_SEPARATOR: str = "."
"""Separates path segments and the package part of a context."""

EXPAND_POSITIONAL: str = "$@"
"""Selector expanded into $1, $2, ... up to the first missing number."""

POSITIONAL_PREFIX: str = "$"
"""Prefix of positional argument keys ($1, $2, ...)."""

# ============================================================================
# INTERNAL DIAGNOSTIC BUNDLE
# ============================================================================

INTERNAL_CONTEXT: str = "verbiage.Message"
"""Context used when rendering diagnostic (meta error) messages."""

INTERNAL_BUNDLE_NAME: str = "missing"
"""Bundle name used when rendering diagnostic messages."""

INTERNAL_BUNDLE_PATH: str = "verbiage.missing"
"""Bundle path derived from INTERNAL_CONTEXT and INTERNAL_BUNDLE_NAME.

Reserved: lookups of this path never reach a bundle provider.
"""

META_ERROR_SUFFIX: str = " (This is a meta error message.)"
"""Appended to every diagnostic template."""

# ============================================================================
# CACHE LIMITS
# ============================================================================

DEFAULT_BUNDLE_CACHE_SIZE: int = 256
"""Default maximum number of loaded bundles held by a BundleCache."""

# ============================================================================
# STORAGE
# ============================================================================

BUNDLE_FILE_SUFFIX: str = ".properties"
"""File suffix of template bundles on disk and in packages."""

DEFAULT_LOCALE: str = "en_US"
"""Locale used when the system locale cannot be determined."""
