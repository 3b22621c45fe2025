"""Internal diagnostic bundle.

The templates used to describe failures. They are rendered through the
same engine as user messages, but are looked up in this constant table
instead of a bundle provider, so rendering one can never fail again:

    - every key of DiagnosticKey is present and non-blank
    - selectors are positional keys only ($1..$3), always supplied
    - arguments are strings formatted with %s only

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

from verbiage.constants import META_ERROR_SUFFIX

from .codes import DiagnosticKey

__all__ = ["DIAGNOSTIC_TEMPLATES"]

DIAGNOSTIC_TEMPLATES: MappingProxyType[str, str] = MappingProxyType({
    DiagnosticKey.DEFAULT_PACKAGE: (
        "$1,$2~Message bundle context [%s] resolves to the default package. "
        "Message key is [%s]." + META_ERROR_SUFFIX
    ),
    DiagnosticKey.MISSING_BUNDLE: (
        "$1,$2~Missing message bundle [%s]. Message key is [%s]." + META_ERROR_SUFFIX
    ),
    DiagnosticKey.MISSING_KEY: (
        "$1,$2~The message key [%s] cannot be found in bundle [%s]." + META_ERROR_SUFFIX
    ),
    DiagnosticKey.BLANK_MESSAGE: (
        "$1,$2~The message for message key [%s] in bundle [%s] is blank."
        + META_ERROR_SUFFIX
    ),
    DiagnosticKey.BAD_FORMAT_ARGUMENT: (
        "$@~Invalid format argument name [%s] for message key [%s] in bundle [%s]."
        + META_ERROR_SUFFIX
    ),
    DiagnosticKey.MISSING_ARGUMENT: (
        "$@~Cannot find argument named [%s] for message key [%s] in bundle [%s]."
        + META_ERROR_SUFFIX
    ),
    DiagnosticKey.FORMAT_EXCEPTION: (
        "$@~Format exception [%s] for message key [%s] in bundle [%s]."
        + META_ERROR_SUFFIX
    ),
})
