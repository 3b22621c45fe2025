"""Locale utilities for bundle lookup.

Centralizes locale normalization and the fallback chain used to find
locale-specific bundle files. Babel supplies canonical locale parsing
(CLDR data), so ``en-us``, ``en_US`` and ``EN_us`` all select the same
files.

Python 3.13+. External dependency: Babel.
"""

from __future__ import annotations

import functools
import logging
import os

from babel import Locale, UnknownLocaleError

from verbiage.constants import DEFAULT_LOCALE

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "locale_fallback_chain",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 or POSIX locale code

    Returns:
        POSIX-formatted locale code

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))


def _raw_fallback_chain(locale_code: str) -> tuple[str, ...]:
    """Fallback chain built by dropping underscore-separated parts."""
    parts = [part for part in normalize_locale(locale_code).split("_") if part]
    chain = ["_".join(parts[:count]) for count in range(len(parts), 0, -1)]
    chain.append("")
    return tuple(chain)


@functools.lru_cache(maxsize=128)
def locale_fallback_chain(locale_code: str) -> tuple[str, ...]:
    """Get the bundle suffixes to try for a locale, most specific first.

    The chain always ends with the empty string, which selects the base
    bundle (no locale suffix). Locales Babel does not recognize fall back
    to splitting the code on underscores.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Tuple of locale suffixes

    Example:
        >>> locale_fallback_chain("de-AT")
        ('de_AT', 'de', '')
        >>> locale_fallback_chain("zh_Hant_TW")
        ('zh_Hant_TW', 'zh_Hant', 'zh', '')
        >>> locale_fallback_chain("")
        ('',)
    """
    if not locale_code:
        return ("",)
    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Unknown locale '%s': %s. Using raw fallback chain", locale_code, e)
        return _raw_fallback_chain(locale_code)

    parts = [
        part
        for part in (locale.language, locale.script, locale.territory, locale.variant)
        if part
    ]
    return _raw_fallback_chain("_".join(parts))


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Normalizes the result to POSIX format for Babel compatibility.
    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            # Strip encoding suffix if present
            return normalize_locale(system_locale.split(".")[0])
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            # Strip encoding suffix (e.g., ".UTF-8")
            return normalize_locale(value.split(".")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE
