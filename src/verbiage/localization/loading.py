"""Bundle loading infrastructure for MessageResolver.

Provides the protocols a resolver consumes to find templates, an
in-memory implementation, and two ``.properties`` file implementations
that follow the package of the message context.

Components:
    TemplateSource - Protocol for a loaded bundle (key -> template text)
    MappingTemplateSource - Immutable TemplateSource over a mapping
    BundleProvider - Protocol for looking up bundles by bundle path
    MappingBundleProvider - In-memory provider
    PackageBundleProvider - Bundles stored as package resources
    PathBundleProvider - Bundles stored under a directory tree

A bundle path such as ``acme.billing.exceptions`` names the bundle
``exceptions`` in the package ``acme.billing``. File-backed providers look
for one file per locale in the fallback chain and merge them, so an entry
in ``exceptions_de_AT.properties`` overrides the same key in
``exceptions_de.properties``, which overrides ``exceptions.properties``.

Python 3.13+. External dependency: Babel (locale fallback chain).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from verbiage.constants import BUNDLE_FILE_SUFFIX, PATH_SEPARATOR
from verbiage.core.identifier_validation import is_valid_identifier
from verbiage.locale_utils import get_system_locale, locale_fallback_chain
from verbiage.localization.properties import parse_properties
from verbiage.localization.types import BundlePath, LocaleCode, MessageKey, TemplateText

if TYPE_CHECKING:
    from collections.abc import Mapping
    from importlib.resources.abc import Traversable

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocols
    "TemplateSource",
    "BundleProvider",
    # Concrete bundles and providers
    "MappingTemplateSource",
    "MappingBundleProvider",
    "PackageBundleProvider",
    "PathBundleProvider",
]

logger = logging.getLogger(__name__)


class TemplateSource(Protocol):
    """Protocol for a loaded bundle of templates.

    Implementations must be immutable once handed to a resolver: they may
    be cached and shared across threads.
    """

    def get_entry(self, key: MessageKey) -> TemplateText | None:
        """Get the raw template text for a key.

        Args:
            key: Message key

        Returns:
            Template text, or None when the bundle has no such key
        """


class BundleProvider(Protocol):
    """Protocol for looking up template bundles.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom providers.

    Example:
        >>> class OneBundle:
        ...     def lookup(self, bundle_path: str) -> TemplateSource | None:
        ...         if bundle_path == "app.messages":
        ...             return MappingTemplateSource({"hello": "Hello."})
        ...         return None
    """

    def lookup(self, bundle_path: BundlePath) -> TemplateSource | None:
        """Look up a bundle.

        Args:
            bundle_path: Dotted bundle path (package path plus bundle name)

        Returns:
            The bundle, or None when it is unavailable
        """


class MappingTemplateSource:
    """Immutable bundle over a key to template mapping.

    The entries are copied, so later changes to the original mapping are
    not visible.

    Example:
        >>> source = MappingTemplateSource({"none": "Hello."})
        >>> source.get_entry("none")
        'Hello.'
        >>> source.get_entry("other") is None
        True
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[MessageKey, TemplateText]) -> None:
        """Initialize from a mapping of keys to template text."""
        self._entries: Mapping[MessageKey, TemplateText] = MappingProxyType(dict(entries))

    def get_entry(self, key: MessageKey) -> TemplateText | None:
        """Get the raw template text for a key."""
        return self._entries.get(key)

    @property
    def entries(self) -> Mapping[MessageKey, TemplateText]:
        """Read-only view of all entries."""
        return self._entries

    def __len__(self) -> int:
        """Number of entries."""
        return len(self._entries)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"MappingTemplateSource(entries={len(self._entries)})"


class MappingBundleProvider:
    """In-memory provider keyed by bundle path.

    Example:
        >>> provider = MappingBundleProvider({"app.errors": {"k": "Oops."}})
        >>> provider.lookup("app.errors").get_entry("k")
        'Oops.'
        >>> provider.lookup("app.other") is None
        True
    """

    __slots__ = ("_bundles",)

    def __init__(self, bundles: Mapping[BundlePath, Mapping[MessageKey, TemplateText]]) -> None:
        """Initialize from a mapping of bundle paths to bundle entries."""
        self._bundles: dict[BundlePath, MappingTemplateSource] = {
            path: MappingTemplateSource(entries) for path, entries in bundles.items()
        }

    def lookup(self, bundle_path: BundlePath) -> TemplateSource | None:
        """Look up a bundle."""
        return self._bundles.get(bundle_path)


def _split_bundle_path(bundle_path: BundlePath) -> tuple[list[str], str] | None:
    """Split a bundle path into package segments and bundle name.

    Returns None unless every segment is a legal identifier, which also
    rules out empty segments, ``..`` and path separators.
    """
    segments = bundle_path.split(PATH_SEPARATOR)
    if len(segments) < 2 or not all(is_valid_identifier(s) for s in segments):
        return None
    return segments[:-1], segments[-1]


def _file_names(bundle_name: str, locale: LocaleCode) -> list[str]:
    """Candidate file names from most general to most specific."""
    return [
        f"{bundle_name}_{suffix}{BUNDLE_FILE_SUFFIX}"
        if suffix
        else f"{bundle_name}{BUNDLE_FILE_SUFFIX}"
        for suffix in reversed(locale_fallback_chain(locale))
    ]


def _merge_files(
    bundle_path: BundlePath,
    directory: Traversable | Path,
    file_names: list[str],
) -> TemplateSource | None:
    """Read and merge candidate files, more specific entries winning.

    Returns None when no candidate exists or one cannot be read, so the
    resolver reports the bundle as missing instead of raising.
    """
    merged: dict[MessageKey, TemplateText] = {}
    found = False
    for name in file_names:
        candidate = directory / name
        if not candidate.is_file():
            continue
        try:
            merged.update(parse_properties(candidate.read_text(encoding="utf-8")))
        except (OSError, ValueError) as e:
            # UnicodeDecodeError is a ValueError
            logger.warning("Failed to read bundle %s from %s: %s", bundle_path, name, e)
            return None
        logger.debug("Loaded bundle file %s for %s", name, bundle_path)
        found = True
    if not found:
        return None
    return MappingTemplateSource(merged)


@dataclass(frozen=True, slots=True)
class PackageBundleProvider:
    """Provider reading bundles from importable packages.

    The bundle path ``acme.billing.exceptions`` selects the resources
    ``exceptions*.properties`` inside the package ``acme.billing``. This is
    the natural home for the bundles of a module: the message context
    ``acme.billing.Invoice`` with bundle name ``exceptions`` resolves to it.

    Attributes:
        locale: Locale whose fallback chain selects the files. Defaults to
            the system locale.

    Example:
        >>> provider = PackageBundleProvider("de_AT")
        >>> # Reads acme/billing/exceptions.properties, then
        >>> # exceptions_de.properties, then exceptions_de_AT.properties
        >>> bundle = provider.lookup("acme.billing.exceptions")
    """

    locale: LocaleCode = field(default_factory=get_system_locale)

    def lookup(self, bundle_path: BundlePath) -> TemplateSource | None:
        """Look up a bundle.

        Args:
            bundle_path: Dotted bundle path

        Returns:
            Merged bundle, or None if the package or every file is missing
        """
        split = _split_bundle_path(bundle_path)
        if split is None:
            return None
        package_segments, bundle_name = split
        package = PATH_SEPARATOR.join(package_segments)
        try:
            directory = resources.files(package)
        except (ImportError, TypeError) as e:
            # TypeError: anchor is a plain module on importlib releases that require a package
            logger.debug("No package for bundle %s: %s", bundle_path, e)
            return None
        return _merge_files(bundle_path, directory, _file_names(bundle_name, self.locale))


@dataclass(frozen=True, slots=True)
class PathBundleProvider:
    """Provider reading bundles from a directory tree.

    The bundle path ``acme.billing.exceptions`` selects the files
    ``<root_dir>/acme/billing/exceptions*.properties``.

    Security:
        Every bundle path segment must be a legal identifier, so paths such
        as ``..`` or absolute paths never reach the filesystem. Resolved
        files are additionally checked to stay under root_dir, which guards
        against symbolic links pointing outside it.

    Attributes:
        root_dir: Directory holding the bundle tree
        locale: Locale whose fallback chain selects the files. Defaults to
            the system locale.
    """

    root_dir: str | Path
    locale: LocaleCode = field(default_factory=get_system_locale)
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache the resolved root directory."""
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    def _is_safe_path(self, full_path: Path) -> bool:
        """Check if full_path resolves to a location within the root."""
        try:
            full_path.resolve().relative_to(self._resolved_root)
            return True
        except ValueError:
            return False

    def lookup(self, bundle_path: BundlePath) -> TemplateSource | None:
        """Look up a bundle.

        Args:
            bundle_path: Dotted bundle path

        Returns:
            Merged bundle, or None if every file is missing
        """
        split = _split_bundle_path(bundle_path)
        if split is None:
            return None
        package_segments, bundle_name = split
        directory = self._resolved_root.joinpath(*package_segments)
        file_names = [
            name
            for name in _file_names(bundle_name, self.locale)
            if self._is_safe_path(directory / name)
        ]
        return _merge_files(bundle_path, directory, file_names)
