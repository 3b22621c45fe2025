"""Template bundle storage for Verbiage.

Provides type aliases, the ``.properties`` parser, and the bundle
provider protocol with in-memory, package and filesystem implementations.

Submodules:
    types      - PEP 695 type aliases (BundlePath, MessageKey, LocaleCode, TemplateText)
    properties - ``.properties`` parser
    loading    - TemplateSource / BundleProvider protocols and implementations

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from verbiage.localization.loading import (
    BundleProvider,
    MappingBundleProvider,
    MappingTemplateSource,
    PackageBundleProvider,
    PathBundleProvider,
    TemplateSource,
)
from verbiage.localization.properties import parse_properties
from verbiage.localization.types import BundlePath, LocaleCode, MessageKey, TemplateText

__all__ = [
    # Protocols
    "BundleProvider",
    "TemplateSource",
    # Implementations
    "MappingBundleProvider",
    "MappingTemplateSource",
    "PackageBundleProvider",
    "PathBundleProvider",
    # Parsing
    "parse_properties",
    # Type aliases for user code type annotations
    "BundlePath",
    "LocaleCode",
    "MessageKey",
    "TemplateText",
]
