"""Locale fallback example for verbiage.

Demonstrates how file-backed providers merge locale-specific bundle files.
For the locale ``de_AT`` the files are read from most general to most
specific, and later files override earlier ones entry by entry:

    errors.properties        (base)
    errors_de.properties     (German)
    errors_de_AT.properties  (Austrian German)

Keys missing from a specific file are inherited from a more general one,
so partial translations are safe.

Python 3.13+.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from verbiage import MessageResolver
from verbiage.locale_utils import locale_fallback_chain
from verbiage.localization import PathBundleProvider

BUNDLES = {
    "errors.properties": (
        "greeting = Hello.\n"
        "count = n~%d items.\n"
        "farewell = Goodbye.\n"
    ),
    "errors_de.properties": (
        "greeting = Hallo.\n"
        "count = n~%d Elemente.\n"
    ),
    "errors_de_AT.properties": "greeting = Servus.\n",
}


def write_bundles(root: Path) -> None:
    """Write the example bundle files under root/shop/."""
    directory = root / "shop"
    directory.mkdir(parents=True)
    for name, text in BUNDLES.items():
        (directory / name).write_text(text, encoding="utf-8")


def show_locale(root: Path, locale: str) -> None:
    """Render every key for one locale."""
    resolver = MessageResolver(PathBundleProvider(root, locale))
    print(f"\n{locale}  (chain: {locale_fallback_chain(locale)})")
    for key in ("greeting", "count", "farewell"):
        print(f"  {key}: {resolver.render('shop.Cart', 'errors', key, {'n': 3})}")


def main() -> None:
    """Run the example."""
    print("=" * 60)
    print("Locale Fallback")
    print("=" * 60)
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        write_bundles(root)
        for locale in ("de-AT", "de_CH", "fr", "en_US"):
            show_locale(root, locale)
    # de-AT: Servus. / 3 Elemente. / Goodbye.
    # de_CH: Hallo. / 3 Elemente. / Goodbye.
    # fr and en_US: Hello. / 3 items. / Goodbye.


if __name__ == "__main__":
    main()
