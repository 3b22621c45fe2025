"""Template parsing.

A template entry has the form::

    manager.lastName,employee.lastName~The manager %s does not manage %s.

The text is trimmed and split on the FIRST ``~``. The part before it is a
comma-separated list of selectors (path expressions or ``$@``), the part
after it is a printf format string. Without a ``~`` the whole text is
literal and is never formatted. With an empty selector list (``~`` is the
first character) the format string is also returned as is.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from verbiage.constants import ARGUMENT_SEPARATOR, SELECTOR_SEPARATOR

__all__ = ["Template", "parse_template"]


@dataclass(frozen=True, slots=True)
class Template:
    """A parsed template entry.

    Attributes:
        selectors: Raw selector tokens in order (may be empty)
        format_string: Text handed to the formatter, or the literal text
    """

    selectors: tuple[str, ...]
    format_string: str

    @property
    def is_literal(self) -> bool:
        """True when the template selects no arguments and is not formatted."""
        return not self.selectors


def parse_template(text: str) -> Template:
    """Split trimmed template text into selectors and a format string.

    Commas are hard delimiters: tokens are neither escaped nor trimmed, so
    ``"a, b"`` yields the (malformed) token ``" b"``.

    Args:
        text: Raw template text from a bundle

    Returns:
        Parsed template

    Example:
        >>> parse_template("a,b.c~%s and %s")
        Template(selectors=('a', 'b.c'), format_string='%s and %s')
        >>> parse_template("Hello.").is_literal
        True
        >>> parse_template("~100%").format_string
        '100%'
    """
    text = text.strip()
    paths, separator, format_string = text.partition(SELECTOR_SEPARATOR)
    if not separator:
        return Template(selectors=(), format_string=text)
    if not paths:
        return Template(selectors=(), format_string=format_string)
    return Template(
        selectors=tuple(paths.split(ARGUMENT_SEPARATOR)),
        format_string=format_string,
    )
