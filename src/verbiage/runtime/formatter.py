"""Formatter bridge.

Applies a printf format string to the resolved argument list. The default
implementation is Python's printf-style ``%`` operator, which supports the
usual conversions (``%s``, ``%d``, ``%10.3f``, ``%x``, ``%%`` ...), with
two printf behaviors layered on top:

    - Explicit argument indices: ``%2$s`` selects the second argument, so a
      translation can show its arguments in a different order than the
      selectors list them. Conversions without an index take the next
      argument in order, independently of indexed ones.
    - Surplus arguments are ignored. Only too few arguments, wrong argument
      types and malformed specifiers are errors.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Protocol

from verbiage.diagnostics import TemplateFormatError

__all__ = ["Formatter", "PrintfFormatter"]

# One conversion specifier: %[index$][flags][width][.precision][length]type
_CONVERSION_PATTERN: re.Pattern[str] = re.compile(
    r"%(?:(?P<index>[1-9][0-9]*)\$)?"
    r"(?P<flags>[-#0 +]*)"
    r"(?P<width>\*|[0-9]+)?"
    r"(?:\.(?P<precision>\*|[0-9]*))?"
    r"[hlL]?"
    r"(?P<type>.?)",
    re.DOTALL,
)

# Python's own wording, so diagnostics read the same for every count error.
_NOT_ENOUGH_ARGUMENTS = "not enough arguments for format string"


class Formatter(Protocol):
    """Protocol for turning a format string and arguments into text.

    Implementations raise TemplateFormatError, carrying a human-readable
    description, when the format string and arguments are incompatible.
    """

    def format(self, format_string: str, arguments: Sequence[object]) -> str:
        """Format arguments according to format_string.

        Raises:
            TemplateFormatError: Wrong conversion type, too few arguments,
                or malformed specifier
        """


def _select_arguments(
    format_string: str, arguments: Sequence[object]
) -> tuple[str, tuple[object, ...]]:
    """Rewrite a printf format string for the ``%`` operator.

    Strips explicit ``N$`` indices and lines the arguments up in the order
    the conversions consume them, dropping unused ones.

    Returns:
        Tuple of (format string without indices, arguments to apply)

    Raises:
        TemplateFormatError: A conversion has no argument to consume
    """
    parts: list[str] = []
    selected: list[object] = []
    position = 0
    last_end = 0

    def next_argument() -> object:
        nonlocal position
        if position >= len(arguments):
            raise TemplateFormatError(_NOT_ENOUGH_ARGUMENTS)
        position += 1
        return arguments[position - 1]

    for match in _CONVERSION_PATTERN.finditer(format_string):
        parts.append(format_string[last_end : match.start()])
        last_end = match.end()
        conversion = match.group(0)
        conversion_type = match.group("type")

        # Literal percent, mapping keys and truncated specifiers are left
        # for the operator to accept or reject.
        if conversion_type in ("%", "(", ""):
            parts.append(conversion)
            continue

        if match.group("width") == "*":
            selected.append(next_argument())
        if match.group("precision") == "*":
            selected.append(next_argument())

        index = match.group("index")
        if index is None:
            selected.append(next_argument())
        else:
            number = int(index)
            if number > len(arguments):
                msg = f"no argument {number} for conversion {conversion!r}"
                raise TemplateFormatError(msg)
            selected.append(arguments[number - 1])
            conversion = "%" + conversion[match.end("index") + 1 - match.start() :]
        parts.append(conversion)

    parts.append(format_string[last_end:])
    return "".join(parts), tuple(selected)


class PrintfFormatter:
    """printf-style formatter backed by the ``%`` operator.

    Example:
        >>> PrintfFormatter().format("%s lasted %.1f s", ["t1", 2.5])
        't1 lasted 2.5 s'
        >>> PrintfFormatter().format("%2$s, %1$s", ["Ada", "Lovelace"])
        'Lovelace, Ada'
        >>> PrintfFormatter().format("File %s not found.", ["a.txt", "core"])
        'File a.txt not found.'
    """

    __slots__ = ()

    def format(self, format_string: str, arguments: Sequence[object]) -> str:
        """Format arguments according to format_string.

        Any exception raised while converting an argument, including one
        from the argument's own ``__str__`` or ``__int__``, is reported as
        a TemplateFormatError.

        Args:
            format_string: printf format string
            arguments: Ordered arguments

        Returns:
            Formatted text

        Raises:
            TemplateFormatError: The arguments do not fit the format string
        """
        rewritten, selected = _select_arguments(format_string, arguments)
        try:
            return rewritten % selected
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Arguments are arbitrary objects; their conversions may raise anything.
            raise TemplateFormatError(str(e) or type(e).__name__) from e
