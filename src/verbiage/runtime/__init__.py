"""Verbiage runtime package.

Provides path navigation, template parsing, the formatter bridge, the
bundle cache and the MessageResolver pipeline.

Python 3.13+.
"""

from .cache import BundleCache
from .formatter import Formatter, PrintfFormatter
from .message import Message
from .navigator import VariableNode, get, navigate
from .resolver import MessageResolver, bundle_path_for, positional_arguments, render
from .template import Template, parse_template

__all__ = [
    "BundleCache",
    "Formatter",
    "Message",
    "MessageResolver",
    "PrintfFormatter",
    "Template",
    "VariableNode",
    "bundle_path_for",
    "get",
    "navigate",
    "parse_template",
    "positional_arguments",
    "render",
]
