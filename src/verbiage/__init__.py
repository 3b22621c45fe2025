"""Verbiage - sprintf-formatted internationalized messages.

Messages live in ``.properties`` bundles next to the code that raises them.
Each template selects its arguments from a tree of variables with dotted
paths, then applies a printf format string::

    1101 = threadId,duration~The launch sequence in thread %d lasted %10.3f seconds.
    1102 = manager.lastName,employee.lastName~The manager %s does not manage %s.
    1103 = sort.0,sort.1~Unable to compare %s to %s.
    1104 = $@~File %s not found while running module %s.

Failures never raise: a missing bundle, key or argument, a malformed path
or a format mismatch renders a diagnostic message instead.

Public API:
    render - Render a message from context, bundle name, key and variables
    get - Read a value from a variable tree by dotted path
    positional_arguments - Store positional values as $1, $2, ...
    Message - Immutable message request
    MessageResolver - Rendering pipeline with injectable provider and cache
    BundleCache - Thread-safe cache of loaded bundles

Exceptions:
    VerbiageError - Base exception class
    MalformedPathError - Illegal path segment (raised by get())

Submodules:
    verbiage.localization - Bundle providers and ``.properties`` parsing
    verbiage.diagnostics - Diagnostic keys, templates and exceptions
"""

from .diagnostics import MalformedPathError, VerbiageError
from .runtime import (
    BundleCache,
    Message,
    MessageResolver,
    get,
    positional_arguments,
    render,
)

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("verbiage")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BundleCache",
    "MalformedPathError",
    "Message",
    "MessageResolver",
    "VerbiageError",
    "__version__",
    "get",
    "positional_arguments",
    "render",
]
