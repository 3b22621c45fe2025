"""Message - an immutable request to render one template message.

A Message names where its template lives (context and bundle name), which
template to use (message key), and the variable tree the template selects
its arguments from. It is created once per message to show, rendered, and
thrown away.

The context is normally the fully-qualified name of the class or module
raising the message. A string is used instead of the class itself because
the name often comes from elsewhere, such as a logger name.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from verbiage.runtime.navigator import VariableNode, get
from verbiage.runtime.resolver import MessageResolver, bundle_path_for, positional_arguments

if TYPE_CHECKING:
    from verbiage.localization.types import BundlePath

__all__ = ["Message"]


@dataclass(frozen=True, slots=True)
class Message:
    """A template message to render.

    Attributes:
        context: Dotted, fully-qualified context; its package part locates
            the bundle
        bundle_name: Bundle name within the context's package, so one
            package can keep separate bundles (e.g. ``exceptions`` and
            ``stderr``)
        message_key: Key of the template in the bundle
        variables: Variable tree the template selects arguments from

    Examples:
        >>> from verbiage.localization import MappingBundleProvider
        >>> resolver = MessageResolver(MappingBundleProvider({
        ...     "acme.io.exceptions": {"missing": "$@~File %s not found in %s."},
        ... }))
        >>> message = Message.positioned("acme.io.Reader", "exceptions", "missing", "a.txt", "/tmp")
        >>> message.render(resolver)
        'File a.txt not found in /tmp.'
        >>> message.get("$1")
        'a.txt'
    """

    context: str
    bundle_name: str
    message_key: str
    variables: Mapping[str, VariableNode] = field(default_factory=dict)

    @classmethod
    def positioned(
        cls,
        context: str,
        bundle_name: str,
        message_key: str,
        /,
        *values: VariableNode,
        **named: VariableNode,
    ) -> Message:
        """Create a message whose variables include positional arguments.

        Positional values are stored as ``$1``, ``$2``, ... at the root of
        the variable tree, next to any named values.

        Args:
            context: Dotted, fully-qualified context
            bundle_name: Bundle name within the context's package
            message_key: Key of the template in the bundle
            *values: Positional arguments
            **named: Named arguments

        Returns:
            New Message
        """
        variables: dict[str, VariableNode] = dict(named)
        return cls(context, bundle_name, message_key, positional_arguments(variables, *values))

    @property
    def bundle_path(self) -> BundlePath | None:
        """Bundle path derived from the context, or None without a package."""
        return bundle_path_for(self.context, self.bundle_name)

    def get(self, path: str) -> VariableNode | None:
        """Get the variable at a dotted path, or None if there is none.

        Raises:
            MalformedPathError: A path segment is illegal
        """
        return get(self.variables, path)

    def render(self, resolver: MessageResolver | None = None) -> str:
        """Render the message.

        Args:
            resolver: Resolver to use (default: a new MessageResolver
                reading package bundles for the system locale)

        Returns:
            Rendered text, or diagnostic text describing the failure
        """
        if resolver is None:
            resolver = MessageResolver()
        return resolver.render_message(self)

    def __str__(self) -> str:
        """Render with the default resolver."""
        return self.render()
