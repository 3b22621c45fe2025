"""Message resolution pipeline.

Turns (context, bundle name, message key, variables) into text::

    ResolveBundle -> LookupKey -> CheckBlank -> ParseSelectors
        -> ResolveArguments -> Format -> Done

Every stage can fail. A failure never escapes render(): it becomes a
Diagnostic, and the diagnostic is rendered through this same pipeline
against the internal bundle (bundle path ``verbiage.missing``). The
internal bundle is a constant table, never looked up through the
provider or cache, whose templates only select positional arguments that
are always supplied; rendering a diagnostic therefore cannot fail.

Bundle paths are derived from the context the way a module names its
sibling resources: context ``acme.billing.Invoice`` with bundle name
``exceptions`` gives ``acme.billing.exceptions``.

Thread Safety:
    MessageResolver holds no mutable state. Concurrent render() calls are
    safe provided the provider is; the optional BundleCache is thread-safe.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, TypeVar

from verbiage.constants import (
    EXPAND_POSITIONAL,
    INTERNAL_BUNDLE_NAME,
    INTERNAL_BUNDLE_PATH,
    INTERNAL_CONTEXT,
    PATH_SEPARATOR,
    POSITIONAL_PREFIX,
)
from verbiage.diagnostics import (
    DIAGNOSTIC_TEMPLATES,
    Diagnostic,
    DiagnosticKey,
    ElementNotFoundError,
    MalformedPathError,
    TemplateFormatError,
)
from verbiage.localization.loading import (
    BundleProvider,
    MappingTemplateSource,
    PackageBundleProvider,
    TemplateSource,
)
from verbiage.runtime.formatter import Formatter, PrintfFormatter
from verbiage.runtime.navigator import VariableNode, navigate
from verbiage.runtime.template import parse_template

if TYPE_CHECKING:
    from collections.abc import Iterator

    from verbiage.localization.types import BundlePath
    from verbiage.runtime.cache import BundleCache
    from verbiage.runtime.message import Message

__all__ = [
    "MessageResolver",
    "bundle_path_for",
    "positional_arguments",
    "render",
]

logger = logging.getLogger(__name__)

_DIAGNOSTIC_BUNDLE: TemplateSource = MappingTemplateSource(DIAGNOSTIC_TEMPLATES)

# Logging truncation limit for rendered text in debug messages.
_LOG_TRUNCATE_DEBUG: int = 50

M = TypeVar("M", bound=MutableMapping[str, object])


def positional_arguments(base: M, *values: object) -> M:
    """Insert values under the positional keys ``$1``, ``$2``, ...

    Args:
        base: Mapping to insert into (modified in place)
        *values: Positional values, in order

    Returns:
        The given base mapping

    Example:
        >>> positional_arguments({"module": "core"}, "a.txt", 3)
        {'module': 'core', '$1': 'a.txt', '$2': 3}
    """
    for position, value in enumerate(values, start=1):
        base[f"{POSITIONAL_PREFIX}{position}"] = value
    return base


def bundle_path_for(context: str, bundle_name: str) -> BundlePath | None:
    """Derive the bundle path for a context and bundle name.

    Args:
        context: Dotted, fully-qualified context (e.g., a class name)
        bundle_name: Bundle name within the context's package

    Returns:
        Package part of the context joined with bundle_name, or None if
        the context has no package part

    Example:
        >>> bundle_path_for("acme.billing.Invoice", "exceptions")
        'acme.billing.exceptions'
        >>> bundle_path_for("Invoice", "exceptions") is None
        True
    """
    package, separator, _ = context.rpartition(PATH_SEPARATOR)
    if not separator:
        return None
    return f"{package}{PATH_SEPARATOR}{bundle_name}"


def _positional_values(variables: VariableNode) -> Iterator[VariableNode]:
    """Yield the values of $1, $2, ... stopping at the first missing key."""
    if not isinstance(variables, Mapping):
        return
    position = 1
    while (key := f"{POSITIONAL_PREFIX}{position}") in variables:
        yield variables[key]
        position += 1


def _display_value(value: VariableNode) -> object:
    """Replace a class with its fully-qualified name."""
    if isinstance(value, type):
        return f"{value.__module__}.{value.__qualname__}"
    return value


class MessageResolver:
    """Renders template messages from bundles.

    Args:
        provider: Where bundles come from (default: PackageBundleProvider
            for the system locale)
        cache: Optional caller-owned bundle cache. Without one, every
            render looks the bundle up again.
        formatter: printf implementation (default: PrintfFormatter)

    Examples:
        >>> from verbiage.localization import MappingBundleProvider
        >>> resolver = MessageResolver(MappingBundleProvider({
        ...     "acme.billing.exceptions": {
        ...         "overdue": "invoice.number,days~Invoice %s is %d days overdue.",
        ...     },
        ... }))
        >>> resolver.render(
        ...     "acme.billing.Invoice", "exceptions", "overdue",
        ...     {"invoice": {"number": "A-17"}, "days": 3},
        ... )
        'Invoice A-17 is 3 days overdue.'
        >>> resolver.render("acme.billing.Invoice", "exceptions", "paid", {})
        'The message key [paid] cannot be found in bundle [acme.billing.exceptions]. (This is a meta error message.)'
    """

    __slots__ = ("_cache", "_formatter", "_provider")

    def __init__(
        self,
        provider: BundleProvider | None = None,
        *,
        cache: BundleCache | None = None,
        formatter: Formatter | None = None,
    ) -> None:
        """Initialize resolver."""
        self._provider: BundleProvider = (
            provider if provider is not None else PackageBundleProvider()
        )
        self._cache = cache
        self._formatter: Formatter = formatter if formatter is not None else PrintfFormatter()

    @property
    def provider(self) -> BundleProvider:
        """Bundle provider (read-only)."""
        return self._provider

    @property
    def cache(self) -> BundleCache | None:
        """Bundle cache, or None when caching is off (read-only)."""
        return self._cache

    def render(
        self,
        context: str,
        bundle_name: str,
        message_key: str,
        variables: VariableNode,
    ) -> str:
        """Render a message.

        Never raises for missing bundles, keys or arguments, malformed
        selectors or format mismatches; those produce diagnostic text.

        Args:
            context: Dotted, fully-qualified context (e.g., a class name)
            bundle_name: Bundle name within the context's package
            message_key: Key of the template in the bundle
            variables: Variable tree the template selects arguments from

        Returns:
            Rendered message, or diagnostic text describing the failure
        """
        result = self._resolve(context, bundle_name, message_key, variables)
        if isinstance(result, Diagnostic):
            logger.warning("Message '%s' in context '%s' failed: %s", message_key, context, result)
            return self._render_diagnostic(result)
        logger.debug("Rendered message '%s': %s", message_key, result[:_LOG_TRUNCATE_DEBUG])
        return result

    def render_message(self, message: Message) -> str:
        """Render a Message request."""
        return self.render(
            message.context, message.bundle_name, message.message_key, message.variables
        )

    def _render_diagnostic(self, diagnostic: Diagnostic) -> str:
        """Render a diagnostic through the internal bundle."""
        return self.render(
            INTERNAL_CONTEXT,
            INTERNAL_BUNDLE_NAME,
            diagnostic.key,
            positional_arguments({}, *diagnostic.arguments),
        )

    def _lookup_bundle(self, bundle_path: BundlePath) -> TemplateSource | None:
        """Find a bundle through the cache and provider."""
        if bundle_path == INTERNAL_BUNDLE_PATH:
            return _DIAGNOSTIC_BUNDLE

        if self._cache is not None:
            cached = self._cache.get(bundle_path)
            if cached is not None:
                logger.debug("Bundle cache hit: %s", bundle_path)
                return cached
            logger.debug("Bundle cache miss: %s", bundle_path)

        try:
            source = self._provider.lookup(bundle_path)
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Providers are user code; any failure means the bundle is unavailable.
            logger.warning("Bundle provider failed for %s: %s", bundle_path, e)
            return None

        if source is not None and self._cache is not None:
            self._cache.put(bundle_path, source)
        return source

    def _resolve(
        self,
        context: str,
        bundle_name: str,
        message_key: str,
        variables: VariableNode,
    ) -> str | Diagnostic:
        """Run the pipeline, returning text or the first failure."""
        bundle_path = bundle_path_for(context, bundle_name)
        if bundle_path is None:
            return Diagnostic(DiagnosticKey.DEFAULT_PACKAGE, (context, message_key))

        bundle = self._lookup_bundle(bundle_path)
        if bundle is None:
            return Diagnostic(DiagnosticKey.MISSING_BUNDLE, (bundle_path, message_key))

        text = bundle.get_entry(message_key)
        if text is None:
            return Diagnostic(DiagnosticKey.MISSING_KEY, (message_key, bundle_path))

        if not text.strip():
            return Diagnostic(DiagnosticKey.BLANK_MESSAGE, (message_key, bundle_path))

        template = parse_template(text)
        if template.is_literal:
            return template.format_string

        arguments: list[object] = []
        for token in template.selectors:
            if token == EXPAND_POSITIONAL:
                arguments.extend(_display_value(value) for value in _positional_values(variables))
                continue
            try:
                value = navigate(variables, token)
            except MalformedPathError:
                return Diagnostic(
                    DiagnosticKey.BAD_FORMAT_ARGUMENT, (token, message_key, bundle_path)
                )
            except ElementNotFoundError:
                return Diagnostic(
                    DiagnosticKey.MISSING_ARGUMENT, (token, message_key, bundle_path)
                )
            arguments.append(_display_value(value))

        try:
            return self._formatter.format(template.format_string, arguments)
        except TemplateFormatError as e:
            return Diagnostic(
                DiagnosticKey.FORMAT_EXCEPTION, (e.description, message_key, bundle_path)
            )


def render(
    context: str,
    bundle_name: str,
    message_key: str,
    variables: VariableNode,
    *,
    resolver: MessageResolver | None = None,
) -> str:
    """Render a message with the given resolver or a default one.

    The default resolver reads bundles from packages for the system locale
    and caches nothing. Applications rendering many messages should build
    one MessageResolver with a BundleCache and reuse it.

    Example:
        >>> render("Invoice", "exceptions", "overdue", {})
        'Message bundle context [Invoice] resolves to the default package. Message key is [overdue]. (This is a meta error message.)'
    """
    if resolver is None:
        resolver = MessageResolver()
    return resolver.render(context, bundle_name, message_key, variables)
