"""Quickstart example for verbiage.

This example demonstrates basic usage of verbiage: templates that select
their arguments from a variable tree, positional arguments, and the
diagnostic text produced when something is wrong with a message.

Note: Failures never raise. A message that cannot be rendered comes back
as text describing the problem, ending in "(This is a meta error
message.)". Search logs for that suffix to find broken messages.
"""

import tempfile
from pathlib import Path

from verbiage import BundleCache, Message, MessageResolver, get, positional_arguments
from verbiage.localization import MappingBundleProvider, PathBundleProvider

# Example 1: In-memory bundle
print("=" * 50)
print("Example 1: Selecting Arguments")
print("=" * 50)

resolver = MessageResolver(MappingBundleProvider({
    "acme.staff.exceptions": {
        "manage": "manager.lastName,employee.lastName~The manager %s does not manage %s.",
        "launch": "threadId,duration~The launch sequence in thread %d lasted %.3f seconds.",
    },
}))

variables = {
    "manager": {"lastName": "Smith"},
    "employee": {"lastName": "Jones"},
}
print(resolver.render("acme.staff.Manager", "exceptions", "manage", variables))
# Output: The manager Smith does not manage Jones.

print(resolver.render(
    "acme.staff.Launcher", "exceptions", "launch", {"threadId": 7, "duration": 1.5}
))
# Output: The launch sequence in thread 7 lasted 1.500 seconds.

# Example 2: Navigating a variable tree directly
print("\n" + "=" * 50)
print("Example 2: Dotted Paths")
print("=" * 50)

tree = {"sort": ["first", {"name": "second"}]}
print(get(tree, "sort.1.name"))
# Output: second
print(get(tree, "sort.5"))
# Output: None

# Example 3: Positional arguments
print("\n" + "=" * 50)
print("Example 3: Positional Arguments")
print("=" * 50)

resolver = MessageResolver(MappingBundleProvider({
    "acme.io.exceptions": {
        "notFound": "$@,module~File %s not found in %s by %s.",
    },
}))
message = Message.positioned(
    "acme.io.Reader", "exceptions", "notFound", "a.txt", "/srv", module="loader"
)
print(message.render(resolver))
# Output: File a.txt not found in /srv by loader.

print(resolver.render(
    "acme.io.Reader", "exceptions", "notFound",
    positional_arguments({"module": "cli"}, "b.txt", "/tmp"),
))
# Output: File b.txt not found in /tmp by cli.

# Example 4: Diagnostics
print("\n" + "=" * 50)
print("Example 4: Diagnostics")
print("=" * 50)

print(resolver.render("acme.io.Reader", "exceptions", "noSuchKey", {}))
# Output: The message key [noSuchKey] cannot be found in bundle [acme.io.exceptions]. (...)
print(resolver.render("acme.io.Reader", "exceptions", "notFound", {"$1": "a.txt"}))
# Output: Format exception [not enough arguments for format string] ... (...)

# Example 5: Bundle files with a cache
print("\n" + "=" * 50)
print("Example 5: Bundle Files")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmpdir:
    bundle_dir = Path(tmpdir) / "acme" / "billing"
    bundle_dir.mkdir(parents=True)
    (bundle_dir / "exceptions.properties").write_text(
        "# Billing messages\n"
        "overdue = invoice.number,days~Invoice %s is %d days overdue.\n",
        encoding="utf-8",
    )
    cache = BundleCache()
    resolver = MessageResolver(PathBundleProvider(tmpdir, "en_US"), cache=cache)
    for days in (1, 2):
        print(resolver.render(
            "acme.billing.Invoice", "exceptions", "overdue",
            {"invoice": {"number": "A-17"}, "days": days},
        ))
    # Output: Invoice A-17 is 1 days overdue.
    # Output: Invoice A-17 is 2 days overdue.
    print(cache.get_stats())
    # Output: {'size': 1, 'maxsize': 256, 'hits': 1, 'misses': 1, 'hit_rate': 50.0}
