"""Template bundles used by the test suite."""
