"""Bundles of a nested package."""
