"""Core utilities shared across the runtime and localization layers.

Exports:
    is_valid_identifier: Legal mapping-key segment check
    is_index: Legal sequence-index segment check

Python 3.13+.
"""

from .identifier_validation import is_index, is_valid_identifier

__all__ = ["is_index", "is_valid_identifier"]
