"""
Flow Helpers
============

Selection and yielding helpers that hand nodes to caller-supplied callables.
"""

from tritium_core.flow.yielding import (
    split_union,
    descendant_pattern,
    select,
    nearest_preceding_sibling,
    yield_to_preceding_sibling,
    yield_if_blank,
    yield_if_not_blank,
)

__all__ = [
    "split_union",
    "descendant_pattern",
    "select",
    "nearest_preceding_sibling",
    "yield_to_preceding_sibling",
    "yield_if_blank",
    "yield_if_not_blank",
]
