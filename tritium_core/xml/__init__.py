"""
XML Node Utilities
==================

Functions that read or rewrite a single lxml node.
"""

from tritium_core.xml.utils import (
    parse_html,
    parse_fragment,
    to_string,
    local_name,
    remove_node,
    evaluate,
    fetch,
    keep_only_attributes,
    normalize_node,
    remove_class,
    add_class,
)

__all__ = [
    "parse_html",
    "parse_fragment",
    "to_string",
    "local_name",
    "remove_node",
    "evaluate",
    "fetch",
    "keep_only_attributes",
    "normalize_node",
    "remove_class",
    "add_class",
]
