"""
Yielding Helpers
================

Control-flow helpers that hand a node, or control, to caller-supplied
logic zero or more times. The "block" of the original DSL is a plain
callable here.
"""

from typing import Any, Callable, List, Optional
import logging

from lxml import etree

from tritium_core.text.utils import is_blank
from tritium_core.xml.utils import evaluate

logger = logging.getLogger(__name__)

_ANCHORED_PREFIXES = ("/", ".", "(")


def split_union(pattern: str) -> List[str]:
    """
    Split a pattern on its top-level "|" operators.

    Bars inside predicates, parentheses or string literals are left alone,
    so "li[@title='a|b'] | p" gives ["li[@title='a|b']", "p"].
    """
    branches = []
    depth = 0
    quote = None
    start = 0
    for index, char in enumerate(pattern):
        if quote:
            if char == quote:
                quote = None
        elif char in "'\"":
            quote = char
        elif char in "[(":
            depth += 1
        elif char in "])":
            depth -= 1
        elif char == "|" and depth == 0:
            branches.append(pattern[start:index])
            start = index + 1
    branches.append(pattern[start:])
    return [branch.strip() for branch in branches]


def descendant_pattern(pattern: str) -> str:
    """
    Anchor bare relative patterns to the descendant axis.

    "li[@class='sublist']" becomes ".//li[@class='sublist']"; branches
    that already start with "/", "." or "(" are returned unchanged. Each
    branch of a union is anchored on its own, so "li | p" becomes
    ".//li | .//p".
    """
    anchored = []
    for branch in split_union(pattern):
        if not branch.startswith(_ANCHORED_PREFIXES):
            branch = ".//" + branch
        anchored.append(branch)
    return " | ".join(anchored)


def select(element: Any, pattern: str) -> List[Any]:
    """
    Return the elements matching pattern under element, in document order.

    Non-element results (attribute values, text) are dropped.

    Args:
        element: Context node
        pattern: XPath; bare relative patterns search all descendants

    Returns:
        List of matching elements
    """
    results = evaluate(element, descendant_pattern(pattern))
    if not isinstance(results, list):
        return []
    return [result for result in results if isinstance(result, etree._Element)]


def nearest_preceding_sibling(element: Any, target: str) -> Optional[Any]:
    """Return the closest preceding sibling matching target, or None."""
    for sibling in evaluate(element, f"preceding-sibling::{target}[1]"):
        if isinstance(sibling, etree._Element):
            return sibling
    return None


def yield_to_preceding_sibling(element: Any, search: str, target: str,
                               callback: Callable[[Any], Any]) -> int:
    """
    Call back on the nearest preceding target sibling of each search match.

    Matches are collected before the first call, so callback may remove or
    move nodes. A match with no qualifying sibling is skipped, and one
    sibling can be handed over several times if it is the nearest target
    for several matches.

    Args:
        element: Context node
        search: Pattern for the nodes to look back from
        target: Node test (with optional predicates) for the sibling,
            e.g. "li[not(@class='sublist')]"
        callback: Called with each sibling

    Returns:
        Number of times callback was called

    Example:
        Removing the item that introduces each sublist:

        yield_to_preceding_sibling(ul, "li[@class='sublist']",
                                   "li[not(@class='sublist')]",
                                   lambda li: li.getparent().remove(li))
    """
    calls = 0
    for match in select(element, search):
        sibling = nearest_preceding_sibling(match, target)
        if sibling is None:
            continue
        callback(sibling)
        calls += 1

    logger.debug(f"Yielded {calls} preceding sibling(s) for {search!r}")
    return calls


def yield_if_blank(text: Optional[str], callback: Callable[[], Any]) -> bool:
    """Call callback if text is empty. Returns True if it was called."""
    if not is_blank(text):
        return False
    callback()
    return True


def yield_if_not_blank(text: Optional[str], callback: Callable[[], Any]) -> bool:
    """Call callback if text has at least one character. Returns True if it was called."""
    if is_blank(text):
        return False
    callback()
    return True
