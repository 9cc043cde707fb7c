"""
XML Node Utility Functions
==========================

Helpers that read or rewrite a single node of an lxml tree: attribute
filtering, whitespace normalization of node content and class editing.
The functions work on any lxml element, including lxml.html elements, and
take the node they operate on as their first argument.
"""

from typing import Any, List, Optional
import logging
import re

from lxml import etree
import lxml.html

from tritium_core.text.utils import normalize

logger = logging.getLogger(__name__)


def parse_html(markup: str) -> Any:
    """
    Parse a complete HTML document.

    Args:
        markup: HTML source

    Returns:
        The <html> root element
    """
    return lxml.html.document_fromstring(markup)


def parse_fragment(markup: str) -> Any:
    """
    Parse an HTML fragment holding a single top-level element.

    Args:
        markup: HTML source, e.g. '<div class="a">x</div>'

    Returns:
        The fragment's element
    """
    return lxml.html.fragment_fromstring(markup)


def to_string(element: Any) -> str:
    """Serialize an element (without its tail) to a unicode string."""
    return lxml.html.tostring(element, encoding="unicode", with_tail=False)


def local_name(element: Any) -> str:
    """
    Extract local name from element tag, stripping any namespace prefix.

    Args:
        element: XML element

    Returns:
        Local tag name without namespace

    Example:
        >>> elem = etree.Element("{http://www.w3.org/1999/xhtml}div")
        >>> local_name(elem)
        'div'
    """
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    return _strip_namespace(tag)


def _strip_namespace(name: str) -> str:
    if name.startswith("{"):
        return name.split("}", 1)[1]
    return name


def remove_node(element: Any) -> None:
    """
    Remove an element from its parent without losing its tail text.

    The tail is appended to the previous sibling's tail, or to the
    parent's text when the element is the first child. Root elements are
    left alone.

    Args:
        element: Element to remove
    """
    parent = element.getparent()
    if parent is None:
        return

    tail = element.tail
    if tail:
        previous = element.getprevious()
        if previous is not None:
            previous.tail = (previous.tail or "") + tail
        else:
            parent.text = (parent.text or "") + tail
        element.tail = None

    parent.remove(element)
    logger.debug(f"Removed <{local_name(element)}> from <{local_name(parent)}>")


def evaluate(element: Any, expression: str) -> Any:
    """
    Evaluate an XPath expression relative to element.

    Malformed expressions are logged and the lxml error is re-raised.

    Args:
        element: Context node
        expression: XPath 1.0 expression

    Returns:
        Whatever lxml returns: a list of nodes/strings, or a string,
        number or boolean for scalar expressions
    """
    try:
        return element.xpath(expression)
    except etree.XPathError as e:
        logger.error(f"Invalid selector {expression!r}: {e}")
        raise


def fetch(element: Any, selector: str) -> str:
    """
    Read the string value of the first node a selector finds.

    The selector is wrapped in XPath's string(), so attribute and text
    results give their value, element results their full text content,
    numbers and booleans their XPath spelling ("2", "true"). Nothing found
    gives an empty string.

    Args:
        element: Context node
        selector: XPath relative to element, e.g. "@class"

    Returns:
        String value of the first match
    """
    return str(evaluate(element, f"string({selector})"))


def keep_only_attributes(element: Any, allow_list: Optional[str]) -> None:
    """
    Remove all attributes except the ones named in allow_list.

    allow_list is free text such as "data-ur-set, data-ur-toggler-component".
    An attribute survives when its local name occurs anywhere in that text,
    so a name that happens to be a substring of an allowed name is kept
    too. An empty allow_list removes every attribute.

    Args:
        element: Node whose attributes are filtered
        allow_list: Attribute names to keep
    """
    allow_list = allow_list or ""
    doomed = [
        name for name in element.attrib
        if _strip_namespace(name) not in allow_list
    ]
    for name in doomed:
        del element.attrib[name]

    if doomed:
        logger.debug(f"Removed attributes {doomed} from <{local_name(element)}>")


def normalize_node(element: Any, selector: Optional[str] = None) -> None:
    """
    Normalize whitespace of node content in place.

    Without a selector the element's own text is normalized. With a
    selector every result is rewritten where it lives: attributes on their
    owner, text nodes as the owner's text or tail, elements as their text.

    Args:
        element: Context node
        selector: Optional XPath relative to element, e.g. "@class"
    """
    if selector is None:
        if element.text is not None:
            element.text = normalize(element.text)
        return

    results = evaluate(element, selector)
    if not isinstance(results, list):
        logger.debug(f"Selector {selector!r} gave a scalar, nothing to normalize")
        return

    for result in results:
        if isinstance(result, etree._Element):
            if result.text is not None:
                result.text = normalize(result.text)
            continue

        owner = result.getparent() if hasattr(result, "getparent") else None
        if owner is None:
            continue
        if result.is_attribute:
            owner.set(result.attrname, normalize(result))
        elif result.is_tail:
            owner.tail = normalize(result)
        elif result.is_text:
            owner.text = normalize(result)


def remove_class(element: Any, class_name: str, create_missing: bool = False) -> None:
    """
    Remove a whole class from an element and normalize the class attribute.

    Only whole words are removed: removing "product" leaves
    "product_thumbnail" alone.

    Args:
        element: Node to edit
        class_name: Class to remove
        create_missing: Write an empty class attribute even if the element
            had none

    Example:
        <div class=" foo   bar baz  floozie "> becomes
        <div class="bar baz floozie"> after remove_class(div, "foo")
    """
    current = element.get("class")
    if current is None and not create_missing:
        return

    pattern = r"\b" + re.escape(class_name) + r"\b"
    element.set("class", normalize(re.sub(pattern, "", current or "")))
    logger.debug(f"Removed class {class_name!r} from <{local_name(element)}>")


def add_class(element: Any, class_name: str) -> None:
    """
    Add one or more whitespace-separated classes to an element.

    Classes already present are not repeated, and the resulting attribute
    is normalized.

    Args:
        element: Node to edit
        class_name: Class, or several classes separated by whitespace
    """
    current = element.get("class")
    tokens: List[str] = (current or "").split()
    added = [token for token in class_name.split() if token not in tokens]
    if current is None and not added:
        return

    for token in added:
        if token not in tokens:
            tokens.append(token)
    element.set("class", " ".join(tokens))
