"""
Text Utility Functions
======================

Pure string helpers used while rewriting documents. None of these touch
the tree; they take a string and return a new one.
"""

from typing import Optional
import re


DEFAULT_BODY_PREFIX = "/html/body//"
DEFAULT_IMAGE_DIR = "images/"

_WHITESPACE_RUN = re.compile(r"\s\s+")
_OUTER_WHITESPACE = re.compile(r"^\s+|\s+$")
_NON_DIGITS = re.compile(r"[^0-9]")
_LEADING_PATH = re.compile(r"^\.?/?/?")


def normalize(text: Optional[str]) -> str:
    """
    Normalize whitespace in a string.

    Runs of two or more whitespace characters become a single space, then
    leading and trailing whitespace is removed. A lone whitespace character
    between words is left untouched.

    Args:
        text: Input text (None is treated as empty)

    Returns:
        Normalized text

    Example:
        >>> normalize(" foo   bar baz  floozie ")
        'foo bar baz floozie'
    """
    if not text:
        return ""
    collapsed = _WHITESPACE_RUN.sub(" ", text)
    return _OUTER_WHITESPACE.sub("", collapsed)


def strip_non_digits(text: Optional[str]) -> str:
    """
    Remove every character that is not an ASCII digit.

    Args:
        text: Input text

    Returns:
        The digits of text, in order
    """
    if not text:
        return ""
    return _NON_DIGITS.sub("", text)


def is_blank(text: Optional[str]) -> bool:
    """Return True if text is None or exactly the empty string."""
    return not text


def xpath_from_body(path: str, prefix: str = DEFAULT_BODY_PREFIX) -> str:
    """
    Turn a relative or root-anchored selector into one anchored at <body>.

    Any leading ".", "/" or "//" is dropped before the prefix is added, so
    "div/span", "./div/span" and "//div/span" all give the same result.

    Args:
        path: Selector to anchor
        prefix: Anchor to prepend

    Returns:
        Absolute selector string

    Example:
        >>> xpath_from_body("//div/span")
        '/html/body//div/span'
    """
    return prefix + _LEADING_PATH.sub("", path, count=1)


def get_image_path(filename: str, image_dir: str = DEFAULT_IMAGE_DIR) -> str:
    """Prefix a file name with the image directory."""
    return image_dir + filename
