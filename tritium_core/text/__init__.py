"""
Text Utilities
==============

Pure string helpers: whitespace normalization, digit stripping and path
building.
"""

from tritium_core.text.utils import (
    normalize,
    strip_non_digits,
    is_blank,
    xpath_from_body,
    get_image_path,
    DEFAULT_BODY_PREFIX,
    DEFAULT_IMAGE_DIR,
)

__all__ = [
    "normalize",
    "strip_non_digits",
    "is_blank",
    "xpath_from_body",
    "get_image_path",
    "DEFAULT_BODY_PREFIX",
    "DEFAULT_IMAGE_DIR",
]
