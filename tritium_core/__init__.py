"""
Tritium Core Library
====================

Helper functions for rewriting HTML/XML documents held in lxml trees:

- Whitespace normalization of strings, node text and attributes
- Attribute filtering and class editing
- Yielding to the nearest preceding sibling of matched nodes
- Blank/non-blank guards
- Selector and image path builders, digit stripping

Architecture
------------

    tritium_core/
    ├── text/        - Pure string helpers
    ├── xml/         - Single-node read/rewrite helpers
    ├── flow/        - Selection and yielding helpers
    ├── config/      - Configuration management
    └── transform/   - NodeContext, the chainable current-node wrapper

Usage
-----

    from tritium_core import parse_html, remove_class, select, yield_to_preceding_sibling

    doc = parse_html(markup)
    for div in select(doc, "div[@class]"):
        remove_class(div, "foo")

    yield_to_preceding_sibling(doc, "li[@class='sublist']",
                               "li[not(@class='sublist')]",
                               lambda li: li.getparent().remove(li))
"""

__version__ = "1.0.0"

from tritium_core.text.utils import (
    normalize,
    strip_non_digits,
    is_blank,
    xpath_from_body,
    get_image_path,
)

from tritium_core.xml.utils import (
    parse_html,
    parse_fragment,
    to_string,
    local_name,
    remove_node,
    fetch,
    keep_only_attributes,
    normalize_node,
    remove_class,
    add_class,
)

from tritium_core.flow.yielding import (
    select,
    yield_to_preceding_sibling,
    yield_if_blank,
    yield_if_not_blank,
)

from tritium_core.config.settings import (
    TritiumConfig,
    load_config,
    save_config,
)

from tritium_core.transform.context import NodeContext

__all__ = [
    # Version
    "__version__",
    # Text
    "normalize",
    "strip_non_digits",
    "is_blank",
    "xpath_from_body",
    "get_image_path",
    # XML
    "parse_html",
    "parse_fragment",
    "to_string",
    "local_name",
    "remove_node",
    "fetch",
    "keep_only_attributes",
    "normalize_node",
    "remove_class",
    "add_class",
    # Flow
    "select",
    "yield_to_preceding_sibling",
    "yield_if_blank",
    "yield_if_not_blank",
    # Config
    "TritiumConfig",
    "load_config",
    "save_config",
    # Context
    "NodeContext",
]
