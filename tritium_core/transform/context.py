"""
Node Context
============

Binds a node and a configuration so the helpers can be chained the way
rules are written against an implicit current node.
"""

from typing import Any, Callable, Iterator, Optional

from tritium_core.config.settings import TritiumConfig, get_default_config
from tritium_core.flow import yielding
from tritium_core.text import utils as text_utils
from tritium_core.xml import utils as xml_utils


class NodeContext:
    """
    A node plus the configuration the helpers should use on it.

    Mutating methods return self for method chaining.

    Example:
        doc = parse_html(markup)
        for item in NodeContext(doc).select("div[@class]"):
            item.remove_class("foo").keep_only_attributes("class, id")
    """

    def __init__(self, node: Any, config: Optional[TritiumConfig] = None):
        """
        Initialize context.

        Args:
            node: lxml element to operate on
            config: Helper configuration (defaults if omitted)
        """
        self.node = node
        self.config = config or get_default_config()

    def __repr__(self) -> str:
        return f"NodeContext(<{xml_utils.local_name(self.node)}>)"

    def child(self, node: Any) -> 'NodeContext':
        """Wrap another node with the same configuration."""
        return NodeContext(node, self.config)

    def select(self, pattern: str) -> Iterator['NodeContext']:
        """Iterate over contexts for the elements matching pattern."""
        for node in yielding.select(self.node, pattern):
            yield self.child(node)

    def fetch(self, selector: str) -> str:
        """String value of the first match of selector."""
        return xml_utils.fetch(self.node, selector)

    def keep_only_attributes(self, allow_list: str) -> 'NodeContext':
        xml_utils.keep_only_attributes(self.node, allow_list)
        return self

    def normalize(self, selector: Optional[str] = None) -> 'NodeContext':
        xml_utils.normalize_node(self.node, selector)
        return self

    def remove_class(self, class_name: str) -> 'NodeContext':
        xml_utils.remove_class(self.node, class_name,
                               create_missing=self.config.classes.create_missing)
        return self

    def add_class(self, class_name: str) -> 'NodeContext':
        xml_utils.add_class(self.node, class_name)
        return self

    def remove(self) -> None:
        """Detach the node from its parent, keeping the parent's text flow."""
        xml_utils.remove_node(self.node)

    def yield_to_preceding_sibling(self, search: str, target: str,
                                   callback: Callable[['NodeContext'], Any]) -> int:
        """Like yielding.yield_to_preceding_sibling, handing over NodeContexts."""
        return yielding.yield_to_preceding_sibling(
            self.node, search, target, lambda node: callback(self.child(node))
        )

    def xpath_from_body(self, path: str) -> str:
        return text_utils.xpath_from_body(path, prefix=self.config.paths.body_prefix)

    def get_image_path(self, filename: str) -> str:
        return text_utils.get_image_path(filename, image_dir=self.config.paths.image_dir)
