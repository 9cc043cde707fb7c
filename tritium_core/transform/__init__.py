"""
Node Context
============

Chainable wrapper binding a node to a configuration.
"""

from tritium_core.transform.context import NodeContext

__all__ = [
    "NodeContext",
]
