from .node_type import NodeType
from .plugin import Plugin
from .variable import Variable

__all__ = [
    "NodeType",
    "Plugin",
    "Variable",
]
