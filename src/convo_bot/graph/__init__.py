"""Context graph of characteristics and solutions."""

from .context_graph import ContextGraph
from .nodes import Edge, Node
from .render import render_graph

__all__ = ["ContextGraph", "Edge", "Node", "render_graph"]
