"""Plain-text dump of a context graph for debugging."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .nodes import Edge, Node

if TYPE_CHECKING:
    from .context_graph import ContextGraph

_CENTER_HEADER = (
    "Center node:\t[centerNode, weight : edgeWeightIn*multiplier=edgeWeightOut, enabled"
    " : characteristic, weight, enabled]"
)
_CHARACTERISTIC_HEADER = (
    "Characteristic nodes:\t[characteristicNode, weight, enabled; solutionNode1, weight, enabled"
    " : edgeWeightIn*multiplier=edgeWeightOut, enabled; ...]"
)
_SOLUTION_HEADER = (
    "Solution nodes:\t[solutionNode, weight, enabled; characteristicNode1, weight, enabled"
    " : edgeWeightIn*multiplier=edgeWeightOut, enabled; ...]"
)


def _node_state(node: Node) -> str:
    return "node enabled" if node.enabled else "node disabled"


def _edge_state(edge: Edge) -> str:
    return "edge enabled" if edge.enabled else "edge disabled"


def _flow(edge: Edge) -> str:
    return f"{edge.weight_in}*{edge.multiplier}={edge.weight_out}"


def _node_with_edges(node: Node, edges: list[Edge], *, outgoing: bool) -> str:
    parts = [f"{node.name}, {node.weight}, {_node_state(node)}"]
    for edge in edges:
        other = edge.target if outgoing else edge.source
        parts.append(f"{other.name}, {other.weight}, {_node_state(other)} : {_flow(edge)}, {_edge_state(edge)}")
    return "\t[" + "; ".join(parts) + "]"


def render_graph(graph: ContextGraph) -> str:
    """Center edges, then characteristic nodes with outgoing edges, then solution nodes with incoming edges."""
    center = graph.center
    lines = [_CENTER_HEADER]
    for edge in center.outgoing:
        lines.append(
            f"\t[{center.name}, {center.weight} : {_flow(edge)}, {_edge_state(edge)}"
            f" : {edge.target.name}, {edge.target.weight}, {_node_state(edge.target)}]"
        )

    lines.append("")
    lines.append(_CHARACTERISTIC_HEADER)
    lines.extend(_node_with_edges(node, node.outgoing, outgoing=True) for node in graph.characteristic_nodes)

    lines.append("")
    lines.append(_SOLUTION_HEADER)
    lines.extend(_node_with_edges(node, node.incoming, outgoing=False) for node in graph.solution_nodes)
    return "\n".join(lines) + "\n"
