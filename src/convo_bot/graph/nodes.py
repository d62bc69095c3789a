"""Nodes and weighted edges of the context graph."""

from __future__ import annotations

from convo_bot.models import Subject


class Node:
    """Wraps one subject and accumulates weight; equal to any node wrapping an equal subject."""

    __slots__ = ("subject", "weight", "enabled", "outgoing", "incoming")

    def __init__(self, subject: Subject) -> None:
        self.subject = subject
        self.weight = 0.0
        self.enabled = True
        self.outgoing: list[Edge] = []
        self.incoming: list[Edge] = []

    @property
    def name(self) -> str:
        return self.subject.name

    def increment(self, amount: float) -> None:
        self.weight += amount

    def edge_to(self, target: Node) -> Edge | None:
        for edge in self.outgoing:
            if edge.target == target:
                return edge
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.subject == other.subject

    def __hash__(self) -> int:
        return hash(self.subject)

    def __repr__(self) -> str:
        state = "enabled" if self.enabled else "disabled"
        return f"Node({self.subject.name!r}, weight={self.weight}, {state})"


class Edge:
    """Directed connection whose ``weight_out`` is the source weight scaled by ``multiplier``."""

    __slots__ = ("source", "target", "multiplier", "weight_in", "weight_out", "enabled")

    def __init__(self, source: Node, target: Node, multiplier: float = 1.0) -> None:
        self.source = source
        self.target = target
        self.multiplier = float(multiplier)
        self.weight_in = 0.0
        self.weight_out = 0.0
        self.enabled = True

    @classmethod
    def connect(cls, source: Node, target: Node, multiplier: float = 1.0) -> Edge:
        edge = cls(source, target, multiplier)
        source.outgoing.append(edge)
        target.incoming.append(edge)
        return edge

    @property
    def live(self) -> bool:
        return self.enabled and self.target.enabled

    def fire(self) -> float:
        """Snapshot the source weight and pass the change in ``weight_out`` on to the target.

        Returns the amount added to the target.
        """
        previous = self.weight_out
        self.weight_in = self.source.weight
        self.weight_out = self.weight_in * self.multiplier
        delta = self.weight_out - previous
        self.target.increment(delta)
        return delta

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.source == other.source and self.target == other.target

    def __hash__(self) -> int:
        return hash((self.source, self.target))

    def __repr__(self) -> str:
        return (
            f"Edge({self.source.name!r} -> {self.target.name!r}, "
            f"{self.weight_in}*{self.multiplier}={self.weight_out}, enabled={self.enabled})"
        )
