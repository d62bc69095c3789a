"""Weighted graph connecting observed characteristics to recommended solutions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from convo_bot.catalog import Catalog, load_catalogs
from convo_bot.errors import AddOutcome
from convo_bot.models import Center, Characteristic, Solution, Subject

from .nodes import Edge, Node
from .render import render_graph


class ContextGraph:
    """Center node fanning out to characteristic nodes, which feed solution nodes.

    Incrementing a characteristic adds to its weight and to the center's running
    total, then fires every enabled edge from it into an enabled solution node.
    Not safe for concurrent mutation; callers sharing an instance across threads
    must hold one lock around each increment or batch of adds.
    """

    def __init__(
        self,
        characteristics: Catalog[Characteristic],
        solutions: Catalog[Solution],
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._characteristics = characteristics
        self._solutions = solutions
        self._logger = logger or logging.getLogger("convo_bot.graph")

        self._center = Node(Center())
        self._characteristic_nodes: dict[Characteristic, Node] = {}
        self._solution_nodes: dict[Solution, Node] = {}

        for solution in solutions:
            self._materialize_solution(solution)
        for characteristic in characteristics:
            self.add_characteristic(characteristic)

    @classmethod
    def from_files(
        cls,
        characteristics_path: str | Path,
        solutions_path: str | Path,
        *,
        logger: logging.Logger | None = None,
    ) -> ContextGraph:
        characteristics, solutions = load_catalogs(characteristics_path, solutions_path)
        return cls(characteristics, solutions, logger=logger)

    @property
    def center(self) -> Node:
        return self._center

    @property
    def characteristics(self) -> Catalog[Characteristic]:
        return self._characteristics

    @property
    def solutions(self) -> Catalog[Solution]:
        return self._solutions

    @property
    def characteristic_nodes(self) -> tuple[Node, ...]:
        return tuple(self._characteristic_nodes.values())

    @property
    def solution_nodes(self) -> tuple[Node, ...]:
        return tuple(self._solution_nodes.values())

    # Construction

    def add_characteristic(self, characteristic: Characteristic) -> AddOutcome:
        """Materialize a cataloged characteristic and wire it to center and its solutions."""
        if characteristic in self._characteristic_nodes:
            self._logger.info("characteristic_already_in_graph", extra={"characteristic": characteristic.name})
            return AddOutcome.ALREADY_PRESENT
        if characteristic not in self._characteristics:
            self._logger.info("characteristic_not_in_catalog", extra={"characteristic": characteristic.name})
            return AddOutcome.NOT_IN_CATALOG

        # The catalog entry carries the authoritative affinities.
        characteristic = self._characteristics.get(characteristic.name)
        node = Node(characteristic)
        self._characteristic_nodes[characteristic] = node
        Edge.connect(self._center, node, 1.0)

        for affinity in characteristic.affinities:
            solution_node = self._solution_nodes.get(affinity.solution)
            if solution_node is None:
                outcome = self._materialize_solution(affinity.solution)
                if not outcome.added:
                    continue
                solution_node = self._solution_nodes[affinity.solution]
            if not self._nodes_connected(node, solution_node):
                Edge.connect(node, solution_node, affinity.multiplier)

        self._logger.debug(
            "characteristic_added",
            extra={"characteristic": characteristic.name, "edges": len(node.outgoing)},
        )
        return AddOutcome.ADDED

    def add_solution(self, solution: Solution, characteristics: Iterable[Characteristic] = ()) -> AddOutcome:
        """Materialize a solution if needed, then connect it to each given characteristic that declares it.

        Returns ``ALREADY_PRESENT`` when the solution node existed beforehand; wiring
        still happens in that case.
        """
        outcome = self._materialize_solution(solution)
        if outcome is AddOutcome.NOT_IN_CATALOG:
            return outcome

        solution_node = self._solution_nodes[solution]
        for characteristic in characteristics:
            node = self._characteristic_nodes.get(characteristic)
            if node is None:
                self._logger.info(
                    "characteristic_not_in_graph",
                    extra={"characteristic": characteristic.name, "solution": solution.name},
                )
                continue
            if not node.subject.declares(solution):
                continue
            if not self._nodes_connected(node, solution_node):
                Edge.connect(node, solution_node, node.subject.multiplier_for(solution))
        return outcome

    def _materialize_solution(self, solution: Solution) -> AddOutcome:
        if solution in self._solution_nodes:
            self._logger.info("solution_already_in_graph", extra={"solution": solution.name})
            return AddOutcome.ALREADY_PRESENT
        if solution not in self._solutions:
            self._logger.info("solution_not_in_catalog", extra={"solution": solution.name})
            return AddOutcome.NOT_IN_CATALOG
        self._solution_nodes[solution] = Node(solution)
        return AddOutcome.ADDED

    # Propagation

    def increment(self, characteristic: Characteristic, amount: float = 1.0) -> bool:
        """Add ``amount`` to a characteristic and push the result to its solutions.

        The characteristic accumulates even while disabled; a disabled
        characteristic only stops forwarding. Returns False, leaving the graph
        untouched, when the characteristic is not in the graph.
        """
        node = self._characteristic_nodes.get(characteristic)
        if node is None:
            self._logger.info("increment_rejected", extra={"characteristic": characteristic.name})
            return False

        node.increment(amount)
        self._center.increment(amount)

        if node.enabled:
            for edge in node.outgoing:
                if edge.live:
                    edge.fire()

        self._logger.debug(
            "characteristic_incremented",
            extra={"characteristic": characteristic.name, "amount": amount, "weight": node.weight},
        )
        return True

    # Ranking

    def ranked_solutions(self, *, enabled_only: bool = False) -> list[Solution]:
        """Solutions by descending weight; ties keep catalog order.

        Disabled solutions are included unless ``enabled_only`` is set.
        """
        return [node.subject for node in self._ranked_nodes(enabled_only)]

    def ranked_weights(self, *, enabled_only: bool = False) -> list[tuple[Solution, float]]:
        return [(node.subject, node.weight) for node in self._ranked_nodes(enabled_only)]

    def top_solution(self, *, enabled_only: bool = False) -> Solution | None:
        ranked = self._ranked_nodes(enabled_only)
        return ranked[0].subject if ranked else None

    def _ranked_nodes(self, enabled_only: bool) -> list[Node]:
        nodes = [node for node in self._solution_nodes.values() if node.enabled or not enabled_only]
        return sorted(nodes, key=lambda node: node.weight, reverse=True)

    # Enable / disable

    def set_node_enabled(self, subject: Subject, enabled: bool) -> bool:
        node = self.node_for(subject)
        if node is None:
            self._logger.info("node_not_found", extra={"subject": subject.name})
            return False
        node.enabled = enabled
        return True

    def is_node_enabled(self, subject: Subject) -> bool | None:
        node = self.node_for(subject)
        return None if node is None else node.enabled

    def set_edge_enabled(self, characteristic: Characteristic, solution: Solution, enabled: bool) -> bool:
        edge = self.edge_between(characteristic, solution)
        if edge is None:
            self._logger.info(
                "edge_not_found",
                extra={"characteristic": characteristic.name, "solution": solution.name},
            )
            return False
        edge.enabled = enabled
        return True

    def is_edge_enabled(self, characteristic: Characteristic, solution: Solution) -> bool | None:
        edge = self.edge_between(characteristic, solution)
        return None if edge is None else edge.enabled

    # Lookup

    def node_for(self, subject: Subject) -> Node | None:
        if isinstance(subject, Characteristic):
            return self._characteristic_nodes.get(subject)
        if isinstance(subject, Solution):
            return self._solution_nodes.get(subject)
        if subject == self._center.subject:
            return self._center
        return None

    def weight_of(self, subject: Subject) -> float | None:
        node = self.node_for(subject)
        return None if node is None else node.weight

    def edge_between(self, characteristic: Characteristic, solution: Solution) -> Edge | None:
        source = self._characteristic_nodes.get(characteristic)
        target = self._solution_nodes.get(solution)
        if source is None or target is None:
            return None
        return source.edge_to(target)

    def are_connected(self, first: Subject, second: Subject) -> bool:
        """True when an edge joins the two subjects' nodes in either direction, enabled or not."""
        first_node = self.node_for(first)
        second_node = self.node_for(second)
        if first_node is None or second_node is None:
            return False
        return self._nodes_connected(first_node, second_node)

    @staticmethod
    def _nodes_connected(first: Node, second: Node) -> bool:
        return first.edge_to(second) is not None or second.edge_to(first) is not None

    def __str__(self) -> str:
        return render_graph(self)
