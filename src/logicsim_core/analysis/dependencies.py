# src/logicsim_core/analysis/dependencies.py
"""
Dependency analysis over the combinational updates of a circuit.

The engine certifies the declared update order with a single define-before-use
pass and never reorders anything. When that pass fails, this analyzer explains
why: either the updates contain a genuine combinational loop, or they are
acyclic and merely listed out of order. Inputs and latch outputs are not graph
nodes, since they are available from the start of every cycle and therefore
break every loop that passes through them.
"""
import logging
from typing import Iterable, List, Sequence

import networkx as nx

from ..elements import Update

logger = logging.getLogger(__name__)


class UpdateDependencyAnalyzer:
    """Builds a directed graph `dependency -> update output` over update outputs."""

    def __init__(self, updates: Sequence[Update]):
        self.updates = list(updates)
        self.graph = self._build_graph()

    def _build_graph(self) -> nx.DiGraph:
        graph = nx.DiGraph()
        update_outputs = {update.output_name for update in self.updates}
        for update in self.updates:
            graph.add_node(update.output_name)
            for dependency in update.dependencies():
                if dependency in update_outputs:
                    graph.add_edge(dependency, update.output_name)
        logger.debug(f"Update dependency graph: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges.")
        return graph

    def is_acyclic(self) -> bool:
        return nx.is_directed_acyclic_graph(self.graph)

    def find_cycle(self) -> List[str]:
        """
        Returns the signals of one combinational loop anywhere in the graph, in
        dependency order, or an empty list if there is none.
        """
        try:
            edges = nx.find_cycle(self.graph)
        except nx.NetworkXNoCycle:
            return []
        return [u for u, _ in edges]

    def find_cycle_through(self, names: Iterable[str]) -> List[str]:
        """
        Returns a combinational loop that passes through one of `names`, in
        dependency order starting at that name, or an empty list. Loops
        elsewhere in the graph are ignored.
        """
        for name in dict.fromkeys(names):
            if name not in self.graph:
                continue
            for successor in self.graph.successors(name):
                if nx.has_path(self.graph, successor, name):
                    path = nx.shortest_path(self.graph, successor, name)
                    return [name] + path[:-1]
        return []

    def legal_order(self) -> List[str]:
        """
        Returns a define-before-use order of the update outputs, keeping the
        declared order wherever the dependencies allow it. Empty if the graph has
        a loop. This is advice for the author of the circuit; the engine does not
        use it.
        """
        if not self.is_acyclic():
            return []
        position = {update.output_name: index for index, update in enumerate(self.updates)}
        return list(nx.lexicographical_topological_sort(self.graph, key=lambda name: position[name]))
