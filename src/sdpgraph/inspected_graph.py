# -*- coding: utf-8 -*-

"""
Inspection of graph-theoretic properties of semantic dependency graphs.

All properties are derived from a single depth-first traversal of the
graph, which records for every node the run it was discovered in, as well
as its preorder and postorder timestamps.
"""

import itertools
import logging

from .graph import SDPGraph, SDPGraphException


logger = logging.getLogger(__name__)

UNVISITED = -1
"""Marker for nodes that have not been entered yet."""


class InspectedGraph(object):
    """
    Inspects a directed graph with nodes numbered 0 to N-1, where node 0
    is the virtual root. Nodes may carry a boolean `top` attribute.

    The graph is analysed once on construction; all queries are answered
    from the precomputed state, which is never modified afterwards.

    >>> from sdpgraph.graph import get_example_graph
    >>> i = InspectedGraph(get_example_graph())
    >>> i.is_cyclic(), i.is_forest(), i.is_tree(), i.is_projective()
    (False, False, False, False)
    >>> i.get_n_singletons(), i.get_n_components()
    (1, 2)
    """

    def __init__(self, graph):
        self.graph = graph
        n_nodes = graph.number_of_nodes()
        if set(graph.nodes()) != set(range(n_nodes)):
            raise SDPGraphException(
                "Nodes must be numbered from 0 to {}.".format(n_nodes - 1)
            )

        run, enter, leave, self._n_runs = self._compute_timestamps(graph)
        self._run = tuple(run)
        self._enter = tuple(enter)
        self._leave = tuple(leave)

        is_singleton = [
            node != SDPGraph.ROOT
            and graph.in_degree(node) == 0
            and graph.out_degree(node) == 0
            and not graph.nodes[node].get("top", False)
            for node in range(n_nodes)
        ]
        self._is_singleton = tuple(is_singleton)
        self._n_singletons = sum(is_singleton)
        logger.debug(
            "Inspected graph %s: %d nodes, %d runs, %d singletons",
            graph.graph.get("id"),
            n_nodes,
            self._n_runs,
            self._n_singletons,
        )

    @staticmethod
    def _compute_timestamps(graph):
        """
        Computes the run index and the preorder and postorder timestamps
        of every node, starting a new depth-first run at every node (in id
        order) not reached by a previous run. Returns the lists `run`,
        `enter`, `leave` and the number of runs.
        """
        n_nodes = graph.number_of_nodes()
        run = [UNVISITED] * n_nodes
        enter = [UNVISITED] * n_nodes
        leave = [UNVISITED] * n_nodes
        timer = itertools.count()
        n_runs = 0
        for start in range(n_nodes):
            if enter[start] != UNVISITED:
                continue
            run[start] = n_runs
            enter[start] = next(timer)
            stack = [(start, iter(graph.successors(start)))]
            while stack:
                node, successors = stack[-1]
                for target in successors:
                    # only descend into nodes not visited before
                    if enter[target] == UNVISITED:
                        run[target] = n_runs
                        enter[target] = next(timer)
                        stack.append((target, iter(graph.successors(target))))
                        break
                else:
                    leave[node] = next(timer)
                    stack.pop()
            n_runs += 1
        return run, enter, leave, n_runs

    def get_run(self, id_):
        """Returns the index of the run in which the node was discovered."""
        return self._run[id_]

    def get_n_runs(self):
        return self._n_runs

    def get_timestamps(self, id_):
        """
        Returns the preorder and postorder timestamp of the node.

        >>> from sdpgraph.graph import get_minimal_graph
        >>> i = InspectedGraph(get_minimal_graph())
        >>> [i.get_timestamps(n) for n in range(3)]
        [(0, 1), (2, 5), (3, 4)]
        """
        return self._enter[id_], self._leave[id_]

    def is_cyclic(self):
        """
        Tests whether the graph contains a cycle, i.e. a self-loop or a
        back edge, whose target is a proper ancestor of its source in the
        depth-first forest.
        """
        enter, leave = self._enter, self._leave
        for source, target in self.graph.edges():
            if source == target or (
                enter[target] < enter[source] and leave[source] < leave[target]
            ):
                return True
        return False

    def is_singleton(self, id_):
        """
        A singleton is a node other than the virtual root that has
        neither incoming nor outgoing edges and is not a top node.
        """
        return self._is_singleton[id_]

    def get_n_singletons(self):
        return self._n_singletons

    def get_maximal_indegree(self):
        """Returns the maximal indegree of the non-singleton nodes."""
        return max(
            (
                self.graph.in_degree(node)
                for node in self.graph.nodes()
                if not self._is_singleton[node]
            ),
            default=0,
        )

    def get_maximal_outdegree(self):
        """Returns the maximal outdegree of the non-singleton nodes."""
        return max(
            (
                self.graph.out_degree(node)
                for node in self.graph.nodes()
                if not self._is_singleton[node]
            ),
            default=0,
        )

    def _non_trivial_nodes(self):
        return (
            node
            for node in self.graph.nodes()
            if node != SDPGraph.ROOT and not self._is_singleton[node]
        )

    def get_n_root_nodes(self):
        """
        Returns the number of non-singleton nodes other than the virtual
        root that have no incoming edges.
        """
        return sum(
            1 for node in self._non_trivial_nodes()
            if self.graph.in_degree(node) == 0
        )

    def get_n_leaf_nodes(self):
        """
        Returns the number of non-singleton nodes other than the virtual
        root that have no outgoing edges.
        """
        return sum(
            1 for node in self._non_trivial_nodes()
            if self.graph.out_degree(node) == 0
        )

    def is_forest(self):
        """
        A forest is an acyclic graph in which every node has at most one
        incoming edge.
        """
        return not self.is_cyclic() and self.get_maximal_indegree() <= 1

    def is_tree(self):
        """A tree is a forest with exactly one root node."""
        return self.is_forest() and self.get_n_root_nodes() == 1

    def is_projective(self):
        """
        Tests whether the graph is projective, i.e. whether no two edges
        cross and no edge covers a non-singleton node without incoming
        edges.

        >>> from sdpgraph.graph import get_crossing_graph
        >>> InspectedGraph(get_crossing_graph()).is_projective()
        False
        """
        n_nodes = self.graph.number_of_nodes()
        has_incoming_edge = [False] * n_nodes
        is_covered = [False] * n_nodes
        spans = [
            (min(source, target), max(source, target), target)
            for source, target in self.graph.edges()
        ]
        for min1, max1, target in spans:
            for min2, max2, _ in spans:
                if overlap(min1, max1, min2, max2):
                    return False
            has_incoming_edge[target] = True
            for i in range(min1 + 1, max1):
                is_covered[i] = True
        for node in range(n_nodes):
            if (
                is_covered[node]
                and not has_incoming_edge[node]
                and not self._is_singleton[node]
            ):
                return False
        return True

    def get_n_components(self):
        """
        Returns the number of weakly connected components of the graph,
        not counting singletons.

        Every run of the depth-first search lies within one component, so
        the components are obtained by merging the runs along the edges.
        """
        component = list(range(self._n_runs))

        def find(r):
            root = r
            while component[root] != root:
                root = component[root]
            while component[r] != root:
                component[r], r = root, component[r]
            return root

        n_components = self._n_runs - self._n_singletons
        for source, target in self.graph.edges():
            c_source = find(self._run[source])
            c_target = find(self._run[target])
            if c_source != c_target:
                component[c_target] = c_source
                n_components -= 1
        assert n_components >= 0
        return n_components


def overlap(min1, max1, min2, max2):
    """
    Tests whether the spans of two edges overlap (cross).

    >>> overlap(0, 2, 1, 3)
    True
    >>> overlap(1, 3, 0, 2)
    True
    >>> overlap(0, 3, 1, 2)
    False
    >>> overlap(0, 2, 2, 4)
    False
    """
    return (
        min1 < min2 < max1 < max2
        or min2 < min1 < max2 < max1
    )
