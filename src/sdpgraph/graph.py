# -*- coding: utf-8 -*-

"""
Semantic dependency graphs over the tokens of a sentence.
"""

import networkx as nx
from pydot import graph_from_dot_data


class SDPGraphException(nx.NetworkXException):
    """ A class for exceptions raised in the handling of semantic
        dependency graphs """


class SDPGraph(nx.DiGraph):
    """
    A directed graph whose nodes are the tokens of a sentence, numbered
    densely from 1 in surface order, plus a virtual root with id 0.
    Every edge carries a semantic dependency label.

    >>> g = SDPGraph(id="20001001")
    >>> g.graph["id"]
    '20001001'
    >>> list(g.nodes())
    [0]
    >>> g.nodes[0]["form"]
    '_ROOT_'
    """

    ROOT = 0
    ROOT_FORM = "_ROOT_"

    def __init__(self, data=None, **attr):
        super(SDPGraph, self).__init__(data, **attr)
        if SDPGraph.ROOT not in self:
            self.add_node(
                SDPGraph.ROOT,
                form=SDPGraph.ROOT_FORM,
                lemma=SDPGraph.ROOT_FORM,
                pos=SDPGraph.ROOT_FORM,
                top=False,
                pred=False,
                frame="_",
            )

    def add_token(
        self, form, lemma="_", pos="_", top=False, pred=False, frame="_"
    ):
        """
        Appends a token to the sentence and returns its id.

        >>> g = SDPGraph()
        >>> g.add_token("Pierre", "Pierre", "NNP")
        1
        >>> g.add_token("Vinken", "Vinken", "NNP", top=True, pred=True)
        2
        >>> g.nodes[2]["top"], g.nodes[2]["pred"]
        (True, True)
        """
        id_ = self.number_of_nodes()
        self.add_node(
            id_,
            form=form,
            lemma=lemma,
            pos=pos,
            top=top,
            pred=pred,
            frame=frame,
        )
        return id_

    def add_tokens(self, forms):
        """
        >>> g = SDPGraph()
        >>> g.add_tokens(["We", "swim", "."])
        [1, 2, 3]
        """
        return [self.add_token(form) for form in forms]

    def add_dependency(self, source, target, label):
        """
        >>> g = SDPGraph()
        >>> g.add_tokens(["Dogs", "bark"])
        [1, 2]
        >>> g.add_dependency(2, 1, "ARG1")
        >>> list(g.edges(data=True))
        [(2, 1, {'label': 'ARG1'})]
        """
        assert source in self, "Source node does not exist in graph"
        assert target in self, "Target node does not exist in graph"
        self.add_edge(source, target, label=label)

    def is_top(self, id_):
        return self.nodes[id_].get("top", False)

    def get_top_nodes(self):
        return [i for i in sorted(self.nodes()) if self.is_top(i)]

    def get_predicates(self):
        """
        Returns the ids of all predicate tokens, in surface order.

        >>> g = get_example_graph()
        >>> g.get_predicates()
        [1, 3, 4]
        """
        return [
            i for i in sorted(self.nodes()) if self.nodes[i].get("pred", False)
        ]

    def get_tokens(self):
        """Returns the ids of all real tokens, i.e. all but the root."""
        return [i for i in sorted(self.nodes()) if i != SDPGraph.ROOT]

    def get_n_tokens(self):
        return self.number_of_nodes() - 1

    def get_sentence(self):
        """
        >>> get_example_graph().get_sentence()
        'Pierre Vinken joined the board .'
        """
        return " ".join(self.nodes[i]["form"] for i in self.get_tokens())

    def export_to_dot(self):
        """
        Returns the graph in the dot language, with the tokens laid out
        left to right in surface order.

        >>> print(get_minimal_graph().export_to_dot())
        digraph "g" {
        rankdir=LR;
        node [shape=plaintext];
        n0 [label="_ROOT_"];
        n1 [label="Dogs", style=bold];
        n2 [label="bark"];
        n1 -> n2 [label="ARG1"];
        }
        """
        lines = ['digraph "{}" {{'.format(self.graph.get("id", "g"))]
        lines.append("rankdir=LR;")
        lines.append("node [shape=plaintext];")
        for i in sorted(self.nodes()):
            form = self.nodes[i].get("form", "").replace('"', '\\"')
            style = ", style=bold" if self.is_top(i) else ""
            lines.append('n{} [label="{}"{}];'.format(i, form, style))
        for s, t, d in self.edges(data=True):
            label = d.get("label", "").replace('"', '\\"')
            lines.append('n{} -> n{} [label="{}"];'.format(s, t, label))
        lines.append("}")
        return "\n".join(lines)

    def render_as_dot(self):
        dot = self.export_to_dot()
        dot_utf8 = dot.encode("utf-8")
        return dot_utf8

    def render_as_png(self, filename):
        dot_graph = graph_from_dot_data(self.export_to_dot())[0]
        dot_graph.write_png(filename)


def get_minimal_graph():
    """
    >>> g = get_minimal_graph()
    >>> list(g.edges())
    [(1, 2)]
    """
    g = SDPGraph(id="g")
    g.add_token("Dogs", "dog", "NNS", top=True, pred=True)
    g.add_token("bark", "bark", "VBP")
    g.add_dependency(1, 2, "ARG1")
    return g


def get_example_graph():
    """
    >>> g = get_example_graph()
    >>> sorted(g.edges(data="label"))
    [(1, 2, 'compound'), (3, 2, 'ARG1'), (3, 5, 'ARG2'), (4, 5, 'BV')]
    >>> g.get_top_nodes()
    [3]
    """
    g = SDPGraph(id="20001001")
    g.add_token("Pierre", "Pierre", "NNP", pred=True)
    g.add_token("Vinken", "Vinken", "NNP")
    g.add_token("joined", "join", "VBD", top=True, pred=True)
    g.add_token("the", "the", "DT", pred=True)
    g.add_token("board", "board", "NN")
    g.add_token(".", "_", ".")
    g.add_dependency(1, 2, "compound")
    g.add_dependency(3, 2, "ARG1")
    g.add_dependency(3, 5, "ARG2")
    g.add_dependency(4, 5, "BV")
    return g


def get_crossing_graph():
    """
    A graph whose two edges cross when the tokens are laid out in
    surface order.

    >>> g = get_crossing_graph()
    >>> list(g.edges())
    [(0, 2), (1, 3)]
    """
    g = SDPGraph(id="crossing")
    g.add_tokens(["a", "b", "c"])
    g.add_dependency(0, 2, "_")
    g.add_dependency(1, 3, "_")
    return g
