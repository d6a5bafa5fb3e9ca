# -*- coding: utf-8 -*-

"""
Structural statistics over corpora of semantic dependency graphs.
"""

import argparse
import logging
import sys
from collections import OrderedDict

import pandas as pd

from .corpus import FORMATS, GraphCorpus
from .inspected_graph import InspectedGraph


logger = logging.getLogger(__name__)

PROPERTIES = [
    "n_tokens",
    "n_edges",
    "n_singletons",
    "n_components",
    "n_root_nodes",
    "n_leaf_nodes",
    "maximal_indegree",
    "maximal_outdegree",
    "cyclic",
    "forest",
    "tree",
    "projective",
]
"""The structural properties recorded for every graph, in column order."""


def inspect_graph(graph):
    """
    Returns the structural properties of a single graph.

    >>> from sdpgraph.graph import get_minimal_graph
    >>> p = inspect_graph(get_minimal_graph())
    >>> p["n_components"], p["n_root_nodes"], p["tree"], p["projective"]
    (2, 1, True, True)
    """
    i = InspectedGraph(graph)
    return OrderedDict(
        [
            ("n_tokens", graph.number_of_nodes() - 1),
            ("n_edges", graph.number_of_edges()),
            ("n_singletons", i.get_n_singletons()),
            ("n_components", i.get_n_components()),
            ("n_root_nodes", i.get_n_root_nodes()),
            ("n_leaf_nodes", i.get_n_leaf_nodes()),
            ("maximal_indegree", i.get_maximal_indegree()),
            ("maximal_outdegree", i.get_maximal_outdegree()),
            ("cyclic", i.is_cyclic()),
            ("forest", i.is_forest()),
            ("tree", i.is_tree()),
            ("projective", i.is_projective()),
        ]
    )


def inspect_corpus(graphs):
    """
    Returns a DataFrame with the properties of every graph, indexed by
    the graph ids.
    """
    ids, rows = [], []
    for n, graph in enumerate(graphs):
        ids.append(graph.graph.get("id", n))
        rows.append(inspect_graph(graph))
    frame = pd.DataFrame(rows, index=pd.Index(ids, name="id"), columns=PROPERTIES)
    logger.debug("Inspected %d graphs", len(frame))
    return frame


def summarize(frame):
    """
    Returns the corpus-level statistics for a DataFrame of graph
    properties, as produced by `inspect_corpus`.
    """
    n_graphs = len(frame)
    n_tokens = int(frame["n_tokens"].sum()) if n_graphs else 0

    def percentage(column):
        return 100.0 * frame[column].sum() / n_graphs if n_graphs else 0.0

    return pd.Series(
        OrderedDict(
            [
                ("graphs", n_graphs),
                ("tokens", n_tokens),
                ("% cyclic", percentage("cyclic")),
                ("% forests", percentage("forest")),
                ("% trees", percentage("tree")),
                ("% projective", percentage("projective")),
                (
                    "% singletons",
                    100.0 * frame["n_singletons"].sum() / n_tokens
                    if n_tokens
                    else 0.0,
                ),
                (
                    "avg. components",
                    frame["n_components"].mean() if n_graphs else 0.0,
                ),
                (
                    "max. indegree",
                    int(frame["maximal_indegree"].max()) if n_graphs else 0,
                ),
                (
                    "max. outdegree",
                    int(frame["maximal_outdegree"].max()) if n_graphs else 0,
                ),
            ]
        )
    )


def main(args=None):
    aparser = argparse.ArgumentParser(
        description="report structural properties of semantic dependency graphs"
    )
    aparser.add_argument(
        "input", help="input sdp file(s) or directories", nargs="+"
    )
    aparser.add_argument(
        "--format",
        "-f",
        choices=sorted(FORMATS),
        default=None,
        help="the sdp format, detected from the file header if omitted",
    )
    aparser.add_argument(
        "--csv", help="write the properties of every graph to this file"
    )
    aparser.add_argument(
        "--verbose", "-v", action="store_true", help="log debug messages"
    )
    args = aparser.parse_args(args)
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)

    corpus = GraphCorpus()
    for path in args.input:
        corpus.load(path, format=args.format)
    frame = inspect_corpus(corpus)
    if args.csv:
        frame.to_csv(args.csv)
        logger.info("Wrote graph properties to %s", args.csv)
    print(summarize(frame).to_string())


if __name__ == "__main__":
    main(sys.argv[1:])
