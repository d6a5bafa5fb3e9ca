# -*- coding: utf-8 -*-

"""
Reading semantic dependency graphs from the tab-separated SDP formats.
"""

import io
import logging
import os

from .graph import SDPGraph, SDPGraphException


logger = logging.getLogger(__name__)

FORMATS = {
    "2014": {"columns": ["id", "form", "lemma", "pos", "top", "pred"]},
    "2015": {
        "columns": ["id", "form", "lemma", "pos", "top", "pred", "frame"]
    },
}
"""The token columns preceding the argument columns, per format."""

DEFAULT_FORMAT = "2014"

MARKER = "#SDP"
"""Prefix of the line announcing the format, as in `#SDP 2015`."""

FLAGS = {"+": True, "-": False}


def _flag(value, name, lineno):
    try:
        return FLAGS[value]
    except KeyError:
        raise SDPGraphException(
            "Line {}: {} flag must be '+' or '-', got '{}'.".format(
                lineno, name, value
            )
        )


def _build_graph(graph_id, rows, format):
    """
    Builds a graph from the token rows of one sentence. Every row is a
    pair of the line number and the list of its fields.
    """
    columns = FORMATS[format]["columns"]
    g = SDPGraph(id=graph_id)
    arguments = []
    for lineno, fields in rows:
        if len(fields) < len(columns):
            raise SDPGraphException(
                "Line {}: expected at least {} columns, got {}.".format(
                    lineno, len(columns), len(fields)
                )
            )
        token = dict(zip(columns, fields))
        expected_id = g.number_of_nodes()
        if token["id"] != str(expected_id):
            raise SDPGraphException(
                "Line {}: expected token id {}, got '{}'.".format(
                    lineno, expected_id, token["id"]
                )
            )
        g.add_token(
            token["form"],
            lemma=token["lemma"],
            pos=token["pos"],
            top=_flag(token["top"], "TOP", lineno),
            pred=_flag(token["pred"], "PRED", lineno),
            frame=token.get("frame", "_"),
        )
        arguments.append((lineno, fields[len(columns):]))

    predicates = g.get_predicates()
    for lineno, args in arguments:
        if len(args) != len(predicates):
            raise SDPGraphException(
                "Line {}: expected {} argument columns, got {}.".format(
                    lineno, len(predicates), len(args)
                )
            )
    for k, predicate in enumerate(predicates):
        for target, (_lineno, args) in enumerate(arguments, 1):
            if args[k] != "_":
                g.add_dependency(predicate, target, args[k])
    logger.debug(
        "Read graph %s with %d tokens and %d edges",
        graph_id,
        g.get_n_tokens(),
        g.number_of_edges(),
    )
    return g


def read_graphs(lines, format=None):
    """
    Reads graphs from an iterable of lines in SDP format. If no format is
    given, it is detected from the marker line of the 2015 format.

    >>> lines = ['#SDP 2015', '#20001001',
    ...          '1\\tDogs\\tdog\\tNNS\\t-\\t-\\t_\\tARG1',
    ...          '2\\tbark\\tbark\\tVBP\\t+\\t+\\tv:e-i\\t_',
    ...          '']
    >>> [g] = read_graphs(lines)
    >>> g.graph["id"], g.get_sentence(), g.get_top_nodes()
    ('20001001', 'Dogs bark', [2])
    >>> sorted(g.edges(data="label"))
    [(2, 1, 'ARG1')]
    """
    graph_id = None
    rows = []
    for lineno, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if line.startswith(MARKER):
            detected = line[len(MARKER):].strip()
            if detected not in FORMATS:
                raise SDPGraphException(
                    "Line {}: unknown format '{}'.".format(lineno, detected)
                )
            format = format or detected
            continue
        if not line.strip():
            if graph_id is not None:
                yield _build_graph(graph_id, rows, format or DEFAULT_FORMAT)
            graph_id, rows = None, []
        elif line.startswith("#") and graph_id is None:
            graph_id = line[1:]
        elif graph_id is None:
            raise SDPGraphException(
                "Line {}: token line outside of a graph.".format(lineno)
            )
        else:
            rows.append((lineno, line.split("\t")))
    if graph_id is not None:
        yield _build_graph(graph_id, rows, format or DEFAULT_FORMAT)


def load_graphs(filename, format=None):
    """Returns the list of all graphs in the SDP file."""
    with io.open(filename, encoding="utf-8") as f:
        graphs = list(read_graphs(f, format=format))
    logger.info("Loaded %d graphs from %s", len(graphs), filename)
    return graphs


class GraphCorpus(object):
    def __init__(self):
        self.graphs = {}

    def load(self, path, format=None):
        """
        Loads the graphs of an SDP file, or of all .sdp files in a
        directory, and returns the freshly added graph ids. Nothing is
        added if any of the graph ids is already taken.
        """
        if os.path.isdir(path):
            filenames = [
                os.path.join(path, fn)
                for fn in sorted(os.listdir(path))
                if fn.endswith(".sdp")
            ]
        else:
            filenames = [path]
        loaded = {}
        for filename in filenames:
            for g in load_graphs(filename, format=format):
                graph_id = g.graph["id"]
                if graph_id in self.graphs or graph_id in loaded:
                    raise SDPGraphException(
                        "Duplicate graph id {} in {}.".format(
                            graph_id, filename
                        )
                    )
                loaded[graph_id] = g
        self.graphs.update(loaded)
        return list(loaded)

    def __len__(self):
        return len(self.graphs)

    def __iter__(self):
        return iter(self.graphs.values())
