import pytest
from pydot import graph_from_dot_data

from sdpgraph.graph import SDPGraph, get_example_graph, get_minimal_graph


def test_root_is_created_once():
    g = SDPGraph(id="g")
    assert list(g.nodes()) == [SDPGraph.ROOT]
    copy = g.copy()
    assert list(copy.nodes()) == [SDPGraph.ROOT]
    assert copy.nodes[SDPGraph.ROOT]["form"] == SDPGraph.ROOT_FORM


def test_token_ids_are_dense():
    g = get_example_graph()
    assert g.get_tokens() == [1, 2, 3, 4, 5, 6]
    assert g.get_n_tokens() == 6
    assert g.add_token("Nov.") == 7


def test_dependency_needs_existing_nodes():
    g = get_minimal_graph()
    with pytest.raises(AssertionError):
        g.add_dependency(1, 5, "ARG1")


def test_top_nodes():
    g = get_example_graph()
    assert g.is_top(3)
    assert not g.is_top(0)
    assert g.get_top_nodes() == [3]


def test_dot_export_is_parsable():
    g = get_example_graph()
    [dot_graph] = graph_from_dot_data(g.export_to_dot())
    assert len(dot_graph.get_edges()) == g.number_of_edges()
    assert g.render_as_dot().startswith(b'digraph "20001001"')
