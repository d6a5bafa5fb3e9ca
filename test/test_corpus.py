import pytest

from sdpgraph.corpus import GraphCorpus, load_graphs, read_graphs
from sdpgraph.graph import SDPGraphException


SDP_2014 = """\
#20001001
1\tPierre\tPierre\tNNP\t-\t+\t_\t_
2\tVinken\tVinken\tNNP\t-\t-\tcompound\tARG1
3\tjoined\tjoin\tVBD\t+\t+\t_\t_
4\tthe\tthe\tDT\t-\t-\t_\t_

#20001002
1\tHe\the\tPRP\t-\t-\t_
2\tslept\tsleep\tVBD\t+\t+\t_
"""

SDP_2015 = """\
#SDP 2015
#22000001
1\tDogs\tdog\tNNS\t-\t-\t_\tARG1
2\tbark\tbark\tVBP\t+\t+\tv:e-i\t_
3\t.\t_\t.\t-\t-\t_\t_
"""


def lines(text):
    return text.splitlines(True)


def test_read_2014():
    first, second = read_graphs(lines(SDP_2014))
    assert first.graph["id"] == "20001001"
    assert first.get_sentence() == "Pierre Vinken joined the"
    assert first.get_predicates() == [1, 3]
    assert first.get_top_nodes() == [3]
    assert sorted(first.edges(data="label")) == [
        (1, 2, "compound"),
        (3, 2, "ARG1"),
    ]
    assert first.nodes[3]["lemma"] == "join"
    assert first.nodes[3]["frame"] == "_"
    assert second.graph["id"] == "20001002"
    assert second.number_of_edges() == 0


def test_read_2015_detects_format():
    [g] = read_graphs(lines(SDP_2015))
    assert g.nodes[2]["frame"] == "v:e-i"
    assert list(g.edges(data="label")) == [(2, 1, "ARG1")]
    assert g.get_n_tokens() == 3


def test_explicit_format_wins():
    text = SDP_2015.replace("#SDP 2015\n", "")
    [g] = read_graphs(lines(text), format="2015")
    assert g.nodes[2]["frame"] == "v:e-i"
    with pytest.raises(SDPGraphException):
        list(read_graphs(lines(text)))


@pytest.mark.parametrize(
    "text",
    [
        "#1\n1\tw\tw\tX\t-\n",
        "#1\n2\tw\tw\tX\t-\t-\n",
        "#1\n1\tw\tw\tX\t?\t-\n",
        "1\tw\tw\tX\t-\t-\n",
        "#1\n1\tw\tw\tX\t-\t+\n",
        "#SDP 2042\n#1\n1\tw\tw\tX\t-\t-\n",
    ],
)
def test_malformed_input(text):
    with pytest.raises(SDPGraphException) as excinfo:
        list(read_graphs(lines(text)))
    assert "Line" in str(excinfo.value)


def test_corpus_loads_directory(tmp_path):
    (tmp_path / "a.sdp").write_text(SDP_2014, encoding="utf-8")
    (tmp_path / "b.sdp").write_text(SDP_2015, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    corpus = GraphCorpus()
    ids = corpus.load(str(tmp_path))
    assert ids == ["20001001", "20001002", "22000001"]
    assert len(corpus) == 3
    assert {g.graph["id"] for g in corpus} == set(ids)


def test_corpus_rejects_duplicates(tmp_path):
    path = tmp_path / "a.sdp"
    path.write_text(SDP_2014, encoding="utf-8")
    assert len(load_graphs(str(path))) == 2
    corpus = GraphCorpus()
    corpus.load(str(path))
    with pytest.raises(SDPGraphException):
        corpus.load(str(path))


def test_failed_load_adds_nothing(tmp_path):
    (tmp_path / "a.sdp").write_text(SDP_2015, encoding="utf-8")
    corpus = GraphCorpus()
    corpus.load(str(tmp_path / "a.sdp"))
    # 20001001 would be new, 22000001 is taken
    (tmp_path / "b.sdp").write_text(SDP_2014 + "\n" + SDP_2015, encoding="utf-8")
    with pytest.raises(SDPGraphException):
        corpus.load(str(tmp_path / "b.sdp"))
    assert list(corpus.graphs) == ["22000001"]


def test_duplicates_within_one_load(tmp_path):
    (tmp_path / "a.sdp").write_text(SDP_2014, encoding="utf-8")
    (tmp_path / "b.sdp").write_text(SDP_2014, encoding="utf-8")
    corpus = GraphCorpus()
    with pytest.raises(SDPGraphException):
        corpus.load(str(tmp_path))
    assert len(corpus) == 0
