from pathlib import Path
import pytest

from wordgraph import InsufficientInputError, WordGraph
from wordgraph.models import Edge

SAMPLE = "To explore strange new worlds,\nTo seek out new life and new civilizations and ..."


def test_weight_counts_occurrences():
    g = WordGraph.from_text("a b a b a b")
    assert g.weight("a", "b") == 3
    assert g.weight("b", "a") == 2
    assert g.weight_map() == {"a": {"b": 3}, "b": {"a": 2}}
    assert g.edge_count == 2

def test_repeated_pairs_never_create_parallel_edges():
    g = WordGraph.from_text("x y x y x y")
    assert list(g.edges()) == [Edge("x", "y", 3), Edge("y", "x", 2)]

@pytest.mark.parametrize("text", ["", "hello", "123 !!! ...", "   \n\t "])
def test_fewer_than_two_tokens_is_rejected(text):
    with pytest.raises(InsufficientInputError):
        WordGraph.from_text(text)

def test_trailing_token_is_a_sink():
    g = WordGraph.from_text("a b c")
    assert "c" in g
    assert g.successors("c") == {}
    assert g.out_weight(g.index_of("c")) == 0

def test_every_word_is_on_some_edge():
    g = WordGraph.from_text(SAMPLE)
    touched = set()
    for e in g.edges():
        touched.update((e.source, e.target))
    assert touched == set(g.words)

def test_words_are_normalized_and_ordered_by_first_appearance():
    g = WordGraph.from_text(SAMPLE)
    assert g.words == ("to", "explore", "strange", "new", "worlds",
                       "seek", "out", "life", "and", "civilizations")
    assert "To" not in g and "to" in g

def test_successors_keep_insertion_order():
    g = WordGraph.from_text(SAMPLE)
    assert list(g.successors("new")) == ["worlds", "life", "civilizations"]
    assert g.successors("unknown") == {}
    assert g.weight("unknown", "new") == 0

def test_construction_is_deterministic():
    a = WordGraph.from_text(SAMPLE)
    b = WordGraph.from_text(SAMPLE)
    assert a.weight_map() == b.weight_map()
    assert a.words == b.words

def test_empty_graph_is_valid():
    g = WordGraph()
    assert len(g) == 0 and g.is_empty()
    assert list(g.edges()) == []

def test_from_file_joins_lines(tmp_path: Path):
    p = tmp_path / "story.txt"
    p.write_text("one two\nthree\n", encoding="utf-8")
    g = WordGraph.from_file(p)
    assert g.weight("two", "three") == 1
    assert g.words == ("one", "two", "three")

def test_from_file_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        WordGraph.from_file(tmp_path / "nope.txt")
