import pytest

from wordgraph import WordGraph
from wordgraph.bridge import find_bridge_words, query_bridge_words

SAMPLE = "To explore strange new worlds,\nTo seek out new life and new civilizations and ..."


@pytest.fixture(scope="module")
def graph() -> WordGraph:
    return WordGraph.from_text(SAMPLE)


def test_one_bridge_word(graph):
    assert query_bridge_words(graph, "explore", "new") == \
        'The bridge words from "explore" to "new" is: "strange".'

def test_multiple_bridge_words(graph):
    out = query_bridge_words(graph, "new", "and")
    assert out in {
        'The bridge words from "new" to "and" are: "life" and "civilizations".',
        'The bridge words from "new" to "and" are: "civilizations" and "life".',
    }

def test_three_bridge_words_use_commas_then_and():
    g = WordGraph.from_text("s a t s b t s c t")
    res = find_bridge_words(g, "s", "t")
    assert sorted(res.bridges) == ["a", "b", "c"]
    out = query_bridge_words(g, "s", "t")
    assert out.startswith('The bridge words from "s" to "t" are: ')
    assert out.count(", ") == 1 and out.count(" and ") == 1 and out.endswith(".")

def test_no_bridge_words(graph):
    assert query_bridge_words(graph, "seek", "to") == 'No bridge words from "seek" to "to"!'

def test_case_insensitive(graph):
    assert query_bridge_words(graph, "Explore", "New") == query_bridge_words(graph, "explore", "new")

def test_word1_not_in_graph(graph):
    assert query_bridge_words(graph, "unknown", "life") == 'No "unknown" in the graph!'

def test_word2_not_in_graph(graph):
    assert query_bridge_words(graph, "seek", "unknown") == 'No "unknown" in the graph!'

def test_both_words_missing_are_named(graph):
    assert query_bridge_words(graph, "foo", "Bar") == 'No "foo" and "bar" in the graph!'

def test_empty_word_is_not_in_graph(graph):
    assert query_bridge_words(graph, "", "life") == 'No "" in the graph!'

def test_structured_result(graph):
    res = find_bridge_words(graph, "EXPLORE", "new")
    assert res.word1 == "explore" and res.word2 == "new"
    assert res.bridges == ("strange",)
    assert res.missing == ()
