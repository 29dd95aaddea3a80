import random
import pytest

from wordgraph import WordGraph
from wordgraph.bridge import generate_new_text

SAMPLE = "To explore strange new worlds,\nTo seek out new life and new civilizations and ..."


class ScriptedRandom:
    """randrange() returns the scripted values in order, then 0."""
    def __init__(self, *values: int) -> None:
        self._values = list(values)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        v = self._values.pop(0) if self._values else 0
        assert 0 <= v < stop
        return v


@pytest.fixture(scope="module")
def graph() -> WordGraph:
    return WordGraph.from_text(SAMPLE)


def test_inserts_bridge_words_with_scripted_choice(graph):
    text = "Seek to explore new and exciting synergies"
    rng = ScriptedRandom(0, 1)
    out = generate_new_text(graph, text, rng)
    # new -> and has two bridges (life, civilizations); index 1 picks the second one
    assert out == "Seek to explore strange new civilizations and exciting synergies"
    assert rng.calls == [1, 2]

def test_every_choice_is_a_real_bridge(graph):
    out = generate_new_text(graph, "new and", random.Random(7))
    assert out in {"new life and", "new civilizations and"}

def test_original_casing_is_kept(graph):
    assert generate_new_text(graph, "EXPLORE New", ScriptedRandom()) == "EXPLORE strange New"

def test_punctuation_is_dropped(graph):
    assert generate_new_text(graph, "explore, new!", ScriptedRandom()) == "explore strange new"

def test_unknown_words_just_pass_through(graph):
    rng = ScriptedRandom()
    assert generate_new_text(graph, "hello explore world", rng) == "hello explore world"
    assert rng.calls == []

@pytest.mark.parametrize("text", ["", "explore", "  new!!  ", "42"])
def test_fewer_than_two_words_returns_input_unchanged(graph, text):
    assert generate_new_text(graph, text, ScriptedRandom()) == text
