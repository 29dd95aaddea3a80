import random
import pytest

from wordgraph import WordGraph
from wordgraph.walk import iter_random_walk, random_walk


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


def test_empty_graph_walks_nowhere():
    assert random_walk(WordGraph(), ScriptedRandom()) == []

def test_self_loop_is_taken_once():
    g = WordGraph.from_text("a a")
    assert random_walk(g, ScriptedRandom()) == ["a", "a"]
    assert random_walk(g, random.Random(3)) == ["a", "a"]

def test_stops_at_dead_end():
    g = WordGraph.from_text("a b")
    assert random_walk(g, ScriptedRandom(0)) == ["a", "b"]

def test_start_is_drawn_over_all_vertices():
    g = WordGraph.from_text("b a")
    assert random_walk(g, ScriptedRandom(1)) == ["a"]   # "a" is a sink
    assert random_walk(g, ScriptedRandom(0)) == ["b", "a"]

def test_candidates_are_weighted_by_edge_weight():
    # a -> b (2), a -> c (1), b -> a (2); c is a sink
    g = WordGraph.from_text("a b a b a c")
    rng = ScriptedRandom(0, 2)
    assert random_walk(g, rng) == ["a", "c"]
    assert rng.calls == [3, 3]

def test_repeated_edge_ends_walk_without_advancing():
    g = WordGraph.from_text("a b a b a c")
    # a -(1)-> b -(0)-> a -(0)-> b : a->b already used, so the last b is not appended
    assert random_walk(g, ScriptedRandom(0, 1, 0, 0)) == ["a", "b", "a"]

def test_walk_is_lazy():
    g = WordGraph.from_text("a b c d e")
    rng = ScriptedRandom(0)
    it = iter_random_walk(g, rng)
    assert next(it) == "a"
    assert rng.calls == [5]

@pytest.mark.parametrize("seed", range(25))
def test_walk_always_terminates_without_repeating_edges(seed):
    g = WordGraph.from_text(
        "To explore strange new worlds, To seek out new life and new civilizations and ..."
    )
    walk = random_walk(g, random.Random(seed))
    assert walk
    steps = list(zip(walk, walk[1:]))
    assert len(steps) == len(set(steps))
    for a, b in steps:
        assert g.weight(a, b) >= 1
