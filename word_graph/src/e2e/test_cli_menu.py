from pathlib import Path
from typing import Iterator
import pytest

import frontend.__main__ as cli

def _seed(tmp: Path, text: str = "To explore strange new worlds,\nTo seek out new life and new civilizations and ...\n") -> str:
    p = tmp / "input.txt"
    p.write_text(text, encoding="utf-8")
    return str(p)

def _script(monkeypatch, answers) -> None:
    it: Iterator[str] = iter(answers)
    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)

@pytest.mark.e2e
def test_menu_round_trip(tmp_path: Path, monkeypatch, capsys):
    _script(monkeypatch, ["1", "2", "explore", "new", "4", "seek", "life", "5", "new", "5", "klingon", "9", "0"])
    rc = cli.main(["--file", _seed(tmp_path), "--delay", "0", "--output", ""])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Directed Graph Representation:" in out
    assert 'The bridge words from "explore" to "new" is: "strange".' in out
    assert "seek -> out -> new -> life (length: 3)" in out
    assert 'PageRank of "new": 0.' in out
    assert 'No "klingon" in the graph!' in out
    assert "Invalid choice. Please try again." in out
    assert "Exiting program." in out

@pytest.mark.e2e
def test_generate_new_text(tmp_path: Path, monkeypatch, capsys):
    _script(monkeypatch, ["3", "explore new", "0"])
    cli.main(["--file", _seed(tmp_path), "--output", ""])
    assert "Generated Text: explore strange new" in capsys.readouterr().out

@pytest.mark.e2e
def test_prompts_for_path(tmp_path: Path, monkeypatch, capsys):
    _script(monkeypatch, [_seed(tmp_path), "0"])
    assert cli.main([]) == 0
    assert "Exiting program." in capsys.readouterr().out

@pytest.mark.e2e
def test_random_walk_is_printed_and_saved(tmp_path: Path, monkeypatch, capsys):
    out_file = tmp_path / "walk.txt"
    _script(monkeypatch, ["6", "0"])
    cli.main(["--file", _seed(tmp_path, "a a"), "--delay", "0", "--output", str(out_file)])
    out = capsys.readouterr().out
    assert "a a" in out
    assert "Random walk finished or stopped." in out
    assert out_file.read_text(encoding="utf-8") == "a a"

@pytest.mark.e2e
def test_ctrl_c_stops_walk_and_saves_prefix(tmp_path: Path, monkeypatch, capsys):
    def interrupted(words, emit, **kwargs):
        emit(next(iter(words)))
        raise KeyboardInterrupt
    monkeypatch.setattr(cli, "play_walk", interrupted)
    out_file = tmp_path / "walk.txt"
    _script(monkeypatch, ["6", "0"])
    cli.main(["--file", _seed(tmp_path, "a a"), "--output", str(out_file)])
    assert "Stopping random walk..." in capsys.readouterr().out
    assert out_file.read_text(encoding="utf-8") == "a"

@pytest.mark.e2e
def test_build_failure_exits_1(tmp_path: Path, capsys):
    assert cli.main(["--file", str(tmp_path / "missing.txt")]) == 1
    assert "Failed to build graph. Exiting." in capsys.readouterr().out

@pytest.mark.e2e
def test_eof_ends_session(tmp_path: Path, monkeypatch, capsys):
    _script(monkeypatch, ["2", "explore"])
    assert cli.main(["--file", _seed(tmp_path)]) == 0
