import json
import sys

import pytest
from wordscramble.datasets import ResourceMissing, StaticWordSource
from wordscramble.engine import GameController, WordSetOracle

from apps.cli import play, replay
from apps.cli.play import render, run_loop
from script.build_start_words import select_start_words


def _scripted(lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


def _controller(out):
    gc = GameController(source=StaticWordSource(["tactic"]),
                        oracle=WordSetOracle(["cat", "act"]), seed=0)
    gc.subscribe(lambda s, o: render(s, o, write=out.append))
    gc.start()
    return gc


def test_run_loop_plays_until_eof():
    out = []
    gc = _controller(out)
    found = run_loop(gc, read=_scripted(["cat", "cat", "  ", "act"]))
    assert found == 2
    assert gc.session.guesses == ["act", "cat"]
    assert any("Word used already" in line for line in out)


def test_run_loop_new_game_and_quit():
    out = []
    gc = _controller(out)
    found = run_loop(gc, read=_scripted(["cat", ":new", ":quit", "act"]))
    assert found == 0
    assert sum("== tactic ==" in line for line in out) == 2


def test_select_start_words():
    words = ["Absolute", "absolute", "cat", "café-bar", "umbrella", "keyboard"]
    assert select_start_words(words) == ["absolute", "umbrella", "keyboard"]
    assert select_start_words(words, limit=1) == ["absolute"]
    assert select_start_words(words, length=3) == ["cat"]


class _FlakySource:
    """Loads once, then the word list disappears."""

    def __init__(self):
        self.calls = 0

    def load_words(self):
        self.calls += 1
        if self.calls > 1:
            raise ResourceMissing("word list not found: start.txt")
        return ["tactic"]


def test_new_game_with_unreadable_word_list_exits(capsys):
    gc = GameController(source=_FlakySource(), oracle=WordSetOracle(["cat"]))
    gc.start()
    with pytest.raises(SystemExit) as exc:
        run_loop(gc, read=_scripted(["cat", ":new"]))
    assert exc.value.code == 2
    assert "fatal: word list not found" in capsys.readouterr().err


def _words_file(tmp_path):
    p = tmp_path / "start.txt"
    p.write_text("tactic\n", encoding="utf-8")
    return str(p)


def test_play_missing_word_list_exits(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["play", "--words", str(tmp_path / "nope.txt"),
                                      "--oracle", "wordset"])
    with pytest.raises(SystemExit) as exc:
        play.main()
    assert exc.value.code == 2
    assert "fatal:" in capsys.readouterr().err


def test_play_missing_dictionary_exits(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["play", "--words", _words_file(tmp_path),
                                      "--oracle", "wordlist",
                                      "--dictionary", str(tmp_path / "nope.txt")])
    with pytest.raises(SystemExit) as exc:
        play.main()
    assert exc.value.code == 2
    assert "fatal: word list not found" in capsys.readouterr().err


def test_replay_missing_dictionary_exits(tmp_path, monkeypatch, capsys):
    cases = tmp_path / "cases.json"
    cases.write_text(json.dumps([{"root_word": "tactic", "submissions": ["cat"]}]),
                     encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["replay", "--cases", str(cases),
                                      "--outdir", str(tmp_path / "out"),
                                      "--oracle", "wordlist",
                                      "--dictionary", str(tmp_path / "nope.txt")])
    with pytest.raises(SystemExit) as exc:
        replay.main()
    assert exc.value.code == 2
    assert "fatal:" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()
