"""Tests for command-line parsing, settings loading, and the main entry point."""

import pytest

from Jump61_AI import main as main_mod
from Jump61_AI.AI import AI
from Jump61_AI.Player import HumanPlayer
from Jump61_AI.Square import Side
from Jump61_AI.utils import cli


def test_defaults_leave_settings_in_charge():
    args = cli.parse_args([])
    assert args.board_size is None
    assert args.depth is None
    assert args.mode is None
    assert args.settings == "config/settings.yaml"
    assert not args.dump and not args.quiet


def test_rejects_small_board_and_zero_depth():
    with pytest.raises(SystemExit):
        cli.parse_args(["--board-size", "1"])
    with pytest.raises(SystemExit):
        cli.parse_args(["--depth", "0"])
    with pytest.raises(SystemExit):
        cli.parse_args(["--mode", "ai-vs-robot"])


def test_bundled_settings_load():
    settings = main_mod.load_settings("config/settings.yaml")
    assert settings["board_size"] == 6
    assert settings["search_depth"] == 2
    assert settings["mode"] == "ai-vs-ai"


def test_make_players_by_mode():
    red, blue = main_mod.make_players("human-vs-ai", depth=3, seed=5)
    assert isinstance(red, HumanPlayer) and red.side is Side.RED
    assert isinstance(blue, AI) and blue.side is Side.BLUE
    assert blue.depth == 3
    with pytest.raises(ValueError):
        main_mod.make_players("ai-vs-cat", depth=2, seed=0)


def test_main_runs_limited_ai_game(tmp_path, capsys):
    settings = tmp_path / "settings.yaml"
    settings.write_text("board_size: 4\nsearch_depth: 1\nmode: ai-vs-ai\nmove_limit: 3\n", encoding="utf-8")
    result = main_mod.main(["--settings", str(settings), "--quiet", "--dump"])
    out = capsys.readouterr().out
    assert result is None
    assert out.count("===\n") == 6
    assert out.rstrip().endswith("No winner")


def test_human_player_parses_typed_move(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: " 3  4 ")
    assert HumanPlayer(Side.RED).get_move(board=None) == "3 4"
    monkeypatch.setattr("builtins.input", lambda prompt: "three four")
    with pytest.raises(ValueError):
        HumanPlayer(Side.RED).get_move(board=None)
