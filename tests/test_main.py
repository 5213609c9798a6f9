from __future__ import annotations

import pytest

from arcade_connect4 import main as main_module


@pytest.mark.parametrize("raw, expected", [("y", True), (" YES ", True), ("n", False), ("", False)])
def test_wants_rematch(raw, expected):
    assert main_module.wants_rematch(raw) is expected


def test_games_repeat_until_player_declines(monkeypatch, capsys):
    answers = iter(["1", "y", "yes", "n"])
    games = []

    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    monkeypatch.setattr(main_module.time, "sleep", lambda s: None)
    monkeypatch.setattr(main_module, "run_game", lambda agent: games.append(agent.name))

    main_module.main()

    assert games == ["Arcade AI"] * 3
    assert "Thanks for playing!" in capsys.readouterr().out
