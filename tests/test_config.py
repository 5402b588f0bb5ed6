"""Tests for configuration schemas."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from multiagent.config import AppConfig, SearchConfig, load_config
from multiagent.games import Player
from multiagent.search import AgentRole


def test_app_config_parsing():
    data = {
        "game": {"id": "tictactoe"},
        "search": {
            "algorithm": "expectimax",
            "depth": 4,
            "roles": {"X": "maximizer", "O": "random"},
        },
    }

    cfg = AppConfig.from_dict(data)
    assert cfg.game.id == "tictactoe"
    assert cfg.game.params == {}
    assert cfg.search.algorithm == "expectimax"
    assert cfg.search.depth == 4

    classify = cfg.search.classifier()
    assert classify(Player.X) is AgentRole.MAXIMIZER
    assert classify(Player.O) is AgentRole.RANDOM


def test_defaults():
    cfg = AppConfig.from_dict({})
    assert cfg.game.id == "tictactoe"
    assert cfg.search.algorithm == "minimax"
    assert cfg.search.depth is None


def test_role_aliases():
    classify = SearchConfig(roles={"X": "max", "O": "min"}).classifier()
    assert classify(Player.X) is AgentRole.MAXIMIZER
    assert classify(Player.O) is AgentRole.MINIMIZER
    assert classify("X") is AgentRole.MAXIMIZER


def test_classifier_rejects_unconfigured_agent():
    classify = SearchConfig(roles={"X": "max"}).classifier()
    with pytest.raises(ValueError):
        classify(Player.O)


@pytest.mark.parametrize(
    "search",
    [
        {"algorithm": "mcts"},
        {"depth": -1},
        {"roles": {"X": "sometimes"}},
        {"algorithm": "minimax", "roles": {"X": "max", "O": "random"}},
    ],
)
def test_invalid_search_sections(search):
    with pytest.raises(ValueError):
        AppConfig.from_dict({"search": search})


def test_load_config(tmp_path):
    path = tmp_path / "search.yaml"
    path.write_text(
        "search:\n"
        "  algorithm: minimax\n"
        "  depth: 9\n"
        "  roles:\n"
        "    X: maximizer\n"
        "    O: minimizer\n"
    )
    cfg = load_config(path)
    assert cfg.search.depth == 9
    assert cfg.search.roles == {"X": "maximizer", "O": "minimizer"}


def test_load_config_requires_mapping(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_unknown_game_rejected():
    with pytest.raises(ValueError):
        AppConfig.from_dict({"game": {"id": "chess", "params": {"size": 8}}})
