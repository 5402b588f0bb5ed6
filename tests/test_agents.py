"""Tests for search agents."""

import csv
import sys
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from multiagent.agents import SearchAgent
from multiagent.cli.play_agent_vs_agent import play_match, play_random_opening
from multiagent.games.tictactoe import Player, Position, TicTacToeState, winner_evaluator
from multiagent.search import AgentRole
from multiagent.utils import MetricsLogger


def test_minimax_agent_takes_win():
    agent = SearchAgent(Player.X, winner_evaluator(Player.X))
    state = TicTacToeState.from_string("XX. OO. ...")
    assert agent.select_action(state) == Position.TOP_RIGHT
    assert agent.last_stats.nodes > 0


def test_expectimax_agent_against_random_opponent():
    agent = SearchAgent(
        Player.O,
        winner_evaluator(Player.O),
        algorithm="expectimax",
        opponent_role=AgentRole.RANDOM,
    )
    state = TicTacToeState.from_string("XX. .O. ...")
    action = agent.select_action(state)
    assert state.is_legal(action)


def test_depth_zero_falls_back_to_first_legal_move():
    agent = SearchAgent(Player.O, winner_evaluator(Player.O), depth=0)
    state = TicTacToeState.from_string("X.. ... ...")
    assert agent.select_action(state) == Position.TOP_CENTER


def test_agent_rejects_bad_setups():
    with pytest.raises(ValueError):
        SearchAgent(Player.X, winner_evaluator(Player.X), opponent_role=AgentRole.RANDOM)
    with pytest.raises(KeyError):
        SearchAgent(Player.X, winner_evaluator(Player.X), algorithm="mcts")

    agent = SearchAgent(Player.X, winner_evaluator(Player.X))
    with pytest.raises(ValueError):
        agent.select_action(TicTacToeState.from_string("XXX OO. ..."))


def test_agent_logs_metrics(tmp_path):
    with MetricsLogger(log_dir=str(tmp_path)) as metrics:
        agent = SearchAgent(Player.X, winner_evaluator(Player.X), metrics=metrics)
        agent.select_action(TicTacToeState.from_string("XX. OO. ..."))
        csv_path = metrics.csv_path

    with open(csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    assert rows[0]["action"] == "TOP_RIGHT"
    assert rows[0]["agent"] == "X"
    assert float(rows[0]["utility"]) == 1.0
    assert int(rows[0]["nodes"]) > 0


def test_optimal_agents_always_draw():
    x_agent = SearchAgent(Player.X, winner_evaluator(Player.X))
    o_agent = SearchAgent(Player.O, winner_evaluator(Player.O))
    results = play_match(x_agent, o_agent, num_games=1, random_half_moves=0)
    assert results == {"X": 0, "O": 0, "draw": 1}


def test_random_opening():
    rng = np.random.default_rng(0)
    state = play_random_opening(TicTacToeState.initial(), 3, rng)
    assert int(np.sum(state.board != 0)) == 3
    assert state.next_agent() == Player.O


def test_classifier_must_make_agent_maximizer():
    roles = {Player.X: AgentRole.RANDOM, Player.O: AgentRole.MAXIMIZER}
    with pytest.raises(ValueError):
        SearchAgent(
            Player.X,
            winner_evaluator(Player.X),
            algorithm="expectimax",
            classifier=roles.__getitem__,
        )

    agent = SearchAgent(
        Player.O,
        winner_evaluator(Player.O),
        algorithm="expectimax",
        classifier=roles.__getitem__,
    )
    assert agent.select_action(TicTacToeState.from_string("OO. XX. X..")) == Position.TOP_RIGHT
