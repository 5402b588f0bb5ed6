"""Tests for the game-state abstraction and action enumeration."""

import sys
from enum import Enum
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from multiagent.games import GameState, enumerate_actions
from game_trees import Branch, TreeState, leaf, node


class Color(Enum):
    RED = "r"
    GREEN = "g"
    BLUE = "b"


def test_enumerate_enum_in_declaration_order():
    assert list(enumerate_actions(Color)) == [Color.RED, Color.GREEN, Color.BLUE]


def test_enumerate_bool_and_iterables():
    assert list(enumerate_actions(bool)) == [False, True]
    assert list(enumerate_actions(range(3))) == [0, 1, 2]
    assert list(enumerate_actions(("up", "down"))) == ["up", "down"]


def test_enumerate_rejects_open_domains():
    with pytest.raises(TypeError):
        enumerate_actions(int)
    with pytest.raises(TypeError):
        enumerate_actions("abc")
    with pytest.raises(TypeError):
        enumerate_actions(42)


def test_finished_state_has_no_legal_actions():
    state = TreeState(leaf(3))
    assert state.is_finished()
    assert state.next_agent() is None
    assert not any(state.is_legal(action) for action in Branch)
    assert list(state.legal_actions()) == []


def test_legality_follows_successor():
    state = TreeState(node("max", leaf(1), leaf(2)))
    assert not state.is_finished()
    assert state.is_legal(Branch.A)
    assert state.is_legal(Branch.B)
    assert not state.is_legal(Branch.C)
    assert state.successor(Branch.D) is None
    assert state.successor("not an action") is None


def test_legal_actions_keep_enumeration_order():
    state = TreeState(node("min", leaf(1), leaf(2), leaf(3)))
    pairs = list(state.legal_actions())
    assert [action for action, _ in pairs] == [Branch.A, Branch.B, Branch.C]
    assert [child.node.value for _, child in pairs] == [1.0, 2.0, 3.0]


def test_successor_does_not_mutate_state():
    tree = node("max", leaf(1), leaf(2))
    state = TreeState(tree)
    state.successor(Branch.B)
    assert state == TreeState(tree)


def test_candidate_actions_require_action_type():
    class Untyped(GameState):
        def next_agent(self):
            return "someone"

        def successor(self, action):
            return None

    with pytest.raises(TypeError):
        list(Untyped().legal_actions())


def test_candidate_actions_can_be_narrowed():
    class Countdown(GameState):
        """Take 1 or 2 from a pile; only the override's actions are tried."""

        action_type = range(1000)

        def __init__(self, pile):
            self.pile = pile

        def next_agent(self):
            return "player" if self.pile else None

        def successor(self, action):
            if not 1 <= action <= min(2, self.pile):
                return None
            return Countdown(self.pile - action)

        def candidate_actions(self):
            return iter((1, 2))

    actions = [action for action, _ in Countdown(5).legal_actions()]
    assert actions == [1, 2]
    assert [action for action, _ in Countdown(1).legal_actions()] == [1]
