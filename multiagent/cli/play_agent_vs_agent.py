"""CLI for playing search agent vs search agent."""

from typing import Dict, Literal, Optional

import numpy as np
import tyro

from multiagent.agents import SearchAgent
from multiagent.games.tictactoe import Player, TicTacToeState, winner_evaluator
from multiagent.search import AgentRole


def play_random_opening(
    state: TicTacToeState, half_moves: int, rng: np.random.Generator
) -> TicTacToeState:
    """Play up to ``half_moves`` uniformly random legal moves."""
    for _ in range(half_moves):
        if state.is_finished():
            break
        children = [child for _, child in state.legal_actions()]
        state = children[int(rng.integers(len(children)))]
    return state


def play_match(
    x_agent: SearchAgent,
    o_agent: SearchAgent,
    num_games: int = 1,
    random_half_moves: int = 0,
    seed: int = 42,
    render: bool = False,
) -> Dict[str, int]:
    """Play ``num_games`` games and count results by winner name (``draw`` for ties)."""
    rng = np.random.default_rng(seed)
    results = {"X": 0, "O": 0, "draw": 0}
    agents = {Player.X: x_agent, Player.O: o_agent}

    for game in range(num_games):
        state = play_random_opening(TicTacToeState.initial(), random_half_moves, rng)
        while not state.is_finished():
            action = agents[state.next_agent()].select_action(state)
            state = state.successor(action)
            if render:
                print(f"{state}\n")

        winner = state.winner()
        results[winner.name if winner is not None else "draw"] += 1
        if render:
            outcome = f"{winner.name} wins" if winner is not None else "draw"
            print(f"Game {game + 1}/{num_games}: {outcome}")
            print("-" * 50)
    return results


def play_agent_vs_agent(
    x_algorithm: Literal["minimax", "expectimax"] = "minimax",
    o_algorithm: Literal["minimax", "expectimax"] = "expectimax",
    x_opponent_role: Literal["minimizer", "random"] = "minimizer",
    o_opponent_role: Literal["minimizer", "random"] = "random",
    depth: Optional[int] = None,
    num_games: int = 10,
    random_half_moves: int = 2,
    seed: int = 42,
    render: bool = False,
):
    """
    Play search agents against each other.

    Args:
        x_algorithm: Search algorithm for X
        o_algorithm: Search algorithm for O
        x_opponent_role: How X models O
        o_opponent_role: How O models X
        depth: Search depth in plies for both agents (None: to the end)
        num_games: Number of games to play
        random_half_moves: Random moves played before the agents take over
        seed: Random seed for the openings
        render: Whether to print every board
    """
    x_agent = SearchAgent(
        agent=Player.X,
        eval_fn=winner_evaluator(Player.X),
        algorithm=x_algorithm,
        depth=depth,
        opponent_role=AgentRole.from_name(x_opponent_role),
    )
    o_agent = SearchAgent(
        agent=Player.O,
        eval_fn=winner_evaluator(Player.O),
        algorithm=o_algorithm,
        depth=depth,
        opponent_role=AgentRole.from_name(o_opponent_role),
    )

    print("=" * 50)
    print("Tic-Tac-Toe - Agent vs Agent")
    print("=" * 50)
    print(f"X: {x_algorithm} (models O as {x_opponent_role})")
    print(f"O: {o_algorithm} (models X as {o_opponent_role})")
    print(f"Games: {num_games}")
    print("=" * 50)
    print()

    results = play_match(
        x_agent,
        o_agent,
        num_games=num_games,
        random_half_moves=random_half_moves,
        seed=seed,
        render=render,
    )

    print("=" * 50)
    print("Results Summary")
    print("=" * 50)
    print(f"X wins: {results['X']} ({results['X']/num_games*100:.1f}%)")
    print(f"O wins: {results['O']} ({results['O']/num_games*100:.1f}%)")
    print(f"Draws: {results['draw']} ({results['draw']/num_games*100:.1f}%)")
    print("=" * 50)


if __name__ == "__main__":
    tyro.cli(play_agent_vs_agent)
