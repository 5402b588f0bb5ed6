"""CLI for playing tic-tac-toe against a search agent."""

from typing import Callable, Literal, Optional, Tuple

import tyro

from multiagent.agents import SearchAgent
from multiagent.config import load_config
from multiagent.games.tictactoe import Player, Position, TicTacToeState, winner_evaluator
from multiagent.registry import make_game
from multiagent.search import AgentRole
from multiagent.utils import MetricsLogger


def parse_position(text: str) -> Optional[Position]:
    """Cell index ``0``-``8`` (row-major) to a ``Position``, ``None`` if unparsable."""
    text = text.strip()
    if not text.isdigit():
        return None
    index = int(text)
    if index >= len(Position):
        return None
    return Position(index)


def read_position(
    state: TicTacToeState,
    input_fn: Callable[[str], str] = input,
    prompt: str = "Which position would you like to play? [0-8] ",
) -> Position:
    """Prompt until the human enters a free cell."""
    while True:
        position = parse_position(input_fn(prompt))
        if position is None:
            print("I didn't catch that.")
            continue
        if state.is_legal(position):
            return position
        print("That square has already been played.")


def announce_result(state: TicTacToeState, human: Player) -> str:
    winner = state.winner()
    if winner is None:
        return "It's a draw!"
    return "You win!" if winner == human else "Agent wins!"


def build_session(
    human: Player,
    algorithm: str = "minimax",
    depth: Optional[int] = None,
    opponent_role: str = "minimizer",
    config: Optional[str] = None,
    metrics: Optional[MetricsLogger] = None,
) -> Tuple[TicTacToeState, SearchAgent]:
    """
    Starting state and the agent playing against ``human``.

    A YAML ``config`` overrides the game, algorithm, depth and roles. Its
    roles must make the agent's seat the maximizer.
    """
    ai = human.other()
    game_id, game_params = "tictactoe", {}
    classifier = None
    if config is not None:
        app_config = load_config(config)
        game_id, game_params = app_config.game.id, app_config.game.params
        algorithm = app_config.search.algorithm
        depth = app_config.search.depth
        if app_config.search.roles:
            classifier = app_config.search.classifier()

    state = make_game(game_id, **game_params)
    if not isinstance(state, TicTacToeState):
        raise ValueError(f"Game '{game_id}' is not tic-tac-toe")

    agent = SearchAgent(
        agent=ai,
        eval_fn=winner_evaluator(ai),
        algorithm=algorithm,
        depth=depth,
        opponent_role=AgentRole.from_name(opponent_role),
        classifier=classifier,
        metrics=metrics,
    )
    return state, agent


def play_tictactoe(
    human_player: Literal["X", "O"] = "X",
    algorithm: Literal["minimax", "expectimax"] = "minimax",
    depth: Optional[int] = None,
    opponent_role: Literal["minimizer", "random"] = "minimizer",
    config: Optional[str] = None,
    log_dir: Optional[str] = None,
):
    """
    Play tic-tac-toe against a search agent.

    Args:
        human_player: Which side the human plays (X moves first)
        algorithm: Search algorithm used by the agent
        depth: Search depth in plies (None searches to the end of the game)
        opponent_role: How the agent models the human; 'random' needs expectimax
        config: Optional YAML config overriding game, algorithm, depth and roles
        log_dir: Directory for a CSV log of the agent's searches
    """
    human = Player[human_player]
    metrics = MetricsLogger(log_dir=log_dir) if log_dir else None
    try:
        state, agent = build_session(
            human,
            algorithm=algorithm,
            depth=depth,
            opponent_role=opponent_role,
            config=config,
            metrics=metrics,
        )

        print("=" * 50)
        print("Tic-Tac-Toe - Human vs Agent")
        print("=" * 50)
        print(f"Agent: {agent.algorithm} (depth={agent.depth})")
        print(f"Human plays: {human.name}")
        print("=" * 50)
        print()

        while not state.is_finished():
            print(f"Current board:\n{state}\n")
            if state.next_agent() == human:
                action = read_position(state)
            else:
                action = agent.select_action(state)
                print(f"Agent played: {action.value} ({action.name})")
            state = state.successor(action)
    finally:
        if metrics is not None:
            metrics.close()

    print(f"Final board:\n{state}\n")
    print(announce_result(state, human))


if __name__ == "__main__":
    tyro.cli(play_tictactoe)
