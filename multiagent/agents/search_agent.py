"""Agent that picks moves by running a registered search algorithm."""

from __future__ import annotations

from typing import Any, Callable, Optional

from multiagent.games.game_state import GameState
from multiagent.registry import get_search
from multiagent.search import AgentRole, SearchStats
from multiagent.utils.metrics import MetricsLogger


class SearchAgent:
    """
    Plays one seat of a game with minimax or expectimax.

    The agent itself is always the maximizer. Every other agent gets
    ``opponent_role``, unless a full ``classifier`` is given; that classifier
    must still make the agent a maximizer.
    """

    def __init__(
        self,
        agent: Any,
        eval_fn: Callable[[GameState], Any],
        algorithm: str = "minimax",
        depth: Optional[int] = None,
        opponent_role: AgentRole = AgentRole.MINIMIZER,
        classifier: Optional[Callable[[Any], AgentRole]] = None,
        metrics: Optional[MetricsLogger] = None,
    ) -> None:
        if algorithm == "minimax" and opponent_role is AgentRole.RANDOM:
            raise ValueError("minimax cannot model a random opponent, use expectimax")
        self.agent = agent
        self.eval_fn = eval_fn
        self.algorithm = algorithm
        self.search = get_search(algorithm)
        self.depth = depth
        self.opponent_role = opponent_role
        self.classifier = classifier or self._classify
        if self.classifier(agent) is not AgentRole.MAXIMIZER:
            # eval_fn scores states for this agent, so it must be the one maximizing
            raise ValueError(f"Agent {agent!r} must be classified as a maximizer")
        self.metrics = metrics
        self.last_stats: Optional[SearchStats] = None

    def _classify(self, agent: Any) -> AgentRole:
        return AgentRole.MAXIMIZER if agent == self.agent else self.opponent_role

    def select_action(self, state: GameState) -> Any:
        if state.is_finished():
            raise ValueError("Cannot select an action in a finished game")

        stats = SearchStats()
        action, utility = self.search(
            state, self.depth, self.eval_fn, self.classifier, stats=stats
        )
        self.last_stats = stats

        if action is None:
            # depth=0 recommends nothing; fall back to the first legal move
            action = next((a for a, _ in state.legal_actions()), None)
            if action is None:
                raise ValueError("No legal actions available")

        if self.metrics is not None:
            self.metrics.log_dict(
                {
                    "agent": getattr(self.agent, "name", str(self.agent)),
                    "algorithm": self.algorithm,
                    "action": getattr(action, "name", str(action)),
                    "utility": utility,
                    **stats.as_dict(),
                }
            )
            self.metrics.increment_step()
        return action
