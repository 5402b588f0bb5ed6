"""Minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from multiagent.games.game_state import GameState
from .result import SearchResult, SearchStats
from .roles import AgentRole

logger = logging.getLogger(__name__)

EvalFn = Callable[[GameState], Any]
RoleFn = Callable[[Any], AgentRole]


def check_depth(depth: Optional[int]) -> None:
    """``depth`` is a non-negative ply budget, or ``None`` to search until the game ends."""
    if depth is None:
        return
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise ValueError(f"Search depth must be an int or None, got {depth!r}")
    if depth < 0:
        raise ValueError(f"Search depth must be >= 0, got {depth}")


def leaf_result(state: GameState, eval_fn: EvalFn, stats: Optional[SearchStats]) -> SearchResult:
    if stats is not None:
        stats.evaluations += 1
    return SearchResult(None, eval_fn(state))


def minimax(
    state: GameState,
    depth: Optional[int],
    eval_fn: EvalFn,
    agent_role_fn: RoleFn,
    *,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """
    Best action for the agent to move in ``state`` and its minimax utility.

    Args:
        state: position to search from.
        depth: plies to explore before falling back to ``eval_fn``;
            ``None`` searches until every branch has finished.
        eval_fn: utility of finished (or cut off) states. Must return values
            with a total ordering.
        agent_role_fn: maps the agent to move to ``AgentRole.MAXIMIZER`` or
            ``AgentRole.MINIMIZER``.
        stats: optional counters updated in place.

    Returns:
        ``SearchResult(action, utility)``; ``action`` is ``None`` when
        ``state`` is finished, the depth is exhausted or nothing is legal.
    """
    check_depth(depth)
    result = _minimax(state, depth, eval_fn, agent_role_fn, None, None, stats)
    logger.debug(
        "minimax depth=%s action=%s utility=%s stats=%s",
        depth,
        result.action,
        result.utility,
        stats,
    )
    return result


def _minimax(
    state: GameState,
    depth: Optional[int],
    eval_fn: EvalFn,
    agent_role_fn: RoleFn,
    alpha: Any,
    beta: Any,
    stats: Optional[SearchStats],
) -> SearchResult:
    # alpha/beta of None means unbounded on that side
    if stats is not None:
        stats.nodes += 1
    if state.is_finished() or depth == 0:
        return leaf_result(state, eval_fn, stats)

    role = agent_role_fn(state.next_agent())
    if role is AgentRole.MAXIMIZER:
        maximizing = True
    elif role is AgentRole.MINIMIZER:
        maximizing = False
    else:
        raise ValueError(f"Minimax agents must be maximizers or minimizers, got {role!r}")

    child_depth = None if depth is None else depth - 1
    best_action = None
    best_utility = None
    found = False

    for action, child in state.legal_actions():
        _, utility = _minimax(child, child_depth, eval_fn, agent_role_fn, alpha, beta, stats)

        if maximizing:
            if found and not utility > best_utility:
                continue
            best_action, best_utility, found = action, utility, True
            if beta is not None and best_utility > beta:
                if stats is not None:
                    stats.cutoffs += 1
                return SearchResult(best_action, best_utility)
            if alpha is None or best_utility > alpha:
                alpha = best_utility
        else:
            if found and not utility < best_utility:
                continue
            best_action, best_utility, found = action, utility, True
            if alpha is not None and best_utility < alpha:
                if stats is not None:
                    stats.cutoffs += 1
                return SearchResult(best_action, best_utility)
            if beta is None or best_utility < beta:
                beta = best_utility

    if not found:
        return leaf_result(state, eval_fn, stats)
    return SearchResult(best_action, best_utility)
