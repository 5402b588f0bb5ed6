"""Expectimax search: maximizers, minimizers and uniform chance nodes."""

from __future__ import annotations

import logging
from typing import Any, Optional

from multiagent.games.game_state import GameState
from .minimax import EvalFn, RoleFn, check_depth, leaf_result
from .result import SearchResult, SearchStats
from .roles import AgentRole

logger = logging.getLogger(__name__)


def expectimax(
    state: GameState,
    depth: Optional[int],
    eval_fn: EvalFn,
    agent_role_fn: RoleFn,
    *,
    zero: Any = 0.0,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """
    Best action for the agent to move in ``state`` and its expected utility.

    Agents classified as ``AgentRole.RANDOM`` pick uniformly among their legal
    actions; their nodes average the children and recommend no action.
    Utilities must support ``+`` and multiplication by a float; ``zero`` is
    the starting value of chance-node sums.
    """
    check_depth(depth)
    result = _expectimax(state, depth, eval_fn, agent_role_fn, zero, stats)
    logger.debug(
        "expectimax depth=%s action=%s utility=%s stats=%s",
        depth,
        result.action,
        result.utility,
        stats,
    )
    return result


def _expectimax(
    state: GameState,
    depth: Optional[int],
    eval_fn: EvalFn,
    agent_role_fn: RoleFn,
    zero: Any,
    stats: Optional[SearchStats],
) -> SearchResult:
    if stats is not None:
        stats.nodes += 1
    if state.is_finished() or depth == 0:
        return leaf_result(state, eval_fn, stats)

    role = agent_role_fn(state.next_agent())
    child_depth = None if depth is None else depth - 1

    if role is AgentRole.RANDOM:
        children = [child for _, child in state.legal_actions()]
        if not children:
            # same fallback as every other node kind, not the zero element
            return leaf_result(state, eval_fn, stats)
        if stats is not None:
            stats.chance_nodes += 1
        weight = 1.0 / len(children)
        utility = zero
        for child in children:
            _, child_utility = _expectimax(child, child_depth, eval_fn, agent_role_fn, zero, stats)
            utility = utility + child_utility * weight
        return SearchResult(None, utility)

    if role is AgentRole.MAXIMIZER:
        maximizing = True
    elif role is AgentRole.MINIMIZER:
        maximizing = False
    else:
        raise ValueError(f"Unknown agent role: {role!r}")

    best_action = None
    best_utility = None
    found = False
    for action, child in state.legal_actions():
        _, utility = _expectimax(child, child_depth, eval_fn, agent_role_fn, zero, stats)
        if found:
            improved = utility > best_utility if maximizing else utility < best_utility
            if not improved:
                continue
        best_action, best_utility, found = action, utility, True

    if not found:
        return leaf_result(state, eval_fn, stats)
    return SearchResult(best_action, best_utility)
