from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Iterator, Optional, Tuple, TypeVar

from .actions import enumerate_actions

ActionT = TypeVar("ActionT")
AgentT = TypeVar("AgentT")


class GameState(ABC, Generic[ActionT, AgentT]):
    """
    Immutable position of a finite, turn-based, perfect-information game.

    Concrete games implement :meth:`next_agent` and :meth:`successor` and set
    ``action_type`` to the domain of actions (usually an ``enum.Enum``).
    A state is never changed in place: every move produces a new state.
    """

    action_type: ClassVar[Any] = None

    @abstractmethod
    def next_agent(self) -> Optional[AgentT]:
        """Agent to move, or ``None`` once the game has ended."""

    @abstractmethod
    def successor(self, action: ActionT) -> Optional["GameState[ActionT, AgentT]"]:
        """
        State reached by playing ``action``.

        Returns ``None`` when ``action`` is illegal here (any action is
        illegal in a finished game). Must not raise for illegal input.
        """

    def is_finished(self) -> bool:
        return self.next_agent() is None

    def is_legal(self, action: ActionT) -> bool:
        return self.successor(action) is not None

    def candidate_actions(self) -> Iterator[ActionT]:
        """
        Every action worth trying in this state, legal or not.

        Defaults to the whole ``action_type`` domain. Games with large action
        domains should override this with a narrower generator.
        """
        if self.action_type is None:
            raise TypeError(f"{type(self).__name__} does not declare an action_type")
        return enumerate_actions(self.action_type)

    def legal_actions(self) -> Iterator[Tuple[ActionT, "GameState[ActionT, AgentT]"]]:
        """Yield ``(action, successor)`` for each legal action, in candidate order."""
        for action in self.candidate_actions():
            child = self.successor(action)
            if child is not None:
                yield action, child
