"""Search roles assigned to agents by the caller."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Hashable, Mapping, TypeVar

AgentT = TypeVar("AgentT", bound=Hashable)


class AgentRole(Enum):
    MAXIMIZER = "maximizer"
    MINIMIZER = "minimizer"
    RANDOM = "random"

    @classmethod
    def from_name(cls, name: str) -> "AgentRole":
        """Parse ``"maximizer"``/``"max"``, ``"minimizer"``/``"min"`` or ``"random"``/``"chance"``."""
        key = name.strip().lower()
        aliases = {
            "max": cls.MAXIMIZER,
            "min": cls.MINIMIZER,
            "chance": cls.RANDOM,
        }
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown agent role: {name!r}") from None


def role_map(roles: Mapping[AgentT, AgentRole]) -> Callable[[AgentT], AgentRole]:
    """Classifier looking agents up in a fixed ``{agent: role}`` mapping."""
    table = dict(roles)

    def classify(agent: AgentT) -> AgentRole:
        try:
            return table[agent]
        except KeyError:
            raise ValueError(f"No role assigned to agent {agent!r}") from None

    return classify
