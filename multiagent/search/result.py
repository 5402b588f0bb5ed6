from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, NamedTuple, Optional


class SearchResult(NamedTuple):
    """Recommended action (``None`` at leaves and chance nodes) and its utility."""

    action: Optional[Any]
    utility: Any


@dataclass
class SearchStats:
    """Counters filled in by a search when passed as ``stats=``."""

    nodes: int = 0
    evaluations: int = 0
    cutoffs: int = 0
    chance_nodes: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
