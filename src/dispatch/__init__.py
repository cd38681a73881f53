from __future__ import annotations

from typing import Dict, Type

from .interface import CALL_DIRECTIONS, DOWN, UP, Selector
from .ordering import reorder, update_targets
from .priority import PrioritySelector, select_best_elevator
from .swarm import SwarmSelector

__all__ = [
    "CALL_DIRECTIONS",
    "DOWN",
    "UP",
    "PrioritySelector",
    "Selector",
    "SwarmSelector",
    "get_selector",
    "reorder",
    "select_best_elevator",
    "update_targets",
]


SELECTOR_REGISTRY: Dict[str, Type[Selector]] = {
    "priority": PrioritySelector,
    "swarm": SwarmSelector,
}


def get_selector(name: str, **kwargs) -> Selector:
    cls = SELECTOR_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown selector '{name}'. Available: {', '.join(SELECTOR_REGISTRY)}")
    return cls(**kwargs)
