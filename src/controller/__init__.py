"""Dispatch engine and step simulation for LiftDispatch."""

from .engine import DispatchEngine
from .logs import configure_logging
from .simulation import advance_elevator, step_building

__all__ = [
    "DispatchEngine",
    "advance_elevator",
    "configure_logging",
    "step_building",
]
