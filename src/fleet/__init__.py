"""Fleet state primitives for LiftDispatch."""

from .building import Building
from .config import FLEET_CAPACITY, BuildingConfig, Settings
from .elevator import Elevator, ElevatorStatus
from .exceptions import InvalidConfigurationError

__all__ = [
    "Building",
    "BuildingConfig",
    "Elevator",
    "ElevatorStatus",
    "FLEET_CAPACITY",
    "InvalidConfigurationError",
    "Settings",
]
