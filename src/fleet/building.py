from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import List, Optional

from .config import FLEET_CAPACITY, BuildingConfig
from .elevator import Elevator, ElevatorStatus


@dataclass
class Building:
    """Building configuration plus the fixed-capacity elevator fleet."""

    config: BuildingConfig = field(default_factory=BuildingConfig)
    elevators: List[Elevator] = field(init=False)

    def __post_init__(self) -> None:
        self.elevators = [
            Elevator(
                elevator_id=i,
                status=ElevatorStatus.IDLE if i < self.config.active_elevators else ElevatorStatus.OFF,
            )
            for i in range(FLEET_CAPACITY)
        ]

    @property
    def num_floors(self) -> int:
        return self.config.number_of_floors

    def has_floor(self, floor: int) -> bool:
        return 0 <= floor < self.config.number_of_floors

    def configure(self, number_of_floors: int, active_elevators: int) -> None:
        """Apply a new configuration and send every car back to floor 0."""
        config = BuildingConfig(number_of_floors, active_elevators)
        self.config = config
        for elevator in self.elevators:
            elevator.reset(active=elevator.elevator_id < config.active_elevators)

    def get_elevator(self, elevator_id: int) -> Optional[Elevator]:
        if 0 <= elevator_id < len(self.elevators):
            return self.elevators[elevator_id]
        return None

    def status(self) -> List[Elevator]:
        return copy.deepcopy(self.elevators)

    def snapshot(self) -> dict:
        return {
            "config": self.config.as_dict(),
            "elevators": [elevator.to_dict() for elevator in self.elevators],
        }
