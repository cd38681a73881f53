from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional


class ElevatorStatus(str, enum.Enum):
    """Direction of travel, or whether the car is out of the active fleet."""

    UP = "up"
    DOWN = "down"
    IDLE = "idle"
    OFF = "off"


@dataclass
class Elevator:
    """A single car: its floor, pending targets and status."""

    elevator_id: int
    current_floor: int = 0
    target_floors: List[int] = field(default_factory=list)
    status: ElevatorStatus = ElevatorStatus.IDLE

    def in_service(self) -> bool:
        return self.status is not ElevatorStatus.OFF

    @property
    def head_target(self) -> Optional[int]:
        if not self.target_floors:
            return None
        return self.target_floors[0]

    @property
    def load(self) -> int:
        return len(self.target_floors)

    def distance_to(self, floor: int) -> int:
        return abs(self.current_floor - floor)

    def is_converging(self, floor: int, direction: int) -> bool:
        """True when travelling in ``direction`` and still short of ``floor``."""
        if self.status is ElevatorStatus.UP:
            return direction == 1 and self.current_floor < floor
        if self.status is ElevatorStatus.DOWN:
            return direction == -1 and self.current_floor > floor
        return False

    def is_heading_toward(self, floor: int) -> bool:
        if self.status is ElevatorStatus.UP:
            return self.current_floor < floor
        if self.status is ElevatorStatus.DOWN:
            return self.current_floor > floor
        return False

    def refresh_status(self) -> None:
        if not self.in_service():
            return
        head = self.head_target
        if head is None:
            self.status = ElevatorStatus.IDLE
        elif head > self.current_floor:
            self.status = ElevatorStatus.UP
        else:
            self.status = ElevatorStatus.DOWN

    def reset(self, active: bool) -> None:
        self.current_floor = 0
        self.target_floors = []
        self.status = ElevatorStatus.IDLE if active else ElevatorStatus.OFF

    def to_dict(self) -> dict:
        return {
            "id": self.elevator_id,
            "current_floor": self.current_floor,
            "target_floors": list(self.target_floors),
            "status": self.status.value,
        }
