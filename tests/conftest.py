from typing import Iterable, Optional

import pytest

from controller import DispatchEngine
from fleet import BuildingConfig, Elevator, ElevatorStatus


def make_elevator(
    elevator_id: int,
    floor: int = 0,
    status: ElevatorStatus = ElevatorStatus.IDLE,
    targets: Optional[Iterable[int]] = None,
) -> Elevator:
    return Elevator(
        elevator_id=elevator_id,
        current_floor=floor,
        target_floors=list(targets or []),
        status=status,
    )


@pytest.fixture
def engine() -> DispatchEngine:
    """Ten floors, five active cars, all idle on the ground floor."""
    return DispatchEngine(BuildingConfig(number_of_floors=10, active_elevators=5))
