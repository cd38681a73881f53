from __future__ import annotations

from typing import List, Optional, Tuple

from dispatch import update_targets
from fleet import Building, Elevator, ElevatorStatus


def advance_elevator(elevator: Elevator) -> Optional[int]:
    """Move one car a single floor toward its head target.

    Returns the floor it arrived at when the move completed a stop, otherwise
    ``None``. Every queued copy of the arrival floor is cleared on arrival.
    """

    if not elevator.in_service() or not elevator.target_floors:
        return None

    update_targets(elevator)
    target = elevator.target_floors[0]

    if elevator.current_floor < target:
        elevator.current_floor += 1
        elevator.status = ElevatorStatus.UP
    elif elevator.current_floor > target:
        elevator.current_floor -= 1
        elevator.status = ElevatorStatus.DOWN

    if elevator.current_floor != target:
        return None

    elevator.target_floors = [f for f in elevator.target_floors if f != elevator.current_floor]
    elevator.refresh_status()
    return elevator.current_floor


def step_building(building: Building) -> List[Tuple[int, int]]:
    """Advance every car by one tick and report ``(elevator_id, floor)`` arrivals."""

    arrivals: List[Tuple[int, int]] = []
    for elevator in building.elevators:
        floor = advance_elevator(elevator)
        if floor is not None:
            arrivals.append((elevator.elevator_id, floor))
    return arrivals
