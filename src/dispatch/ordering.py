from __future__ import annotations

from typing import Iterable, List

from fleet import Elevator, ElevatorStatus


def reorder(current_floor: int, direction: ElevatorStatus, targets: Iterable[int]) -> List[int]:
    """Order pending floors the way a SCAN elevator would visit them.

    Travelling up, floors at or above the car come first (ascending), then the
    floors behind it (ascending). Travelling down mirrors this. A car without
    a direction serves the nearest floor first. ``sorted`` is stable, so
    floors of equal priority keep their input order.
    """

    floors = list(targets)
    if direction is ElevatorStatus.UP:
        return sorted(floors, key=lambda floor: (floor < current_floor, floor))
    if direction is ElevatorStatus.DOWN:
        return sorted(floors, key=lambda floor: (floor > current_floor, -floor))
    if direction in (ElevatorStatus.IDLE, ElevatorStatus.OFF):
        return sorted(floors, key=lambda floor: abs(floor - current_floor))
    raise ValueError(f"Unknown elevator status {direction!r}")


def update_targets(elevator: Elevator) -> Elevator:
    elevator.target_floors = reorder(
        elevator.current_floor, elevator.status, elevator.target_floors
    )
    return elevator
