from __future__ import annotations

from typing import Iterable, Optional

from fleet import Elevator


def closest_elevator(elevators: Iterable[Elevator], floor: int) -> Optional[Elevator]:
    """Nearest car to ``floor``; the first one scanned wins a tie."""

    best: Optional[Elevator] = None
    best_distance = float("inf")
    for elevator in elevators:
        distance = elevator.distance_to(floor)
        if distance < best_distance:
            best_distance = distance
            best = elevator
    return best


def least_loaded_elevator(elevators: Iterable[Elevator]) -> Optional[Elevator]:
    """Car with the fewest pending targets; the first one scanned wins a tie."""

    candidates = sorted(elevators, key=lambda e: e.load)
    if not candidates:
        return None
    return candidates[0]
