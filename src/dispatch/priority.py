from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from fleet import Elevator, ElevatorStatus

from .utils import closest_elevator, least_loaded_elevator

Tier = Callable[[List[Elevator], int, int], Optional[Elevator]]


def _already_targeting_same_direction(
    elevators: List[Elevator], call_floor: int, call_direction: int
) -> Optional[Elevator]:
    matches = [
        e
        for e in elevators
        if call_floor in e.target_floors and e.is_converging(call_floor, call_direction)
    ]
    return least_loaded_elevator(matches)


def _already_targeting(
    elevators: List[Elevator], call_floor: int, call_direction: int
) -> Optional[Elevator]:
    matches = [e for e in elevators if call_floor in e.target_floors]
    return closest_elevator(matches, call_floor)


def _idle(elevators: List[Elevator], call_floor: int, call_direction: int) -> Optional[Elevator]:
    matches = [e for e in elevators if e.status is ElevatorStatus.IDLE]
    return closest_elevator(matches, call_floor)


def _moving_toward_call(
    elevators: List[Elevator], call_floor: int, call_direction: int
) -> Optional[Elevator]:
    matches = [e for e in elevators if e.is_converging(call_floor, call_direction)]
    return least_loaded_elevator(matches)


def _not_moving_away(
    elevators: List[Elevator], call_floor: int, call_direction: int
) -> Optional[Elevator]:
    matches = [
        e
        for e in elevators
        if e.status is ElevatorStatus.IDLE or e.is_heading_toward(call_floor)
    ]
    return closest_elevator(matches, call_floor)


def _any_in_service(
    elevators: List[Elevator], call_floor: int, call_direction: int
) -> Optional[Elevator]:
    return closest_elevator(elevators, call_floor)


TIERS: Sequence[Tier] = (
    _already_targeting_same_direction,
    _already_targeting,
    _idle,
    _moving_toward_call,
    _not_moving_away,
    _any_in_service,
)


def select_best_elevator(
    elevators: Sequence[Elevator], call_floor: int, call_direction: int
) -> Optional[Elevator]:
    """Walk the priority tiers and return the first tier's pick.

    Cars that are ``OFF`` never take part. Within a tier, ties are broken by
    scan order, so the lowest elevator id wins.
    """

    in_service = sorted(
        (e for e in elevators if e.in_service()), key=lambda e: e.elevator_id
    )
    for tier in TIERS:
        chosen = tier(in_service, call_floor, call_direction)
        if chosen is not None:
            return chosen
    return None


class PrioritySelector:
    """Tiered dispatch: reuse queued stops, then idle cars, then moving cars."""

    def select_elevator(
        self,
        elevators: Sequence[Elevator],
        call_floor: int,
        call_direction: int,
        num_floors: int,
    ) -> Optional[Elevator]:
        return select_best_elevator(elevators, call_floor, call_direction)
