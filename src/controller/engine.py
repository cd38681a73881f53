from __future__ import annotations

import copy
import threading
from typing import List, Optional, Tuple

import structlog

from dispatch import CALL_DIRECTIONS, Selector, get_selector, update_targets
from fleet import Building, BuildingConfig, Elevator

from .simulation import step_building

logger = structlog.get_logger(__name__)


class DispatchEngine:
    """Owns one building and serializes every operation on it.

    All public methods hold a single lock for their whole duration, so no
    caller can observe a half-applied pickup, step or reconfiguration.
    """

    def __init__(
        self,
        config: Optional[BuildingConfig] = None,
        selector_name: str = "priority",
        selector_options: Optional[dict] = None,
    ) -> None:
        self.building = Building(config or BuildingConfig())
        self.selector_name = selector_name
        self.selector: Selector = get_selector(selector_name, **(selector_options or {}))
        self._lock = threading.RLock()

    def get_status(self) -> List[Elevator]:
        with self._lock:
            return self.building.status()

    def get_config(self) -> BuildingConfig:
        with self._lock:
            return copy.copy(self.building.config)

    def snapshot(self) -> dict:
        with self._lock:
            state = self.building.snapshot()
            state["selector"] = self.selector_name
            return state

    def configure(self, number_of_floors: int, active_elevators: int) -> None:
        with self._lock:
            self.building.configure(number_of_floors, active_elevators)
            logger.info(
                "building_configured",
                number_of_floors=number_of_floors,
                active_elevators=active_elevators,
            )

    def set_selector(self, name: str, **options) -> None:
        try:
            selector = get_selector(name, **options)
        except TypeError as exc:
            raise ValueError(f"Invalid options for selector '{name}': {exc}") from exc
        with self._lock:
            self.selector = selector
            self.selector_name = name.lower()
            logger.info("selector_changed", selector=self.selector_name)

    def pickup(self, floor: int, direction: int) -> Optional[int]:
        """Assign a hall call to an elevator and return its id."""
        with self._lock:
            if direction not in CALL_DIRECTIONS or not self.building.has_floor(floor):
                logger.warning("pickup_rejected", floor=floor, direction=direction)
                return None
            chosen = self.selector.select_elevator(
                self.building.elevators, floor, direction, self.building.num_floors
            )
            if chosen is None:
                logger.warning("pickup_unassigned", floor=floor, direction=direction)
                return None
            self._enqueue(chosen, floor)
            logger.info(
                "pickup_assigned",
                floor=floor,
                direction=direction,
                elevator_id=chosen.elevator_id,
            )
            return chosen.elevator_id

    def add_target(self, elevator_id: int, floor: int) -> bool:
        with self._lock:
            elevator = self.building.get_elevator(elevator_id)
            if elevator is None or not elevator.in_service() or not self.building.has_floor(floor):
                logger.info("target_rejected", elevator_id=elevator_id, floor=floor)
                return False
            self._enqueue(elevator, floor)
            return True

    def step(self) -> List[Tuple[int, int]]:
        with self._lock:
            arrivals = step_building(self.building)
            for elevator_id, floor in arrivals:
                logger.debug("elevator_arrived", elevator_id=elevator_id, floor=floor)
            return arrivals

    def _enqueue(self, elevator: Elevator, floor: int) -> None:
        elevator.target_floors.append(floor)
        update_targets(elevator)
        elevator.refresh_status()
