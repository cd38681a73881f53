from __future__ import annotations

from typing import Optional, Protocol, Sequence

from fleet import Elevator

UP = 1
DOWN = -1
CALL_DIRECTIONS = (UP, DOWN)


class Selector(Protocol):
    """Strategy interface for choosing the elevator that answers a hall call."""

    def select_elevator(
        self,
        elevators: Sequence[Elevator],
        call_floor: int,
        call_direction: int,
        num_floors: int,
    ) -> Optional[Elevator]:
        """
        Return the elevator that should serve ``call_floor``.

        ``None`` means no elevator in the fleet is in service. Implementations
        must never pick an elevator whose status is ``OFF`` and must not
        mutate the elevators they are given.
        """
        ...
