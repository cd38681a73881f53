from __future__ import annotations

import json
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .exceptions import InvalidConfigurationError

FLEET_CAPACITY = 16
DEFAULT_FLOORS = 10
DEFAULT_ACTIVE_ELEVATORS = 5


@dataclass
class BuildingConfig:
    """Floor count and the number of elevators in service."""

    number_of_floors: int = DEFAULT_FLOORS
    active_elevators: int = DEFAULT_ACTIVE_ELEVATORS

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not _is_int(self.number_of_floors) or self.number_of_floors < 1:
            raise InvalidConfigurationError(
                f"number_of_floors must be an integer >= 1, got {self.number_of_floors!r}"
            )
        if not _is_int(self.active_elevators) or not 0 <= self.active_elevators <= FLEET_CAPACITY:
            raise InvalidConfigurationError(
                f"active_elevators must be an integer in [0, {FLEET_CAPACITY}], "
                f"got {self.active_elevators!r}"
            )

    def as_dict(self) -> dict:
        return {
            "number_of_floors": self.number_of_floors,
            "active_elevators": self.active_elevators,
        }


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Settings:
    """Process settings read from the environment."""

    number_of_floors: int = DEFAULT_FLOORS
    active_elevators: int = DEFAULT_ACTIVE_ELEVATORS
    selector: str = "priority"
    selector_options: dict = field(default_factory=dict)
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            number_of_floors=int(os.getenv("LIFT_FLOORS", str(DEFAULT_FLOORS))),
            active_elevators=int(os.getenv("LIFT_ELEVATORS", str(DEFAULT_ACTIVE_ELEVATORS))),
            selector=os.getenv("LIFT_SELECTOR", "priority"),
            selector_options=json.loads(os.getenv("LIFT_SELECTOR_OPTIONS", "{}")),
            host=os.getenv("LIFT_HOST", "0.0.0.0"),
            port=int(os.getenv("LIFT_PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def building_config(self) -> BuildingConfig:
        return BuildingConfig(self.number_of_floors, self.active_elevators)
