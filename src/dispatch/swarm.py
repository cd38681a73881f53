from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from fleet import Elevator


@dataclass
class Particle:
    elevator_id: int
    position: float
    velocity: float = 0.0
    best_position: float = 0.0


class SwarmSelector:
    """Particle swarm search over elevator positions.

    Each in-service car seeds one particle at its current floor. Particles
    are pulled toward their own best position and the swarm's best position;
    the car whose particle scores best against the call floor is chosen.
    """

    def __init__(
        self,
        iterations: int = 100,
        inertia: float = 0.5,
        cognitive: float = 1.5,
        social: float = 1.5,
        random_seed: Optional[int] = None,
    ) -> None:
        self.iterations = max(1, iterations)
        self.inertia = inertia
        self.cognitive = cognitive
        self.social = social
        self.random = random.Random(random_seed)

    def select_elevator(
        self,
        elevators: Sequence[Elevator],
        call_floor: int,
        call_direction: int,
        num_floors: int,
    ) -> Optional[Elevator]:
        candidates = {e.elevator_id: e for e in elevators if e.in_service()}
        if not candidates:
            return None

        particles = self._initialize_particles(candidates.values())
        best_id = particles[0].elevator_id
        best_position = particles[0].position
        best_score = float("inf")

        for _ in range(self.iterations):
            for particle in particles:
                fitness = self._fitness(particle.position, call_floor)
                if fitness < best_score:
                    best_score = fitness
                    best_position = particle.position
                    best_id = particle.elevator_id
                if fitness < self._fitness(particle.best_position, call_floor):
                    particle.best_position = particle.position
                self._update_velocity(particle, best_position)
                self._update_position(particle, num_floors)
        return candidates[best_id]

    def _initialize_particles(self, elevators) -> List[Particle]:
        return [
            Particle(
                elevator_id=e.elevator_id,
                position=float(e.current_floor),
                best_position=float(e.current_floor),
            )
            for e in sorted(elevators, key=lambda e: e.elevator_id)
        ]

    @staticmethod
    def _fitness(position: float, call_floor: int) -> float:
        return abs(position - call_floor)

    def _update_velocity(self, particle: Particle, swarm_best: float) -> None:
        r1 = self.random.random()
        r2 = self.random.random()
        particle.velocity = (
            self.inertia * particle.velocity
            + self.cognitive * r1 * (particle.best_position - particle.position)
            + self.social * r2 * (swarm_best - particle.position)
        )

    def _update_position(self, particle: Particle, num_floors: int) -> None:
        particle.position = min(max(particle.position + particle.velocity, 0.0), float(num_floors - 1))
