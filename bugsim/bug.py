"""Plain bugs that wander on a hexagonal step pattern, eat and breed."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, MutableSequence, Sequence

Grid = list[list[float]]


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vec2":
        """Return the unit vector pointing the same way."""
        norm = self.length()
        if norm == 0:
            raise ValueError("cannot normalise a zero-length vector")
        return Vec2(self.x / norm, self.y / norm)


# The six step offsets, indexed by direction.
MOVES: tuple[Vec2, ...] = (
    Vec2(0, 2),
    Vec2(2, 1),
    Vec2(2, -1),
    Vec2(0, -2),
    Vec2(-2, -1),
    Vec2(-2, 1),
)


class Bug:
    """A bug steered by a genome of six turn weights."""

    COLOR = (0, 255, 0)
    SIZE = 3

    def __init__(self, position: Vec2, move_genome: Sequence[int], speed: int) -> None:
        self.position = position
        self.energy = 200
        self.age = 0
        self.max_age = 500
        self.adult_age = 50
        self.energy_needed = 30

        self.move_genome = list(move_genome)
        self.move_probability = [2.0 ** gene for gene in self.move_genome]
        self.move_sum = sum(self.move_probability)

        # The requested speed is accepted but every bug moves on each tick.
        self.speed = 1
        self.time_since_move = 0
        self.direction = 0

        self.is_angry = False
        self.is_dead = False
        self.emitted_sound = 0.0

    def distance_to(self, position: Vec2) -> float:
        return (self.position - position).length()

    def is_dying(self) -> bool:
        """Return True, and finish the bug off, if it has starved, aged out or died."""
        if self.energy < 0 or self.age > self.max_age or self.is_dead:
            self.die()
            return True
        return False

    def die(self) -> None:
        self.energy = 0
        self.is_dead = True

    def can_reproduce(self) -> bool:
        return self.age > self.adult_age and self.energy > self.energy_needed

    def reproduce(self, bugs: MutableSequence["Bug"]) -> int:
        """Append an offspring at this bug's position and halve its energy."""
        bugs.append(Bug(self.position, self.move_genome, self.speed))
        self.energy = int(self.energy / 2)
        return 1

    def calculate_next_direction(
        self, move: int, bugs: MutableSequence["Bug"], smell: Grid
    ) -> int:
        """Pick a turn by spending ``move`` against the genome's weights."""
        for direction, probability in enumerate(self.move_probability):
            move = math.trunc(move - probability)
            if move < 0:
                return direction
        return 0

    def calculate_position(self, height: int, width: int) -> Vec2:
        """Position after one step in the current direction, kept inside the field."""
        candidate = self.position + MOVES[self.direction]
        x, y = candidate.x, candidate.y
        if x > width:
            x = width - 3
        if y > height:
            y = height - 3
        if x < 0:
            x = 3
        if y < 0:
            y = 3
        return Vec2(x, y)

    def eat(self, food: MutableSequence[Any]) -> None:
        """Eat every pellet closer than two units; each one resets the energy."""
        remaining = []
        for pellet in food:
            if self.distance_to(pellet.position) < 2:
                self.energy = pellet.eat()
            else:
                remaining.append(pellet)
        food[:] = remaining

    def move(
        self,
        move: int,
        height: int,
        width: int,
        bugs: MutableSequence["Bug"],
        smell: Grid,
        food: MutableSequence[Any],
    ) -> None:
        """Advance the bug by one tick."""
        if self.can_reproduce():
            self.reproduce(bugs)

        if self.time_since_move % self.speed == 0:
            self.energy -= 1
            turn = self.calculate_next_direction(move, bugs, smell)
            self.direction = (self.direction + turn) % 6
            self.position = self.calculate_position(height, width)
            self.time_since_move = 0
            self.emitted_sound = float(self.speed)
        else:
            self.emitted_sound = 0.0

        self.eat(food)

        self.time_since_move += 1
        self.age += 1

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position!r}, "
            f"energy={self.energy}, age={self.age})"
        )