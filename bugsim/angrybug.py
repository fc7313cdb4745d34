"""Predatory bugs that hunt plain bugs by smell, sight and sound."""

from __future__ import annotations

import math
from typing import Any, MutableSequence, Optional

from bugsim.bug import MOVES, Bug, Grid, Vec2

PREY_CAUGHT = -2

_DEGREES_PER_RADIAN = 180 / 3.1415
_CATCH_DISTANCE = 7
_VISION_CONE = 30
_STRAIGHT_AHEAD = 5.0
_SOUND_SCALE = 20


def _is_alive(bug: Bug) -> bool:
    """Whether a bug counts as alive, checked without finishing it off."""
    return not (bug.is_dead or bug.energy < 0 or bug.age > bug.max_age)


class AngryBug(Bug):
    """A hunter that eats plain bugs it gets close to.

    The ``speed`` passed in sets how hard of hearing the hunter is; from it
    follow its vision range and its smell threshold.
    """

    COLOR = (255, 0, 0)

    def __init__(self, position: Vec2, move_genome, speed: int) -> None:
        super().__init__(position, move_genome, speed)
        self.is_angry = True
        self.hearing = float(speed)
        vision = 1.0 - self.hearing
        self.smell = 1.0 - vision * 0.5
        self.vision = vision * 30

    def is_within_bounds(self, position: Vec2, width: int, height: int) -> bool:
        return 0 <= position.x < width and 0 <= position.y < height

    def _bearing(self, position: Vec2) -> Optional[tuple[float, float]]:
        """Angle in degrees and cross product between heading and the offset from ``position``."""
        offset = self.position - position
        if offset.length() == 0:
            return None
        heading = MOVES[self.direction].normalized()
        away = offset.normalized()
        dot = heading.x * away.x + heading.y * away.y
        cross = heading.x * away.y - heading.y * away.x
        angle = math.acos(max(-1.0, min(1.0, dot))) * _DEGREES_PER_RADIAN
        return angle, cross

    def _steer(self, angle: float, cross: float) -> int:
        if abs(angle) < _STRAIGHT_AHEAD:
            return self.direction
        if cross > 0:
            return (self.direction - 1) % 6
        if cross < 0:
            return (self.direction + 1) % 6
        return self.direction

    def check_smell(self, smell: Grid) -> int:
        """Turn towards the strongest scent among the left, front and right cells."""
        width = len(smell)
        height = len(smell[0])
        direction = self.direction
        intensity = 0
        candidates = ((self.direction - 1) % 6, self.direction % 6, (self.direction + 1) % 6)
        for index, candidate in enumerate(candidates):
            cell = self.position + MOVES[candidate]
            if not self.is_within_bounds(cell, width, height):
                continue
            value = smell[int(cell.x)][int(cell.y)]
            if value > self.smell and (index == 0 or value > intensity):
                direction = candidate
                intensity = int(value)
        return direction

    def check_vision(self, bug: Bug) -> int:
        """Turn based on a bug seen within range and inside the vision cone."""
        if self.distance_to(bug.position) > self.vision:
            return self.direction
        bearing = self._bearing(bug.position)
        if bearing is None:
            return self.direction
        angle, cross = bearing
        if angle <= _VISION_CONE:
            return self._steer(angle, cross)
        return self.direction

    def check_sound(self, bug: Bug) -> int:
        """Turn based on a bug heard loudly enough, from any angle."""
        sound = bug.emitted_sound
        if sound <= 0:
            return self.direction
        distance = self.distance_to(bug.position)
        loudness = math.inf if distance == 0 else sound * (_SOUND_SCALE / (distance * distance))
        if loudness > self.hearing:
            bearing = self._bearing(bug.position)
            if bearing is None:
                return self.direction
            return self._steer(*bearing)
        return self.direction

    def attack(self, bug: Bug, smell: Grid) -> int:
        """Catch a nearby living plain bug, or pick a direction to chase it.

        Returns ``PREY_CAUGHT`` when the prey is close enough to be eaten, in
        which case its energy is taken over; returns 0 for prey that is
        angry or dead.
        """
        if bug.is_angry or not _is_alive(bug):
            return 0
        if self.distance_to(bug.position) < _CATCH_DISTANCE:
            self.energy += bug.energy
            return PREY_CAUGHT
        return self.check_smell(smell)

    def reproduce(self, bugs: MutableSequence[Bug]) -> int:
        """Hunters never breed."""
        return 0

    def calculate_next_direction(
        self, move: int, bugs: MutableSequence[Bug], smell: Grid
    ) -> int:
        """Hunt through ``bugs``; a caught bug is killed and removed from the list."""
        for index, bug in enumerate(bugs):
            result = self.attack(bug, smell)
            if result == PREY_CAUGHT:
                bug.die()
                del bugs[index]
                return self.direction
            if result != self.direction:
                self.direction = 0
                return result
        self.direction = (self.direction - self.move_genome[self.direction]) % 6
        return self.direction

    def eat(self, food: Any) -> None:
        """Hunters ignore food pellets."""