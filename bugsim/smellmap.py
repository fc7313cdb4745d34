"""A grid of scent left by bugs, spreading out and fading each tick."""

from __future__ import annotations

from typing import Iterable

from bugsim.bug import Bug, Grid

_THRESHOLD = 0.00001


class SmellMap:
    """Scent intensities indexed as ``grid[x][y]``."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.grid: Grid = [[0.0] * height for _ in range(width)]

    def apply_diffusion(self) -> None:
        """Spread scent for one tick.

        Each cell keeps three eighths of its scent and receives one eighth
        from the neighbours at ``x + 1`` and ``y + 1``.
        """
        old = self.grid
        last_x = self.width - 1
        last_y = self.height - 1
        self.grid = [
            [
                value * (3.0 / 8.0)
                + (old[x + 1][y] / 8.0 if x < last_x else 0.0)
                + (column[y + 1] / 8.0 if y < last_y else 0.0)
                for y, value in enumerate(column)
            ]
            for x, column in enumerate(old)
        ]

    def visible_cells(self) -> list[tuple[int, int, tuple[int, int, int]]]:
        """Cells strong enough to show, as ``(x, y, rgb)``."""
        cells = []
        for x, column in enumerate(self.grid):
            for y, value in enumerate(column):
                intensity = min(value, 1.0)
                if intensity > _THRESHOLD:
                    color = (int(120 + 135 * intensity), 0, int(110 + 129 * intensity))
                    cells.append((x, y, color))
        return cells

    def _prune(self) -> None:
        for column in self.grid:
            for y, value in enumerate(column):
                if min(value, 1.0) <= _THRESHOLD:
                    column[y] = 0.0

    def simulate(self, bugs: Iterable[Bug]) -> None:
        """Diffuse, mark the cell under every living bug, then clear faint cells."""
        self.apply_diffusion()
        for bug in bugs:
            # Checked without side effects: marking scent must not kill a bug.
            if bug.is_dead or bug.energy < 0 or bug.age > bug.max_age:
                continue
            x, y = bug.position.x, bug.position.y
            if 0 <= x < self.width and 0 <= y < self.height:
                self.grid[int(x)][int(y)] = 1.0
        self._prune()