"""The simulation world: plain bugs, hunters, food and scent, shown in a window."""

from __future__ import annotations

import argparse
import random
from itertools import chain
from typing import Optional

import pygame

from bugsim.angrybug import AngryBug
from bugsim.bug import Bug, Vec2
from bugsim.food import Food
from bugsim.smellmap import SmellMap

_BACKGROUND = (0, 0, 0)
_FRAME_RATE = 60


class Game:
    """A world of bugs and hunters that advances one tick at a time."""

    def __init__(
        self, width: int = 200, height: int = 200, rng: Optional[random.Random] = None
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.bugs: list[Bug] = []
        self.angry_bugs: list[AngryBug] = []
        self.food: list[Food] = []
        self.smellmap = SmellMap(width, height)

    def random_within_bounds(self) -> Vec2:
        return Vec2(float(self.rng.randrange(self.width)), float(self.rng.randrange(self.height)))

    def generate_move_genome(self) -> list[int]:
        """Six turn weights, each between -4 and 4."""
        genome = []
        for _ in range(6):
            sign = 1 if self.rng.randrange(2) else -1
            genome.append(self.rng.randrange(5) * sign)
        return genome

    def populate(self, bugs_amount: int, food_amount: int) -> None:
        """Reset the scent and add as many plain bugs as hunters, and some food."""
        self.smellmap = SmellMap(self.width, self.height)
        for _ in range(bugs_amount):
            bug = Bug(self.random_within_bounds(), self.generate_move_genome(), self.rng.randrange(10))
            hunter = AngryBug(
                self.random_within_bounds(), self.generate_move_genome(), self.rng.randrange(10)
            )
            self.bugs.append(bug)
            self.angry_bugs.append(hunter)
        for _ in range(food_amount):
            self.food.append(Food(self.random_within_bounds(), self.rng))

    def step(self) -> None:
        """Advance the world by one tick."""
        self.smellmap.simulate(self.bugs)

        if self.rng.randrange(2) == 1:
            self.food.append(Food(self.random_within_bounds(), self.rng))

        grid = self.smellmap.grid
        # Offspring born during this tick wait for the next one.
        for bug in list(self.bugs):
            bug.move(self.rng.randrange(100), self.height, self.width, self.bugs, grid, self.food)
            bug.is_dying()

        for hunter in self.angry_bugs:
            hunter.move(self.rng.randrange(100), self.height, self.width, self.bugs, grid, [])
            hunter.is_dying()

    def draw(self, surface: pygame.Surface) -> None:
        """Paint scent, food and every living bug onto ``surface``."""
        surface.fill(_BACKGROUND)
        for x, y, color in self.smellmap.visible_cells():
            surface.set_at((x, y), color)
        for pellet in self.food:
            rect = pygame.Rect(int(pellet.position.x), int(pellet.position.y), Food.SIZE, Food.SIZE)
            surface.fill(Food.COLOR, rect)
        for bug in chain(self.bugs, self.angry_bugs):
            if bug.is_dead:
                continue
            rect = pygame.Rect(int(bug.position.x), int(bug.position.y), bug.SIZE, bug.SIZE)
            surface.fill(bug.COLOR, rect)

    def run(self, bugs_amount: int, food_amount: int) -> None:
        """Open a window and advance one tick each time the right arrow is pressed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height), pygame.NOFRAME)
            pygame.display.set_caption("Bugs")
            clock = pygame.time.Clock()
            self.populate(bugs_amount, food_amount)
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                        break
                    if event.type == pygame.KEYDOWN and event.key == pygame.K_RIGHT:
                        self.step()
                        self.draw(screen)
                        pygame.display.flip()
                clock.tick(_FRAME_RATE)
        finally:
            pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="bugsim", description="Watch bugs and hunters evolve.")
    parser.add_argument("--bugs", type=int, default=15, help="plain bugs and hunters to start with")
    parser.add_argument("--food", type=int, default=20, help="food pellets to start with")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)
    Game(rng=random.Random(args.seed)).run(args.bugs, args.food)
    return 0