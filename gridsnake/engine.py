"""
engine.py - Collision & movement engine.

advance() is the whole per-tick rule set. It mutates a GameState in place
and raises a Collision subclass when the move ends the game, or
NoSpaceAvailable when the snake fills the board. In both cases the state
is left exactly as it was before the move (apart from the committed
direction).
"""

import random

from .food import place_food
from .grid import Grid
from .state import GameState


class Collision(Exception):
    """A terminal move. Carries the cell the head tried to enter and the final score."""

    reason = "collision"

    def __init__(self, cell: tuple[int, int], score: int):
        super().__init__(f"{self.reason} at {cell} with score {score}")
        self.cell = cell
        self.score = score


class WallCollision(Collision):
    reason = "wall collision"


class SelfCollision(Collision):
    reason = "self collision"


def next_head(state: GameState, grid: Grid) -> tuple[int, int]:
    return state.direction.step(state.head, grid.cell)


def advance(state: GameState, grid: Grid, rng=random) -> bool:
    """
    Move the snake one cell. Returns True if food was eaten.

    Self collision is tested against the whole body including the tail,
    so the head may not enter the cell the tail is about to leave.
    """
    state.commit_direction()
    head = next_head(state, grid)

    if not grid.contains(head):
        raise WallCollision(head, state.score)
    if state.occupies(head):
        raise SelfCollision(head, state.score)

    if head == state.food:
        # Placed before the body grows so a full board leaves the state as it was.
        food = place_food([head, *state.snake], grid, rng)
        state.snake.appendleft(head)
        state.score += 1
        state.food = food
        return True

    state.snake.appendleft(head)
    state.snake.pop()
    return False
