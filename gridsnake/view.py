"""
view.py - View layer.

Draws the board from the last Snapshot the model published, plus a side
panel with the score history and an overlay for the idle, paused and
game-over states. Reads the model, never writes to it.

Public API:
    GameView(screen)        - bind to a pygame surface
    view.on_snapshot(snap)  - render listener, keeps the latest snapshot
    view.render(model)      - draw the current frame
"""

import math
import pygame

from .config import (
    BOARD_W, BOARD_H, SIDE_W, MARGIN,
    OFFSET_X, OFFSET_Y, CELL,
    BG, GRID_COL, HEAD_COL, BODY_COL, FOOD_COL, STEM_COL,
    UI_COL, TEXT_COL, ACCENT_COL, BLACK, PANEL_BG, BORDER_COL,
    DIFFICULTIES, HISTORY_SHOWN,
    STATE_IDLE, STATE_PAUSED, STATE_OVER,
)
from .model import GameModel
from .state import Snapshot


# ─────────────────────── colour helpers ──────────────────────────
def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a Snapshot."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._snap: Snapshot | None = None
        self._anim_tick: int = 0
        self._final_score: int | None = None
        self._init_fonts()
        self._build_static_surfaces()

    # ── Listeners ────────────────────────────────────────────────
    def on_snapshot(self, snap: Snapshot) -> None:
        self._snap = snap

    def on_game_over(self, score: int) -> None:
        self._final_score = score

    # ── Main entry ───────────────────────────────────────────────
    def render(self, model: GameModel) -> None:
        self._anim_tick += 1
        snap = self._snap or model.snapshot()

        self.screen.fill(BG)
        self.screen.blit(self._grid_surf, (OFFSET_X, OFFSET_Y))

        self._draw_food(snap.food)
        self._draw_snake(snap)

        pygame.draw.rect(self.screen, BORDER_COL,
                         (OFFSET_X - 1, OFFSET_Y - 1, BOARD_W + 2, BOARD_H + 2), 1)
        self._draw_panel(model, snap)

        if model.status == STATE_IDLE:
            self._draw_overlay("SNAKE", HEAD_COL, ["PRESS SPACE TO PLAY"])
        elif model.status == STATE_PAUSED:
            self._draw_overlay("PAUSED", ACCENT_COL, ["PRESS SPACE TO RESUME"])
        elif model.status == STATE_OVER:
            score = self._final_score if self._final_score is not None else snap.score
            self._draw_overlay("GAME OVER", FOOD_COL,
                               [f"SCORE: {score}", "PRESS R TO PLAY AGAIN"])

        pygame.display.flip()

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self) -> None:
        self._grid_surf = pygame.Surface((BOARD_W, BOARD_H), pygame.SRCALPHA)
        for x in range(0, BOARD_W + 1, CELL):
            pygame.draw.line(self._grid_surf, (*GRID_COL, 160), (x, 0), (x, BOARD_H))
        for y in range(0, BOARD_H + 1, CELL):
            pygame.draw.line(self._grid_surf, (*GRID_COL, 160), (0, y), (BOARD_W, y))

    # ── Food ─────────────────────────────────────────────────────
    def _draw_food(self, food: tuple[int, int]) -> None:
        fx, fy = OFFSET_X + food[0], OFFSET_Y + food[1]
        cx, cy = fx + CELL // 2, fy + CELL // 2
        pygame.draw.circle(self.screen, FOOD_COL, (cx, cy), CELL // 2 - 3)
        # Stem
        pygame.draw.line(self.screen, STEM_COL, (cx, fy + 4), (cx, fy), 2)

    # ── Snake ────────────────────────────────────────────────────
    def _draw_snake(self, snap: Snapshot) -> None:
        for i, (sx, sy) in enumerate(snap.snake):
            color = HEAD_COL if i == 0 else BODY_COL
            center = (OFFSET_X + sx + CELL // 2, OFFSET_Y + sy + CELL // 2)
            pygame.draw.circle(self.screen, color, center, CELL // 2 - 1)
        if snap.snake:
            self._draw_eyes(snap.snake[0], snap.direction)

    def _draw_eyes(self, head: tuple[int, int], direction) -> None:
        cx = OFFSET_X + head[0] + CELL // 2
        cy = OFFSET_Y + head[1] + CELL // 2
        dx, dy = direction.x, direction.y
        px, py = -dy, dx  # perpendicular

        for sign in (+1, -1):
            ex = int(cx + dx * 3 + sign * px * 5)
            ey = int(cy + dy * 3 + sign * py * 5)
            pygame.draw.circle(self.screen, BLACK, (ex, ey), 2)

    # ── Side panel ───────────────────────────────────────────────
    def _draw_panel(self, model: GameModel, snap: Snapshot) -> None:
        px = OFFSET_X + BOARD_W + MARGIN
        pygame.draw.rect(self.screen, PANEL_BG, (px, OFFSET_Y, SIDE_W, BOARD_H))
        pygame.draw.rect(self.screen, BORDER_COL, (px, OFFSET_Y, SIDE_W, BOARD_H), 1)

        x, y = px + 12, OFFSET_Y + 10
        y = self._panel_line(f"Score: {snap.score}", HEAD_COL, x, y, self.font_big)
        y = self._panel_line(f"Highest Score: {model.history.get_highest()}",
                             ACCENT_COL, x, y, self.font_small)
        y = self._panel_line(f"Mode: {DIFFICULTIES[model.difficulty]['label']}",
                             UI_COL, x, y, self.font_small)
        y += 8
        y = self._panel_line("HISTORY", TEXT_COL, x, y, self.font_small)

        scores = model.history.get_all()
        first = max(0, len(scores) - HISTORY_SHOWN)
        for i, s in enumerate(scores[first:], start=first + 1):
            y = self._panel_line(f"Game {i}: {s}", UI_COL, x, y, self.font_tiny)

        hint = self.font_tiny.render("ARROWS SPACE R 1-3", True, UI_COL)
        self.screen.blit(hint, (x, OFFSET_Y + BOARD_H - hint.get_height() - 8))

    def _panel_line(self, text: str, color: tuple, x: int, y: int,
                    font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        self.screen.blit(surf, (x, y))
        return y + surf.get_height() + 4

    # ── Overlays ─────────────────────────────────────────────────
    def _draw_overlay(self, title: str, color: tuple, lines: list[str]) -> None:
        surf = pygame.Surface((BOARD_W, BOARD_H), pygame.SRCALPHA)
        surf.fill((5, 5, 12, 200))
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))

        cx = OFFSET_X + BOARD_W // 2
        cy = OFFSET_Y + BOARD_H // 2 - 40
        pulse = 0.82 + 0.18 * math.sin(self._anim_tick * 0.05)
        t = self.font_title.render(title, True, _brighten(color, pulse))
        self.screen.blit(t, t.get_rect(center=(cx, cy)))
        cy += t.get_height()
        for line in lines:
            s = self.font_med.render(line, True, TEXT_COL)
            self.screen.blit(s, s.get_rect(center=(cx, cy)))
            cy += s.get_height() + 8

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "courier", 40, True),
            ("font_big",   "courier", 24, True),
            ("font_med",   "courier", 16, False),
            ("font_small", "courier", 14, True),
            ("font_tiny",  "courier", 12, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except Exception:
                setattr(self, attr, pygame.font.SysFont(None, size))
