"""
config.py - Shared constants for the entire application.
No logic, no imports from internal modules.
"""

import os

# ── Board & Grid ──────────────────────────────────────────────────
CELL            = 20
BOARD_W, BOARD_H = 400, 400
START_CELL      = (200, 200)

# ── Window ────────────────────────────────────────────────────────
SIDE_W          = 190
MARGIN          = 10
OFFSET_X        = MARGIN
OFFSET_Y        = MARGIN
WIDTH           = BOARD_W + SIDE_W + 3 * MARGIN
HEIGHT          = BOARD_H + 2 * MARGIN
FPS             = 60

# ── Colors ────────────────────────────────────────────────────────
BG          = (10,  10,  15)
GRID_COL    = (18,  24,  36)
HEAD_COL    = (124, 255, 155)
BODY_COL    = (0,   200, 83)
FOOD_COL    = (255, 23,  68)
STEM_COL    = (78,  52,  46)
UI_COL      = (120, 120, 170)
TEXT_COL    = (220, 220, 235)
ACCENT_COL  = (255, 228, 77)
BLACK       = (0,   0,   0)
PANEL_BG    = (12,  12,  20)
BORDER_COL  = (26,  26,  62)

# ── Gameplay ──────────────────────────────────────────────────────
FOOD_SAMPLE_ATTEMPTS = 64   # random picks before scanning every free cell

# Tick period in milliseconds; smaller is faster.
DIFFICULTIES = {
    "easy":   {"label": "EASY",   "period": 180},
    "normal": {"label": "NORMAL", "period": 120},
    "hard":   {"label": "HARD",   "period": 70},
}
DEFAULT_DIFFICULTY = "normal"

# ── Game States ───────────────────────────────────────────────────
STATE_IDLE    = "idle"
STATE_RUNNING = "running"
STATE_PAUSED  = "paused"
STATE_OVER    = "over"

# ── Score history ─────────────────────────────────────────────────
HISTORY_KEY      = "snakeScoreHistory"
HIGHEST_KEY      = "snakeHighestScore"
HISTORY_PATH     = os.path.join(os.path.expanduser("~"), ".gridsnake", "score_history.json")
HISTORY_SHOWN    = 12      # entries listed in the side panel
