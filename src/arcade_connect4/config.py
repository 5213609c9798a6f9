# src/arcade_connect4/config.py

from __future__ import annotations

import os

ROWS = 6
COLS = 7
CONNECT_N = 4

# Search
SEARCH_DEPTH = 4
WIN_SCORE = 1_000_000

# Evaluator weights
CENTER_WEIGHT = 30
FOUR_OWN = 10_000
THREE_OWN = 120
TWO_OWN = 12
THREE_OPP = 140   # opponent threats cost a bit more than our own build-up
TWO_OPP = 16

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.28

# Logging
LOG_LEVEL = os.environ.get("ARCADE_C4_LOG_LEVEL", "WARNING").upper()

# Benchmark defaults
RESULTS_DIR = "data/results"
