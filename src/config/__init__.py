"""
Central Configuration
All constants, palettes, and settings in one place
"""

import os

# === PATTERN GENERATION ===
DIVISION_MIN = 6    # Cells per axis per quadrant (inclusive)
DIVISION_MAX = 20

NOISE_SCALE = 0.5          # Noise coordinate step between neighbouring cells
NOISE_OFFSET_RANGE = 1000.0
COLUMN_NOISE_SHIFT = 100.0  # Decorrelates column spacing from row spacing

# Noise field (Processing-style value noise)
NOISE_TABLE_SIZE = 4096
NOISE_OCTAVES = 4
NOISE_FALLOFF = 0.5

# Spans at or below this are treated as degenerate noise output
SPACING_EPS = 1e-9

FILL_PROBABILITY = 0.5

# === REVEAL ANIMATION ===
REVEAL_STEP = 0.02        # Progress per frame (50 frames to settle)
FRAME_INTERVAL_MS = 16    # ~60fps

# === DRAWING ===
GRID_LINE_COLOR = (255, 255, 255, 127)  # Translucent white
WINDOW_TITLE = "Symmetric Weave"
DEFAULT_WINDOW_SIZE = (1200, 800)
MIN_WINDOW_SIZE = (320, 240)

# === PALETTES ===
# Preset catalog for palette fill mode
PALETTES = [
    ['#FF5733', '#FFBD33', '#DBFF33', '#75FF33', '#33FF57'],
    ['#3357FF', '#33FFBD', '#33DBFF', '#3375FF', '#5733FF'],
    ['#FF33A8', '#FF33F6', '#D233FF', '#7533FF', '#333FFF'],
    ['#FFB733', '#FF8D33', '#FF5733', '#FF3333', '#FF3333'],
    ['#2ECC71', '#27AE60', '#229954', '#1E8449', '#196F3D'],
    ['#E74C3C', '#C0392B', '#A93226', '#922B21', '#7B241C'],
    ['#3498DB', '#2980B9', '#2471A3', '#1F618D', '#1A5276'],
    ['#F1C40F', '#F39C12', '#D68910', '#B9770E', '#9C640C'],
    ['#9B59B6', '#8E44AD', '#7D3C98', '#6C3483', '#5B2C6F'],
    ['#1ABC9C', '#17A589', '#148F77', '#117A65', '#0E6251'],
]


# === ENVIRONMENT OVERRIDES ===

def _env_int(name):
    v = os.environ.get(name)
    if not v:
        return None
    try:
        return int(v)
    except ValueError:
        return None


def get_seed():
    """Seed for the pattern random source (WEAVE_SEED), or None for fresh runs."""
    return _env_int("WEAVE_SEED")


def get_log_level_name():
    """Console log level name from WEAVE_LOG_LEVEL (default INFO)."""
    name = os.environ.get("WEAVE_LOG_LEVEL", "INFO").strip().upper()
    if name not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        return "INFO"
    return name


def get_log_file():
    """Optional log file path from WEAVE_LOG_FILE."""
    return os.environ.get("WEAVE_LOG_FILE") or None
