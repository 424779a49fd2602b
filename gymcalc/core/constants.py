"""Static constants for plate resolution and max estimation."""

from __future__ import annotations

LBS_PER_KG = 2.20462

# Greedy resolution limits (per side, kg).
MAX_PLATES_PER_DENOMINATION = 10
REMAINDER_TOLERANCE_KG = 0.1
MAX_PLATE_WEIGHT = 100.0

# Upper-bound search in achievability checks.
MAX_SEARCH_COMBINATIONS = 10

# Target weight changes smaller than this keep cached results.
CACHE_EPSILON = 0.01

DEFAULT_PLATES = [2.5, 5.0, 10.0, 15.0, 20.0, 25.0, 35.0, 45.0]

# Brzycki: 1RM = weight * 36 / (37 - reps)
BRZYCKI_NUMERATOR = 36.0
BRZYCKI_SINGULARITY = 37

MIN_TABLE_REPS = 1
MAX_TABLE_REPS = 12

PERCENTAGE_TABLE = [
    (100, 1),
    (95, 2),
    (90, 4),
    (85, 6),
    (80, 8),
    (75, 10),
    (70, 12),
    (65, 15),
    (60, 20),
]

# (name, weight in kg)
BARBELL_PRESETS = [
    ("Olympic Bar (Men's)", 20.0),
    ("Olympic Bar (Women's)", 15.0),
    ("EZ Curl Bar", 10.0),
    ("Trap Bar", 25.0),
    ("Safety Squat Bar", 25.0),
    ("Fixed Barbell (10kg)", 10.0),
    ("Fixed Barbell (15kg)", 15.0),
    ("Fixed Barbell (20kg)", 20.0),
    ("Swiss Bar", 20.0),
    ("Cambered Bar", 25.0),
]

STANDARD_BARBELL_ID = "olympic-bar-men-s"
