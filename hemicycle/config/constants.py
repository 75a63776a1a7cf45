from __future__ import annotations
import math

# --- Default geometry ---
DEFAULT_WIDTH = 800.0
DEFAULT_HEIGHT = 600.0
DEFAULT_RADIUS = 250.0
DEFAULT_ROWS = 6
DEFAULT_ANGLE_START = math.pi * 0.9
DEFAULT_ANGLE_END = math.pi * 2.1
DEFAULT_PARTY_GAP = 0.0  # fraction of pi left empty after each party
DEFAULT_SEAT_SHRINK = 0.8
DEFAULT_CIRCLE_HEIGHT_ADJUSTER = 2.0  # centre_y = height / adjuster

# --- Seat sizing (display units) ---
SEAT_RADIUS_MIN = 2.0
SEAT_RADIUS_MAX = 10.0
ROW_PITCH_FACTOR = 2.2  # row spacing = seat radius * factor

# --- Occupants ---
SEAT_ID_PREFIX = "seat-"
UNOCCUPIED_NAME = "Unoccupied"
UNOCCUPIED_ROLE = "Unoccupied"

# --- Table columns ---
OCCUPANT_COLS = ["seat_id", "name", "party", "role"]
SEAT_COLS = [
    "seat_id",
    "party",
    "color",
    "row",
    "angle",
    "x",
    "y",
    "occupant_name",
    "occupant_party",
    "occupant_role",
]

# --- Logging ---
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
