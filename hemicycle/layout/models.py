"""
Value types for the hemicycle layout.

GeometryConfig validates itself on construction; the engine validates it
again so hand-built instances (e.g. via dataclasses.replace) are covered.
"""
from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from typing import Optional

from hemicycle.config.constants import (
    DEFAULT_ANGLE_END,
    DEFAULT_ANGLE_START,
    DEFAULT_CIRCLE_HEIGHT_ADJUSTER,
    DEFAULT_HEIGHT,
    DEFAULT_PARTY_GAP,
    DEFAULT_RADIUS,
    DEFAULT_ROWS,
    DEFAULT_SEAT_SHRINK,
    DEFAULT_WIDTH,
    ROW_PITCH_FACTOR,
    SEAT_RADIUS_MAX,
    SEAT_RADIUS_MIN,
    UNOCCUPIED_NAME,
    UNOCCUPIED_ROLE,
)
from hemicycle.layout.errors import InvalidConfiguration

_FLOAT_FIELDS = (
    "width",
    "height",
    "radius",
    "angle_start",
    "angle_end",
    "party_gap",
    "seat_shrink",
    "circle_height_adjuster",
)


@dataclass(frozen=True)
class GeometryConfig:
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    radius: float = DEFAULT_RADIUS
    rows: int = DEFAULT_ROWS
    angle_start: float = DEFAULT_ANGLE_START
    angle_end: float = DEFAULT_ANGLE_END
    party_gap: float = DEFAULT_PARTY_GAP
    seat_shrink: float = DEFAULT_SEAT_SHRINK
    circle_height_adjuster: float = DEFAULT_CIRCLE_HEIGHT_ADJUSTER

    def __post_init__(self) -> None:
        self.validate()
        # numpy integers (e.g. read from a frame) are stored as plain int
        object.__setattr__(self, "rows", int(self.rows))

    def validate(self) -> None:
        for name in _FLOAT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
                raise InvalidConfiguration(f"{name} must be a finite number, got {value!r}")

        for name in ("width", "height", "radius"):
            value = getattr(self, name)
            if not value > 0:
                raise InvalidConfiguration(f"{name} must be > 0, got {value!r}")

        if isinstance(self.rows, bool) or not isinstance(self.rows, numbers.Integral) or self.rows < 1:
            raise InvalidConfiguration(f"rows must be an integer >= 1, got {self.rows!r}")

        if not self.angle_end > self.angle_start:
            raise InvalidConfiguration(
                f"angle_end ({self.angle_end}) must be greater than angle_start ({self.angle_start})"
            )

        if not self.party_gap >= 0:
            raise InvalidConfiguration(f"party_gap must be >= 0, got {self.party_gap!r}")
        if self.rows * self.section_gap >= self.sweep:
            raise InvalidConfiguration(
                f"party_gap={self.party_gap} leaves no room for seats "
                f"(rows * gap = {self.rows * self.section_gap:.4f} >= sweep {self.sweep:.4f})"
            )

        if not self.seat_shrink > 0:
            raise InvalidConfiguration(f"seat_shrink must be > 0, got {self.seat_shrink!r}")
        if not self.circle_height_adjuster > 0:
            raise InvalidConfiguration(
                f"circle_height_adjuster must be > 0, got {self.circle_height_adjuster!r}"
            )

        inner = self.radius - (self.rows - 1) * self.row_height
        if inner <= 0:
            raise InvalidConfiguration(
                f"{self.rows} rows do not fit inside radius {self.radius} "
                f"(innermost row radius would be {inner:.2f})"
            )

    @property
    def sweep(self) -> float:
        """Total angle between angle_start and angle_end, in radians."""
        return self.angle_end - self.angle_start

    @property
    def section_gap(self) -> float:
        """Empty angle left after each party, in radians."""
        return self.party_gap * math.pi

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / self.circle_height_adjuster

    @property
    def seat_radius(self) -> float:
        """
        Circle radius for one seat: shrinks with row count, clamped to
        [SEAT_RADIUS_MIN, SEAT_RADIUS_MAX].
        """
        r = min(SEAT_RADIUS_MAX, (self.radius / (self.rows * 2)) * self.seat_shrink)
        return max(r, SEAT_RADIUS_MIN)

    @property
    def row_height(self) -> float:
        return self.seat_radius * ROW_PITCH_FACTOR


@dataclass(frozen=True)
class PartyEntry:
    name: str
    seats: int
    color: object = None


@dataclass(frozen=True)
class OccupantEntry:
    seat_id: str
    name: str
    party: str
    role: str

    @classmethod
    def unoccupied(cls, seat_id: str, party: str) -> OccupantEntry:
        return cls(seat_id=seat_id, name=UNOCCUPIED_NAME, party=party, role=UNOCCUPIED_ROLE)

    @property
    def is_unoccupied(self) -> bool:
        return self.name == UNOCCUPIED_NAME and self.role == UNOCCUPIED_ROLE


@dataclass(frozen=True)
class PartySector:
    """Angular slice of the hemicycle owned by one party."""

    party: str
    start: float
    span: float

    @property
    def end(self) -> float:
        return self.start + self.span


@dataclass(frozen=True)
class SeatRecord:
    seat_id: str
    party: str
    color: object
    x: float
    y: float
    row: int
    angle: float
    occupant: Optional[OccupantEntry] = None

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y
