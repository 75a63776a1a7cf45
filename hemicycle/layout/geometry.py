from __future__ import annotations
import logging
from typing import Sequence

import numpy as np

from hemicycle.layout.errors import InvalidConfiguration
from hemicycle.layout.models import GeometryConfig, PartyEntry, PartySector

logger = logging.getLogger(__name__)

def row_radii(config: GeometryConfig) -> np.ndarray:
    """
    Radius of every row, outermost first: radius - row * row_height.
    """
    return config.radius - np.arange(config.rows, dtype=float) * config.row_height

def allocate_rows(config: GeometryConfig, seats: int) -> np.ndarray:
    """
    Seats per row for one party, proportional to each row's radius.

    The sum of radii stands in for ring capacity. Every row is rounded
    half-up on its own, so the result may not add back up to `seats`;
    the engine truncates any surplus while placing.
    """
    radii = row_radii(config)
    # sequential row-by-row total, not numpy pairwise summation
    total = 0.0
    for r in radii.tolist():
        total += r
    share = radii / total * seats
    return np.floor(share + 0.5).astype(int)

def party_sectors(config: GeometryConfig, parties: Sequence[PartyEntry]) -> list[PartySector]:
    """
    Split the sweep into one sector per party, in input order.

    Span is proportional to seat count over whatever angle the gaps leave:
        available = sweep - n_parties * section_gap
        span_k    = seats_k / total * available
    Each sector starts where the previous one ended plus one section gap.
    """
    if not parties:
        return []

    gap = config.section_gap
    available = config.sweep - len(parties) * gap
    if available <= 0:
        raise InvalidConfiguration(
            f"party_gap={config.party_gap} across {len(parties)} parties consumes the whole sweep"
        )

    total = sum(p.seats for p in parties)
    sectors = []
    cursor = config.angle_start
    for party in parties:
        span = (party.seats / total) * available
        sectors.append(PartySector(party=party.name, start=cursor, span=span))
        logger.debug("Sector %s: start=%.4f span=%.4f", party.name, cursor, span)
        cursor += span + gap
    return sectors
