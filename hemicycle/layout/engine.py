"""
Hemicycle seat layout.

Turns a list of parties with seat counts into one positioned record per seat:
  1) every party gets an angular sector proportional to its seat count
  2) each party's seats are spread over the rows in proportion to row radius
  3) seats in a row sit at equal angular steps across the party's sector
Seat ids (seat-1, seat-2, ...) are assigned in output order across all parties.
"""
from __future__ import annotations
import logging
import numbers
from typing import Iterator, Sequence

import numpy as np

from hemicycle.config.constants import SEAT_ID_PREFIX
from hemicycle.layout.errors import InvalidPartyData
from hemicycle.layout.geometry import allocate_rows, party_sectors, row_radii
from hemicycle.layout.models import (
    GeometryConfig,
    OccupantEntry,
    PartyEntry,
    PartySector,
    SeatRecord,
)
from hemicycle.layout.occupants import index_occupants, resolve_occupant, unmatched_occupants

logger = logging.getLogger(__name__)

def seat_id(n: int) -> str:
    return f"{SEAT_ID_PREFIX}{n}"

def validate_parties(parties: Sequence[PartyEntry]) -> int:
    """
    Check seat counts and names; returns the total seat count.
    """
    seen: set[str] = set()
    total = 0
    for party in parties:
        seats = party.seats
        if isinstance(seats, bool) or not isinstance(seats, numbers.Integral):
            raise InvalidPartyData(f"Party {party.name!r}: seat count must be an integer, got {seats!r}")
        if seats < 0:
            raise InvalidPartyData(f"Party {party.name!r}: negative seat count {seats}")
        if party.name in seen:
            raise InvalidPartyData(f"Duplicate party name {party.name!r}")
        seen.add(party.name)
        total += int(seats)

    if parties and total == 0:
        raise InvalidPartyData("Parties are present but the total seat count is 0")
    return total

def _place_party(
    config: GeometryConfig,
    party: PartyEntry,
    sector: PartySector,
    radii: np.ndarray,
) -> Iterator[tuple[int, float, float, float]]:
    """
    Yield (row, angle, x, y) for one party, outer row first.
    Stops as soon as the party's declared seats are used up.
    """
    cx, cy = config.center
    per_row = allocate_rows(config, int(party.seats))
    logger.debug("Party %s: seats per row %s", party.name, per_row.tolist())

    remaining = int(party.seats)
    for row, (radius, n) in enumerate(zip(radii, per_row)):
        if remaining <= 0:
            if n > 0:
                logger.debug("Party %s: budget exhausted, skipping row %d", party.name, row)
            break
        if n < 1:
            continue

        take = min(int(n), remaining)
        if take < n:
            logger.debug("Party %s: row %d truncated from %d to %d seats", party.name, row, n, take)

        angles = sector.start + (np.arange(take) / n) * sector.span
        xs = cx + radius * np.cos(angles)
        ys = cy - radius * np.sin(angles)
        for angle, x, y in zip(angles, xs, ys):
            yield row, float(angle), float(x), float(y)
        remaining -= take

def layout(
    config: GeometryConfig,
    parties: Sequence[PartyEntry],
    occupants: Sequence[OccupantEntry] = (),
) -> list[SeatRecord]:
    """
    Compute every seat of the hemicycle.

    Output order: party order, then rows outer to inner, then angle within
    the row. Seats with no matching occupant get an "Unoccupied" occupant
    carrying the seat's own party. Occupants whose seat_id matches nothing
    are ignored.

    Raises InvalidConfiguration / InvalidPartyData before anything is placed.
    """
    config.validate()
    parties = list(parties)
    declared = validate_parties(parties)
    if not parties:
        return []

    sectors = party_sectors(config, parties)
    radii = row_radii(config)
    index = index_occupants(occupants)

    seats: list[SeatRecord] = []
    for party, sector in zip(parties, sectors):
        for row, angle, x, y in _place_party(config, party, sector, radii):
            sid = seat_id(len(seats) + 1)
            seats.append(SeatRecord(
                seat_id=sid,
                party=party.name,
                color=party.color,
                x=x,
                y=y,
                row=row,
                angle=angle,
                occupant=resolve_occupant(index, sid, party.name),
            ))

    if index:
        stray = unmatched_occupants(index, (s.seat_id for s in seats))
        if stray:
            logger.debug("%d occupants matched no seat: %s", len(stray), [o.seat_id for o in stray][:10])

    logger.info(
        "Laid out %d of %d declared seats for %d parties over %d rows",
        len(seats), declared, len(parties), config.rows,
    )
    return seats
