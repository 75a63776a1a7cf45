from __future__ import annotations
import logging
from typing import Iterable, Mapping

from hemicycle.layout.models import OccupantEntry

logger = logging.getLogger(__name__)

def index_occupants(occupants: Iterable[OccupantEntry]) -> dict[str, OccupantEntry]:
    """
    Map seat_id -> occupant. A later entry for the same seat wins.
    """
    index: dict[str, OccupantEntry] = {}
    for occ in occupants:
        if occ.seat_id in index:
            logger.warning("Duplicate occupant for %s; keeping the last one", occ.seat_id)
        index[occ.seat_id] = occ
    return index

def resolve_occupant(index: Mapping[str, OccupantEntry], seat_id: str, party: str) -> OccupantEntry:
    found = index.get(seat_id)
    if found is not None:
        return found
    return OccupantEntry.unoccupied(seat_id, party)

def unmatched_occupants(index: Mapping[str, OccupantEntry], seat_ids: Iterable[str]) -> list[OccupantEntry]:
    """Occupants whose seat_id names no generated seat (ignored by the layout)."""
    placed = set(seat_ids)
    return [occ for sid, occ in index.items() if sid not in placed]
