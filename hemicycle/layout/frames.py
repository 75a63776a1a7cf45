from __future__ import annotations
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from hemicycle.config.constants import OCCUPANT_COLS, SEAT_COLS
from hemicycle.layout.engine import layout
from hemicycle.layout.errors import InvalidPartyData
from hemicycle.layout.models import GeometryConfig, OccupantEntry, PartyEntry, SeatRecord
from hemicycle.utils.validate import require_columns, require_no_nulls, require_unique

def parties_from_frame(
    df: pd.DataFrame,
    name_col: str = "party",
    seats_col: str = "seats",
    color_col: str = "color",
) -> list[PartyEntry]:
    """
    One PartyEntry per row, in row order (row order = seating order).
    Seat counts must be whole numbers; the color column is optional.
    """
    require_columns(df, [name_col, seats_col], name="parties")
    require_no_nulls(df, [name_col, seats_col], name="parties")
    try:
        require_unique(df, name_col, name="parties")
    except ValueError as e:
        raise InvalidPartyData(str(e)) from e

    seats = pd.to_numeric(df[seats_col], errors="coerce")
    bad_mask = ~np.isfinite(seats) | (seats != seats.round())
    if bad_mask.any():
        bad = df.loc[bad_mask, [name_col, seats_col]].head(20)
        raise InvalidPartyData(f"Non-integer seat counts in '{seats_col}'. Example rows:\n{bad}")

    colors = df[color_col] if color_col in df.columns else pd.Series([None] * len(df), index=df.index)
    return [
        PartyEntry(name=str(name), seats=int(n), color=None if pd.isna(color) else color)
        for name, n, color in zip(df[name_col], seats, colors)
    ]

def occupants_from_frame(df: pd.DataFrame) -> list[OccupantEntry]:
    require_columns(df, OCCUPANT_COLS, name="occupants")
    require_no_nulls(df, ["seat_id"], name="occupants")
    out = df[OCCUPANT_COLS].fillna("")
    return [
        OccupantEntry(seat_id=str(sid), name=str(name), party=str(party), role=str(role))
        for sid, name, party, role in out.itertuples(index=False, name=None)
    ]

def seats_to_frame(seats: Sequence[SeatRecord]) -> pd.DataFrame:
    rows = []
    for s in seats:
        occ = s.occupant
        rows.append({
            "seat_id": s.seat_id,
            "party": s.party,
            "color": s.color,
            "row": s.row,
            "angle": s.angle,
            "x": s.x,
            "y": s.y,
            "occupant_name": occ.name if occ else None,
            "occupant_party": occ.party if occ else None,
            "occupant_role": occ.role if occ else None,
        })
    return pd.DataFrame(rows, columns=SEAT_COLS)

def build_layout_table(
    config: GeometryConfig,
    parties_df: pd.DataFrame,
    occupants_df: Optional[pd.DataFrame] = None,
) -> pd.DataFrame:
    parties = parties_from_frame(parties_df)
    occupants = occupants_from_frame(occupants_df) if occupants_df is not None else []
    return seats_to_frame(layout(config, parties, occupants))
