from __future__ import annotations

import pandas as pd
import pytest

from hemicycle.config.constants import SEAT_COLS
from hemicycle.layout.errors import InvalidPartyData
from hemicycle.layout.frames import (
    build_layout_table,
    occupants_from_frame,
    parties_from_frame,
    seats_to_frame,
)
from hemicycle.layout.models import GeometryConfig, OccupantEntry, PartyEntry


def _parties_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "party": ["SPD", "CSU"],
            "seats": [206, 45],
            "color": ["red", "black"],
        }
    )


def test_parties_from_frame_keeps_row_order() -> None:
    parties = parties_from_frame(_parties_df())

    assert parties == [PartyEntry("SPD", 206, "red"), PartyEntry("CSU", 45, "black")]
    assert all(type(p.seats) is int for p in parties)


def test_parties_from_frame_custom_columns_and_no_color() -> None:
    df = pd.DataFrame({"party_id": ["A", "B"], "pr_seats": [3.0, 7.0]})

    parties = parties_from_frame(df, name_col="party_id", seats_col="pr_seats")

    assert parties == [PartyEntry("A", 3, None), PartyEntry("B", 7, None)]


def test_parties_from_frame_missing_column() -> None:
    with pytest.raises(ValueError, match="missing columns"):
        parties_from_frame(pd.DataFrame({"party": ["A"]}))


def test_parties_from_frame_null_seats() -> None:
    df = pd.DataFrame({"party": ["A", "B"], "seats": [3, None]})
    with pytest.raises(ValueError, match="nulls"):
        parties_from_frame(df)


def test_parties_from_frame_rejects_fractional_seats() -> None:
    df = pd.DataFrame({"party": ["A", "B"], "seats": [3, 2.5]})
    with pytest.raises(InvalidPartyData):
        parties_from_frame(df)


def test_parties_from_frame_rejects_text_seats() -> None:
    df = pd.DataFrame({"party": ["A"], "seats": ["many"]})
    with pytest.raises(InvalidPartyData):
        parties_from_frame(df)


def test_occupants_from_frame() -> None:
    df = pd.DataFrame(
        {
            "seat_id": ["seat-1", "seat-2"],
            "name": ["Alice", "Bob"],
            "party": ["SPD", "SPD"],
            "role": ["Chair", None],
        }
    )

    occupants = occupants_from_frame(df)

    assert occupants[0] == OccupantEntry("seat-1", "Alice", "SPD", "Chair")
    assert occupants[1].role == ""


def test_seats_to_frame_columns_and_order() -> None:
    df = build_layout_table(GeometryConfig(), _parties_df())

    assert list(df.columns) == SEAT_COLS
    assert len(df) == 251
    assert df["seat_id"].iloc[0] == "seat-1"
    assert df["seat_id"].iloc[-1] == "seat-251"
    assert df["party"].value_counts().to_dict() == {"SPD": 206, "CSU": 45}
    assert (df["occupant_name"] == "Unoccupied").all()


def test_build_layout_table_with_occupants() -> None:
    occupants = pd.DataFrame(
        {"seat_id": ["seat-3"], "name": ["Carol"], "party": ["SPD"], "role": ["Speaker"]}
    )

    df = build_layout_table(GeometryConfig(), _parties_df(), occupants).set_index("seat_id")

    assert df.loc["seat-3", "occupant_name"] == "Carol"
    assert df.loc["seat-3", "occupant_role"] == "Speaker"
    assert df.loc["seat-4", "occupant_name"] == "Unoccupied"


def test_seats_to_frame_empty() -> None:
    df = seats_to_frame([])

    assert df.empty
    assert list(df.columns) == SEAT_COLS


def test_parties_from_frame_rejects_duplicate_names() -> None:
    df = pd.DataFrame({"party": ["A", "A"], "seats": [3, 4]})
    with pytest.raises(ValueError, match="duplicate"):
        parties_from_frame(df)


def test_parties_from_frame_duplicates_are_party_data_errors() -> None:
    df = pd.DataFrame({"party": ["SPD", "CSU", "SPD"], "seats": [3, 4, 5]})
    with pytest.raises(InvalidPartyData, match="SPD"):
        parties_from_frame(df)


def test_parties_from_frame_rejects_infinite_seats() -> None:
    df = pd.DataFrame({"party": ["A", "B"], "seats": [3.0, float("inf")]})
    with pytest.raises(InvalidPartyData):
        parties_from_frame(df)
