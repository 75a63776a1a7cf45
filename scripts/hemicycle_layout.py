from __future__ import annotations
import logging

from hemicycle.config.paths import PATHS
from hemicycle.layout.frames import build_layout_table
from hemicycle.layout.models import GeometryConfig
from hemicycle.logging_config import setup_logging
from hemicycle.utils.io import read_csv, write_csv

PARTIES_PATH = PATHS.inputs / "parties.csv"
OCCUPANTS_PATH = PATHS.inputs / "occupants.csv"  # optional

def main():
    setup_logging(logging.INFO)

    parties = read_csv(PARTIES_PATH)
    occupants = read_csv(OCCUPANTS_PATH) if OCCUPANTS_PATH.exists() else None

    config = GeometryConfig(rows=6, party_gap=0.0)
    out = build_layout_table(config, parties, occupants)
    write_csv(out, PATHS.outputs / "hemicycle_seats.csv")

    print(out.groupby("party", sort=False).size().rename("placed").to_frame()
          .join(parties.set_index("party")["seats"].rename("declared")))

if __name__ == "__main__":
    main()
