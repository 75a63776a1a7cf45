from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class ProjectPaths:
    root: Path

    @property
    def data(self) -> Path:
        return self.root / "data"

    @property
    def inputs(self) -> Path:
        return self.data / "inputs"

    @property
    def outputs(self) -> Path:
        return self.data / "outputs"


def get_project_root() -> Path:
    # repo_root/hemicycle/config/paths.py -> repo_root
    return Path(__file__).resolve().parents[2]


PATHS = ProjectPaths(root=get_project_root())
