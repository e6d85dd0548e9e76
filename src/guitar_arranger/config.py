"""Configuration — YAML-backed defaults for the arranger entry points.

Settings are loaded from ``configs/arranger.yaml`` shipped inside the
package unless another path is given.  If a required key is missing a
``ValueError`` is raised naming the key and the file.

Cost weights live in ``constants`` and are not read from here.
"""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path
from typing import Any

import yaml

from .fretboard import Fretboard, tuning_from_pitches
from .pitch import Pitch
from .string_number import StringNumber

DEFAULT_CONFIG_PATH: Path = Path(str(files("guitar_arranger") / "configs" / "arranger.yaml"))

REQUIRED_KEYS: list[str] = [
    "tuning",
    "fret_count",
    "capo",
    "num_arrangements",
    "tab_width",
    "tab_padding",
    "rest_gap_seconds",
    "tunings",
]


class ArrangerConfig:
    """Arranger settings loaded from YAML.

    Args:
        config_path: Path to the YAML configuration file.
    """

    def __init__(self, config_path: str | Path | None = None) -> None:
        config_path = DEFAULT_CONFIG_PATH if config_path is None else Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Arranger config not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as fh:
            self._cfg: dict[str, Any] = yaml.safe_load(fh) or {}

        for key in REQUIRED_KEYS:
            if key not in self._cfg:
                raise ValueError(
                    f"Missing required key '{key}' in arranger config: {config_path}"
                )

        self.path: Path = config_path
        self.tunings: dict[str, list[str]] = {
            str(name).strip().lower(): [str(p) for p in pitches]
            for name, pitches in self._cfg["tunings"].items()
        }
        self.tuning: str = str(self._cfg["tuning"])
        self.fret_count: int = int(self._cfg["fret_count"])
        self.capo: int = int(self._cfg["capo"])
        self.num_arrangements: int = int(self._cfg["num_arrangements"])
        self.tab_width: int = int(self._cfg["tab_width"])
        self.tab_padding: int = int(self._cfg["tab_padding"])
        self.rest_gap_seconds: float = float(self._cfg["rest_gap_seconds"])

        # Fail early on a misspelled default tuning
        self.tuning_pitches(self.tuning)

    def tuning_pitches(self, name: str) -> dict[StringNumber, Pitch]:
        """Resolve a named tuning preset into a ``StringNumber → Pitch`` map.

        Raises:
            ValueError: If *name* is not a configured tuning.
        """
        key = name.strip().lower()
        if key not in self.tunings:
            known = ", ".join(sorted(self.tunings))
            raise ValueError(f"Unknown tuning '{name}'. Known tunings: {known}")
        return tuning_from_pitches(self.tunings[key])

    def build_fretboard(
        self,
        tuning: str | None = None,
        fret_count: int | None = None,
        capo: int | None = None,
    ) -> Fretboard:
        """Build a fretboard from the config, with optional overrides."""
        return Fretboard.build(
            self.tuning_pitches(tuning or self.tuning),
            self.fret_count if fret_count is None else fret_count,
            self.capo if capo is None else capo,
        )
