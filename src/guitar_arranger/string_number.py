"""String numbering — 1-based guitar string identifiers."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import MAX_NUM_STRINGS
from .errors import FretboardConfigError


@dataclass(frozen=True, order=True)
class StringNumber:
    """A validated string number; string 1 is the highest-pitched string."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise FretboardConfigError(
                "A guitar cannot have a string number of zero (0). "
                "Guitar string numbering commences at one (1)."
            )
        if self.value < 0:
            raise FretboardConfigError(
                f"The string number ({self.value}) cannot be negative. "
                "Guitar string numbering commences at one (1)."
            )
        if self.value > MAX_NUM_STRINGS:
            raise FretboardConfigError(
                f"The string number ({self.value}) is too high. "
                f"The maximum is {MAX_NUM_STRINGS}."
            )

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
