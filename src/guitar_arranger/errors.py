"""Errors raised by the arrangement engine.

Every error derives from :class:`ArrangementError`, itself a ``ValueError``,
so callers can catch the whole family at once.  No error is retryable: each
one tells the caller to change its input.
"""

from __future__ import annotations

from dataclasses import dataclass


class ArrangementError(ValueError):
    """Base class for all arrangement-engine errors."""


@dataclass(frozen=True)
class InvalidInput:
    """One offending value together with its 1-based input line."""

    value: str
    line_number: int


class InvalidPitchError(ArrangementError):
    """One or more pitches cannot be played on the configured fretboard.

    All offending pitches of the whole input are reported together.
    """

    def __init__(self, invalid_pitches: list[InvalidInput]) -> None:
        self.invalid_pitches: list[InvalidInput] = list(invalid_pitches)
        message = "\n".join(
            f"Pitch {item.value} on line {item.line_number} cannot be played "
            "on any strings of the configured guitar."
            for item in self.invalid_pitches
        )
        super().__init__(message)


class InvalidRequestError(ArrangementError):
    """The requested number of arrangements is out of range."""


class NoArrangementsError(ArrangementError):
    """The search found no path through an otherwise valid input."""


class FretboardConfigError(ArrangementError):
    """Invalid fretboard configuration (frets, capo, strings, ranges)."""


class ParseError(ArrangementError):
    """One or more lines of text notation could not be parsed."""

    def __init__(self, invalid_lines: list[InvalidInput]) -> None:
        self.invalid_lines: list[InvalidInput] = list(invalid_lines)
        message = "\n".join(
            f"Line {item.line_number}: '{item.value}' is not a valid beat."
            for item in self.invalid_lines
        )
        super().__init__(message)
