"""Domain helpers for favourite colour validation and colour code lookups."""
from __future__ import annotations

import unicodedata
from enum import Enum


class ColourError(ValueError):
    """Base exception for colour validation."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class InvalidColourError(ColourError):
    """Raised when a colour string is blank or not one of the allowed values."""


class UnsupportedColourCodeError(ColourError):
    """Raised when a colour code is outside 1-7."""


class FavouriteColour(str, Enum):
    BLAU = "blau"
    GRUEN = "grün"
    VIOLETT = "violett"
    ROT = "rot"
    GELB = "gelb"
    TUERKIS = "türkis"
    WEISS = "weiß"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, raw: str | None) -> "FavouriteColour":
        return normalize_colour(raw)

    @classmethod
    def from_code(cls, code: int) -> "FavouriteColour":
        return colour_from_code(code)


ALLOWED_COLOURS = {colour.value: colour for colour in FavouriteColour}

ASCII_FALLBACKS = {
    "gruen": "grün",
    "tuerkis": "türkis",
    "weiss": "weiß",
}

COLOUR_CODES = {
    1: FavouriteColour.BLAU,
    2: FavouriteColour.GRUEN,
    3: FavouriteColour.VIOLETT,
    4: FavouriteColour.ROT,
    5: FavouriteColour.GELB,
    6: FavouriteColour.TUERKIS,
    7: FavouriteColour.WEISS,
}


def normalize_colour(raw: str | None) -> FavouriteColour:
    """
    Map a free-form colour string onto its canonical FavouriteColour.

    Input is NFC-composed, trimmed and lowercased with str.lower() (casefold
    would turn "ß" into "ss"), then the ASCII spellings "gruen", "tuerkis" and
    "weiss" are replaced by their canonical form.
    """
    if isinstance(raw, FavouriteColour):
        return raw
    if raw is None or not str(raw).strip():
        raise InvalidColourError("Favourite colour must not be empty.", raw)
    candidate = unicodedata.normalize("NFC", str(raw)).strip().lower()
    candidate = ASCII_FALLBACKS.get(candidate, candidate)
    colour = ALLOWED_COLOURS.get(candidate)
    if colour is None:
        allowed = ", ".join(ALLOWED_COLOURS)
        raise InvalidColourError(f"Invalid colour '{raw}'. Allowed values: {allowed}", raw)
    return colour


def colour_from_code(code: int) -> FavouriteColour:
    """Return the colour for a seed-file colour code (1-7)."""
    # bool is an int subclass; True must not pass as code 1
    if isinstance(code, bool) or not isinstance(code, int):
        raise UnsupportedColourCodeError(f"Unsupported colour code: {code!r}", code)
    try:
        return COLOUR_CODES[code]
    except KeyError:
        raise UnsupportedColourCodeError(f"Unsupported colour code: {code}", code) from None
