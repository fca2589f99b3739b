from __future__ import annotations

import pytest

from persons_api.domain.colours import (
    FavouriteColour,
    InvalidColourError,
    UnsupportedColourCodeError,
    colour_from_code,
    normalize_colour,
)


@pytest.mark.parametrize(
    "code, expected",
    [
        (1, "blau"),
        (2, "grün"),
        (3, "violett"),
        (4, "rot"),
        (5, "gelb"),
        (6, "türkis"),
        (7, "weiß"),
    ],
)
def test_colour_from_code_maps_known_codes(code, expected):
    assert colour_from_code(code).value == expected


@pytest.mark.parametrize("code", [0, -1, 8, 999, True, "1", 1.0])
def test_colour_from_code_rejects_unsupported_codes(code):
    with pytest.raises(UnsupportedColourCodeError) as excinfo:
        colour_from_code(code)
    assert excinfo.value.value == code


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("blau", "blau"),
        (" Blau ", "blau"),
        ("BLAU", "blau"),
        ("grün", "grün"),
        (" GRÜN ", "grün"),
        ("Türkis", "türkis"),
        ("weiß", "weiß"),
        ("WEIß", "weiß"),
        ("\tviolett\n", "violett"),
    ],
)
def test_normalize_trims_and_lowercases(raw, expected):
    assert normalize_colour(raw).value == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("gruen", "grün"),
        (" tuerkis ", "türkis"),
        ("WEISS", "weiß"),
        ("Gruen", "grün"),
    ],
)
def test_normalize_accepts_ascii_fallbacks(raw, expected):
    assert normalize_colour(raw).value == expected


def test_normalize_composes_decomposed_umlauts():
    decomposed = "gru\u0308n"
    assert decomposed != "grün"
    assert normalize_colour(decomposed) is FavouriteColour.GRUEN


@pytest.mark.parametrize("raw", ["", " ", None])
def test_normalize_rejects_blank(raw):
    with pytest.raises(InvalidColourError):
        normalize_colour(raw)


@pytest.mark.parametrize("raw", ["pink", "blue", "1", "gruen!", "weis", "ss"])
def test_normalize_rejects_unknown(raw):
    with pytest.raises(InvalidColourError) as excinfo:
        normalize_colour(raw)
    assert "Allowed values" in str(excinfo.value)


def test_every_code_round_trips_through_normalize():
    for code in range(1, 8):
        colour = colour_from_code(code)
        assert normalize_colour(colour.value.upper()) is colour


def test_enum_classmethods_and_str():
    assert FavouriteColour.from_value(" GRUEN ") is FavouriteColour.GRUEN
    assert FavouriteColour.from_code(7) is FavouriteColour.WEISS
    assert str(FavouriteColour.TUERKIS) == "türkis"
    assert FavouriteColour("rot") is FavouriteColour.ROT
