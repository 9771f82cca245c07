"""Bundled puzzles, as 81-character strings with 0 for blanks."""

from typing import Dict

# Arto Inkala's 2012 puzzle; needs deep backtracking.
INKALA = (
    "800000000"
    "003600000"
    "070090200"
    "050007000"
    "000045700"
    "000100030"
    "001000068"
    "008500010"
    "090000400"
)

CLASSIC = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

CLASSIC_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

EASY = (
    "003020600"
    "900305001"
    "001806400"
    "008102900"
    "700000008"
    "006708200"
    "002609500"
    "800203009"
    "005010300"
)

MEDIUM = (
    "000100394"
    "200090006"
    "500000000"
    "020807000"
    "400050030"
    "863000070"
    "000006283"
    "100003059"
    "000080000"
)

BLANK = "0" * 81

PUZZLES: Dict[str, str] = {
    "easy": EASY,
    "classic": CLASSIC,
    "medium": MEDIUM,
    "inkala": INKALA,
    "blank": BLANK,
}

DEFAULT_PUZZLE = "inkala"
