"""Shared test fixtures for the strutil test suite.

WHY: Several test modules need the same Latin-1 sample text and the same
band boundaries. Centralizing them keeps the expectations in one place.

HOW: Plain pytest fixtures returning literals. Byte values are written
in hex so the band edges (0xC0, 0xDF, 0xE0, 0xFF) are easy to spot.

RULES:
- Sample text only uses characters present in latin-1
- Fixtures return fresh objects; tests may mutate them
"""

import pytest

# Accented pairs in the latin-1 casing bands: (upper, lower)
ACCENTED_PAIRS = [
    (0xC0, 0xE0),  # À à
    (0xC7, 0xE7),  # Ç ç
    (0xC9, 0xE9),  # É é
    (0xD1, 0xF1),  # Ñ ñ
    (0xD6, 0xF6),  # Ö ö
    (0xDE, 0xFE),  # Þ þ
]


@pytest.fixture
def accented_pairs():
    return list(ACCENTED_PAIRS)


@pytest.fixture
def latin1_sample():
    """Mixed ASCII / accented text and its expected upper and lower forms."""
    return {
        "text": "Ça va? Årets möte i Göteborg, señor.",
        "upper": "ÇA VA? ÅRETS MÖTE I GÖTEBORG, SEÑOR.",
        "lower": "ça va? årets möte i göteborg, señor.",
    }
