"""Enum lookup dicts for binary-coded gene fields."""
from __future__ import annotations

from typing import Optional

from axiegenes.genes.constants import (
    AMBIENT,
    SKIN_BIONIC,
    SKIN_GLOBAL,
    SKIN_JAPAN,
    SKIN_MYSTIC,
    SKIN_XMAS2,
)
from axiegenes.genes.errors import UnknownValue


def lookup_enum(table: dict[str, Optional[str]], field: str, code: str) -> Optional[str]:
    """Return the value for a binary code, raising UnknownValue for unknowns."""
    try:
        return table[code]
    except KeyError:
        raise UnknownValue(field, code) from None


# Class, compact layout (4 bits)
CLASS_4BIT: dict[str, str] = {
    "0000": "beast",
    "0001": "bug",
    "0010": "bird",
    "0011": "plant",
    "0100": "aquatic",
    "0101": "reptile",
    "1000": "mech",
    "1001": "dawn",
    "1010": "dusk",
}

# Class, extended layout (5 bits)
CLASS_5BIT: dict[str, str] = {
    "00000": "beast",
    "00001": "bug",
    "00010": "bird",
    "00011": "plant",
    "00100": "aquatic",
    "00101": "reptile",
    "10000": "mech",
    "10001": "dawn",
    "10010": "dusk",
}

# Region (5 bits, both layouts)
REGION: dict[str, str] = {
    "00000": SKIN_GLOBAL,
    "00001": SKIN_JAPAN,
}

# Tag, compact layout (5 bits)
TAG_5BIT: dict[str, Optional[str]] = {
    "00000": None,
    "00001": "origin",
    "00011": "meo1",
    "00100": "meo2",
}

# Tag, extended layout (15 bits)
TAG_15BIT: dict[str, Optional[str]] = {
    "000000000000000": None,
    "000000000000001": "origin",
    "000000000000010": "meo1",
    "000000000000011": "meo2",
}

# Body skin (4 bits)
BODY_SKIN: dict[str, Optional[str]] = {
    "0000": None,
    "0001": "frosty",
}

# Dominant part skin selector, compact layout (2 bits)
PART_SKIN_2BIT: dict[str, str] = {
    "00": AMBIENT,
    "01": SKIN_BIONIC,
    "10": SKIN_XMAS2,
    "11": SKIN_MYSTIC,
}

# Dominant part skin selector, extended layout (4 bits)
PART_SKIN_4BIT: dict[str, str] = {
    "0000": AMBIENT,
    "0001": SKIN_BIONIC,
    "0010": SKIN_XMAS2,
    "0011": SKIN_MYSTIC,
}

# Color swatches per class, keyed by the low 4 bits of a color code
CLASS_COLORS: dict[str, dict[str, str]] = {
    "beast": {"0010": "ffec51", "0011": "ffa12a", "0100": "f0c66e", "0110": "60afce", "0000": "ffffff"},
    "bug": {"0010": "ff7183", "0011": "ff6d61", "0100": "f74e4e", "0000": "ffffff"},
    "bird": {"0010": "ff9ab8", "0011": "ffb4bb", "0100": "ff778e", "0000": "ffffff"},
    "plant": {"0010": "ccef5e", "0011": "efd636", "0100": "c5ffd9", "0000": "ffffff"},
    "aquatic": {"0010": "4cffdf", "0011": "2de8f2", "0100": "759edb", "0110": "ff5a71", "0000": "ffffff"},
    "reptile": {"0010": "fdbcff", "0011": "ef93ff", "0100": "f5e1ff", "0110": "43e27d", "0000": "ffffff"},
    "mech": {"0010": "d9d9d9", "0011": "d9d9d9", "0100": "d9d9d9", "0110": "d9d9d9", "0000": "ffffff"},
    "dusk": {"0010": "d9d9d9", "0011": "d9d9d9", "0100": "d9d9d9", "0110": "d9d9d9", "0000": "ffffff"},
    "dawn": {"0010": "d9d9d9", "0011": "d9d9d9", "0100": "d9d9d9", "0110": "d9d9d9", "0000": "ffffff"},
}
