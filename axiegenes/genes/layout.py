"""Bit layouts for 256-bit (compact) and 512-bit (extended) gene codes.

A gene hex is parsed into an unsigned integer, rendered as a binary string
left-padded to the layout width, and sliced at fixed offsets:

  Compact (256):  class[0:4] reserved[4:8] region[8:13] tag[13:18]
                  body_skin[18:22] xmas[22:34] pattern[34:52] color[52:64]
                  then six 32-bit parts from bit 64.
  Extended (512): class[0:5] reserved[5:10] region[10:15] tag[15:30]
                  body_skin[30:34] xmas[34:46] pattern[46:73] color[73:91]
                  then six 64-bit parts from bit 128.

Parts appear in the order eyes, mouth, ears, horn, back, tail.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from axiegenes.genes import enums
from axiegenes.genes.constants import COMPACT_BITS, EXTENDED_BITS, PART_TYPES
from axiegenes.genes.errors import LayoutError, ParseError

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"0[xX]([0-9a-fA-F]+)")


@dataclass(frozen=True, eq=False)
class Layout:
    """Offsets and code tables for one gene width."""
    name: str
    bits: int
    fields: dict[str, tuple[int, int]]          # field -> (start, end) in the padded string
    part_slices: dict[str, tuple[int, int]]     # sub-field -> (start, end) within a part field
    class_codes: dict[str, str]
    tag_codes: dict[str, Optional[str]]
    skin_codes: dict[str, str]
    infers_tag: bool = False                    # bionic parts imply the agamogenesis tag

    def width(self, field: str) -> int:
        start, end = self.fields[field]
        return end - start

    def part_width(self, sub_field: str) -> int:
        start, end = self.part_slices[sub_field]
        return end - start


def _part_fields(first: int, size: int) -> dict[str, tuple[int, int]]:
    return {
        part_type: (first + i * size, first + (i + 1) * size)
        for i, part_type in enumerate(PART_TYPES)
    }


COMPACT = Layout(
    name="compact",
    bits=COMPACT_BITS,
    fields={
        "cls": (0, 4),
        "reserved": (4, 8),
        "region": (8, 13),
        "tag": (13, 18),
        "body_skin": (18, 22),
        "xmas": (22, 34),
        "pattern": (34, 52),
        "color": (52, 64),
        **_part_fields(64, 32),
    },
    part_slices={
        "skin": (0, 2),
        "d_class": (2, 6),
        "d_code": (6, 12),
        "r1_class": (12, 16),
        "r1_code": (16, 22),
        "r2_class": (22, 26),
        "r2_code": (26, 32),
    },
    class_codes=enums.CLASS_4BIT,
    tag_codes=enums.TAG_5BIT,
    skin_codes=enums.PART_SKIN_2BIT,
)

EXTENDED = Layout(
    name="extended",
    bits=EXTENDED_BITS,
    fields={
        "cls": (0, 5),
        "reserved": (5, 10),
        "region": (10, 15),
        "tag": (15, 30),
        "body_skin": (30, 34),
        "xmas": (34, 46),
        "pattern": (46, 73),
        "color": (73, 91),
        # 91:128 unused
        **_part_fields(128, 64),
    },
    part_slices={
        "skin": (0, 4),
        "d_class": (4, 9),
        "d_code": (11, 17),
        "r1_class": (17, 22),
        "r1_code": (24, 30),
        "r2_class": (30, 35),
        "r2_code": (37, 43),
    },
    class_codes=enums.CLASS_5BIT,
    tag_codes=enums.TAG_15BIT,
    skin_codes=enums.PART_SKIN_4BIT,
    infers_tag=True,
)

LAYOUTS: dict[str, Layout] = {COMPACT.name: COMPACT, EXTENDED.name: EXTENDED}


@dataclass(frozen=True)
class GeneBinGroup:
    """A gene binary string sliced into its named fields."""
    layout: Layout
    cls: str
    reserved: str
    region: str
    tag: str
    body_skin: str
    xmas: str
    pattern: str
    color: str
    eyes: str
    mouth: str
    ears: str
    horn: str
    back: str
    tail: str

    def part(self, part_type: str) -> str:
        """Get the raw binary field of a body part."""
        return getattr(self, part_type)

    def part_skins(self) -> list[str]:
        """Skin selector bits of every part's dominant gene."""
        start, end = self.layout.part_slices["skin"]
        return [self.part(part_type)[start:end] for part_type in PART_TYPES]


def resolve_layout(
    layout: Union[Layout, str, None], bit_length: int, hex_digits: int = 0,
) -> Layout:
    """Pick a layout: an explicit choice, or the narrowest one the value fits.

    When choosing automatically, a hex written with more digits than the
    compact layout holds is read as extended even if its top bits are zero.
    """
    if isinstance(layout, str):
        if layout == "auto":
            layout = None
        elif layout in LAYOUTS:
            layout = LAYOUTS[layout]
        else:
            raise LayoutError(f"Unknown layout {layout!r} (expected one of {', '.join(LAYOUTS)})")

    if layout is None:
        if hex_digits * 4 > COMPACT_BITS and bit_length <= EXTENDED_BITS:
            return EXTENDED
        for candidate in (COMPACT, EXTENDED):
            if bit_length <= candidate.bits:
                return candidate
        raise LayoutError(f"Gene is {bit_length} bits wide, larger than any layout ({EXTENDED_BITS})")

    if bit_length > layout.bits:
        raise LayoutError(
            f"Gene is {bit_length} bits wide, cannot fit the {layout.name} layout ({layout.bits})"
        )
    return layout


def hex_to_int(hex_str: str) -> int:
    """Parse a 0x-prefixed hex string into an unsigned integer."""
    if not isinstance(hex_str, str):
        raise ParseError(repr(hex_str), "expected a string")
    m = _HEX_RE.fullmatch(hex_str)
    if m is None:
        if not hex_str:
            reason = "empty string"
        elif hex_str[:2].lower() != "0x":
            reason = "missing 0x prefix"
        else:
            reason = "invalid hex digits"
        raise ParseError(hex_str, reason)
    return int(m.group(1), 16)


def to_binary(value: int, layout: Layout) -> str:
    """Render an integer as a binary string padded to the layout width."""
    bin_str = format(value, "b").zfill(layout.bits)
    if len(bin_str) != layout.bits:
        raise LayoutError(f"Binary string is {len(bin_str)} bits, expected {layout.bits}")
    return bin_str


def slice_fields(bin_str: str, layout: Layout) -> GeneBinGroup:
    """Slice a padded binary string into a GeneBinGroup."""
    if len(bin_str) != layout.bits:
        raise LayoutError(f"Binary string is {len(bin_str)} bits, expected {layout.bits}")
    values = {name: bin_str[start:end] for name, (start, end) in layout.fields.items()}
    return GeneBinGroup(layout=layout, **values)


def parse_hex(hex_str: str, layout: Union[Layout, str, None] = None) -> GeneBinGroup:
    """Parse a gene hex into its binary fields.

    ``layout`` may be a Layout, a layout name ("compact", "extended",
    "auto"), or None to choose by the width of the hex as written.
    """
    value = hex_to_int(hex_str)
    selected = resolve_layout(layout, value.bit_length(), len(hex_str) - 2)
    logger.debug("Parsing %s as %s layout", hex_str, selected.name)
    return slice_fields(to_binary(value, selected), selected)
