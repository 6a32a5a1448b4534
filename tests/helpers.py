"""Bit-string builders for test genes."""
from __future__ import annotations

SAMPLE_HEX = "0x11c642400a028ca14a428c20cc011080c61180a0820180604233082"

SAMPLE_BINARY = (
    "0000000000000000000000000000000000000001000111000110010000100100"
    "0000000010100000001010001100101000010100101001000010100011000010"
    "0000110011000000000100010000100000001100011000010001100000001010"
    "0000100000100000000110000000011000000100001000110011000010000010"
)

PART_ORDER = ("eyes", "mouth", "ears", "horn", "back", "tail")

CLASS_4BIT = {
    "beast": "0000", "bug": "0001", "bird": "0010", "plant": "0011", "aquatic": "0100",
    "reptile": "0101", "mech": "1000", "dawn": "1001", "dusk": "1010",
}

CLASS_5BIT = {
    "beast": "00000", "bug": "00001", "bird": "00010", "plant": "00011", "aquatic": "00100",
    "reptile": "00101", "mech": "10000", "dawn": "10001", "dusk": "10010",
}

# (class, trait code) for d, r1, r2 of every part in SAMPLE_HEX
SAMPLE_PARTS = {
    "eyes": (("beast", "001010"), ("beast", "001010"), ("plant", "001010")),
    "mouth": (("reptile", "001010"), ("aquatic", "001010"), ("plant", "000010")),
    "ears": (("plant", "001100"), ("beast", "000100"), ("aquatic", "001000")),
    "horn": (("plant", "000110"), ("bug", "000110"), ("beast", "001010")),
    "back": (("bird", "000010"), ("beast", "000110"), ("beast", "000110")),
    "tail": (("bug", "000010"), ("plant", "001100"), ("bird", "000010")),
}

ALL_BEAST_PARTS = {
    "eyes": (("beast", "001010"),) * 3,
    "mouth": (("beast", "000100"),) * 3,
    "ears": (("beast", "000100"),) * 3,
    "horn": (("beast", "001010"),) * 3,
    "back": (("beast", "000110"),) * 3,
    "tail": (("beast", "000100"),) * 3,
}

ALL_PLANT_PARTS = {
    "eyes": (("plant", "001010"),) * 3,
    "mouth": (("plant", "000010"),) * 3,
    "ears": (("plant", "001100"),) * 3,
    "horn": (("plant", "000110"),) * 3,
    "back": (("plant", "000100"),) * 3,
    "tail": (("plant", "001100"),) * 3,
}


def to_hex(bin_str: str) -> str:
    return "0x" + format(int(bin_str, 2), "x")


def compact_part(slots, skin: str = "00") -> str:
    bits = skin + "".join(CLASS_4BIT[cls] + code for cls, code in slots)
    assert len(bits) == 32
    return bits


def extended_part(slots, skin: str = "0000") -> str:
    bits = skin + "".join(CLASS_5BIT[cls] + "00" + code for cls, code in slots)
    bits += "0" * (64 - len(bits))
    assert len(bits) == 64
    return bits


def compact_gene(parts=SAMPLE_PARTS, cls="beast", region="00000", tag="00000",
                 body_skin="0000", xmas="0" * 12, pattern="000001000111000110",
                 color="010000100100", skins=None) -> str:
    skins = skins or {}
    bits = (
        CLASS_4BIT[cls] + "0000" + region + tag + body_skin + xmas + pattern + color
        + "".join(compact_part(parts[p], skins.get(p, "00")) for p in PART_ORDER)
    )
    assert len(bits) == 256
    return bits


def extended_gene(parts=SAMPLE_PARTS, cls="beast", region="00000", tag="0" * 15,
                  body_skin="0000", xmas="0" * 12, pattern="000000001000000111000000110",
                  color="000100000010000100", skins=None) -> str:
    skins = skins or {}
    bits = (
        CLASS_5BIT[cls] + "00000" + region + tag + body_skin + xmas + pattern + color
        + "0" * 37
        + "".join(extended_part(parts[p], skins.get(p, "0000")) for p in PART_ORDER)
    )
    assert len(bits) == 512
    return bits
