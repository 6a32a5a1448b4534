"""Scalar field resolvers: class, region, tag, body skin, pattern, color, part skin."""
import dataclasses

import pytest

from axiegenes.genes.decoders import (
    ambient_skin,
    get_body_skin,
    get_class,
    get_color_genes,
    get_part_skin,
    get_pattern_genes,
    get_region,
    get_tag,
)
from axiegenes.genes.errors import LayoutError, UnknownValue
from axiegenes.genes.layout import COMPACT, EXTENDED, parse_hex, slice_fields
from axiegenes.genes.records import TraitTriplet
from helpers import SAMPLE_HEX, compact_gene, extended_gene


@pytest.fixture
def sample():
    return parse_hex(SAMPLE_HEX)


@pytest.mark.parametrize("code,expected", [
    ("0000", "beast"), ("0001", "bug"), ("0010", "bird"), ("0011", "plant"), ("0100", "aquatic"),
    ("0101", "reptile"), ("1000", "mech"), ("1001", "dawn"), ("1010", "dusk"),
])
def test_compact_class(sample, code, expected):
    assert get_class(dataclasses.replace(sample, cls=code)) == expected


def test_unknown_class(sample):
    with pytest.raises(UnknownValue) as excinfo:
        get_class(dataclasses.replace(sample, cls="1111"))
    assert excinfo.value.field == "class"
    assert excinfo.value.code == "1111"


def test_class_wrong_width(sample):
    with pytest.raises(LayoutError):
        get_class(dataclasses.replace(sample, cls="00000"))


def test_extended_class():
    gbg = slice_fields(extended_gene(cls="dusk"), EXTENDED)
    assert gbg.cls == "10010"
    assert get_class(gbg) == "dusk"


def test_region(sample):
    assert get_region(sample) == "global"
    assert get_region(dataclasses.replace(sample, region="00001")) == "japan"
    with pytest.raises(UnknownValue):
        get_region(dataclasses.replace(sample, region="11111"))
    with pytest.raises(LayoutError):
        get_region(dataclasses.replace(sample, region="000000"))


def test_compact_tag(sample):
    assert get_tag(sample) is None
    assert get_tag(dataclasses.replace(sample, tag="00001")) == "origin"
    assert get_tag(dataclasses.replace(sample, tag="00011")) == "meo1"
    assert get_tag(dataclasses.replace(sample, tag="00100")) == "meo2"
    with pytest.raises(UnknownValue):
        get_tag(dataclasses.replace(sample, tag="11111"))


def test_compact_tag_is_never_inferred():
    gbg = slice_fields(compact_gene(skins={"tail": "01"}), COMPACT)
    assert get_tag(gbg) is None


def test_extended_tag_table():
    gbg = slice_fields(extended_gene(tag="000000000000001"), EXTENDED)
    assert get_tag(gbg) == "origin"
    gbg = slice_fields(extended_gene(tag="000000000000011"), EXTENDED)
    assert get_tag(gbg) == "meo2"


def test_extended_tag_inferred_from_bionic_part():
    gbg = slice_fields(extended_gene(skins={"tail": "0001"}), EXTENDED)
    assert get_tag(gbg) == "agamogenesis"


def test_extended_tag_without_bionic_part():
    gbg = slice_fields(extended_gene(skins={"tail": "0011", "eyes": "0010"}), EXTENDED)
    assert get_tag(gbg) is None


def test_explicit_tag_wins_over_bionic_part():
    gbg = slice_fields(extended_gene(tag="000000000000001", skins={"tail": "0001"}), EXTENDED)
    assert get_tag(gbg) == "origin"


def test_body_skin(sample):
    assert get_body_skin(sample) is None
    assert get_body_skin(dataclasses.replace(sample, body_skin="0001")) == "frosty"
    with pytest.raises(UnknownValue):
        get_body_skin(dataclasses.replace(sample, body_skin="0011"))


def test_pattern(sample):
    assert get_pattern_genes(sample) == TraitTriplet("000001", "000111", "000110")
    with pytest.raises(LayoutError):
        get_pattern_genes(dataclasses.replace(sample, pattern="01010101010"))


def test_extended_pattern():
    gbg = slice_fields(extended_gene(), EXTENDED)
    assert get_pattern_genes(gbg) == TraitTriplet("000000001", "000000111", "000000110")


def test_color(sample):
    assert get_color_genes(sample) == TraitTriplet("f0c66e", "ffec51", "f0c66e")
    gbg = dataclasses.replace(sample, color="001000110010")
    assert get_color_genes(gbg) == TraitTriplet("ffec51", "ffa12a", "ffec51")


def test_color_white_swatch(sample):
    assert get_color_genes(dataclasses.replace(sample, color="0" * 12)) == TraitTriplet(
        "ffffff", "ffffff", "ffffff"
    )


def test_color_errors(sample):
    with pytest.raises(UnknownValue):
        get_color_genes(dataclasses.replace(sample, cls="1111", color="001000110010"))
    with pytest.raises(LayoutError):
        get_color_genes(dataclasses.replace(sample, color="1011010101010"))
    with pytest.raises(UnknownValue) as excinfo:
        get_color_genes(dataclasses.replace(sample, color="111100100010"))
    assert excinfo.value.field == "color"


def test_extended_color_uses_low_bits():
    gbg = slice_fields(extended_gene(color="110100" + "000010" + "010100"), EXTENDED)
    assert get_color_genes(gbg) == TraitTriplet("f0c66e", "ffec51", "f0c66e")


@pytest.mark.parametrize("skin_bin,expected", [
    ("00", "global"),
    ("01", "bionic"),
    ("10", "xmas2"),
    ("11", "mystic"),
])
def test_compact_part_skin(skin_bin, expected):
    assert get_part_skin(COMPACT, skin_bin, "00000", "0" * 12) == expected


@pytest.mark.parametrize("skin_bin,expected", [
    ("0000", "global"),
    ("0001", "bionic"),
    ("0010", "xmas2"),
    ("0011", "mystic"),
])
def test_extended_part_skin(skin_bin, expected):
    assert get_part_skin(EXTENDED, skin_bin, "00000", "0" * 12) == expected


def test_part_skin_ambient_context():
    assert get_part_skin(COMPACT, "00", "00001", "0" * 12) == "japan"
    assert get_part_skin(COMPACT, "00", "00001", "010101010101") == "xmas1"
    assert ambient_skin("00000", "010101010101") == "xmas1"
    # Explicit selectors ignore region and season
    assert get_part_skin(COMPACT, "11", "00001", "010101010101") == "mystic"


def test_part_skin_errors():
    with pytest.raises(UnknownValue):
        get_part_skin(EXTENDED, "1111", "00000", "0" * 12)
    with pytest.raises(LayoutError):
        get_part_skin(COMPACT, "000", "00000", "0" * 12)
    with pytest.raises(UnknownValue):
        get_part_skin(COMPACT, "00", "11111", "0" * 12)
