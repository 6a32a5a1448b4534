"""Field decoders turning a GeneBinGroup into a Genes record.

Scalar fields (class, region, tag, body skin, pattern, color) are decoded by
module-level functions. Body parts need the trait dictionary and the part
registry, so they are decoded by a GeneDecoder built around those two tables.
Each decode either returns a complete Genes record or raises a GeneError.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Optional, Union

from axiegenes.data.loader import PartRegistry, TraitDictionary
from axiegenes.genes.constants import (
    AMBIENT,
    SKIN_BIONIC,
    SKIN_MYSTIC,
    SKIN_XMAS1,
    TAG_AGAMOGENESIS,
    XMAS_MARKER,
)
from axiegenes.genes.enums import BODY_SKIN, CLASS_COLORS, REGION, lookup_enum
from axiegenes.genes.errors import GeneError, LayoutError, PartDecodeError
from axiegenes.genes.layout import GeneBinGroup, Layout, parse_hex
from axiegenes.genes.quality import gene_quality
from axiegenes.genes.records import Genes, Part, PartGene, TraitTriplet

logger = logging.getLogger(__name__)


def _check_width(field: str, value: str, width: int) -> None:
    if len(value) != width:
        raise LayoutError(f"{field} binary must be of length {width}, got {len(value)}")


def _thirds(value: str) -> tuple[str, str, str]:
    n = len(value) // 3
    return value[0:n], value[n:2 * n], value[2 * n:3 * n]


def get_class(gbg: GeneBinGroup) -> str:
    """Creature class: one of the nine classes."""
    layout = gbg.layout
    _check_width("class", gbg.cls, layout.width("cls"))
    return lookup_enum(layout.class_codes, "class", gbg.cls)


def get_region(gbg: GeneBinGroup) -> str:
    """Region of origin: global or japan."""
    _check_width("region", gbg.region, gbg.layout.width("region"))
    return lookup_enum(REGION, "region", gbg.region)


def get_body_skin(gbg: GeneBinGroup) -> Optional[str]:
    """Body skin: None (default) or frosty."""
    _check_width("body_skin", gbg.body_skin, gbg.layout.width("body_skin"))
    return lookup_enum(BODY_SKIN, "body_skin", gbg.body_skin)


def get_pattern_genes(gbg: GeneBinGroup) -> TraitTriplet:
    """Pattern genes, kept as raw binary codes."""
    _check_width("pattern", gbg.pattern, gbg.layout.width("pattern"))
    return TraitTriplet(*_thirds(gbg.pattern))


def get_color_genes(gbg: GeneBinGroup) -> TraitTriplet:
    """Color genes as hex RGB swatches of the creature's class."""
    _check_width("color", gbg.color, gbg.layout.width("color"))
    swatches = CLASS_COLORS[get_class(gbg)]
    # Only the low 4 bits of each color code select a swatch
    return TraitTriplet(*(lookup_enum(swatches, "color", code[-4:]) for code in _thirds(gbg.color)))


def ambient_skin(region_bin: str, xmas_bin: str) -> str:
    """Skin used when a part has no explicit skin: the season marker, else the region."""
    if xmas_bin == XMAS_MARKER:
        return SKIN_XMAS1
    return lookup_enum(REGION, "region", region_bin)


def get_part_skin(layout: Layout, skin_bin: str, region_bin: str, xmas_bin: str) -> str:
    """Resolve a dominant gene's skin selector into a skin name."""
    _check_width("skin", skin_bin, layout.part_width("skin"))
    skin = lookup_enum(layout.skin_codes, "skin", skin_bin)
    if skin == AMBIENT:
        return ambient_skin(region_bin, xmas_bin)
    return skin


def get_tag(gbg: GeneBinGroup) -> Optional[str]:
    """Tag: None, origin, meo1, meo2, or (extended only) the inferred agamogenesis tag."""
    layout = gbg.layout
    _check_width("tag", gbg.tag, layout.width("tag"))
    tag = lookup_enum(layout.tag_codes, "tag", gbg.tag)
    if layout.infers_tag and "1" not in gbg.tag:
        # Bionic parts mark an agamogenesis creature even though no tag bit says so
        if any(layout.skin_codes.get(skin_bin) == SKIN_BIONIC for skin_bin in gbg.part_skins()):
            logger.debug("Inferred %s tag from bionic part skin", TAG_AGAMOGENESIS)
            return TAG_AGAMOGENESIS
    return tag


class GeneDecoder:
    """Decodes genes against a trait dictionary and a part registry."""

    def __init__(self, traits: TraitDictionary, parts: PartRegistry):
        self.traits = traits
        self.parts = parts

    def get_part_name(self, cls: str, part_type: str, code: str, skin: str) -> str:
        """Trait name for a class/part/code under a skin, falling back to global."""
        return self.traits.lookup(cls, part_type, code, skin)

    def get_part_gene(self, part_type: str, name: str) -> PartGene:
        """Registry record for a trait name."""
        return self.parts.lookup(part_type, name)

    def _slot_gene(self, gbg: GeneBinGroup, part_type: str, part_bin: str,
                   slot: str, skin: str) -> PartGene:
        layout = gbg.layout
        cls_start, cls_end = layout.part_slices[f"{slot}_class"]
        code_start, code_end = layout.part_slices[f"{slot}_code"]
        cls = lookup_enum(layout.class_codes, "class", part_bin[cls_start:cls_end])
        name = self.get_part_name(cls, part_type, part_bin[code_start:code_end], skin)
        return self.get_part_gene(part_type, name)

    def get_part(self, part_type: str, gbg: GeneBinGroup) -> Part:
        """Decode the dominant and both recessive genes of one body part."""
        layout = gbg.layout
        part_bin = gbg.part(part_type)
        _check_width(part_type, part_bin, layout.width(part_type))

        skin_start, skin_end = layout.part_slices["skin"]
        slot = "d"
        try:
            d_skin = get_part_skin(layout, part_bin[skin_start:skin_end], gbg.region, gbg.xmas)
            d = self._slot_gene(gbg, part_type, part_bin, slot, d_skin)
            # Recessive genes carry no skin of their own
            r_skin = ambient_skin(gbg.region, gbg.xmas)
            slot = "r1"
            r1 = self._slot_gene(gbg, part_type, part_bin, slot, r_skin)
            slot = "r2"
            r2 = self._slot_gene(gbg, part_type, part_bin, slot, r_skin)
        except GeneError as e:
            raise PartDecodeError(part_type, slot, e) from e

        return Part(d, r1, r2, mystic=d_skin == SKIN_MYSTIC)

    def decode(self, gbg: GeneBinGroup) -> Genes:
        """Decode every field of a GeneBinGroup. Raises on the first failure."""
        genes = Genes(
            cls=get_class(gbg),
            region=get_region(gbg),
            tag=get_tag(gbg),
            body_skin=get_body_skin(gbg),
            pattern=get_pattern_genes(gbg),
            color=get_color_genes(gbg),
            eyes=self.get_part("eyes", gbg),
            ears=self.get_part("ears", gbg),
            horn=self.get_part("horn", gbg),
            mouth=self.get_part("mouth", gbg),
            back=self.get_part("back", gbg),
            tail=self.get_part("tail", gbg),
        )
        return dataclasses.replace(genes, quality=gene_quality(genes))

    def parse_hex_decode(self, hex_str: str, layout: Union[Layout, str, None] = None) -> Genes:
        """Parse a gene hex and decode it in one step."""
        return self.decode(parse_hex(hex_str, layout))
