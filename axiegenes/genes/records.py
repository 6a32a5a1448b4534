"""Dataclasses for decoded genes and their parts."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from axiegenes.genes.constants import OUTPUT_PART_TYPES


@dataclass(frozen=True, slots=True)
class PartGene:
    """A single resolved trait (one slot of one body part)."""
    part_id: str           # Registry key, e.g. "eyes-chubby"
    cls: str               # Class the trait belongs to
    special_genes: str     # Special gene marker ("" for regular traits)
    part_type: str         # eyes, ears, horn, mouth, back, tail
    name: str              # Display name

    @classmethod
    def from_json(cls, data: dict) -> PartGene:
        """Build from a part registry entry ({partId, class, specialGenes, type, name})."""
        return cls(
            part_id=data["partId"],
            cls=data["class"],
            special_genes=data.get("specialGenes") or "",
            part_type=data["type"],
            name=data["name"],
        )


@dataclass(frozen=True, slots=True)
class Part:
    """Dominant and recessive genes of one body part."""
    d: PartGene
    r1: PartGene
    r2: PartGene
    mystic: bool = False


@dataclass(frozen=True, slots=True)
class TraitTriplet:
    """Dominant and recessive values of a pattern or color gene."""
    d: str
    r1: str
    r2: str


@dataclass(frozen=True, slots=True)
class Genes:
    """Fully decoded gene record."""
    cls: str
    region: str
    tag: Optional[str]
    body_skin: Optional[str]
    pattern: TraitTriplet
    color: TraitTriplet
    eyes: Part
    ears: Part
    horn: Part
    mouth: Part
    back: Part
    tail: Part
    quality: float = 0.0

    def part(self, part_type: str) -> Part:
        """Get a body part by its type name."""
        return getattr(self, part_type)

    def parts(self) -> dict[str, Part]:
        """Body parts keyed by type, in output order."""
        return {part_type: getattr(self, part_type) for part_type in OUTPUT_PART_TYPES}
