"""Export decoded genes as JSON."""
from __future__ import annotations

import json
from typing import Iterable, Optional

from axiegenes.genes.constants import OUTPUT_PART_TYPES
from axiegenes.genes.records import Genes, PartGene, TraitTriplet


def part_gene_to_dict(gene: PartGene) -> dict:
    return {
        "partId": gene.part_id,
        "class": gene.cls,
        "specialGenes": gene.special_genes,
        "type": gene.part_type,
        "name": gene.name,
    }


def _triplet_to_dict(triplet: TraitTriplet) -> dict:
    return {"d": triplet.d, "r1": triplet.r1, "r2": triplet.r2}


def genes_to_dict(genes: Genes, hex_str: Optional[str] = None) -> dict:
    """Convert a Genes record into its JSON field tree."""
    entry: dict = {}
    if hex_str is not None:
        entry["genes"] = hex_str
    entry.update({
        "class": genes.cls,
        "region": genes.region,
        "tag": genes.tag,
        "bodySkin": genes.body_skin,
        "pattern": _triplet_to_dict(genes.pattern),
        "color": _triplet_to_dict(genes.color),
    })
    for part_type in OUTPUT_PART_TYPES:
        part = genes.part(part_type)
        entry[part_type] = {
            "d": part_gene_to_dict(part.d),
            "r1": part_gene_to_dict(part.r1),
            "r2": part_gene_to_dict(part.r2),
            "mystic": part.mystic,
        }
    entry["qualityScore"] = genes.quality
    return entry


def export_json(decoded: Iterable[tuple[str, Genes]]) -> str:
    """Export (hex, genes) pairs as a JSON array string."""
    data = [genes_to_dict(genes, hex_str) for hex_str, genes in decoded]
    return json.dumps(data, indent=2)
