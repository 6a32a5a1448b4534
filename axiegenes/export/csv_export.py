"""Export decoded genes as CSV."""
from __future__ import annotations

import csv
import io
from typing import Iterable

from axiegenes.genes.constants import OUTPUT_PART_TYPES
from axiegenes.genes.records import Genes


def export_csv(decoded: Iterable[tuple[str, Genes]]) -> str:
    """Export (hex, genes) pairs as a CSV string, one row per gene."""
    output = io.StringIO()
    writer = csv.writer(output)

    # Header
    writer.writerow([
        "genes", "class", "region", "tag", "body_skin",
        *OUTPUT_PART_TYPES, "quality",
    ])

    for hex_str, genes in decoded:
        writer.writerow([
            hex_str,
            genes.cls,
            genes.region,
            genes.tag or "",
            genes.body_skin or "",
            *(genes.part(part_type).d.name for part_type in OUTPUT_PART_TYPES),
            f"{genes.quality:.2f}",
        ])

    return output.getvalue()
