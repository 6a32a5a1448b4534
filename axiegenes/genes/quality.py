"""Gene quality: how much of a creature's genetic material matches its own class."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction

from axiegenes.genes.records import Genes, Part

# Points per part slot; six parts of all three add up to exactly 100
DOMINANT_POINTS = Fraction(76, 6)
R1_POINTS = Fraction(3)
R2_POINTS = Fraction(1)

_CENTS = Decimal("0.01")


def part_quality(cls: str, part: Part) -> Fraction:
    """Points a single body part contributes for a creature of class ``cls``."""
    quality = Fraction(0)
    if part.d.cls == cls:
        quality += DOMINANT_POINTS
    if part.r1.cls == cls:
        quality += R1_POINTS
    if part.r2.cls == cls:
        quality += R2_POINTS
    return quality


def round_score(value: Fraction) -> float:
    """Round to two decimals, halves away from zero."""
    exact = Decimal(value.numerator) / Decimal(value.denominator)
    return float(exact.quantize(_CENTS, rounding=ROUND_HALF_UP))


def gene_quality(genes: Genes) -> float:
    """Quality score in [0, 100] over the six body parts (pattern and color excluded)."""
    total = sum((part_quality(genes.cls, part) for part in genes.parts().values()), Fraction(0))
    return round_score(total)
