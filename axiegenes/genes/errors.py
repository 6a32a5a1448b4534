"""Exception hierarchy for gene parsing.

Every failure is a deterministic function of the input code, so none of
these are worth retrying.
"""
from __future__ import annotations


class GeneError(ValueError):
    """Base class for all gene parsing errors."""


class ParseError(GeneError):
    """Raised when the input is not a 0x-prefixed hex string."""

    def __init__(self, hex_str: str, reason: str):
        self.hex_str = hex_str
        self.reason = reason
        super().__init__(f"Cannot parse gene hex {hex_str!r}: {reason}")


class LayoutError(GeneError):
    """Raised when a binary string does not fit the selected layout."""


class UnknownValue(GeneError):
    """Raised when a code has no entry in its field's lookup table."""

    def __init__(self, field: str, code: str):
        self.field = field
        self.code = code
        super().__init__(f"Cannot recognize {field} code {code!r}")


class TraitNotFound(GeneError):
    """Raised when no trait name exists for a code, even under the global skin."""

    def __init__(self, cls: str, part_type: str, code: str, skin: str):
        self.cls = cls
        self.part_type = part_type
        self.code = code
        self.skin = skin
        super().__init__(
            f"No trait name for {cls} -> {part_type} -> {code} -> {skin}"
        )


class PartRegistryMiss(GeneError):
    """Raised when a normalized part id is not in the part registry."""

    def __init__(self, part_id: str):
        self.part_id = part_id
        super().__init__(f"No part registered as {part_id!r}")


class PartDecodeError(GeneError):
    """Wraps a failure inside one slot of one body part.

    The underlying error is kept as ``__cause__``.
    """

    def __init__(self, part_type: str, slot: str, cause: GeneError):
        self.part_type = part_type
        self.slot = slot
        self.cause = cause
        super().__init__(f"{part_type}.{slot}: {cause}")


class CatalogError(GeneError):
    """Raised when a trait dictionary or part registry file cannot be loaded."""
