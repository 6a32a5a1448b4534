"""Load the trait dictionary and part registry JSON files.

File formats:
  traits.json: {class: {partType: {traitCode: {skin: name}}}}
               traitCode is a 6-bit binary string, skin is one of
               global/japan/xmas1/xmas2/mystic/bionic.
  parts.json:  {partId: {partId, class, specialGenes, type, name}}
               partId is "<partType>-<slug of name>".

Both tables are frozen after loading and only ever read afterwards.
"""
from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from axiegenes.genes.constants import SKIN_GLOBAL
from axiegenes.genes.errors import CatalogError, PartRegistryMiss, TraitNotFound
from axiegenes.genes.records import PartGene

logger = logging.getLogger(__name__)


def _freeze(obj):
    """Recursively wrap dicts in read-only mapping proxies."""
    if isinstance(obj, dict):
        return MappingProxyType({k: _freeze(v) for k, v in obj.items()})
    return obj


def _read_json(path: Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise CatalogError(f"Expected a JSON object at the top of {path}")
    return data


def _check_traits(traits: Mapping) -> None:
    """Verify the class -> part type -> code -> skin -> name nesting."""
    for cls_name, parts in traits.items():
        if not isinstance(parts, Mapping):
            raise CatalogError(f"Expected part types under class {cls_name!r}")
        for part_type, codes in parts.items():
            if not isinstance(codes, Mapping):
                raise CatalogError(f"Expected trait codes under {cls_name}/{part_type}")
            for code, skins in codes.items():
                if not isinstance(skins, Mapping):
                    raise CatalogError(f"Expected skin names under {cls_name}/{part_type}/{code}")
                for skin, name in skins.items():
                    if not isinstance(name, str):
                        raise CatalogError(
                            f"Trait name for {cls_name}/{part_type}/{code}/{skin} is not a string: {name!r}"
                        )


def part_id(part_type: str, name: str) -> str:
    """Normalize a trait name into its registry key, e.g. ("ears", "Nut Cracker") -> "ears-nut-cracker"."""
    slug = name.lower().replace(" ", "-")
    slug = slug.replace(".", "").replace("'", "")
    return f"{part_type}-{slug}"


class TraitDictionary:
    """Nested class -> part type -> trait code -> skin -> name lookup."""

    def __init__(self, traits: Mapping):
        _check_traits(traits)
        self._traits: Mapping = _freeze(dict(traits))

    @classmethod
    def from_json(cls, path: Path) -> TraitDictionary:
        try:
            traits = cls(_read_json(path))
        except CatalogError as e:
            raise CatalogError(f"Malformed trait table in {path}: {e}") from e
        logger.info("Loaded %d trait names from %s", traits.count, path)
        return traits

    def skins(self, cls_name: str, part_type: str, code: str) -> Mapping[str, str]:
        """All skin names defined for a trait code (empty if none)."""
        return self._traits.get(cls_name, {}).get(part_type, {}).get(code, MappingProxyType({}))

    def lookup(self, cls_name: str, part_type: str, code: str, skin: str) -> str:
        """Resolve a trait name, falling back to the global skin."""
        names = self.skins(cls_name, part_type, code)
        if skin in names:
            return names[skin]
        if SKIN_GLOBAL in names:
            return names[SKIN_GLOBAL]
        raise TraitNotFound(cls_name, part_type, code, skin)

    @property
    def count(self) -> int:
        return sum(
            len(skins)
            for parts in self._traits.values()
            for codes in parts.values()
            for skins in codes.values()
        )


class PartRegistry:
    """Lookup of normalized part id -> PartGene."""

    def __init__(self, parts: Mapping):
        self._parts: Mapping[str, PartGene] = MappingProxyType({
            key: value if isinstance(value, PartGene) else PartGene.from_json(value)
            for key, value in parts.items()
        })

    @classmethod
    def from_json(cls, path: Path) -> PartRegistry:
        try:
            registry = cls(_read_json(path))
        except (KeyError, TypeError, AttributeError) as e:
            raise CatalogError(f"Malformed part entry in {path}: {e!r}") from e
        logger.info("Loaded %d parts from %s", registry.count, path)
        return registry

    def get(self, key: str) -> PartGene:
        """Look up a part by its normalized id."""
        try:
            return self._parts[key]
        except KeyError:
            raise PartRegistryMiss(key) from None

    def lookup(self, part_type: str, name: str) -> PartGene:
        """Look up a part by its type and display name."""
        return self.get(part_id(part_type, name))

    def search(self, query: str) -> list[PartGene]:
        """Search parts by name substring (case-insensitive)."""
        query_lower = query.lower()
        return [p for p in self._parts.values() if query_lower in p.name.lower()]

    @property
    def count(self) -> int:
        return len(self._parts)


_catalog_lock = threading.Lock()
_catalogs: dict[tuple[Path, Path], tuple[TraitDictionary, PartRegistry]] = {}


def load_catalog(traits_path: Path, parts_path: Path) -> tuple[TraitDictionary, PartRegistry]:
    """Load both tables from disk (no caching)."""
    return TraitDictionary.from_json(traits_path), PartRegistry.from_json(parts_path)


def load_catalog_once(
    traits_path: Path, parts_path: Path,
) -> tuple[TraitDictionary, PartRegistry]:
    """Load both tables once per path pair; later calls reuse the frozen copies."""
    key = (Path(traits_path).resolve(), Path(parts_path).resolve())
    with _catalog_lock:
        cached: Optional[tuple[TraitDictionary, PartRegistry]] = _catalogs.get(key)
        if cached is not None:
            logger.debug("Reusing catalog for %s, %s", *key)
            return cached
        cached = load_catalog(*key)
        _catalogs[key] = cached
        return cached
