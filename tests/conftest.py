"""
Pytest configuration and fixtures
Provides the fixture trait dictionary, part registry and a decoder over them
"""
from pathlib import Path

import pytest

from axiegenes.data.loader import PartRegistry, TraitDictionary
from axiegenes.genes.decoders import GeneDecoder

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture(scope="session")
def traits() -> TraitDictionary:
    return TraitDictionary.from_json(FIXTURES / "traits.json")


@pytest.fixture(scope="session")
def parts() -> PartRegistry:
    return PartRegistry.from_json(FIXTURES / "parts.json")


@pytest.fixture
def decoder(traits, parts) -> GeneDecoder:
    return GeneDecoder(traits, parts)
