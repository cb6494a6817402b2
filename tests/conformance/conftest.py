"""Pytest configuration for the golden vector conformance suite."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

VECTORS_PATH = Path(__file__).parent / "vectors.yaml"


def load_vectors(path: Path = VECTORS_PATH) -> list[dict]:
    """Load the vector corpus, keeping entries in file order."""
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    return data["vectors"]


def pytest_generate_tests(metafunc):
    if "vector" in metafunc.fixturenames:
        vectors = load_vectors()
        metafunc.parametrize("vector", vectors, ids=[v["id"] for v in vectors])


@pytest.fixture
def corpus() -> list[dict]:
    return load_vectors()
