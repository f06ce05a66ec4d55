"""
Shared fixtures for conjugador tests.
"""

import json
from pathlib import Path

import pytest

from conjugador.cache import Cache
from conjugador.dataset import get_dataset

DATA_DIR = Path(__file__).parent / "data"


def load_reference_paradigms() -> dict:
    """Reference forms, grouped as regular / participles / irregular."""
    with open(DATA_DIR / "fixtures.json", 'r', encoding='utf-8') as f:
        return json.load(f)


def iter_reference_cells(group: str):
    """Yield (verb, mood, axis, number, person, expected) for a fixture group."""
    for verb, paradigm in load_reference_paradigms()[group].items():
        for mood, axes in paradigm.items():
            for axis, numbers in axes.items():
                for number, persons in numbers.items():
                    for person, expected in persons.items():
                        yield verb, mood, axis, number, person, expected


def cell_options(mood: str, axis: str, number: str, person: str) -> dict:
    options = {"mood": mood, "number": number, "person": person}
    if mood == "imperative":
        options["positivity"] = axis
    else:
        options["tense"] = axis
    return options


@pytest.fixture(scope="session")
def reference_paradigms():
    return load_reference_paradigms()


@pytest.fixture(scope="session")
def dataset():
    """The bundled dataset, loaded once for the whole run."""
    return get_dataset()


@pytest.fixture
def fresh_caches():
    """Drop every loaded table before and after a test."""
    Cache.reset_all()
    yield
    Cache.reset_all()
