"""Shared fixtures for palette engine tests."""

from __future__ import annotations

import copy

import pytest
import structlog

from via_palette.engine import catalog as catalog_module
from via_palette.models.contracts import Answers

BASE_ANSWERS: dict = {
    "roomType": "living room",
    "usage": "family evenings",
    "moodWords": ["calm", "airy"],
    "daytimeBrightness": "kindaBright",
    "bulbColor": "neutral_3000_3500K",
    "boldDarkerSpot": "loveIt",
    "brandPreference": "SherwinWilliams",
}


def make_answers(**overrides) -> Answers:
    """Answers built from BASE_ANSWERS with camelCase overrides applied."""
    data = copy.deepcopy(BASE_ANSWERS)
    data.update(overrides)
    return Answers.model_validate(data)


@pytest.fixture
def answers_data() -> dict:
    """Fresh copy of the base interview payload (camelCase, as sent by the client)."""
    return copy.deepcopy(BASE_ANSWERS)


@pytest.fixture
def catalogs():
    """The packaged sample catalogs."""
    return catalog_module.load_catalogs()


@pytest.fixture(autouse=True)
def _reset_state():
    """Isolate catalog cache and structlog configuration between tests."""
    catalog_module.clear_caches()
    yield
    catalog_module.clear_caches()
    structlog.reset_defaults()
