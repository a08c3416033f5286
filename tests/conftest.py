"""Shared fixtures for dossier tests."""

import copy
import json
from pathlib import Path

import pytest

FIXTURES_PATH = Path(__file__).parent / "fixtures"

JD_TEXT_20 = "x" * 20


def load_fixture(name: str) -> dict:
    return json.loads((FIXTURES_PATH / name).read_text(encoding="utf-8"))


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def minimal_resume() -> dict:
    return load_fixture("resume_minimal.json")


@pytest.fixture
def full_resume() -> dict:
    return load_fixture("resume_full.json")


@pytest.fixture
def normalized_jd() -> dict:
    return load_fixture("jd_normalized.json")


@pytest.fixture
def make_request(minimal_resume):
    """Factory for raw compile requests; every call returns an independent copy."""

    def _make(**overrides) -> dict:
        request = {
            "resume": copy.deepcopy(minimal_resume),
            "jd": {"type": "text", "text": JD_TEXT_20},
        }
        request.update(overrides)
        return request

    return _make
