import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "test_data" / "fixtures"


def read_fixture(category: str, filename: str) -> dict:
    """Load a fixture file, e.g. read_fixture("format/valid/references", "chained-reference.json")."""
    with open(FIXTURES_DIR / category / filename, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def load_fixture():
    return read_fixture
