import json
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def petstore_v2():
    with open(FIXTURES / "petstore.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def petstore_v1():
    with open(FIXTURES / "petstore_v1.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES
