import json
from pathlib import Path

import pytest

from multitap import STANDARD_CONFIG, KeypadConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


def load_jsonl(path: Path) -> list[dict]:
    with path.open("r", encoding="utf-8") as handle:
        return [json.loads(line) for line in handle if line.strip()]


def scenario_params(name: str) -> list:
    return [pytest.param(item["input"], item["expected"], id=item["id"]) for item in load_jsonl(SCENARIOS_DIR / f"{name}.jsonl")]


@pytest.fixture
def standard_config():
    return STANDARD_CONFIG


@pytest.fixture
def two_key_config():
    return KeypadConfig({"2": "AB", "3": "CD"})


@pytest.fixture
def numeric_config():
    mapping = {digit: digit for digit in "23456789"}
    return KeypadConfig(mapping, separator="-", backspace="X", terminator="!")


@pytest.fixture(params=["words", "backspace", "control"])
def scenario_file(request):
    return load_jsonl(SCENARIOS_DIR / f"{request.param}.jsonl")
