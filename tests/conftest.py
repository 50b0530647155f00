import json
import typing
from pathlib import Path

import pytest

from shamir_recovery.common.types import Point


def evaluate(coefficients: list[int], x: int) -> int:
    result = 0
    for coefficient in reversed(coefficients):
        result = result * x + coefficient
    return result


@pytest.fixture
def make_points() -> typing.Callable[[list[int], typing.Iterable[int]], list[Point]]:
    def _make_points(coefficients, xs):
        return [Point(x=x, y=evaluate(coefficients, x)) for x in xs]

    return _make_points


@pytest.fixture
def sample_case() -> dict:
    # y = x^2 + 2x + 5, shares in assorted bases
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "2", "value": "1000"},
        "2": {"base": "10", "value": "13"},
        "3": {"base": "16", "value": "14"},
        "6": {"base": "4", "value": "311"},
    }


@pytest.fixture
def cases_dir(tmp_path: Path, sample_case: dict) -> Path:
    (tmp_path / "case1.json").write_text(json.dumps(sample_case))
    (tmp_path / "case2.json").write_text(
        json.dumps(
            {
                "keys": {"n": 3, "k": 3},
                "1": {"base": "10", "value": "3"},
                "2": {"base": "10", "value": "8"},
                "3": {"base": "10", "value": "15"},
            }
        )
    )
    return tmp_path
