from collections.abc import Iterator
from pathlib import Path

import pytest

from calibration.logging.logger import Log

SAMPLE_LINES = [
    "eightwothree",
    "abcone2threexyz",
    "treb7uchet",
    "7pqrstsixteen",
    "abcdefg",
]


@pytest.fixture()
def sample_lines() -> list[str]:
    """Reference lines: four calibration values summing to 249 and one digitless line."""
    return list(SAMPLE_LINES)


@pytest.fixture()
def sample_file(tmp_path: Path, sample_lines: list[str]) -> Path:
    """Write the reference lines to a newline-terminated UTF-8 file."""
    path = tmp_path / "calibration.txt"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_log() -> Iterator[None]:
    """Drop any handler bound to a captured stream once the test is over."""
    yield
    Log.reset()
