"""Validate many levelspecs at once from an iterable, a CSV or a text file."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

import structlog

from libraries.levelspec.errors import LevelSpecError
from libraries.levelspec.parser import LevelSpecParser
from libraries.levelspec.spec import LevelSpec

__all__ = [
    "CSV_COLUMN",
    "LevelSpecValidationResult",
    "validate_levelspecs",
    "validate_levelspecs_in_csv",
    "validate_levelspecs_in_file",
]

CSV_COLUMN = "levelspec"

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LevelSpecValidationResult:
    """Outcome of validating one levelspec string."""

    text: str
    levelspec: Optional[LevelSpec] = None
    error: Optional[LevelSpecError] = None

    @property
    def valid(self) -> bool:
        return self.error is None

    @property
    def detail(self) -> str:
        if self.error is not None:
            return str(self.error)
        assert self.levelspec is not None
        return self.levelspec.depth.value


def validate_levelspecs(
    values: Iterable[str], parser: LevelSpecParser | None = None
) -> List[LevelSpecValidationResult]:
    """Validate every string in ``values``, collecting failures instead of raising."""

    parser = parser or LevelSpecParser()
    results: List[LevelSpecValidationResult] = []
    for value in values:
        try:
            results.append(LevelSpecValidationResult(value, levelspec=parser.parse(value)))
        except LevelSpecError as exc:
            results.append(LevelSpecValidationResult(value, error=exc))

    invalid = sum(1 for result in results if not result.valid)
    log.info(
        "levelspec.batch.validated",
        count=len(results),
        invalid=invalid,
        case_mode=parser.case_mode.value,
    )
    return results


def validate_levelspecs_in_csv(
    csv_path: Path, parser: LevelSpecParser | None = None
) -> List[LevelSpecValidationResult]:
    """Validate the ``levelspec`` column of every row in ``csv_path``."""

    with csv_path.open(newline="", encoding="utf-8") as csvfile:
        reader = csv.DictReader(csvfile)
        if reader.fieldnames is None or CSV_COLUMN not in reader.fieldnames:
            raise ValueError(f"CSV must have a '{CSV_COLUMN}' column.")
        values = [(row[CSV_COLUMN] or "").strip() for row in reader]
    return validate_levelspecs(values, parser)


def validate_levelspecs_in_file(
    path: Path, parser: LevelSpecParser | None = None
) -> List[LevelSpecValidationResult]:
    """Validate one levelspec per line, skipping blank lines and ``#`` comments."""

    values = []
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            values.append(stripped)
    return validate_levelspecs(values, parser)
