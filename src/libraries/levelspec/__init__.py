"""Parsing and validation of ``show.sequence.shot`` levelspecs."""

from libraries.levelspec.config import CaseMode, default_case_mode, parse_case_mode
from libraries.levelspec.errors import (
    EmptyInputError,
    EmptySegmentError,
    InvalidLevelNameError,
    InvalidSequenceNameError,
    InvalidShotNameError,
    InvalidShowNameError,
    LevelSpecError,
    Rule,
    TooManySegmentsError,
)
from libraries.levelspec.levels import WILDCARD, Level, LevelName, Name, Wildcard
from libraries.levelspec.parser import LevelSpecParser, parse
from libraries.levelspec.spec import LevelSpec

__all__ = [
    "CaseMode",
    "default_case_mode",
    "parse_case_mode",
    "EmptyInputError",
    "EmptySegmentError",
    "InvalidLevelNameError",
    "InvalidSequenceNameError",
    "InvalidShotNameError",
    "InvalidShowNameError",
    "LevelSpecError",
    "Rule",
    "TooManySegmentsError",
    "WILDCARD",
    "Level",
    "LevelName",
    "Name",
    "Wildcard",
    "LevelSpecParser",
    "parse",
    "LevelSpec",
]
