"""Errors raised when a string is not a valid levelspec."""

from __future__ import annotations

from enum import Enum

from libraries.levelspec.levels import LevelName

__all__ = [
    "Rule",
    "LevelSpecError",
    "EmptyInputError",
    "TooManySegmentsError",
    "EmptySegmentError",
    "InvalidLevelNameError",
    "InvalidShowNameError",
    "InvalidSequenceNameError",
    "InvalidShotNameError",
    "invalid_name_error",
]


class Rule(str, Enum):
    """The specific naming or structural rule a levelspec violated."""

    EMPTY_INPUT = "empty-input"
    TOO_MANY_SEGMENTS = "too-many-segments"
    EMPTY_SEGMENT = "empty-segment"
    BAD_START = "bad-start"
    BAD_END = "bad-end"
    NON_ALPHANUMERIC = "non-alphanumeric"
    WRONG_CASE = "wrong-case"
    NON_DIGIT = "non-digit"
    RESERVED_NAME_MISMATCH = "reserved-name-mismatch"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Rule.EMPTY_INPUT: "levelspec must not be empty",
    Rule.TOO_MANY_SEGMENTS: "expected at most three segments (show.sequence.shot)",
    Rule.EMPTY_SEGMENT: "segments must not be empty",
    Rule.BAD_START: "must start with a letter",
    Rule.BAD_END: "must end with a letter",
    Rule.NON_ALPHANUMERIC: "must contain only letters and digits",
    Rule.WRONG_CASE: "must be uppercase",
    Rule.NON_DIGIT: "must contain only digits",
    Rule.RESERVED_NAME_MISMATCH: "must contain only digits unless the sequence is ASSETDEV",
}


class LevelSpecError(ValueError):
    """Base class for levelspec validation failures.

    ``level`` is ``None`` for structural failures, in which case ``text`` holds
    the whole input. Otherwise ``text`` is the offending segment.
    """

    def __init__(self, text: str, rule: Rule, level: LevelName | None = None) -> None:
        self.text = text
        self.rule = rule
        self.level = level
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.level is None:
            return f"Invalid levelspec '{self.text}': {self.rule.description}"
        return f"Invalid {self.level.value} name '{self.text}': {self.rule.description}"


class EmptyInputError(LevelSpecError):
    def __init__(self, text: str = "") -> None:
        super().__init__(text, Rule.EMPTY_INPUT)


class TooManySegmentsError(LevelSpecError):
    def __init__(self, text: str, count: int) -> None:
        self.count = count
        super().__init__(text, Rule.TOO_MANY_SEGMENTS)

    def _format_message(self) -> str:
        return (
            f"Invalid levelspec '{self.text}': found {self.count} segments, "
            f"{self.rule.description}"
        )


class EmptySegmentError(LevelSpecError):
    """Raised for ``SHOW..0001`` style input.

    ``text`` is the whole input and ``level`` names the empty position.
    """

    def __init__(self, text: str, level: LevelName) -> None:
        super().__init__(text, Rule.EMPTY_SEGMENT, level)

    def _format_message(self) -> str:
        assert self.level is not None
        return f"Invalid levelspec '{self.text}': the {self.level.value} segment is empty"


class InvalidLevelNameError(LevelSpecError):
    """A concrete name failed the naming rules for its level."""

    level_name: LevelName

    def __init__(self, text: str, rule: Rule) -> None:
        super().__init__(text, rule, type(self).level_name)


class InvalidShowNameError(InvalidLevelNameError):
    level_name = LevelName.SHOW


class InvalidSequenceNameError(InvalidLevelNameError):
    level_name = LevelName.SEQUENCE


class InvalidShotNameError(InvalidLevelNameError):
    level_name = LevelName.SHOT


_NAME_ERRORS: dict[LevelName, type[InvalidLevelNameError]] = {
    LevelName.SHOW: InvalidShowNameError,
    LevelName.SEQUENCE: InvalidSequenceNameError,
    LevelName.SHOT: InvalidShotNameError,
}


def invalid_name_error(level: LevelName, text: str, rule: Rule) -> InvalidLevelNameError:
    """Return the error type matching ``level``."""

    return _NAME_ERRORS[level](text, rule)
