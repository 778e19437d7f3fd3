"""Parse ``show[.sequence[.shot]]`` strings into :class:`LevelSpec` values."""

from __future__ import annotations

from libraries.levelspec.config import CaseMode, default_case_mode
from libraries.levelspec.errors import (
    EmptyInputError,
    EmptySegmentError,
    LevelSpecError,
    TooManySegmentsError,
    invalid_name_error,
)
from libraries.levelspec.levels import WILDCARD, Level, LevelName, Name, level_from_text
from libraries.levelspec.rules import (
    check_sequence_name,
    check_shot_name,
    check_show_name,
    is_assetdev,
)
from libraries.levelspec.spec import SEPARATOR, LevelSpec

__all__ = ["LevelSpecParser", "parse"]

MAX_SEGMENTS = 3


class LevelSpecParser:
    """Validate levelspecs under a fixed :class:`CaseMode`.

    When ``case_mode`` is omitted the process default from
    :func:`~libraries.levelspec.config.default_case_mode` is used.
    """

    def __init__(self, case_mode: CaseMode | None = None) -> None:
        self._case_mode = case_mode if case_mode is not None else default_case_mode()

    @property
    def case_mode(self) -> CaseMode:
        return self._case_mode

    def parse(self, text: str) -> LevelSpec:
        """Return the :class:`LevelSpec` for ``text``.

        Raises a :class:`~libraries.levelspec.errors.LevelSpecError` subclass
        describing the first rule ``text`` violates.
        """

        segments = self._split(text)
        levels: list[Level] = []
        for index, segment in enumerate(segments):
            role = LevelName.for_index(index)
            levels.append(self._validate_segment(role, segment, levels))
        return LevelSpec(tuple(levels))

    def is_valid(self, text: str) -> bool:
        try:
            self.parse(text)
        except LevelSpecError:
            return False
        return True

    def _split(self, text: str) -> list[str]:
        if not text:
            raise EmptyInputError(text)
        segments = text.split(SEPARATOR)
        if len(segments) > MAX_SEGMENTS:
            raise TooManySegmentsError(text, len(segments))
        for index, segment in enumerate(segments):
            if not segment:
                raise EmptySegmentError(text, LevelName.for_index(index))
        return segments

    def _validate_segment(
        self, role: LevelName, segment: str, previous: list[Level]
    ) -> Level:
        level = level_from_text(segment)
        if level is WILDCARD:
            return level

        if role is LevelName.SHOW:
            violation = check_show_name(segment, self._case_mode)
        elif role is LevelName.SEQUENCE:
            violation = check_sequence_name(segment, self._case_mode)
        else:
            sequence = previous[1]
            assetdev = isinstance(sequence, Name) and is_assetdev(
                sequence.value, self._case_mode
            )
            violation = check_shot_name(segment, assetdev)

        if violation is not None:
            raise invalid_name_error(role, segment, violation)
        return level

    def __repr__(self) -> str:
        return f"{type(self).__name__}(case_mode={self._case_mode.value!r})"


def parse(text: str, *, case_mode: CaseMode | None = None) -> LevelSpec:
    """Parse ``text`` with ``case_mode`` or the process default."""

    return LevelSpecParser(case_mode).parse(text)
