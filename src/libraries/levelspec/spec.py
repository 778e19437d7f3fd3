"""The validated :class:`LevelSpec` value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from libraries.levelspec.config import CaseMode
from libraries.levelspec.errors import Rule, invalid_name_error
from libraries.levelspec.levels import Level, LevelName

__all__ = ["LevelSpec", "SEPARATOR"]

SEPARATOR = "."


@dataclass(frozen=True)
class LevelSpec:
    """A show, sequence or shot reference such as ``DEV01.RD.0001``.

    Levels are stored positionally so a shot can never exist without a
    sequence. Instances are normally produced by
    :func:`libraries.levelspec.parser.parse`; the ``from_*`` constructors also
    go through the parser, so every instance obeys the naming rules.
    """

    levels: tuple[Level, ...]

    def __post_init__(self) -> None:
        if not 1 <= len(self.levels) <= 3:
            raise ValueError(
                f"A levelspec holds one to three levels, got {len(self.levels)}"
            )

    @classmethod
    def from_show(cls, show: str, *, case_mode: CaseMode | None = None) -> "LevelSpec":
        return cls._from_parts((show,), case_mode)

    @classmethod
    def from_sequence(
        cls, show: str, sequence: str, *, case_mode: CaseMode | None = None
    ) -> "LevelSpec":
        return cls._from_parts((show, sequence), case_mode)

    @classmethod
    def from_shot(
        cls,
        show: str,
        sequence: str,
        shot: str,
        *,
        case_mode: CaseMode | None = None,
    ) -> "LevelSpec":
        return cls._from_parts((show, sequence, shot), case_mode)

    @classmethod
    def _from_parts(
        cls, parts: tuple[str, ...], case_mode: CaseMode | None
    ) -> "LevelSpec":
        # Imported here, the parser module depends on this one.
        from libraries.levelspec.parser import LevelSpecParser

        for index, part in enumerate(parts):
            if SEPARATOR in part:
                raise invalid_name_error(
                    LevelName.for_index(index), part, Rule.NON_ALPHANUMERIC
                )

        parser = LevelSpecParser(case_mode)
        if parser.case_mode.is_sensitive:
            parts = tuple(part.upper() for part in parts)
        return parser.parse(SEPARATOR.join(parts))

    @property
    def show(self) -> Level:
        return self.levels[0]

    @property
    def sequence(self) -> Optional[Level]:
        return self.levels[1] if len(self.levels) > 1 else None

    @property
    def shot(self) -> Optional[Level]:
        return self.levels[2] if len(self.levels) > 2 else None

    @property
    def depth(self) -> LevelName:
        """Return the deepest level this levelspec addresses."""

        return LevelName.for_index(len(self.levels) - 1)

    def is_concrete(self) -> bool:
        """Return ``True`` when no level is a wildcard."""

        return not any(level.is_wildcard() for level in self.levels)

    def upper(self) -> "LevelSpec":
        """Return a copy with every concrete name uppercased."""

        return LevelSpec(tuple(level.upper() for level in self.levels))

    def to_list(self) -> list[str]:
        return [str(level) for level in self.levels]

    def to_dict(self) -> dict[str, Any]:
        return {
            "levelspec": self.format(),
            "show": str(self.show),
            "sequence": None if self.sequence is None else str(self.sequence),
            "shot": None if self.shot is None else str(self.shot),
            "concrete": self.is_concrete(),
        }

    def format(self) -> str:
        return SEPARATOR.join(self.to_list())

    def __str__(self) -> str:
        return self.format()
