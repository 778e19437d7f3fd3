"""Value types describing a single level of a levelspec."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = [
    "LevelName",
    "Name",
    "Wildcard",
    "WILDCARD",
    "WILDCARD_TOKEN",
    "Level",
    "level_from_text",
]

WILDCARD_TOKEN = "%"


class LevelName(str, Enum):
    """Positional roles within a levelspec."""

    SHOW = "show"
    SEQUENCE = "sequence"
    SHOT = "shot"

    @classmethod
    def for_index(cls, index: int) -> "LevelName":
        return _ORDER[index]


_ORDER = (LevelName.SHOW, LevelName.SEQUENCE, LevelName.SHOT)


@dataclass(frozen=True)
class Name:
    """A concrete level name such as ``DEV01`` or ``0001``."""

    value: str

    def is_wildcard(self) -> bool:
        return False

    def upper(self) -> "Name":
        return Name(self.value.upper())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Wildcard:
    """The ``%`` placeholder. Use the :data:`WILDCARD` instance."""

    def is_wildcard(self) -> bool:
        return True

    def upper(self) -> "Wildcard":
        return self

    def __str__(self) -> str:
        return WILDCARD_TOKEN


WILDCARD = Wildcard()

Level = Union[Name, Wildcard]


def level_from_text(text: str) -> Level:
    """Return :data:`WILDCARD` for ``%`` and a :class:`Name` otherwise.

    No naming rules are applied here; see :mod:`libraries.levelspec.rules`.
    """

    if text == WILDCARD_TOKEN:
        return WILDCARD
    return Name(text)
