"""Naming rules applied to concrete show, sequence and shot names.

Each check returns the first :class:`Rule` the name violates, or ``None`` when
the name is valid. Only ASCII letters and digits are considered alphanumeric.
"""

from __future__ import annotations

import re

from libraries.levelspec.config import CaseMode
from libraries.levelspec.errors import Rule

__all__ = [
    "ASSETDEV",
    "check_show_name",
    "check_sequence_name",
    "check_shot_name",
    "is_assetdev",
]

ASSETDEV = "ASSETDEV"

_LETTER = re.compile(r"[A-Za-z]")
_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]+")
_LOWERCASE = re.compile(r"[a-z]")
_DIGITS = re.compile(r"[0-9]+")


def _is_letter(char: str) -> bool:
    return bool(_LETTER.fullmatch(char))


def _check_entity_name(name: str, case_mode: CaseMode) -> Rule | None:
    if not _is_letter(name[0]):
        return Rule.BAD_START
    if not _is_letter(name[-1]):
        return Rule.BAD_END
    if not _ALPHANUMERIC.fullmatch(name):
        return Rule.NON_ALPHANUMERIC
    if case_mode.is_sensitive and _LOWERCASE.search(name):
        return Rule.WRONG_CASE
    return None


def check_show_name(name: str, case_mode: CaseMode) -> Rule | None:
    return _check_entity_name(name, case_mode)


def check_sequence_name(name: str, case_mode: CaseMode) -> Rule | None:
    return _check_entity_name(name, case_mode)


def is_assetdev(sequence: str, case_mode: CaseMode) -> bool:
    """Return ``True`` when ``sequence`` is the reserved ASSETDEV name."""

    if case_mode.is_sensitive:
        return sequence == ASSETDEV
    return sequence.upper() == ASSETDEV


def _check_assetdev_shot(name: str) -> Rule | None:
    if not _is_letter(name[0]):
        return Rule.BAD_START
    if not _ALPHANUMERIC.fullmatch(name):
        return Rule.NON_ALPHANUMERIC
    return None


def check_shot_name(name: str, assetdev: bool) -> Rule | None:
    """Validate a shot name.

    Shots are digits only. Under an ``ASSETDEV`` sequence (``assetdev=True``)
    a shot may instead be a letter followed by letters and digits, in any
    case. A name that would only be valid under ``ASSETDEV`` is reported as
    :attr:`Rule.RESERVED_NAME_MISMATCH`.
    """

    if _DIGITS.fullmatch(name):
        return None
    relaxed = _check_assetdev_shot(name)
    if assetdev:
        return relaxed
    if relaxed is None:
        return Rule.RESERVED_NAME_MISMATCH
    return Rule.NON_DIGIT
