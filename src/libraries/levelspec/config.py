"""Case sensitivity configuration for levelspec validation.

The case mode is a process-wide setting. It is read once from the
``LEVELSPECTER_CASE_MODE`` environment variable and then handed to parser
instances, which close over it.
"""

from __future__ import annotations

import os
from enum import Enum
from functools import lru_cache

import structlog

__all__ = [
    "CASE_MODE_ENV",
    "CaseMode",
    "parse_case_mode",
    "default_case_mode",
]

CASE_MODE_ENV = "LEVELSPECTER_CASE_MODE"

log = structlog.get_logger(__name__)


class CaseMode(str, Enum):
    SENSITIVE = "case-sensitive"
    INSENSITIVE = "case-insensitive"

    @property
    def is_sensitive(self) -> bool:
        return self is CaseMode.SENSITIVE


_ALIASES = {
    "case-sensitive": CaseMode.SENSITIVE,
    "sensitive": CaseMode.SENSITIVE,
    "case-insensitive": CaseMode.INSENSITIVE,
    "insensitive": CaseMode.INSENSITIVE,
}


def parse_case_mode(value: str | CaseMode) -> CaseMode:
    """Return the :class:`CaseMode` named by ``value``.

    Accepts the full names (``case-sensitive``) and the short forms
    (``sensitive``) in any letter case.
    """

    if isinstance(value, CaseMode):
        return value
    try:
        return _ALIASES[value.strip().lower()]
    except KeyError:
        choices = ", ".join(sorted(_ALIASES))
        raise ValueError(f"Unknown case mode '{value}'. Expected one of: {choices}.") from None


@lru_cache(maxsize=None)
def default_case_mode() -> CaseMode:
    """Return the process case mode, defaulting to case-sensitive."""

    raw = os.environ.get(CASE_MODE_ENV)
    mode = parse_case_mode(raw) if raw else CaseMode.SENSITIVE
    log.debug(
        "levelspec.config.case_mode",
        case_mode=mode.value,
        source=CASE_MODE_ENV if raw else "default",
    )
    return mode
