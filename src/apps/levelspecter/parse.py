"""Parse a single levelspec and describe its levels."""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional

import structlog
import typer
from typing_extensions import Annotated

from apps.levelspecter.utils.errors import LevelSpecterValidationError
from libraries.levelspec.errors import LevelSpecError
from libraries.levelspec.levels import Level
from libraries.levelspec.parser import LevelSpecParser
from libraries.levelspec.spec import LevelSpec

log = structlog.get_logger(__name__)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


def parser_from_context(ctx: typer.Context) -> LevelSpecParser:
    """Return the parser configured by the root callback."""

    parser = ctx.obj
    if isinstance(parser, LevelSpecParser):
        return parser
    return LevelSpecParser()


def parse_levelspec(
    ctx: typer.Context,
    levelspec: Annotated[
        str, typer.Argument(help="Levelspec to parse, e.g. DEV01.RD.0001")
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Choose output format (text or json).",
            case_sensitive=False,
        ),
    ] = OutputFormat.TEXT,
) -> None:
    """Validate LEVELSPEC and print its show, sequence and shot."""

    parser = parser_from_context(ctx)
    try:
        result = parser.parse(levelspec)
    except LevelSpecError as exc:
        log.warning(
            "levelspecter.parse.invalid",
            levelspec=levelspec,
            rule=exc.rule.value,
            level=exc.level.value if exc.level else None,
        )
        raise LevelSpecterValidationError(str(exc)) from exc

    log.info(
        "levelspecter.parse.success",
        levelspec=result.format(),
        case_mode=parser.case_mode.value,
    )
    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _render_text(result)


def _describe(level: Optional[Level]) -> str:
    if level is None:
        return "-"
    if level.is_wildcard():
        return "% (wildcard)"
    return str(level)


def _render_text(result: LevelSpec) -> None:
    typer.secho(result.format(), fg=typer.colors.GREEN)
    typer.echo(f"    show     : {_describe(result.show)}")
    typer.echo(f"    sequence : {_describe(result.sequence)}")
    typer.echo(f"    shot     : {_describe(result.shot)}")
    typer.echo(f"    concrete : {'yes' if result.is_concrete() else 'no'}")
