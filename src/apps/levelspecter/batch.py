"""Validate a batch of levelspecs from a CSV or a plain text listing."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import structlog
import typer
from typing_extensions import Annotated

from apps.levelspecter.parse import parser_from_context
from apps.levelspecter.utils.errors import (
    LevelSpecterIOError,
    LevelSpecterValidationError,
)
from libraries.levelspec.batch import (
    LevelSpecValidationResult,
    validate_levelspecs_in_csv,
    validate_levelspecs_in_file,
)

log = structlog.get_logger(__name__)


def batch(
    ctx: typer.Context,
    csv: Annotated[
        Optional[Path],
        typer.Option(
            "--csv",
            "-c",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
            help="CSV with a 'levelspec' column.",
        ),
    ] = None,
    file: Annotated[
        Optional[Path],
        typer.Option(
            "--file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
            help="Text file with one levelspec per line.",
        ),
    ] = None,
) -> None:
    """
    Validate levelspecs from a CSV or a text file.
    """
    if bool(csv) == bool(file):
        raise LevelSpecterValidationError(
            "Provide exactly one of --csv or --file to validate levelspecs."
        )

    parser = parser_from_context(ctx)
    if csv:
        try:
            results = validate_levelspecs_in_csv(csv, parser)
        except (OSError, UnicodeDecodeError) as exc:
            raise LevelSpecterIOError(str(exc)) from exc
        except ValueError as exc:
            raise LevelSpecterValidationError(str(exc)) from exc
        source = f"CSV {csv}"
    else:
        assert file is not None
        try:
            results = validate_levelspecs_in_file(file, parser)
        except (OSError, UnicodeDecodeError) as exc:
            raise LevelSpecterIOError(str(exc)) from exc
        source = f"file {file}"

    typer.secho(f"Validated {len(results)} levelspecs from {source}", fg=typer.colors.CYAN)
    for result in results:
        _render_result(result)

    invalid = [result for result in results if not result.valid]
    if invalid:
        log.warning(
            "levelspecter.batch.invalid",
            invalid=[result.text for result in invalid],
            count=len(invalid),
        )
        raise LevelSpecterValidationError(
            f"{len(invalid)} invalid levelspec(s) found. Review the details above."
        )

    typer.secho("\nAll levelspecs are valid.", fg=typer.colors.GREEN)
    log.info("levelspecter.batch.success", count=len(results))


def _render_result(result: LevelSpecValidationResult) -> None:
    colour = typer.colors.GREEN if result.valid else typer.colors.RED
    status = "VALID" if result.valid else "INVALID"
    typer.secho(f"- {result.text}", fg=colour)
    typer.echo(f"    status : {status}")
    typer.echo(f"    detail : {result.detail}")
