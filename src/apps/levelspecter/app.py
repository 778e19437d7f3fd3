"""Root Typer application for the LevelSpecter CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import structlog
import typer
from typing_extensions import Annotated

from apps.levelspecter.batch import batch
from apps.levelspecter.config import load_profile, resolve_case_mode
from apps.levelspecter.parse import parse_levelspec
from apps.levelspecter.utils.log_config import configure_logging
from libraries.levelspec.config import CaseMode
from libraries.levelspec.parser import LevelSpecParser

log = structlog.get_logger(__name__)
app = typer.Typer(help="LevelSpecter levelspec command line interface")


@app.callback()
def configure(
    ctx: typer.Context,
    profile: Annotated[
        Optional[str],
        typer.Option("--profile", "-p", help="Configuration profile to load."),
    ] = None,
    workspace: Annotated[
        Optional[Path],
        typer.Option(
            "--workspace",
            "-w",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
            help="Workspace directory whose levelspecter.toml overrides other config.",
        ),
    ] = None,
    case_mode: Annotated[
        Optional[CaseMode],
        typer.Option(
            "--case-mode",
            help="Override the case mode for this run.",
            case_sensitive=False,
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug details to stderr.")
    ] = False,
) -> None:
    """Resolve configuration once and share the parser with every command."""

    configure_logging(verbose)
    context = load_profile(profile=profile, workspace=workspace)
    mode = resolve_case_mode(context, case_mode)
    ctx.obj = LevelSpecParser(mode)
    log.debug("levelspecter.cli.configured", profile=context.name, case_mode=mode.value)


app.command("parse")(parse_levelspec)
app.command("batch")(batch)
