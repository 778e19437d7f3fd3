"""Utilities for loading LevelSpecter configuration profiles."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for older runtimes.
    import tomli as tomllib  # type: ignore[no-redef]

import structlog

from apps.levelspecter.utils.errors import LevelSpecterConfigError
from libraries.levelspec.config import (
    CASE_MODE_ENV,
    CaseMode,
    default_case_mode,
    parse_case_mode,
)

CONFIG_FILENAME = "levelspecter.toml"
CASE_MODE_KEY = "case_mode"

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProfileContext:
    """Container describing a resolved configuration profile."""

    name: str
    data: Mapping[str, Any]
    sources: tuple[Path, ...]


def load_profile(
    *,
    profile: str | None = None,
    workspace: Path | None = None,
    project_root: Path | None = None,
) -> ProfileContext:
    """Load and merge LevelSpecter configuration before selecting *profile*.

    Configuration is read from up to three locations, in precedence order
    (lowest to highest): user, project, then workspace. Each may provide a
    ``levelspecter.toml`` with a ``profiles`` table of named settings; later
    files override earlier ones via deep-merge semantics.

    When *profile* is ``None`` the ``LEVELSPECTER_PROFILE`` environment
    variable is consulted, then the highest precedence ``default_profile``,
    and finally a profile named ``"default"``.
    """

    merged_config: Dict[str, Any] = {}
    sources: list[Path] = []

    for path in _iter_config_paths(workspace=workspace, project_root=project_root):
        try:
            document = _load_toml(path)
        except OSError as exc:  # pragma: no cover - filesystem errors are rare.
            raise LevelSpecterConfigError(
                f"Unable to read configuration file '{path}': {exc}"
            ) from exc
        except tomllib.TOMLDecodeError as exc:
            raise LevelSpecterConfigError(
                f"Configuration file '{path}' is not valid TOML: {exc}"
            ) from exc
        merged_config = _deep_merge(merged_config, document)
        sources.append(path)

    profiles = merged_config.get("profiles", {})
    if not isinstance(profiles, Mapping):
        raise LevelSpecterConfigError(
            "The 'profiles' table must contain mappings of settings"
        )

    selected_profile = _determine_profile_name(merged_config, profile)

    profile_data: Mapping[str, Any]
    if selected_profile in profiles:
        raw_data = profiles[selected_profile]
        if not isinstance(raw_data, Mapping):
            raise LevelSpecterConfigError(
                f"Profile '{selected_profile}' must be a mapping of configuration values"
            )
        profile_data = dict(raw_data)
    elif selected_profile == "default" or not profiles:
        profile_data = {}
    else:
        available = ", ".join(sorted(str(name) for name in profiles))
        raise LevelSpecterConfigError(
            f"Profile '{selected_profile}' was not found. Available profiles: {available}."
        )

    log.debug(
        "levelspecter.config.profile_loaded",
        profile=selected_profile,
        sources=[str(path) for path in sources],
    )
    return ProfileContext(
        name=selected_profile,
        data=profile_data,
        sources=tuple(sources),
    )


def resolve_case_mode(
    context: ProfileContext | None = None, override: str | CaseMode | None = None
) -> CaseMode:
    """Return the case mode for this process.

    An explicit *override* wins over the profile's ``case_mode`` setting,
    which in turn wins over :func:`default_case_mode`.
    """

    if override:
        raw, source = override, "option"
    elif context is not None and context.data.get(CASE_MODE_KEY):
        raw, source = context.data[CASE_MODE_KEY], f"profile:{context.name}"
    else:
        try:
            return default_case_mode()
        except ValueError as exc:
            raise LevelSpecterConfigError(
                f"{CASE_MODE_ENV} is invalid: {exc}"
            ) from exc

    if not isinstance(raw, str):
        raise LevelSpecterConfigError(
            f"'{CASE_MODE_KEY}' from {source} must be a string, got {type(raw).__name__}"
        )
    try:
        mode = parse_case_mode(raw)
    except ValueError as exc:
        raise LevelSpecterConfigError(str(exc)) from exc
    log.debug("levelspecter.config.case_mode", case_mode=mode.value, source=source)
    return mode


def _iter_config_paths(
    *, workspace: Path | None, project_root: Path | None
) -> Iterable[Path]:
    """Yield configuration files in precedence order."""

    yielded: set[Path] = set()

    for path in _user_config_paths():
        if path.exists() and path not in yielded:
            yielded.add(path)
            yield path

    project_candidate = _normalise_project_root(project_root)
    for path in _project_config_paths(project_candidate):
        if path.exists() and path not in yielded:
            yielded.add(path)
            yield path

    if workspace is not None:
        workspace_path = workspace / CONFIG_FILENAME
        if workspace_path.exists() and workspace_path not in yielded:
            yielded.add(workspace_path)
            yield workspace_path


def _user_config_paths() -> tuple[Path, ...]:
    home = Path(os.path.expanduser("~"))
    xdg_config = os.environ.get("XDG_CONFIG_HOME")

    candidates = []
    if xdg_config:
        candidates.append(Path(xdg_config) / "levelspecter" / CONFIG_FILENAME)

    candidates.append(home / ".config" / "levelspecter" / CONFIG_FILENAME)
    candidates.append(home / ".levelspecter" / CONFIG_FILENAME)
    candidates.append(home / CONFIG_FILENAME)

    return tuple(candidates)


def _project_config_paths(project_root: Path) -> tuple[Path, ...]:
    return (
        project_root / CONFIG_FILENAME,
        project_root / ".levelspecter" / CONFIG_FILENAME,
    )


def _normalise_project_root(project_root: Path | None) -> Path:
    if project_root is not None:
        return project_root
    env_root = os.environ.get("LEVELSPECTER_PROJECT_ROOT")
    if env_root:
        return Path(env_root)
    return Path.cwd()


def _load_toml(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _deep_merge(base: Dict[str, Any], new: Mapping[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = {**base}
    for key, value in new.items():
        if (
            key in merged
            and isinstance(merged[key], Mapping)
            and isinstance(value, Mapping)
        ):
            merged[key] = _deep_merge(dict(merged[key]), value)
        else:
            merged[key] = value
    return merged


def _determine_profile_name(config: Mapping[str, Any], override: str | None) -> str:
    if override:
        return override

    env_profile = os.environ.get("LEVELSPECTER_PROFILE")
    if env_profile:
        return env_profile

    default_profile = config.get("default_profile")
    if isinstance(default_profile, str) and default_profile:
        return default_profile

    return "default"
