"""Resolve parsed command-line parameters into an action.

Terminal actions (open a workspace, edit the config) are resolved here into a
LaunchInteractive value that the CLI entry point executes last. Every other
invocation resolves into an OptionSet for the generate or import path.
"""

import shlex
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from kicks.core.context import KicksContext
from kicks.core.dependency_sources import KICKS_CORE, KICKS_UI
from kicks.core.errors import MissingEnvironmentError, MissingFileError, UsageError
from kicks.workspace.types import Action, OptionSet, workspace_path_for

EDITOR_ENV_VAR = "EDITOR"


@dataclass(frozen=True)
class RawInvocation:
    """Parameters exactly as click parsed them."""

    app_name: str | None
    local_core: bool
    local_ui: bool
    local_all: bool
    force: bool
    quiet: bool
    open_app: str | None
    edit_config: bool
    import_archive: Path | None
    project: str | None


@dataclass(frozen=True)
class LaunchInteractive:
    """Terminal action: replace kicks with an interactive command."""

    command: list[str]
    cwd: Path | None


def resolve_invocation(
    ctx: KicksContext, raw: RawInvocation
) -> OptionSet | LaunchInteractive:
    """Turn a parsed invocation into options or a terminal action.

    Args:
        ctx: Kicks context
        raw: Parsed command-line parameters

    Returns:
        LaunchInteractive for -o/-e, otherwise the OptionSet for generate/import

    Raises:
        UsageError: If exclusive options are combined or APP_NAME is missing
        MissingFileError: If -o names a workspace that does not exist
        MissingEnvironmentError: If EDITOR is unset for -o/-e
        ConfigurationError: If -o is used and kicks_home is not configured
    """
    action = select_action(raw)

    match action:
        case "open":
            assert raw.open_app is not None, "open_app must be set for open action"
            return resolve_open(ctx, raw.open_app)
        case "edit-config":
            return LaunchInteractive(
                command=[*editor_command(ctx.environ), str(ctx.config_store.path())],
                cwd=None,
            )
        case _:
            return resolve_options(raw, action)


def select_action(raw: RawInvocation) -> Action:
    """Determine which action the invocation selects.

    Raises:
        UsageError: If more than one of -o, -e, -i is given
    """
    flags_set = sum(
        [
            raw.open_app is not None,
            raw.edit_config,
            raw.import_archive is not None,
        ]
    )
    if flags_set > 1:
        raise UsageError("Cannot use more than one of: -o/--open, -e/--edit-config, -i/--import")

    if raw.open_app is not None:
        return "open"
    elif raw.edit_config:
        return "edit-config"
    elif raw.import_archive is not None:
        return "import"
    else:
        return "generate"


def resolve_options(raw: RawInvocation, action: Action) -> OptionSet:
    """Build the OptionSet for the generate or import path.

    The all-local flag is kept as its own toggle rather than expanded into the
    per-dependency toggles.

    Raises:
        UsageError: If APP_NAME is missing or a name is not a plain directory name
    """
    if not raw.app_name:
        raise UsageError("Missing APP_NAME - usage: kicks APP_NAME [OPTIONS]")
    validate_app_name(raw.app_name)
    if raw.project is not None:
        validate_project_name(raw.project)

    local_toggles: set[str] = set()
    if raw.local_core:
        local_toggles.add(KICKS_CORE.name)
    if raw.local_ui:
        local_toggles.add(KICKS_UI.name)

    return OptionSet(
        action=action,
        app_name=raw.app_name,
        force=raw.force,
        quiet=raw.quiet,
        local_toggles=frozenset(local_toggles),
        local_all=raw.local_all,
        project=raw.project,
        import_archive=raw.import_archive,
    )


def resolve_open(ctx: KicksContext, app_name: str) -> LaunchInteractive:
    """Resolve -o APP_NAME into an editor launch inside the workspace.

    Raises:
        MissingFileError: If the workspace does not exist
        MissingEnvironmentError: If EDITOR is unset
    """
    validate_app_name(app_name)
    config = ctx.config_store.load()
    workspace = workspace_path_for(config.kicks_home, app_name)
    if not workspace.exists():
        raise MissingFileError(f"Workspace '{app_name}' does not exist at {workspace}")

    return LaunchInteractive(command=[*editor_command(ctx.environ), "."], cwd=workspace)


def editor_command(environ: Mapping[str, str]) -> list[str]:
    """Split the operator's EDITOR into an argument list.

    Raises:
        MissingEnvironmentError: If EDITOR is unset or blank
    """
    editor = environ.get(EDITOR_ENV_VAR, "").strip()
    if not editor:
        raise MissingEnvironmentError(
            f"{EDITOR_ENV_VAR} is not set - export {EDITOR_ENV_VAR}=<your editor> to use -o/-e"
        )
    return shlex.split(editor)


def validate_app_name(app_name: str) -> None:
    """Reject names that would escape kicks_home.

    Raises:
        UsageError: If the name contains a path separator or is "." or ".."
    """
    if not _is_plain_name(app_name):
        raise UsageError(f'"{app_name}" is not a valid app name - use a plain directory name')


def validate_project_name(project: str) -> None:
    """Reject project names that would escape the config store.

    Raises:
        UsageError: If the name contains a path separator or is "." or ".."
    """
    if not _is_plain_name(project):
        raise UsageError(
            f'"{project}" is not a valid project name - use a subdirectory name of ~/.kicks'
        )


def _is_plain_name(name: str) -> bool:
    return "/" not in name and "\\" not in name and name not in (".", "..")
