import logging
import os
from pathlib import Path

import click

from kicks import __version__
from kicks.cli.error_boundary import cli_error_boundary
from kicks.cli.options import LaunchInteractive, RawInvocation, resolve_invocation
from kicks.core.context import KicksContext, create_context
from kicks.core.import_workflow import import_config_bundle
from kicks.workspace.orchestrator import generate_workspace
from kicks.workspace.types import WorkspaceRequest, workspace_path_for

logger = logging.getLogger(__name__)

# Enable debug logging if KICKS_DEBUG environment variable is set
if os.getenv("KICKS_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.command("kicks", context_settings=CONTEXT_SETTINGS)
@click.argument("app_name", metavar="APP_NAME", required=False)
@click.option(
    "-c",
    "--local-core",
    is_flag=True,
    help="Use the local kicks_core checkout from kicks_core_path.",
)
@click.option(
    "-u",
    "--local-ui",
    is_flag=True,
    help="Use the local kicks_ui checkout from kicks_ui_path.",
)
@click.option(
    "-l",
    "--local",
    "local_all",
    is_flag=True,
    help="Use local checkouts for every engine.",
)
@click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Skip confirmation prompts and proceed immediately.",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Hide output of generator, installer and rails tasks.",
)
@click.option(
    "-o",
    "--open",
    "open_app",
    metavar="APP_NAME",
    default=None,
    help="Open an existing workspace in $EDITOR.",
)
@click.option(
    "-e",
    "--edit-config",
    is_flag=True,
    help="Open the kicks config file in $EDITOR.",
)
@click.option(
    "-i",
    "--import",
    "import_archive",
    type=click.Path(path_type=Path),
    default=None,
    help="Import a project config bundle archive into ~/.kicks.",
)
@click.option(
    "-p",
    "--project",
    default=None,
    help="Project config subdirectory of ~/.kicks to use instead of its root.",
)
@click.version_option(__version__, "-v", "--version", prog_name="kicks")
@click.pass_context
@cli_error_boundary
def cli(
    click_ctx: click.Context,
    app_name: str | None,
    local_core: bool,
    local_ui: bool,
    local_all: bool,
    force: bool,
    quiet: bool,
    open_app: str | None,
    edit_config: bool,
    import_archive: Path | None,
    project: str | None,
) -> None:
    """Generate a kicks workspace for APP_NAME under kicks_home."""
    # Only create context if not already provided (e.g., by tests)
    if click_ctx.obj is None:
        click_ctx.obj = create_context()
    ctx: KicksContext = click_ctx.obj

    # 1. Bootstrap config store
    if ctx.config_store.ensure_exists():
        ctx.feedback.info(f"Created config template at {ctx.config_store.path()}")

    # 2. Resolve options or terminal action
    raw = RawInvocation(
        app_name=app_name,
        local_core=local_core,
        local_ui=local_ui,
        local_all=local_all,
        force=force,
        quiet=quiet,
        open_app=open_app,
        edit_config=edit_config,
        import_archive=import_archive,
        project=project,
    )
    resolution = resolve_invocation(ctx, raw)

    if isinstance(resolution, LaunchInteractive):
        ctx.shell.launch_interactive(resolution.command, cwd=resolution.cwd)
        return

    options = resolution

    # 3. Import path
    if options.action == "import":
        assert options.import_archive is not None, "import action requires an archive"
        import_config_bundle(ctx, options.import_archive, options.project, quiet=options.quiet)
        return

    # 4. Generate path
    config = ctx.config_store.load()
    request = WorkspaceRequest(
        app_name=options.app_name,
        workspace=workspace_path_for(config.kicks_home, options.app_name),
        options=options,
        config=config,
    )
    logger.debug("Request: %s", request)
    generate_workspace(ctx, request)


def main() -> None:
    """CLI entry point used by the `kicks` console script."""
    cli()
