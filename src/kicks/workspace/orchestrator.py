"""Orchestrator for workspace generation.

Runs the generation steps in a fixed order. Each step is a hard precondition
for the next: the first failure aborts the run and leaves the partially built
workspace on disk for inspection. Nothing is retried.
"""

import logging
import shutil
from pathlib import Path

from kicks.core.confirmation import ConfirmationGate
from kicks.core.context import KicksContext
from kicks.core.dependency_sources import DEPENDENCIES, resolve_dependency_source
from kicks.core.errors import MissingFileError
from kicks.core.tenant_safety import validate_tenant_safety
from kicks.workspace.manifest import append_dependencies
from kicks.workspace.project_configs import (
    copy_project_configs,
    write_ignore_rules,
    write_local_sources_initializer,
)
from kicks.workspace.types import WorkspaceRequest

logger = logging.getLogger(__name__)


def generate_workspace(ctx: KicksContext, request: WorkspaceRequest) -> None:
    """Generate, configure and validate a workspace.

    Args:
        ctx: Kicks context
        request: Resolved request for this invocation

    Raises:
        SystemExit: With code 0 if the operator declines removing an existing workspace
        KicksError: From the first step that fails
    """
    options = request.options
    workspace = request.workspace
    gate = ConfirmationGate(force=options.force, prompter=ctx.prompter, feedback=ctx.feedback)

    # 1. Ensure workspace root
    logger.debug("Step: ensure root %s", request.kicks_home)
    request.kicks_home.mkdir(parents=True, exist_ok=True)

    # 2. Remove existing workspace (declining exits before generation)
    if workspace.exists():
        ctx.feedback.warning(f"Workspace already exists: {workspace}")
        gate.confirm(f"Remove {workspace}?", lambda: _remove_existing(workspace))

    # 3. Generate
    ctx.feedback.info(f"Generating {request.app_name} in {request.kicks_home}...")
    generate_cmd = ["rails", "new", request.app_name, "--skip-bundle"]
    if request.config.template:
        generate_cmd.extend(["--template", request.config.template])
    ctx.shell.run(
        generate_cmd,
        cwd=request.kicks_home,
        operation=f"generate {request.app_name}",
        quiet=options.quiet,
    )
    if not workspace.is_dir():
        raise MissingFileError(f"Generator did not create {workspace}")

    # 4. Patch dependencies: resolve every binding before touching the Gemfile
    bindings = [
        resolve_dependency_source(
            dependency,
            local_toggle=options.local_toggle(dependency.name),
            all_local_toggle=options.local_all,
            config=request.config,
            feedback=ctx.feedback,
        )
        for dependency in DEPENDENCIES
    ]
    logger.debug("Bindings: %s", [b.describe() for b in bindings])
    append_dependencies(workspace, bindings, any_local=options.any_local)

    # 5. Initializer for local sources
    if options.any_local:
        write_local_sources_initializer(workspace, bindings)

    # 6. Copy project configs
    source_dir = ctx.config_store.project_dir(options.project)
    ctx.feedback.info(f"Copying project config from {source_dir}")
    copy_project_configs(source_dir, workspace)

    # 7. Tenant safety (must pass before anything touches tenant data)
    tenant_url = validate_tenant_safety(workspace)
    logger.debug("Tenant URL validated: %s", tenant_url)

    # 8. Ignore rules
    write_ignore_rules(workspace)

    # 9. Install dependencies
    ctx.feedback.info("Installing gems...")
    install_cmd = ["bundle", "install"]
    if options.quiet:
        install_cmd.append("--quiet")
    ctx.shell.run(install_cmd, cwd=workspace, operation="install gems", quiet=options.quiet)

    # 10. Scaffold generator
    ctx.feedback.info("Running kicks:install generator...")
    ctx.shell.run(
        ["bin/rails", "generate", "kicks:install"],
        cwd=workspace,
        operation="run kicks:install generator",
        quiet=options.quiet,
    )

    # 11. Reset tenant (destructive, gated)
    gate.confirm(
        f"Reset tenant data at {tenant_url}?",
        lambda: ctx.shell.run(
            ["bin/rails", "kicks:tenant:reset"],
            cwd=workspace,
            operation="reset tenant",
            quiet=options.quiet,
        ),
    )

    # 12. Migrations
    ctx.feedback.info("Running migrations...")
    ctx.shell.run(
        ["bin/rails", "db:migrate"],
        cwd=workspace,
        operation="run migrations",
        quiet=options.quiet,
    )

    # 13. Report
    ctx.feedback.success(f"Workspace ready: {workspace}")
    ctx.feedback.info(f"Next: cd {workspace} && bin/rails server")


def _remove_existing(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
