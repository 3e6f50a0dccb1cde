"""Files kicks writes into a generated workspace.

This module handles:
- Copying project config files from the config store
- The config/.gitignore that keeps those files out of version control
- The initializer that watches local engine checkouts
"""

import shutil
from collections.abc import Sequence
from pathlib import Path

from kicks.core.dependency_sources import DependencyBinding
from kicks.core.errors import MissingFileError

PROJECT_CONFIG_FILES = ("kicks.yml", "tenant.yml")

IGNORE_FILENAME = ".gitignore"

INITIALIZER_PATH = Path("config") / "initializers" / "kicks_local_sources.rb"


def copy_project_configs(source_dir: Path, workspace: Path) -> list[Path]:
    """Copy the project config files into the workspace config directory.

    Every file is checked before any is copied.

    Args:
        source_dir: Config store root or project subdirectory
        workspace: Workspace directory

    Returns:
        Paths of the copied files

    Raises:
        MissingFileError: If any required config file is absent
    """
    sources = [source_dir / name for name in PROJECT_CONFIG_FILES]
    for source in sources:
        if not source.is_file():
            raise MissingFileError(
                f"Required config file not found: {source}\n"
                f"Import a config bundle with: kicks APP_NAME -i <archive>"
            )

    config_dir = workspace / "config"
    config_dir.mkdir(parents=True, exist_ok=True)

    copied: list[Path] = []
    for source in sources:
        dest = config_dir / source.name
        shutil.copy2(source, dest)
        copied.append(dest)
    return copied


def write_ignore_rules(workspace: Path) -> Path:
    """Write config/.gitignore listing the copied project config files."""
    ignore_path = workspace / "config" / IGNORE_FILENAME
    content = "".join(f"/{name}\n" for name in PROJECT_CONFIG_FILES)
    ignore_path.write_text(content, encoding="utf-8")
    return ignore_path


def render_initializer(bindings: Sequence[DependencyBinding]) -> str:
    lines = [
        "# Generated by kicks: reload local engine checkouts in development.",
        "if Rails.env.development?",
    ]
    for binding in bindings:
        if binding.local_path is not None:
            lines.append(
                f'  Rails.application.config.watchable_dirs["{binding.local_path}"] = [:rb, :erb]'
            )
    lines.append("end")
    return "\n".join(lines) + "\n"


def write_local_sources_initializer(
    workspace: Path, bindings: Sequence[DependencyBinding]
) -> Path:
    """Write the initializer that watches local engine checkouts.

    Args:
        workspace: Workspace directory
        bindings: Resolved dependency sources

    Returns:
        Path to the written initializer
    """
    initializer = workspace / INITIALIZER_PATH
    initializer.parent.mkdir(parents=True, exist_ok=True)
    initializer.write_text(render_initializer(bindings), encoding="utf-8")
    return initializer
