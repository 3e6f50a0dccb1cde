"""Data structures shared by the workspace pipeline.

WorkspaceRequest is built once after option and config resolution and is the
only per-invocation state the pipeline steps receive.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from kicks.core.config_store import KicksConfig

Action = Literal["generate", "import", "open", "edit-config"]


@dataclass(frozen=True)
class OptionSet:
    """Resolved flags for a generate or import invocation.

    Attributes:
        action: "generate" or "import"
        app_name: Positional application name
        force: Skip confirmation prompts
        quiet: Capture external command output instead of streaming it
        local_toggles: Names of dependencies whose local flag was given
        local_all: The flag that makes every dependency local
        project: Project config subdirectory in the config store
        import_archive: Archive to extract (import only)
    """

    action: Action
    app_name: str
    force: bool
    quiet: bool
    local_toggles: frozenset[str]
    local_all: bool
    project: str | None
    import_archive: Path | None = None

    def local_toggle(self, dependency_name: str) -> bool:
        return dependency_name in self.local_toggles

    @property
    def any_local(self) -> bool:
        return self.local_all or bool(self.local_toggles)


@dataclass(frozen=True)
class WorkspaceRequest:
    """Everything the generate pipeline needs, resolved up front."""

    app_name: str
    workspace: Path
    options: OptionSet
    config: KicksConfig

    @property
    def kicks_home(self) -> Path:
        return self.config.kicks_home


def workspace_path_for(kicks_home: Path, app_name: str) -> Path:
    """Compute the workspace directory for an app.

    Args:
        kicks_home: Workspace root from config
        app_name: Application name

    Returns:
        kicks_home / app_name
    """
    return kicks_home / app_name
