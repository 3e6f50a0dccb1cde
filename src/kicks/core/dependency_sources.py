"""Local/remote source resolution for the engines a workspace depends on."""

import logging
from dataclasses import dataclass
from pathlib import Path

from kicks.core.config_store import KicksConfig
from kicks.core.errors import ConfigurationError, MissingFileError
from kicks.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dependency:
    """A named dependency that can be swapped for a local checkout.

    Attributes:
        name: Gem name declared in the workspace Gemfile
        config_key: Config key holding the local checkout path
        remote: Gemfile source options used when no local checkout is requested
    """

    name: str
    config_key: str
    remote: str


@dataclass(frozen=True)
class DependencyBinding:
    """Resolved source for one dependency: the default remote or a local path."""

    dependency: Dependency
    local_path: Path | None = None

    @property
    def is_local(self) -> bool:
        return self.local_path is not None

    def describe(self) -> str:
        if self.local_path is None:
            return "default"
        return f"local:{self.local_path}"

    def gemfile_line(self) -> str:
        if self.local_path is None:
            return f'gem "{self.dependency.name}", {self.dependency.remote}'
        return f'gem "{self.dependency.name}", path: "{self.local_path}"'


KICKS_CORE = Dependency(
    name="kicks_core",
    config_key="kicks_core_path",
    remote='github: "kicks-rb/kicks_core"',
)
KICKS_UI = Dependency(
    name="kicks_ui",
    config_key="kicks_ui_path",
    remote='github: "kicks-rb/kicks_ui"',
)

DEPENDENCIES: tuple[Dependency, ...] = (KICKS_CORE, KICKS_UI)


def resolve_dependency_source(
    dependency: Dependency,
    *,
    local_toggle: bool,
    all_local_toggle: bool,
    config: KicksConfig,
    feedback: UserFeedback,
) -> DependencyBinding:
    """Decide whether a dependency comes from its remote or a local checkout.

    Either toggle enables local resolution for this dependency. A requested
    local source is never downgraded to the remote default.

    Relative override paths are resolved against the directory kicks runs in,
    so the Gemfile and initializer always receive absolute paths.

    Args:
        dependency: Dependency to resolve
        local_toggle: Per-dependency local flag
        all_local_toggle: The flag that makes every dependency local
        config: Loaded configuration with the override paths
        feedback: Receives one notice per local binding

    Returns:
        DependencyBinding for the dependency

    Raises:
        ConfigurationError: If local is requested but the config key is absent
        MissingFileError: If the configured local path does not exist
    """
    if not (local_toggle or all_local_toggle):
        return DependencyBinding(dependency=dependency)

    raw_path = dependency_override(config, dependency)
    if raw_path is None:
        raise ConfigurationError(
            f"Missing '{dependency.config_key}' in config - "
            f"set it to a local {dependency.name} checkout"
        )

    local_path = Path(raw_path).expanduser().resolve()
    if not local_path.exists():
        raise MissingFileError(f"Local {dependency.name} source does not exist: {local_path}")

    feedback.info(f"Using local {dependency.name} from {local_path}")
    logger.debug("Resolved %s to %s", dependency.name, local_path)
    return DependencyBinding(dependency=dependency, local_path=local_path)


def dependency_override(config: KicksConfig, dependency: Dependency) -> str | None:
    value = config.get_setting(dependency.config_key)
    if value is None or value == "":
        return None
    return str(value)
