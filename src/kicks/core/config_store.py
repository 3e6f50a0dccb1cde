"""Per-user configuration store.

The store is the ``~/.kicks`` directory. It holds ``config.yml`` plus imported
project config bundles, either directly in the store root or in one
subdirectory per project.

The config file is read fresh on every invocation and never cached.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from kicks.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yml"

CONFIG_TEMPLATE = """\
# kicks configuration

# Directory where generated workspaces are created.
kicks_home: ~/kicks

# Template passed to `rails new --template`.
# template: ~/src/kicks-template/template.rb

# Local checkouts used by --local-core, --local-ui and --local.
# kicks_core_path: ~/src/kicks_core
# kicks_ui_path: ~/src/kicks_ui
"""


@dataclass(frozen=True)
class KicksConfig:
    """Immutable configuration loaded from ``config.yml``.

    ``settings`` keeps every key from the file so dependency overrides can be
    looked up by name without widening this dataclass for each dependency.
    """

    kicks_home: Path
    template: str | None
    settings: dict[str, Any] = field(default_factory=dict)

    def get_setting(self, key: str) -> Any | None:
        return self.settings.get(key)


class ConfigStore:
    """Reads and bootstraps the config store directory."""

    def __init__(self, root: Path | None = None) -> None:
        """Initialize the store.

        Args:
            root: Store directory (defaults to ~/.kicks)
        """
        self._root = root if root is not None else Path.home() / ".kicks"

    @property
    def root(self) -> Path:
        return self._root

    def path(self) -> Path:
        """Get the path to the config file.

        Returns:
            Path to config.yml (for error messages and editor launches)
        """
        return self._root / CONFIG_FILENAME

    def exists(self) -> bool:
        return self.path().exists()

    def ensure_exists(self) -> bool:
        """Create the store directory and write the config template if absent.

        Never overwrites an existing config file.

        Returns:
            True if the template was written, False if the config already existed
        """
        self._root.mkdir(parents=True, exist_ok=True)
        config_path = self.path()
        if config_path.exists():
            return False

        logger.debug("Writing config template to %s", config_path)
        config_path.write_text(CONFIG_TEMPLATE, encoding="utf-8")
        return True

    def load(self) -> KicksConfig:
        """Load config from config.yml.

        Returns:
            KicksConfig instance with loaded values

        Raises:
            ConfigurationError: If the file is absent or malformed, or kicks_home is missing
        """
        config_path = self.path()
        if not config_path.exists():
            raise ConfigurationError(
                f"Config not found at {config_path} - run kicks once to create it"
            )

        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a mapping of keys to values in {config_path}")

        root = data.get("kicks_home")
        if not root:
            raise ConfigurationError(f"Missing 'kicks_home' in {config_path}")

        template = data.get("template")
        return KicksConfig(
            kicks_home=Path(str(root)).expanduser().resolve(),
            template=str(template) if template else None,
            settings={str(k): v for k, v in data.items()},
        )

    def project_dir(self, project: str | None) -> Path:
        """Directory holding project config files.

        Args:
            project: Project name, or None for the store root

        Returns:
            The project subdirectory, or the store root when no project is given
        """
        if project:
            return self._root / project
        return self._root
