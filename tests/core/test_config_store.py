"""Tests for the config store."""

from pathlib import Path

import pytest

from kicks.core.config_store import CONFIG_TEMPLATE, ConfigStore
from kicks.core.errors import ConfigurationError


def test_ensure_exists_writes_template_on_first_run(tmp_path: Path) -> None:
    """First run creates the store directory and the commented template."""
    store = ConfigStore(root=tmp_path / ".kicks")

    created = store.ensure_exists()

    assert created is True
    assert store.path() == tmp_path / ".kicks" / "config.yml"
    assert store.path().read_text(encoding="utf-8") == CONFIG_TEMPLATE
    assert "# kicks_core_path:" in CONFIG_TEMPLATE


def test_ensure_exists_twice_never_overwrites(tmp_path: Path) -> None:
    """Second bootstrap call leaves an edited config untouched."""
    store = ConfigStore(root=tmp_path / ".kicks")
    store.ensure_exists()
    store.path().write_text("kicks_home: /srv/kicks\n", encoding="utf-8")

    created = store.ensure_exists()

    assert created is False
    assert store.path().read_text(encoding="utf-8") == "kicks_home: /srv/kicks\n"


def test_template_loads_with_default_kicks_home(tmp_path: Path) -> None:
    """The bootstrapped template is itself a valid config."""
    store = ConfigStore(root=tmp_path / ".kicks")
    store.ensure_exists()

    config = store.load()

    assert config.kicks_home == (Path.home() / "kicks").resolve()
    assert config.template is None
    assert config.get_setting("kicks_core_path") is None


def test_load_reads_all_settings(tmp_path: Path) -> None:
    """Optional keys are exposed as settings, template as its own field."""
    store = ConfigStore(root=tmp_path)
    store.path().write_text(
        f"kicks_home: {tmp_path / 'home'}\n"
        "template: /templates/kicks.rb\n"
        "kicks_core_path: ~/src/kicks_core\n",
        encoding="utf-8",
    )

    config = store.load()

    assert config.kicks_home == (tmp_path / "home").resolve()
    assert config.template == "/templates/kicks.rb"
    assert config.get_setting("kicks_core_path") == "~/src/kicks_core"


@pytest.mark.parametrize(
    "content",
    [
        "",
        "kicks_core_path: /src/kicks_core\n",
        "kicks_ui_path: /src/kicks_ui\ntemplate: t.rb\n",
        "kicks_home: ''\n",
    ],
)
def test_load_missing_kicks_home_names_key_and_path(tmp_path: Path, content: str) -> None:
    """Missing kicks_home fails regardless of what other keys are present."""
    store = ConfigStore(root=tmp_path)
    store.path().write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError) as exc_info:
        store.load()

    assert "kicks_home" in exc_info.value.message
    assert str(store.path()) in exc_info.value.message


def test_load_rejects_non_mapping(tmp_path: Path) -> None:
    store = ConfigStore(root=tmp_path)
    store.path().write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="mapping"):
        store.load()


def test_load_rejects_invalid_yaml(tmp_path: Path) -> None:
    store = ConfigStore(root=tmp_path)
    store.path().write_text("kicks_home: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        store.load()


def test_load_without_file_is_configuration_error(tmp_path: Path) -> None:
    store = ConfigStore(root=tmp_path / "missing")

    with pytest.raises(ConfigurationError, match="Config not found"):
        store.load()


def test_project_dir_defaults_to_store_root(tmp_path: Path) -> None:
    store = ConfigStore(root=tmp_path)

    assert store.project_dir(None) == tmp_path
    assert store.project_dir("acme") == tmp_path / "acme"
