"""Tests for dependency source resolution."""

from pathlib import Path

import pytest

from kicks.core.config_store import KicksConfig
from kicks.core.dependency_sources import (
    DEPENDENCIES,
    KICKS_CORE,
    KICKS_UI,
    resolve_dependency_source,
)
from kicks.core.errors import ConfigurationError, MissingFileError
from tests.fakes.user_feedback import FakeUserFeedback


def _config(**settings: object) -> KicksConfig:
    return KicksConfig(kicks_home=Path("/test/kicks"), template=None, settings=dict(settings))


@pytest.mark.parametrize("dependency", DEPENDENCIES, ids=lambda d: d.name)
@pytest.mark.parametrize("configured", [True, False])
def test_no_toggle_resolves_default(dependency, configured: bool, tmp_path: Path) -> None:
    """Without a toggle the remote default wins, even if an override is configured."""
    settings = {dependency.config_key: str(tmp_path)} if configured else {}
    feedback = FakeUserFeedback()

    binding = resolve_dependency_source(
        dependency,
        local_toggle=False,
        all_local_toggle=False,
        config=_config(**settings),
        feedback=feedback,
    )

    assert binding.describe() == "default"
    assert binding.is_local is False
    assert feedback.messages == []


@pytest.mark.parametrize(
    ("local_toggle", "all_local_toggle"),
    [(True, False), (False, True), (True, True)],
)
def test_either_toggle_resolves_existing_local_path(
    tmp_path: Path, local_toggle: bool, all_local_toggle: bool
) -> None:
    checkout = tmp_path / "kicks_core"
    checkout.mkdir()
    feedback = FakeUserFeedback()

    binding = resolve_dependency_source(
        KICKS_CORE,
        local_toggle=local_toggle,
        all_local_toggle=all_local_toggle,
        config=_config(kicks_core_path=str(checkout)),
        feedback=feedback,
    )

    assert binding.describe() == f"local:{checkout}"
    assert len(feedback.messages) == 1
    assert "kicks_core" in feedback.text
    assert str(checkout) in feedback.text


def test_missing_config_key_is_configuration_error() -> None:
    feedback = FakeUserFeedback()

    with pytest.raises(ConfigurationError) as exc_info:
        resolve_dependency_source(
            KICKS_UI,
            local_toggle=True,
            all_local_toggle=False,
            config=_config(kicks_core_path="/somewhere"),
            feedback=feedback,
        )

    assert "kicks_ui_path" in exc_info.value.message
    assert feedback.messages == []


def test_nonexistent_local_path_is_missing_file_error(tmp_path: Path) -> None:
    missing = tmp_path / "not-cloned"
    feedback = FakeUserFeedback()

    with pytest.raises(MissingFileError) as exc_info:
        resolve_dependency_source(
            KICKS_CORE,
            local_toggle=False,
            all_local_toggle=True,
            config=_config(kicks_core_path=str(missing)),
            feedback=feedback,
        )

    assert str(missing) in exc_info.value.message
    assert feedback.messages == []


def test_local_path_expands_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / "src" / "kicks_ui").mkdir(parents=True)

    binding = resolve_dependency_source(
        KICKS_UI,
        local_toggle=True,
        all_local_toggle=False,
        config=_config(kicks_ui_path="~/src/kicks_ui"),
        feedback=FakeUserFeedback(),
    )

    assert binding.local_path == (tmp_path / "src" / "kicks_ui").resolve()


def test_gemfile_lines() -> None:
    default = resolve_dependency_source(
        KICKS_CORE,
        local_toggle=False,
        all_local_toggle=False,
        config=_config(),
        feedback=FakeUserFeedback(),
    )

    assert default.gemfile_line() == 'gem "kicks_core", github: "kicks-rb/kicks_core"'


def test_relative_local_path_resolves_from_invocation_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "src" / "kicks_core").mkdir(parents=True)
    monkeypatch.chdir(tmp_path)

    binding = resolve_dependency_source(
        KICKS_CORE,
        local_toggle=True,
        all_local_toggle=False,
        config=_config(kicks_core_path="src/kicks_core"),
        feedback=FakeUserFeedback(),
    )

    assert binding.local_path is not None
    assert binding.local_path.is_absolute()
    assert binding.local_path == (tmp_path / "src" / "kicks_core").resolve()
    assert binding.gemfile_line() == f'gem "kicks_core", path: "{binding.local_path}"'
