"""Tests for the production shell, prompter and feedback implementations."""

from pathlib import Path
from unittest.mock import patch

import click
import pytest
from click.testing import CliRunner

from kicks.core.errors import ExternalCommandError
from kicks.core.prompter import ClickPrompter
from kicks.core.shell import RealShell
from kicks.core.user_feedback import InteractiveFeedback


def test_run_streams_and_echoes_command(capsys: pytest.CaptureFixture[str]) -> None:
    with patch("kicks.core.shell.run_subprocess_with_context") as mock_run:
        RealShell().run(
            ["bundle", "install"], cwd=Path("/kicks/demo"), operation="install gems", quiet=False
        )

    mock_run.assert_called_once_with(
        ["bundle", "install"],
        operation_context="install gems",
        cwd=Path("/kicks/demo"),
        capture_output=False,
    )
    assert "$ bundle install" in capsys.readouterr().out


def test_run_quiet_captures_and_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    with patch("kicks.core.shell.run_subprocess_with_context") as mock_run:
        RealShell().run(["bin/rails", "db:migrate"], cwd=None, operation="migrate", quiet=True)

    assert mock_run.call_args.kwargs["capture_output"] is True
    assert capsys.readouterr().out == ""


def test_launch_interactive_replaces_process(tmp_path: Path) -> None:
    with patch("kicks.core.shell.os.execvp") as mock_exec, patch(
        "kicks.core.shell.os.chdir"
    ) as mock_chdir:
        RealShell().launch_interactive(["vim", "."], cwd=tmp_path)

    mock_chdir.assert_called_once_with(tmp_path)
    mock_exec.assert_called_once_with("vim", ["vim", "."])


def test_launch_interactive_missing_editor() -> None:
    with patch("kicks.core.shell.os.execvp", side_effect=FileNotFoundError("nano")):
        with pytest.raises(ExternalCommandError) as exc_info:
            RealShell().launch_interactive(["nano", "config.yml"], cwd=None)

    assert exc_info.value.exit_code == 127


def test_interactive_feedback_writes_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    feedback = InteractiveFeedback()

    feedback.info("Generating demo...")
    feedback.warning("Workspace already exists")
    feedback.success("Workspace ready: /kicks/demo")

    captured = capsys.readouterr()
    assert "Generating demo..." in captured.out
    assert "Warning: " in captured.out
    assert "Workspace ready: /kicks/demo" in captured.out
    assert captured.err == ""


@pytest.mark.parametrize(("stdin", "expected"), [("\n", "y"), ("no\n", "no")])
def test_click_prompter_reads_answer(stdin: str, expected: str) -> None:
    answers: list[str] = []

    @click.command()
    def ask() -> None:
        answers.append(ClickPrompter().prompt("Remove it? [Y/n]", default="y"))

    result = CliRunner().invoke(ask, input=stdin)

    assert result.exit_code == 0, result.output
    assert answers == [expected]
    assert "Remove it? [Y/n]" in result.output
