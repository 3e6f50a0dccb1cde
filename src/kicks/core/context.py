"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from kicks.core.config_store import ConfigStore
from kicks.core.prompter import ClickPrompter, Prompter
from kicks.core.shell import RealShell, Shell
from kicks.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class KicksContext:
    """Immutable context holding all dependencies for kicks operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    Per-invocation state (options, loaded config, workspace path) lives in
    WorkspaceRequest, not here.
    """

    config_store: ConfigStore
    shell: Shell
    prompter: Prompter
    feedback: UserFeedback
    cwd: Path  # Current working directory at CLI invocation
    environ: Mapping[str, str]

    @staticmethod
    def for_test(
        config_store: ConfigStore | None = None,
        shell: Shell | None = None,
        prompter: Prompter | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "KicksContext":
        """Create test context with optional pre-configured collaborators.

        Args:
            config_store: Optional ConfigStore. If None, uses /test/kicks-config.
            shell: Optional Shell implementation. If None, creates empty FakeShell.
            prompter: Optional Prompter. If None, creates FakePrompter with no answers.
            feedback: Optional UserFeedback. If None, creates FakeUserFeedback.
            cwd: Optional current working directory. If None, uses Path("/test/default/cwd").
            environ: Optional environment mapping. If None, uses an empty mapping.

        Returns:
            KicksContext configured with provided values and test defaults

        Example:
            >>> store = ConfigStore(root=tmp_path / ".kicks")
            >>> shell = FakeShell()
            >>> ctx = KicksContext.for_test(config_store=store, shell=shell)
        """
        from tests.fakes.prompter import FakePrompter
        from tests.fakes.shell import FakeShell
        from tests.fakes.user_feedback import FakeUserFeedback

        if config_store is None:
            config_store = ConfigStore(root=Path("/test/kicks-config"))

        if shell is None:
            shell = FakeShell()

        if prompter is None:
            prompter = FakePrompter()

        if feedback is None:
            feedback = FakeUserFeedback()

        if cwd is None:
            cwd = Path("/test/default/cwd")

        if environ is None:
            environ = {}

        return KicksContext(
            config_store=config_store,
            shell=shell,
            prompter=prompter,
            feedback=feedback,
            cwd=cwd,
            environ=environ,
        )


def create_context() -> KicksContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Returns:
        KicksContext with real implementations
    """
    return KicksContext(
        config_store=ConfigStore(),
        shell=RealShell(),
        prompter=ClickPrompter(),
        feedback=InteractiveFeedback(),
        cwd=Path.cwd(),
        environ=os.environ,
    )
