"""Yes/no gate in front of destructive pipeline steps."""

import logging
from collections.abc import Callable

from kicks.core.errors import UnrecognizedInputError
from kicks.core.prompter import Prompter
from kicks.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

YES_ANSWERS = frozenset({"y", "yes"})
NO_ANSWERS = frozenset({"n", "no"})


class ConfirmationGate:
    """Runs guarded actions after operator confirmation.

    With force set, every guarded action runs without prompting. Otherwise the
    operator is asked ``<label> [Y/n]:`` and an empty answer means yes.

    Declining ends the invocation with exit status 0. An answer that is neither
    yes nor no ends it with UnrecognizedInputError.
    """

    def __init__(self, *, force: bool, prompter: Prompter, feedback: UserFeedback) -> None:
        self._force = force
        self._prompter = prompter
        self._feedback = feedback

    def confirm(self, label: str, on_confirm: Callable[[], None]) -> bool:
        """Run on_confirm if forced or confirmed.

        Args:
            label: Question shown to the operator
            on_confirm: Guarded action

        Returns:
            True once the guarded action has run

        Raises:
            SystemExit: With code 0 if the operator declines
            UnrecognizedInputError: If the answer is neither yes nor no
        """
        if self._force:
            logger.debug("Force set, skipping prompt: %s", label)
            on_confirm()
            return True

        answer = self._prompter.prompt(f"{label} [Y/n]", default="y").strip().lower()

        if answer in YES_ANSWERS:
            on_confirm()
            return True

        if answer in NO_ANSWERS:
            self._feedback.info("Cancelled.")
            raise SystemExit(0)

        raise UnrecognizedInputError(f"Unrecognized answer {answer!r} - expected y/yes or n/no")
