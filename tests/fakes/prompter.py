"""Fake implementation of Prompter for testing."""

from collections.abc import Sequence

from kicks.core.prompter import Prompter


class FakePrompter(Prompter):
    """Returns scripted answers in order and records every question asked.

    An empty scripted answer behaves like pressing enter: the default is used.
    Asking more questions than there are answers fails the test.
    """

    def __init__(self, answers: Sequence[str] = ()) -> None:
        self._answers = list(answers)
        self._prompts: list[str] = []

    def prompt(self, text: str, *, default: str) -> str:
        self._prompts.append(text)
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {text}")
        answer = self._answers.pop(0)
        return answer if answer else default

    @property
    def prompts(self) -> list[str]:
        return self._prompts.copy()
