"""Non-interactive input source with canned answers."""

from collections.abc import Iterable


class StaticInputSource:
    """Answer prompts from a fixed list (testing / non-interactive use).

    Each call consumes the next answer. When the answers run out every
    prompt is treated as cancelled. ``choose`` only accepts answers that
    are among the candidates.
    """

    def __init__(self, answers: Iterable[str | None] = ()):
        self._answers = list(answers)
        self.prompts: list[str] = []

    def read_string(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if not self._answers:
            return None
        return self._answers.pop(0)

    def choose(self, prompt: str, candidates: list[str]) -> str | None:
        answer = self.read_string(prompt)
        if answer in candidates:
            return answer
        return None
