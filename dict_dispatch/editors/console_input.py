"""Interactive input from the terminal."""


class ConsoleInputSource:
    """Prompt on stdin (CLI implementation).

    End-of-file and Ctrl-C count as cancellation.
    """

    def read_string(self, prompt: str) -> str | None:
        """Ask for free text."""
        try:
            return input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return None

    def choose(self, prompt: str, candidates: list[str]) -> str | None:
        """Ask the user to pick a candidate by number or by name."""
        for i, candidate in enumerate(candidates, 1):
            print(f"  {i:2d}. {candidate}")

        while True:
            answer = self.read_string(prompt)
            if answer is None or not answer.strip():
                return None

            answer = answer.strip()
            if answer.isdigit() and 1 <= int(answer) <= len(candidates):
                return candidates[int(answer) - 1]

            # Accept a case-insensitive name or unique prefix
            matches = [c for c in candidates if c.lower().startswith(answer.lower())]
            exact = [c for c in matches if c.lower() == answer.lower()]
            if exact:
                return exact[0]
            if len(matches) == 1:
                return matches[0]

            print(f"Please enter a number between 1 and {len(candidates)} or a name.")
