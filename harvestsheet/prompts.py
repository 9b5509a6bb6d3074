"""Interactive prompts for harvestsheet."""
from typing import Any, Callable, Optional, Sequence, Tuple

from .errors import PromptCancelled

Choice = Tuple[str, Any]


class Prompter:
    """Asks the user questions on the terminal.

    The session only talks to the `text`, `select` and `confirm` methods, so a
    scripted replacement can stand in for it.
    """

    def __init__(self, input_func: Callable[[str], str] = input, print_func: Callable[..., None] = print):
        self.input = input_func
        self.print = print_func

    def _ask(self, prompt: str) -> str:
        try:
            return self.input(prompt).strip()
        except (KeyboardInterrupt, EOFError):
            self.print()
            raise PromptCancelled("Prompt cancelled by user")

    def text(self, message: str, default: Optional[str] = None) -> str:
        """Ask for a line of text.

        Args:
            message: Question to show
            default: Value used when the answer is empty (optional)

        Returns:
            The answer, the default, or "" when neither is given
        """
        suffix = f" [{default}]" if default else ""
        answer = self._ask(f"{message}{suffix}: ")
        return answer or default or ""

    def select(self, message: str, choices: Sequence[Choice]) -> Any:
        """Ask the user to pick one of several choices.

        Args:
            message: Question to show
            choices: List of (title, value) tuples

        Returns:
            Value of the chosen entry
        """
        if not choices:
            raise ValueError(f"No choices for prompt: {message}")
        self.print(message)
        for idx, (title, _) in enumerate(choices, start=1):
            self.print(f"  {idx}) {title}")
        while True:
            answer = self._ask(f"Choice [1-{len(choices)}, default 1]: ")
            if not answer:
                return choices[0][1]
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1][1]
            self.print(f"Please enter a number between 1 and {len(choices)}.")

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question.

        Args:
            message: Question to show
            default: Answer used when the reply is empty

        Returns:
            True for yes
        """
        hint = "Y/n" if default else "y/N"
        while True:
            answer = self._ask(f"{message} [{hint}]: ").lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self.print("Please answer y or n.")
