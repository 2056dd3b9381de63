"""Console implementation of the user interface."""

import sys
from typing import Callable, TextIO

from bankomat.ui.interface import UserInterface

CONFIRM_YES = "Y"


class ConsoleUI(UserInterface):
    """Terminal front end: prompts on stdout, errors on stderr.

    Parameters
    ----------
    input_func : Callable[[str], str]
        Reads a line after showing a prompt (default ``input``).
    out : TextIO | None
        Stream for messages (default ``sys.stdout``).
    err : TextIO | None
        Stream for errors (default ``sys.stderr``).
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._input = input_func
        self._out = out
        self._err = err

    def get_input(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def show_message(self, message: str) -> None:
        print(message, file=self._out or sys.stdout)

    def show_error(self, error_message: str) -> None:
        print(f"ERROR: {error_message}", file=self._err or sys.stderr)

    def confirm_action(self, message: str) -> bool:
        answer = self.get_input(f"{message} (Y/N): ")
        return answer.upper() == CONFIRM_YES
