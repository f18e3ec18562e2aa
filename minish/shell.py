"""The interactive loop: prompt, read a line, parse it and run it."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable, Mapping

from .builtins import ShellExit
from .environment import Environment
from .executor import execute
from .parser import DEFAULT_BUILTINS, Command, parse_line
from .prompt import display_info, read_hostname

InputFunc = Callable[[str], str]


class Shell:
    """State of one interactive session."""

    def __init__(
        self,
        environ: Mapping[str, str] | Iterable[str] | None = None,
        hostname: str | None = None,
    ) -> None:
        if environ is None:
            environ = os.environ
        if isinstance(environ, Mapping):
            entries = [f"{key}={value}" for key, value in environ.items()]
        else:
            entries = list(environ)
        self.environment = Environment(entries)
        self.builtins: tuple[str, ...] = DEFAULT_BUILTINS
        self.hostname = hostname if hostname is not None else read_hostname()
        self.current_dir: str | None = None
        self.commands: list[Command] = []
        self._read_line: Callable[[str], str | None] | None = None

    def prompt_text(self) -> str:
        """Refresh the working directory and return the prompt to show."""
        try:
            self.current_dir = os.getcwd()
        except OSError:
            self.current_dir = None
        return display_info(None, self.hostname, self.current_dir)

    def handle_line(self, line: str | None) -> int | None:
        """Parse *line* and run its first command.

        Returns the command's status, or None when there was nothing to run.
        """
        if not line:
            return None
        self.commands = parse_line(line, self.builtins, self._read_line)
        if not self.commands:
            return None
        return execute(self.commands[0], self.environment)

    def run(self, input_func: InputFunc | None = None) -> int:
        """Read and run lines until end of input or the exit builtin."""
        reader = input_func if input_func is not None else input

        def read_line(prompt: str) -> str | None:
            try:
                return reader(prompt)
            except EOFError:
                return None

        self._read_line = read_line
        while True:
            line = read_line(self.prompt_text())
            if line is None:
                return 0
            try:
                self.handle_line(line)
            except ShellExit as exc:
                return exc.status


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell on the terminal."""
    try:
        import readline  # noqa: F401  (line editing and history for input())
    except ImportError:
        pass
    return Shell().run(input)


if __name__ == "__main__":
    sys.exit(main())