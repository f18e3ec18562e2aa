"""Running parsed commands: builtins, single external programs and pipelines."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable
from typing import IO, TextIO

from .builtins import echo, env, exit_shell, pwd
from .environment import Environment
from .parser import Command, CommandKind


def _child_env(environment: Environment) -> dict[str, str]:
    """Build a process environment from the entries; the first of a name wins."""
    result: dict[str, str] = {}
    for entry in environment:
        key, sep, value = entry.partition("=")
        if sep and key:
            result.setdefault(key, value)
    return result


def find_in_path(cmd: str | None, environment: Environment) -> str | None:
    """Return the first ``dir/cmd`` on ``$PATH`` that is executable, or None."""
    if not cmd:
        return None
    search = environment.get("PATH")
    if search is None:
        return None
    for directory in filter(None, search.split(":")):
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def run_external(command: str, argv: list[str], environment: Environment) -> int:
    """Run the program at *command* with *argv* and wait for it.

    Returns 0 once the program has been waited for. A program that cannot
    be started is reported on standard error.
    """
    try:
        subprocess.run(
            argv,
            executable=command,
            env=_child_env(environment),
            check=False,
        )
    except OSError as exc:
        sys.stderr.write(f"execve: {exc.strerror or exc}\n")
    return 0


def run_pipeline(
    commands: Iterable[str],
    environment: Environment,
    err: TextIO | None = None,
) -> list[int]:
    """Run space-separated command lines joined by pipes.

    Each program is looked up on ``$PATH``. Returns the exit status of every
    stage: 127 for a command that was not found, 1 for an empty one.
    """
    err = err if err is not None else sys.stderr
    lines = list(commands)
    if not lines:
        return []
    child_env = _child_env(environment)
    last = len(lines) - 1
    stages: list[subprocess.Popen[bytes] | int] = []
    previous: IO[bytes] | None = None

    for position, line in enumerate(lines):
        if previous is not None:
            stdin: IO[bytes] | int | None = previous
        elif position == 0:
            stdin = None
        else:
            stdin = subprocess.DEVNULL
        stdout = subprocess.PIPE if position < last else None
        argv = [word for word in line.split(" ") if word]
        path = find_in_path(argv[0], environment) if argv else None

        process: subprocess.Popen[bytes] | None = None
        if not argv:
            stages.append(1)
        elif path is None:
            err.write(f"{argv[0]}: command not found\n")
            stages.append(127)
        else:
            try:
                process = subprocess.Popen(
                    argv, executable=path, stdin=stdin, stdout=stdout, env=child_env
                )
            except OSError as exc:
                err.write(f"execve failed: {exc.strerror or exc}\n")
                stages.append(1)
            else:
                stages.append(process)

        if previous is not None:
            previous.close()
        previous = process.stdout if process is not None else None

    if previous is not None:
        previous.close()
    return [stage if isinstance(stage, int) else stage.wait() for stage in stages]


def execute(
    command: Command,
    environment: Environment,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Run one parsed command and return its status.

    The exit builtin raises ShellExit. Builtin names without a handler here
    do nothing and return 0.
    """
    argv = command.argv()
    if command.kind in (CommandKind.BIN, CommandKind.PATH):
        return run_external(command.command, argv, environment)
    name = command.command
    if name == "echo":
        return echo(argv, out)
    if name == "pwd":
        return pwd(out, err)
    if name == "exit":
        exit_shell(argv, out, err)
    if name == "env":
        return env(environment, out)
    return 0