"""Building the interactive prompt: host name, user and directory."""

from __future__ import annotations

import os

BBLUE = "\033[1;34m"
BMAGENTA = "\033[1;35m"
RESET = "\033[0m"

DEFAULT_HOSTNAME = "localhost"
DEFAULT_USER = "user"


def read_hostname(path: str | os.PathLike[str] = "/etc/hostname") -> str:
    """Read the host name from *path*, dropping its final character.

    Falls back to ``localhost`` when the file cannot be read or is empty.
    """
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError:
        return DEFAULT_HOSTNAME
    if not data:
        return DEFAULT_HOSTNAME
    return data[:-1].decode(errors="replace")


def display_path(current_dir: str | None, user: str) -> str:
    """Show *current_dir* relative to the first occurrence of *user*.

    A directory ending in the user name shows as ``~``; one that does not
    contain it at all shows as ``/``.
    """
    if current_dir is None:
        return "~"
    index = current_dir.find(user)
    if index == -1:
        return "/"
    rest = current_dir[index:]
    if rest == user:
        return "~"
    return "~" + rest[len(user):]


def display_info(
    user: str | None = None,
    hostname: str | None = None,
    current_dir: str | None = None,
) -> str:
    """Return the coloured ``user@host:path$ `` prompt."""
    if user is None:
        user = os.environ.get("USER")
        if user is None:
            user = DEFAULT_USER
    if hostname is None:
        hostname = DEFAULT_HOSTNAME
    path = display_path(current_dir, user)
    return f"{BBLUE}{user}@{hostname}:{BMAGENTA}{path}{RESET}$ "