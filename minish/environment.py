"""The shell's own environment: an ordered list of ``KEY=VALUE`` entries."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator


def is_valid_identifier(name: str) -> bool:
    """Return True if *name* may be used as a variable name.

    The first character must be an ASCII letter or underscore. The rest,
    up to an optional ``=``, must be ASCII letters, digits or underscores.
    """
    if not name:
        return False
    first = name[0]
    if not (_is_alpha(first) or first == "_"):
        return False
    for char in name[1:]:
        if char == "=":
            break
        if not (_is_alnum(char) or char == "_"):
            return False
    return True


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_alnum(char: str) -> bool:
    return _is_alpha(char) or ("0" <= char <= "9")


def _name_matches(entry: str, name: str) -> bool:
    """True if *entry* is exactly ``name=...``."""
    head, sep, _ = entry.partition("=")
    return bool(sep) and head == name


class Environment:
    """Ordered environment entries, kept as ``KEY=VALUE`` strings.

    Entries added by ``export NAME`` without a value are stored as the bare
    name and are not seen by lookups.
    """

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    def _index_of(self, key: str) -> int | None:
        prefix = f"{key}="
        for index, entry in enumerate(self._entries):
            if entry.startswith(prefix):
                return index
        return None

    def get(self, key: str) -> str | None:
        """Return the value of *key*, or None if it is not set."""
        index = self._index_of(key)
        if index is None:
            return None
        return self._entries[index][len(key) + 1:]

    def set(self, key: str, value: str, overwrite: bool = True) -> None:
        """Set *key* to *value*; an existing value is kept unless *overwrite*."""
        index = self._index_of(key)
        if index is None:
            self._entries.append(f"{key}={value}")
        elif overwrite:
            self._entries[index] = f"{key}={value}"

    def unsetenv(self, key: str) -> None:
        """Remove every entry that starts with ``key=``."""
        prefix = f"{key}="
        self._entries = [e for e in self._entries if not e.startswith(prefix)]

    def unset(self, name: str | None) -> int:
        """Remove the variable *name*; return the builtin's exit status."""
        if not name:
            return 1
        self._entries = [e for e in self._entries if not _name_matches(e, name)]
        return 0

    def export(self, args: Iterable[str]) -> int:
        """Export each ``NAME`` or ``NAME=VALUE`` in *args*.

        Invalid names are reported on standard error and make the status 1;
        the remaining arguments are still processed.
        """
        status = 0
        for arg in args:
            key, sep, value = arg.partition("=")
            if not is_valid_identifier(key):
                sys.stderr.write(
                    f"minishell: export: `{arg}': not a valid identifier\n"
                )
                status = 1
                continue
            index = self._index_of(key)
            if index is None:
                self._entries.append(arg)
            else:
                self._entries[index] = f"{key}={value if sep else ''}"
        return status

    def as_list(self) -> list[str]:
        """Return a copy of the entries, suitable for a child process."""
        return list(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)