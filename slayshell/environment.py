"""The shell's variable table and the state shared by the running shell."""

from __future__ import annotations

import os
import string
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_SPACES = " \n\t\v\f\r"


@dataclass
class EnvEntry:
    """One variable: its name and, if it was given one, its value."""

    key: str
    val: str | None = None

    @classmethod
    def parse(cls, assignment: str) -> EnvEntry:
        """Build an entry from ``NAME=value`` or a bare ``NAME``."""
        key, sep, val = assignment.partition("=")
        return cls(key, val if sep else None)

    @property
    def assignment(self) -> str:
        """The entry written back as ``NAME=value``, or ``NAME`` without a value."""
        if self.val is None:
            return self.key
        return f"{self.key}={self.val}"

    def matches(self, name: str) -> bool:
        """True if ``name`` begins the assignment text or equals the key."""
        return self.assignment.startswith(name) or self.key == name


class Environment:
    """An ordered table of shell variables."""

    def __init__(self, entries: Iterable[EnvEntry] = ()) -> None:
        self._entries: list[EnvEntry] = list(entries)

    @classmethod
    def from_envp(cls, envp: Iterable[str], progname: str) -> Environment:
        """Build the table from ``NAME=value`` strings.

        When no entry matches ``_``, the program name is appended as an entry.
        """
        env = cls(EnvEntry.parse(item) for item in envp)
        if env.find("_") is None:
            env._entries.append(EnvEntry.parse(progname))
        return env

    def find(self, name: str | None) -> EnvEntry | None:
        """Return the first entry that ``name`` matches, or None.

        An entry matches when ``name`` is a prefix of its ``NAME=value`` text
        or equals its key. An empty name matches nothing.
        """
        if not name:
            return None
        return next((entry for entry in self._entries if entry.matches(name)), None)

    def add(self, assignment: str) -> EnvEntry:
        """Set a variable from ``NAME=value`` or ``NAME``, replacing a matching entry."""
        new = EnvEntry.parse(assignment)
        target = self.find(new.key)
        if target is None:
            self._entries.append(new)
            return new
        target.key, target.val = new.key, new.val
        return target

    def remove(self, name: str) -> bool:
        """Remove variables matching ``name``; return True if any went.

        The first entry is removed if it matches; then the first matching
        entry after the (new) first one is removed as well.
        """
        if not name or not self._entries:
            return False
        removed = False
        if self._entries[0].matches(name):
            del self._entries[0]
            removed = True
        for index, entry in enumerate(self._entries[1:], start=1):
            if entry.matches(name):
                del self._entries[index]
                removed = True
                break
        return removed

    def set_value(self, name: str, value: str | None) -> bool:
        """Change the value of an existing variable; return False if there is none."""
        entry = self.find(name)
        if entry is None:
            return False
        entry.val = value
        return True

    def to_envp(self) -> list[str]:
        """The table as a list of ``NAME=value`` strings, in order."""
        return [entry.assignment for entry in self._entries]

    def export_listing(self) -> list[str]:
        """Lines printed by ``export`` without arguments, sorted, hiding ``_`` names."""
        lines = []
        for entry in sorted(self._entries, key=lambda item: item.assignment):
            if entry.key.startswith("_"):
                continue
            if entry.val is None:
                lines.append(f"export {entry.key}")
            else:
                lines.append(f'export {entry.key}="{entry.val}"')
        return lines

    def path(self) -> str | None:
        """The search path, taken from the first entry whose name begins ``PATH``."""
        for entry in self._entries:
            text = entry.assignment
            if "PATH".startswith(text.split("=", 1)[0]):
                fields = [part for part in text.split("=") if part]
                return fields[1] if len(fields) > 1 else None
        return None

    def __iter__(self) -> Iterator[EnvEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class ShellState:
    """What the shell keeps between commands: its variables and last exit status."""

    env: Environment = field(default_factory=Environment)
    status: int = 0


def is_valid_identifier(name: str) -> bool:
    """True if ``name`` is letters, digits and underscores, not starting with a digit."""
    if name[:1].isdigit() and name[:1] in string.digits:
        return False
    return all(char in _IDENTIFIER_CHARS for char in name)


def _leading_int(text: str) -> int:
    """Read an optionally signed run of digits after leading white space."""
    text = text.lstrip(_SPACES)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = ""
    for char in text:
        if char not in string.digits:
            break
        digits += char
    return sign * int(digits) if digits else 0


def increment_shlvl(envp: Iterable[str]) -> list[str]:
    """Return ``envp`` with every ``SHLVL`` raised by one, or ``SHLVL=0`` added."""
    result = []
    found = False
    for item in envp:
        if item.startswith("SHLVL="):
            item = f"SHLVL={_leading_int(item[6:]) + 1}"
            found = True
        result.append(item)
    if not found:
        result.append("SHLVL=0")
    return result


def default_envp(progname: str) -> list[str]:
    """The minimal environment used when the shell starts with none."""
    try:
        cwd = os.getcwd()
    except OSError:
        cwd = ""
    return [f"PWD={cwd}", "SHLVL=0", f"_={progname}"]