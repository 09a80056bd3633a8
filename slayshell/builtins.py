"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import string
import sys
from typing import TextIO

from slayshell.environment import ShellState
from slayshell.expansion import expand
from slayshell.splitter import remove_quotes

BUILTINS = ("echo", "cd", "pwd", "env", "export", "unset", "exit")

_EXPORT_FORBIDDEN = "=-_/\\"
_SPACES = " \n\t\v\f\r"


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(f"exit {status}")
        self.status = status & 0xFF


def _error(message: str) -> None:
    sys.stderr.write(message + "\n")


def is_builtin(name: str | None) -> bool:
    """True if ``name`` is one of the shell's own commands."""
    return name in BUILTINS


def echo(args: list[str], out: TextIO) -> int:
    """Write the arguments separated by spaces.

    Leading words made of ``-`` followed only by ``n`` characters suppress
    the final newline.
    """
    words = args[1:]
    newline = True
    while words and words[0].startswith("-") and set(words[0][1:]) <= {"n"}:
        words = words[1:]
        newline = False
    out.write(" ".join(words))
    if newline:
        out.write("\n")
    return 0


def _update_pwd(state: ShellState) -> None:
    env = state.env
    current = env.find("PWD")
    old = env.find("OLDPWD")
    if current is None:
        try:
            env.add(f"PWD={os.getcwd()}")
        except OSError:
            env.add("PWD=")
        return
    if old is None:
        env.add("OLDPWD")
        return
    old.val = current.val
    try:
        current.val = os.getcwd()
    except OSError:
        pass


def cd(args: list[str], state: ShellState) -> int:
    """Change the working directory and keep ``PWD`` and ``OLDPWD`` up to date."""
    if len(args) > 2:
        state.status = 1
        _error("cd: too many arguments")
        return -1
    if len(args) < 2:
        home = state.env.find("HOME")
        if home is None:
            _update_pwd(state)
            _error("minishell : $HOME not set")
            state.status = 1
            return 1
        if home.val is not None:
            try:
                os.chdir(home.val)
            except OSError:
                pass
        _update_pwd(state)
        state.status = 0
        return 0
    if args[1] == "-":
        _update_pwd(state)
        state.status = 0
        return 0
    try:
        os.chdir(args[1])
    except OSError as exc:
        _update_pwd(state)
        _error(f"cd: {exc.strerror}: {args[1]}")
        state.status = 1
        return -1
    _update_pwd(state)
    state.status = 0
    return 0


def pwd(out: TextIO) -> int:
    """Write the working directory; return 1 if it cannot be found."""
    try:
        cwd = os.getcwd()
    except OSError:
        return 1
    out.write(cwd + "\n")
    return 0


def env(state: ShellState, out: TextIO) -> int:
    """Write every variable that has a value, as ``NAME=value``."""
    for entry in state.env:
        if entry.val is not None:
            out.write(entry.assignment + "\n")
    return 0


def _valid_export_name(name: str) -> bool:
    if not name or name[0] in string.digits:
        return False
    return not any(char in _EXPORT_FORBIDDEN for char in name)


def export(args: list[str], state: ShellState, out: TextIO) -> int:
    """Set variables from ``NAME=value`` arguments, or list them when given none."""
    state.status = 0
    for arg in args[1:]:
        assignment = remove_quotes(expand(arg, state)) or ""
        name = assignment.partition("=")[0]
        if not _valid_export_name(name):
            _error("minishell: not a valid identifier")
            state.status = 1
            continue
        state.env.add(assignment)
    if len(args) < 2 and len(state.env):
        for line in state.env.export_listing():
            out.write(line + "\n")
    return state.status


def _is_valid_identifier(name: str) -> bool:
    if name[:1] in tuple(string.digits):
        return False
    return all(char in string.ascii_letters or char in string.digits or char == "_" for char in name)


def unset(args: list[str], state: ShellState) -> int:
    """Remove the named variables; return 1 if there are no variables at all."""
    if not len(state.env):
        return 1
    for name in args[1:]:
        if not _is_valid_identifier(name):
            sys.stderr.write(f"unset: {name}: invalid parameter name\n")
            continue
        state.env.remove(name)
    state.status = 0
    return 0


def _atoi(text: str) -> int:
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


def exit_builtin(args: list[str], state: ShellState) -> None:
    """Raise ShellExit with the status given, or the last one.

    With more than one argument the shell does not exit: the status becomes
    1 and an error is written. A non-numeric argument exits with status 2.
    """
    for position, arg in enumerate(args[1:], start=1):
        if position > 1:
            state.status = 1
            _error("too many arguments")
            return
        if any(char not in string.digits and char not in "+-" for char in arg):
            state.status = 2
            _error("numeric argument required")
            break
        state.status = _atoi(arg)
    raise ShellExit(state.status)


def run_builtin(name: str, args: list[str], state: ShellState, out: TextIO) -> int:
    """Run the builtin ``name`` with ``args`` (``args[0]`` is the name).

    The status is reset to 0 first; the resulting status is returned.
    ``exit`` writes ``exit`` to ``out`` and lets ShellExit propagate.
    """
    state.status = 0
    if name == "echo":
        echo(args, out)
    elif name == "cd":
        cd(args, state)
    elif name == "pwd":
        if pwd(out):
            state.status = 1
    elif name == "env":
        env(state, out)
    elif name == "export":
        export(args, state, out)
    elif name == "unset":
        if unset(args, state):
            state.status = 1
    elif name == "exit":
        try:
            exit_builtin(args, state)
        except ShellExit:
            out.write("exit\n")
            raise
    else:
        raise ValueError(f"not a builtin: {name}")
    return state.status