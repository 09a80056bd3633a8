"""Expansion of ``$NAME`` and ``$?`` in command text."""

from __future__ import annotations

import string

from slayshell.environment import ShellState

_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def _status_text(status: int) -> str:
    magnitude = abs(status) % 255
    return str(-magnitude if status < 0 else magnitude)


def _expand_at(text: str, pos: int, state: ShellState) -> str:
    """Replace the ``$`` reference starting at ``pos``; return ``text`` unchanged if none."""
    if pos + 1 >= len(text) or text[pos + 1] == " ":
        return text
    keystart = pos + 1
    if text[keystart] not in _WORD_CHARS and text[keystart] != "?":
        return text
    begin = text[:pos]
    end = keystart
    while end < len(text):
        if text[end] == "?":
            begin += _status_text(state.status)
            end += 1
            break
        if text[end] not in _WORD_CHARS:
            break
        end += 1
    entry = state.env.find(text[keystart:end])
    value = entry.val if entry is not None and entry.val is not None else ""
    return begin + value + text[end:]


def expand(text: str | None, state: ShellState) -> str | None:
    """Expand variable references outside single quotes.

    ``$?`` becomes the last exit status modulo 255; unknown names become
    the empty string. A ``$`` followed by a space, the end of the text or a
    character that cannot start a name is left as it is.
    """
    if text is None:
        return None
    pos = 0
    single = False
    attempts = 0
    while pos < len(text):
        char = text[pos]
        if char == "'":
            single = not single
        if not single:
            if char == "$" and attempts < 2:
                text = _expand_at(text, pos, state)
                attempts += 1
                continue
            attempts = 0
        pos += 1
    return text