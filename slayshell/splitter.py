"""Quote-aware splitting of command lines and removal of shell quotes."""

from __future__ import annotations

from collections.abc import Iterator


def _pieces(text: str, sep: str) -> Iterator[str]:
    """Yield the non-empty runs of ``text`` between unquoted ``sep`` characters."""
    double = single = False
    start = 0
    for pos, char in enumerate(text):
        if char == sep and not double and not single:
            if pos > start:
                yield text[start:pos]
            start = pos + 1
            continue
        if char == '"' and not single:
            double = not double
        elif char == "'" and not double:
            single = not single
    if start < len(text):
        yield text[start:]


def _unquote(text: str) -> str:
    double = single = False
    kept = []
    for char in text:
        if char == '"' and not single:
            double = not double
        elif char == "'" and not double:
            single = not single
        else:
            kept.append(char)
    return "".join(kept)


def remove_quotes(text: str | None) -> str | None:
    """Drop the quote characters that open or close a quoted section.

    A double quote inside single quotes, or a single quote inside double
    quotes, is kept as an ordinary character.
    """
    if text is None:
        return None
    return _unquote(text)


def split_quoted(text: str | None, sep: str, remove_quotes: bool = False) -> list[str]:
    """Split ``text`` on ``sep`` wherever it is not inside quotes.

    Empty pieces are dropped. With ``remove_quotes`` set, every piece has
    its quotes removed afterwards.
    """
    if text is None:
        return []
    pieces = list(_pieces(text, sep))
    if remove_quotes:
        return [_unquote(piece) for piece in pieces]
    return pieces