"""Syntax checking of command lines before they are parsed."""

from __future__ import annotations

from dataclasses import dataclass

_OPERATORS = "<> |"


class ShellSyntaxError(ValueError):
    """A command line is malformed near ``token``."""

    def __init__(self, token: str) -> None:
        super().__init__(f"syntax error near {token}")
        self.token = token


@dataclass
class QuoteTracker:
    """Quote state and operator counters while scanning a line character by character."""

    double_quoted: bool = False
    single_quoted: bool = False
    greater: int = 0
    less: int = 0
    other: int = 0
    spaces: int = 0
    pipes: int = 0

    def reset(self) -> None:
        """Return every flag and counter to its initial value."""
        self.double_quoted = False
        self.single_quoted = False
        self.greater = 0
        self.less = 0
        self.other = 0
        self.spaces = 0
        self.pipes = 0

    def feed(self, char: str) -> bool:
        """Advance over ``char``; return True if it lies outside quotes."""
        if char == '"' and not self.single_quoted:
            self.double_quoted = not self.double_quoted
        elif char == "'" and not self.double_quoted:
            self.single_quoted = not self.single_quoted
        if self.double_quoted or self.single_quoted:
            return False
        self._count(char)
        return True

    def _count(self, char: str) -> None:
        if char == "<":
            self.less += 1
        elif char == ">":
            self.greater += 1
        elif char == " ":
            self.spaces += 1
        if char == "|":
            self.pipes += 1
        elif char not in " |":
            self.pipes = 0
        if char in _OPERATORS:
            self.other = 0
            if char != " " and self.less < 2 and self.greater < 2:
                self.spaces = 0
        else:
            self.other += 1

    def _violates(self, char: str) -> bool:
        """Check the operator rules after ``char``; clear counters once a word follows."""
        if self.less and self.greater:
            return True
        if self.pipes and (self.less or self.greater):
            return True
        if self.less > 2 or self.greater > 2 or self.pipes > 1:
            return True
        if (self.less > 1 or self.greater > 1) and self.spaces and char in "><|":
            return True
        if self.other and (self.less or self.greater or self.pipes):
            self.reset()
        return False


def check_syntax(line: str) -> None:
    """Raise ShellSyntaxError if ``line`` has misplaced operators or open quotes."""
    tracker = QuoteTracker()
    outside = True
    for char in line:
        outside = tracker.feed(char)
        if outside and tracker._violates(char):
            raise ShellSyntaxError(char)
    if not outside:
        raise ShellSyntaxError("' or \"")
    if tracker.less:
        raise ShellSyntaxError("<")
    if tracker.greater:
        raise ShellSyntaxError(">")
    if tracker.pipes or line.startswith("|"):
        raise ShellSyntaxError("|")