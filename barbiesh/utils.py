"""Shell errors, syntax checks and identifier validation."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional, TextIO

from barbiesh.chars import is_alnum, is_alpha


class ShellError(Exception):
    """An error reported by the shell, with the status it should end with."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    @property
    def fatal(self) -> bool:
        """True when the shell should exit with exit_code after reporting."""
        return self.exit_code >= 0 and self.exit_code != 1


def report_error(message: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a message prefixed with the shell's name."""
    if not message:
        return
    out = sys.stderr if stream is None else stream
    out.write(f"minishell: {message}\n")


def validate_syntax(tokens: Sequence[str]) -> bool:
    """Check for misplaced ';' and '> <'; raises ShellError on a syntax error."""
    for current, following in zip(tokens, [*tokens[1:], None]):
        if current == ";" and (following is None or following == ";"):
            raise ShellError("syntax error near unexpected token `;'", 2)
        if current == ">" and following == "<":
            raise ShellError("syntax error near unexpected token `><'", 2)
    return True


def is_valid_identifier(name: Optional[str]) -> bool:
    """True when name starts with a letter or '_' and holds only [A-Za-z0-9_=]."""
    if not name or not (is_alpha(name[0]) or name[0] == "_"):
        return False
    return all(is_alnum(ch) or ch in "_=" for ch in name)