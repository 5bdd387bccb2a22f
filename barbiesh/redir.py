"""Input and output redirection for commands."""

from __future__ import annotations

import sys
import tempfile
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import BinaryIO, Optional

from barbiesh.utils import ShellError

ReadLine = Callable[[str], str]

HEREDOC_PROMPT = "> "


@dataclass
class Redirections:
    """The arguments left for a command and the streams its redirections opened."""

    argv: list[str]
    stdin: Optional[BinaryIO] = None
    stdout: Optional[BinaryIO] = None

    def close(self) -> None:
        """Close every stream opened for the command."""
        for stream in (self.stdin, self.stdout):
            if stream is not None:
                stream.close()
        self.stdin = None
        self.stdout = None

    def __enter__(self) -> "Redirections":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _open(filename: str, mode: str, label: str) -> BinaryIO:
    try:
        return open(filename, mode)
    except OSError as exc:
        raise ShellError(f"{label}: {exc.strerror or exc}", 1) from exc


def redirect_output(filename: str) -> BinaryIO:
    """Open filename for writing, created or truncated."""
    return _open(filename, "wb", "open")


def redirect_output_append(filename: str) -> BinaryIO:
    """Open filename for appending, created if missing."""
    return _open(filename, "ab", "open append")


def redirect_input(filename: str) -> BinaryIO:
    """Open filename for reading."""
    return _open(filename, "rb", "open")


def read_heredoc(delimiter: str, read_line: Optional[ReadLine] = None) -> str:
    """Read lines until one equals delimiter; each kept line ends with a newline.

    read_line is called with the prompt and raises EOFError at end of input;
    it defaults to input().
    """
    reader = input if read_line is None else read_line
    lines = []
    while True:
        try:
            line = reader(HEREDOC_PROMPT)
        except EOFError:
            sys.stderr.write("warning: heredoc delimited by EOF\n")
            break
        if line == delimiter:
            break
        lines.append(f"{line}\n")
    return "".join(lines)


def _heredoc_stream(delimiter: str, read_line: Optional[ReadLine]) -> BinaryIO:
    stream = tempfile.TemporaryFile()
    stream.write(read_heredoc(delimiter, read_line).encode())
    stream.seek(0)
    return stream


def _operator(token: str) -> Optional[str]:
    if token.startswith(">>"):
        return ">>"
    if token.startswith("<<"):
        return "<<"
    if ">" in token:
        return ">"
    if "<" in token:
        return "<"
    return None


def _replace(current: Optional[BinaryIO], new: BinaryIO) -> BinaryIO:
    if current is not None:
        current.close()
    return new


def handle_redirections(tokens: Sequence[str], read_line: Optional[ReadLine] = None) -> Redirections:
    """Open the redirections among tokens.

    The command's arguments end at the first redirection operator. A later
    redirection of the same stream replaces an earlier one. Raises ShellError
    when an operator has no target or a file cannot be opened.
    """
    redirs = Redirections(argv=list(tokens))
    truncated = False
    index = 0
    try:
        while index < len(tokens):
            kind = _operator(tokens[index])
            if kind is None:
                index += 1
                continue
            if index + 1 >= len(tokens):
                noun = "delimiter" if kind == "<<" else "filename"
                raise ShellError(f"syntax error: expected {noun} after '{kind}'", 1)
            target = tokens[index + 1]
            if kind == ">>":
                redirs.stdout = _replace(redirs.stdout, redirect_output_append(target))
            elif kind == "<<":
                redirs.stdin = _replace(redirs.stdin, _heredoc_stream(target, read_line))
            elif kind == ">":
                redirs.stdout = _replace(redirs.stdout, redirect_output(target))
            else:
                redirs.stdin = _replace(redirs.stdin, redirect_input(target))
            if not truncated:
                redirs.argv = list(tokens[:index])
                truncated = True
            index += 2
    except BaseException:
        redirs.close()
        raise
    return redirs