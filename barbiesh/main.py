"""The interactive loop: reading lines, built-ins, commands and pipelines."""

from __future__ import annotations

import signal
import subprocess
import sys
from collections.abc import Callable, Sequence
from typing import Optional, TextIO

from barbiesh.builtins import Shell, builtin_cd, builtin_env, builtin_export, builtin_unset
from barbiesh.chars import is_digit
from barbiesh.executor import get_path, resolve_command
from barbiesh.parser import expand_tokens, handle_quotes, remove_quotes
from barbiesh.redir import ReadLine, Redirections, handle_redirections
from barbiesh.signals import setup_signal_handlers
from barbiesh.strings import split
from barbiesh.utils import ShellError, report_error

PROMPT = "\001\033[38;2;255;105;180m\002Barbie Bash \U0001f485\001\033[0m\002: "
FAREWELL = "\033[38;2;255;105;180mBye Bitch ;*\033[0m\n"

_BUILTINS = {"cd": builtin_cd, "unset": builtin_unset, "export": builtin_export}

Lookup = Callable[[str, Optional[str]], Optional[str]]


class ExitShell(Exception):
    """Raised to end the shell with a status."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def handle_builtin(tokens: Sequence[str], shell: Shell, out: Optional[TextIO] = None) -> bool:
    """Run tokens as a built-in; False when tokens[0] is not one.

    exit without an argument or with a numeric one raises ExitShell with the
    last exit status.
    """
    stream = sys.stdout if out is None else out
    name = tokens[0]
    if name == "exit":
        if len(tokens) < 2 or all(is_digit(ch) for ch in tokens[1]):
            stream.write(FAREWELL)
            stream.flush()
            raise ExitShell(shell.exit_status)
        stream.write("Invalid exit argument\n")
        return True
    if name == "env":
        builtin_env(shell, stream)
    elif name in _BUILTINS:
        try:
            _BUILTINS[name](shell, tokens)
        except ShellError as exc:
            report_error(exc.message)
    else:
        return False
    shell.exit_status = 0
    return True


def _execute(
    argv: list[str],
    shell: Shell,
    redirs: Redirections,
    lookup: Lookup,
    stdin_data: Optional[bytes],
    capture: bool,
) -> tuple[int, bytes]:
    path = lookup(argv[0], shell.environ.get("PATH", ""))
    if path is None:
        sys.stderr.write(f"Command not found: {argv[0]}\n")
        return 127, b""
    options: dict = {"stdout": redirs.stdout if redirs.stdout is not None else (subprocess.PIPE if capture else None)}
    if redirs.stdin is not None:
        options["stdin"] = redirs.stdin
    elif stdin_data is not None:
        options["input"] = stdin_data
    sys.stdout.flush()
    try:
        completed = subprocess.run(argv, executable=path, env=shell.envp, check=False, **options)
    except OSError as exc:
        sys.stderr.write(f"execve: {exc.strerror or exc}\n")
        return 127, b""
    code = completed.returncode
    status = code if code >= 0 else 128 - code
    return status, completed.stdout or b""


def _run_stage(
    tokens: Sequence[str],
    shell: Shell,
    read_line: Optional[ReadLine],
    lookup: Lookup,
    stdin_data: Optional[bytes] = None,
    capture: bool = False,
    transform: Callable[[str], str] = str,
) -> tuple[int, bytes]:
    try:
        redirs = handle_redirections(tokens, read_line)
    except ShellError as exc:
        sys.stderr.write(f"{exc.message}\nredirection error\n")
        return 1, b""
    with redirs:
        argv = [transform(token) for token in redirs.argv]
        if not argv:
            return 0, b""
        return _execute(argv, shell, redirs, lookup, stdin_data, capture)


def run_command(tokens: Sequence[str], shell: Shell, read_line: Optional[ReadLine] = None) -> int:
    """Run one command with its redirections and return its exit status."""
    status, _ = _run_stage(tokens, shell, read_line, resolve_command)
    shell.exit_status = status
    return status


def run_pipeline(commands: Sequence[str], shell: Shell, read_line: Optional[ReadLine] = None) -> int:
    """Run commands one after another, each reading what the previous wrote.

    Commands are looked up in PATH only and have their quotes removed.
    Returns the last command's exit status.
    """
    status = shell.exit_status
    data: Optional[bytes] = None
    for position, command in enumerate(commands):
        last = position == len(commands) - 1
        status, data = _run_stage(
            split(command, " "),
            shell,
            read_line,
            get_path,
            stdin_data=data,
            capture=not last,
            transform=remove_quotes,
        )
        shell.exit_status = status
    return status


def process_line(
    line: str,
    shell: Shell,
    out: Optional[TextIO] = None,
    read_line: Optional[ReadLine] = None,
) -> int:
    """Handle one input line and return the shell's exit status afterwards.

    Raises ExitShell when the line ends the shell.
    """
    if "|" in line:
        return run_pipeline(split(line, "|"), shell, read_line)
    tokens = split(line, " ")
    if not tokens:
        return shell.exit_status
    try:
        if len(tokens) > 1 and ("'" in tokens[1] or '"' in tokens[1]):
            tokens = handle_quotes(tokens, "'", False, shell.environ, shell.exit_status)
            tokens = handle_quotes(tokens, '"', True, shell.environ, shell.exit_status)
        else:
            tokens = expand_tokens(tokens, shell.environ, shell.exit_status)
    except ShellError as exc:
        report_error(exc.message)
        if exc.fatal:
            raise ExitShell(exc.exit_code) from exc
        return shell.exit_status
    if handle_builtin(tokens, shell, out):
        return shell.exit_status
    return run_command(tokens, shell, read_line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive shell; arguments are ignored."""
    try:
        import readline  # noqa: F401  (line editing and history for input())
    except ImportError:
        pass
    shell = Shell.from_environ()
    previous = setup_signal_handlers()
    try:
        while True:
            try:
                line = input(PROMPT)
            except EOFError:
                sys.stdout.write("\n" + FAREWELL)
                sys.stdout.flush()
                return 0
            except KeyboardInterrupt:
                continue
            try:
                process_line(line, shell)
            except ExitShell as exc:
                return exc.status
            except KeyboardInterrupt:
                continue
    finally:
        for signo, handler in previous.items():
            signal.signal(signo, handler)


if __name__ == "__main__":
    sys.exit(main())