"""The shell's state and its cd, unset, export and env built-ins."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional, TextIO

from barbiesh.strings import split
from barbiesh.utils import ShellError, is_valid_identifier


@dataclass
class Shell:
    """State of a running shell.

    envp is the environment handed to started programs, environ the live
    variables that lookups and exports use, custom_env the NAME=value list
    that env prints.
    """

    envp: dict[str, str]
    environ: dict[str, str]
    custom_env: list[str] = field(default_factory=list)
    exit_status: int = 0

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Shell":
        """A shell started with environ, or the process environment."""
        source = dict(os.environ if environ is None else environ)
        return cls(
            envp=dict(source),
            environ=dict(source),
            custom_env=[f"{name}={value}" for name, value in source.items()],
        )


def builtin_cd(shell: Shell, tokens: Sequence[str]) -> None:
    """Change directory to the argument, or to HOME without one."""
    if len(tokens) > 1:
        try:
            os.chdir(tokens[1])
        except OSError as exc:
            raise ShellError(f"cd: no such file or directory: {tokens[1]}", 1) from exc
        return
    home = shell.environ.get("HOME")
    if home is None:
        raise ShellError("cd: HOME not set", 1)
    try:
        os.chdir(home)
    except OSError as exc:
        raise ShellError("cd: failed to change to HOME directory", 1) from exc


def builtin_unset(shell: Shell, tokens: Sequence[str]) -> None:
    """Remove the variable named by the first argument when env lists it."""
    if len(tokens) < 2:
        raise ShellError("unset: not enough arguments", 1)
    name = tokens[1]
    prefix = f"{name}="
    for index, entry in enumerate(shell.custom_env):
        if entry.startswith(prefix):
            shell.environ.pop(name, None)
            del shell.custom_env[index]
            return


def _record(custom_env: list[str], name: str, entry: str) -> None:
    for index, existing in enumerate(custom_env):
        if existing.split("=", 1)[0] == name:
            custom_env[index] = entry
            return
    custom_env.append(entry)


def builtin_export(shell: Shell, tokens: Sequence[str]) -> None:
    """Set NAME=value (or NAME to an empty value) for every argument.

    Valid arguments are applied even when others are not; the invalid ones
    are then reported in one ShellError.
    """
    invalid = []
    for arg in tokens[1:]:
        if "=" in arg:
            parts = split(arg, "=")
            name = parts[0] if parts else None
            value = parts[1] if len(parts) > 1 else ""
        else:
            name, value = arg, ""
        if not is_valid_identifier(name):
            invalid.append(arg)
            continue
        shell.environ[name] = value
        _record(shell.custom_env, name, arg)
    if invalid:
        raise ShellError(f"export: not a valid identifier: {', '.join(invalid)}", 1)


def builtin_env(shell: Shell, out: Optional[TextIO] = None) -> None:
    """Print every entry of the shell's environment list, one per line."""
    stream = sys.stdout if out is None else out
    for entry in shell.custom_env:
        stream.write(f"{entry}\n")