"""Locating executables for commands."""

from __future__ import annotations

import os
from typing import Optional

from barbiesh.strings import split


def get_path(command: str, path_env: Optional[str] = None) -> Optional[str]:
    """First directory/command in PATH that is executable, or None.

    path_env defaults to the PATH of the current environment.
    """
    if path_env is None:
        path_env = os.environ.get("PATH")
    if path_env is None:
        return None
    for directory in split(path_env, ":"):
        full_path = f"{directory}/{command}"
        if os.access(full_path, os.X_OK):
            return full_path
    return None


def resolve_command(command: str, path_env: Optional[str] = None) -> Optional[str]:
    """Use command itself when it holds '/' and is executable, otherwise search PATH."""
    if "/" in command and os.access(command, os.X_OK):
        return command
    return get_path(command, path_env)