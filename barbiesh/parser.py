"""Variable expansion and quote handling for tokenized command lines."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping, Sequence
from typing import Optional

from barbiesh.chars import itoa
from barbiesh.utils import ShellError

_VARIABLE = re.compile(r"\$(?:(\?)|([A-Za-z0-9_]+)|(?=.))", re.DOTALL)


def _environment(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def get_env_value(name: str, env: Optional[Mapping[str, str]] = None, exit_status: int = 0) -> str:
    """Value of a variable; '?' gives the last exit status, unknown names give ''."""
    if name == "?":
        return itoa(exit_status)
    if not name:
        return ""
    return _environment(env).get(name, "")


def expand_env_variables(token: str, env: Optional[Mapping[str, str]] = None, exit_status: int = 0) -> str:
    """Replace $NAME and $? in a token; a trailing '$' is kept as is."""
    environment = _environment(env)

    def replace(match: re.Match) -> str:
        if match.group(1):
            return itoa(exit_status)
        return get_env_value(match.group(2) or "", environment, exit_status)

    return _VARIABLE.sub(replace, token)


def expand_tokens(tokens: Sequence[str], env: Optional[Mapping[str, str]] = None, exit_status: int = 0) -> list[str]:
    """Expand variables in every token that holds '$' and does not start with a single quote."""
    return [
        expand_env_variables(token, env, exit_status) if "$" in token and not token.startswith("'") else token
        for token in tokens
    ]


def find_closing_quote(tokens: Sequence[str], start: int, quote_type: str) -> Optional[int]:
    """Index of the first token from start on that ends with quote_type, or None."""
    for index, token in enumerate(tokens[start:], start):
        if token.endswith(quote_type):
            return index
    return None


def merge_tokens(tokens: Sequence[str], start: int, end: int, quote_type: str) -> str:
    """Join tokens start..end with spaces, dropping the opening and closing quote."""
    merged = " ".join([tokens[start][1:], *tokens[start + 1 : end + 1]])
    if merged.endswith(quote_type):
        merged = merged[:-1]
    return merged


def handle_quotes(
    tokens: Sequence[str],
    quote_type: str,
    expand_env: bool = False,
    env: Optional[Mapping[str, str]] = None,
    exit_status: int = 0,
) -> list[str]:
    """Strip quote_type quotes, merging tokens that a quoted span was split across.

    With expand_env and double quotes, variables are expanded from the quoted
    token onward. Raises ShellError when a quote is never closed.
    """
    result = list(tokens)
    expand = expand_env and quote_type == '"'
    index = 0
    while index < len(result):
        token = result[index]
        if not token.startswith(quote_type):
            index += 1
            continue
        if token.endswith(quote_type):
            result[index] = token[1:-1]
            if expand:
                result[index:] = expand_tokens(result[index:], env, exit_status)
            index += 1
            continue
        closing = find_closing_quote(result, index, quote_type)
        if closing is None:
            raise ShellError(f"unmatched {quote_type}", 2)
        result[index] = merge_tokens(result, index, closing, quote_type)
        if expand:
            result[index:] = expand_tokens(result[index:], env, exit_status)
        del result[index + 1 : closing + 1]
    return result


def remove_quotes(text: str) -> str:
    """Drop every single and double quote character."""
    return text.replace("'", "").replace('"', "")