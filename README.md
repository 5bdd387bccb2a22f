# barbiesh

A small interactive shell. It reads a line, splits it into words on spaces,
handles quotes and `$VARIABLE` expansion, runs a few builtins itself and
starts every other program it finds. It also runs pipelines and handles
`<`, `>`, `>>` and `<<` redirections.

## Installing

```
pip install .
```

## Running

```
barbiesh
```

The prompt is `Barbie Bash 💅: `. Line editing and history come from the
`readline` module where Python has it. End the session with `exit` or
Ctrl-D. Ctrl-C abandons the current line and shows a fresh prompt; Ctrl-\
is ignored.

### Builtins

| Command               | What it does                                                                 |
|-----------------------|------------------------------------------------------------------------------|
| `cd [dir]`            | Change directory; without an argument, go to `$HOME`                         |
| `export NAME[=VALUE]` | Set one or more variables in the shell; `NAME` alone sets an empty value     |
| `unset NAME`          | Remove the variable named by the first argument, if `env` lists it           |
| `env`                 | Print the shell's list of variables as `NAME=value` lines                    |
| `exit [n]`            | Leave the shell with the last exit status; a non-numeric argument is refused |

Errors from `cd`, `export` and `unset` are reported on standard error as
`minishell: <message>`.

### Expansion and quoting

- `$NAME` becomes the value of the shell variable, or nothing if it is
  unset. `$?` becomes the exit status of the last command. A `$` at the
  end of a word is kept.
- Words that start with a single quote are not expanded.
- When the second word of a line contains a quote, quoted spans are
  joined back into one word and their quotes removed: single-quoted text
  is not expanded, double-quoted text is. An unclosed quote is reported
  as `unmatched '` or `unmatched "` and ends the shell with status 2.

### Redirections

```
ls -l > listing.txt
echo more >> listing.txt
wc -l < listing.txt
cat << END
```

The command's arguments end at the first redirection operator. A later
redirection of the same stream replaces an earlier one. A `<<` here-document
reads lines with the prompt `> ` until one equals the delimiter.

### Pipelines

```
ls | grep py | wc -l
```

The commands of a pipeline run one after another, each reading the whole
output of the one before. Within a pipeline, commands are only looked up on
`PATH`, quotes are simply removed from every word, and builtins and `$`
expansion do not apply.

## What it does not do

- Commands are split on spaces and `|` only: there is no `;`, `&&`, `||`,
  background jobs, globbing or command substitution.
- Variables set with `export` are used for expansion and listed by `env`,
  but programs the shell starts receive the environment the shell itself
  was started with.
- `exit n` does not use `n` as the exit status.

## Using it from Python

The pieces the shell is built from can be used on their own:

```python
from barbiesh.parser import expand_env_variables, handle_quotes
from barbiesh.strings import split

split("echo   hello  world", " ")                        # ['echo', 'hello', 'world']
expand_env_variables("$HOME/x", {"HOME": "/home/me"}, 0)  # '/home/me/x'
handle_quotes(["echo", '"a', 'b"'], '"')                   # ['echo', 'a b']
```

`barbiesh.main.process_line` runs one line of input against a
`barbiesh.builtins.Shell` (made with `Shell.from_environ()`), just as the
interactive loop does, and returns the shell's exit status afterwards; it
raises `barbiesh.main.ExitShell` when the line ends the shell.

Other modules:

- `barbiesh.executor` — `get_path` and `resolve_command` find executables.
- `barbiesh.redir` — `handle_redirections` opens a command's redirections
  and returns a `Redirections` context manager.
- `barbiesh.utils` — `ShellError`, `validate_syntax`, `is_valid_identifier`.
- `barbiesh.chars`, `barbiesh.strings`, `barbiesh.memory`,
  `barbiesh.output` — small character, string, byte-buffer and stream
  helpers with C library semantics (`atoi`, `strncmp`, `strlcpy`,
  `memcmp`, `putnbr_fd` and the like).

## Running the tests

```
pip install .[test]
pytest
```