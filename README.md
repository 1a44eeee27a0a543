# minish

Parts of a small POSIX-style shell, packaged as a library. It has no runtime dependencies.

## Modules

### `minish.nodes`

This module holds the command tree.

- Node classes are `Command`, `Subshell`, `Pipe`, `And` and `Or`.
- The `type` property of each node returns a `NodeType`.
- A `Redirect` has a `RedirectType`, which is one of `<`, `>`, `>>` or `<<`.
  - Its `fd` is 0 for input and heredoc redirections, and 1 for output and append redirections.
  - `Redirect.from_tokens(tokens, index)` builds one from an operator token and the word that follows it. It raises `ValueError` when the operator is unknown or the word is missing.
- `run_and(node, execute)` and `run_or(node, execute)` short-circuit `&&` and `||`. They work through an `execute` callable that you supply, which returns an exit status.

### `minish.environment`

- `Environment` stores variables in insertion order. A variable may exist without a value.
  - `Environment.from_strings` builds one from `NAME=value` strings and skips entries that start with `OLDPWD`.
  - `to_strings()` returns `NAME=value` strings for the variables that have a value.
  - `env_lines()` gives the lines `env` prints.
  - `export_lines()` gives the lines `export` prints with no arguments, in the form `declare -x NAME="value"`.
- `is_valid_identifier(name)` checks shell variable names.
- `split_assignment(arg)` splits at the first `=`. When there is no `=`, the value is `None`.

### `minish.builtins`

- The builtins are `echo`, `cd`, `pwd`, `export`, `unset`, `print_env` (the `env` command) and `exit_builtin`.
  - Each one writes to the text stream you pass as `out`, or to standard output, and returns a status.
  - `exit_builtin` raises `ShellExit`, whose `status` holds the exit code. When the argument is not numeric it raises `ShellExit(255)`. When there are too many arguments it returns 1.
  - `cd` sets `OLDPWD` and `PWD` in the environment after a successful change to an argument directory.
- `is_builtin(argv)` tells you whether a command names a builtin.
- `run_builtin(argv, env, out)` dispatches a command to its builtin. It raises `ValueError` for anything else.
- Helper functions: `echo_flag_count`, `is_number` and `parse_exit_status`.

### `minish.heredoc`

- `Delimiter` holds a heredoc delimiter with its quotes removed. `quoted` tells you whether the delimiter was written with quotes.
- `make_delimiter` builds one delimiter, and `build_delimiters` builds a list of them.
- `is_quoted` detects quotes.
- `remove_quotes` drops matched quote pairs. It raises `ValueError` on an unclosed quote.

### `minish.linereader`

- `get_next_line(fd, buffer_size=2)` reads from a raw file descriptor in chunks until it reaches a newline or end of file. It returns the first line, or `None` at end of file. It does not keep data past the newline between calls.
- `split_first_line(buffer)` returns the first line, with its newline, and the rest of the buffer.

### `minish.textutil`

String helpers:

- `atoi`: C-style parsing, truncated to 32 bits. On overflow it returns `-1` for positive input and `0` for negative input.
- `itoa`
- `split`: drops empty words.
- `strtrim`
- `substr`
- `strnstr`: returns an index or `None`.
- `strncmp`

## Example

```python
import io
from minish.environment import Environment
from minish.builtins import run_builtin, ShellExit

env = Environment.from_strings(["HOME=/tmp", "USER=demo"])
out = io.StringIO()
status = run_builtin(["export", "GREETING=hello"], env, out)
print(status, env.get("GREETING"))   # 0 hello

run_builtin(["echo", "-n", "hi", "there"], env, out)
print(repr(out.getvalue()))          # 'hi there'

try:
    run_builtin(["exit", "3"], env, out)
except ShellExit as stop:
    print(stop.status)               # 3
```

## What it does not do

This is a library of parts, not a shell you can run. It has no command, no interactive prompt and no tokenizer or parser that turns a command line into nodes. It also has no executor for pipes, subshells or external programs, and it does not apply redirections. It does no variable, quote or wildcard expansion of arguments and no signal handling. You build the tree from the `minish.nodes` classes yourself, and you supply the `execute` callable.

## Tests

```
pip install -e .[test]
pytest
```