# slayshell

slayshell holds the building blocks of a small POSIX-style shell: splitting
command lines without breaking quoted text, checking a line for syntax
errors, keeping a table of shell variables, expanding `$NAME` and `$?`, and
running the builtins `echo`, `cd`, `pwd`, `env`, `export`, `unset` and
`exit`.

## Installation

```
pip install .
```

## Modules

### `slayshell.splitter`

- `split_quoted(text, sep, remove_quotes=False)` splits `text` on `sep`
  wherever it is not inside single or double quotes. Empty pieces are
  dropped; `None` gives an empty list. With `remove_quotes` set, each piece
  has its quotes removed.
- `remove_quotes(text)` drops the quote characters that open or close a
  quoted section, keeping a `"` inside single quotes and a `'` inside double
  quotes.

```python
from slayshell.splitter import split_quoted

split_quoted('echo "a b" c', " ")                      # ['echo', '"a b"', 'c']
split_quoted('echo "a b" c', " ", remove_quotes=True)  # ['echo', 'a b', 'c']
```

### `slayshell.syntax`

`check_syntax(line)` raises `ShellSyntaxError` for unclosed quotes, a
trailing or leading `|`, a dangling `<` or `>`, or operators that may not
stand together (such as `<>`, `|>` or `>>>`). The error's `token` attribute
names what it was found near. `QuoteTracker` is the character-by-character
scanner it uses: `feed(char)` returns whether the character lies outside
quotes, and `reset()` clears its state.

```python
from slayshell.syntax import ShellSyntaxError, check_syntax

try:
    check_syntax("ls |")
except ShellSyntaxError as exc:
    print(exc.token)   # |
```

### `slayshell.environment`

- `Environment` is an ordered table of `EnvEntry` objects (a `key` and an
  optional `val`). Build it with `Environment.from_envp(envp, progname)`;
  it appends `progname` as an entry when no entry matches `_`. It offers
  `find`, `add`, `remove`, `set_value`, `to_envp`, `export_listing` (the
  sorted lines `export` prints, hiding names that start with `_`) and
  `path`, and can be iterated and measured with `len`.
- `ShellState` bundles an `Environment` (`env`) with the last exit
  `status`.
- `is_valid_identifier(name)`, `increment_shlvl(envp)` (raises every
  `SHLVL` by one, or adds `SHLVL=0`) and `default_envp(progname)` (the
  `PWD`, `SHLVL` and `_` entries used when starting with no environment).

### `slayshell.expansion`

`expand(text, state)` replaces `$NAME` with the variable's value and `$?`
with the last status modulo 255, outside single quotes. Unknown names
become the empty string; a `$` followed by a space, the end of the text or a
character that cannot start a name is left as it is.

```python
from slayshell.environment import Environment, ShellState
from slayshell.expansion import expand

state = ShellState(Environment.from_envp(["HOME=/home/user"], "slayshell"))
expand("$HOME/notes", state)   # '/home/user/notes'
expand("'$HOME'", state)       # "'$HOME'"
```

### `slayshell.builtins`

`is_builtin(name)` tells whether a name is one of the builtins, and
`run_builtin(name, args, state, out)` runs it, with `args[0]` being the
name, writing output to the text stream `out` and returning the new status.
Each builtin is also available on its own: `echo`, `cd`, `pwd`, `env`,
`export`, `unset` and `exit_builtin`. `exit` raises `ShellExit`, whose
`status` is the exit status (masked to 0–255); with more than one argument
it sets the status to 1 and does not exit.

```python
import sys
from slayshell.builtins import run_builtin

run_builtin("export", ["export", "GREETING=hello"], state, sys.stdout)
run_builtin("echo", ["echo", "-n", "hi"], state, sys.stdout)   # prints: hi
```

## What it does not do

The package has no command to start and no interactive prompt. It does not
parse lines into commands with redirections, does not open redirection
files, read here-documents, build pipelines or start external programs.
Those parts of a shell are left to the code that uses these modules.

## Running the tests

```
pip install .[test]
pytest
```