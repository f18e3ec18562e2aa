# minish

A small interactive command shell. It shows a prompt, reads a line, splits
it into words, and runs the first command on the line.

## Running it

```
pip install .
minish
```

The prompt looks like `user@host:path$ ` in colour. The user name comes from
`$USER` (or `user`), the host name from `/etc/hostname` (or `localhost`).
The part of the current directory from your user name onwards is shown as
`~...`; a directory that does not contain your user name is shown as `/`.

Leave with `exit`, `exit N` or Ctrl-D. `exit` prints `exit`; a
non-numeric argument reports `numeric argument required` and exits with 255.

## How a line is read

- Words are separated by spaces.
- Single quotes keep their content literally. Double quotes expand `$NAME`.
  Unquoted `$NAME` is expanded too. An unset variable becomes empty; a `$`
  not followed by a letter, digit or `_` stays as `$`. Variables are taken
  from the process environment.
- A quote left open at the end of the line asks for more lines with a
  `> ` prompt until a line with an odd number of that quote arrives; the
  lines are joined with newlines.
- An empty pair of double quotes on its own produces no word.

## How the first word is run

- `echo` is a builtin (`-n`, `-nn`, ... suppress the newline), and so is
  `exit`.
- `cd` is recognised as a builtin name but does nothing in the
  interactive loop.
- A word naming an existing file is run by that path.
- Any other word is run as `/bin/<word>` (so `ls` runs `/bin/ls`, and
  `pwd` and `env` run the system programs). `$PATH` is not searched here.

## What it does not do

- Only the first command on a line is run. `|` is recognised as a
  separator when parsing, but the interactive loop does not connect
  commands into a pipeline.
- There are no redirections, `&&`/`||`, globbing or backslash escapes.
- `export` and `unset` are not shell commands; they are methods of
  `Environment` (see below). Exit statuses are not kept between lines.

## Using it from Python

```python
from minish.shell import Shell

shell = Shell({"PATH": "/usr/bin:/bin", "USER": "alice"}, "devbox")
print(shell.prompt_text())
shell.handle_line("echo hello world")   # prints "hello world", returns 0
```

`Shell.run(input_func)` runs the loop with any function that takes a prompt
and returns a line (raising `EOFError` at the end); it returns the exit
status.

Other pieces:

- `minish.environment.Environment` — ordered `KEY=VALUE` entries with
  `get`, `set`, `unsetenv`, `unset`, `export` and `as_list`;
  `is_valid_identifier` checks variable names.
- `minish.builtins` — `echo`, `pwd`, `env`, `cd` (changes directory and
  updates `OLDPWD` and `PWD`) and `exit_shell` (raises `ShellExit`), plus
  `atoi`, `is_numeric` and `is_n_option`.
- `minish.quoting` — `WordScanner` splits a line into words;
  `expand_dollar` and `count_quotes` are its helpers.
- `minish.parser` — `parse_line` turns a line into `Command` objects
  (`command`, `kind`, `parameters`, `token`, `argv()`); `classify_word`
  and `is_token` decide what a word is.
- `minish.prompt` — `read_hostname`, `display_path` and `display_info`.
- `minish.executor` — `execute` runs one `Command`; `find_in_path` searches
  `$PATH`; `run_external` runs a program and waits; `run_pipeline` runs
  space-separated command lines joined by pipes, looking each up on `$PATH`,
  and returns every stage's status (127 when not found).

## Tests

```
pip install .[test]
pytest
```