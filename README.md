# minishell

A small interactive command shell for POSIX systems. It reads a line at a
time, checks it for syntax errors, expands variables, splits the line into
commands joined by pipes and redirections, and runs them: builtins inside the
shell, everything else as programs found on `PATH`.

## Installing

```
pip install .
```

## Running

```
minishell
```

The prompt is ` -- minishell -- $ `. Type `exit`, or press Ctrl-D at the
prompt (the shell prints `exit`), to leave. The shell takes no arguments;
anything given on the command line prints `Error: too many arguments` and
returns status 1. When Python's `readline` module is available, the prompt has
line editing and history.

Ctrl-C at the prompt starts a fresh line; Ctrl-\ is ignored.

## What it understands

- Words separated by spaces, with `'single'` and `"double"` quotes.
- `$NAME` expands to the value of a variable and `$?` to the exit status of
  the last command. Expansion happens for a word that starts with `$`, and for
  a double-quoted word that starts with `$`. A lone `$` stays as it is. A
  variable that is not set ends the line there: that word and every word after
  it are dropped.
- Pipes: `ls | grep py | wc -l`.
- Redirections: `> file`, `>> file`, `< file`, and here-documents with
  `<< DELIMITER` (lines are read at a `heredoc> ` prompt until the delimiter
  or end of input).
- The line is checked before it runs. These are reported as syntax errors and
  the line is not run: unclosed quotes (status 2); a line that starts or ends
  with `|`, `>` or `<`; an operator followed only by whitespace; any of
  `{ } [ ] ( ) & ; *`, quoted or not; and operators that follow one another
  (status 1 when separated by spaces, 2 when written together).
- If a redirection target cannot be opened, the error is printed and nothing
  on the line runs.

## Builtins

| Command  | Effect |
|----------|--------|
| `echo`   | Print its arguments separated by spaces; `-n` (or `-nnn`, `n`) leaves out the newline. |
| `cd`     | Change directory; no argument goes to `HOME`, `-` goes to `OLDPWD` and prints it. Updates `PWD` and `OLDPWD`. |
| `pwd`    | Print the current directory (`PWD` works too). |
| `env`    | Print the variables as `NAME=value` lines. |
| `export` | Set variables with `NAME=value`; with no arguments, list them as `declare -x NAME="value"`. |
| `unset`  | Remove variables. |
| `exit`   | Print `exit` and leave the shell, optionally with a numeric status. A non-numeric argument gives 255; more than one argument gives 1. |
| `clear`  | Clear the terminal. |

All builtins run inside the shell process, writing to the command's output
(the terminal, a file or a pipe). Any other command is looked up as given and
then in each directory of `PATH`, and run as a child process.

## Exit status

`$?` holds the status of the last command. A command that is not found prints
`NAME: command not found` and gives 127; a command ended by a signal gives 128
plus the signal number; a syntax error gives 1 or 2; a failed `cd` gives 1.

## Using it from Python

The pieces can be driven directly:

```python
from minishell.environment import Environment
from minishell.shell import run_line

env = Environment(["PATH=/usr/bin:/bin", "HOME=/tmp"])
run_line("echo hello | tr a-z A-Z", env)
print(env.exit_status)
```

`minishell.tokenizer.tokenize`, `minishell.parser.parse` and
`minishell.validation.check_input` expose the individual stages.

## What it does not do

There is no `;`, `&&`, `||` or `&`, no wildcard expansion, no backslash
escapes, no subshells or job control, and no reading of script files: the
shell runs one interactive line at a time.