# pipex

`pipex` is a small library of building blocks for running commands through
pipes. It covers the following:

- finding a program on `PATH`;
- splitting command strings into words;
- collecting here-document input up to a limiter line;
- reading a file descriptor one line at a time;
- reporting errors with a `pipex: ` prefix.

It also has plain helpers for text, byte buffers, ASCII characters and singly
linked lists.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What the package does not do

The package has no command-line program. It does not fork processes, connect
them with pipes, or open the input and output files of a pipeline. A caller
that wants to run `< infile cmd1 | cmd2 > outfile` has to do that part itself,
for example with `subprocess`. The functions below find the programs, split
their arguments and prepare the input.

## Modules

### `pipex.command`

- `path_from_env(environ)` returns the value of `PATH`, or `None` when it is
  unset. `environ` can be either of these:
  - a mapping;
  - a sequence of `"NAME=value"` strings, in which case the first `PATH=`
    entry wins.

  Passing `None` raises `PipexError("envp is NULL")`.
- `resolve_command(search_dirs, name)` returns `name` unchanged if that path
  exists. Otherwise it returns the first `dir/name` that exists. If none does,
  it raises `CommandNotFoundError`.
- `parse_commands(specs)` splits each string on spaces and drops empty words.
  Quotes are not interpreted.

```python
from pipex.command import path_from_env, parse_commands, resolve_command

dirs = (path_from_env({"PATH": "/usr/bin:/bin"}) or "").split(":")
argv = parse_commands(["grep  -v foo"])[0]   # ["grep", "-v", "foo"]
program = resolve_command(dirs, argv[0])      # e.g. "/usr/bin/grep"
```

### `pipex.heredoc`

- `read_until(limiter, source=None, prompt=None)` is a generator. It writes
  `"> "` to `prompt` (standard output by default) before each line. It yields
  lines until one equals `limiter + "\n"`, or until input ends.

  `source` can be any of these:
  - a file descriptor;
  - a `LineReader`;
  - any iterable of lines.

  It defaults to standard input.
- `write_heredoc(limiter, path=".temp", source=None, prompt=None)` does the
  following:
  1. It truncates or creates `path` with mode 0644.
  2. It writes the collected lines into it.
  3. It returns the file opened for binary reading.

  If the file cannot be opened, it raises `FileOpenError`.

### `pipex.lines`

`LineReader(source, buffer_size=1, encoding="utf-8")` reads from a file
descriptor or from a binary stream with a `read` method.

- `read_line()` returns the next line with its newline kept, or `None` at end
  of input.
- Iterating a reader yields every line.

### `pipex.errors`

- `PipexError` carries an `exit_status` of 1. It has two subclasses:
  - `CommandNotFoundError`, whose message is `command not found: NAME`;
  - `FileOpenError`, whose message is `<strerror>: PATH`.
- `report(error, stream=None)` writes `pipex: <error>` and a newline to
  `stream`, which defaults to standard error.

### `pipex.text`

String helpers:

- `find_char`
- `rfind_char`
- `compare`
- `compare_n`
- `duplicate`
- `length`
- `iter_indexed`
- `map_indexed`
- `join`
- `find_within`
- `trim`
- `substring`
- `split_words`
- `count_words`

`bounded_copy` and `bounded_concat` work on byte buffers holding
NUL-terminated strings, in the manner of `strlcpy`/`strlcat`.

### `pipex.memory`

Byte-buffer operations on `bytearray` or `memoryview`:

- `memset`
- `bzero`
- `calloc`
- `memchr`
- `memcmp`
- `memcpy`
- `memmove`

`memmove` copies within one buffer and handles overlap. Out-of-range counts
raise `ValueError`.

### `pipex.chars`

ASCII tests and conversions. Each takes a one-character string or an int:

- `is_alpha`
- `is_digit`
- `is_alnum`
- `is_ascii`
- `is_print`
- `to_lower`
- `to_upper`

Two number conversions:

- `atoi(text)` parses a leading decimal integer. It skips leading whitespace
  and takes one sign.
- `itoa(n)` renders an integer in decimal.

### `pipex.linkedlist`

`Node(content, next=None)` is one node. `LinkedList(head=None)` offers the
following:

- `push_front` and `push_back`;
- `last`;
- `len()` and iteration over contents;
- `clear(delete)`, which passes every content to `delete`;
- `for_each(func)`, which visits from the last node to the first;
- `map(func, delete)`, which returns a new list. If `func` raises, it passes
  the contents mapped so far to `delete`.