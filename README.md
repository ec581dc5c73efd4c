# taskbox

A collection of small, self-contained tools and helpers, with no runtime
dependencies beyond the standard library.

- `taskbox.hello`: `reverse(text)` reverses a string; the `taskbox-hello`
  command prints a reversed greeting.
- `taskbox.unpack`: `unpack(text)` expands strings such as `a4bc2d5e` into
  `aaaabccddddde`. A digit repeats the preceding character (`0` drops it) and a
  backslash escapes a following digit or backslash. Malformed input raises
  `InvalidStringError`. `is_digit(char)` tells whether a character is an ASCII
  digit.
- `taskbox.frequency`: `top10(text)` returns up to ten most frequent words,
  case-insensitive, ignoring punctuation at word edges; ties are ordered
  alphabetically. `split_words` and `words_widths_sort` (returning `WordWidth`
  entries) are the building blocks.
- `taskbox.lru`: a doubly linked `LinkedList` of `ListItem` nodes
  (`front`, `back`, `push_front`, `push_back`, `remove`, `move_to_front`,
  `len()` and iteration over values) and a thread-safe `LRUCache` of fixed
  capacity.
- `taskbox.parallel`: `run(tasks, workers, max_errors)` runs callables on a
  pool of threads. A task fails by raising; once `max_errors` tasks have
  failed no more are started and `ErrorsLimitExceededError` is raised. An
  empty task list raises `EmptyTasksError`, and a `max_errors` of zero or less
  raises `ErrorsLimitExceededError` straight away.
- `taskbox.pipeline`: `execute_pipeline(source, done, *stages)` chains stages,
  each a callable taking an iterable and returning an iterable, each running
  concurrently. Setting the `threading.Event` passed as `done` stops the flow
  of items. `chan_wrap(source, done)` is the single-stage building block.
- `taskbox.filecopy`: `copy_file(from_path, to_path, offset, limit)` copies
  part of a regular file, printing progress as a percentage. It raises
  `UnsupportedFileError` when either side is not a regular file and
  `OffsetExceedsFileSizeError` when the offset is not inside the source; both
  derive from `CopyError`.
- `taskbox.envdir`: `read_dir(directory)` reads variables from a directory of
  files into a dict of `EnvValue`; `set_env(env)` applies them to the current
  process; `run_cmd(cmd, env)` runs a command with them and returns its exit
  code.
- `taskbox.domainstat`: `get_domain_stat(stream, domain)` counts, per
  lower-cased e-mail domain, users whose address ends with `.<domain>` in a
  stream of JSON lines (`str` or `bytes`). `User.from_json(line)` parses one
  record.
- `taskbox.rules` and `taskbox.validator`: rule-based validation of dataclass
  instances.

## Installation

```
pip install .
```

Python 3.10 or later is required.

## Library use

```python
from taskbox.unpack import unpack
from taskbox.frequency import top10
from taskbox.lru import LRUCache

unpack("a4bc2d5e")        # "aaaabccddddde"
unpack(r"qwe\45")         # "qwe44444"

top10("the cat and the dog and the bird")   # ["the", "and", "bird", "cat", "dog"]

cache = LRUCache(5)
cache.set("aaa", 100)     # False: the key was not cached before
cache.set("aaa", 300)     # True: the value was replaced
cache.get("aaa")          # (300, True)
cache.get("bbb")          # (None, False)
cache.clear()
```

### Validation

Rules are attached to dataclass fields through their metadata, under the key
`validate`. Several rules are joined with `|`:

```python
from dataclasses import dataclass, field
from taskbox.validator import validate
from taskbox.rules import ValidationErrors

@dataclass
class User:
    id: str = field(metadata={"validate": "len:36"})
    age: int = field(metadata={"validate": "min:18|max:50"})
    email: str = field(metadata={"validate": r"regexp:^\w+@\w+\.\w+$"})
    phones: list = field(default_factory=list, metadata={"validate": "len:11"})

try:
    validate(User(id="x" * 36, age=51, email="user@example.com"))
except ValidationErrors as errors:
    print(errors)         # field age: cannot be greater 50
```

Rules for strings are `len`, `regexp` and `in`; rules for integers are
`min`, `max` and `in` (a comma-separated list). Lists and tuples are checked
element by element. A dataclass field is checked only if its rules include
`nested`. Fields whose names start with an underscore are skipped.

`validate` raises `ValidationErrors` listing every failed check. When the
rules themselves are unusable (an unknown rule, a bad condition, a value that
is not a dataclass) it raises a subclass of `RuleError` instead. `None` is
accepted without checks.

## Commands

Print a greeting reversed:

```
taskbox-hello
```

Copy part of a file, skipping `offset` bytes and copying at most `limit`
bytes (0 means up to the end of the file):

```
taskbox-copy --from input.txt --to output.txt --offset 100 --limit 1000
```

Errors are printed rather than raised.

Run a command with variables taken from a directory, one file per variable.
The first line of a file is the value, NUL bytes in it become newlines and
trailing spaces and tabs are dropped; an empty file removes the variable:

```
taskbox-envdir ./env printenv FOO
```

The exit code of the command is passed through.

## Tests

```
pip install .[test]
pytest
```