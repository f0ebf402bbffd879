# reflexkit

A set of small helpers that need nothing outside the standard library.
Each module works on its own.

## Modules

### `reflexkit.chars`

ASCII character classification. It gives the same answers in every
locale. Each function accepts a code point (`int`) or a one-character
`str`. Longer strings raise `TypeError`.

The functions are `is_cntrl`, `is_print`, `is_graph`, `is_blank`,
`is_space`, `is_upper`, `is_alpha`, `is_digit`, `is_xdigit`,
`is_alphanum` and `is_punct`. There is also the general
`is_in_range(c, low, high)`, which tests `low <= c <= high`.

```python
from reflexkit.chars import is_xdigit, is_punct

is_xdigit("F")        # True
is_punct(ord("a"))    # False
```

### `reflexkit.bitwise`

`bit_or`, `bit_and`, `bit_xor` and `bit_not` apply to enum members.

- **`enum.Flag` members:** the flag's own operators are used.
- **Any other enum:** the operation runs on the members' values, and the
  result is looked up as a member of the same enum. If no member has
  that value, the lookup raises `ValueError`.
- **Errors:** mixing members of different enums, or passing something
  that is not an enum member, raises `TypeError`.

### `reflexkit.errors`

To declare a catalogue of error codes, subclass `ErrorCodes`:

- Give the subclass a string `category`. Without one, class creation
  raises `TypeError`.
- Declare each code as an `ErrorCode("message")` class attribute.

Codes are numbered from 0 in the order they are declared.

```python
from reflexkit.errors import ErrorCodes, ErrorCode, CodedError, raise_error

class ParseErrors(ErrorCodes):
    category = "parse"
    empty = ErrorCode("input is empty")
    too_long = ErrorCode("input is too long")

ParseErrors.value_of(ParseErrors.too_long)   # 1
ParseErrors.message_of(7)                    # "<unknown>"

try:
    raise_error(ParseErrors.empty)
except CodedError as exc:
    exc.code == ParseErrors.empty            # True
    exc.code.category.name()                 # "parse"
```

The class methods are:

| Method | Result |
| --- | --- |
| `message_of(value)` | The message for a number, or `"<unknown>"` if no code has that number. |
| `value_of(code)` | The code's number, or `-1` if the code belongs to another set. |
| `make(code)` | An `ErrorValue` (a number plus an `ErrorCategory`). A foreign code raises `ValueError`. |
| `raise_(code)` | Raises `CodedError`, which carries that value as `.code`. |

`make_error_code(code)` and `raise_error(code)` do the same jobs for any
declared code.

An `ErrorValue`:

- compares equal to another `ErrorValue` with the same category and number;
- compares equal to the `ErrorCode` it was built from;
- is false only when its number is 0.

### `reflexkit.from_string`

`from_string(kind, text)` converts text to:

- `int`
- `float`
- `str`
- `Optional[...]` of any of these

Number parsing is strict:

- The number is read from the start of the text, and trailing
  characters are ignored.
- A leading blank or a `+` sign is rejected.
- Text that does not parse raises `ValueError`. So does a float that is
  out of range.

Other kinds raise `TypeError`. This includes `bool`.

```python
from reflexkit.from_string import from_string

from_string(int, "42abc")      # 42
from_string(float, "-inf")     # -inf
from_string(str, "abc")        # "abc"
```

### `reflexkit.named_tuple`

`NamedValues` is a record with fixed, ordered fields, and each field has
a declared type. Fields can be read and written:

- by attribute;
- by item (`record["x"]`).

Reading is also possible through `get(name, kind)`. It raises `KeyError`
for a missing field and `TypeError` when `kind` is not the field's
declared type. `has(name, kind)` checks for a field without raising.

There are three helper functions:

- **`make_named_tuple(names, values)`** pairs names with values in order.
- **`named_tuple_of(obj)`** copies the fields of a dataclass, a
  `namedtuple` or a plain object into a `NamedValues`.
- **`to_tuple(obj)`** returns the field values in order. A tuple is
  returned unchanged.

### `reflexkit.cartesian`

`cartesian_product(iterable, n)` yields every `n`-tuple of elements, with
the first position changing fastest. For `[0, 1]` and `n = 2` the order is
`(0, 0)`, `(1, 0)`, `(0, 1)`, `(1, 1)`. An empty input yields nothing, and a
negative `n` raises `ValueError`.

### `reflexkit.cli`

Command lines are described with `spec(*parts, flags=Flag.NONE)`. Each
part is read by its form:

| Part | Meaning |
| --- | --- |
| `"-v/--verbose"`, `"-v"` or `"--verbose"` | A switch; the spec describes an option. |
| `":name:"` | Binds the spec to the function parameter `name`. |
| Any other text | The help line. |

There are two flags:

- **`Flag.COUNT`** makes an option count its uses, so `-vvv` adds 3.
- **`Flag.DEFAULT`** marks the subcommand that runs when none is named.

Type annotations must be real objects, so do not use
`from __future__ import annotations` in modules that declare commands.

#### Function-based commands

```python
from typing import Optional
from reflexkit.cli import command_function, spec, run

@command_function(
    spec(":name:", "Who to greet"),
    spec(":times:", "-n/--times", "How many times"),
)
def greet(name: str, times: Optional[int]):
    for _ in range(times or 1):
        print(f"hello {name}")
    return 0

run(greet, "greet", ["world", "-n", "2"])
```

`run_argv(fn, argv=None)` takes a full argument vector, with the program
name first, and defaults to `sys.argv`.

An option parameter that has a default value raises `TypeError`. Use
`Optional[...]` instead.

#### Class-based commands

Subclass `Command` and declare fields with `typing.Annotated[type, spec(...)]`:

- A spec with a switch is an option.
- A field whose type is a `Command` subclass is a subcommand.
- Any other annotated field is a positional argument.

Methods decorated with `command_function` are also subcommands. Their
first spec describes the command itself.

```python
from typing import Annotated, Optional
from reflexkit.cli import Command, Flag, command_function, spec

class Tool(Command):
    verbose: Annotated[int, spec("-v/--verbose", "More output", flags=Flag.COUNT)] = 0
    path: Annotated[Optional[str], spec("Input path")] = None

    @command_function(spec("Show the status"), spec(":short:", "-s/--short", "Short form"))
    def status(self, short: bool):
        print("ok" if short else f"all fine (verbosity {self.verbose})")
        return 0

    def __call__(self):
        return 0

Tool().run("tool", ["-vv", "status", "--short"])
```

`Command.run(program, args)` works like this:

1. It parses the arguments into the instance's fields.
2. If a subcommand is named, it dispatches to it.
3. Otherwise, if the instance is callable, it calls it.
4. Otherwise it prints `Error: missing subcommand` and returns `-1`.

Nested command instances get their `parent` set to the calling command.
`Command.run_argv(argv=None)` takes a full argument vector.

#### Help, errors and return values

`-h` and `--help` print the usage text and return `0`.
`usage_of(target, program)` and `Command.usage(program)` print the same
text.

An unknown option, an unexpected argument or a missing required argument
does three things:

- writes a message to standard error;
- prints the usage text;
- returns `1`.

An option that expects a value but has none raises `ValueError`.

## What it does not do

`reflexkit` is a library only. It installs no command of its own. The
command-line helpers parse arguments for programs you write. They do not
read configuration files or environment variables, and they do not
generate shell completion.