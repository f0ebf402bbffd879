"""Declarative command-line parsing driven by annotated fields and functions.

Options, positional arguments and subcommands are declared with :func:`spec`,
either inside ``typing.Annotated`` on the fields of a :class:`Command` subclass,
or attached to the parameters of a function with :func:`command_function`.
"""

from __future__ import annotations

import enum
import sys
import types
import typing
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable, Sequence

from .from_string import from_string

__all__ = [
    "Flag",
    "Spec",
    "Command",
    "spec",
    "command_function",
    "usage_of",
    "run",
    "run_argv",
]

_MIN_ID_SIZE = 16
_HELP_SWITCHES = ("-h", "--help")
_SPECS_ATTR = "_cli_specs"


class Flag(enum.Flag):
    """Extra behaviour attached to a spec."""

    NONE = 0
    COUNT = enum.auto()
    DEFAULT = enum.auto()


@dataclass(frozen=True)
class Spec:
    """Switches, help text and target field described by one spec."""

    short_switch: str = ""
    long_switch: str = ""
    help: str = ""
    field: str = ""
    is_opt: bool = False
    is_field: bool = False
    flags: Flag = Flag.NONE

    @classmethod
    def parse(cls, parts: Iterable[str]) -> Spec:
        """Build a spec from strings: switches, ``:field:`` names and help text."""
        short_switch = long_switch = help_text = field_name = ""
        is_opt = is_field = False
        for part in parts:
            if not isinstance(part, str):
                raise TypeError(f"spec parts must be strings, got {part!r}")
            if part.startswith("-"):
                short_switch, long_switch = _split_switches(part, short_switch, long_switch)
                is_opt = True
            elif part.startswith(":"):
                field_name = part[1:-1]
                is_field = True
            else:
                help_text = part
        return cls(short_switch, long_switch, help_text, field_name, is_opt, is_field)


def _split_switches(text: str, short_switch: str, long_switch: str) -> tuple[str, str]:
    is_long_first = len(text) > 1 and text[1] == "-"
    head, slash, tail = text.partition("/")
    if slash:
        return (tail, head) if is_long_first else (head, tail)
    if is_long_first:
        return short_switch, text
    return text, long_switch


def spec(*args: str, flags: Flag = Flag.NONE) -> Spec:
    """Describe an option, argument or command."""
    return replace(Spec.parse(args), flags=flags)


def command_function(*args: Spec) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Attach specs to a function so it can be run as a command."""
    for item in args:
        if not isinstance(item, Spec):
            raise TypeError(f"command_function expects Spec objects, got {item!r}")

    def decorate(fn: Callable[..., Any]) -> Callable[..., Any]:
        setattr(fn, _SPECS_ATTR, tuple(args))
        return fn

    return decorate


# ---------------------------------------------------------------------------
# Layout of a command


@dataclass(frozen=True)
class _Item:
    name: str
    kind: Any
    spec: Spec
    method: bool = False
    defaulted: bool = False

    @property
    def optional(self) -> bool:
        return _optional_inner(self.kind) is not None

    @property
    def base_kind(self) -> Any:
        inner = _optional_inner(self.kind)
        return self.kind if inner is None else inner

    @property
    def counter(self) -> bool:
        return Flag.COUNT in self.spec.flags


@dataclass
class _Layout:
    options: list[_Item] = field(default_factory=list)
    arguments: list[_Item] = field(default_factory=list)
    commands: list[_Item] = field(default_factory=list)

    def extend(self, other: _Layout) -> None:
        self.options.extend(other.options)
        self.arguments.extend(other.arguments)
        self.commands.extend(other.commands)


def _optional_inner(kind: Any) -> Any:
    origin = typing.get_origin(kind)
    if origin is typing.Union or origin is types.UnionType:
        args = typing.get_args(kind)
        inner = [a for a in args if a is not type(None)]
        if len(args) == 2 and len(inner) == 1:
            return inner[0]
    return None


def _specs_of_function(fn: Any) -> tuple[Spec, ...] | None:
    specs = getattr(fn, _SPECS_ATTR, None)
    return specs if isinstance(specs, tuple) else None


def _is_command_type(kind: Any) -> bool:
    return isinstance(kind, type) and issubclass(kind, Command)


def _parameters(fn: Any) -> list[tuple[str, bool]]:
    """Names of a function's parameters, each with whether it has a default."""
    func = getattr(fn, "__func__", fn)
    code = getattr(func, "__code__", None)
    if code is None:
        raise TypeError(f"{fn!r} is not a Python function")
    positional = code.co_varnames[: code.co_argcount]
    kwonly = code.co_varnames[code.co_argcount : code.co_argcount + code.co_kwonlyargcount]
    defaults = func.__defaults__ or ()
    kwdefaults = func.__kwdefaults__ or {}
    first_default = len(positional) - len(defaults)
    params = [(name, index >= first_default) for index, name in enumerate(positional)]
    params.extend((name, name in kwdefaults) for name in kwonly)
    if func is not fn:
        params = params[1:]
    return params


def _class_layout(cls: type) -> _Layout:
    layout = _Layout()
    own = cls.__dict__.get("__annotations__", {})
    for name, hint in own.items():
        if typing.get_origin(hint) is not typing.Annotated:
            continue
        kind, *metadata = typing.get_args(hint)
        found = next((m for m in metadata if isinstance(m, Spec)), None)
        if found is None:
            continue
        item = _Item(name, kind, found)
        if found.is_opt:
            layout.options.append(item)
        elif _is_command_type(kind):
            layout.commands.append(item)
        else:
            layout.arguments.append(item)
    for name, attr in cls.__dict__.items():
        if not isinstance(attr, types.FunctionType):
            continue
        specs = _specs_of_function(attr)
        if not specs:
            continue
        if specs[0].is_opt:
            raise TypeError(f"the first spec of command {name!r} must describe the command itself")
        layout.commands.append(_Item(name, None, specs[0], method=True))
    for base in cls.__bases__:
        if base is not Command and _is_command_type(base):
            layout.extend(_class_layout(base))
    return layout


def _function_layout(fn: Callable[..., Any]) -> _Layout:
    specs = _specs_of_function(fn)
    if specs is None:
        raise TypeError(f"{fn!r} is not declared with command_function")
    hints = dict(getattr(getattr(fn, "__func__", fn), "__annotations__", {}))
    layout = _Layout()
    for name, has_default in _parameters(fn):
        match = next((s for s in specs if s.is_field and s.field == name), None)
        if match is None:
            continue
        item = _Item(name, hints.get(name, str), match, defaulted=has_default)
        (layout.options if match.is_opt else layout.arguments).append(item)
    return layout


def _layout_of(target: Any) -> _Layout:
    if isinstance(target, Command):
        return _class_layout(type(target))
    if _is_command_type(target):
        return _class_layout(target)
    return _function_layout(target)


# ---------------------------------------------------------------------------
# Usage


def _strip_program(program: str) -> str:
    return program.rsplit("/", 1)[-1]


def _flag_names(flags: Flag) -> list[str]:
    return [member.name.lower() for member in Flag if member.value and member in flags]


def _print_usage(layout: _Layout, program: str) -> None:
    print(f"USAGE: {_strip_program(program)} [OPTIONS...] ARGUMENTS...")

    print("OPTIONS:")
    width = max(
        [_MIN_ID_SIZE]
        + [len(o.spec.short_switch) + len(o.spec.long_switch) + 1 for o in layout.options]
    )
    print(f"  {'-h/--help':{width}} Print this message and exit.")
    for option in layout.options:
        switches = f"{option.spec.short_switch}/{option.spec.long_switch}"
        print(f"  {switches:{width}} {option.spec.help}")
        names = _flag_names(option.spec.flags)
        if names:
            print(f"      flags: {', '.join(names)}")

    for title, items in (("ARGUMENTS:", layout.arguments), ("COMMANDS:", layout.commands)):
        if not items:
            continue
        print(title)
        width = max([_MIN_ID_SIZE] + [len(item.name) for item in items])
        for item in items:
            print(f"  {item.name:{width}} {item.spec.help}")


def usage_of(target: Any, program: str) -> None:
    """Print the usage of a command class, instance or command function."""
    _print_usage(_layout_of(target), program)


# ---------------------------------------------------------------------------
# Command line processing


def _zero(kind: Any) -> Any:
    if _optional_inner(kind) is not None:
        return None
    if kind is bool:
        return False
    if isinstance(kind, type):
        try:
            return kind()
        except Exception:
            return None
    return None


def _matches(item: _Item, view: str) -> bool:
    short_switch = item.spec.short_switch
    long_switch = item.spec.long_switch
    if view in (short_switch, long_switch) and view:
        return True
    if item.counter and len(short_switch) >= 2 and view.startswith(short_switch):
        return all(c == short_switch[1] for c in view[2:])
    return False


def _count(item: _Item, view: str) -> int:
    short_switch = item.spec.short_switch
    if len(short_switch) >= 2 and view.startswith(short_switch) and view != item.spec.long_switch:
        return view.count(short_switch[1])
    return 1


def _process(
    layout: _Layout,
    program: str,
    args: Sequence[str],
    get_value: Callable[[str], Any],
    set_value: Callable[[str, Any], None],
    on_command: Callable[[_Item, list[str]], int],
) -> Any:
    args = list(args)
    position = 0
    index = 0
    while index < len(args):
        view = args[index]
        if view.startswith("-"):
            if view in _HELP_SWITCHES:
                _print_usage(layout, program)
                return 0
            option = next((o for o in layout.options if _matches(o, view)), None)
            if option is None:
                print(f"unknown option: {view}", file=sys.stderr)
                print()
                _print_usage(layout, program)
                return 1
            if option.base_kind is bool:
                set_value(option.name, True)
            elif option.counter:
                current = get_value(option.name)
                set_value(option.name, (current or 0) + _count(option, view))
            else:
                index += 1
                if index >= len(args):
                    raise ValueError(f"missing value for option: {view}")
                set_value(option.name, from_string(option.kind, args[index]))
        else:
            command = next((c for c in layout.commands if c.name == view), None)
            if command is not None:
                return on_command(command, args[index:])
            if position >= len(layout.arguments):
                print(f"unexpected argument: {view}", file=sys.stderr)
                print()
                _print_usage(layout, program)
                return 1
            argument = layout.arguments[position]
            position += 1
            if argument.base_kind is bool:
                set_value(argument.name, view == "true")
            else:
                set_value(argument.name, from_string(argument.kind, view))
        index += 1

    for offset, argument in enumerate(layout.arguments[position:], start=position):
        if argument.optional:
            continue
        names = ", ".join(a.name for a in layout.arguments[offset:])
        print(f"missing required argument: {names}", file=sys.stderr)
        print()
        _print_usage(layout, program)
        return 1

    for command in layout.commands:
        if Flag.DEFAULT in command.spec.flags:
            return on_command(command, [])
    return None


def _invoke(fn: Callable[..., Any], program: str, args: Sequence[str]) -> Any:
    layout = _function_layout(fn)
    for option in layout.options:
        if option.defaulted:
            raise TypeError(
                f"option {option.name!r} has a default value; "
                "defaulted options are not supported in function-based commands (use Optional[...])"
            )
    values = {item.name: _zero(item.kind) for item in (*layout.arguments, *layout.options)}

    def reject_command(item: _Item, rest: list[str]) -> int:
        raise RuntimeError("function-based command should not have subcommands")

    rc = _process(layout, program, args, values.__getitem__, values.__setitem__, reject_command)
    if rc is not None:
        return rc
    return fn(**values)


def run(fn: Any, program: str, args: Sequence[str]) -> Any:
    """Parse ``args`` for a command function and call it."""
    if isinstance(fn, Command):
        return fn.run(program, args)
    return _invoke(fn, program, args)


def _argv_parts(argv: Sequence[str]) -> tuple[str, list[str]]:
    argv = list(argv)
    program = _strip_program(argv[0]) if argv else ""
    return program, argv[1:]


def run_argv(fn: Any, argv: Sequence[str] | None = None) -> Any:
    """Run a command function with a full argument vector (program first)."""
    program, args = _argv_parts(sys.argv if argv is None else argv)
    return run(fn, program, args)


class Command:
    """Base of class-based commands declared with annotated fields and methods."""

    parent: Command | None = None

    def usage(self, program: str) -> None:
        """Print the usage of this command."""
        _print_usage(_class_layout(type(self)), program)

    def _dispatch(self, program: str, item: _Item, rest: list[str]) -> Any:
        view = rest[0] if rest else ""
        remaining = rest[1:]
        sub_program = f"{program} {view}"
        if item.method:
            method = getattr(self, item.name)
            if any(a in _HELP_SWITCHES for a in remaining):
                usage_of(method, sub_program)
                return 0
            return _invoke(method, sub_program, remaining)
        sub = getattr(self, item.name, None)
        if not isinstance(sub, Command):
            sub = item.kind()
            setattr(self, item.name, sub)
        sub.parent = self
        return sub.run(sub_program, remaining)

    def run(self, program: str, args: Sequence[str]) -> Any:
        """Parse ``args`` into this command and run it or the selected subcommand."""
        layout = _class_layout(type(self))
        for item in (*layout.options, *layout.arguments):
            if not hasattr(self, item.name):
                setattr(self, item.name, _zero(item.kind))
        rc = _process(
            layout,
            program,
            args,
            lambda name: getattr(self, name),
            lambda name, value: setattr(self, name, value),
            lambda item, rest: self._dispatch(program, item, rest),
        )
        if rc is not None:
            return rc
        if callable(self):
            return self()
        print("Error: missing subcommand")
        return -1

    def run_argv(self, argv: Sequence[str] | None = None) -> Any:
        """Run with a full argument vector (program first)."""
        program, args = _argv_parts(sys.argv if argv is None else argv)
        return self.run(program, args)