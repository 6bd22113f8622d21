"""Command-line argument declaration, parsing, validation and help text."""

from __future__ import annotations

import copy
from typing import Any, Callable, Optional, Sequence

from voxutil.cli_values import (
    CharsFormat,
    DefaultArguments,
    is_optional,
    is_positional,
    parse_float,
    parse_integer,
    repr_value,
)

_UNSET = object()

_INT_SHAPES = {"d": 10, "i": 0}
_UNSIGNED_SHAPES = {"u": 10, "o": 8, "x": 16, "X": 16}
_FLOAT_SHAPES = {
    "a": CharsFormat.HEX,
    "A": CharsFormat.HEX,
    "e": CharsFormat.SCIENTIFIC,
    "E": CharsFormat.SCIENTIFIC,
    "f": CharsFormat.FIXED,
    "F": CharsFormat.FIXED,
    "g": CharsFormat.GENERAL,
    "G": CharsFormat.GENERAL,
}


class HelpRequested(SystemExit):
    """Raised by the built-in help option; ``text`` holds the help message."""

    def __init__(self, text: str):
        super().__init__(0)
        self.text = text


class VersionRequested(SystemExit):
    """Raised by the built-in version option; ``text`` holds the version."""

    def __init__(self, text: str):
        super().__init__(0)
        self.text = text


def _is_container_kind(kind) -> bool:
    return isinstance(kind, type) and issubclass(kind, (list, tuple, set, frozenset))


def _check_kind(value, kind):
    if kind is None or isinstance(value, kind):
        return value
    raise TypeError(f"value {value!r} is not of type {kind.__name__}")


def _unsigned_parser(base: int) -> Callable[[str], int]:
    def parse(s: str) -> int:
        if "-" in s:
            raise ValueError("pattern not found")
        return parse_integer(s, base)

    return parse


class Argument:
    """One positional or optional command-line argument."""

    def __init__(self, *args: str):
        if not args:
            raise ValueError("an argument needs at least one name")
        self._names = sorted(args, key=lambda n: (len(n), n))
        self._is_optional = any(is_optional(n) for n in args)
        self._is_required = False
        self._is_repeatable = False
        self._is_used = False
        self._used_name = ""
        self._help = ""
        self._default: Any = _UNSET
        self._default_repr = ""
        self._implicit: Any = None
        self._action: Callable[[str], Any] = lambda value: value
        self._values: list = []
        self._num_args = 1

    def _clone(self) -> "Argument":
        new = copy.copy(self)
        new._names = list(self._names)
        new._values = list(self._values)
        return new

    def help(self, text: str) -> "Argument":
        self._help = text
        return self

    def default_value(self, value) -> "Argument":
        self._default_repr = repr_value(value)
        self._default = value
        return self

    def required(self) -> "Argument":
        self._is_required = True
        return self

    def implicit_value(self, value) -> "Argument":
        """Value stored when the option is given; the option then takes no values."""
        self._implicit = value
        self._num_args = 0
        return self

    def action(self, func: Callable, *args) -> "Argument":
        """Apply ``func(*args, value)`` to each consumed value.

        A function returning None acts only by side effect and stores nothing.
        """
        if args:
            self._action = lambda value: func(*args, value)
        else:
            self._action = func
        return self

    def append(self) -> "Argument":
        """Allow the option to be given several times."""
        self._is_repeatable = True
        return self

    def scan(self, shape: str, kind: type) -> "Argument":
        """Convert values as numbers in the printf-style notation ``shape``."""
        if kind is int and shape in _INT_SHAPES:
            base = _INT_SHAPES[shape]
            return self.action(lambda s: parse_integer(s, base))
        if kind is int and shape in _UNSIGNED_SHAPES:
            return self.action(_unsigned_parser(_UNSIGNED_SHAPES[shape]))
        if kind is float and shape in _FLOAT_SHAPES:
            fmt = _FLOAT_SHAPES[shape]
            return self.action(lambda s: parse_float(s, fmt))
        raise TypeError(f"No scan specification for {getattr(kind, '__name__', kind)} with {shape!r}")

    def nargs(self, num: int) -> "Argument":
        if num < 0:
            raise ValueError("Number of arguments must be non-negative")
        self._num_args = num
        return self

    def remaining(self) -> "Argument":
        """Consume every value left on the command line."""
        self._num_args = -1
        return self

    def consume(self, args: Sequence[str], start: int, used_name: str = "") -> int:
        """Take values from ``args[start:]`` and return the index after them."""
        if not self._is_repeatable and self._is_used:
            raise RuntimeError("Duplicate argument")
        self._is_used = True
        self._used_name = used_name
        end = len(args)
        if self._num_args == 0:
            self._values.append(self._implicit)
            self._action("")
            return start
        if self._num_args <= end - start:
            expected = self.maybe_nargs()
            if expected is not None:
                end = start + expected
                if any(is_optional(a) for a in args[start:end]):
                    raise RuntimeError("optional argument in parameter sequence")
            results = [self._action(a) for a in args[start:end]]
            if any(r is not None for r in results):
                self._values.extend(results)
            elif self._default is _UNSET and expected is not None:
                self._values = (self._values + [None] * expected)[:expected]
            return end
        if self._default is not _UNSET:
            return start
        raise RuntimeError(f"Too few arguments for '{used_name}'.")

    def validate(self) -> None:
        """Raise RuntimeError if the consumed values do not fit the declaration."""
        expected = self.maybe_nargs()
        if expected is None:
            return
        has_default = self._default is not _UNSET
        count = len(self._values)
        if self._is_optional:
            if self._is_used and count != expected and not self._is_repeatable and not has_default:
                raise RuntimeError(
                    f"{self._used_name}: expected {expected} argument(s). {count} provided."
                )
            if not self._is_used and not has_default and self._is_required:
                raise RuntimeError(f"{self._names[0]}: required.")
            if self._is_used and self._is_required and count == 0:
                raise RuntimeError(f"{self._used_name}: no value provided.")
        elif count != expected and not has_default:
            prefix = f"{self._used_name}: " if self._used_name else ""
            raise RuntimeError(f"{prefix}{expected} argument(s) expected. {count} provided.")

    def maybe_nargs(self) -> Optional[int]:
        """Number of values expected, or None when all remaining are taken."""
        return None if self._num_args < 0 else self._num_args

    def get_arguments_length(self) -> int:
        return sum(len(n) + 1 for n in self._names)

    def get(self, kind: Optional[type] = None):
        """Return the value (or all values for a container ``kind``), else the default."""
        if self._values:
            if _is_container_kind(kind):
                return kind(self._values)
            return _check_kind(self._values[0], kind)
        if self._default is not _UNSET:
            return _check_kind(self._default, kind)
        raise ValueError(f"No value provided for '{self._names[-1]}'.")

    def present(self, kind: Optional[type] = None):
        """Return the value if one was given, else None; not for arguments with defaults."""
        if self._default is not _UNSET:
            raise ValueError("Argument with default value always presents")
        if not self._values:
            return None
        if _is_container_kind(kind):
            return kind(self._values)
        return _check_kind(self._values[0], kind)

    @property
    def is_used(self) -> bool:
        return self._is_used

    def format(self, width: int = 0) -> str:
        """Return the help line for this argument, names padded to ``width``."""
        names = "".join(f"{n} " for n in self._names)
        line = f"{names:<{width}}\t{self._help}"
        if self._default is not _UNSET:
            if self._help:
                line += " "
            line += f"[default: {self._default_repr}]"
        elif self._is_required:
            if self._help:
                line += " "
            line += "[required]"
        return line + "\n"


class ArgumentParser:
    """Declares arguments, parses a command line and renders help."""

    def __init__(self, program_name: str = "", version: str = "1.0",
                 default_args: DefaultArguments = DefaultArguments.ALL):
        self._program_name = program_name
        self._version = version
        self._description = ""
        self._epilog = ""
        self._is_parsed = False
        self._positional: list[Argument] = []
        self._optional: list[Argument] = []
        self._map: dict[str, Argument] = {}
        default_args = DefaultArguments(default_args)
        if default_args & DefaultArguments.HELP:
            (self.add_argument("-h", "--help")
                .action(self._raise_help)
                .default_value(False)
                .help("shows help message and exits")
                .implicit_value(True)
                .nargs(0))
        if default_args & DefaultArguments.VERSION:
            (self.add_argument("-v", "--version")
                .action(self._raise_version)
                .default_value(False)
                .help("prints version information and exits")
                .implicit_value(True)
                .nargs(0))

    def _raise_help(self, _value: str) -> None:
        raise HelpRequested(self.help())

    def _raise_version(self, _value: str) -> None:
        raise VersionRequested(self._version)

    def _index(self, arg: Argument) -> None:
        for name in arg._names:
            self._map[name] = arg

    def add_argument(self, *args: str) -> Argument:
        arg = Argument(*args)
        (self._optional if arg._is_optional else self._positional).append(arg)
        self._index(arg)
        return arg

    def add_parents(self, *args: "ArgumentParser") -> "ArgumentParser":
        """Copy every argument declared in the given parsers."""
        for parent in args:
            for arg in parent._positional:
                clone = arg._clone()
                self._positional.append(clone)
                self._index(clone)
            for arg in parent._optional:
                clone = arg._clone()
                self._optional.append(clone)
                self._index(clone)
        return self

    def add_description(self, description: str) -> "ArgumentParser":
        self._description = description
        return self

    def add_epilog(self, epilog: str) -> "ArgumentParser":
        self._epilog = epilog
        return self

    def parse_args(self, arguments: Sequence[str]) -> None:
        """Parse ``arguments`` (program name first) and validate the result."""
        self._parse_internal(list(arguments))
        for _, arg in sorted(self._map.items(), key=lambda item: item[0]):
            arg.validate()

    def _parse_internal(self, arguments: list[str]) -> None:
        if not self._program_name and arguments:
            self._program_name = arguments[0]
        end = len(arguments)
        positional = iter(self._positional)
        i = 1
        while i < end:
            current = arguments[i]
            if is_positional(current):
                arg = next(positional, None)
                if arg is None:
                    raise RuntimeError("Maximum number of positional arguments exceeded")
                i = arg.consume(arguments, i)
                continue
            if current in self._map:
                i = self._map[current].consume(arguments, i + 1, current)
            elif len(current) > 1 and current[0] == "-" and current[1] != "-":
                i += 1
                for ch in current[1:]:
                    name = "-" + ch
                    if name not in self._map:
                        raise RuntimeError(f"Unknown argument: {current}")
                    i = self._map[name].consume(arguments, i, name)
            else:
                raise RuntimeError(f"Unknown argument: {current}")
        self._is_parsed = True

    def get(self, name: str, kind: Optional[type] = None):
        """Return the parsed value of ``name``, type-checked against ``kind`` if given."""
        if not self._is_parsed:
            raise ValueError("Nothing parsed, no arguments are available.")
        return self[name].get(kind)

    def present(self, name: str, kind: Optional[type] = None):
        return self[name].present(kind)

    def is_used(self, name: str) -> bool:
        """True only if the user supplied the argument."""
        return self[name].is_used

    def __getitem__(self, name: str) -> Argument:
        if name in self._map:
            return self._map[name]
        if name and name[0] != "-":
            for candidate in ("-" + name, "--" + name):
                if candidate in self._map:
                    return self._map[candidate]
        raise KeyError(f"No such argument: {name}")

    def _longest(self) -> int:
        return max((a.get_arguments_length() for a in self._map.values()), default=0)

    def help(self) -> str:
        """Return the full help message."""
        width = self._longest()
        parts = [f"Usage: {self._program_name} [options] "]
        parts.extend(f"{a._names[0]} " for a in self._positional)
        parts.append("\n\n")
        if self._description:
            parts.append(f"{self._description}\n\n")
        if self._positional:
            parts.append("Positional arguments:\n")
            parts.extend(a.format(width) for a in self._positional)
        if self._optional:
            parts.append(("\n" if self._positional else "") + "Optional arguments:\n")
            parts.extend(a.format(width) for a in self._optional)
        if self._epilog:
            parts.append(f"{self._epilog}\n\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.help()