# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Standard option callbacks.

Every helper follows the option callback contract: no-argument helpers are
called as `helper(context)`, argument helpers as `helper(arg, context)`. They
return None on success or an error message string on failure.

Most helpers store into a context with `get()`/`set()` methods, normally an
`OptionRef` from `OptionsManager.ref()`:

    options = OptionsManager()
    table = [
        opt_without_arg("verbose", "v", inc_int, options.ref("verbose", 0),
                        "More output (repeatable)."),
        opt_with_arg("jobs", "j", set_uint, options.ref("jobs", 1),
                     "Number of parallel jobs."),
        opt_with_arg("include", "I", append, include_dirs,
                     "Add a directory to the search path."),
    ]

`log_stderr()` is the standard error sink for `OptionParser.parse()`.
"""
from __future__ import annotations

import sys
from typing import Any, Protocol

from dateutil import parser as date_parser
from rich.markup import escape

from optable.console import console, error_console

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
ULONG_MAX = 2**64 - 1


class ValueRef(Protocol):
    """Anything a helper can store into."""

    def get(self) -> Any: ...

    def set(self, value: Any) -> None: ...


def invalid_argument(arg: str) -> str:
    """Return the standard "Invalid argument" message for `arg`."""
    return f"Invalid argument '{arg}'"


def log_stderr(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(
        f"[error]{escape(message)}[/error]", soft_wrap=True, highlight=False
    )


def set_bool(ref: ValueRef) -> None:
    """Set the target to True."""
    ref.set(True)


def set_invbool(ref: ValueRef) -> None:
    """Set the target to False."""
    ref.set(False)


def _parse_bool(arg: str) -> bool | None:
    normalized = arg.strip().lower()
    if normalized in ("yes", "true"):
        return True
    if normalized in ("no", "false"):
        return False
    return None


def set_bool_arg(arg: str, ref: ValueRef) -> str | None:
    """Set the target from yes/no/true/false."""
    value = _parse_bool(arg)
    if value is None:
        return invalid_argument(arg)
    ref.set(value)
    return None


def set_invbool_arg(arg: str, ref: ValueRef) -> str | None:
    """Set the target to the inverse of yes/no/true/false."""
    value = _parse_bool(arg)
    if value is None:
        return invalid_argument(arg)
    ref.set(not value)
    return None


def set_str(arg: str, ref: ValueRef) -> None:
    ref.set(arg)


def _parse_integer(arg: str, minimum: int, maximum: int) -> int | str:
    try:
        value = int(arg.strip(), 0)
    except ValueError:
        return f"'{arg}' is not a number"
    if not minimum <= value <= maximum:
        return f"'{arg}' is out of range"
    return value


def _set_integer(arg: str, ref: ValueRef, minimum: int, maximum: int) -> str | None:
    value = _parse_integer(arg, minimum, maximum)
    if isinstance(value, str):
        return value
    ref.set(value)
    return None


def set_int(arg: str, ref: ValueRef) -> str | None:
    """Set a signed 32-bit integer. Accepts `0x`, `0o` and `0b` prefixes."""
    return _set_integer(arg, ref, INT_MIN, INT_MAX)


def set_uint(arg: str, ref: ValueRef) -> str | None:
    """Set an unsigned 32-bit integer."""
    return _set_integer(arg, ref, 0, UINT_MAX)


def set_long(arg: str, ref: ValueRef) -> str | None:
    """Set a signed 64-bit integer."""
    return _set_integer(arg, ref, LONG_MIN, LONG_MAX)


def set_ulong(arg: str, ref: ValueRef) -> str | None:
    """Set an unsigned 64-bit integer."""
    return _set_integer(arg, ref, 0, ULONG_MAX)


def inc_int(ref: ValueRef) -> None:
    """Increment the target, treating an unset target as 0."""
    ref.set((ref.get() or 0) + 1)


def set_float(arg: str, ref: ValueRef) -> str | None:
    try:
        ref.set(float(arg))
    except ValueError:
        return f"'{arg}' is not a number"
    return None


def set_datetime(arg: str, ref: ValueRef) -> str | None:
    """Set a datetime parsed from any format python-dateutil understands."""
    try:
        ref.set(date_parser.parse(arg))
    except (ValueError, OverflowError):
        return f"'{arg}' could not be parsed as a datetime"
    return None


def append(arg: str, target: list[str]) -> None:
    """Append the argument to a list; the option may be given many times."""
    target.append(arg)


def show_version_and_exit(version: str) -> None:
    """Print the version string to stdout and exit with status 0."""
    console.print(version, markup=False, highlight=False)
    sys.exit(0)
