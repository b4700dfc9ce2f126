# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass, one entry in a declared option table.

An option table is a plain sequence of `Option` entries. Leaf entries describe
a command-line option (long name, short name, arity, callback, bound context,
description); `Arity.SUBTABLE` entries instead point at a nested table that is
flattened into the registry under its own heading.

Tables are normally written with the constructor helpers:

    options = OptionsManager()
    table = [
        opt_without_arg("verbose", "v", set_bool, options.ref("verbose", False),
                        "Enable verbose output."),
        opt_with_arg("output", "o", set_str, options.ref("output"),
                     "Write results to FILE."),
        opt_subtable(network_table, "Network options"),
    ]

Callback contract:
- `Arity.NOARG`:  `callback(context)`
- `Arity.HASARG`: `callback(arg, context)`

A callback signals success by returning `None` or `True`, and failure by
returning an error message string, returning `False`, or raising
`OptionValueError`.

`HIDDEN` can be used as the description of a sub-table (or of a single entry)
to keep it out of the usage text while leaving it fully parseable.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from optable.parser.arity import Arity


class _Hidden:
    """Sentinel description for entries and tables omitted from usage output."""

    _instance: _Hidden | None = None

    def __new__(cls) -> _Hidden:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "HIDDEN"

    def __bool__(self) -> bool:
        return False


HIDDEN = _Hidden()


@dataclass
class Option:
    """
    Represents one entry of an option table.

    Attributes:
        long (str | None): Long name without dashes (e.g. "verbose" for `--verbose`).
        short (str | None): Single character (e.g. "v" for `-v`).
        arity (Arity): Whether the option takes an argument or is a sub-table.
        callback (Callable | None): Handler invoked when the option is found.
        context (Any): Value handed unchanged to every callback invocation.
        description (str | None | HIDDEN): Usage text, None to omit the entry,
            or HIDDEN to omit it (and, for sub-tables, everything inside).
        table (Sequence[Option] | None): Nested entries for `Arity.SUBTABLE`.
    """

    long: str | None = None
    short: str | None = None
    arity: Arity = Arity.NOARG
    callback: Callable[..., Any] | None = None
    context: Any = None
    description: str | _Hidden | None = None
    table: Sequence[Option] | None = field(default=None, repr=False)

    @property
    def is_subtable(self) -> bool:
        return self.arity is Arity.SUBTABLE

    @property
    def hidden(self) -> bool:
        return self.description is HIDDEN

    @property
    def display_name(self) -> str:
        """The spelling used when naming this option in messages."""
        if self.long:
            return f"--{self.long}"
        if self.short:
            return f"-{self.short}"
        return "<subtable>"

    def spellings(self) -> list[str]:
        """Return every command-line spelling of this option, short first."""
        names = []
        if self.short:
            names.append(f"-{self.short}")
        if self.long:
            names.append(f"--{self.long}")
        return names

    def get_names_text(self) -> str:
        """Get the option names as shown in usage output (e.g. `-o, --output=<arg>`)."""
        if self.is_subtable:
            return ""
        names = ", ".join(self.spellings())
        if self.arity is Arity.HASARG:
            if self.long:
                names += "=<arg>"
            else:
                names += " <arg>"
        return names

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return False
        return (
            self.long == other.long
            and self.short == other.short
            and self.arity == other.arity
            and self.callback == other.callback
            and self.context is other.context
            and self.description == other.description
            and self.table is other.table
        )

    def __hash__(self) -> int:
        return hash((self.long, self.short, self.arity, self.description))


def opt_without_arg(
    long: str | None,
    short: str | None,
    callback: Callable[[Any], Any],
    context: Any = None,
    description: str | _Hidden | None = None,
) -> Option:
    """
    Build a table entry for an option that takes no argument.

    The callback is called as `callback(context)`. At least one of `long` and
    `short` must be given.
    """
    return Option(
        long=long,
        short=short,
        arity=Arity.NOARG,
        callback=callback,
        context=context,
        description=description,
    )


def opt_with_arg(
    long: str | None,
    short: str | None,
    callback: Callable[[str, Any], Any],
    context: Any = None,
    description: str | _Hidden | None = None,
) -> Option:
    """
    Build a table entry for an option that takes one argument.

    The callback is called as `callback(arg, context)` where `arg` is the text
    found on the command line. At least one of `long` and `short` must be given.
    """
    return Option(
        long=long,
        short=short,
        arity=Arity.HASARG,
        callback=callback,
        context=context,
        description=description,
    )


def opt_subtable(
    table: Sequence[Option], description: str | _Hidden | None = None
) -> Option:
    """Include another table inside a table, under `description` as its heading."""
    return Option(arity=Arity.SUBTABLE, table=table, description=description)
