# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionRegistry`, the flattened, ordered table of registered options.

Declared tables may nest other tables through `Arity.SUBTABLE` entries. The
registry expands them depth-first in declaration order, so that entries keep
the grouping of their declaring table in usage output, and records the heading
each entry was registered under as an `OptionGroup`.

Every table is flattened and validated in full before anything is committed:
a malformed entry, a duplicate long or short name, a table that includes
itself, or nesting deeper than `MAX_TABLE_DEPTH` raises `OptionTableError` and
leaves the registry as it was.

Matching is by name, never by position; see `optable.parser.matcher`.
"""
from __future__ import annotations

from typing import Any, Callable, Iterator, Sequence

from optable.exceptions import OptionTableError
from optable.logger import logger
from optable.parser.arity import Arity
from optable.parser.option import HIDDEN, Option, _Hidden
from optable.parser.parser_types import OptionGroup, RegisteredOption

MAX_TABLE_DEPTH = 64


class OptionRegistry:
    """Ordered collection of flattened options with long/short name indexes."""

    def __init__(self) -> None:
        self._entries: list[RegisteredOption] = []
        self._long_map: dict[str, RegisteredOption] = {}
        self._short_map: dict[str, RegisteredOption] = {}

    def register_table(
        self, table: Sequence[Option], heading: str | _Hidden | None = None
    ) -> None:
        """
        Register a table of options.

        Args:
            table (Sequence[Option]): The entries to register. Sub-table entries
                are expanded in place.
            heading (str | HIDDEN | None): Heading shown above the table's
                options in usage output, HIDDEN to leave them out, or None.

        Raises:
            OptionTableError: If the table is malformed or a name is already taken.
        """
        group = OptionGroup(heading=heading)
        pending: list[RegisteredOption] = []
        self._flatten(table, group, pending, stack=[])
        self._commit(pending)
        logger.debug(
            "Registered %d option(s) under %r", len(pending), self._heading_name(heading)
        )

    def register(
        self,
        long: str | None,
        short: str | None,
        arity: Arity,
        callback: Callable[..., Any],
        context: Any = None,
        description: str | _Hidden | None = None,
    ) -> None:
        """Register a single option outside of any table."""
        option = Option(
            long=long,
            short=short,
            arity=arity,
            callback=callback,
            context=context,
            description=description,
        )
        if option.is_subtable:
            raise OptionTableError("Use register_table() to register a sub-table")
        self.register_table([option])

    def _heading_name(self, heading: str | _Hidden | None) -> str:
        if heading is HIDDEN:
            return "<hidden>"
        return heading or "<top>"

    def _flatten(
        self,
        table: Sequence[Option],
        group: OptionGroup,
        pending: list[RegisteredOption],
        stack: list[int],
    ) -> None:
        if isinstance(table, (str, bytes)) or not isinstance(table, Sequence):
            raise OptionTableError(
                f"Option table must be a sequence of Option entries, got {type(table).__name__}"
            )
        if id(table) in stack:
            raise OptionTableError("Option table includes itself as a sub-table")
        if len(stack) >= MAX_TABLE_DEPTH:
            raise OptionTableError(
                f"Option tables nested more than {MAX_TABLE_DEPTH} levels deep"
            )
        stack.append(id(table))
        for index, entry in enumerate(table):
            if not isinstance(entry, Option):
                raise OptionTableError(
                    f"Entry {index} of option table is {type(entry).__name__}, not Option"
                )
            if entry.is_subtable:
                if entry.table is None:
                    raise OptionTableError(f"Sub-table entry {index} has no table")
                if entry.long or entry.short or entry.callback:
                    raise OptionTableError(
                        f"Sub-table entry {index} cannot have names or a callback"
                    )
                subgroup = OptionGroup(heading=entry.description, parent=group)
                self._flatten(entry.table, subgroup, pending, stack)
            else:
                self._validate_option(entry, index)
                pending.append(RegisteredOption(option=entry, group=group))
        stack.pop()

    def _validate_option(self, option: Option, index: int) -> None:
        if not isinstance(option.arity, Arity):
            raise OptionTableError(f"Entry {index} has invalid arity {option.arity!r}")
        if not option.long and not option.short:
            raise OptionTableError(f"Entry {index} needs a long or a short name")
        if option.long is not None:
            if not isinstance(option.long, str) or not option.long:
                raise OptionTableError(f"Entry {index} has an invalid long name")
            if option.long.startswith("-"):
                raise OptionTableError(
                    f"Long name '{option.long}' must be given without leading dashes"
                )
            if "=" in option.long or any(char.isspace() for char in option.long):
                raise OptionTableError(
                    f"Long name '{option.long}' cannot contain '=' or whitespace"
                )
        if option.short is not None:
            if not isinstance(option.short, str) or len(option.short) != 1:
                raise OptionTableError(
                    f"Short name {option.short!r} must be a single character"
                )
            if option.short == "-" or option.short.isspace():
                raise OptionTableError(f"Short name {option.short!r} is not allowed")
        if not callable(option.callback):
            raise OptionTableError(
                f"Option '{option.display_name}' needs a callable callback"
            )

    def _commit(self, pending: list[RegisteredOption]) -> None:
        long_map: dict[str, RegisteredOption] = {}
        short_map: dict[str, RegisteredOption] = {}
        for entry in pending:
            option = entry.option
            if option.long:
                if option.long in self._long_map or option.long in long_map:
                    raise OptionTableError(f"Option '--{option.long}' is already registered")
                long_map[option.long] = entry
            if option.short:
                if option.short in self._short_map or option.short in short_map:
                    raise OptionTableError(f"Option '-{option.short}' is already registered")
                short_map[option.short] = entry
        self._long_map.update(long_map)
        self._short_map.update(short_map)
        self._entries.extend(pending)

    def find_long(self, name: str) -> Option | None:
        entry = self._long_map.get(name)
        return entry.option if entry else None

    def find_short(self, char: str) -> Option | None:
        entry = self._short_map.get(char)
        return entry.option if entry else None

    def long_names(self) -> list[str]:
        """Return all registered long names in registration order."""
        return [entry.option.long for entry in self._entries if entry.option.long]

    def short_names(self) -> list[str]:
        """Return all registered short names in registration order."""
        return [entry.option.short for entry in self._entries if entry.option.short]

    def options(self) -> list[Option]:
        return [entry.option for entry in self._entries]

    def clear(self) -> None:
        """Forget every registered option."""
        self._entries.clear()
        self._long_map.clear()
        self._short_map.clear()

    def __iter__(self) -> Iterator[RegisteredOption]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, spelling: object) -> bool:
        if not isinstance(spelling, str):
            return False
        if spelling.startswith("--"):
            return spelling[2:] in self._long_map
        if spelling.startswith("-") and len(spelling) == 2:
            return spelling[1] in self._short_map
        return False

    def __str__(self) -> str:
        return (
            f"OptionRegistry(options={len(self._entries)}, "
            f"long={len(self._long_map)}, short={len(self._short_map)})"
        )

    def __repr__(self) -> str:
        return str(self)
