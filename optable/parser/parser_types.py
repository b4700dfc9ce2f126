# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Registry and result models for Optable's option parser.

Contents:
- `OptionGroup`: The heading a flattened entry was registered under, linked to
  its enclosing group so nested sub-tables keep their structure for usage output.
- `RegisteredOption`: One flattened registry entry, an `Option` plus its group.
- `ParseOutcome`: The result of a full parse, either the positional arguments or
  the first error encountered.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from optable.exceptions import ErrorKind, OptionParseError
from optable.parser.option import HIDDEN, Option, _Hidden


@dataclass(eq=False)
class OptionGroup:
    """A (possibly nested) heading that options were registered under."""

    heading: str | _Hidden | None = None
    parent: OptionGroup | None = None

    @property
    def depth(self) -> int:
        depth = 0
        group = self.parent
        while group is not None:
            depth += 1
            group = group.parent
        return depth

    @property
    def hidden(self) -> bool:
        """True if this group or any enclosing group is hidden."""
        group: OptionGroup | None = self
        while group is not None:
            if group.heading is HIDDEN:
                return True
            group = group.parent
        return False

    def lineage(self) -> list[OptionGroup]:
        """Return the groups from the outermost down to this one."""
        groups = []
        group: OptionGroup | None = self
        while group is not None:
            groups.append(group)
            group = group.parent
        return list(reversed(groups))


@dataclass
class RegisteredOption:
    """A flattened registry entry."""

    option: Option
    group: OptionGroup

    @property
    def hidden(self) -> bool:
        return self.option.hidden or self.group.hidden


@dataclass(frozen=True)
class ParseOutcome:
    """
    Result of one full parse.

    Attributes:
        positional (list[str]): Non-option arguments in their original order,
            without the program name.
        error (OptionParseError | None): The first error encountered, if any.
    """

    positional: list[str] = field(default_factory=list)
    error: OptionParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error else None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    def __bool__(self) -> bool:
        return self.ok
