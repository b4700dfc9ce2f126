# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Arity`, the enum describing how an option table entry behaves.

An entry either takes no argument (`--verbose`), takes exactly one argument
(`--file=PATH`, `--file PATH`, `-fPATH`, `-f PATH`), or is not an option at all
but a nested table of options that is flattened into the registry.

Supports alias coercion for config-friendly values so that table files can say
`arity: flag` or `arity: value`.

Example:
    Arity("noarg") → Arity.NOARG
    Arity("flag")  → Arity.NOARG (via alias)
    Arity("value") → Arity.HASARG (via alias)
"""
from __future__ import annotations

from enum import Enum


class Arity(Enum):
    """
    Defines whether an option takes an argument.

    Members:
        NOARG: The option takes no argument; its callback receives only the context.
        HASARG: The option takes one argument; its callback receives the argument
            text and the context.
        SUBTABLE: The entry holds a nested table of options.

    Aliases:
        - "flag", "none" → "noarg"
        - "arg", "value" → "hasarg"
        - "table" → "subtable"
    """

    NOARG = "noarg"
    HASARG = "hasarg"
    SUBTABLE = "subtable"

    @classmethod
    def choices(cls) -> list[Arity]:
        """Return a list of all arities."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "flag": "noarg",
            "none": "noarg",
            "arg": "hasarg",
            "value": "hasarg",
            "table": "subtable",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> Arity:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("_", "")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_argument(self) -> bool:
        return self is Arity.HASARG

    def __str__(self) -> str:
        """Return the string representation of the arity."""
        return self.value
