# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads option table declarations from YAML or TOML files.

A table file lists options the same way a Python table does, with callbacks
given as dotted import paths and contexts bound to `OptionsManager` values:

    options:
      - long: verbose
        short: v
        arity: noarg
        callback: optable.helpers.inc_int
        target: verbose
        default: 0
        description: More output (repeatable).
      - long: version
        callback: optable.helpers.show_version_and_exit
        context: "demo 1.0"
        description: Print the version and exit.
      - description: Network options
        options:
          - long: timeout
            arity: hasarg
            callback: optable.helpers.set_float
            target: timeout
            default: 5.0
            description: Seconds to wait for a reply.

Entries with nested `options` become sub-tables; `hidden: true` keeps them (or
a single option) out of usage output. Every problem with the file is reported
as `OptionTableError`, since a broken table is a programming error.
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from optable.exceptions import OptionTableError
from optable.logger import logger
from optable.options_manager import OptionsManager
from optable.parser.arity import Arity
from optable.parser.option import HIDDEN, Option, opt_subtable


def import_callback(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise OptionTableError(f"Invalid callback path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise OptionTableError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        callback = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise OptionTableError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(callback):
        raise OptionTableError(f"'{dotted_path}' is not callable")
    return callback


class RawOption(BaseModel):
    """Raw option or sub-table entry of a table file."""

    long: str | None = None
    short: str | None = None
    arity: Arity = Arity.NOARG
    callback: str | None = None
    target: str | None = None
    default: Any = None
    context: Any = None
    description: str | None = None
    hidden: bool = False
    options: list[RawOption] | None = None

    @field_validator("arity", mode="before")
    @classmethod
    def validate_arity(cls, value: Any) -> Arity:
        if isinstance(value, Arity):
            return value
        return Arity(value)

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("short must be a single character")
        return value

    @model_validator(mode="after")
    def validate_entry(self) -> RawOption:
        if self.options is not None:
            self.arity = Arity.SUBTABLE
            if self.long or self.short or self.callback:
                raise ValueError("a sub-table entry cannot have names or a callback")
            return self
        if self.arity is Arity.SUBTABLE:
            raise ValueError("arity 'subtable' requires nested 'options'")
        if not self.callback:
            raise ValueError(f"option '{self.long or self.short}' needs a callback")
        if self.target is not None and self.context is not None:
            raise ValueError("give either 'target' or 'context', not both")
        return self


RawOption.model_rebuild()


class RawTable(BaseModel):
    """Top level of a table file."""

    description: str | None = None
    options: list[RawOption] = Field(default_factory=list)


def _convert(raw_options: list[RawOption], options: OptionsManager) -> list[Option]:
    table: list[Option] = []
    for raw in raw_options:
        description = HIDDEN if raw.hidden else raw.description
        if raw.options is not None:
            table.append(opt_subtable(_convert(raw.options, options), description))
            continue
        assert raw.callback is not None, "callback validated above"
        if raw.target is not None:
            context = options.ref(raw.target, raw.default)
        else:
            context = raw.context
        table.append(
            Option(
                long=raw.long,
                short=raw.short,
                arity=raw.arity,
                callback=import_callback(raw.callback),
                context=context,
                description=description,
            )
        )
    return table


def _read(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix not in (".yaml", ".yml", ".toml"):
        raise OptionTableError(f"Unsupported option table format: '{path.suffix}'")
    try:
        with path.open("r", encoding="UTF-8") as file:
            if suffix in (".yaml", ".yml"):
                return yaml.safe_load(file) or {}
            return toml.load(file)
    except (OSError, yaml.YAMLError, toml.TomlDecodeError) as error:
        raise OptionTableError(f"Could not read option table '{path}': {error}") from error


def load_table(
    path: str | Path, options: OptionsManager | None = None
) -> tuple[list[Option], str | None]:
    """
    Load an option table from a YAML or TOML file.

    Args:
        path (str | Path): The table file.
        options (OptionsManager | None): Where `target` values are bound.

    Returns:
        tuple[list[Option], str | None]: The table and its top-level description,
            ready for `OptionParser.register_table(table, description)`.

    Raises:
        OptionTableError: If the file cannot be read, validated or imported.
    """
    path = Path(path)
    options = options or OptionsManager()
    data = _read(path)
    if isinstance(data, list):
        data = {"options": data}
    try:
        raw_table = RawTable.model_validate(data)
    except ValidationError as error:
        raise OptionTableError(f"Invalid option table '{path}':\n{error}") from error
    table = _convert(raw_table.options, options)
    logger.debug("Loaded %d table entries from '%s'", len(table), path)
    return table, raw_table.description
