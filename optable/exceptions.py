# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Optable.

Construction-time problems (a malformed or conflicting option table) are kept
apart from parse-time problems (what the user typed on the command line), so
that a registration bug fails loudly while user input errors can be reported
through an error sink.

Exception Hierarchy:
- OptableError
    ├── OptionTableError
    ├── OptionValueError
    └── OptionParseError
        ├── UnrecognizedOptionError
        ├── AmbiguousOptionError
        ├── MissingArgumentError
        ├── UnexpectedArgumentError
        └── CallbackError
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Kinds of parse-time failure."""

    UNRECOGNIZED_OPTION = "unrecognized_option"
    AMBIGUOUS_OPTION = "ambiguous_option"
    MISSING_ARGUMENT = "missing_argument"
    UNEXPECTED_ARGUMENT = "unexpected_argument"
    CALLBACK_FAILURE = "callback_failure"

    def __str__(self) -> str:
        return self.value


class OptableError(Exception):
    """Base exception for Optable."""


class OptionTableError(OptableError):
    """Exception raised when an option table is malformed or conflicts with the registry."""


class OptionValueError(OptableError):
    """Exception raised by a callback when it rejects its argument."""


class OptionParseError(OptableError):
    """
    Base class for errors found while parsing the command line.

    Attributes:
        kind (ErrorKind): What went wrong.
        option (str | None): The option spelling involved, as the user typed it.
    """

    kind: ErrorKind = ErrorKind.CALLBACK_FAILURE

    def __init__(self, message: str, option: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.option = option


class UnrecognizedOptionError(OptionParseError):
    """Exception raised when a token matches no registered option."""

    kind = ErrorKind.UNRECOGNIZED_OPTION


class AmbiguousOptionError(OptionParseError):
    """Exception raised when a long option prefix matches several names."""

    kind = ErrorKind.AMBIGUOUS_OPTION

    def __init__(
        self, message: str, option: str | None = None, candidates: list[str] | None = None
    ) -> None:
        super().__init__(message, option)
        self.candidates: list[str] = candidates or []


class MissingArgumentError(OptionParseError):
    """Exception raised when an option that takes an argument has none."""

    kind = ErrorKind.MISSING_ARGUMENT


class UnexpectedArgumentError(OptionParseError):
    """Exception raised when `--name=value` is given for an option without an argument."""

    kind = ErrorKind.UNEXPECTED_ARGUMENT


class CallbackError(OptionParseError):
    """Exception raised when an option callback reports a failure."""

    kind = ErrorKind.CALLBACK_FAILURE
