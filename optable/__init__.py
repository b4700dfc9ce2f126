"""
Optable CLI Options

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    AmbiguousOptionError,
    CallbackError,
    ErrorKind,
    MissingArgumentError,
    OptableError,
    OptionParseError,
    OptionTableError,
    OptionValueError,
    UnexpectedArgumentError,
    UnrecognizedOptionError,
)
from .options_manager import OptionRef, OptionsManager
from .parser import (
    HIDDEN,
    Arity,
    Option,
    OptionParser,
    ParseOutcome,
    opt_subtable,
    opt_with_arg,
    opt_without_arg,
)
from .version import __version__

__all__ = [
    "AmbiguousOptionError",
    "Arity",
    "CallbackError",
    "ErrorKind",
    "HIDDEN",
    "MissingArgumentError",
    "OptableError",
    "Option",
    "OptionParseError",
    "OptionParser",
    "OptionRef",
    "OptionTableError",
    "OptionValueError",
    "OptionsManager",
    "ParseOutcome",
    "UnexpectedArgumentError",
    "UnrecognizedOptionError",
    "__version__",
    "opt_subtable",
    "opt_with_arg",
    "opt_without_arg",
]
