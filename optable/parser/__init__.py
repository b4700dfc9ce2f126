"""
Optable CLI Options

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arity import Arity
from .matcher import match_long, match_short
from .option import HIDDEN, Option, opt_subtable, opt_with_arg, opt_without_arg
from .option_parser import OptionParser
from .parser_types import OptionGroup, ParseOutcome, RegisteredOption
from .registry import OptionRegistry
from .tokens import Token, TokenKind, classify_token
from .usage import render_usage

__all__ = [
    "Arity",
    "HIDDEN",
    "Option",
    "OptionGroup",
    "OptionParser",
    "OptionRegistry",
    "ParseOutcome",
    "RegisteredOption",
    "Token",
    "TokenKind",
    "classify_token",
    "match_long",
    "match_short",
    "opt_subtable",
    "opt_with_arg",
    "opt_without_arg",
    "render_usage",
]
