# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process-wide option registry.

Most programs have exactly one set of command-line options, registered at
start-up and parsed once. This module keeps a default `OptionParser` for them
and exposes its operations as plain functions:

    from optable import api
    from optable.helpers import set_bool

    verbose = options.ref("verbose", False)
    api.register_table(
        [
            opt_without_arg("verbose", "v", set_bool, verbose, "Verbose output."),
            opt_without_arg("help", "h", api.usage_and_exit, "[options] FILE...",
                            "Print this message."),
        ]
    )
    if not api.parse_argv(sys.argv):
        sys.exit(1)

Code that needs several independent parsers (tests, sub-commands) should
create `OptionParser` instances instead.
"""
from __future__ import annotations

from typing import Any, Callable, Sequence

from optable.helpers import log_stderr
from optable.parser.option import Option, _Hidden
from optable.parser.option_parser import OptionParser
from optable.parser.parser_types import ParseOutcome

default_parser = OptionParser()

usage_and_exit = default_parser.usage_and_exit


def register_table(table: Sequence[Option], heading: str | _Hidden | None = None) -> None:
    """Register a table of options with the default parser."""
    default_parser.register_table(table, heading)


def register_noarg(
    long: str | None,
    short: str | None,
    callback: Callable[[Any], Any],
    context: Any = None,
    description: str | _Hidden | None = None,
) -> None:
    default_parser.register_noarg(long, short, callback, context, description)


def register_arg(
    long: str | None,
    short: str | None,
    callback: Callable[[str, Any], Any],
    context: Any = None,
    description: str | _Hidden | None = None,
) -> None:
    default_parser.register_arg(long, short, callback, context, description)


def parse(argv: Sequence[str], errlog: Callable[[str], Any] = log_stderr) -> ParseOutcome:
    """Parse `argv` (program name first) with the default parser."""
    return default_parser.parse(argv, errlog)


def parse_argv(argv: list[str], errlog: Callable[[str], Any] = log_stderr) -> bool:
    """Parse `argv` and leave only the program name and positionals in it."""
    return default_parser.parse_argv(argv, errlog)


def usage(program: str | None = None, extra: str | None = None) -> str:
    return default_parser.usage(program, extra)


def reset() -> None:
    """Forget every option registered with the default parser."""
    default_parser.registry.clear()
