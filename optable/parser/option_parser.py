# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionParser`, a table-driven command-line option parser.

Callers declare static tables of `Option` entries, register them once, and then
parse the argument vector in a single pass. Each token is classified, matched
against the registry and dispatched to the option's callback together with its
bound context. The first problem stops the parse.

Key Features:
- Declarative registration of option tables, with nested sub-tables
- Long options (`--name`, `--name=value`, `--name value`) with unambiguous
  abbreviations (`--verb` for `--verbose`)
- Short options (`-x`), POSIX-style bundles (`-abc`) and attached arguments
  (`-ofile`, `-o file`)
- `--` ends option scanning; options and positionals may be interleaved
- Usage text rendered from the same tables, with headings and hidden groups

Public Interface:
- `register_table(...)`, `register_noarg(...)`, `register_arg(...)`
- `parse_args(args)`: Return positional arguments or raise `OptionParseError`.
- `parse(argv, errlog)`: Report the first error to `errlog`, return a `ParseOutcome`.
- `parse_argv(argv, errlog)`: Rewrite `argv` in place to `[program, *positional]`.
- `usage(...)`, `render_usage(...)`, `usage_and_exit(...)`
- `suggest(stub)`: Option spellings for completion.

Example Usage:
    options = OptionsManager()
    parser = OptionParser()
    parser.register_table(
        [
            opt_without_arg("verbose", "v", set_bool, options.ref("verbose", False),
                            "Enable verbose output."),
            opt_with_arg("count", "c", set_int, options.ref("count", 1),
                         "Number of runs."),
            opt_without_arg("usage", "h", parser.usage_and_exit, "[options] FILE...",
                            "Print this message."),
        ]
    )

    outcome = parser.parse(sys.argv)
    if not outcome:
        print(parser.usage(), end="")
        sys.exit(1)
    files = outcome.positional
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Sequence

from rich.console import Console
from rich.text import Text

from optable.console import console
from optable.exceptions import (
    CallbackError,
    MissingArgumentError,
    OptionParseError,
    UnexpectedArgumentError,
)
from optable.helpers import invalid_argument, log_stderr
from optable.logger import logger
from optable.parser.arity import Arity
from optable.parser.matcher import match_long, match_short
from optable.parser.option import Option, _Hidden
from optable.parser.parser_types import ParseOutcome
from optable.parser.registry import OptionRegistry
from optable.parser.tokens import Token, TokenKind, classify_token
from optable.parser.usage import render_usage
from optable.utils import get_program_invocation


class OptionParser:
    """
    Table-driven option parser.

    Holds its own `OptionRegistry`, so several independent parsers can coexist
    (the process-wide default lives in `optable.api`). Registration must be
    finished before parsing starts; the registry is only read while parsing.

    Attributes:
        program (str | None): Program name used by `usage()` when none is given.
        registry (OptionRegistry): The registered options.
    """

    def __init__(
        self,
        program: str | None = None,
        console: Console = console,
    ) -> None:
        self.program: str | None = program
        self.console: Console = console
        self.registry: OptionRegistry = OptionRegistry()

    def register_table(
        self, table: Sequence[Option], heading: str | _Hidden | None = None
    ) -> None:
        """
        Register a table of options.

        Args:
            table (Sequence[Option]): Entries built with `opt_without_arg`,
                `opt_with_arg` and `opt_subtable`.
            heading (str | HIDDEN | None): Heading for these options in usage output.

        Raises:
            OptionTableError: If the table is malformed or reuses a registered name.
        """
        self.registry.register_table(table, heading)

    def register_noarg(
        self,
        long: str | None,
        short: str | None,
        callback: Callable[[Any], Any],
        context: Any = None,
        description: str | _Hidden | None = None,
    ) -> None:
        """Register a single option that takes no argument."""
        self.registry.register(long, short, Arity.NOARG, callback, context, description)

    def register_arg(
        self,
        long: str | None,
        short: str | None,
        callback: Callable[[str, Any], Any],
        context: Any = None,
        description: str | _Hidden | None = None,
    ) -> None:
        """Register a single option that takes one argument."""
        self.registry.register(long, short, Arity.HASARG, callback, context, description)

    def _dispatch(self, option: Option, spelling: str, arg: str | None = None) -> None:
        logger.debug("Dispatching option %s", spelling)
        try:
            if option.arity is Arity.HASARG:
                assert arg is not None, "argument-taking option dispatched without argument"
                result = option.callback(arg, option.context)
            else:
                result = option.callback(option.context)
        except Exception as error:
            raise CallbackError(f"{spelling}: {error}", spelling) from error

        if isinstance(result, str):
            problem = result
        elif result is None or result:
            return
        elif arg is not None:
            problem = invalid_argument(arg)
        else:
            problem = "option failed"
        raise CallbackError(f"{spelling}: {problem}", spelling)

    def _take_argument(self, args: list[str], i: int, spelling: str) -> tuple[str, int]:
        if i >= len(args):
            raise MissingArgumentError(
                f"option '{spelling}' requires an argument", spelling
            )
        return args[i], i + 1

    def _handle_long(self, token: Token, args: list[str], i: int) -> int:
        option = match_long(self.registry, token.name)
        spelling = f"--{option.long}"
        if option.arity is Arity.NOARG:
            if token.value is not None:
                raise UnexpectedArgumentError(
                    f"option '{spelling}' doesn't allow an argument", spelling
                )
            self._dispatch(option, spelling)
            return i

        if token.value is not None:
            arg = token.value
        else:
            arg, i = self._take_argument(args, i, spelling)
        self._dispatch(option, spelling, arg)
        return i

    def _handle_short_cluster(self, token: Token, args: list[str], i: int) -> int:
        cluster = token.name
        for position, char in enumerate(cluster, start=1):
            option = match_short(self.registry, char, token.text, position)
            spelling = f"-{char}"
            if option.arity is Arity.NOARG:
                self._dispatch(option, spelling)
                continue

            # An argument-taking option swallows the rest of the cluster.
            remainder = cluster[position:]
            if remainder:
                arg = remainder
            else:
                arg, i = self._take_argument(args, i, spelling)
            self._dispatch(option, spelling, arg)
            break
        return i

    def parse_args(self, args: Sequence[str] | None = None) -> list[str]:
        """
        Parse arguments, dispatching every option found to its callback.

        Args:
            args (Sequence[str] | None): The arguments, without the program name.

        Returns:
            list[str]: The positional arguments in their original order.

        Raises:
            OptionParseError: On the first unrecognized, ambiguous or incomplete
                option, or the first callback failure.
        """
        args = list(args or [])
        positional: list[str] = []
        i = 0
        while i < len(args):
            token = classify_token(args[i])
            i += 1
            if token.kind is TokenKind.END_OF_OPTIONS:
                positional.extend(args[i:])
                break
            elif token.kind is TokenKind.LONG:
                i = self._handle_long(token, args, i)
            elif token.kind is TokenKind.SHORT_CLUSTER:
                i = self._handle_short_cluster(token, args, i)
            else:
                positional.append(token.text)
        return positional

    def parse(
        self,
        argv: Sequence[str],
        errlog: Callable[[str], Any] = log_stderr,
    ) -> ParseOutcome:
        """
        Parse a full argument vector, program name first.

        On failure `errlog` is called exactly once with `"<program>: <message>"`.
        Nothing is printed on success and the process is never terminated here.

        Returns:
            ParseOutcome: The positional arguments, or the error that stopped parsing.
        """
        argv = list(argv)
        program = argv[0] if argv else (self.program or get_program_invocation())
        try:
            positional = self.parse_args(argv[1:])
        except OptionParseError as error:
            logger.debug("Parsing stopped (%s): %s", error.kind, error.message)
            errlog(f"{program}: {error.message}")
            return ParseOutcome(error=error)
        return ParseOutcome(positional=positional)

    def parse_argv(
        self,
        argv: list[str],
        errlog: Callable[[str], Any] = log_stderr,
    ) -> bool:
        """
        Parse `argv` and, on success, rewrite it in place to `[program, *positional]`.

        This keeps the classic `argc`/`argv` contract, e.g. `parse_argv(sys.argv)`.
        On failure `argv` is left untouched.
        """
        outcome = self.parse(argv, errlog)
        if outcome:
            argv[1:] = outcome.positional
        return outcome.ok

    def _find_usage_extra(self) -> str | None:
        for option in self.registry.options():
            if option.callback == self.usage_and_exit and isinstance(option.context, str):
                return option.context
        return None

    def usage(self, program: str | None = None, extra: str | None = None) -> str:
        """
        Render the usage text for all visible options.

        Args:
            program (str | None): Program name; defaults to `self.program`, then to
                the current program invocation.
            extra (str | None): Text after the program name; defaults to the
                context of a registered `usage_and_exit` option.

        Returns:
            str: The usage text, ending with a newline.
        """
        program = program or self.program or get_program_invocation()
        if extra is None:
            extra = self._find_usage_extra()
        return render_usage(self.registry, program, extra)

    def render_usage(self, program: str | None = None, extra: str | None = None) -> None:
        """Print the usage text through the Rich console."""
        text = Text(self.usage(program, extra).rstrip("\n"))
        header_end = text.plain.find("\n")
        text.stylize(
            self.console.get_style("usage", default="bold"),
            0,
            header_end if header_end >= 0 else len(text),
        )
        self.console.print(text, soft_wrap=True, highlight=False)

    def usage_and_exit(self, extra: str | None = None) -> None:
        """
        No-argument option callback: print usage and exit with status 0.

        Register it with the usage "extra" text as its context:

            opt_without_arg("help", "h", parser.usage_and_exit, "[options] FILE",
                            "Print this message.")
        """
        self.render_usage(extra=extra)
        sys.exit(0)

    def suggest(self, stub: str) -> list[str]:
        """
        Return the visible option spellings that start with `stub`.

        Long spellings only for `--...`, short and long spellings for `-...`
        or an empty stub.
        """
        if stub and not stub.startswith("-"):
            return []
        spellings: list[str] = []
        for entry in self.registry:
            if entry.hidden:
                continue
            for spelling in entry.option.spellings():
                if stub.startswith("--") and not spelling.startswith("--"):
                    continue
                if spelling.startswith(stub):
                    spellings.append(spelling)
        return sorted(set(spellings))

    def takes_argument(self, spelling: str) -> bool:
        """
        Return True if the token `spelling` leaves an option waiting for its value.

        Tokens are resolved as `parse_args` would: long names may be abbreviated,
        and in a short cluster the first argument-taking option swallows the rest,
        so only a cluster ending on that option waits for the next token.
        """
        token = classify_token(spelling)
        if token.kind is TokenKind.LONG:
            if token.value is not None:
                return False
            try:
                option = match_long(self.registry, token.name)
            except OptionParseError:
                return False
            return option.arity is Arity.HASARG
        if token.kind is TokenKind.SHORT_CLUSTER:
            for position, char in enumerate(token.name, start=1):
                option = self.registry.find_short(char)
                if option is None:
                    return False
                if option.arity is Arity.HASARG:
                    return position == len(token.name)
        return False

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        long_count = len(self.registry.long_names())
        short_count = len(self.registry.short_names())
        return (
            f"OptionParser(options={len(self.registry)}, "
            f"long={long_count}, short={short_count})"
        )

    def __repr__(self) -> str:
        return str(self)
