# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `OptionCompleter`, a Prompt Toolkit completer for registered options.

Useful when a program reads command lines interactively (a REPL or a shell-like
prompt) and parses them with an `OptionParser`. While the user types an option,
the completer offers the registered spellings that match:

    session = PromptSession(completer=OptionCompleter(parser))
    line = session.prompt("> ")
    outcome = parser.parse(["prompt", *shlex.split(line)])

Nothing is suggested after `--`, for positional arguments, or while the user
is typing the value of an option that takes an argument.
"""
from __future__ import annotations

import os
import shlex
from typing import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from optable.parser.option_parser import OptionParser


class OptionCompleter(Completer):
    """
    Prompt Toolkit completer for option spellings.

    Args:
        parser (OptionParser): The parser whose registered options are offered.
    """

    def __init__(self, parser: OptionParser):
        self.parser = parser

    def get_completions(
        self, document: Document, complete_event: CompleteEvent | None
    ) -> Iterable[Completion]:
        """
        Compute completions for the current user input.

        Args:
            document (Document): The current Prompt Toolkit document.
            complete_event: The triggering event, not used here.

        Yields:
            Completion: Option spellings matching the current stub.
        """
        text = document.text_before_cursor
        try:
            tokens = shlex.split(text)
        except ValueError:
            return
        cursor_at_end_of_token = text.endswith((" ", "\t")) or not tokens

        parsed = tokens if cursor_at_end_of_token else tokens[:-1]
        stub = "" if cursor_at_end_of_token else tokens[-1]

        if "--" in parsed:
            return
        if parsed and self.parser.takes_argument(parsed[-1]):
            return
        if stub and not stub.startswith("-"):
            return

        suggestions = self.parser.suggest(stub)
        yield from self._yield_lcp_completions(suggestions, stub)

    def _yield_lcp_completions(
        self, suggestions: list[str], stub: str
    ) -> Iterable[Completion]:
        """
        Yield completions for the current stub using longest-common-prefix logic.

        Behavior:
        - If only one match → yield it fully.
        - If multiple matches share a prefix longer than the stub → insert the
          prefix, but also display all matches in the menu.
        - Otherwise → list all matches individually.
        """
        matches = [s for s in suggestions if s.startswith(stub)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)

        if len(matches) == 1:
            yield Completion(matches[0], start_position=-len(stub), display=matches[0])
            return
        if len(lcp) > len(stub) and lcp not in ("-", "--"):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
        for match in matches:
            yield Completion(match, start_position=-len(stub), display=match)
