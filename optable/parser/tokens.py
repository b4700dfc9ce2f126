# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token classification for Optable's option parser.

Classification is a pure function of a token's leading characters and never
looks at the registry, so it cannot fail; only matching can.

- `--`            → END_OF_OPTIONS, every later token is positional
- `--name[=val]`  → LONG, split at the first `=`
- `-abc`          → SHORT_CLUSTER, characters processed left to right
- anything else   → POSITIONAL (including `-` and the empty string)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Kinds of command-line tokens."""

    END_OF_OPTIONS = "end_of_options"
    LONG = "long"
    SHORT_CLUSTER = "short_cluster"
    POSITIONAL = "positional"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """
    A classified argv entry.

    Attributes:
        kind (TokenKind): The token's classification.
        text (str): The raw token.
        name (str): Long option name, short cluster characters, or the raw
            text for positionals.
        value (str | None): Inline `=value` of a long option, None if absent.
    """

    kind: TokenKind
    text: str
    name: str = ""
    value: str | None = None

    @property
    def is_option(self) -> bool:
        return self.kind in (TokenKind.LONG, TokenKind.SHORT_CLUSTER)


def classify_token(token: str) -> Token:
    """Classify one raw argv entry."""
    if token == "--":
        return Token(TokenKind.END_OF_OPTIONS, token)
    if token.startswith("--"):
        name, sep, value = token[2:].partition("=")
        return Token(TokenKind.LONG, token, name, value if sep else None)
    if token.startswith("-") and len(token) > 1:
        return Token(TokenKind.SHORT_CLUSTER, token, token[1:])
    return Token(TokenKind.POSITIONAL, token, token)
