# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolves classified tokens to registered options.

Long names are matched exactly first; failing that, a unique registered name
that starts with the given text is accepted as an abbreviation (`--verb` for
`--verbose`). An exact match always wins, even when the text is also a prefix
of other names. Short names are single characters and are never abbreviated.
"""
from __future__ import annotations

from optable.exceptions import AmbiguousOptionError, UnrecognizedOptionError
from optable.parser.option import Option
from optable.parser.registry import OptionRegistry


def match_long(registry: OptionRegistry, name: str) -> Option:
    """
    Return the option registered under `name` or the unique name it abbreviates.

    Raises:
        UnrecognizedOptionError: If no registered name matches.
        AmbiguousOptionError: If `name` abbreviates more than one name.
    """
    option = registry.find_long(name)
    if option is not None:
        return option

    spelling = f"--{name}"
    possibilities = (
        [long for long in registry.long_names() if long.startswith(name)] if name else []
    )
    if len(possibilities) == 1:
        option = registry.find_long(possibilities[0])
        assert option is not None, "registered long name has no option"
        return option
    if not possibilities:
        raise UnrecognizedOptionError(f"unrecognized option '{spelling}'", spelling)

    possibilities.sort()
    candidates = [f"--{long}" for long in possibilities]
    candidates_text = " ".join(f"'{candidate}'" for candidate in candidates)
    raise AmbiguousOptionError(
        f"option '{spelling}' is ambiguous; possibilities: {candidates_text}",
        spelling,
        candidates,
    )


def match_short(
    registry: OptionRegistry, char: str, cluster: str = "", position: int = 1
) -> Option:
    """
    Return the option registered under the short name `char`.

    Args:
        registry (OptionRegistry): The registry to search.
        char (str): The short option character.
        cluster (str): The full token the character came from, for the message.
        position (int): 1-based position of `char` within the cluster.

    Raises:
        UnrecognizedOptionError: If no option uses `char`.
    """
    option = registry.find_short(char)
    if option is not None:
        return option

    message = f"invalid option -- '{char}'"
    if cluster and len(cluster) > 2:
        message += f" (character {position} of '{cluster}')"
    raise UnrecognizedOptionError(message, f"-{char}")
