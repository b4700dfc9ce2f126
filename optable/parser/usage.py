# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders usage text from an `OptionRegistry`.

The output is a pure function of the registry and the given strings:

    Usage: prog [options] FILE...
      -v, --verbose               Enable verbose output.
      -o, --output=<arg>          Write results to FILE.
      Network options:
        --timeout=<arg>           Seconds to wait for a reply.

Entries are listed in registration order. A group heading is printed once,
just above the first visible entry registered under it, and each level of
sub-table nesting indents by two more spaces. Hidden groups and entries without
a description are left out.
"""
from __future__ import annotations

from optable.parser.parser_types import OptionGroup
from optable.parser.registry import OptionRegistry

USAGE_COLUMN = 28
INDENT = "  "


def _format_entry(names: str, description: str, indent: str) -> list[str]:
    prefix = f"{indent}{names}"
    description_lines = description.splitlines() or [""]
    filler = " " * (USAGE_COLUMN + 2)
    if len(prefix) < USAGE_COLUMN:
        lines = [f"{prefix:<{USAGE_COLUMN}}  {description_lines[0]}"]
    else:
        lines = [prefix, f"{filler}{description_lines[0]}"]
    lines.extend(f"{filler}{line}" for line in description_lines[1:])
    return lines


def render_usage(registry: OptionRegistry, program: str, extra: str | None = None) -> str:
    """
    Build the usage text for every visible registered option.

    Args:
        registry (OptionRegistry): The options to describe.
        program (str): Program name for the header line.
        extra (str | None): Text printed after the program name, verbatim.

    Returns:
        str: The usage text, ending with a newline.
    """
    header = f"Usage: {program}"
    if extra:
        header += f" {extra}"
    lines = [header]

    shown_groups: set[int] = set()
    for entry in registry:
        option = entry.option
        if entry.hidden or not option.description:
            continue
        group: OptionGroup
        for group in entry.group.lineage():
            if id(group) in shown_groups:
                continue
            shown_groups.add(id(group))
            if isinstance(group.heading, str) and group.heading:
                lines.append(f"{INDENT * group.depth}{group.heading}:")
        indent = INDENT * (entry.group.depth + 1)
        lines.extend(_format_entry(option.get_names_text(), option.description, indent))

    return "\n".join(lines) + "\n"
