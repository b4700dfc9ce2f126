# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the default Rich theme used by Optable output.

`get_nord_theme()` builds the `rich.theme.Theme` installed on the shared
consoles, so output can use named styles such as `[error]...[/error]`.
"""
from rich.style import Style
from rich.theme import Theme


class NordColors:
    """Nord palette used for the default theme."""

    SNOW_STORM_BRIGHTEST = "#ECEFF4"
    AURORA_RED = "#BF616A"


def get_nord_theme() -> Theme:
    """Return the Rich theme used by the Optable consoles."""
    return Theme(
        {
            "usage": Style(color=NordColors.SNOW_STORM_BRIGHTEST, bold=True),
            "error": Style(color=NordColors.AURORA_RED, bold=True),
        }
    )
