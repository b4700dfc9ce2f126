# Optable CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Optable output and diagnostics."""
from rich.console import Console

from optable.themes import get_nord_theme

console = Console(color_system="truecolor", theme=get_nord_theme())
error_console = Console(color_system="truecolor", theme=get_nord_theme(), stderr=True)
