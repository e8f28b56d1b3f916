import os
import sys
from dataclasses import dataclass

from rich.console import Console


def is_interactive_environment() -> bool:
    return (
        os.getenv('CI') is None and
        os.getenv('GITHUB_ACTIONS') is None and
        sys.stdout.isatty()
    )


@dataclass(frozen=True)
class OutputSettings:
    """Terminal presentation settings, computed once at startup."""
    interactive: bool = False
    header_style: str = "bold yellow"
    error_style: str = "bold red"

    @classmethod
    def detect(cls) -> "OutputSettings":
        return cls(interactive=is_interactive_environment())


def get_console(settings: OutputSettings, stderr: bool = False) -> Console:
    """Create a console matching the output settings."""
    if not settings.interactive:
        # Piped/CI output - no colors, no interactive elements
        return Console(force_terminal=False, no_color=True, stderr=stderr)
    return Console(stderr=stderr)
