"""
CLI module for 0x0.

Provides command-line interface components following clean architecture principles.
"""
import logging

from nullpointer.cli.app import app as _app

PROG_NAME = "0x0"


def configure_logging(level: int = logging.WARNING) -> None:
    """Send diagnostics to stderr so stdout only carries the hosted URL."""
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    configure_logging()
    _app(prog_name=PROG_NAME)

__all__ = ['app']
