"""
Command-line usage errors.
"""
import click


class UsageError(click.UsageError):
    """Bad or missing flag, flag value, or input descriptor.

    Exits with status 1 rather than Click's default of 2.
    """
    exit_code = 1
