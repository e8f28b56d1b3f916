"""
Main CLI application for 0x0.

Defines the single-command Typer application. Parser failures raised by
Click itself are re-raised as UsageError so that every usage problem exits
with status 1.
"""
import click
import typer
from typer.core import TyperCommand

from nullpointer.cli.commands.upload import upload_command
from nullpointer.cli.errors import UsageError

# Messages for flags given without their value
MISSING_VALUE_MESSAGES = {
    "-e": "invalid expires value",
    "--expires": "invalid expires value",
    "-m": "missing mimetype",
    "--mimetype": "missing mimetype",
}

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class UploadCommand(TyperCommand):
    """Typer command whose parse errors use the 0x0 exit status and messages."""

    def parse_args(self, ctx: click.Context, args):
        try:
            return super().parse_args(ctx, args)
        except UsageError:
            raise
        except click.UsageError as e:
            message = e.message
            if isinstance(e, click.BadOptionUsage):
                message = MISSING_VALUE_MESSAGES.get(e.option_name, message)
            raise UsageError(message, ctx=e.ctx or ctx) from e


# Initialize Typer app
app = typer.Typer(
    help="0x0 - upload files, standard input or URLs to a 0x0 file host",
    add_completion=False,
    context_settings=CONTEXT_SETTINGS,
)

# Register the single command; Typer runs it without a subcommand name
app.command(
    "upload",
    cls=UploadCommand,
    context_settings=CONTEXT_SETTINGS,
    help="Upload a file, standard input, or a remote URL and print the hosted URL.",
)(upload_command)
