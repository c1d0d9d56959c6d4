"""Command line entry points for humandate."""

from typer import Typer

from .commands import configure_logging, parse_command, repl_command


cli = Typer(help="Resolve human date/time phrases")
cli.command("parse")(parse_command)
cli.command("repl")(repl_command)

__all__ = ["cli", "configure_logging", "parse_command", "repl_command"]
