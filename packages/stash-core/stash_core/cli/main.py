"""
Stash CLI Main Entry Point

Usage:
    stash store keys [--store NAME]
    stash store get <key>
    stash version
"""
import click

from .. import __version__
from ..services.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="stash")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Stash CLI - local key-value state stores."""
    setup_logging("DEBUG" if verbose else None)


# Register store commands
from .store_cmds import store  # noqa: E402
cli.add_command(store)


@cli.command("version")
def version():
    """Show stash CLI version."""
    click.echo(f"stash CLI v{__version__}")


# Entry point
def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
