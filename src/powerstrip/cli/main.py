"""PowerStrip CLI entry point.

This module provides the Typer application and entry point for the
`powerstrip` CLI. The application has a single command that runs one
interactive menu session.

Usage:
    powerstrip                - Start the interactive menu
    python -m powerstrip      - Same, without the console script
"""

import typer

from powerstrip.console import ConsoleController
from powerstrip.log import configure_logging

app = typer.Typer(
    name="powerstrip",
    help="PowerStrip - Plug incompatible devices into one outlet",
    add_completion=False,
)


@app.command()
def session_command() -> None:
    """Plug devices in from an interactive menu.

    Choose a device by number to power it through its outlet adapter.
    Enter the exit choice to quit.
    """
    configure_logging()
    ConsoleController().run()


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
