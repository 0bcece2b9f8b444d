"""textformats CLI - Main entry point."""

import logging

import typer

from textformats_cli.commands.config import config_app
from textformats_cli.commands.formats import apply_command, detect_command, formats_command
from textformats_cli.utils.config import load_config

# Create main Typer app
app = typer.Typer(
    name="textformats",
    help="Detect and convert structured text (JSON, PHP serialize, XML, Base64, URL encoding)",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(config_app, name="config")

# Register standalone commands
app.command(name="detect")(detect_command)
app.command(name="apply")(apply_command)
app.command(name="formats")(formats_command)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Detect and convert values copied out of database cells and cache keys."""
    config = load_config()
    if verbose or config.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = config


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
