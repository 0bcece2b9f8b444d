"""Configuration commands."""

import typer

from textformats_cli.utils.config import CliConfig, get_config_path, load_config, save_config
from textformats_cli.utils.formatting import (
    FormatOption,
    OutputFormat,
    console,
    create_table,
    print_error,
    print_json,
    print_success,
)

config_app = typer.Typer(
    name="config",
    help="Inspect and create CLI configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@config_app.command(name="show")
def show_config(format: OutputFormat = FormatOption):
    """Show the effective configuration."""
    config = load_config()

    if format == OutputFormat.JSON:
        print_json(config.model_dump())
        return

    table = create_table(f"Configuration ({get_config_path()})", [("Setting", "cyan", True), ("Value", "white")])
    table.add_row("verbose", str(config.verbose))
    for name, value in config.formatter.model_dump().items():
        table.add_row(f"formatter.{name}", str(value))
    console.print(table)


@config_app.command(name="init")
def init_config(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
):
    """Write a config file holding the default settings."""
    path = get_config_path()
    if path.exists() and not force:
        print_error(f"Config file already exists, use --force to overwrite: {path}")
        raise typer.Exit(code=1)

    save_config(CliConfig())
    print_success(f"Wrote default configuration to {path}")
