"""Format detection and conversion commands."""

from pathlib import Path
from typing import Optional

import typer

from textformats import FormatTag, apply, detect, label
from textformats.registry import resolve_tag
from textformats_cli.utils.config import CliConfig
from textformats_cli.utils.formatting import (
    FormatOption,
    OutputFormat,
    console,
    create_table,
    print_error,
    print_json,
    print_raw,
)

TextArgument = typer.Argument(None, help="Text to inspect. Reads stdin when omitted.")
FileOption = typer.Option(
    None,
    "--file",
    "-i",
    exists=True,
    dir_okay=False,
    readable=True,
    help="Read the text from a file instead",
)


def read_input(text: Optional[str], file: Optional[Path]) -> str:
    """Resolve the command's input text.

    Text read from a file or stdin loses one trailing newline, which editors
    and shell pipes add but cell values rarely contain.
    """
    if text is not None and file is not None:
        print_error("Pass either TEXT or --file, not both")
        raise typer.Exit(code=2)
    if text is not None:
        return text
    if file is not None:
        data = file.read_text(encoding="utf-8")
    else:
        data = typer.get_text_stream("stdin").read()
    return data[:-1] if data.endswith("\n") else data


def _get_config(ctx: typer.Context) -> CliConfig:
    return ctx.obj if isinstance(ctx.obj, CliConfig) else CliConfig()


def detect_command(
    text: Optional[str] = TextArgument,
    file: Optional[Path] = FileOption,
    format: OutputFormat = FormatOption,
):
    """List the formats the text could be written in."""
    tags = detect(read_input(text, file))

    if format == OutputFormat.JSON:
        print_json([{"tag": tag.value, "label": label(tag)} for tag in tags])
        return

    table = create_table("Candidate Formats", [("Tag", "cyan", True), ("Label", "yellow")])
    for tag in tags:
        table.add_row(tag.value, label(tag))
    console.print(table)


def apply_command(
    ctx: typer.Context,
    tag: str = typer.Argument(..., help="Target format tag (see 'textformats formats')"),
    text: Optional[str] = TextArgument,
    file: Optional[Path] = FileOption,
    format: OutputFormat = FormatOption,
):
    """Convert the text to a format and print the result."""
    resolved = resolve_tag(tag)
    if resolved is None:
        print_error(f"Unknown format: {tag}")
        console.print(f"Available formats: {', '.join(t.value for t in FormatTag)}", style="dim")
        raise typer.Exit(code=2)

    config = _get_config(ctx)
    outcome = apply(read_input(text, file), resolved, settings=config.formatter)

    if format == OutputFormat.JSON:
        print_json(outcome.to_dict())
    elif outcome.success:
        print_raw(outcome.content)
    else:
        print_error(f"{label(resolved)} failed: {outcome.error}")

    if not outcome.success:
        raise typer.Exit(code=1)


def formats_command(format: OutputFormat = FormatOption):
    """List every supported format tag."""
    if format == OutputFormat.JSON:
        print_json([{"tag": tag.value, "label": label(tag)} for tag in FormatTag])
        return

    table = create_table("Supported Formats", [("Tag", "cyan", True), ("Label", "yellow")])
    for tag in FormatTag:
        table.add_row(tag.value, label(tag))
    console.print(table)
