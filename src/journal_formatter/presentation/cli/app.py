"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from journal_formatter.domain.errors import JournalFormatterError
from journal_formatter.domain.models.enums import FontFamily, ReferenceStyle
from journal_formatter.presentation.cli.formatters import (
    console,
    error_message,
    format_details,
    formats_table,
    result_panel,
    success_panel,
)

app = typer.Typer(
    name="journalfmt",
    help="📄 Format manuscripts for a target journal's house style",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _container(ctx: typer.Context):
    from journal_formatter.bootstrap import Container

    return Container(data_dir=ctx.obj.get("data_dir"))


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
    data_dir: Annotated[
        Optional[Path],
        typer.Option("--data-dir", help="Directory holding saved custom formats"),
    ] = None,
) -> None:
    """Journal Formatter command-line interface."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"data_dir": data_dir}


# ---------------------------------------------------------------------------
# journalfmt formats
# ---------------------------------------------------------------------------


@app.command()
def formats(ctx: typer.Context) -> None:
    """List the available journal formats."""
    container = _container(ctx)
    registry = container.registry
    formats_table(registry.formats, {f.id for f in registry.builtin_formats})


@app.command()
def show(
    ctx: typer.Context,
    format_id: Annotated[str, typer.Argument(help="Journal format id")],
) -> None:
    """Show every setting of one journal format."""
    try:
        journal_format = _container(ctx).manage_formats().get(format_id)
    except JournalFormatterError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    format_details(journal_format)


# ---------------------------------------------------------------------------
# journalfmt format
# ---------------------------------------------------------------------------


@app.command("format")
def format_(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="Manuscript file (.txt or .docx)")],
    journal: Annotated[
        Optional[str], typer.Option("--journal", "-j", help="Journal format id")
    ] = None,
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Directory for the formatted file")
    ] = Path("."),
    show: Annotated[
        bool, typer.Option("--show", help="Print the formatted text as well")
    ] = False,
) -> None:
    """Format a manuscript and save it as formatted_<name>.txt."""
    container = _container(ctx)
    try:
        journal_format = container.manage_formats().get(journal)
        result = container.format_manuscript().execute_file(source, journal_format)
        output_path = container.export_result().execute(result, output)
    except JournalFormatterError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    result_panel(result, str(output_path))
    if show:
        console.print(result.content, markup=False, highlight=False)


# ---------------------------------------------------------------------------
# journalfmt add-format
# ---------------------------------------------------------------------------


@app.command("add-format")
def add_format(
    ctx: typer.Context,
    name: Annotated[str, typer.Option("--name", "-n", help="Journal name")],
    description: Annotated[str, typer.Option("--description", help="Short description")] = "",
    word_limit: Annotated[int, typer.Option("--word-limit", min=1, help="Word limit")] = 5000,
    reference_style: Annotated[
        ReferenceStyle, typer.Option("--reference-style", "-r", help="Citation style")
    ] = ReferenceStyle.VANCOUVER,
    font: Annotated[
        str, typer.Option("--font", "-f", help="Font family")
    ] = FontFamily.TIMES_NEW_ROMAN.value,
    font_size: Annotated[int, typer.Option("--font-size", min=1, help="Font size (pt)")] = 12,
    line_spacing: Annotated[
        float, typer.Option("--line-spacing", min=0.1, help="Line spacing")
    ] = 1.5,
    margin: Annotated[
        float, typer.Option("--margin", min=0.1, help="Margin on every side (inches)")
    ] = 1.0,
) -> None:
    """Save a custom journal format."""
    from journal_formatter.domain.models.journal_format import FormatDraft, Margins

    draft = FormatDraft(
        name=name,
        description=description,
        word_limit=word_limit,
        reference_style=reference_style,
        font_family=font,
        font_size=font_size,
        line_spacing=line_spacing,
        margins=Margins(top=margin, bottom=margin, left=margin, right=margin),
    )

    container = _container(ctx)
    try:
        journal_format = container.manage_formats().register(draft)
    except JournalFormatterError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Format saved: [bold green]{escape(journal_format.name)}[/] ({journal_format.id})"
    )


# ---------------------------------------------------------------------------
# journalfmt sample
# ---------------------------------------------------------------------------


@app.command()
def sample(
    ctx: typer.Context,
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Where to write the sample manuscript")
    ] = Path("sample_manuscript.txt"),
) -> None:
    """Write a sample manuscript to try the formatter with."""
    text = _container(ctx).generate_sample().execute()
    try:
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        error_message(f"Could not write {output}: {e}")
        raise typer.Exit(code=1)

    success_panel(f"✅ Sample manuscript written: [bold green]{output}[/]")


if __name__ == "__main__":
    app()
