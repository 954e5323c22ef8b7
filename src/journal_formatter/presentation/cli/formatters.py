"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels) in a module that knows nothing
about domain logic beyond the models it displays.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from journal_formatter.automation.stages.journal_banner import format_number

if TYPE_CHECKING:
    from journal_formatter.domain.models.journal_format import FormattedResult, JournalFormat

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Journal Formatter") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {escape(message)}[/]")


# ---------------------------------------------------------------------------
# Journal format table
# ---------------------------------------------------------------------------


def formats_table(formats: Iterable[JournalFormat], builtin_ids: set[str]) -> None:
    """Print every journal format with its key settings.

    Custom formats are highlighted in yellow.
    """
    table = Table(title="📚 Journal Formats", show_header=True, border_style="blue")
    table.add_column("ID")
    table.add_column("Name", style="bold")
    table.add_column("Words", justify="right")
    table.add_column("References")

    for fmt in formats:
        style = "cyan" if fmt.id in builtin_ids else "yellow"
        table.add_row(
            f"[{style}]{fmt.id}[/]",
            escape(fmt.name),
            f"{fmt.word_limit:,}",
            fmt.reference_style.value,
        )

    console.print(table)


def format_details(fmt: JournalFormat) -> None:
    """Print the full settings of one journal format."""
    margins = fmt.margins
    table = Table(title=f"📐 {escape(fmt.name)}", show_header=False, border_style="blue")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("ID", fmt.id)
    table.add_row("Description", escape(fmt.description) or "—")
    table.add_row("Word limit", f"{fmt.word_limit:,}")
    table.add_row("Reference style", fmt.reference_style.value)
    table.add_row("Font", f"{fmt.font_family} {fmt.font_size}pt")
    table.add_row("Line spacing", format_number(fmt.line_spacing))
    table.add_row(
        "Margins (in)",
        " / ".join(
            format_number(m) for m in (margins.top, margins.bottom, margins.left, margins.right)
        ),
    )
    console.print(table)


# ---------------------------------------------------------------------------
# Formatting report
# ---------------------------------------------------------------------------


def result_panel(result: FormattedResult, output_path: str) -> None:
    """Print the outcome of a formatting run and its change log."""
    lines = [
        f"✅ Formatted for [bold]{escape(result.format.name)}[/]",
        f"📄 Saved to: [bold green]{escape(output_path)}[/]",
        f"🔢 Words: {result.original_word_count:,} → {result.word_count:,}",
    ]
    if result.truncated:
        lines.append(f"[yellow]✂️  Truncated to {result.format.word_limit:,} words[/]")
    if result.changes:
        lines.append("")
        lines.extend(f"  • {escape(change)}" for change in result.changes)
    success_panel("\n".join(lines))
