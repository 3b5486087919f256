"""
Functions for formatting and displaying data in the console using Rich.
"""

from typing import Iterable

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mc_lang.models.manifest import ReleaseDescriptor
from mc_lang.models.stats import RunStats
from mc_lang.utils.formatting import format_duration, format_size


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "ManifestError": [
            "• Check your internet connection.",
            "• piston-meta.mojang.com may be temporarily unavailable.",
            "• Use --manifest-url if you are behind a mirror.",
        ],
        "SchemaMismatchError": [
            "• Mojang may have changed the format of their metadata.",
            "• Run the command with -vv for detailed logs.",
        ],
        "ChecksumMismatchError": [
            "• The download may have been corrupted in transit.",
            "• Run the command again.",
        ],
        "ConfigurationError": [
            "• Check the values passed on the command line.",
            "• Run `mc-lang update --help` for all options.",
        ],
        "ClientResponseError": [
            "• A network connection issue occurred.",
            "• Mojang's servers might be temporarily unavailable.",
            "• Please try again in a few minutes.",
        ],
        "TimeoutError": [
            "• A request timed out, which may indicate network throttling.",
            "• Raise the limit with --timeout.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_versions_table(descriptors: Iterable[ReleaseDescriptor], start_version: str):
    """Lists the releases an update run would process."""
    console = Console()
    table = Table(title=f"Releases from {start_version}", box=box.ROUNDED)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Version", style="cyan")
    table.add_column("Type", style="green")

    count = 0
    for count, descriptor in enumerate(descriptors, 1):
        table.add_row(str(count), descriptor.id, descriptor.type.value)

    if count:
        console.print(table)
    else:
        console.print(
            f"[yellow]No releases found at or after '{start_version}'.[/yellow]"
        )


def print_summary_panel(stats: RunStats, duration_s: float):
    """Displays the final summary of an update run."""
    console = Console()

    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right", width=20)
    stats_table.add_column(style="white", justify="left")

    stats_table.add_row("Releases:", f"[bold]{stats.releases_selected}[/bold]")

    if stats.dry_run:
        title = "🔍 [bold]Dry Run Summary[/bold]"
        border_color = "yellow"
    else:
        stats_table.add_row(
            "✓ Processed:", f"[bold green]{stats.releases_processed}[/bold green]"
        )
        if stats.releases_failed > 0:
            stats_table.add_row(
                "✗ Failed:",
                f"[bold red]{stats.releases_failed}[/bold red] "
                f"[dim]({', '.join(stats.failed_versions)})[/dim]",
            )

        stats_table.add_row("", "")  # Spacer
        stats_table.add_row(
            "✓ Files Downloaded:", f"[green]{stats.resources_downloaded}[/green]"
        )
        if stats.resources_skipped_exists > 0:
            stats_table.add_row(
                "○ Skipped:",
                f"[yellow]{stats.resources_skipped_exists} (exists)[/yellow]",
            )
        if stats.resource_mismatches > 0:
            stats_table.add_row(
                "⚠ SHA1 Mismatches:", f"[yellow]{stats.resource_mismatches}[/yellow]"
            )
        stats_table.add_row(
            "Total Size:", f"[cyan]{format_size(stats.bytes_downloaded)}[/cyan]"
        )

        if stats.releases_failed:
            title = "⚠ [bold]Update Finished With Errors[/bold]"
            border_color = "red"
        else:
            title = "🌐 [bold]Update Complete![/bold]"
            border_color = "green"

    stats_table.add_row("Time Elapsed:", f"[blue]{format_duration(duration_s)}[/blue]")

    console.print()
    console.print(
        Panel(
            stats_table,
            title=title,
            border_style=border_color,
            box=box.DOUBLE,
            expand=False,
            padding=(1, 2),
        )
    )
    console.print()
