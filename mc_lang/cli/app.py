"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from mc_lang import __version__
from mc_lang.api.client import LauncherMetaClient
from mc_lang.core.update_manager import UpdateManager
from mc_lang.core.version_selector import select_versions
from mc_lang.exceptions import McLangError
from mc_lang.models.config import (
    DEFAULT_START_VERSION,
    LanguageSelection,
    LayoutStrategy,
    ReleaseErrorPolicy,
    build_config,
)

from .formatters import (
    format_error_with_suggestions,
    print_summary_panel,
    print_versions_table,
)

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("mc_lang")

app = typer.Typer(
    name="mc-lang",
    help=(
        "Fetch official Minecraft language files from Mojang, verified against"
        " their published SHA-1. Use 'mc-lang <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
):
    """Minecraft language file updater"""
    if version:
        console.print(f"[bold]mc-lang[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("mc_lang").setLevel(log_level)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def _resolve_start_version(
    start_version: str | None, prompt: bool, only: str | None
) -> str | None:
    """Picks the start version from the option or, with --prompt, from stdin."""
    if only:
        if start_version or prompt:
            console.print(
                "[yellow]⚠️  --only ignores --start-version and --prompt. "
                f"Processing '{escape(only)}' only.[/yellow]"
            )
        return None
    if prompt:
        if start_version:
            console.print(
                "[yellow]⚠️  Both --start-version and --prompt provided. "
                "Using --prompt only.[/yellow]"
            )
        return typer.prompt("Start version", default=DEFAULT_START_VERSION).strip()
    return start_version


@app.command(name="update")
def update_command(
    # --- Version Selection ---
    start_version: str | None = typer.Option(
        None,
        "-s",
        "--start-version",
        help=f"First version to process; later releases follow (default {DEFAULT_START_VERSION}).",
    ),
    prompt: bool = typer.Option(
        False, "--prompt", help="Ask for the start version on standard input."
    ),
    only: str | None = typer.Option(
        None,
        "--only",
        help="Process exactly this version, whatever its type, and record it in version.txt.",
    ),
    # --- Output Options ---
    output: Path | None = typer.Option(  # noqa: B008
        None,
        "-o",
        "--output",
        file_okay=False,
        help="Root directory for output (default: current directory).",
    ),
    layout: LayoutStrategy | None = typer.Option(
        None,
        "--layout",
        case_sensitive=False,
        help="Directory naming: flat (<root>/<ver>), nested (<root>/full/<ver>), module.",
    ),
    # --- Language Options ---
    languages: LanguageSelection | None = typer.Option(
        None,
        "--languages",
        case_sensitive=False,
        help="full: every locale in the asset index. allowlist: only --lang codes.",
    ),
    lang: list[str] | None = typer.Option(  # noqa: B008
        None,
        "-l",
        "--lang",
        help="Language code to fetch in allow-list mode. Repeatable; implies --languages allowlist.",
    ),
    # --- Network & Behavior ---
    manifest_url: str | None = typer.Option(
        None, "--manifest-url", help="Override the version manifest URL."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Socket read timeout in seconds (default 60)."
    ),
    fail_fast: bool = typer.Option(
        False,
        "--fail-fast",
        help="Stop the whole run when a release fails instead of skipping it.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show which releases would be processed without downloading anything.",
    ),
):
    """Download and verify language files for each selected release."""
    start_version = _resolve_start_version(start_version, prompt, only)

    if lang and languages is None:
        languages = LanguageSelection.ALLOWLIST

    cli_options = {
        "start_version": start_version,
        "only_version": only,
        "output_root": output,
        "layout": layout,
        "language_selection": languages,
        "languages": lang or None,
        "manifest_url": manifest_url,
        "read_timeout": timeout,
        "error_policy": ReleaseErrorPolicy.ABORT if fail_fast else None,
        "dry_run": dry_run,
    }

    async def _update_async():
        manager = None
        duration = 0.0
        try:
            config = build_config(cli_options)
            async with LauncherMetaClient(config) as client:
                manager = UpdateManager(config, client)
                mode = "dry run" if config.dry_run else "update"
                console.print(f"[bold cyan]🌐 Starting {mode} session...[/bold cyan]")
                start_time = time.monotonic()
                await manager.execute()
                duration = time.monotonic() - start_time
        except McLangError as e:
            console.print(format_error_with_suggestions(e))
            raise typer.Exit(code=1) from e
        except Exception as e:
            console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
            log.debug("Full traceback:", exc_info=True)
            raise typer.Exit(code=1) from e

        if manager:
            print_summary_panel(manager.stats, duration)

    asyncio.run(_update_async())


@app.command()
def versions(
    start_version: str = typer.Option(
        DEFAULT_START_VERSION,
        "-s",
        "--start-version",
        help="First version to list.",
    ),
    manifest_url: str | None = typer.Option(
        None, "--manifest-url", help="Override the version manifest URL."
    ),
):
    """List the releases an update run would process."""

    async def _list_async():
        try:
            config = build_config(
                {"start_version": start_version, "manifest_url": manifest_url}
            )
            async with LauncherMetaClient(config) as client:
                manifest = await client.fetch_manifest()
        except McLangError as e:
            console.print(format_error_with_suggestions(e))
            raise typer.Exit(code=1) from e
        print_versions_table(
            select_versions(manifest.versions, config.start_version),
            config.start_version,
        )

    asyncio.run(_list_async())
