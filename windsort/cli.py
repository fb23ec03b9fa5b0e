"""CLI for windsort: organize the utility classes in your markup."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from windsort import __version__
from windsort.config import WriteMode, load_config, save_config_template
from windsort.engine import FileResult, WindSort
from windsort.exceptions import ConfigError
from windsort.utils import mode_banner, setup_logging

USAGE = """
Organize all your tailwind classes.

Run windsort with a path to print the sorted files:

    windsort .

Get a list of files that will be changed:

    windsort . --dry-run

Reorganize all classes in place and change the files:

    windsort --write .

Write a template config file to start from:

    windsort --init-config windsort.json
"""

app = typer.Typer(name="windsort", help=USAGE, no_args_is_help=True, add_completion=False)
console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"windsort {__version__}")
        raise typer.Exit()


def _select_mode(write: bool, dry_run: bool) -> Optional[WriteMode]:
    """Mode picked by the flags, or None to keep the configured one"""
    if write and dry_run:
        raise typer.BadParameter("--write and --dry-run cannot be used together")
    if write:
        return WriteMode.TO_FILE
    if dry_run:
        return WriteMode.DRY_RUN
    return None


def _print_result(result: FileResult, mode: WriteMode) -> None:
    if result.failed:
        err_console.print(f"\nError: {result.error_message}", style="red", markup=False, highlight=False)
        return
    if mode == WriteMode.TO_CONSOLE:
        if result.has_classes:
            typer.echo(f"\n\n{result.sorted_content}\n\n")
    elif result.changed:
        console.print(f"  * {result.filename}", markup=False, highlight=False, soft_wrap=True)


@app.command()
def main(
    path: Optional[Path] = typer.Argument(None, help="A file or directory to run on", show_default=False),
    write: bool = typer.Option(False, "--write", help="Changes the files in place with the reorganized classes"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Lists the files that would change without touching them"),
    allow_duplicates: bool = typer.Option(False, "--allow-duplicates", help="Do not delete duplicated classes"),
    custom_regex: Optional[str] = typer.Option(None, "--custom-regex", help="Regex whose first group is the class list"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Path to a windsort config file"),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Number of files processed in parallel"),
    report: Optional[Path] = typer.Option(None, "--report", help="Save a JSON run report to this path"),
    progress: bool = typer.Option(False, "--progress", help="Show a progress bar"),
    init_config: Optional[Path] = typer.Option(None, "--init-config", help="Write a template config file and exit"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Organize all your tailwind classes."""
    if init_config:
        save_config_template(str(init_config))
        console.print(f"[green]Config template saved to {init_config}[/green]")
        return

    if path is None:
        raise typer.BadParameter("Missing PATH", param_hint="PATH")

    mode = _select_mode(write, dry_run)

    try:
        config = load_config(
            str(config_file) if config_file else None,
            start_path=str(path),
        )
    except (ConfigError, FileNotFoundError) as e:
        err_console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        raise typer.Exit(code=2)

    settings = config.settings
    if mode is not None:
        settings.write_mode = mode
    mode = settings.write_mode
    settings.allow_duplicates = allow_duplicates or settings.allow_duplicates
    settings.verbose = verbose or settings.verbose
    if custom_regex:
        settings.custom_regex = custom_regex
    if workers:
        settings.workers = workers

    setup_logging(level=logging.WARNING, log_file=settings.log_file, verbose=settings.verbose)

    try:
        engine = WindSort(config=config)
    except ConfigError as e:
        err_console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        raise typer.Exit(code=2)

    engine.set_result_callback(lambda result: _print_result(result, mode))

    console.print(f"\n{mode_banner(mode)}", markup=False, highlight=False)

    try:
        run_report = engine.run(str(path), show_progress=progress)
    except FileNotFoundError as e:
        err_console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        raise typer.Exit(code=2)

    if report:
        run_report.save(str(report))
        console.print(f"[green]Report saved to {report}[/green]")

    if not run_report.ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
