"""
WindSort Utility Functions

Common utilities for logging, file names, and display.
"""

import logging
import os
from typing import List, Optional

from windsort.config import WriteMode


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING
# ═══════════════════════════════════════════════════════════════════════════

def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    verbose: bool = False
) -> None:
    """
    Configure logging for WindSort.

    Args:
        level: Logging level
        log_file: Optional file to write logs to
        verbose: If True, use DEBUG level
    """
    if verbose:
        level = logging.DEBUG

    handlers: List[logging.Handler] = [
        logging.StreamHandler()
    ]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


# ═══════════════════════════════════════════════════════════════════════════
# FILE UTILITIES
# ═══════════════════════════════════════════════════════════════════════════

def is_hidden(path: str) -> bool:
    """Check if a file or folder is hidden"""
    name = os.path.basename(path)
    return name.startswith('.') and name not in ('.', '..')


def default_workers() -> int:
    """Worker count used when none is configured"""
    return min(32, (os.cpu_count() or 1) * 2)


def get_display_name(filepath: str, start_dir: str) -> str:
    """Path of ``filepath`` relative to ``start_dir`` when it lies inside it"""
    try:
        relative = os.path.relpath(filepath, start_dir)
    except ValueError:  # different drive on Windows
        return filepath
    if relative.startswith(os.pardir):
        return filepath
    return relative


# ═══════════════════════════════════════════════════════════════════════════
# DISPLAY UTILITIES
# ═══════════════════════════════════════════════════════════════════════════

MODE_BANNERS = {
    WriteMode.DRY_RUN: (
        "dry run mode activated: here is a list of files that "
        "would be changed when you run with the --write flag"
    ),
    WriteMode.TO_FILE: "write mode is active the following files are being saved:",
    WriteMode.TO_CONSOLE: (
        "printing file contents to console, run with --write to save changes to files:"
    ),
}


def mode_banner(mode: WriteMode) -> str:
    """Heading printed before a run in the given mode"""
    return MODE_BANNERS[mode]
