"""
WindSort Main Engine

The WindSort class that discovers files, sorts their class lists on a
worker pool, and applies the selected write mode.
"""

import json
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Iterator, List, Optional

from tqdm import tqdm

from windsort.config import Config, WriteMode, load_config
from windsort.extractor import Span
from windsort.sorter import sort_spans
from windsort.utils import default_workers, get_display_name, is_hidden

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# DATA CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class FileResult:
    """Result of sorting a single file"""

    filepath: str
    filename: str
    has_classes: bool = False
    changed: bool = False
    spans: int = 0
    sorted_content: str = ""
    error_message: str = ""

    @property
    def failed(self) -> bool:
        return bool(self.error_message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, leaving out the file content"""
        data = asdict(self)
        data.pop("sorted_content")
        return data

    def __str__(self) -> str:
        state = "error" if self.failed else "changed" if self.changed else "unchanged"
        return f"{self.filename} ({state})"


@dataclass
class RunReport:
    """Summary of one run over a path"""

    timestamp: str
    source_path: str
    write_mode: WriteMode
    total_files: int
    files_with_classes: int
    files_changed: int
    errors: int
    results: List[FileResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.errors == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export"""
        return {
            "timestamp": self.timestamp,
            "source_path": self.source_path,
            "write_mode": self.write_mode.value,
            "total_files": self.total_files,
            "files_with_classes": self.files_with_classes,
            "files_changed": self.files_changed,
            "errors": self.errors,
            "results": [r.to_dict() for r in self.results]
        }

    def save(self, filepath: str) -> None:
        """Save report to JSON file"""
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)


# ═══════════════════════════════════════════════════════════════════════════
# MAIN ENGINE
# ═══════════════════════════════════════════════════════════════════════════

class WindSort:
    """
    Main WindSort engine.

    Example usage:
        ws = WindSort()
        ws.config.settings.write_mode = WriteMode.DRY_RUN
        report = ws.run("/path/to/project")
        for result in report.results:
            print(result)
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        config_path: Optional[str] = None
    ):
        """
        Initialize WindSort.

        Args:
            config: Pre-loaded Config object
            config_path: Path to config file to load
        """
        if config:
            self.config = config
        else:
            self.config = load_config(config_path)

        self.table = self.config.build_order_table()
        self.extractor = self.config.build_extractor()

        self.results: List[FileResult] = []
        self._result_callback: Optional[Callable[[FileResult], None]] = None

    def set_result_callback(self, callback: Callable[[FileResult], None]) -> None:
        """
        Set a callback run for every finished file.

        Callbacks arrive in discovery order, on the calling thread.

        Args:
            callback: Function(result) called once per file
        """
        self._result_callback = callback

    # ───────────────────────────────────────────────────────────────────────
    # Discovery
    # ───────────────────────────────────────────────────────────────────────

    def collect_files(self, path: str) -> List[str]:
        """
        Collect the files to sort under ``path``.

        A file path is returned as is. Directories are walked recursively,
        skipping ignored and (optionally) hidden entries and keeping only
        known extensions.

        Raises:
            FileNotFoundError: If ``path`` does not exist
        """
        if os.path.isfile(path):
            return [path]
        if not os.path.isdir(path):
            raise FileNotFoundError(f"No such file or directory: {path}")

        skip_hidden = self.config.settings.skip_hidden
        files = []

        for root, dirs, filenames in os.walk(path):
            dirs[:] = sorted(
                d for d in dirs
                if d not in self.config.ignored_dirs and not (skip_hidden and is_hidden(d))
            )
            for filename in sorted(filenames):
                if skip_hidden and is_hidden(filename):
                    continue
                if self.config.is_candidate(filename):
                    files.append(os.path.join(root, filename))

        logger.debug(f"Collected {len(files)} files under {path}")
        return files

    # ───────────────────────────────────────────────────────────────────────
    # Sorting
    # ───────────────────────────────────────────────────────────────────────

    def sort_content(self, content: str, spans: Optional[List[Span]] = None) -> str:
        """
        Sort every class list in ``content`` using this engine's config.

        Args:
            content: Whole file content
            spans: Spans already found in ``content`` (found here when None)
        """
        if spans is None:
            spans = list(self.extractor.find_spans(content))
        return sort_spans(
            content,
            spans,
            allow_duplicates=self.config.settings.allow_duplicates,
            table=self.table,
        )

    def process_file(self, filepath: str) -> FileResult:
        """
        Sort a single file and apply the write mode to it.

        I/O errors are recorded on the result instead of being raised so
        that one bad file does not stop a batch.

        Args:
            filepath: Path to the file

        Returns:
            FileResult for the file
        """
        result = FileResult(filepath=filepath, filename=os.path.basename(filepath))

        try:
            with open(filepath, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            result.error_message = f"Unable to read file: {e}"
            logger.error(f"Read error: {filepath}: {e}")
            return result

        spans = list(self.extractor.find_spans(content))
        if not spans:
            return result

        result.has_classes = True
        result.spans = len(spans)
        result.sorted_content = self.sort_content(content, spans)
        result.changed = result.sorted_content != content

        if self.config.settings.write_mode == WriteMode.TO_FILE and result.changed:
            try:
                with open(filepath, 'w', encoding='utf-8', newline='') as f:
                    f.write(result.sorted_content)
            except OSError as e:
                result.error_message = f"Unable to save file: {e}"
                logger.error(f"Write error: {filepath}: {e}")

        return result

    def _iter_results(self, files: List[str]) -> Iterator[FileResult]:
        workers = self.config.settings.workers or default_workers()
        workers = max(1, min(workers, len(files) or 1))

        if workers == 1:
            yield from map(self.process_file, files)
            return

        logger.debug(f"Sorting {len(files)} files with {workers} workers")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order whatever order tasks finish in
            yield from executor.map(self.process_file, files)

    def run(self, path: str, show_progress: bool = False) -> RunReport:
        """
        Sort all files under ``path``.

        Args:
            path: File or directory to process
            show_progress: Whether to show a progress bar

        Returns:
            RunReport with per-file results in discovery order
        """
        files = self.collect_files(path)
        start_dir = path if os.path.isdir(path) else os.path.dirname(path) or "."

        iterator = self._iter_results(files)
        if show_progress:
            iterator = tqdm(iterator, total=len(files), desc="Sorting", unit="file")

        self.results = []
        for result in iterator:
            result.filename = get_display_name(result.filepath, start_dir)
            self.results.append(result)
            if self._result_callback:
                self._result_callback(result)

        report = RunReport(
            timestamp=datetime.now().isoformat(),
            source_path=path,
            write_mode=self.config.settings.write_mode,
            total_files=len(self.results),
            files_with_classes=sum(1 for r in self.results if r.has_classes),
            files_changed=sum(1 for r in self.results if r.changed),
            errors=sum(1 for r in self.results if r.failed),
            results=self.results
        )

        logger.info(
            f"Processed {report.total_files} files: {report.files_changed} changed, "
            f"{report.errors} errors"
        )
        return report

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics for the last run"""
        return {
            "total_files": len(self.results),
            "with_classes": sum(1 for r in self.results if r.has_classes),
            "changed": sum(1 for r in self.results if r.changed),
            "spans": sum(r.spans for r in self.results),
            "errors": sum(1 for r in self.results if r.failed),
        }
