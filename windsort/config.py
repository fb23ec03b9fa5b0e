"""
WindSort Configuration Management

Handles loading configuration from files, write-mode selection,
file discovery rules, and default settings.
"""

import json
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from windsort.exceptions import ConfigError
from windsort.extractor import DEFAULT_EXTRACTOR, ClassExtractor
from windsort.order import DEFAULT_ORDER_TABLE, OrderTable, table_from_names


# ═══════════════════════════════════════════════════════════════════════════
# WRITE MODES
# ═══════════════════════════════════════════════════════════════════════════

class WriteMode(str, Enum):
    """What happens to a file's sorted content"""

    DRY_RUN = "dry-run"        # report files that would change
    TO_FILE = "write"          # save changes in place
    TO_CONSOLE = "console"     # print sorted content


# ═══════════════════════════════════════════════════════════════════════════
# FILE DISCOVERY
# ═══════════════════════════════════════════════════════════════════════════

DEFAULT_EXTENSIONS = {
    '.html', '.htm', '.xhtml', '.jsx', '.tsx', '.js', '.ts', '.mjs', '.cjs',
    '.vue', '.svelte', '.astro', '.php', '.erb', '.haml', '.hbs',
    '.handlebars', '.mustache', '.twig', '.njk', '.liquid', '.jinja',
    '.jinja2', '.j2', '.md', '.mdx', '.cshtml', '.razor', '.heex', '.eex',
    '.leex', '.templ', '.rs', '.elm', '.clj', '.cljs',
}

DEFAULT_IGNORED_DIRS = {
    'node_modules', '.git', 'dist', 'build', 'target', 'vendor',
    '__pycache__', '.next', '.nuxt', '.svelte-kit', '.venv', 'venv',
}


# ═══════════════════════════════════════════════════════════════════════════
# SETTINGS
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class Settings:
    """Runtime settings for WindSort"""

    # Sorting
    allow_duplicates: bool = False
    custom_regex: Optional[str] = None

    # Output
    write_mode: WriteMode = WriteMode.TO_CONSOLE

    # File handling
    skip_hidden: bool = True
    workers: Optional[int] = None  # None picks a default from the CPU count

    # Logging
    verbose: bool = False
    log_file: Optional[str] = None


# ═══════════════════════════════════════════════════════════════════════════
# CONFIG CLASS
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class Config:
    """WindSort configuration container"""

    settings: Settings = field(default_factory=Settings)

    # File discovery
    extensions: set = field(default_factory=lambda: DEFAULT_EXTENSIONS.copy())
    ignored_dirs: set = field(default_factory=lambda: DEFAULT_IGNORED_DIRS.copy())

    # Class order
    sort_order: List[str] = field(default_factory=list)
    replace_default_order: bool = False

    def build_order_table(self) -> OrderTable:
        """
        Order table for this configuration.

        Without a ``sort_order`` this is the shared default table. With one,
        the names either replace the default order or are ranked after it.
        """
        if not self.sort_order:
            return DEFAULT_ORDER_TABLE
        if self.replace_default_order:
            return table_from_names(self.sort_order)
        return DEFAULT_ORDER_TABLE.extend(self.sort_order)

    def build_extractor(self) -> ClassExtractor:
        """Span extractor for this configuration"""
        if self.settings.custom_regex:
            return ClassExtractor(self.settings.custom_regex)
        return DEFAULT_EXTRACTOR

    def is_candidate(self, filename: str) -> bool:
        """Check whether a file name has a sortable extension"""
        return os.path.splitext(filename)[1].lower() in self.extensions


# ═══════════════════════════════════════════════════════════════════════════
# CONFIG LOADING
# ═══════════════════════════════════════════════════════════════════════════

CONFIG_NAMES = ["windsort.json", ".windsortrc", ".windsort.json"]


def get_user_config_dir() -> Path:
    """Get the user config directory (~/.windsort/)"""
    return Path.home() / ".windsort"


def get_user_config_path() -> Path:
    """Get the user config file path (~/.windsort/config.json)"""
    return get_user_config_dir() / "config.json"


def find_config_file(start_path: Optional[str] = None) -> Optional[Path]:
    """
    Find a windsort config file.
    Search order:
      1. start dir → parent dirs
      2. ~/.windsort/config.json
      3. home dir
    """
    search_dir = Path(start_path).resolve() if start_path else Path.cwd()
    if search_dir.is_file():
        search_dir = search_dir.parent

    # Search upward through parent directories
    for _ in range(10):  # Limit depth
        for name in CONFIG_NAMES:
            config_path = search_dir / name
            if config_path.is_file():
                return config_path

        parent = search_dir.parent
        if parent == search_dir:  # Reached root
            break
        search_dir = parent

    user_config = get_user_config_path()
    if user_config.is_file():
        return user_config

    home = Path.home()
    for name in CONFIG_NAMES:
        config_path = home / name
        if config_path.is_file():
            return config_path

    return None


def _string_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return value


def _normalize_extension(ext: str) -> str:
    ext = ext.lower()
    return ext if ext.startswith('.') else f".{ext}"


_BOOL_SETTINGS = {"allow_duplicates", "skip_hidden", "verbose"}
_STR_SETTINGS = {"custom_regex", "log_file"}


def _check_setting(key: str, value: Any) -> Any:
    """Validate one ``settings`` value from a config file"""
    if key == "write_mode":
        try:
            return WriteMode(value)
        except ValueError as e:
            raise ConfigError(f"Unknown write_mode: {value!r}") from e

    if key in _BOOL_SETTINGS and not isinstance(value, bool):
        raise ConfigError(f"'settings.{key}' must be true or false")
    if key in _STR_SETTINGS and value is not None and not isinstance(value, str):
        raise ConfigError(f"'settings.{key}' must be a string or null")
    if key == "workers" and value is not None:
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigError("'settings.workers' must be a positive integer or null")
    return value


def load_config(config_path: Optional[str] = None, start_path: Optional[str] = None) -> Config:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Explicit path to config file, or None to auto-detect
        start_path: Directory to start auto-detection from (default: cwd)

    Returns:
        Config object with loaded settings

    Raises:
        FileNotFoundError: If ``config_path`` does not exist
        ConfigError: If the file is not valid JSON or has bad values
    """
    config = Config()

    if config_path:
        path = Path(config_path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        path = find_config_file(start_path)

    if not path:
        return config

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    # Apply settings
    if "settings" in data:
        settings_data = data["settings"]
        if not isinstance(settings_data, dict):
            raise ConfigError("'settings' must be an object")
        for key, value in settings_data.items():
            if not hasattr(config.settings, key):
                continue
            setattr(config.settings, key, _check_setting(key, value))

    # File discovery
    if "extensions" in data:
        config.extensions = {_normalize_extension(e) for e in _string_list(data, "extensions")}
    if "ignored_dirs" in data:
        config.ignored_dirs = set(_string_list(data, "ignored_dirs"))

    # Class order
    if "sort_order" in data:
        config.sort_order = _string_list(data, "sort_order")
    replace = data.get("replace_default_order", False)
    if not isinstance(replace, bool):
        raise ConfigError("'replace_default_order' must be true or false")
    config.replace_default_order = replace

    return config


def save_config_template(path: str) -> None:
    """Save a template configuration file"""
    template = {
        "settings": {
            "allow_duplicates": False,
            "write_mode": WriteMode.TO_CONSOLE.value,
            "skip_hidden": True,
            "workers": 4,
            "custom_regex": None,
            "verbose": False
        },
        "extensions": sorted(DEFAULT_EXTENSIONS),
        "ignored_dirs": sorted(DEFAULT_IGNORED_DIRS),
        "sort_order": ["btn", "btn-primary", "card"],
        "replace_default_order": False
    }

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(template, f, indent=2)
