"""User configuration (~/.config/brewlog/config.toml)."""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .keys import DEFAULT_KEYMAP, Keymap, is_key_name
from .models import CONFIG_PATH, DATE_FMT, ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
SECTIONS = ("keys", "display", "logging")


@dataclass
class Config:
    keys: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    date_format: str = DATE_FMT
    log_file: Optional[str] = None
    log_level: str = "WARNING"

    def keymap(self) -> Keymap:
        return Keymap(self.keys)


def load_config(path: Optional[str] = None) -> Config:
    """Load config from path (default CONFIG_PATH).

    A missing file gives the defaults. Raises ConfigError on unreadable TOML
    or unknown settings.
    """
    path = path or CONFIG_PATH
    if not os.path.exists(path):
        return Config()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as e:
        raise ConfigError(f"{path}: {e}") from e
    return parse_config(data, path)


def parse_config(data: Dict[str, Any], source: str = "config") -> Config:
    """Validate a decoded TOML document and build a Config."""
    unknown = set(data) - set(SECTIONS)
    if unknown:
        raise ConfigError(f"{source}: unknown section(s): {', '.join(sorted(unknown))}")
    for name in SECTIONS:
        if not isinstance(data.get(name, {}), dict):
            raise ConfigError(f"{source}: [{name}] must be a table")

    cfg = Config()
    for action, keys in data.get("keys", {}).items():
        if action not in DEFAULT_KEYMAP:
            raise ConfigError(f"{source}: unknown action '{action}'")
        if not isinstance(keys, list) or not all(isinstance(k, str) for k in keys):
            raise ConfigError(f"{source}: keys.{action} must be a list of key names")
        bad = [k for k in keys if not is_key_name(k)]
        if bad:
            raise ConfigError(f"{source}: keys.{action}: unknown key(s) {bad}")
        cfg.keys[action] = tuple(keys)

    # The command line starts with the trigger character itself.
    for k in cfg.keys.get("command", ()):
        if len(k) != 1:
            raise ConfigError(f"{source}: keys.command must be single characters")

    display = data.get("display", {})
    if "date_format" in display:
        cfg.date_format = str(display["date_format"])

    log = data.get("logging", {})
    if "file" in log:
        cfg.log_file = os.path.expanduser(str(log["file"]))
    if "level" in log:
        level = str(log["level"]).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"{source}: logging.level must be one of {', '.join(LOG_LEVELS)}")
        cfg.log_level = level
    return cfg


def setup_logging(cfg: Config, log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Send logs to a file; the terminal belongs to curses while the TUI runs.

    Raises ConfigError if the log file cannot be opened.
    """
    path = log_file or cfg.log_file
    if path is None:
        return
    try:
        logging.basicConfig(
            filename=path,
            level=logging.DEBUG if verbose else getattr(logging, cfg.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    except OSError as e:
        raise ConfigError(f"cannot open log file {path}: {e}") from e
