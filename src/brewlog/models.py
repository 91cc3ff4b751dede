"""Data models and constants for brewlog."""

import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal
from uuid import UUID, uuid4

CONFIG_PATH = os.path.expanduser("~/.config/brewlog/config.toml")

DATE_FMT = "%Y/%m/%d %H:%M"
SELECTED_SYMBOL = "->"
FIELD_COUNT = 9

FieldKind = Literal["date", "coffee", "grinder", "numeric", "long_text", "undefined"]
PhaseName = Literal["listing", "editing_entry", "editing_coffee", "editing_grinder"]
Outcome = Literal["handled", "ignored", "rejected", "unsupported"]


class BrewlogError(Exception):
    """Base class for brewlog errors."""


class UnresolvedReferenceError(BrewlogError):
    """An entry points at a coffee or grinder that does not exist."""


class UnsupportedFieldError(BrewlogError):
    """A field of this kind cannot be written by an edit session."""


class ConfigError(BrewlogError):
    """The configuration file is malformed."""


@dataclass
class Coffee:
    """A coffee bean type entries can refer to."""

    name: str
    uuid: UUID = field(default_factory=uuid4)


@dataclass
class Grinder:
    """A grinder entries can refer to."""

    name: str
    uuid: UUID = field(default_factory=uuid4)


@dataclass
class Entry:
    """One logged shot."""

    taken: datetime
    coffee_id: UUID
    grinder_id: UUID
    added: datetime = field(default_factory=datetime.now)
    grind_setting: float = 0.0
    dose: float = 0.0
    output: float = 0.0
    duration: float = 0.0
    favorite: bool = False
    notes: str = ""
