"""UI state containers: phase, list selection, command overlay, edit session."""

from dataclasses import dataclass, field
from typing import Optional

from .lineedit import LineInput
from .models import PhaseName


@dataclass(frozen=True)
class Phase:
    """Top-level view. entry_idx is set only for editing_entry.

    editing_coffee and editing_grinder are reserved: nothing transitions into
    them yet and the dispatcher reports keys there as unsupported.
    """

    name: PhaseName = "listing"
    entry_idx: Optional[int] = None

    @classmethod
    def listing(cls) -> "Phase":
        return cls("listing")

    @classmethod
    def editing_entry(cls, idx: int) -> "Phase":
        return cls("editing_entry", idx)

    def __str__(self) -> str:
        if self.entry_idx is None:
            return self.name
        return f"{self.name}({self.entry_idx})"


def clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


@dataclass
class ListState:
    """Cursor over a list; None only while the list is empty."""

    selected: Optional[int] = 0

    def clamp(self, length: int) -> None:
        if length <= 0:
            self.selected = None
        elif self.selected is None:
            self.selected = 0
        else:
            self.selected = clamp(self.selected, 0, length - 1)

    def select_next(self, length: int) -> None:
        self.clamp(length)
        if self.selected is not None:
            self.selected = min(length - 1, self.selected + 1)

    def select_previous(self, length: int) -> None:
        self.clamp(length)
        if self.selected is not None:
            self.selected = max(0, self.selected - 1)

    def select_first(self, length: int) -> None:
        if length > 0:
            self.selected = 0


@dataclass
class CommandState:
    """The ':' command line. It is active exactly while its buffer has text."""

    buffer: str = ""

    @property
    def active(self) -> bool:
        return bool(self.buffer)

    def push(self, ch: str) -> None:
        self.buffer += ch

    def pop(self) -> None:
        self.buffer = self.buffer[:-1]

    def clear(self) -> None:
        self.buffer = ""


@dataclass
class EditState:
    """Field selection in the entry view plus the open edit session, if any."""

    list_state: ListState = field(default_factory=ListState)
    field_idx: Optional[int] = None
    input: Optional[LineInput] = None

    @property
    def active(self) -> bool:
        return self.input is not None

    def open(self, field_idx: int, value: str) -> None:
        self.field_idx = field_idx
        self.input = LineInput(value)

    def close(self) -> None:
        self.field_idx = None
        self.input = None
