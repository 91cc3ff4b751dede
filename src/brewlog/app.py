"""Application state and key dispatch.

App owns every piece of mutable UI state. handle_key() applies one key;
frame() is a read-only projection of the result for the renderer. Key
routing is a strict precedence chain:

  1. command line open     -> command line only
  2. command trigger key   -> open the command line
  3. phase                 -> entry list | entry view (field browse / field edit)
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .core import (
    FIELDS,
    field_spec,
    field_type,
    field_value_text,
    format_entry_details,
    format_entry_item,
    format_number,
    parse_float,
    valid_float,
)
from .keys import Key, Keymap
from .models import (
    DATE_FMT,
    FIELD_COUNT,
    Coffee,
    Entry,
    Grinder,
    Outcome,
    UnsupportedFieldError,
)
from .state import CommandState, EditState, ListState, Phase

logger = logging.getLogger(__name__)

TITLE_LIST = " Coffee Tracking - Entries "
TITLE = " Coffee Tracking "


@dataclass
class Frame:
    """Everything the renderer needs for one screen."""

    phase: Phase
    title: str
    rows: List[str]
    selected: Optional[int]
    controls: List[Tuple[str, str]]
    command: str = ""
    status: str = ""
    exit: bool = False
    editing_field: Optional[int] = None
    edit_label: str = ""
    edit_buffer: str = ""
    edit_unit: str = ""
    edit_cursor: int = 0


@dataclass
class App:
    """Entry list browser/editor state machine."""

    entries: List[Entry]
    coffees: Sequence[Coffee]
    grinders: Sequence[Grinder]
    keymap: Keymap = field(default_factory=Keymap)
    date_fmt: str = DATE_FMT
    phase: Phase = field(default_factory=Phase.listing)
    entry_list: ListState = field(default_factory=ListState)
    command: CommandState = field(default_factory=CommandState)
    edit: EditState = field(default_factory=EditState)
    status: str = ""
    exit: bool = False

    def __post_init__(self):
        self.entry_list.clamp(len(self.entries))
        self.commands: Dict[str, Callable[[], None]] = {
            "q": self.quit,
            "quit": self.quit,
        }

    # ---------- Dispatch ----------

    def handle_key(self, key: Key) -> Outcome:
        """Apply one key event and report what became of it."""
        if key.kind != "press":
            return "ignored"
        self.status = ""
        if self.command.active:
            return self.handle_command_key(key)
        if self.keymap.matches("command", key):
            self.command.push(key.name)
            return "handled"
        if self.phase.name == "listing":
            return self.handle_listing_key(key)
        if self.phase.name == "editing_entry":
            return self.handle_entry_key(self.phase.entry_idx, key)
        logger.debug("no key handling in phase %s", self.phase)
        return "unsupported"

    def handle_command_key(self, key: Key) -> Outcome:
        if self.keymap.matches("confirm", key):
            line = self.command.buffer
            self.command.clear()
            self.run_command(line)
        elif key.name == "backspace":
            self.command.pop()
        elif self.keymap.matches("cancel", key):
            self.command.clear()
        elif key.printable:
            self.command.push(key.name)
        else:
            return "ignored"
        return "handled"

    def run_command(self, line: str) -> bool:
        """Run a ':' command line. Unknown commands are dropped."""
        action = self.commands.get(line[1:])
        if action is None:
            logger.debug("unknown command %r", line)
            return False
        logger.debug("command %r", line)
        action()
        return True

    def handle_listing_key(self, key: Key) -> Outcome:
        n = len(self.entries)
        if self.keymap.matches("quit", key):
            self.quit()
        elif self.keymap.matches("next", key):
            self.entry_list.select_next(n)
        elif self.keymap.matches("previous", key):
            self.entry_list.select_previous(n)
        elif self.keymap.matches("first", key):
            self.entry_list.select_first(n)
        elif self.keymap.matches("confirm", key):
            self.entry_list.clamp(n)
            if self.entry_list.selected is None:
                return "ignored"
            self.open_entry(self.entry_list.selected)
        else:
            return "ignored"
        return "handled"

    def handle_entry_key(self, entry_idx: int, key: Key) -> Outcome:
        if self.edit.active:
            return self.handle_field_edit_key(entry_idx, key)
        fields = self.edit.list_state
        if self.keymap.matches("back", key):
            self.close_entry()
        elif self.keymap.matches("next", key):
            fields.select_next(FIELD_COUNT)
        elif self.keymap.matches("previous", key):
            fields.select_previous(FIELD_COUNT)
        elif self.keymap.matches("edit", key):
            return self.begin_edit(entry_idx)
        else:
            return "ignored"
        return "handled"

    def handle_field_edit_key(self, entry_idx: int, key: Key) -> Outcome:
        if field_type(self.edit.field_idx) != "numeric":
            logger.warning("closing edit session on non-numeric field %s", self.edit.field_idx)
            self.edit.close()
            return "unsupported"
        if self.keymap.matches("confirm", key):
            return self.save_input(entry_idx)
        if self.keymap.matches("cancel", key):
            self.cancel_edit()
            return "handled"

        inp = self.edit.input
        snap = inp.snapshot()
        if not inp.handle(key):
            return "ignored"
        if inp.value and not valid_float(inp.value):
            inp.restore(snap)
            return "rejected"
        return "handled"

    # ---------- Transitions ----------

    def quit(self) -> None:
        logger.debug("exit requested")
        self.exit = True

    def open_entry(self, idx: int) -> None:
        if not 0 <= idx < len(self.entries):
            raise IndexError(f"entry index {idx} out of range")
        self.phase = Phase.editing_entry(idx)
        logger.debug("phase -> %s", self.phase)

    def close_entry(self) -> None:
        self.phase = Phase.listing()
        logger.debug("phase -> %s", self.phase)

    def begin_edit(self, entry_idx: int) -> Outcome:
        """Open an edit session on the selected field if its kind allows it."""
        field_idx = self.edit.list_state.selected
        if field_idx is None:
            return "ignored"
        kind = field_type(field_idx)
        if kind == "numeric":
            self.edit.open(field_idx, field_value_text(self.entries[entry_idx], field_idx))
            logger.debug("editing field %d of entry %d", field_idx, entry_idx)
            return "handled"
        if kind == "undefined":
            return "ignored"
        label = FIELDS[field_idx].label
        self.status = f"Editing {label.lower()} is not supported yet."
        logger.debug("edit of %s field %d not supported", kind, field_idx)
        return "unsupported"

    def save_input(self, entry_idx: int) -> Outcome:
        """Commit the edit buffer to the entry; rejected if it does not parse."""
        spec = field_spec(self.edit.field_idx) if self.edit.active else None
        if spec is None or spec.kind != "numeric":
            raise UnsupportedFieldError(f"cannot save field {self.edit.field_idx}")
        value = parse_float(self.edit.input.value)
        if value is None:
            return "rejected"
        setattr(self.entries[entry_idx], spec.attr, value)
        self.edit.close()
        self.status = f"{spec.label} set to {format_number(value)}."
        logger.info("entry %d: %s = %s", entry_idx, spec.attr, value)
        return "handled"

    def cancel_edit(self) -> None:
        self.edit.close()
        self.status = "Edit cancelled."
        logger.debug("edit cancelled")

    # ---------- Rendering ----------

    def controls(self) -> List[Tuple[str, str]]:
        km = self.keymap
        if self.phase.name == "listing":
            return [
                ("Next", km.label("next")),
                ("Previous", km.label("previous")),
                ("Quit", km.label("quit")),
            ]
        if self.edit.active:
            return [("Save", km.label("confirm")), ("Cancel", km.label("cancel"))]
        return [
            ("Next", km.label("next")),
            ("Previous", km.label("previous")),
            ("Back", km.label("back")),
            ("Edit", km.label("edit")),
        ]

    def frame(self) -> Frame:
        """Snapshot of the current state for drawing. Does not mutate."""
        f = Frame(
            phase=self.phase,
            title=TITLE_LIST if self.phase.name == "listing" else TITLE,
            rows=[],
            selected=None,
            controls=self.controls(),
            command=self.command.buffer,
            status=self.status,
            exit=self.exit,
        )
        if self.phase.name == "listing":
            f.rows = [format_entry_item(e, self.coffees, self.date_fmt) for e in self.entries]
            f.selected = self.entry_list.selected
        elif self.phase.name == "editing_entry":
            entry = self.entries[self.phase.entry_idx]
            f.rows = format_entry_details(entry, self.coffees, self.grinders, self.date_fmt)
            f.selected = self.edit.list_state.selected
            if self.edit.active:
                spec = FIELDS[self.edit.field_idx]
                f.editing_field = self.edit.field_idx
                f.edit_label = spec.label
                f.edit_buffer = self.edit.input.value
                f.edit_unit = spec.unit
                f.edit_cursor = self.edit.input.cursor
        return f
