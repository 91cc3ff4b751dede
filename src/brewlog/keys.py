"""Normalized keystrokes and the action keymap."""

import curses
from dataclasses import dataclass
from typing import Dict, Iterable, Literal, Mapping, Optional, Tuple

KeyKind = Literal["press", "repeat", "release"]

NAMED_KEYS = (
    "enter",
    "backspace",
    "delete",
    "esc",
    "up",
    "down",
    "left",
    "right",
    "home",
    "end",
)

CURSES_KEYS = {
    10: "enter",
    13: "enter",
    curses.KEY_ENTER: "enter",
    27: "esc",
    8: "backspace",
    127: "backspace",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_DC: "delete",
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
}

DEFAULT_KEYMAP: Dict[str, Tuple[str, ...]] = {
    "next": ("j", "down"),
    "previous": ("k", "up"),
    "first": ("g",),
    "confirm": ("enter",),
    "quit": ("q",),
    "back": ("q",),
    "edit": ("e",),
    "cancel": ("esc",),
    "command": (":",),
}


@dataclass(frozen=True)
class Key:
    """One key event: a printable character or a named key."""

    name: str
    kind: KeyKind = "press"

    @property
    def printable(self) -> bool:
        return len(self.name) == 1 and self.name.isprintable()

    @classmethod
    def from_curses(cls, ch: int) -> Optional["Key"]:
        """Normalize a curses getch() code; None for keys we don't handle."""
        if ch in CURSES_KEYS:
            return cls(CURSES_KEYS[ch])
        # getch() reports curses.KEY_* codes above 255; only ASCII text is a char.
        if 32 <= ch < 127:
            return cls(chr(ch))
        return None


def is_key_name(name: str) -> bool:
    return name in NAMED_KEYS or (len(name) == 1 and name.isprintable())


class Keymap:
    """Maps action names to the keys bound to them."""

    def __init__(self, bindings: Optional[Mapping[str, Iterable[str]]] = None):
        self.bindings: Dict[str, Tuple[str, ...]] = dict(DEFAULT_KEYMAP)
        if bindings:
            for action, keys in bindings.items():
                self.bindings[action] = tuple(keys)

    def matches(self, action: str, key: Key) -> bool:
        return key.name in self.bindings.get(action, ())

    def label(self, action: str) -> str:
        """First key bound to action, for the footer."""
        keys = self.bindings.get(action, ())
        return keys[0] if keys else "?"
