"""Single-line text input with a cursor (insert mode)."""

from typing import Tuple

from .keys import Key


class LineInput:
    """Text buffer edited one key at a time.

    Printable keys insert at the cursor; backspace/delete remove before/at the
    cursor; left/right/home/end move it. Other keys are ignored.
    """

    def __init__(self, value: str = ""):
        self.value = value
        self.cursor = len(value)

    def snapshot(self) -> Tuple[str, int]:
        return self.value, self.cursor

    def restore(self, snap: Tuple[str, int]) -> None:
        self.value, self.cursor = snap

    def handle(self, key: Key) -> bool:
        """Apply key; return True if the value or cursor changed."""
        before = self.snapshot()
        if key.printable:
            self.value = self.value[: self.cursor] + key.name + self.value[self.cursor :]
            self.cursor += 1
        elif key.name == "backspace":
            if self.cursor > 0:
                self.value = self.value[: self.cursor - 1] + self.value[self.cursor :]
                self.cursor -= 1
        elif key.name == "delete":
            self.value = self.value[: self.cursor] + self.value[self.cursor + 1 :]
        elif key.name == "left":
            self.cursor = max(0, self.cursor - 1)
        elif key.name == "right":
            self.cursor = min(len(self.value), self.cursor + 1)
        elif key.name == "home":
            self.cursor = 0
        elif key.name == "end":
            self.cursor = len(self.value)
        return self.snapshot() != before
