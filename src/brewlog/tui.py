"""brewlog curses-based terminal user interface."""

import curses
import logging
import os

from .app import App, Frame
from .keys import Key
from .models import SELECTED_SYMBOL

logger = logging.getLogger(__name__)

INPUT_WIDTH = 7


class TUI:
    """Draws App frames and feeds it keys until the exit flag is set."""

    def __init__(self, stdscr, app: App):
        self.stdscr = stdscr
        self.app = app
        self.scroll = 0
        curses.curs_set(0)
        self.stdscr.keypad(True)
        self.height, self.width = self.stdscr.getmaxyx()

        self.has_colors = curses.has_colors()
        if self.has_colors:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            curses.init_pair(1, curses.COLOR_BLUE, -1)
            curses.init_pair(2, curses.COLOR_WHITE, curses.COLOR_BLACK)
            self.COL_KEY = curses.color_pair(1) | curses.A_BOLD
            self.COL_SELECTED = curses.color_pair(2) | curses.A_BOLD
        else:
            self.COL_KEY = curses.A_BOLD
            self.COL_SELECTED = curses.A_REVERSE | curses.A_BOLD

    def draw(self, frame: Frame):
        """Render title, rows, controls and command line for one frame."""
        self.stdscr.erase()
        self.height, self.width = self.stdscr.getmaxyx()
        cursor_at = None

        self.stdscr.addnstr(0, 0, frame.title, self.width - 1, curses.A_BOLD)

        top = 2
        body_h = self.height - top - 3
        if body_h < 1:
            self.stdscr.refresh()
            return

        sel = frame.selected if frame.selected is not None else 0
        if sel < self.scroll:
            self.scroll = sel
        elif sel >= self.scroll + body_h:
            self.scroll = sel - body_h + 1

        pad = " " * len(SELECTED_SYMBOL)
        for i in range(self.scroll, min(self.scroll + body_h, len(frame.rows))):
            y = top + (i - self.scroll)
            if i == frame.editing_field:
                cursor_at = self.draw_input_row(y, pad, frame)
                continue
            if i == frame.selected and frame.editing_field is None:
                line = SELECTED_SYMBOL + frame.rows[i]
                self.stdscr.addnstr(y, 0, line.ljust(self.width - 1), self.width - 1, self.COL_SELECTED)
            else:
                self.stdscr.addnstr(y, 0, pad + frame.rows[i], self.width - 1)

        self.stdscr.hline(self.height - 3, 0, curses.ACS_HLINE, self.width)
        self.draw_controls(self.height - 2, frame)
        if frame.command:
            self.stdscr.addnstr(self.height - 1, 0, frame.command, self.width - 1)
            cursor_at = (self.height - 1, min(len(frame.command), self.width - 1))
        elif frame.status:
            self.stdscr.addnstr(self.height - 1, 0, frame.status, self.width - 1, curses.A_DIM)

        if cursor_at:
            curses.curs_set(1)
            self.stdscr.move(*cursor_at)
        else:
            curses.curs_set(0)
        self.stdscr.refresh()

    def draw_input_row(self, y: int, pad: str, frame: Frame):
        """Label, live input box and unit for the field being edited."""
        label = f"{pad}  {frame.edit_label}: "
        self.stdscr.addnstr(y, 0, label, self.width - 1)
        x = len(label)
        width = max(INPUT_WIDTH, len(frame.edit_buffer) + 1)
        if x + width < self.width:
            self.stdscr.addnstr(y, x, frame.edit_buffer.ljust(width), width, self.COL_SELECTED)
        if frame.edit_unit and x + width + 1 < self.width:
            self.stdscr.addnstr(y, x + width, f" {frame.edit_unit}", self.width - 1 - x - width)
        return y, min(x + frame.edit_cursor, self.width - 1)

    def draw_controls(self, y: int, frame: Frame):
        x = 0
        parts = [(" Controls:", curses.A_NORMAL)]
        for n, (label, key) in enumerate(frame.controls):
            parts.append((f"{' |' if n else ''} {label} ", curses.A_NORMAL))
            parts.append((f"<{key}>", self.COL_KEY))
        for text, attrs in parts:
            if x >= self.width - 1:
                break
            self.stdscr.addnstr(y, x, text, self.width - 1 - x, attrs)
            x += len(text)

    def run(self):
        """Main event loop: draw, read one key, apply it."""
        while not self.app.exit:
            self.draw(self.app.frame())
            key = Key.from_curses(self.stdscr.getch())
            if key is None:
                continue
            outcome = self.app.handle_key(key)
            logger.debug("key %r -> %s", key.name, outcome)


def start_curses(app: App):
    """Initialize curses and run the TUI."""

    def _main(stdscr):
        TUI(stdscr, app).run()

    # Make a lone ESC register without the default one-second wait.
    os.environ.setdefault("ESCDELAY", "25")
    curses.wrapper(_main)


def main(app: App) -> None:
    """TUI entry point."""
    start_curses(app)
