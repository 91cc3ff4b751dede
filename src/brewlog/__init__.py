"""brewlog - terminal browser/editor for espresso brewing logs."""

__version__ = "1.0.0"

from .models import Coffee, Entry, Grinder, BrewlogError
from .keys import Key, Keymap
from .core import field_type, valid_float, format_number
from .app import App, Frame

__all__ = [
    "Coffee",
    "Entry",
    "Grinder",
    "BrewlogError",
    "Key",
    "Keymap",
    "field_type",
    "valid_float",
    "format_number",
    "App",
    "Frame",
]
