from datetime import datetime

import pytest

from brewlog.app import App
from brewlog.keys import Key
from brewlog.seed import sample_data

NOW = datetime(2024, 3, 9, 8, 30)


@pytest.fixture()
def app():
    coffees, grinders, entries = sample_data(NOW)
    return App(entries=entries, coffees=coffees, grinders=grinders)


def press(app, *names):
    """Feed key names to app; return the outcome of the last one."""
    outcome = None
    for name in names:
        outcome = app.handle_key(Key(name))
    return outcome


def type_text(app, text):
    return press(app, *text)
