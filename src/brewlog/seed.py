"""Built-in sample log used until entries can be created from the UI."""

from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from .models import Coffee, Entry, Grinder


def sample_data(
    now: Optional[datetime] = None,
) -> Tuple[List[Coffee], List[Grinder], List[Entry]]:
    """Return (coffees, grinders, entries) with three shots ten-ish minutes apart."""
    now = now or datetime.now()
    coffees = [Coffee("B&W FSL28"), Coffee("Folgers")]
    grinder = Grinder("Niche Zero")

    entries = [
        Entry(
            taken=now,
            coffee_id=coffees[0].uuid,
            grinder_id=grinder.uuid,
            added=now,
            dose=18.0,
            output=45.1,
            duration=26.0,
        ),
        Entry(
            taken=now + timedelta(seconds=600),
            coffee_id=coffees[0].uuid,
            grinder_id=grinder.uuid,
            added=now,
            dose=18.0,
            output=44.6,
            duration=32.1,
            favorite=True,
        ),
        Entry(
            taken=now + timedelta(seconds=1580),
            coffee_id=coffees[1].uuid,
            grinder_id=grinder.uuid,
            added=now,
            dose=18.0,
            output=43.9,
            duration=20.9,
        ),
    ]
    return coffees, [grinder], entries
