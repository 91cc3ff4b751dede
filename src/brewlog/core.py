"""brewlog helpers (pure functions, no I/O): field schema, formatting, validation."""

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Sequence, Union
from uuid import UUID

from .models import (
    DATE_FMT,
    Coffee,
    Entry,
    FieldKind,
    Grinder,
    UnresolvedReferenceError,
)

# What a 64-bit float parser accepts: ASCII digits only, no padding, no
# digit separators. Use with fullmatch.
FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class FieldSpec:
    """One row of the entry detail view."""

    label: str
    kind: FieldKind
    attr: Optional[str] = None
    unit: str = ""


FIELDS = (
    FieldSpec("Date brewed", "date", "taken"),
    FieldSpec("Coffee", "coffee", "coffee_id"),
    FieldSpec("Grinder", "grinder", "grinder_id"),
    FieldSpec("Grind setting", "numeric", "grind_setting"),
    FieldSpec("Dose", "numeric", "dose", "g"),
    FieldSpec("Output", "numeric", "output", "g"),
    FieldSpec("Ratio", "undefined", None, "/ 1"),
    FieldSpec("Duration", "numeric", "duration", "sec"),
    FieldSpec("Notes", "long_text", "notes"),
)


def field_spec(index: int) -> Optional[FieldSpec]:
    """Return the schema row at index, or None outside the detail view."""
    if 0 <= index < len(FIELDS):
        return FIELDS[index]
    return None


def field_type(index: int) -> FieldKind:
    """Return the editing kind of the field at index; total over all ints."""
    spec = field_spec(index)
    return spec.kind if spec else "undefined"


def valid_float(s: str) -> bool:
    return FLOAT_RE.fullmatch(s) is not None


def parse_float(s: str) -> Optional[float]:
    """Parse s as a float, or None if it is not a valid float string."""
    if not valid_float(s):
        return None
    return float(s)


def format_number(value: float) -> str:
    """Plain decimal text for value: 18.0 -> '18', 45.1 -> '45.1', no exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def format_ratio(entry: Entry) -> str:
    if entry.dose == 0:
        return "-"
    return f"{entry.output / entry.dose:.1f}"


def resolve_name(
    items: Sequence[Union[Coffee, Grinder]], ref: UUID, what: str
) -> str:
    """Return the name of the item with uuid ref.

    Entities are never deleted, so a miss is a programming error and raises
    UnresolvedReferenceError.
    """
    for item in items:
        if item.uuid == ref:
            return item.name
    raise UnresolvedReferenceError(f"entry refers to unknown {what} {ref}")


def format_entry_item(
    entry: Entry, coffees: Sequence[Coffee], date_fmt: str = DATE_FMT
) -> str:
    """One line of the entry list: favourite star, date, coffee."""
    star = "*" if entry.favorite else " "
    coffee = resolve_name(coffees, entry.coffee_id, "coffee")
    return f" {star} {entry.taken.strftime(date_fmt)} | {coffee}"


def field_value_text(entry: Entry, index: int) -> str:
    """Plain text of a numeric field, used to seed an edit session."""
    spec = field_spec(index)
    if spec is None or spec.kind != "numeric":
        return ""
    return format_number(getattr(entry, spec.attr))


def field_display_value(
    entry: Entry,
    index: int,
    coffees: Sequence[Coffee],
    grinders: Sequence[Grinder],
    date_fmt: str = DATE_FMT,
) -> str:
    """Value part of a detail row, without the unit."""
    spec = FIELDS[index]
    if spec.kind == "date":
        return getattr(entry, spec.attr).strftime(date_fmt)
    if spec.kind == "coffee":
        return resolve_name(coffees, entry.coffee_id, "coffee")
    if spec.kind == "grinder":
        return resolve_name(grinders, entry.grinder_id, "grinder")
    if spec.kind == "numeric":
        return field_value_text(entry, index)
    if spec.kind == "long_text":
        return getattr(entry, spec.attr)
    return format_ratio(entry)


def format_entry_details(
    entry: Entry,
    coffees: Sequence[Coffee],
    grinders: Sequence[Grinder],
    date_fmt: str = DATE_FMT,
) -> List[str]:
    """Detail rows of one entry, in schema order."""
    rows = []
    for i, spec in enumerate(FIELDS):
        value = field_display_value(entry, i, coffees, grinders, date_fmt)
        unit = f" {spec.unit}" if spec.unit else ""
        rows.append(f"  {spec.label}: {value}{unit}")
    return rows
