import uuid
from datetime import datetime

import pytest

from brewlog.core import (
    FIELDS,
    field_type,
    field_value_text,
    format_entry_details,
    format_entry_item,
    format_number,
    parse_float,
    valid_float,
)
from brewlog.models import FIELD_COUNT, Coffee, Entry, Grinder, UnresolvedReferenceError
from brewlog.seed import sample_data

NOW = datetime(2024, 3, 9, 8, 30)


def test_field_type_covers_every_slot():
    kinds = [field_type(i) for i in range(FIELD_COUNT)]
    assert kinds == [
        "date",
        "coffee",
        "grinder",
        "numeric",
        "numeric",
        "numeric",
        "undefined",
        "numeric",
        "long_text",
    ]


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_field_type_outside_schema_is_undefined(index):
    assert field_type(index) == "undefined"


def test_numeric_fields_map_to_measurements():
    attrs = {i: f.attr for i, f in enumerate(FIELDS) if f.kind == "numeric"}
    assert attrs == {3: "grind_setting", 4: "dose", 5: "output", 7: "duration"}


@pytest.mark.parametrize(
    "text", ["18", "18.5", "-3", "+2", "1.", ".5", "1e3", "2.5E-2", "inf", "-Infinity", "NaN"]
)
def test_valid_float_accepts(text):
    assert valid_float(text)
    assert parse_float(text) is not None


@pytest.mark.parametrize("text", ["", "x", "18x", "-", ".", "1e", "1_000", " 1", "1 ", "1.2.3", "0x10"])
def test_valid_float_rejects(text):
    assert not valid_float(text)
    assert parse_float(text) is None


@pytest.mark.parametrize(
    "value, text",
    [(18.0, "18"), (45.1, "45.1"), (0.0, "0"), (-2.5, "-2.5"), (1e-7, "0.0000001"), (1e16, "10000000000000000")],
)
def test_format_number(value, text):
    assert format_number(value) == text


def test_format_number_special_values():
    assert format_number(float("inf")) == "inf"
    assert format_number(float("-inf")) == "-inf"
    assert format_number(float("nan")) == "NaN"


def test_entry_list_row():
    coffees, _, entries = sample_data(NOW)
    assert format_entry_item(entries[0], coffees) == "   2024/03/09 08:30 | B&W FSL28"
    assert format_entry_item(entries[1], coffees) == " * 2024/03/09 08:40 | B&W FSL28"
    assert format_entry_item(entries[2], coffees) == "   2024/03/09 08:56 | Folgers"


def test_entry_detail_rows():
    coffees, grinders, entries = sample_data(NOW)
    assert format_entry_details(entries[0], coffees, grinders) == [
        "  Date brewed: 2024/03/09 08:30",
        "  Coffee: B&W FSL28",
        "  Grinder: Niche Zero",
        "  Grind setting: 0",
        "  Dose: 18 g",
        "  Output: 45.1 g",
        "  Ratio: 2.5 / 1",
        "  Duration: 26 sec",
        "  Notes: ",
    ]


def test_seed_text_matches_display():
    coffees, grinders, entries = sample_data(NOW)
    rows = format_entry_details(entries[1], coffees, grinders)
    for i, spec in enumerate(FIELDS):
        if spec.kind != "numeric":
            continue
        shown = rows[i].split(": ", 1)[1]
        if spec.unit:
            shown = shown[: -len(spec.unit) - 1]
        assert field_value_text(entries[1], i) == shown


def test_field_value_text_only_for_numeric_fields():
    _, _, entries = sample_data(NOW)
    assert field_value_text(entries[0], 4) == "18"
    assert field_value_text(entries[0], 0) == ""
    assert field_value_text(entries[0], 6) == ""


def test_ratio_without_dose():
    coffees, grinders, entries = sample_data(NOW)
    entries[0].dose = 0.0
    assert format_entry_details(entries[0], coffees, grinders)[6] == "  Ratio: - / 1"


def test_unknown_coffee_is_a_hard_failure():
    coffees, grinders, _ = sample_data(NOW)
    stray = Entry(taken=NOW, coffee_id=uuid.uuid4(), grinder_id=grinders[0].uuid)
    with pytest.raises(UnresolvedReferenceError):
        format_entry_item(stray, coffees)
    with pytest.raises(UnresolvedReferenceError):
        format_entry_details(stray, [Coffee("Other")], grinders)


@pytest.mark.parametrize("text", ["18\n", "١٨", "1٥", "１"])
def test_valid_float_is_ascii_only_and_whole_string(text):
    assert not valid_float(text)
    assert parse_float(text) is None


def test_reference_ids_default_to_fresh_uuids():
    a, b = Coffee("A"), Coffee("B")
    assert isinstance(a.uuid, uuid.UUID)
    assert a.uuid != b.uuid
    assert isinstance(Grinder("G").uuid, uuid.UUID)
