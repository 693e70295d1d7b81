import datetime

import pytest

from acknowlist.values import PlistValue, ValueKind


@pytest.mark.parametrize("raw, kind", [
    (None, ValueKind.ABSENT),
    ("text", ValueKind.STRING),
    (True, ValueKind.BOOLEAN),
    (3, ValueKind.NUMBER),
    (1.5, ValueKind.NUMBER),
    ({"a": 1}, ValueKind.MAPPING),
    ([1, 2], ValueKind.SEQUENCE),
    (b"\x00", ValueKind.DATA),
    (datetime.datetime(2020, 1, 1), ValueKind.DATE),
])
def test_kinds(raw, kind):
    assert PlistValue.wrap(raw).kind is kind

def test_accessors_return_none_on_mismatch():
    value = PlistValue.wrap(42)
    assert value.string() is None
    assert value.mapping() is None
    assert value.sequence() is None
    assert value.get("Title").is_absent
    assert value.at(0).is_absent

def test_get_and_at():
    value = PlistValue.wrap({"PreferenceSpecifiers": [{"Title": "A"}, {"Title": "B"}]})
    specifiers = value.get("PreferenceSpecifiers")
    assert specifiers.at(0).get("Title").string() == "A"
    assert specifiers.at(-1).get("Title").string() == "B"
    assert specifiers.at(5).is_absent
    assert value.get("Missing").is_absent

def test_structural_equality():
    assert PlistValue.wrap({"Title": "A"}) == PlistValue.wrap({"Title": "A"})
    assert PlistValue.wrap({"Title": "A"}) != PlistValue.wrap({"Title": "B"})
    assert PlistValue.wrap(1) != PlistValue.wrap(True)
