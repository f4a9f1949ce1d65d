"""Typed Field Coercion — tests for coerce_field_value by definition type."""

from app.core.field_types import coerce_field_value, is_multiple, to_bool, to_number

COLORS = 'a:2:{i:0;s:3:"red";i:1;s:4:"blue";}'


def test_number_fields():
    assert coerce_field_value({"type": "number"}, "12") == 12
    assert coerce_field_value({"type": "number"}, "1.5") == 1.5
    assert coerce_field_value({"type": "range"}, "") is None
    assert coerce_field_value({"type": "number"}, "abc") is None


def test_true_false_field():
    assert coerce_field_value({"type": "true_false"}, "1") is True
    assert coerce_field_value({"type": "true_false"}, "0") is False
    assert coerce_field_value({"type": "true_false"}, "") is False


def test_checkbox_decodes_list():
    assert coerce_field_value({"type": "checkbox"}, COLORS) == ["red", "blue"]
    assert coerce_field_value({"type": "checkbox"}, "") == []
    assert coerce_field_value({"type": "checkbox"}, "red") == ["red"]


def test_relationship_ids_are_ints():
    assert coerce_field_value({"type": "relationship"}, 'a:2:{i:0;s:1:"3";i:1;s:1:"7";}') == [3, 7]


def test_select_multiple_vs_single():
    assert coerce_field_value({"type": "select", "multiple": 1}, 'a:1:{i:0;s:1:"a";}') == ["a"]
    assert coerce_field_value({"type": "select"}, "a") == "a"


def test_post_object_single_is_int():
    assert coerce_field_value({"type": "post_object"}, "42") == 42
    assert coerce_field_value({"type": "post_object", "multiple": True}, 'a:2:{i:0;s:1:"1";i:1;s:1:"2";}') == [1, 2]


def test_unknown_type_returns_decoded_raw():
    assert coerce_field_value({"type": "text"}, "hello") == "hello"
    assert coerce_field_value({"type": "group"}, 'a:1:{s:1:"a";i:1;}') == {"a": 1}


def test_helpers():
    assert is_multiple({"type": "gallery"})
    assert not is_multiple({"type": "select"})
    assert to_number(None) is None
    assert to_bool("false") is False
