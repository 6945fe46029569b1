"""Tests for twofy.render."""

import json

import pytest

from twofy import EncodeError, Null, OutputFormat, VBool, VList, VMap, VNumber, VText
from twofy.render import _fmt_inline, render, to_json, to_text


# ---------------------------------------------------------------------------
# _fmt_inline / to_text
# ---------------------------------------------------------------------------

class TestText:
    def test_null(self):
        assert _fmt_inline(Null) == "<nil>"

    def test_bools(self):
        assert _fmt_inline(VBool(True)) == "true"
        assert _fmt_inline(VBool(False)) == "false"

    def test_numbers(self):
        assert _fmt_inline(VNumber(42)) == "42"
        assert _fmt_inline(VNumber(2.0)) == "2"
        assert _fmt_inline(VNumber(0.5)) == "0.5"

    def test_text_unquoted(self):
        assert _fmt_inline(VText("hello world")) == "hello world"

    def test_list(self):
        assert _fmt_inline(VList([VNumber(1), VText("a"), Null])) == "[1 a <nil>]"

    def test_empty_containers(self):
        assert _fmt_inline(VList([])) == "[]"
        assert _fmt_inline(VMap({})) == "map[]"

    def test_map_keys_sorted(self):
        m = VMap({"b": VNumber(2), "a": VNumber(1)})
        assert _fmt_inline(m) == "map[a:1 b:2]"

    def test_nested(self):
        m = VMap({"foo": VMap({"bar": VList([VBool(True)])}), "baz": Null})
        assert _fmt_inline(m) == "map[baz:<nil> foo:map[bar:[true]]]"

    def test_to_text_adds_newline(self):
        assert to_text(VNumber(1)) == "1\n"

    def test_unknown_value(self):
        with pytest.raises(EncodeError):
            _fmt_inline(object())


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------

class TestJson:
    def test_scalar(self):
        assert to_json(VNumber(42)) == "42"

    def test_null(self):
        assert to_json(Null) == "null"

    def test_compact_by_default(self):
        v = VMap({"a": VList([VNumber(1), VBool(False)])})
        assert to_json(v) == '{"a":[1,false]}'

    def test_key_order_preserved(self):
        v = VMap({"z": VNumber(1), "a": VNumber(2)})
        assert to_json(v) == '{"z":1,"a":2}'

    def test_indent(self):
        v = VMap({"a": VNumber(1)})
        assert to_json(v, indent=2) == '{\n  "a": 1\n}'

    def test_non_ascii_kept(self):
        assert to_json(VText("山田")) == '"山田"'

    def test_nan_rejected(self):
        with pytest.raises(EncodeError):
            to_json(VNumber(float("nan")))

    def test_is_valid_json(self):
        v = VMap({"s": VText('quote " and \\ slash'), "n": Null})
        assert json.loads(to_json(v)) == {"s": 'quote " and \\ slash', "n": None}


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------

class TestRender:
    def test_none_is_zero_bytes(self):
        assert render(None, OutputFormat.JSON) == b""
        assert render(None, OutputFormat.TEXT) == b""

    def test_null_is_not_zero_bytes(self):
        assert render(Null, OutputFormat.JSON) == b"null"
        assert render(Null, OutputFormat.TEXT) == b"<nil>\n"

    def test_utf8_encoded(self):
        assert render(VText("é"), OutputFormat.TEXT) == "é\n".encode("utf-8")

    def test_json_indent_passed_through(self):
        assert render(VList([VNumber(1)]), OutputFormat.JSON, indent=1) == b"[\n 1\n]"
