"""Tests for JSON pretty-print and minify converters."""

import json

import pytest

from textformats import FormatTag, FormatterSettings, apply


class TestPrettyJSON:
    def test_reindents_with_two_spaces(self):
        outcome = apply('{"a":[1,2],"b":null}', FormatTag.JSON)

        assert outcome.success
        assert outcome.content == '{\n  "a": [\n    1,\n    2\n  ],\n  "b": null\n}'

    def test_keeps_key_order_and_unicode(self):
        outcome = apply('{"z":"é","a":"中"}', FormatTag.JSON)

        assert outcome.content == '{\n  "z": "é",\n  "a": "中"\n}'

    def test_scalar_document(self):
        assert apply(" 42 ", FormatTag.JSON).content == "42"

    def test_indent_follows_settings(self):
        outcome = apply("[1]", FormatTag.JSON, settings=FormatterSettings(json_indent=4))

        assert outcome.content == "[\n    1\n]"

    def test_invalid_json_reports_parser_message(self):
        outcome = apply("{'a': 1}", FormatTag.JSON)

        assert not outcome.success
        assert outcome.content == "{'a': 1}"
        assert "Expecting property name enclosed in double quotes" in outcome.error

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"x": -Infinity}'])
    def test_non_standard_literals_rejected(self, text):
        outcome = apply(text, FormatTag.JSON)

        assert not outcome.success
        assert outcome.content == text
        assert "Invalid JSON literal" in outcome.error

    def test_empty_text_fails(self):
        outcome = apply("", FormatTag.JSON)

        assert not outcome.success
        assert outcome.content == ""


class TestMinifiedJSON:
    def test_strips_whitespace(self):
        outcome = apply('{\n  "a": [1, 2],\n  "b": "x y"\n}', FormatTag.JSON_MINIFIED)

        assert outcome.success
        assert outcome.content == '{"a":[1,2],"b":"x y"}'

    def test_invalid_json_fails(self):
        outcome = apply("[1,", FormatTag.JSON_MINIFIED)

        assert not outcome.success
        assert outcome.content == "[1,"
        assert outcome.error


class TestRoundTrip:
    @pytest.mark.parametrize(
        "text",
        [
            '{"a": {"b": [1, 2.5, true, null, "s"]}}',
            "[]",
            '"just a string"',
            '[{"nested": {"deep": ["é", "\\u0000"]}}]',
        ],
    )
    def test_pretty_then_minified_preserves_value(self, text):
        pretty = apply(text, FormatTag.JSON).content
        minified = apply(pretty, FormatTag.JSON_MINIFIED)

        assert minified.success
        assert json.loads(minified.content) == json.loads(text)
