"""Tests for XML re-indentation."""

import pytest

from textformats import FormatTag, FormatterSettings, apply


def indent_xml(text, **context):
    outcome = apply(text, FormatTag.XML, **context)
    assert outcome.success, outcome.error
    return outcome.content


class TestIndentation:
    """Tests for the rendered layout."""

    def test_nested_elements(self):
        text = '<root><a x="1">hi</a><b/></root>'

        assert indent_xml(text) == '<root>\n  <a x="1">hi</a>\n  <b />\n</root>'

    def test_existing_whitespace_is_replaced(self):
        text = "<root>\n\t\t<a/>\n\n</root>"

        assert indent_xml(text) == "<root>\n  <a />\n</root>"

    def test_deep_nesting(self):
        text = "<a><b><c>x</c></b></a>"

        assert indent_xml(text) == "<a>\n  <b>\n    <c>x</c>\n  </b>\n</a>"

    def test_indent_follows_settings(self):
        text = "<a><b/></a>"

        assert indent_xml(text, settings=FormatterSettings(xml_indent=4)) == "<a>\n    <b />\n</a>"

    def test_mixed_content_puts_text_on_own_lines(self):
        text = "<p>Hello <b>world</b> again</p>"

        assert indent_xml(text) == "<p>\n  Hello\n  <b>world</b>\n  again\n</p>"

    def test_multiple_attributes_keep_order(self):
        assert indent_xml('<a z="1" y="2"/>') == '<a z="1" y="2" />'


class TestDroppedNodes:
    """Nodes that do not survive re-indentation."""

    def test_empty_element_self_closes(self):
        assert indent_xml("<a></a>") == "<a />"

    def test_whitespace_only_text_is_dropped(self):
        assert indent_xml("<a>   </a>") == "<a></a>"

    def test_declaration_is_not_reemitted(self):
        assert indent_xml('<?xml version="1.0" encoding="UTF-8"?><r/>') == "<r />"

    def test_comments_and_processing_instructions_dropped(self):
        text = "<r><!-- note --><?pi data?><a/></r>"

        assert indent_xml(text) == "<r>\n  <a />\n</r>"


class TestEscaping:
    """Output must stay well-formed XML."""

    def test_text_and_attributes_are_escaped(self):
        text = '<r a="&quot;x&amp;">1 &lt; 2</r>'

        assert indent_xml(text) == '<r a="&quot;x&amp;">1 &lt; 2</r>'

    def test_cdata_is_kept_as_text(self):
        assert indent_xml("<r><![CDATA[a < b]]></r>") == "<r>a &lt; b</r>"

    def test_output_parses_again(self):
        text = '<r><a k="v&amp;w">x &amp; y</a><b/></r>'
        once = indent_xml(text)

        assert indent_xml(once) == once

    def test_namespaced_names_are_kept(self):
        text = '<ns:r xmlns:ns="urn:x"><ns:c/></ns:r>'

        assert indent_xml(text) == '<ns:r xmlns:ns="urn:x">\n  <ns:c />\n</ns:r>'


class TestFailures:
    @pytest.mark.parametrize("text", ["<a><b></a>", "", "plain text", "<a>", "<a/><b/>"])
    def test_malformed_xml(self, text):
        outcome = apply(text, FormatTag.XML)

        assert not outcome.success
        assert outcome.error == "Invalid XML"
        assert outcome.content == text

    def test_entity_declarations_are_refused(self):
        text = '<!DOCTYPE r [<!ENTITY e "boom">]><r>&e;</r>'

        outcome = apply(text, FormatTag.XML)

        assert not outcome.success
        assert outcome.content == text
        assert "EntitiesForbidden" in outcome.error
