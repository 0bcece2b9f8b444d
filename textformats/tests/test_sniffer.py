"""Tests for format sniffing."""

import pytest

from textformats import FormatTag, detect

ALWAYS_OFFERED = [FormatTag.RAW, FormatTag.BASE64_ENCODE, FormatTag.URL_ENCODE]


class TestDetectInvariants:
    """Properties that hold for any input."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            " ",
            "hello",
            "{}",
            "[1,2]",
            'a:1:{s:3:"key";s:3:"val";}',
            "<?xml version='1.0'?><a/>",
            "aGVsbG8=",
            "100%25",
            "{%}",
            "é中\U0001f600",
        ],
    )
    def test_raw_first_and_no_duplicates(self, text):
        tags = detect(text)

        assert tags[0] == FormatTag.RAW
        assert len(tags) == len(set(tags))

    def test_empty_input_is_raw_only(self):
        assert detect("") == [FormatTag.RAW]

    def test_whitespace_only_gets_encoders(self):
        """Whitespace is still text worth encoding."""
        assert detect("   ") == ALWAYS_OFFERED


class TestJSONDetection:
    @pytest.mark.parametrize("text", ['{"a": 1}', "[1, 2]", "  {\n}\n", "{not really json}"])
    def test_bracketed_text_offers_json(self, text):
        tags = detect(text)

        assert FormatTag.JSON in tags
        assert FormatTag.JSON_MINIFIED in tags

    @pytest.mark.parametrize("text", ["{]", "[}", '"string"', "42", "{"])
    def test_unbracketed_text_does_not(self, text):
        assert FormatTag.JSON not in detect(text)


class TestPHPSerializedDetection:
    @pytest.mark.parametrize(
        "text",
        [
            "N;",
            "b:1;",
            "i:42;",
            "d:0.5;",
            's:3:"abc";',
            "a:0:{}",
            'O:8:"stdClass":0:{}',
            "  i:1;",
        ],
    )
    def test_header_matches(self, text):
        assert FormatTag.PHP_SERIALIZED in detect(text)

    @pytest.mark.parametrize("text", ["x:1;", "i:-1;", "N", "n;", "s:abc", "hello"])
    def test_header_mismatches(self, text):
        assert FormatTag.PHP_SERIALIZED not in detect(text)

    def test_prefix_test_accepts_garbage_after_header(self):
        """Sniffing is advisory; only the decoder validates the whole value."""
        assert FormatTag.PHP_SERIALIZED in detect("i:1;garbage")


class TestXMLDetection:
    @pytest.mark.parametrize("text", ["<root/>", "<?xml version='1.0'?>", " <a>text</a>"])
    def test_xml_offered(self, text):
        assert FormatTag.XML in detect(text)

    @pytest.mark.parametrize("text", ["<1>", "< a>", "<!-- c -->", "a<b>"])
    def test_xml_not_offered(self, text):
        assert FormatTag.XML not in detect(text)


class TestEncodingDetection:
    def test_base64_alphabet_offers_decode(self):
        assert FormatTag.BASE64_DECODE in detect("aGVsbG8gd29ybGQ=")

    @pytest.mark.parametrize("text", ["not base64!", "abc=def", "a-b_c"])
    def test_non_alphabet_text_does_not(self, text):
        assert FormatTag.BASE64_DECODE not in detect(text)

    def test_percent_offers_url_decode(self):
        assert FormatTag.URL_DECODE in detect("a%20b")

    def test_no_percent_no_url_decode(self):
        assert FormatTag.URL_DECODE not in detect("a b")

    def test_encoders_always_offered_for_text(self):
        tags = detect("anything at all")

        assert FormatTag.BASE64_ENCODE in tags
        assert FormatTag.URL_ENCODE in tags


class TestOrdering:
    def test_full_priority_order(self):
        """A value matching several rules keeps the fixed priority order."""
        assert detect("{%}") == [
            FormatTag.RAW,
            FormatTag.JSON,
            FormatTag.JSON_MINIFIED,
            FormatTag.BASE64_ENCODE,
            FormatTag.URL_DECODE,
            FormatTag.URL_ENCODE,
        ]

    def test_plain_word_is_base64_candidate(self):
        """Short alphanumeric words fit the Base64 alphabet too."""
        assert detect("hello") == [
            FormatTag.RAW,
            FormatTag.BASE64_DECODE,
            FormatTag.BASE64_ENCODE,
            FormatTag.URL_ENCODE,
        ]
