import pytest

from ircline import ParseError, ParseResult, ProtocolViolation, Tags, TagsCodec, LazyTags
from ircline.ircv3 import escape_value, unescape_value

pytestmark = [pytest.mark.unit, pytest.mark.ircv3]


@pytest.mark.parametrize(
    "raw, value",
    [
        ("", ""),
        ("x", "x"),
        ("plain", "plain"),
        (r"\\", "\\"),
        (r"\:", ";"),
        (r"\s", " "),
        (r"\r", "\r"),
        (r"\n", "\n"),
        (r"\x", "x"),
        (r"\0", "0"),
        (r"\?", "?"),
        (r"\\s", r"\s"),
        (r"one\stwo\sthree", "one two three"),
        ("abc\\", "abc\\"),
        ("\\", "\\"),
        (r"abc\s", "abc "),
        (r"abc\s1", "abc 1"),
        (r"a\s", "a "),
        ("\\\n", "\n"),
    ]
)
def test_unescape_value(raw, value):
    assert unescape_value(raw) == value


@pytest.mark.parametrize(
    "value, raw",
    [
        ("", ""),
        ("x", "x"),
        ("\\", r"\\"),
        (";", r"\:"),
        (" ", r"\s"),
        ("\r", r"\r"),
        ("\n", r"\n"),
        ("\\\\ ", r"\\\\\s"),
        ("a=b:c", "a=b:c"),
    ]
)
def test_escape_value(value, raw):
    assert escape_value(value) == raw


@pytest.mark.parametrize("value", ["", "plain", "a b;c\\d\r\n", "\\s", "trailing\\", ";;  ;;", "ünïcödé \\:"])
def test_escape_unescape_inverse(value):
    escaped = escape_value(value)
    assert unescape_value(escaped) == value
    for forbidden in (' ', ';', '\r', '\n'):
        assert forbidden not in escaped


@pytest.mark.parametrize(
    "raw, expected",
    [
        (r"+example=raw+:=,escaped\:\s\\", {"+example": "raw+:=,escaped; \\"}),
        (r"+example=\foo\bar", {"+example": "foobar"}),
        ("msgid=796~1602221579~51;account=user123", {"msgid": "796~1602221579~51", "account": "user123"}),
        ("inspircd.org/service;inspircd.org/bot", {"inspircd.org/service": "", "inspircd.org/bot": ""}),
        ("key=value=value", {"key": "value=value"}),
        ("A=a;A", {"A": ""}),
        ("key=", {"key": ""}),
        ("a=1;b;c=3", {"a": "1", "b": "", "c": "3"}),
    ]
)
def test_tags_parse(tags_codec, raw, expected):
    tags = tags_codec.parse(raw)
    assert dict(tags) == expected
    assert tags == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ParseResult.TAGS_EMPTY),
        (";", ParseResult.TAGS_TRAILING_SEMICOLON),
        ("x;", ParseResult.TAGS_TRAILING_SEMICOLON),
        ("x=1;y=2;", ParseResult.TAGS_TRAILING_SEMICOLON),
        ("x;;x", ParseResult.TAGS_KEY_EMPTY),
        (";x", ParseResult.TAGS_KEY_EMPTY),
        ("=value", ParseResult.TAGS_KEY_EMPTY),
        ("a=1;=2", ParseResult.TAGS_KEY_EMPTY),
    ]
)
def test_tags_parse_failure(tags_codec, raw, expected):
    assert tags_codec.try_parse(raw) == (expected, None)

    with pytest.raises(ParseError) as excinfo:
        tags_codec.parse(raw)
    assert excinfo.value.result is expected
    assert excinfo.value.section == 'tags'


def test_tags_duplicate_keys_keep_first_position(tags_codec):
    tags = tags_codec.parse("b=1;a=2;b=3")
    assert list(tags.items()) == [("b", "3"), ("a", "2")]
    assert len(tags) == 2


def test_tags_format():
    codec = TagsCodec()
    assert codec.format(Tags({"a": "", "b": "x y", "c": "1;2"})) == r"a;b=x\sy;c=1\:2"
    assert codec.format(Tags()) == ""
    assert codec.format({"flag": ""}) == "flag"


def test_tags_format_parse_round_trip(tags_codec):
    tags = Tags([("z", "last"), ("a", "a b"), ("flag", ""), ("path", "C:\\dir;x\r\n")])
    assert tags_codec.parse(tags_codec.format(tags)) == tags


def test_tags_construction():
    tags = Tags({"a": None, "b": "2"})
    assert tags["a"] == ""
    assert tags == {"a": "", "b": "2"}
    assert Tags([("a", "1"), ("a", "2")]) == {"a": "2"}
    assert "b" in tags
    assert "c" not in tags
    assert tags.get("c") is None


def test_tags_construction_empty_key():
    with pytest.raises(ProtocolViolation):
        Tags({"": "value"})


@pytest.mark.parametrize("key", ["a b", "a;b", "a=b", "=", " "])
def test_tags_construction_invalid_key(key):
    with pytest.raises(ProtocolViolation):
        Tags({key: "value"})
    with pytest.raises(ProtocolViolation):
        Tags([("ok", "1"), (key, None)])


def test_tags_non_string_key_missing():
    tags = Tags({"a": "1"})
    assert 1 not in tags
    assert None not in tags


def test_tags_read_only():
    tags = Tags({"a": "1"})
    with pytest.raises(TypeError):
        tags["a"] = "2"


def test_tags_equality_across_kinds():
    assert Tags({"a": "1", "b": ""}) == LazyTags("a=1;b")
    assert LazyTags("b;a=1") == Tags({"a": "1", "b": ""})
    assert Tags({"a": "1"}) != Tags({"a": "2"})
