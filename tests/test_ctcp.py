import pytest

from ircline import Content, ContentCodec, ParseError, ParseResult, ProtocolViolation

pytestmark = [pytest.mark.unit, pytest.mark.ctcp]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("\x01ACTION text\x01", Content("text", "ACTION")),
        ("\x01ACTION text", Content("text", "ACTION")),
        ("\x01ACTION a b c\x01", Content("a b c", "ACTION")),
        ("\x01VERSION \x01", Content("", "VERSION")),
        ("\x01PING 1602221579\x01", Content("1602221579", "PING")),
        ("hello", Content("hello")),
        ("hello world", Content("hello world")),
        ("a\x01b\x01", Content("a\x01b\x01")),
        (":)", Content(":)")),
    ]
)
def test_content_parse(raw, expected):
    assert ContentCodec().parse(raw) == expected
    assert Content.parse(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ParseResult.CONTENT_EMPTY),
        ("\x01", ParseResult.CONTENT_MISSING_CTCP_ENDING),
        ("\x01\x01", ParseResult.CONTENT_MISSING_CTCP_ENDING),
        ("\x01ACTION", ParseResult.CONTENT_MISSING_CTCP_ENDING),
        ("\x01ACTION\x01", ParseResult.CONTENT_MISSING_CTCP_ENDING),
        ("\x01 text\x01", ParseResult.CONTENT_EMPTY_CTCP),
    ]
)
def test_content_parse_failure(raw, expected):
    codec = ContentCodec()
    assert codec.try_parse(raw) == (expected, None)

    with pytest.raises(ParseError) as excinfo:
        codec.parse(raw)
    assert excinfo.value.section == 'content'


@pytest.mark.parametrize(
    "content, expected",
    [
        (Content("hi"), "hi"),
        (Content(""), ""),
        (Content("hi", "ACTION"), "\x01ACTION hi\x01"),
        (Content("", "VERSION"), "\x01VERSION \x01"),
    ]
)
def test_content_format(content, expected):
    assert ContentCodec().format(content) == expected
    assert str(content) == expected


def test_content_format_adds_missing_ending():
    codec = ContentCodec()
    content = codec.parse("\x01ACTION text")
    assert codec.format(content) == "\x01ACTION text\x01"
    assert codec.parse(codec.format(content)) == content


@pytest.mark.parametrize("ctcp", ["", "ACTION X"])
def test_content_construction_invalid(ctcp):
    with pytest.raises(ProtocolViolation):
        Content("text", ctcp)


def test_content_is_ctcp():
    assert Content("hi", "ACTION").is_ctcp
    assert not Content("hi").is_ctcp
