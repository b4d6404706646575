# ctcp.py
# Message content, optionally wrapped as a Client-to-Client-Protocol (CTCP) query.
import collections

from .protocol import Codec, ParseResult, ProtocolViolation

__all__ = [ 'CTCP_DELIMITER', 'Content', 'ContentCodec' ]


CTCP_DELIMITER = '\x01'
CTCP_SEPARATOR = ' '


class Content(collections.namedtuple('Content', 'text ctcp')):
    """ Trailing text of a message. `ctcp` holds the CTCP command (ACTION, VERSION, ...) if the text was wrapped. """
    __slots__ = ()

    def __new__(cls, text, ctcp=None):
        if ctcp is not None and (not ctcp or CTCP_SEPARATOR in ctcp):
            raise ProtocolViolation('CTCP command must be a non-empty token.', message=ctcp)
        return super().__new__(cls, text, ctcp)

    @property
    def is_ctcp(self):
        return self.ctcp is not None

    @classmethod
    def parse(cls, text):
        return _default_codec.parse(text)

    @classmethod
    def try_parse(cls, text):
        return _default_codec.try_parse(text)

    def __str__(self):
        return _default_codec.format(self)


class ContentCodec(Codec):
    """
    Content codec. See https://tools.ietf.org/id/draft-oakley-irc-ctcp-01.html.
    A missing closing delimiter is tolerated when parsing but always written when formatting,
    so round trips normalize truncated CTCP queries.
    """
    EMPTY = ParseResult.CONTENT_EMPTY

    def try_parse(self, text):
        if not text:
            return self.EMPTY, None

        start = 0
        end = len(text)
        ctcp = None

        if text[0] == CTCP_DELIMITER:
            start = 1
            if end > start and text[end - 1] == CTCP_DELIMITER:
                end -= 1

            i = text.find(CTCP_SEPARATOR, start, end)
            if i == -1:
                return ParseResult.CONTENT_MISSING_CTCP_ENDING, None
            if i == start:
                return ParseResult.CONTENT_EMPTY_CTCP, None

            ctcp = text[start:i]
            start = i + 1

        return ParseResult.SUCCESS, Content(text[start:end], ctcp)

    def format(self, content):
        if content.ctcp is None:
            return content.text
        return CTCP_DELIMITER + content.ctcp + CTCP_SEPARATOR + content.text + CTCP_DELIMITER


_default_codec = ContentCodec()
