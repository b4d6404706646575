# prefix.py
# Message source: nick(!user)?(@host)? or server name.
import collections

from ircline.protocol import Codec, ParseResult, ProtocolViolation
from . import protocol

__all__ = [ 'Prefix', 'PrefixCodec' ]


class Prefix(collections.namedtuple('Prefix', 'name user host')):
    """ Origin of a message: server name or user nick, optionally with user and host. """
    __slots__ = ()

    def __new__(cls, name, user=None, host=None):
        if not name:
            raise ProtocolViolation('Prefix name must not be empty.', message=name)
        if user is not None and not user:
            raise ProtocolViolation('Prefix user must not be empty when given.', message=name)
        if host is not None and not host:
            raise ProtocolViolation('Prefix host must not be empty when given.', message=name)
        return super().__new__(cls, name, user, host)

    @classmethod
    def parse(cls, text):
        return _default_codec.parse(text)

    @classmethod
    def try_parse(cls, text):
        return _default_codec.try_parse(text)

    def __str__(self):
        return _default_codec.format(self)


class PrefixCodec(Codec):
    """ Prefix codec. See RFC1459 section 2.3.1. """
    EMPTY = ParseResult.PREFIX_EMPTY

    def try_parse(self, text):
        if not text:
            return self.EMPTY, None

        end = len(text)

        # Host is everything after the last separator.
        host = None
        i = text.rfind(protocol.HOST_SEPARATOR)
        if i != -1:
            if i + 1 == end:
                return ParseResult.PREFIX_EMPTY_HOST, None
            host = text[i + 1:]
            end = i

        # User is everything after the first separator, up to the host.
        user = None
        i = text.find(protocol.USER_SEPARATOR, 0, end)
        if i != -1:
            if i + 1 == end:
                return ParseResult.PREFIX_EMPTY_USER, None
            user = text[i + 1:end]
            end = i

        if end == 0:
            return ParseResult.PREFIX_EMPTY_NAME, None

        return ParseResult.SUCCESS, Prefix(text[:end], user, host)

    def format(self, prefix):
        raw = prefix.name
        if prefix.user is not None:
            raw += protocol.USER_SEPARATOR + prefix.user
        if prefix.host is not None:
            raw += protocol.HOST_SEPARATOR + prefix.host
        return raw


_default_codec = PrefixCodec()
