# parsing.py
# RFC1459 message parsing and construction, with IRCv3 tags and CTCP content.
import collections

import ircline.protocol
from ircline.protocol import Codec, ParseResult
from ircline.ircv3.tags import TAG_INDICATOR, Tags, LazyTags, TagsCodec
from ircline.ctcp import Content, ContentCodec
from . import protocol
from .commands import Command, CommandCodec
from .prefix import Prefix, PrefixCodec

__all__ = [ 'Message', 'MessageCodec' ]


class Message(collections.namedtuple('Message', 'command tags prefix arg content')):
    """
    A single IRC message.
    `arg` holds the middle parameters verbatim, `content` the trailing parameter.
    """
    __slots__ = ()

    def __new__(cls, command, tags=None, prefix=None, arg=None, content=None):
        if not isinstance(command, Command):
            command = Command(command)
        if tags is not None and not isinstance(tags, (Tags, LazyTags)):
            tags = Tags(tags)
        if prefix is not None and not isinstance(prefix, Prefix):
            raise TypeError('prefix must be a Prefix, not {}'.format(type(prefix).__name__))
        if isinstance(content, str):
            content = Content(content)
        return super().__new__(cls, command, tags, prefix, arg, content)

    @classmethod
    def parse(cls, line, encoding=ircline.protocol.DEFAULT_ENCODING):
        """
        Parse given line into IRC message structure.
        Raw bytes are decoded and stripped of their line separator first.
        Returns a Message or raises a ParseError.
        """
        if isinstance(line, bytes):
            line = ircline.protocol.decode_line(line, encoding)
        return _default_codec.parse(line)

    @classmethod
    def try_parse(cls, line, encoding=ircline.protocol.DEFAULT_ENCODING):
        """ Like parse(), but return a (ParseResult, Message or None) tuple instead of raising. """
        if isinstance(line, bytes):
            line = ircline.protocol.decode_line(line, encoding)
        return _default_codec.try_parse(line)

    def construct(self):
        """ Construct a raw IRC message, without line separator. """
        return _default_codec.format(self)

    def __str__(self):
        return self.construct()


class MessageCodec(Codec):
    """
    Message codec.
    Splits a line into tags, prefix, command, argument and content, from left to right,
    and hands each section to its own codec. Section codecs can be swapped at construction.
    """
    EMPTY = ParseResult.MESSAGE_EMPTY

    def __init__(self, command_codec=None, tags_codec=None, prefix_codec=None, content_codec=None, logger=None):
        self.command_codec = command_codec or CommandCodec()
        self.tags_codec = tags_codec or TagsCodec()
        self.prefix_codec = prefix_codec or PrefixCodec()
        self.content_codec = content_codec or ContentCodec()
        self.logger = logger or ircline.protocol.logger

    def _reject(self, result, line):
        self.logger.debug('Rejected message {!r}: {}', line, result.description)
        return result, None

    def try_parse(self, text):
        if not text:
            return self._reject(self.EMPTY, text)

        end = len(text)
        start = 0
        tags = prefix = arg = content = None

        # Tags: @tags<space>
        if text[0] == TAG_INDICATOR:
            i = text.find(protocol.ARGUMENT_SEPARATOR, 1)
            if i == -1:
                return self._reject(ParseResult.MESSAGE_NO_COMMAND_MISSING_TAGS_ENDING, text)

            result, tags = self.tags_codec.try_parse(text[1:i])
            if not result:
                return self._reject(result, text)

            start = i + 1
            if start == end:
                return self._reject(ParseResult.MESSAGE_NO_COMMAND_AFTER_TAGS_ENDING, text)

        # Prefix: :prefix<space>
        if text[start] == protocol.SOURCE_INDICATOR:
            i = text.find(protocol.ARGUMENT_SEPARATOR, start + 1)
            if i == -1:
                return self._reject(ParseResult.MESSAGE_NO_COMMAND_MISSING_PREFIX_ENDING, text)

            result, prefix = self.prefix_codec.try_parse(text[start + 1:i])
            if not result:
                return self._reject(result, text)

            start = i + 1
            if start == end:
                return self._reject(ParseResult.MESSAGE_NO_COMMAND_AFTER_PREFIX_ENDING, text)

        # Command, optionally followed by parameters.
        i = text.find(protocol.ARGUMENT_SEPARATOR, start)
        if i == -1:
            result, command = self.command_codec.try_parse(text[start:])
            if not result:
                return self._reject(result, text)
        else:
            result, command = self.command_codec.try_parse(text[start:i])
            if not result:
                return self._reject(result, text)

            start = i + 1
            if start == end:
                return self._reject(ParseResult.MESSAGE_TRAILING_SPACE_AFTER_COMMAND, text)

            if text[start] == protocol.TRAILING_PREFIX:
                # Only a trailing parameter.
                start += 1
            else:
                i = text.find(protocol.TRAILING_SEPARATOR, start)
                if i == -1:
                    arg = text[start:]
                    start = end
                else:
                    arg = text[start:i]
                    start = i + len(protocol.TRAILING_SEPARATOR)

            if start < end:
                result, content = self.content_codec.try_parse(text[start:])
                if not result:
                    return self._reject(result, text)

        return ParseResult.SUCCESS, Message._make((command, tags, prefix, arg, content))

    def format(self, message):
        raw = ''

        if message.tags is not None:
            raw_tags = self.tags_codec.format(message.tags)
            if raw_tags:
                raw += TAG_INDICATOR + raw_tags + protocol.ARGUMENT_SEPARATOR

        if message.prefix is not None:
            raw += protocol.SOURCE_INDICATOR + self.prefix_codec.format(message.prefix) + protocol.ARGUMENT_SEPARATOR

        raw += self.command_codec.format(message.command)

        if message.arg is not None:
            raw += protocol.ARGUMENT_SEPARATOR + message.arg

        if message.content is not None:
            raw += protocol.TRAILING_SEPARATOR + self.content_codec.format(message.content)

        return raw


_default_codec = MessageCodec()
