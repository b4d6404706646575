from . import log, protocol, ctcp, ircv3, rfc1459

from .protocol import ProtocolViolation, ParseError, ParseResult, Codec, decode_line
from .ctcp import Content, ContentCodec
from .ircv3 import Tags, LazyTags, TagsCodec, LazyTagsCodec, escape_value, unescape_value
from .rfc1459 import Command, CommandCodec, FastCommandCodec, Prefix, PrefixCodec, Message, MessageCodec

__name__ = 'ircline'
__version__ = '1.0.0'
__version_info__ = (1, 0, 0)
__license__ = 'BSD'


_message_codec = MessageCodec()
_tags_codec = TagsCodec()
_prefix_codec = PrefixCodec()
_content_codec = ContentCodec()
_command_codec = CommandCodec()


## Messages.

def parse_message(line):
    """ Parse raw line into a Message. Raises ParseError if the line is malformed. """
    return _message_codec.parse(line)

def try_parse_message(line):
    """ Parse raw line into a Message. Returns a (ParseResult, Message or None) tuple. """
    return _message_codec.try_parse(line)

def format_message(message):
    return _message_codec.format(message)


## Sections.

def parse_tags(text):
    return _tags_codec.parse(text)

def try_parse_tags(text):
    return _tags_codec.try_parse(text)

def format_tags(tags):
    return _tags_codec.format(tags)

def parse_prefix(text):
    return _prefix_codec.parse(text)

def try_parse_prefix(text):
    return _prefix_codec.try_parse(text)

def format_prefix(prefix):
    return _prefix_codec.format(prefix)

def parse_content(text):
    return _content_codec.parse(text)

def try_parse_content(text):
    return _content_codec.try_parse(text)

def format_content(content):
    return _content_codec.format(content)

def parse_command(token):
    return _command_codec.parse(token)

def try_parse_command(token):
    return _command_codec.try_parse(token)

def format_command(command):
    return _command_codec.format(command)
