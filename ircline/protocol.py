# IRC implementation-agnostic constants/helpers.
import enum
from abc import ABCMeta, abstractmethod

from . import log

DEFAULT_ENCODING = 'utf-8'
FALLBACK_ENCODING = 'iso-8859-1'

LINE_SEPARATOR = '\r\n'
MINIMAL_LINE_SEPARATOR = '\n'

logger = log.Logger('ircline')


## Errors.

class ProtocolViolation(Exception):
    """ An error that occurred while parsing or constructing an IRC message that violates the IRC protocol. """
    def __init__(self, msg, message):
        super().__init__(msg)
        self.irc_message = message


class ParseError(ProtocolViolation):
    """ Input could not be parsed. `result` holds the ParseResult describing why. """
    def __init__(self, result, message):
        if result.is_invalid_section:
            msg = '{section} is not in a valid format: {reason}'.format(
                section=result.section.capitalize(), reason=result.description)
        else:
            msg = result.description
        super().__init__(msg, message)
        self.result = result

    @property
    def section(self):
        return self.result.section


class ParseResult(enum.Enum):
    """
    Outcome of a non-throwing parse.
    Members are flat and grouped by the section of the line they belong to.
    """
    SUCCESS = ('', 'Success')

    COMMAND_EMPTY = ('command', 'Command is empty')
    COMMAND_FORMAT = ('command', 'Invalid command format')

    CONTENT_EMPTY = ('content', 'Content is empty')
    CONTENT_MISSING_CTCP_ENDING = ('content', 'Missing content CTCP ending')
    CONTENT_EMPTY_CTCP = ('content', 'Content CTCP command is empty')

    PREFIX_EMPTY = ('prefix', 'Prefix is empty')
    PREFIX_EMPTY_HOST = ('prefix', 'Prefix host is empty')
    PREFIX_EMPTY_USER = ('prefix', 'Prefix user is empty')
    PREFIX_EMPTY_NAME = ('prefix', 'Prefix name is empty')

    TAGS_EMPTY = ('tags', 'Tags are empty')
    TAGS_TRAILING_SEMICOLON = ('tags', 'Trailing tags semicolon')
    TAGS_KEY_EMPTY = ('tags', 'A tag key is empty')

    MESSAGE_EMPTY = ('message', 'Message is empty')
    MESSAGE_NO_COMMAND_MISSING_TAGS_ENDING = ('message', 'Missing command (no tags ending)')
    MESSAGE_NO_COMMAND_AFTER_TAGS_ENDING = ('message', 'Missing command (nothing after tags ending)')
    MESSAGE_NO_COMMAND_MISSING_PREFIX_ENDING = ('message', 'Missing command (no prefix ending)')
    MESSAGE_NO_COMMAND_AFTER_PREFIX_ENDING = ('message', 'Missing command (nothing after prefix ending)')
    MESSAGE_TRAILING_SPACE_AFTER_COMMAND = ('message', 'Trailing space after command')

    @property
    def section(self):
        """ Name of the line section this result belongs to. """
        return self.value[0]

    @property
    def description(self):
        """ Human-readable reason. """
        return self.value[1]

    @property
    def is_invalid_section(self):
        """ Whether this is a failure of one of the sub-sections (tags, prefix, command, content). """
        return self.section not in ('', 'message')

    def __bool__(self):
        return self is ParseResult.SUCCESS


## Bases.

class Codec(metaclass=ABCMeta):
    """
    Abstract codec for one section of an IRC line.
    Subclasses implement the non-throwing `try_parse` primitive and `format`; `parse` is built on top.
    """
    @abstractmethod
    def try_parse(self, text):
        """ Parse text. Return a (ParseResult, value) tuple, value being None unless parsing succeeded. """
        raise NotImplementedError()

    @abstractmethod
    def format(self, value):
        """ Convert value into its raw IRC representation. """
        raise NotImplementedError()

    def parse(self, text):
        """ Parse text. Return the parsed value or raise a ParseError. """
        if text is None:
            raise TypeError('{cls}.parse() argument must be str, not None'.format(cls=self.__class__.__name__))

        result, value = self.try_parse(text)
        if not result:
            raise ParseError(result, message=text)
        return value


## Misc.

def decode_line(data, encoding=DEFAULT_ENCODING):
    """ Decode raw line, falling back to FALLBACK_ENCODING if needed, and strip the line separator. """
    try:
        line = data.decode(encoding)
    except UnicodeDecodeError:
        logger.debug('Could not decode {!r} as {}, falling back to {}', data, encoding, FALLBACK_ENCODING)
        line = data.decode(FALLBACK_ENCODING)

    if line.endswith(LINE_SEPARATOR):
        line = line[:-len(LINE_SEPARATOR)]
    elif line.endswith(MINIMAL_LINE_SEPARATOR):
        line = line[:-len(MINIMAL_LINE_SEPARATOR)]

    return line
