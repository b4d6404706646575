# commands.py
# RFC1459 command tokens: named commands and three-digit numeric replies.
from ircline.protocol import Codec, ParseResult, ProtocolViolation
from . import protocol

__all__ = [ 'Command', 'CommandCodec', 'FastCommandCodec' ]

# Characters of command and numeric reply names. Only ASCII, so upper-casing cannot fold other letters onto them.
_NAME_CHARACTERS = protocol.LETTERS | protocol.DIGITS | {'_'}


class Command:
    """
    An IRC command: either a named command (PING, PRIVMSG, ...) or a numeric reply in the range 0-999.
    Named commands can be constructed from their (case-insensitive) name, numeric replies from an int
    or their symbolic name (RPL_NAMREPLY). Every known command is also available as a class attribute.
    """
    __slots__ = ('_value',)

    def __init__(self, value):
        if isinstance(value, Command):
            value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            if not protocol.NUMERIC_MIN <= value <= protocol.NUMERIC_MAX:
                raise ProtocolViolation('Numeric reply {} is out of range ({}-{}).'.format(
                    value, protocol.NUMERIC_MIN, protocol.NUMERIC_MAX), message=str(value))
        elif isinstance(value, str):
            if not all(ch in _NAME_CHARACTERS for ch in value):
                raise ProtocolViolation('Unknown command name: {}'.format(value), message=value)
            name = value.upper()
            if name in protocol.NUMERIC_REPLIES:
                value = protocol.NUMERIC_REPLIES[name]
            elif name in protocol.NAMED_COMMANDS:
                value = name
            else:
                raise ProtocolViolation('Unknown command name: {}'.format(value), message=value)
        else:
            raise TypeError('Command must be constructed from an int or str, not {}'.format(type(value).__name__))

        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError('Command is immutable')

    @property
    def is_numeric(self):
        return isinstance(self._value, int)

    @property
    def numeric(self):
        """ The reply code for numeric replies, None for named commands. """
        return self._value if self.is_numeric else None

    @property
    def name(self):
        """ The command name, or the symbolic name of a numeric reply (None if it has none). """
        if self.is_numeric:
            return protocol.NUMERIC_NAMES.get(self._value)
        return self._value

    def __eq__(self, other):
        if isinstance(other, Command):
            return self._value == other._value
        if isinstance(other, (int, str)) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __str__(self):
        if self.is_numeric:
            return '{:03d}'.format(self._value)
        return self._value

    def __repr__(self):
        if self.is_numeric:
            return '{cls}({value:03d})'.format(cls=self.__class__.__name__, value=self._value)
        return '{cls}.{name}'.format(cls=self.__class__.__name__, name=self._value)


for _name in protocol.NAMED_COMMANDS:
    setattr(Command, _name, Command(_name))
for _name, _numeric in protocol.NUMERIC_REPLIES.items():
    setattr(Command, _name, Command(_numeric))
del _name, _numeric


class CommandCodec(Codec):
    """ Reference command codec. See RFC1459 section 2.3.1. """
    EMPTY = ParseResult.COMMAND_EMPTY

    def try_parse(self, text):
        if not text:
            return self.EMPTY, None

        # Exactly three digits: numeric reply.
        if len(text) == protocol.NUMERIC_LENGTH and all(ch in protocol.DIGITS for ch in text):
            return ParseResult.SUCCESS, Command(int(text))

        # Anything else must be a known name, made of ASCII letters only.
        if all(ch in protocol.LETTERS for ch in text):
            name = text.upper()
            if name in protocol.NAMED_COMMANDS:
                return ParseResult.SUCCESS, Command(name)

        return ParseResult.COMMAND_FORMAT, None

    def format(self, command):
        return str(command)


# Every valid token in canonical (upper case) form, mapped to a shared Command instance.
_COMMAND_TABLE = { '{:03d}'.format(numeric): Command(numeric)
                   for numeric in range(protocol.NUMERIC_MIN, protocol.NUMERIC_MAX + 1) }
_COMMAND_TABLE.update((name, getattr(Command, name)) for name in protocol.NAMED_COMMANDS)
_NUMERIC_TOKENS = tuple(sorted(token for token in _COMMAND_TABLE if token[0] in protocol.DIGITS))


class FastCommandCodec(Codec):
    """
    Table driven command codec.
    Behaves exactly like CommandCodec, but resolves tokens with a single lookup in a precomputed table
    and hands out shared Command instances.
    """
    EMPTY = ParseResult.COMMAND_EMPTY

    def try_parse(self, text):
        if not text:
            return self.EMPTY, None

        command = _COMMAND_TABLE.get(text)
        if command is None and all(ch in protocol.LETTERS for ch in text):
            command = _COMMAND_TABLE.get(text.upper())
        if command is None:
            return ParseResult.COMMAND_FORMAT, None

        return ParseResult.SUCCESS, command

    def format(self, command):
        if command.is_numeric:
            return _NUMERIC_TOKENS[command.numeric]
        return command.name
