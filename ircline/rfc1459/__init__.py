from . import protocol, commands, prefix, parsing
from .commands import Command, CommandCodec, FastCommandCodec
from .prefix import Prefix, PrefixCodec
from .parsing import Message, MessageCodec
