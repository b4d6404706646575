# tags.py
# IRCv3 message tags. See https://ircv3.net/specs/extensions/message-tags.
import collections.abc
import re

from ircline.protocol import Codec, ParseError, ParseResult, ProtocolViolation

__all__ = [ 'Tags', 'LazyTags', 'TagsCodec', 'LazyTagsCodec', 'escape_value', 'unescape_value' ]


TAG_INDICATOR = '@'
TAG_SEPARATOR = ';'
TAG_VALUE_SEPARATOR = '='
TAG_ESCAPE = '\\'
# Characters that end a key on the wire.
TAG_KEY_FORBIDDEN = (' ', TAG_SEPARATOR, TAG_VALUE_SEPARATOR)

TAG_ESCAPES = {
    '\\': r'\\',
    ';': r'\:',
    ' ': r'\s',
    '\r': r'\r',
    '\n': r'\n',
}
TAG_UNESCAPES = { escaped[1]: value for value, escaped in TAG_ESCAPES.items() }

_ESCAPE_TABLE = str.maketrans(TAG_ESCAPES)
# A lone backslash at the very end has nothing to escape and stays as-is.
_ESCAPE_SEQUENCE = re.compile(r'\\(.)', re.DOTALL)


## Escaping.

def escape_value(value):
    """ Escape tag value for the wire. """
    return value.translate(_ESCAPE_TABLE)

def unescape_value(raw):
    """ Unescape tag value. Unknown escape sequences yield the escaped character itself. """
    if TAG_ESCAPE not in raw:
        return raw
    return _ESCAPE_SEQUENCE.sub(lambda match: TAG_UNESCAPES.get(match.group(1), match.group(1)), raw)


## Scanning.

def _scan_tags(raw, tags=None):
    """
    Walk key(=value)?(;key(=value)?)* in raw, storing unescaped values in `tags` if given.
    Return a ParseResult. A repeated key keeps its first position but takes the last value.
    """
    if not raw:
        return ParseResult.TAGS_EMPTY

    end = len(raw)
    start = 0
    while True:
        i = raw.find(TAG_SEPARATOR, start)
        if i == -1:
            stop = end
        else:
            stop = i
            if i + 1 == end:
                return ParseResult.TAGS_TRAILING_SEMICOLON

        j = raw.find(TAG_VALUE_SEPARATOR, start, stop)
        key_end = stop if j == -1 else j
        if key_end == start:
            return ParseResult.TAGS_KEY_EMPTY

        if tags is not None:
            tags[raw[start:key_end]] = '' if j == -1 else unescape_value(raw[j + 1:stop])

        if i == -1:
            return ParseResult.SUCCESS
        start = i + 1

def _find_tag(raw, key):
    """ Find the value of the last occurrence of key in raw tags without splitting them. Return None if absent. """
    if not isinstance(key, str) or not key or TAG_SEPARATOR in key or TAG_VALUE_SEPARATOR in key:
        return None

    length = len(raw)
    end = length
    while end > 0:
        i = raw.rfind(key, 0, end)
        if i == -1:
            return None

        after = i + len(key)
        # Separators never occur unescaped inside values, so this is a whole key.
        if (i == 0 or raw[i - 1] == TAG_SEPARATOR) and (after == length or raw[after] in (TAG_SEPARATOR, TAG_VALUE_SEPARATOR)):
            if after == length or raw[after] == TAG_SEPARATOR:
                return ''
            stop = raw.find(TAG_SEPARATOR, after)
            if stop == -1:
                stop = length
            return unescape_value(raw[after + 1:stop])

        end = after - 1

    return None


## Collections.

class Tags(collections.abc.Mapping):
    """
    Read-only, ordered mapping of tag keys to values.
    Flag tags (without a value) map to the empty string.
    """
    __slots__ = ('_storage',)

    def __init__(self, tags=()):
        storage = {}
        items = tags.items() if isinstance(tags, collections.abc.Mapping) else tags
        for key, value in items:
            if not key:
                raise ProtocolViolation('Tag keys must not be empty.', message=key)
            if any(ch in key for ch in TAG_KEY_FORBIDDEN):
                raise ProtocolViolation('Tag key {!r} contains a space, semicolon or equals sign.'.format(key), message=key)
            storage[key] = '' if value is None else value
        self._storage = storage

    @classmethod
    def _from_dict(cls, storage):
        tags = cls.__new__(cls)
        tags._storage = storage
        return tags

    def __getitem__(self, key):
        return self._storage[key]

    def __iter__(self):
        return iter(self._storage)

    def __len__(self):
        return len(self._storage)

    def __repr__(self):
        return '{cls}({storage!r})'.format(cls=self.__class__.__name__, storage=self._storage)


class LazyTags(collections.abc.Mapping):
    """
    Tags that keep their raw wire form and only split it when they have to.
    Single key lookups scan the raw string; iteration and len() build a Tags once and keep it.
    """
    __slots__ = ('_raw', '_tags')

    def __init__(self, raw):
        result = _scan_tags(raw)
        if not result:
            raise ParseError(result, message=raw)
        self._raw = raw
        self._tags = None

    @classmethod
    def _from_raw(cls, raw):
        tags = cls.__new__(cls)
        tags._raw = raw
        tags._tags = None
        return tags

    @property
    def raw(self):
        """ The tags as they appeared on the wire, without the leading '@'. """
        return self._raw

    @property
    def materialized(self):
        """ Whether the raw tags have been split into a Tags yet. """
        return self._tags is not None

    def _materialize(self):
        tags = self._tags
        if tags is None:
            # Racing callers may both build it; either result is complete and equal.
            storage = {}
            _scan_tags(self._raw, storage)
            tags = Tags._from_dict(storage)
            self._tags = tags
        return tags

    def __getitem__(self, key):
        tags = self._tags
        if tags is not None:
            return tags[key]

        value = _find_tag(self._raw, key)
        if value is None:
            raise KeyError(key)
        return value

    def __iter__(self):
        return iter(self._materialize())

    def __len__(self):
        return len(self._materialize())

    def __repr__(self):
        return '{cls}({raw!r})'.format(cls=self.__class__.__name__, raw=self._raw)


## Codecs.

class TagsCodec(Codec):
    """ Tags codec that splits and unescapes every tag up front. """
    EMPTY = ParseResult.TAGS_EMPTY

    def try_parse(self, text):
        if not text:
            return self.EMPTY, None

        storage = {}
        result = _scan_tags(text, storage)
        if not result:
            return result, None
        return result, Tags._from_dict(storage)

    def format(self, tags):
        raw_tags = []
        for key, value in tags.items():
            if value:
                raw_tags.append(key + TAG_VALUE_SEPARATOR + escape_value(value))
            else:
                raw_tags.append(key)
        return TAG_SEPARATOR.join(raw_tags)


class LazyTagsCodec(Codec):
    """
    Tags codec that only validates the tags and defers splitting them to the returned LazyTags.
    Fits best when a message is looked at for one tag or none.
    """
    EMPTY = ParseResult.TAGS_EMPTY

    def __init__(self):
        self._eager = TagsCodec()

    def try_parse(self, text):
        if not text:
            return self.EMPTY, None

        result = _scan_tags(text)
        if not result:
            return result, None
        return result, LazyTags._from_raw(text)

    def format(self, tags):
        if isinstance(tags, LazyTags):
            return tags.raw
        return self._eager.format(tags)
