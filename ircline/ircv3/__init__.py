from . import tags
from .tags import Tags, LazyTags, TagsCodec, LazyTagsCodec, escape_value, unescape_value
