from .validator import validate_wordlist, pretty_summary
from .io import ResourceMissing, read_lines, write_lines
from .source import WordListSource, StaticWordSource, DEFAULT_START_WORDS

__all__ = ["validate_wordlist", "pretty_summary", "ResourceMissing", "read_lines",
           "write_lines", "WordListSource", "StaticWordSource", "DEFAULT_START_WORDS"]
