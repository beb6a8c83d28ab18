from .validator import validate_corpus, pretty_summary
from .io import read_lines, write_lines, load_corpus, filter_wordlist

__all__ = ["validate_corpus", "pretty_summary", "read_lines", "write_lines", "load_corpus",
           "filter_wordlist"]
