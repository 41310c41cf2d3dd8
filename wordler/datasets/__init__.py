from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines, load_words
from .vocab import DATA_DIR, Vocabulary, default_paths, load_vocabulary

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "write_lines", "load_words",
    "DATA_DIR", "Vocabulary", "default_paths", "load_vocabulary",
]
