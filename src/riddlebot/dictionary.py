"""Word list used to recognise plaintext during the Vigenère search."""
from importlib import resources
from typing import FrozenSet, Iterable, Optional

import structlog

from riddlebot.errors import DictionaryError

log = structlog.get_logger(__name__)

BUNDLED_WORDS = "words.txt"


def parse_words(lines: Iterable[str]) -> FrozenSet[str]:
    """One word per line; blank lines and '#' comments are skipped."""
    words = set()
    for line in lines:
        word = line.strip().lower()
        if word and not word.startswith("#"):
            words.add(word)
    return frozenset(words)


def load_dictionary(path: Optional[str] = None) -> FrozenSet[str]:
    """Load the word list at `path`, or the bundled one when no path is given."""
    if path is None:
        source = resources.files("riddlebot.data").joinpath(BUNDLED_WORDS)
        with source.open("r", encoding="utf-8") as f:
            words = parse_words(f)
        path = f"<bundled {BUNDLED_WORDS}>"
    else:
        try:
            with open(path, "r", encoding="utf-8") as f:
                words = parse_words(f)
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryError(f"cannot read word list {path}: {e}") from e

    log.debug("dictionary loaded", path=path, words=len(words))
    return words
