"""Recover plaintext for riddles that arrive without their key."""
from typing import AbstractSet

from riddlebot.cipher import ALPHABET_SIZE, caesar, contains_article
from riddlebot.errors import NoKeyFound
from riddlebot.search import DEFAULT_WORKERS, KEY_LENGTH, SearchResult, search_vigenere_key


def find_caesar_key(text: str) -> SearchResult:
    """Try shifts 0..25 in order and keep the first one that yields " a ".

    The returned key is the encoding shift (the negated decoding shift).
    """
    for shift in range(ALPHABET_SIZE):
        candidate = caesar(text, shift)
        if contains_article(candidate):
            return SearchResult(key=(-shift,), text=candidate)
    raise NoKeyFound(f"no Caesar shift of {text!r} contains the word 'a'")


def caesar_unknown_key(text: str) -> str:
    return find_caesar_key(text).text


def vigenere_unknown_key(
    text: str,
    dictionary: AbstractSet[str],
    workers: int = DEFAULT_WORKERS,
) -> str:
    return search_vigenere_key(text, dictionary, workers=workers, key_length=KEY_LENGTH).text
