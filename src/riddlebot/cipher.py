"""Letter-shift transforms used by the riddle service, plus the plaintext oracle.

Only ASCII letters are shifted. Every other character (digits, spaces,
punctuation, non-ASCII letters) is copied through untouched.
"""
import string
from typing import AbstractSet, Sequence, Tuple

ALPHABET_SIZE = 26

MATCH_PERCENT = 25

_LOWER_A = ord("a")
_UPPER_A = ord("A")


def reverse(text: str) -> str:
    return text[::-1]


def rot13(text: str) -> str:
    return caesar(text, 13)


def caesar(text: str, shift: int) -> str:
    return vigenere(text, [shift])


def vigenere(text: str, keys: Sequence[int]) -> str:
    """Shift each letter by the next key in `keys`, cycling through the key.

    The key index only advances after a letter has been consumed, so
    "AB CD" with keys [1, 2] shifts A by 1, B by 2, C by 1 and D by 2.
    """
    if len(keys) == 0:
        raise ValueError("vigenere needs at least one key")

    key_count = len(keys)
    i = 0
    out = []
    for c in text:
        if "a" <= c <= "z":
            out.append(chr((ord(c) - _LOWER_A + keys[i] + ALPHABET_SIZE) % ALPHABET_SIZE + _LOWER_A))
            i = (i + 1) % key_count
        elif "A" <= c <= "Z":
            out.append(chr((ord(c) - _UPPER_A + keys[i] + ALPHABET_SIZE) % ALPHABET_SIZE + _UPPER_A))
            i = (i + 1) % key_count
        else:
            out.append(c)
    return "".join(out)


def count_dictionary_words(text: str, dictionary: AbstractSet[str]) -> Tuple[int, int]:
    """Return (matched, total) for the whitespace separated words of `text`.

    Words are lowercased and stripped of surrounding punctuation before the
    lookup. A token that is pure punctuation still counts toward the total.
    """
    words = text.split()
    matched = 0
    for word in words:
        if word.strip(string.punctuation).lower() in dictionary:
            matched += 1
    return matched, len(words)


def looks_like_plaintext(text: str, dictionary: AbstractSet[str]) -> bool:
    """More than a quarter of the words must be dictionary words (integer math)."""
    matched, total = count_dictionary_words(text, dictionary)
    return matched > total * MATCH_PERCENT // 100


def contains_article(text: str) -> bool:
    """Cheap English check used for Caesar: the word "a" between two spaces."""
    return " a " in text.lower()
