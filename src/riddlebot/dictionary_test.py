import pytest

from riddlebot.dictionary import load_dictionary, parse_words
from riddlebot.errors import DictionaryError


def test_parse_words():
    words = parse_words(["The\n", "  quick \n", "\n", "# comment\n", "FOX"])
    assert words == frozenset({"the", "quick", "fox"})


def test_load_dictionary_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("brown\nfox\n", encoding="utf-8")
    assert load_dictionary(str(path)) == frozenset({"brown", "fox"})


def test_bundled_dictionary():
    words = load_dictionary()
    assert {"the", "quick", "brown", "fox", "a"} <= words
    assert all(word == word.lower() for word in words)


def test_invalid_utf8_is_a_dictionary_error(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"fox\n\xff\xfe\n")
    with pytest.raises(DictionaryError, match="cannot read word list"):
        load_dictionary(str(path))


def test_missing_file_is_a_dictionary_error(tmp_path):
    with pytest.raises(DictionaryError):
        load_dictionary(str(tmp_path / "missing.txt"))
