import itertools

import pytest
from structlog.testing import capture_logs

from riddlebot.cipher import vigenere
from riddlebot.errors import NoKeyFound
from riddlebot.search import (
    KeySearchTask,
    ResultSlot,
    SearchResult,
    partition_key_space,
    scan_task,
    search_vigenere_key,
)

WORDS = frozenset({"the", "quick", "brown", "fox"})


class Everything:
    """A dictionary that recognises every word."""

    def __contains__(self, word):
        return True


class Exploding:
    def __contains__(self, word):
        raise RuntimeError("dictionary exploded")


class TestPartition:
    """Test suite for splitting the key space across workers"""

    @pytest.mark.parametrize("workers", [1, 2, 13, 26])
    def test_first_position_split_evenly(self, workers):
        tasks = partition_key_space(workers)
        assert len(tasks) == workers
        assert [k for task in tasks for k in task.first] == list(range(26))
        assert all(len(task.first) == 26 // workers for task in tasks)
        assert all(task.rest == (range(26), range(26), range(26)) for task in tasks)

    @pytest.mark.parametrize("workers", [1, 2, 13, 26])
    def test_task_sizes_cover_key_space(self, workers):
        assert sum(len(task) for task in partition_key_space(workers)) == 26 ** 4

    @pytest.mark.parametrize("workers", [1, 2, 3, 6])
    def test_every_key_exactly_once(self, workers):
        """Exhaustive check on a small alphabet so every key can be listed"""
        keys = [key for task in partition_key_space(workers, alphabet_size=6, key_length=3) for key in task.keys()]
        assert len(keys) == 6 ** 3
        assert set(keys) == set(itertools.product(range(6), repeat=3))

    @pytest.mark.parametrize("workers", [0, 3, 5, 27])
    def test_workers_must_divide_alphabet(self, workers):
        with pytest.raises(ValueError, match="evenly divide"):
            partition_key_space(workers)

    def test_key_length_must_be_positive(self):
        with pytest.raises(ValueError, match="key length"):
            partition_key_space(13, key_length=0)

    def test_scan_order(self):
        task = KeySearchTask(range(0, 2), (range(3),))
        assert list(task.keys()) == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
        assert len(task) == 6


class TestResultSlot:
    """Test suite for the first-match-wins result slot"""

    def test_first_publish_wins(self):
        slot: ResultSlot[SearchResult] = ResultSlot()
        first = SearchResult(key=(1,), text="first")
        second = SearchResult(key=(2,), text="second")

        assert slot.get() is None
        assert not slot.cancelled.is_set()

        assert slot.publish(first)
        assert slot.cancelled.is_set()

        assert not slot.publish(second)
        assert slot.get() == first

    def test_duplicate_is_logged_as_warning(self):
        slot: ResultSlot[str] = ResultSlot()
        slot.publish("kept")
        with capture_logs() as logs:
            slot.publish("dropped")

        assert len(logs) == 1
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["event"] == "duplicate match discarded"
        assert logs[0]["kept"] == "kept"
        assert logs[0]["discarded"] == "dropped"


class TestScanTask:
    """Test suite for a single worker"""

    def test_reports_first_match_in_scan_order(self):
        """Decoding "a" with -22 gives "e", which comes before "c" at -24"""
        slot: ResultSlot[SearchResult] = ResultSlot()
        task = partition_key_space(1, key_length=1)[0]
        scan_task(task, "a", frozenset({"c", "e"}), slot)
        assert slot.get() == SearchResult(key=(-22,), text="e")

    def test_stops_when_cancelled(self):
        slot: ResultSlot[SearchResult] = ResultSlot()
        slot.cancelled.set()
        task = partition_key_space(1, key_length=1)[0]
        scan_task(task, "a", Everything(), slot)
        assert slot.get() is None

    def test_silent_when_nothing_matches(self):
        slot: ResultSlot[SearchResult] = ResultSlot()
        task = partition_key_space(2, key_length=2)[0]
        scan_task(task, "xq", frozenset(), slot)
        assert slot.get() is None
        assert not slot.cancelled.is_set()


class TestSearchVigenereKey:
    """Test suite for the parallel key search"""

    def test_recovers_encoding_key(self):
        plaintext = "THE QUICK BROWN FOX"
        ciphertext = vigenere(plaintext, [1, 2, 3, 4])

        result = search_vigenere_key(ciphertext, WORDS, workers=13)

        assert result.key == (1, 2, 3, 4)
        assert result.text == plaintext

    def test_single_worker_short_key(self):
        ciphertext = vigenere("the fox", [5, 9])
        result = search_vigenere_key(ciphertext, WORDS, workers=1, key_length=2)
        assert [k % 26 for k in result.key] == [5, 9]
        assert result.text == "the fox"

    def test_exhausted_key_space(self):
        with pytest.raises(NoKeyFound):
            search_vigenere_key("xyz", frozenset(), workers=2, key_length=1)

    def test_only_one_result_survives_a_race(self):
        """Every worker matches on its first candidate; exactly one result is kept"""
        result = search_vigenere_key("ab", Everything(), workers=13, key_length=2)

        assert result.key[0] in range(0, 26, 2)
        assert result.key[1] == 0
        assert result.text == vigenere("ab", [-k for k in result.key])

    def test_worker_errors_propagate(self):
        with pytest.raises(RuntimeError, match="exploded"):
            search_vigenere_key("abc", Exploding(), workers=2, key_length=1)
