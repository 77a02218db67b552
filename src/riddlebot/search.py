"""Parallel brute force over fixed-length Vigenère keys.

The first key position is split into equal contiguous ranges, one per
worker thread; the other positions are scanned in full by every worker.
The first worker to decode something that looks like plaintext publishes
it to a shared ResultSlot, which also tells every other worker to stop.
"""
import itertools
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import AbstractSet, Generic, Iterator, List, Optional, Tuple, TypeVar

import structlog

from riddlebot.cipher import ALPHABET_SIZE, looks_like_plaintext, vigenere
from riddlebot.errors import NoKeyFound

log = structlog.get_logger(__name__)

KEY_LENGTH = 4
DEFAULT_WORKERS = 13  # 26 splits evenly

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SearchResult:
    key: Tuple[int, ...]
    text: str


@dataclass(frozen=True, slots=True)
class KeySearchTask:
    """One worker's share of the key space."""

    first: range
    rest: Tuple[range, ...]

    def keys(self) -> Iterator[Tuple[int, ...]]:
        """Candidate keys in scan order: every position ascending, last one fastest."""
        return itertools.product(self.first, *self.rest)

    def __len__(self) -> int:
        size = len(self.first)
        for r in self.rest:
            size *= len(r)
        return size


class ResultSlot(Generic[T]):
    """Thread-safe, size=1, first-wins cell. A successful publish cancels the search."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._has_value = False
        self._value: Optional[T] = None
        self.cancelled = threading.Event()

    def publish(self, item: T) -> bool:
        """Store `item` unless a value is already there. Returns True if it was stored."""
        with self._lock:
            if self._has_value:
                log.warning("duplicate match discarded", kept=self._value, discarded=item)
                return False
            self._value = item
            self._has_value = True
            self.cancelled.set()
            return True

    def get(self) -> Optional[T]:
        with self._lock:
            return self._value


def partition_key_space(
    workers: int,
    alphabet_size: int = ALPHABET_SIZE,
    key_length: int = KEY_LENGTH,
) -> List[KeySearchTask]:
    """Split the first key position into `workers` equal ranges."""
    if key_length < 1:
        raise ValueError(f"key length must be positive, got {key_length}")
    if workers < 1 or alphabet_size % workers != 0:
        raise ValueError(f"{workers} workers do not evenly divide an alphabet of {alphabet_size}")

    step = alphabet_size // workers
    rest = tuple(range(alphabet_size) for _ in range(key_length - 1))
    return [KeySearchTask(range(start, start + step), rest) for start in range(0, alphabet_size, step)]


def scan_task(
    task: KeySearchTask,
    ciphertext: str,
    dictionary: AbstractSet[str],
    slot: ResultSlot[SearchResult],
) -> None:
    """Try every key of `task` until one decodes to plaintext or the slot is cancelled.

    Candidates are encoding keys; the text is decoded with their negation and
    the published result carries that decoding key.
    """
    for candidate in task.keys():
        if slot.cancelled.is_set():
            return
        decoding_key = tuple(-k for k in candidate)
        text = vigenere(ciphertext, decoding_key)
        if looks_like_plaintext(text, dictionary):
            slot.publish(SearchResult(key=decoding_key, text=text))
            return


def search_vigenere_key(
    ciphertext: str,
    dictionary: AbstractSet[str],
    *,
    workers: int = DEFAULT_WORKERS,
    key_length: int = KEY_LENGTH,
) -> SearchResult:
    """Block until a worker finds the key or the whole key space is exhausted.

    The returned key is the encoding key, i.e. the one the riddle was
    enciphered with.
    """
    tasks = partition_key_space(workers, key_length=key_length)
    slot: ResultSlot[SearchResult] = ResultSlot()

    log.debug("key search started", workers=workers, key_length=key_length, keys_per_worker=len(tasks[0]))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="key-search") as executor:
        futures = [executor.submit(scan_task, task, ciphertext, dictionary, slot) for task in tasks]
        try:
            for future in futures:
                future.result()
        except BaseException:
            # Stop the remaining workers before the executor joins them.
            slot.cancelled.set()
            raise

    found = slot.get()
    if found is None:
        raise NoKeyFound(f"no {key_length}-letter key decodes {ciphertext!r} to dictionary words")

    key = tuple(-k for k in found.key)
    log.debug("key search finished", key=key)
    return SearchResult(key=key, text=found.text)
