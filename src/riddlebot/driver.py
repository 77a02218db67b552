"""The fetch, solve, submit loop."""
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Callable, List, Optional

import structlog

from riddlebot import cipher, solvers
from riddlebot.client import RiddleClient
from riddlebot.errors import ProtocolViolation
from riddlebot.models import (
    Caesar,
    CaesarUnknownKey,
    CipherSpec,
    Reverse,
    Rot13,
    Vigenere,
    VigenereUnknownKey,
)
from riddlebot.search import DEFAULT_WORKERS

log = structlog.get_logger(__name__)


class DriverState(str, Enum):
    AWAITING_RIDDLE = "awaiting_riddle"
    TERMINATED = "terminated"


@dataclass(frozen=True, slots=True)
class RiddleRecord:
    """One solved riddle and what the service said about it."""

    index: int
    path: str
    riddle_type: str
    riddle_text: str
    answer: str
    next_path: Optional[str] = None
    certificate: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DriverOutcome:
    records: List[RiddleRecord]
    certificate: Optional[str] = None


type ProgressFn = Callable[[RiddleRecord], None]


def solve_riddle(spec: CipherSpec, dictionary: AbstractSet[str], workers: int = DEFAULT_WORKERS) -> str:
    """Decode one riddle. Stored keys are encoding keys, so they are negated here."""
    match spec:
        case Reverse(text):
            return cipher.reverse(text)
        case Rot13(text):
            return cipher.rot13(text)
        case Caesar(text, key):
            return cipher.caesar(text, -key)
        case Vigenere(text, key):
            return cipher.vigenere(text, [-k for k in key])
        case CaesarUnknownKey(text):
            return solvers.caesar_unknown_key(text)
        case VigenereUnknownKey(text):
            return solvers.vigenere_unknown_key(text, dictionary, workers=workers)
        case _:
            raise TypeError(f"Not a cipher spec: {spec!r}")


class RiddleDriver:

    def __init__(
        self,
        client: RiddleClient,
        dictionary: AbstractSet[str],
        *,
        workers: int = DEFAULT_WORKERS,
        on_progress: Optional[ProgressFn] = None,
    ):
        self.client = client
        self.dictionary = dictionary
        self.workers = workers
        self.on_progress = on_progress
        self.state = DriverState.AWAITING_RIDDLE
        self.records: List[RiddleRecord] = []

    def step(self, path: str) -> RiddleRecord:
        """Fetch, solve and answer the riddle at `path`."""
        riddle = self.client.fetch_riddle(path)
        log.info("riddle fetched", path=path, riddle_type=riddle.riddleType, has_key=riddle.riddleKey is not None)

        spec = riddle.cipher_spec()
        answer = solve_riddle(spec, self.dictionary, self.workers)
        log.info("submitting answer", path=path, answer=answer)

        response = self.client.submit_answer(path, answer)
        next_path = response.nextRiddlePath or None
        if next_path is None and response.certificate is None:
            raise ProtocolViolation(f"answer to {path} was accepted but no next riddle or certificate was given")

        record = RiddleRecord(
            index=len(self.records) + 1,
            path=path,
            riddle_type=type(spec).__name__,
            riddle_text=riddle.riddleText,
            answer=answer,
            next_path=next_path,
            certificate=response.certificate,
        )
        self.records.append(record)
        if self.on_progress is not None:
            self.on_progress(record)
        return record

    def run(self, login: str) -> DriverOutcome:
        """Log in and answer riddles until the chain ends.

        Returns once the service hands out a certificate. Every failure is
        raised, after the driver is marked terminated.
        """
        try:
            start = self.client.login(login)
            log.info("logged in", login=login, message=start.message)

            path: Optional[str] = start.riddlePath or None
            if path is None:
                raise ProtocolViolation(f"login as {login} was accepted but no riddle path was given")
            while path is not None:
                record = self.step(path)
                path = record.next_path
        finally:
            self.state = DriverState.TERMINATED

        certificate = self.records[-1].certificate if self.records else None
        log.info("riddle chain complete", solved=len(self.records), certificate=certificate)
        return DriverOutcome(records=list(self.records), certificate=certificate)
