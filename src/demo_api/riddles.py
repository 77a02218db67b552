"""The riddle chain served by the demo API."""
from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple, Union

from riddlebot import cipher

type RiddleType = Literal["reverse", "rot13", "caesar", "vigenere"]


@dataclass(frozen=True, slots=True)
class RiddleSpec:
    riddle_type: RiddleType
    plaintext: str
    key: Union[int, Tuple[int, ...], None] = None
    reveal_key: bool = True

    def ciphertext(self) -> str:
        """Encode the plaintext the way the real service does."""
        match self.riddle_type:
            case "reverse":
                return cipher.reverse(self.plaintext)
            case "rot13":
                return cipher.rot13(self.plaintext)
            case "caesar":
                return cipher.caesar(self.plaintext, self.key)
            case "vigenere":
                return cipher.vigenere(self.plaintext, self.key)
            case _:
                raise ValueError(f"Invalid riddle type: {self.riddle_type}")

    def public_key(self) -> Union[int, List[int], None]:
        """The key as sent on the wire, or None for unknown-key riddles."""
        if not self.reveal_key or self.key is None:
            return None
        if isinstance(self.key, tuple):
            return list(self.key)
        return self.key


DEFAULT_CHAIN: Tuple[RiddleSpec, ...] = (
    RiddleSpec("reverse", "Riddle me this, riddle me that."),
    RiddleSpec("rot13", "hello world"),
    RiddleSpec("caesar", "The quick brown fox jumps over the lazy dog.", key=7),
    RiddleSpec("vigenere", "Every secret message has a key.", key=(1, 2, 3, 4)),
    RiddleSpec("caesar", "this is a riddle with a hidden key", key=11, reveal_key=False),
    RiddleSpec(
        "vigenere",
        "the brave king found the hidden message before the people could read it",
        key=(3, 14, 15, 9),
        reveal_key=False,
    ),
)


def riddle_path(index: int) -> str:
    return f"/riddlebot/riddles/{index}"


def lookup(chain: Tuple[RiddleSpec, ...], index: int) -> Optional[RiddleSpec]:
    if 0 <= index < len(chain):
        return chain[index]
    return None
