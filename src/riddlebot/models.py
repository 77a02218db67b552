from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, StrictInt

from riddlebot.errors import DecodeError


class LoginRequest(BaseModel):
    login: str


class LoginResponse(BaseModel):
    message: str
    riddlePath: str


class RiddleAnswer(BaseModel):
    answer: str


class RiddleAnswerResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    result: Literal["correct"]
    message: Optional[str] = None
    nextRiddlePath: Optional[str] = None
    certificate: Optional[str] = None


# ---- Cipher specs, one per riddle variant ----
@dataclass(frozen=True, slots=True)
class Reverse:
    text: str


@dataclass(frozen=True, slots=True)
class Rot13:
    text: str


@dataclass(frozen=True, slots=True)
class Caesar:
    text: str
    key: int


@dataclass(frozen=True, slots=True)
class Vigenere:
    text: str
    key: Tuple[int, ...]


@dataclass(frozen=True, slots=True)
class CaesarUnknownKey:
    text: str


@dataclass(frozen=True, slots=True)
class VigenereUnknownKey:
    text: str


type CipherSpec = Union[Reverse, Rot13, Caesar, Vigenere, CaesarUnknownKey, VigenereUnknownKey]


class Riddle(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str
    riddlePath: str
    exampleResponse: RiddleAnswer
    riddleType: str
    riddleText: str
    riddleKey: Union[StrictInt, List[StrictInt], None] = None

    def cipher_spec(self) -> CipherSpec:
        """Map the payload to its cipher variant.

        A missing key on a caesar or vigenere riddle selects the unknown-key
        variant; a key of the wrong shape is a decode error.
        """
        text = self.riddleText
        key = self.riddleKey

        match self.riddleType:
            case "reverse":
                return Reverse(text)
            case "rot13":
                return Rot13(text)
            case "caesar":
                if key is None:
                    return CaesarUnknownKey(text)
                if not isinstance(key, int):
                    raise DecodeError(f"caesar riddle key must be an integer, got {key!r}")
                return Caesar(text, key)
            case "vigenere":
                if key is None:
                    return VigenereUnknownKey(text)
                if not isinstance(key, list) or len(key) == 0:
                    raise DecodeError(f"vigenere riddle key must be a non-empty list, got {key!r}")
                return Vigenere(text, tuple(key))
            case _:
                raise DecodeError(f"Unknown riddle type: {self.riddleType!r}")
