from typing import List, Literal, Optional, Union

from pydantic import BaseModel


class StartRequest(BaseModel):
    login: str


class StartResponse(BaseModel):
    message: str
    riddlePath: str


class AnswerRequest(BaseModel):
    answer: str


class RiddleResponse(BaseModel):
    message: str
    riddlePath: str
    exampleResponse: AnswerRequest
    riddleType: Literal["reverse", "rot13", "caesar", "vigenere"]
    riddleText: str
    riddleKey: Union[int, List[int], None] = None


class AnswerResponse(BaseModel):
    result: Literal["correct"]
    message: str
    nextRiddlePath: Optional[str] = None
    certificate: Optional[str] = None
