"""Blocking JSON client for the riddle service."""
from typing import Any, Optional, Type, TypeVar
from urllib.parse import urljoin

from pydantic import BaseModel, ValidationError
import requests
import structlog

from riddlebot.errors import DecodeError, TransportError
from riddlebot.models import LoginRequest, LoginResponse, Riddle, RiddleAnswer, RiddleAnswerResponse

log = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.noopschallenge.com/"
START_PATH = "/riddlebot/start"

M = TypeVar("M", bound=BaseModel)


class RiddleClient:
    """Issues one request at a time over a shared session.

    `session` only needs a requests-style `request(method, url, json=..., timeout=...)`
    returning an object with `status_code`, `text` and `json()`.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, *, timeout: float = 30.0, session: Optional[Any] = None):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def url_for(self, path: str) -> str:
        return urljoin(self.base_url, path)

    def login(self, login: str) -> LoginResponse:
        return self._fetch(LoginResponse, "POST", START_PATH, LoginRequest(login=login))

    def fetch_riddle(self, path: str) -> Riddle:
        return self._fetch(Riddle, "GET", path)

    def submit_answer(self, path: str, answer: str) -> RiddleAnswerResponse:
        return self._fetch(RiddleAnswerResponse, "POST", path, RiddleAnswer(answer=answer))

    def _fetch(self, model: Type[M], method: str, path: str, body: Optional[BaseModel] = None) -> M:
        url = self.url_for(path)
        payload = body.model_dump() if body is not None else None

        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise TransportError(
                f"{method} {url} returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"{method} {url} did not return JSON: {response.text!r}") from e

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"{method} {url} returned an unexpected {model.__name__}: {e}") from e
