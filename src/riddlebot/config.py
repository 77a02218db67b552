from dataclasses import dataclass
from typing import Literal, Optional

from riddlebot.client import DEFAULT_BASE_URL
from riddlebot.search import DEFAULT_WORKERS

type LogLevel = Literal["debug", "info", "warning", "error"]


@dataclass(frozen=True, slots=True)
class Settings:
    """Everything the command line can change about a run."""

    login: str
    base_url: str = DEFAULT_BASE_URL
    dictionary_path: Optional[str] = None
    workers: int = DEFAULT_WORKERS
    timeout: float = 30.0
    log_level: LogLevel = "info"
    log_json: bool = False
    live: bool = False
