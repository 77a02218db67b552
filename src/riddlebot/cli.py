import sys
from typing import Optional

import click
from rich.console import Console

from riddlebot.cipher import ALPHABET_SIZE
from riddlebot.client import DEFAULT_BASE_URL, RiddleClient
from riddlebot.config import Settings
from riddlebot.dictionary import load_dictionary
from riddlebot.driver import DriverOutcome, RiddleDriver
from riddlebot.errors import RiddlebotError
from riddlebot.log import configure_logging
from riddlebot.search import DEFAULT_WORKERS
from riddlebot.ui import progress_reporter


def check_workers(ctx: click.Context, param: click.Parameter, value: int) -> int:
    if value < 1 or ALPHABET_SIZE % value != 0:
        raise click.BadParameter(f"must evenly divide {ALPHABET_SIZE}, got {value}")
    return value


def run(settings: Settings, console: Optional[Console] = None) -> DriverOutcome:
    """Load the dictionary, connect and drive the riddle chain to its end."""
    dictionary = load_dictionary(settings.dictionary_path)
    client = RiddleClient(settings.base_url, timeout=settings.timeout)

    with progress_reporter(settings.live, console) as on_progress:
        driver = RiddleDriver(client, dictionary, workers=settings.workers, on_progress=on_progress)
        return driver.run(settings.login)


@click.command()
@click.argument("login")
@click.option("--base-url", envvar="RIDDLEBOT_BASE_URL", default=DEFAULT_BASE_URL, show_default=True,
              help="Root URL of the riddle service.")
@click.option("--dictionary", "dictionary_path", envvar="RIDDLEBOT_DICTIONARY", default=None,
              type=click.Path(exists=True, dir_okay=False), help="Newline separated word list.")
@click.option("--workers", envvar="RIDDLEBOT_WORKERS", default=DEFAULT_WORKERS, show_default=True,
              type=int, callback=check_workers, help="Threads for the Vigenère key search.")
@click.option("--timeout", envvar="RIDDLEBOT_TIMEOUT", default=30.0, show_default=True, type=float,
              help="Seconds to wait for each HTTP response.")
@click.option("--log-level", envvar="RIDDLEBOT_LOG_LEVEL", default="info", show_default=True,
              type=click.Choice(["debug", "info", "warning", "error"]))
@click.option("--log-json", envvar="RIDDLEBOT_LOG_JSON", is_flag=True, help="Log as JSON instead of text.")
@click.option("--live", is_flag=True, help="Show a live table of solved riddles.")
def cli(login: str, base_url: str, dictionary_path: Optional[str], workers: int, timeout: float,
        log_level: str, log_json: bool, live: bool):
    """Log in as LOGIN and solve riddles until the chain ends."""
    settings = Settings(
        login=login,
        base_url=base_url,
        dictionary_path=dictionary_path,
        workers=workers,
        timeout=timeout,
        log_level=log_level,
        log_json=log_json,
        live=live,
    )
    configure_logging(settings.log_level, json=settings.log_json)

    try:
        outcome = run(settings)
    except RiddlebotError as e:
        click.echo(f"Got error {e}")
        sys.exit(1)
    except Exception as e:
        click.echo(f"Got error {e!r}")
        sys.exit(1)

    click.echo(f"Solved {len(outcome.records)} riddles. Certificate: {outcome.certificate}")


if __name__ == "__main__":
    cli()
