from contextlib import contextmanager
from typing import Iterator, List, Literal, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.live import Live
from rich.panel import Panel
from rich.table import Table

from riddlebot.driver import ProgressFn, RiddleRecord


COLORS = {
    "index": "dim",
    "riddle_type": "cyan",
    "riddle_text": "dark_red",
    "answer": "spring_green2",
    "certificate": "bold yellow",
}

MAX_TEXT_WIDTH = 60

type Column = Literal["index", "riddle_type", "riddle_text", "answer"]


def truncate(text: str, width: int = MAX_TEXT_WIDTH) -> str:
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"


def styled(value: str, column: Column) -> str:
    return f"[{COLORS[column]}]{escape(value)}[/{COLORS[column]}]"


def render(records: Sequence[RiddleRecord]):
    """Render every solved riddle as one table row."""
    if not records:
        return Panel("Waiting for the first riddle…", title="Riddlebot", border_style="dim")

    table = Table(title=f"Riddles solved: {len(records)}")
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Riddle")
    table.add_column("Answer")

    for record in records:
        table.add_row(
            styled(str(record.index), "index"),
            styled(record.riddle_type, "riddle_type"),
            styled(truncate(record.riddle_text), "riddle_text"),
            styled(truncate(record.answer), "answer"),
        )

    last = records[-1]
    if last.certificate is not None:
        table.caption = f"[{COLORS['certificate']}]certificate: {last.certificate}[/{COLORS['certificate']}]"
    return table


def print_record(console: Console, record: RiddleRecord) -> None:
    """Plain, one line per riddle output for non-live runs."""
    console.print(
        f"{styled(f'#{record.index}', 'index')} {styled(record.riddle_type, 'riddle_type')} "
        f"{styled(truncate(record.riddle_text), 'riddle_text')} -> {styled(record.answer, 'answer')}",
        markup=True,
        highlight=False,
    )


@contextmanager
def progress_reporter(live: bool, console: Optional[Console] = None) -> Iterator[ProgressFn]:
    """Yield a progress callback for the driver, redrawing a live table if asked."""
    console = console or Console()

    if not live:
        yield lambda record: print_record(console, record)
        return

    records: List[RiddleRecord] = []
    with Live(render(records), console=console, refresh_per_second=10, screen=False) as view:

        def update(record: RiddleRecord) -> None:
            records.append(record)
            view.update(render(records))

        yield update
