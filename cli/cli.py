"""CLI for the shift-request engine.

Developer CLI to try parsing and slot matching offline against JSON files,
exercising the same parser and matcher the chat bot uses.

Examples:
    shiftbot parse "Стрижавка 18-09 9.12 Зваричевський Юрій" --catalog catalog.json
    shiftbot match "пошта 11.12 Дима Маслов" --slots slots.json --catalog catalog.json
"""

from datetime import date

import typer
from loguru import logger
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shiftbot.core.logger import setup_logger
from shiftbot.errors import DataFileError
from shiftbot.integrations.files import FilePlaceCatalog, FileScheduleLookup
from shiftbot.matching.scoring import MatchConfig
from shiftbot.matching.types import SlotMatchResult
from shiftbot.parsing.parser import ShiftRequestParser
from shiftbot.parsing.types import ParsedShiftRequest
from shiftbot.services.shift_request_service import ShiftRequestService
from shiftbot.stopwords.index import StopWordIndex

# Initialize Rich console for output
console = Console()

# Initialize Typer app
app = typer.Typer(
    name="shiftbot",
    help="Shift request parser and slot matcher - offline testing",
    add_completion=False,
)

EXIT_DATA_ERROR = 1
EXIT_NOT_A_REQUEST = 2


def _setup_logging(debug: bool = False) -> None:
    """Set up console logging.

    Args:
        debug: Enable debug logging level
    """
    setup_logger(level="DEBUG" if debug else None)


def _parse_today(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}") from e


def _build_parser(catalog_path: str | None, today: date | None) -> ShiftRequestParser:
    index = StopWordIndex()
    if catalog_path:
        index.refresh(FilePlaceCatalog(catalog_path))
    clock = (lambda: today) if today else None
    return ShiftRequestParser(index, today=clock)


def _print_request(request: ParsedShiftRequest) -> None:
    console.print(
        Panel(
            JSON(request.model_dump_json(indent=2)),
            title="Parsed shift request",
            border_style="green",
        )
    )


def _print_not_a_request() -> None:
    console.print(
        Panel(
            Text("Not a shift request", style="bold yellow"),
            subtitle="no date or time, or neither a place nor a name",
            border_style="yellow",
        )
    )


def _print_matches(result: SlotMatchResult) -> None:
    if not result.found():
        console.print("[yellow]No matching slot[/yellow]")
        return

    table = Table(title="Matching slots")
    table.add_column("#", justify="right")
    table.add_column("Slot", justify="right")
    table.add_column("Place")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Score", justify="right")
    table.add_column("Place/Time/Date", justify="right")
    table.add_column("Free/Total", justify="right")

    for rank, match in enumerate(result.matches, start=1):
        slot = match.slot
        availability = slot.availability
        table.add_row(
            str(rank),
            str(slot.id),
            slot.place_name,
            slot.start.strftime("%Y-%m-%d %H:%M"),
            slot.end.strftime("%Y-%m-%d %H:%M"),
            f"{match.score:.3f}",
            f"{match.place_score:.2f}/{match.time_score:.2f}/{match.date_score:.2f}",
            f"{availability.available_places}/{availability.total_places}",
        )
    console.print(table)

    if result.is_ambiguous():
        console.print(f"[yellow]{len(result.matches)} slots are near-tied; ask the user to choose.[/yellow]")


@app.command()
def parse(
    text: str = typer.Argument(..., help="Chat message to parse"),
    catalog: str | None = typer.Option(None, "--catalog", "-c", help="Place catalog JSON file"),
    today: str | None = typer.Option(None, "--today", help="Reference day (YYYY-MM-DD) for year inference"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Parse one chat message and print the structured request."""
    _setup_logging(debug)
    reference_day = _parse_today(today)

    try:
        parser = _build_parser(catalog, reference_day)
    except DataFileError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=EXIT_DATA_ERROR) from e

    request = parser.parse(text)
    if request is None:
        _print_not_a_request()
        raise typer.Exit(code=EXIT_NOT_A_REQUEST)

    _print_request(request)


@app.command()
def match(
    text: str = typer.Argument(..., help="Chat message to resolve"),
    slots: str = typer.Option(..., "--slots", "-s", help="Slot feed JSON file"),
    catalog: str | None = typer.Option(None, "--catalog", "-c", help="Place catalog JSON file"),
    today: str | None = typer.Option(None, "--today", help="Reference day (YYYY-MM-DD)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Parse a chat message and rank the slots it may refer to."""
    _setup_logging(debug)
    reference_day = _parse_today(today)

    try:
        parser = _build_parser(catalog, reference_day)
        schedule = FileScheduleLookup(slots, today=reference_day)
    except DataFileError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=EXIT_DATA_ERROR) from e

    clock = (lambda: reference_day) if reference_day else None
    service = ShiftRequestService(parser, schedule, config=MatchConfig.from_settings(), today=clock)
    resolution = service.resolve(text)
    if resolution is None:
        _print_not_a_request()
        raise typer.Exit(code=EXIT_NOT_A_REQUEST)

    _print_request(resolution.request)
    _print_matches(resolution.result)
    logger.debug("Match command finished", retained=len(resolution.result.matches))


if __name__ == "__main__":
    app()
