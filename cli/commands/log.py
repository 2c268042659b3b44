"""
Review log commands: tail, inspect
"""

import json
from datetime import datetime, timezone
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from fsrs_history.core.errors import EventFormatError
from fsrs_history.core.events import ReviewEvent
from fsrs_history.log import ReviewLogFile, event_to_record

app = typer.Typer()
console = Console()


def grade_name(event: ReviewEvent) -> str:
    if event.is_forget:
        return "Forget"
    try:
        return event.rating().name
    except ValueError:
        return str(event.grade)


def _parse_instant(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    ts = datetime.fromisoformat(value)
    return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)


def _print_events(events: List[ReviewEvent], title: str) -> None:
    table = Table(title=title)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Item", style="yellow", justify="right")
    table.add_column("Timestamp", style="green")
    table.add_column("Grade")

    for idx, ev in enumerate(events):
        table.add_row(str(idx), str(ev.item_id), ev.timestamp.isoformat(), grade_name(ev))

    console.print(table)
    console.print(f"\n[bold]Total events:[/bold] {len(events)}")


@app.command()
def tail(
    log_path: str = typer.Option(..., "--log", "-l", help="Path to JSONL review log"),
    lines: Optional[int] = typer.Option(None, "--lines", "-n", help="Number of events to show"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show the last events of a review log.

    Examples:
        fsrs-history log tail --log reviews.jsonl
        fsrs-history log tail --log reviews.jsonl --lines 10 --json
    """
    try:
        events = ReviewLogFile(log_path).read_all()
        if lines:
            events = events[-lines:]

        if not events:
            if json_output:
                print(json.dumps({"events": [], "count": 0}))
            else:
                console.print("[yellow]Review log is empty[/yellow]")
            raise typer.Exit(0)

        if json_output:
            records = [event_to_record(ev) for ev in events]
            print(json.dumps({"events": records, "count": len(records)}, indent=2))
        else:
            _print_events(events, f"Review Log: {log_path}")

        raise typer.Exit(0)

    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Log file not found", "path": log_path}))
        else:
            console.print(f"[red]Error: Log file not found:[/red] {log_path}")
        raise typer.Exit(2)
    except EventFormatError as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)


@app.command()
def inspect(
    log_path: str = typer.Option(..., "--log", "-l", help="Path to JSONL review log"),
    item: Optional[int] = typer.Option(None, "--item", "-i", help="Filter by item id"),
    since: Optional[str] = typer.Option(None, "--since", help="Only events at or after this ISO instant"),
    until: Optional[str] = typer.Option(None, "--until", help="Only events before this ISO instant"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Inspect a review log with filters.

    Examples:
        fsrs-history log inspect --log reviews.jsonl --item 42
        fsrs-history log inspect --log reviews.jsonl --since 2024-01-01 --until 2024-02-01
    """
    try:
        since_at = _parse_instant(since)
        until_at = _parse_instant(until)
        events = ReviewLogFile(log_path).read_all()

        if item is not None:
            events = [ev for ev in events if ev.item_id == item]
        if since_at is not None:
            events = [ev for ev in events if ev.timestamp >= since_at]
        if until_at is not None:
            events = [ev for ev in events if ev.timestamp < until_at]

        if not events:
            if json_output:
                print(json.dumps({"events": [], "count": 0}))
            else:
                console.print("[yellow]No events match the filters[/yellow]")
            raise typer.Exit(0)

        if json_output:
            records = [event_to_record(ev) for ev in events]
            print(json.dumps({"events": records, "count": len(records)}, indent=2))
        else:
            _print_events(events, f"Review Log: {log_path}")
            forgets = sum(1 for ev in events if ev.is_forget)
            console.print(f"[bold]Items:[/bold] {len({ev.item_id for ev in events})}  [bold]Forgets:[/bold] {forgets}")

        raise typer.Exit(0)

    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Log file not found", "path": log_path}))
        else:
            console.print(f"[red]Error: Log file not found:[/red] {log_path}")
        raise typer.Exit(2)
    except ValueError as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
