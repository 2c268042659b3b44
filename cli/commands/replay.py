"""
Replay command: Replay a review log and print the retention curve
"""

import json
from datetime import datetime, timezone
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from fsrs_history.core.canonical import canonical_json_str
from fsrs_history.core.errors import ConfigurationError, ReplayError
from fsrs_history.log import ReviewLogFile
from fsrs_history.model import FSRSModel, MemoryModel, PerItemModels
from fsrs_history.model.resolver import ModelSource
from fsrs_history.replay import historical_replay
from fsrs_history.snapshot import result_digest, result_to_dict

console = Console()


def parse_end(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO date or datetime; naive values are taken as UTC."""
    if value is None:
        return None
    try:
        end = datetime.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"not an ISO date or datetime: {value}")
    if end.tzinfo is None:
        end = end.replace(tzinfo=timezone.utc)
    return end


def parse_weights(value: Optional[str]) -> Optional[List[float]]:
    if not value:
        return None
    try:
        return [float(w) for w in value.split(",")]
    except ValueError:
        raise typer.BadParameter(f"weights must be comma-separated numbers: {value}")


def load_presets(path: str) -> PerItemModels:
    """
    Load per-item models from a presets file.

    Format:
        {"presets": {"default": {"weights": [...], "desired_retention": 0.9}},
         "items": {"1": "default", "2": "default"}}
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    try:
        presets: Dict[str, MemoryModel] = {
            name: FSRSModel(
                parameters=cfg.get("weights"),
                desired_retention=cfg.get("desired_retention", 0.9),
            )
            for name, cfg in data["presets"].items()
        }
        items = {int(item_id): preset for item_id, preset in data["items"].items()}
    except (KeyError, AttributeError, TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid presets file {path}: {e}") from e

    return PerItemModels.from_presets(items, presets)


def replay_command(
    log_path: str = typer.Option(..., "--log", "-l", help="Path to JSONL review log"),
    end: Optional[str] = typer.Option(None, "--end", "-e", help="End of analysis window (ISO date, default now)"),
    rollover_ms: int = typer.Option(0, "--rollover-ms", help="Milliseconds after midnight a new day starts"),
    weights: Optional[str] = typer.Option(None, "--weights", "-w", help="Comma-separated FSRS parameters"),
    desired_retention: float = typer.Option(0.9, "--desired-retention", help="FSRS desired retention"),
    presets: Optional[str] = typer.Option(None, "--presets", "-p", help="JSON file with per-item presets"),
    tail: int = typer.Option(14, "--tail", "-n", help="Number of trailing days to show"),
    show_states: bool = typer.Option(False, "--show-states", "-s", help="Show final item states"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay a review log and print the summed retrievability per day.

    Examples:
        fsrs-history replay --log reviews.jsonl
        fsrs-history replay --log reviews.jsonl --end 2024-06-30 --rollover-ms 14400000
        fsrs-history replay --log reviews.jsonl --presets presets.json --json
    """
    try:
        end_at = parse_end(end)
        if presets:
            models: ModelSource = load_presets(presets)
        else:
            models = FSRSModel(parameters=parse_weights(weights), desired_retention=desired_retention)

        events = ReviewLogFile(log_path).read_all()
        result = historical_replay(events, models, rollover_ms=rollover_ms, end=end_at)
        digest = result_digest(result)

        if json_output:
            output = result_to_dict(result)
            output["days"] = [d.isoformat() for d in result.day_dates()]
            output["events_replayed"] = len(events)
            output["digest"] = digest
            if not show_states:
                output.pop("final_states")
            print(canonical_json_str(output))
        else:
            console.print(f"[green]✓ Replayed {len(events)} events for {len(result.final_states)} items[/green]")
            console.print(f"  Days: [cyan]{len(result.retention_by_day)}[/cyan]")
            console.print(f"  Digest: [yellow]{digest}[/yellow]")

            table = Table(title="Retention by Day")
            table.add_column("Day", style="cyan", justify="right")
            table.add_column("Date", style="green")
            table.add_column("Expected recalled", style="yellow", justify="right")

            days = range(result.start_day, result.start_day + len(result.retention_by_day))
            rows = list(zip(days, result.day_dates(), result.retention_by_day))
            if tail > 0:
                rows = rows[-tail:]
            for day, date, value in rows:
                table.add_row(str(day), date.isoformat(), f"{value:.3f}")
            console.print(table)

            if show_states:
                states = Table(title="Final States")
                states.add_column("Item", style="cyan", justify="right")
                states.add_column("Stability", justify="right")
                states.add_column("Difficulty", justify="right")
                states.add_column("Last Review", style="dim")
                for item_id in sorted(result.final_states):
                    st = result.final_states[item_id]
                    states.add_row(
                        str(item_id),
                        f"{st.stability:.2f}",
                        f"{st.difficulty:.2f}",
                        st.last_review.isoformat() if st.last_review else "-",
                    )
                console.print(states)

        raise typer.Exit(0)

    except FileNotFoundError as e:
        missing = e.filename or log_path
        if json_output:
            print(json.dumps({"error": "File not found", "path": missing}))
        else:
            console.print(f"[red]Error: File not found:[/red] {missing}")
        raise typer.Exit(2)
    except (ReplayError, ValueError) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
