"""
Tests for the fsrs-history command line.
"""

import json
import os
import tempfile

from fsrs import Scheduler
from typer.testing import CliRunner

from cli.main import app
from fsrs_history.core.events import FORGOTTEN
from fsrs_history.log import ReviewLogFile

from .helpers import review

runner = CliRunner()


def _write_log(tmpdir, events):
    path = os.path.join(tmpdir, "reviews.jsonl")
    ReviewLogFile(path).extend(events)
    return path


def test_replay_json_output():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_log(tmpdir, [review(1, 0), review(1, 5), review(1, 25)])

        result = runner.invoke(app, ["replay", "--log", path, "--end", "2024-01-26T12:00:00", "--json"])

        assert result.exit_code == 0, result.output
        out = json.loads(result.stdout)
        assert out["events_replayed"] == 3
        assert len(out["retention_by_day"]) == 26
        assert out["days"][0] == "2024-01-01"
        assert out["days"][-1] == "2024-01-26"
        assert len(out["digest"]) == 64
        assert "final_states" not in out


def test_replay_json_is_deterministic():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_log(tmpdir, [review(1, 0), review(2, 1), review(1, 3, FORGOTTEN), review(1, 4)])
        args = ["replay", "--log", path, "--end", "2024-01-10", "--json", "--show-states"]

        first = runner.invoke(app, args)
        second = runner.invoke(app, args)

        assert first.exit_code == 0, first.output
        assert first.stdout == second.stdout
        assert sorted(json.loads(first.stdout)["final_states"]) == ["1", "2"]


def test_replay_table_output():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_log(tmpdir, [review(1, 0), review(1, 2)])

        result = runner.invoke(
            app, ["replay", "--log", path, "--end", "2024-01-05", "--tail", "3", "--show-states"]
        )

        assert result.exit_code == 0, result.output
        assert "Replayed 2 events" in result.output
        assert "Retention by Day" in result.output
        assert "2024-01-05" in result.output


def test_replay_with_presets():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_log(tmpdir, [review(1, 0), review(2, 0), review(1, 3)])
        presets_path = os.path.join(tmpdir, "presets.json")
        weights = list(Scheduler().parameters)
        with open(presets_path, "w") as f:
            json.dump(
                {
                    "presets": {"default": {}, "custom": {"weights": weights, "desired_retention": 0.85}},
                    "items": {"1": "default", "2": "custom"},
                },
                f,
            )

        result = runner.invoke(
            app, ["replay", "--log", path, "--presets", presets_path, "--end", "2024-01-05", "--json"]
        )
        assert result.exit_code == 0, result.output

        # Item 3 has no preset.
        path = _write_log(tmpdir, [review(3, 4)])
        result = runner.invoke(
            app, ["replay", "--log", path, "--presets", presets_path, "--end", "2024-01-05", "--json"]
        )
        assert result.exit_code == 2
        assert "item 3" in json.loads(result.stdout)["error"]


def test_replay_missing_log():
    result = runner.invoke(app, ["replay", "--log", "/nonexistent/reviews.jsonl", "--json"])

    assert result.exit_code == 2
    assert json.loads(result.stdout)["error"] == "File not found"


def test_replay_empty_log():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "reviews.jsonl")
        open(path, "w").close()

        result = runner.invoke(app, ["replay", "--log", path])

        assert result.exit_code == 2
        assert "empty" in result.output


def test_log_tail_json():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_log(tmpdir, [review(1, 0), review(2, 1), review(1, 2, FORGOTTEN)])

        result = runner.invoke(app, ["log", "tail", "--log", path, "--lines", "2", "--json"])

        assert result.exit_code == 0, result.output
        out = json.loads(result.stdout)
        assert out["count"] == 2
        assert [e["grade"] for e in out["events"]] == [3, -1]


def test_log_inspect_filters():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_log(tmpdir, [review(1, 0), review(2, 1), review(1, 2, FORGOTTEN), review(1, 9)])

        result = runner.invoke(
            app, ["log", "inspect", "--log", path, "--item", "1", "--until", "2024-01-05", "--json"]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["count"] == 2

        result = runner.invoke(app, ["log", "inspect", "--log", path, "--item", "1"])
        assert result.exit_code == 0
        assert "Forget" in result.output
        assert "Forgets:" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "fsrs-history" in result.output
