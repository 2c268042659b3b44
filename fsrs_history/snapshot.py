"""
Deterministic result snapshot utilities.

Ensures the same ReplayResult always produces the same bytes and digest.
"""

import hashlib
from typing import Any, Dict

from .core.canonical import canonical_json_bytes
from .core.state import ReplayResult


def result_to_dict(result: ReplayResult) -> Dict[str, Any]:
    return {
        "start_day": result.start_day,
        "end_day": result.end_day,
        "retention_by_day": list(result.retention_by_day),
        "final_states": {
            item_id: state.to_dict() for item_id, state in result.final_states.items()
        },
    }


def serialize_result(result: ReplayResult) -> bytes:
    """Canonical JSON bytes of a replay result."""
    return canonical_json_bytes(result_to_dict(result))


def result_digest(result: ReplayResult) -> str:
    """
    SHA-256 of the canonical result.

    Two replays with bit-identical output have equal digests.
    """
    return hashlib.sha256(serialize_result(result)).hexdigest()
