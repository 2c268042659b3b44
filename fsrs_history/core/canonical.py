"""
Canonical serialization for deterministic digests.

Replay output is compared across runs through these functions, so the same
result must always serialize to the same bytes.
"""

import json
from datetime import date, datetime
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert nested replay output to a canonical JSON-ready form.

    Rules:
    - dict keys stringified and sorted
    - tuples converted to lists
    - datetimes and dates rendered as ISO 8601
    - objects exposing to_dict() are expanded
    """
    if hasattr(obj, "to_dict"):
        return canonicalize(obj.to_dict())
    if isinstance(obj, dict):
        return {str(k): canonicalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Floats keep their shortest round-trip repr, so bit-identical values
    produce identical bytes.
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    return canonical_json_bytes(obj).decode("utf-8")
