from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence


def derive_fields(rows: Iterable[Dict[str, Any]]) -> List[str]:
    """Collect every key across rows, first-seen order, no duplicates."""
    seen: Dict[str, None] = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def default_selection(fields: Sequence[str]) -> List[str]:
    # Every field starts out checked.
    return list(fields)


def order_selection(fields: Sequence[str], selected: Iterable[str]) -> List[str]:
    """Return the selected fields in field-set order, dropping unknown names."""
    chosen = set(selected or [])
    return [f for f in fields if f in chosen]


def project_rows(rows: Iterable[Dict[str, Any]], fields: Sequence[str]) -> List[Dict[str, Any]]:
    """Restrict each row to `fields`. Missing keys are left out, not set to None."""
    projected: List[Dict[str, Any]] = []
    for row in rows:
        projected.append({f: row[f] for f in fields if f in row})
    return projected
