from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from .settings import DEFAULT_SETTINGS, ConverterSettings

LOGGER = logging.getLogger(__name__)

SCALAR_TYPES = (str, int, float, bool)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_whole_float(value: Any) -> bool:
    # Past 1e21 integral floats keep exponent notation.
    return isinstance(value, float) and value.is_integer() and abs(value) < 1e21


def scalar_to_text(value: Any) -> str:
    """Render a scalar the way it reads in the source JSON."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if _is_whole_float(value):
        return str(int(value))
    return str(value)


def normalize_numbers(value: Any) -> Any:
    """Turn whole floats into ints throughout a nested list/dict."""
    if _is_whole_float(value):
        return int(value)
    if isinstance(value, dict):
        return {k: normalize_numbers(v) for k, v in value.items()}
    if isinstance(value, list):
        return [normalize_numbers(v) for v in value]
    return value


def format_timestamp(value: float, fmt: str = DEFAULT_SETTINGS.timestamp_format) -> str:
    """Format epoch milliseconds as a local-time string."""
    return datetime.fromtimestamp(value / 1000).strftime(fmt)


def clean_list(values: List[Any]) -> str:
    """Join scalar lists with ', '; re-encode anything nested as compact JSON."""
    if all(isinstance(v, SCALAR_TYPES) for v in values):
        return ', '.join(scalar_to_text(v) for v in values)
    return json.dumps(normalize_numbers(values), ensure_ascii=False, separators=(',', ':'))


def flatten_record(
    record: Dict[str, Any],
    parent_key: str = '',
    settings: ConverterSettings = DEFAULT_SETTINGS,
    result: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Flatten one JSON object into dotted-path keys, cleaning values on the way.

    Nested objects are walked depth-first and never emitted themselves. Lists
    become a single cell. Recognized timestamp keys holding a positive number
    are rendered as dates. Everything else, None included, passes through.
    """
    if result is None:
        result = {}

    for key, value in record.items():
        path = f"{parent_key}.{key}" if parent_key else key

        if isinstance(value, dict):
            flatten_record(value, path, settings, result)
        elif isinstance(value, list):
            result[path] = clean_list(value)
        elif key in settings.timestamp_fields and is_number(value) and value > 0:
            try:
                result[path] = format_timestamp(value, settings.timestamp_format)
            except (OverflowError, OSError, ValueError):
                # Outside what the platform clock can represent.
                result[path] = value
        else:
            result[path] = value

    return result


def flatten_records(
    records: Iterable[Any],
    settings: ConverterSettings = DEFAULT_SETTINGS,
) -> List[Dict[str, Any]]:
    """Flatten every element of a JSON array, keeping positions aligned."""
    rows: List[Dict[str, Any]] = []
    for index, record in enumerate(records):
        if isinstance(record, dict):
            rows.append(flatten_record(record, settings=settings))
        else:
            LOGGER.warning(
                "Element %d is %s, not an object; emitting an empty row "
                "(strings are not split into per-character columns).",
                index,
                type(record).__name__,
            )
            rows.append({})
    return rows
