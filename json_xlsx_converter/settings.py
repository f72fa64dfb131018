from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

# Keys whose positive numeric values are epoch milliseconds.
TIMESTAMP_FIELDS: FrozenSet[str] = frozenset(
    {'createdOn', 'modifiedOn', 'dueDate', 'reportedTime', 'remainingTime'}
)
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'
SHEET_NAME = 'Data'
OUTPUT_EXTENSION = '.xlsx'


@dataclass(frozen=True)
class ConverterSettings:
    """Knobs shared by the transform, preview and export layers."""

    timestamp_fields: FrozenSet[str] = TIMESTAMP_FIELDS
    timestamp_format: str = TIMESTAMP_FORMAT
    sheet_name: str = SHEET_NAME
    output_extension: str = OUTPUT_EXTENSION
    output_dir: str = field(default_factory=tempfile.gettempdir)
    preview_limit: Optional[int] = None

    @classmethod
    def from_env(cls, environ=None) -> 'ConverterSettings':
        """Build settings, applying JSON_XLSX_* environment overrides."""
        env = os.environ if environ is None else environ
        kwargs = {}

        output_dir = env.get('JSON_XLSX_OUTPUT_DIR', '').strip()
        if output_dir:
            kwargs['output_dir'] = output_dir

        limit = env.get('JSON_XLSX_PREVIEW_LIMIT', '').strip()
        if limit:
            try:
                kwargs['preview_limit'] = max(0, int(limit))
            except ValueError:
                raise ValueError(f"JSON_XLSX_PREVIEW_LIMIT must be an integer, got {limit!r}") from None

        ts_fields = env.get('JSON_XLSX_TIMESTAMP_FIELDS', '').strip()
        if ts_fields:
            kwargs['timestamp_fields'] = frozenset(
                name.strip() for name in ts_fields.split(',') if name.strip()
            )

        return cls(**kwargs)


DEFAULT_SETTINGS = ConverterSettings()
