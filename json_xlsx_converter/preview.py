from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from .fields import derive_fields, order_selection, project_rows
from .records import LoadedDataset


def build_preview_frame(headers: Sequence[str], rows: Sequence[Dict[str, Any]]) -> pd.DataFrame:
    """Tabulate rows under `headers`; absent keys display as empty strings."""
    table = [["" if row.get(h) is None else row[h] for h in headers] for row in rows]
    return pd.DataFrame(table, columns=list(headers))


def preview_dataset(
    dataset: Optional[LoadedDataset],
    selected_fields: Optional[Sequence[str]] = None,
    limit: Optional[int] = None,
) -> Tuple[List[str], pd.DataFrame]:
    """Project the dataset onto the selection and tabulate it.

    Headers are re-derived from the projected rows, so deselected fields drop
    out of the table. With `selected_fields` of None every field is shown.
    """
    if dataset is None:
        return [], build_preview_frame([], [])

    fields = dataset.fields
    if selected_fields is not None:
        fields = order_selection(fields, selected_fields)

    rows = project_rows(dataset.rows, fields)
    if limit is not None:
        rows = rows[:max(0, int(limit))]
    headers = derive_fields(rows)
    return headers, build_preview_frame(headers, rows)
