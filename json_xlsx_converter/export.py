from __future__ import annotations

import logging
import os
from typing import Any, Dict, Iterable, List, Optional, Sequence

import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from .errors import EmptySelectionError, NoDataError
from .fields import order_selection, project_rows
from .records import LoadedDataset
from .settings import DEFAULT_SETTINGS, ConverterSettings

LOGGER = logging.getLogger(__name__)


def output_filename_for(source: str, extension: str = DEFAULT_SETTINGS.output_extension) -> str:
    """Swap the source file's extension for the spreadsheet one."""
    base = os.path.basename(source or '') or 'output'
    stem, _ = os.path.splitext(base)
    return f"{stem or base}{extension}"


def clean_cell(value: Any) -> Any:
    # Control characters are not allowed in worksheet XML.
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub('', value)
    return value


def build_frame(rows: Iterable[Dict[str, Any]], fields: Sequence[str]) -> pd.DataFrame:
    # Fields a row lacks come out as empty cells.
    cleaned = [{clean_cell(k): clean_cell(v) for k, v in row.items()} for row in rows]
    return pd.DataFrame(cleaned, columns=[clean_cell(f) for f in fields])


def force_text_cells(worksheet) -> None:
    """Store every string cell as text, so a leading '=' is not a formula."""
    for row in worksheet.iter_rows():
        for cell in row:
            if isinstance(cell.value, str) and cell.data_type != 's':
                cell.data_type = 's'


def write_workbook(
    rows: Iterable[Dict[str, Any]],
    fields: Sequence[str],
    path: str,
    sheet_name: str = DEFAULT_SETTINGS.sheet_name,
) -> str:
    frame = build_frame(rows, fields)
    with pd.ExcelWriter(path, engine='openpyxl') as writer:
        frame.to_excel(writer, sheet_name=sheet_name, index=False)
        force_text_cells(writer.sheets[sheet_name])
    return path


def export_dataset(
    dataset: Optional[LoadedDataset],
    selected_fields: Optional[Iterable[str]],
    settings: ConverterSettings = DEFAULT_SETTINGS,
) -> str:
    """Write the selected columns of a loaded dataset to an .xlsx file.

    Returns the path of the written workbook. Raises NoDataError when nothing
    has been loaded (or the array was empty) and EmptySelectionError when no
    field is selected.
    """
    if dataset is None or len(dataset) == 0:
        raise NoDataError()

    fields: List[str] = order_selection(dataset.fields, selected_fields or [])
    if not fields:
        raise EmptySelectionError()

    rows = project_rows(dataset.rows, fields)
    file_name = output_filename_for(dataset.source_name, settings.output_extension)
    os.makedirs(settings.output_dir, exist_ok=True)
    path = os.path.join(settings.output_dir, file_name)

    write_workbook(rows, fields, path, settings.sheet_name)
    LOGGER.info("Exported %d rows x %d columns to %s", len(rows), len(fields), path)
    return path
