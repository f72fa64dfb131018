from __future__ import annotations

import logging
import os
from typing import List, Optional

import gradio as gr

from .errors import ConverterError
from .export import export_dataset
from .fields import default_selection
from .preview import preview_dataset
from .records import LoadedDataset, load_dataset
from .settings import DEFAULT_SETTINGS, ConverterSettings

LOGGER = logging.getLogger(__name__)


def _preview_update(dataset: Optional[LoadedDataset], selected, settings: ConverterSettings):
    _, frame = preview_dataset(dataset, selected, settings.preview_limit)
    return gr.update(value=frame, visible=len(frame.index) > 0)


def _empty_load(message: str):
    return (
        None,
        gr.update(choices=[], value=[], visible=False),
        gr.update(value=None, visible=False),
        message,
    )


def load_file_handler(file_obj, settings: ConverterSettings = DEFAULT_SETTINGS):
    """Parse and flatten an upload, then reset field selection and preview.

    Returns (dataset, field checkboxes, preview table, status). Any previous
    dataset is discarded, including when the new file fails to load.
    """
    if file_obj is None:
        return _empty_load("")

    try:
        dataset = load_dataset(file_obj, settings)
    except ConverterError as e:
        LOGGER.warning("Load failed: %s", e)
        return _empty_load(str(e))

    fields = dataset.fields
    selected = default_selection(fields)
    status = f"Loaded {dataset.source_name}: {len(dataset)} records, {len(fields)} fields."
    return (
        dataset,
        gr.update(choices=fields, value=selected, visible=bool(fields)),
        _preview_update(dataset, selected, settings),
        status,
    )


def selection_change_handler(dataset: Optional[LoadedDataset], selected_fields: List[str],
                             settings: ConverterSettings = DEFAULT_SETTINGS):
    return _preview_update(dataset, selected_fields or [], settings)


def convert_handler(dataset: Optional[LoadedDataset], selected_fields: List[str],
                    settings: ConverterSettings = DEFAULT_SETTINGS):
    """Export the selected columns; returns (download path, status)."""
    try:
        path = export_dataset(dataset, selected_fields, settings)
    except ConverterError as e:
        LOGGER.warning("Conversion refused: %s", e)
        return None, str(e)
    except Exception as e:
        LOGGER.exception("Export failed")
        return None, f"Error during export: {str(e)}"

    file_name = os.path.basename(path)
    return path, f"Conversion successful! Downloading {file_name}"
