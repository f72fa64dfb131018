from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .fields import derive_fields
from .flattening import flatten_records
from .io_utils import load_records, source_name
from .settings import DEFAULT_SETTINGS, ConverterSettings

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedDataset:
    """One successful load: the raw array and its flattened rows, same order.

    A new upload replaces the whole dataset; nothing here is mutated.
    """

    source_name: str
    records: Tuple[Any, ...]
    rows: Tuple[Dict[str, Any], ...]

    @property
    def fields(self):
        return derive_fields(self.rows)

    def __len__(self) -> int:
        return len(self.rows)


def load_dataset(file_obj, settings: ConverterSettings = DEFAULT_SETTINGS) -> LoadedDataset:
    records = load_records(file_obj)
    rows = flatten_records(records, settings)
    dataset = LoadedDataset(
        source_name=source_name(file_obj),
        records=tuple(records),
        rows=tuple(rows),
    )
    LOGGER.info("Loaded %s: %d records", dataset.source_name or '<unnamed>', len(dataset))
    return dataset
