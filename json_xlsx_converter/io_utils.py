from __future__ import annotations

import json
import os
from typing import Any, List

from .errors import ParseError, ShapeError


def _decode(content) -> str:
    if isinstance(content, bytes):
        # utf-8-sig also strips a leading BOM.
        return content.decode('utf-8-sig')
    return content.lstrip('\ufeff')


def read_json_content(file_obj) -> Any:
    """Read JSON content from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
    else:
        # Plain paths first: pathlib.Path also has a .name
        path = file_obj if isinstance(file_obj, (str, os.PathLike)) else file_obj.name
        with open(path, 'rb') as f:
            content = f.read()

    try:
        return json.loads(_decode(content))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(str(e)) from e


def load_records(file_obj) -> List[Any]:
    """Parse a file and insist that its top level is a JSON array."""
    data = read_json_content(file_obj)
    if not isinstance(data, list):
        raise ShapeError()
    return data


def source_name(file_obj) -> str:
    """Best-effort base name of an uploaded file, path or file object."""
    if file_obj is None:
        return ''
    if isinstance(file_obj, (str, os.PathLike)):
        return os.path.basename(os.fspath(file_obj))
    # Gradio uploads carry the temp path on .orig_name / .name
    name = getattr(file_obj, 'orig_name', None) or getattr(file_obj, 'name', None) or ''
    return os.path.basename(str(name))
