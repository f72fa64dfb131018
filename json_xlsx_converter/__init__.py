"""Core logic for the JSON to XLSX converter.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse a JSON array upload
- flatten and clean each object into dot-path columns
- derive and project the selectable fields
- write the selection to a spreadsheet
"""
