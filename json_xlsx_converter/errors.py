from __future__ import annotations


class ConverterError(Exception):
    """Base class for failures reported back to the user."""


class ParseError(ConverterError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Error reading JSON file: {detail}")


class ShapeError(ConverterError):
    def __init__(self, message: str = 'JSON data must be an array of objects.'):
        super().__init__(message)


class EmptySelectionError(ConverterError):
    def __init__(self, message: str = 'Please select at least one field to export.'):
        super().__init__(message)


class NoDataError(ConverterError):
    def __init__(self, message: str = 'No data to convert. Please upload a JSON file first.'):
        super().__init__(message)
