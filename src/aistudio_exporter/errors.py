# src/aistudio_exporter/errors.py

"""Exceptions raised by aistudio-exporter.

Every error keeps the underlying exception in ``cause`` and is raised
``from`` it, so the original traceback is preserved.
"""


class ExportError(Exception):
    """Base class for exporter errors."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.path = path
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ReadError(ExportError):
    """Input file could not be read."""


class ParseError(ExportError):
    """Input is not valid JSON."""


class MalformedInputError(ParseError):
    """Input is valid JSON but not shaped like a chunked prompt export."""


class WriteError(ExportError):
    """Text destination could not be created or written."""


class StoreError(ExportError):
    """Base class for SQLite store errors."""


class StoreOpenError(StoreError):
    pass


class SchemaError(StoreError):
    pass


class InsertError(StoreError):
    pass


class UnsupportedFormatError(ExportError, ValueError):
    """Unknown output format name."""
