# src/aistudio_exporter/writers/factory.py

from aistudio_exporter.errors import UnsupportedFormatError
from aistudio_exporter.observability.base import MetricsHook, NoOpMetricsHook

from .base import Writer
from .config import SQLITE_FORMATS, TEXT_FORMATS, WriterConfig
from .sqlitewriter import SQLiteWriter
from .textwriter import TextWriter


def create_writer(
    config: WriterConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Writer:
    """Create a writer from config.

    Format names are matched case-insensitively.

    Raises:
        UnsupportedFormatError: If the format is unknown.

    Example:
        >>> writer = create_writer(WriterConfig(path="out.db", format="sqlite"))
        >>> export_chunks("session.json", writer)
    """
    output_format = config.format.lower()

    if output_format in TEXT_FORMATS:
        return TextWriter(output_path=config.path, metrics_hook=metrics_hook)

    if output_format in SQLITE_FORMATS:
        return SQLiteWriter(db_path=config.path, metrics_hook=metrics_hook)

    raise UnsupportedFormatError(
        f"unsupported format: {config.format} (supported: txt, sqlite)"
    )
