from .base import Writer
from .config import OutputFormat, WriterConfig
from .factory import create_writer
from .sqlitewriter import TABLE_NAME, SQLiteWriter, ensure_schema
from .textwriter import TextWriter
from .types import ChunkRecord

__all__ = [
    "ChunkRecord",
    "OutputFormat",
    "SQLiteWriter",
    "TABLE_NAME",
    "TextWriter",
    "Writer",
    "WriterConfig",
    "create_writer",
    "ensure_schema",
]
