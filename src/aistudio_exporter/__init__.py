# Chunk model
from .parsers import Chunk, ChunkedPrompt, Root, decode_root, parse_root

# Transform
from .chunking import SEPARATOR, process_chunks, visible_chunks, visible_texts

# Errors
from .errors import (
    ExportError,
    InsertError,
    MalformedInputError,
    ParseError,
    ReadError,
    SchemaError,
    StoreError,
    StoreOpenError,
    UnsupportedFormatError,
    WriteError,
)

# Export
from .export import export_chunks

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Writers
from .writers import (
    ChunkRecord,
    SQLiteWriter,
    TextWriter,
    Writer,
    WriterConfig,
    create_writer,
    ensure_schema,
)

__all__ = [
    # Chunk model
    "Chunk",
    "ChunkedPrompt",
    "Root",
    "decode_root",
    "parse_root",
    # Transform
    "SEPARATOR",
    "process_chunks",
    "visible_chunks",
    "visible_texts",
    # Errors
    "ExportError",
    "InsertError",
    "MalformedInputError",
    "ParseError",
    "ReadError",
    "SchemaError",
    "StoreError",
    "StoreOpenError",
    "UnsupportedFormatError",
    "WriteError",
    # Export
    "export_chunks",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Writers
    "ChunkRecord",
    "SQLiteWriter",
    "TextWriter",
    "Writer",
    "WriterConfig",
    "create_writer",
    "ensure_schema",
]
