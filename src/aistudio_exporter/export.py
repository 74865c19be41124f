# src/aistudio_exporter/export.py

import logging
from pathlib import Path
from time import monotonic

from aistudio_exporter.errors import ExportError, ReadError
from aistudio_exporter.observability import names
from aistudio_exporter.observability.base import MetricsHook, NoOpMetricsHook
from aistudio_exporter.parsers.json_parser import parse_root
from aistudio_exporter.writers.base import Writer

logger = logging.getLogger(__name__)


def export_chunks(
    input_path: str | Path,
    writer: Writer,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> None:
    """Read an export document and hand its chunks to a writer.

    Args:
        input_path: Path to the JSON export.
        writer: Destination for the visible chunks.
        metrics_hook: Optional metrics hook for observability.

    Raises:
        ReadError: If the input cannot be read.
        ParseError: If the input is not valid JSON.
        MalformedInputError: If the JSON is not shaped like an export.
        ExportError: Whatever the writer raises, unchanged.

    Example:
        >>> export_chunks("session.json", TextWriter(output_path="session.txt"))
    """
    start = monotonic()
    input_path = str(input_path)
    logger.info("Exporting %s with %s", input_path, type(writer).__name__)

    try:
        try:
            data = Path(input_path).read_bytes()
        except (OSError, ValueError) as exc:
            logger.error("Failed reading %s: %s", input_path, exc)
            raise ReadError(
                "error reading input file", path=input_path, cause=exc
            ) from exc

        root = parse_root(data)
        metrics_hook.record_gauge(
            names.INPUT_CHUNKS, len(root.chunked_prompt.chunks)
        )

        writer.write(root)
    except ExportError:
        metrics_hook.increment(names.EXPORT_ERRORS_TOTAL)
        raise

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.EXPORT_DURATION, elapsed_ms)
    metrics_hook.increment(names.EXPORTS_TOTAL)
    logger.info("Exported %s in %.1f ms", input_path, elapsed_ms)
