"""Plain text writer: visible chunks joined with the fixed separator."""

import logging
import os
from pathlib import Path
from time import monotonic

from aistudio_exporter.chunking.processing import process_chunks
from aistudio_exporter.errors import WriteError
from aistudio_exporter.observability import names
from aistudio_exporter.observability.base import MetricsHook, NoOpMetricsHook
from aistudio_exporter.parsers.models import Root

from .base import Writer

logger = logging.getLogger(__name__)

FILE_MODE = 0o644


def _open_with_mode(path: str, flags: int) -> int:
    return os.open(path, flags, FILE_MODE)


class TextWriter(Writer):
    """Writes the joined export text as the whole content of one file.

    The file is created or truncated. Newly created files get FILE_MODE
    (subject to the process umask). No trailing newline is added.

    Example:
        >>> writer = TextWriter(output_path="session.txt")
        >>> writer.write(root)
    """

    def __init__(
        self,
        output_path: str | Path,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.metrics_hook = metrics_hook
        self._output_path = str(output_path)

    @property
    def output_path(self) -> str:
        return self._output_path

    def write(self, root: Root) -> None:
        start = monotonic()
        content = process_chunks(root)

        try:
            # newline="" keeps "\n" in chunk text and separators untranslated
            with open(
                self._output_path,
                "w",
                encoding="utf-8",
                newline="",
                opener=_open_with_mode,
            ) as f:
                f.write(content)
        except (OSError, ValueError) as exc:
            logger.error("Failed writing %s: %s", self._output_path, exc)
            raise WriteError(
                "error writing to output file", path=self._output_path, cause=exc
            ) from exc

        logger.info("Wrote %d characters to %s", len(content), self._output_path)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.TEXT_WRITE_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.WRITER_OPERATIONS_TOTAL, labels={"writer": "text"}
        )
