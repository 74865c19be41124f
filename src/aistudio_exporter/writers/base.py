from typing import Protocol

from aistudio_exporter.observability.base import MetricsHook
from aistudio_exporter.parsers.models import Root


class Writer(Protocol):
    metrics_hook: MetricsHook

    def write(self, root: Root) -> None:
        """
        Write the visible chunks of an export to the destination.

        Raises an ExportError subclass on failure. Nothing is retried.
        """
        ...
