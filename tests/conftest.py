import json
from pathlib import Path

import pytest

from aistudio_exporter.parsers.models import Chunk, ChunkedPrompt, Root


class RecordingMetricsHook:
    """Collects metric calls for assertions."""

    def __init__(self) -> None:
        self.latencies: list[tuple[str, float, dict[str, str] | None]] = []
        self.counters: list[tuple[str, int, dict[str, str] | None]] = []
        self.gauges: list[tuple[str, float, dict[str, str] | None]] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies.append((name, value_ms, labels))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters.append((name, value, labels))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges.append((name, value, labels))


def _make_root(*chunks: tuple[str, bool]) -> Root:
    return Root(
        chunked_prompt=ChunkedPrompt(
            chunks=tuple(
                Chunk(text=text, is_thought=thought) for text, thought in chunks
            )
        )
    )


@pytest.fixture
def make_root():
    """Build a Root from (text, is_thought) pairs."""
    return _make_root


@pytest.fixture
def metrics_hook() -> RecordingMetricsHook:
    return RecordingMetricsHook()


@pytest.fixture
def mixed_root() -> Root:
    return _make_root(
        ("Chunk 1", False),
        ("Thought", True),
        ("Chunk 2", False),
        ("", False),
    )


@pytest.fixture
def write_input(tmp_path: Path):
    """Write a JSON export document (or raw text) and return its path."""

    def _write(document: object, name: str = "input.json") -> Path:
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document)
        else:
            path.write_text(json.dumps(document))
        return path

    return _write
