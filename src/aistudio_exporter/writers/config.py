# src/aistudio_exporter/writers/config.py

from dataclasses import dataclass
from typing import Literal

OutputFormat = Literal["txt", "text", "sqlite", "db"]

TEXT_FORMATS = ("txt", "text")
SQLITE_FORMATS = ("sqlite", "db")


@dataclass(frozen=True)
class WriterConfig:
    """Configuration for output writers.

    Immutable. Explicit. No defaults read from the environment.
    """

    path: str
    format: OutputFormat = "txt"
