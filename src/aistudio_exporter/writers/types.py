from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkRecord:
    """Persisted form of a visible chunk. ``id`` is assigned by the store."""

    text: str
    id: int | None = None
