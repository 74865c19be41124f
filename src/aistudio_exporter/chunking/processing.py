# src/aistudio_exporter/chunking/processing.py

from aistudio_exporter.parsers.models import Chunk, Root

SEPARATOR = "\n---\n"


def is_visible(chunk: Chunk) -> bool:
    """A chunk is exported iff it is not a thought and its text is non-empty."""
    return not chunk.is_thought and chunk.text != ""


def visible_chunks(root: Root) -> list[Chunk]:
    return [chunk for chunk in root.chunked_prompt.chunks if is_visible(chunk)]


def visible_texts(root: Root) -> list[str]:
    return [chunk.text for chunk in visible_chunks(root)]


def process_chunks(root: Root) -> str:
    """
    Join the visible chunk texts of an export with SEPARATOR.

    Texts are copied verbatim and keep their source order. An export
    with no visible chunks yields an empty string.
    """
    return SEPARATOR.join(visible_texts(root))
