from .processing import (
    SEPARATOR,
    is_visible,
    process_chunks,
    visible_chunks,
    visible_texts,
)

__all__ = [
    "SEPARATOR",
    "is_visible",
    "process_chunks",
    "visible_chunks",
    "visible_texts",
]
