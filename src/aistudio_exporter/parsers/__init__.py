from .json_parser import decode_root, parse_root
from .models import Chunk, ChunkedPrompt, Root

__all__ = [
    "Chunk",
    "ChunkedPrompt",
    "Root",
    "decode_root",
    "parse_root",
]
