"""
Cipher application pipeline.

This module provides:
- ChunkedApplier: splits text into chunks and applies a cipher on worker threads
- Chunk: a slice of text with its offset and key phase
- ProcessingResult: output text and the chunks that produced it
"""

from mpags_cipher.services.pipeline.applier import Chunk, ChunkedApplier, ProcessingResult

__all__ = [
    "Chunk",
    "ChunkedApplier",
    "ProcessingResult",
]
