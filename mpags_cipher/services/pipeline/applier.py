"""
Chunked concurrent cipher application.

The text is cut into contiguous chunks, each chunk is handed to its own
worker thread, and the worker outputs are joined back together by chunk
index. Where a chunk boundary may fall is decided by the cipher:

1. prepare() rewrites the whole text first (Playfair pairing and padding)
2. align() moves each naive split point onto a safe boundary
3. phase_at() tells each chunk where in the key it starts (Vigenère)

The joined output is identical to a single sequential apply_cipher() call.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass

from mpags_cipher.core.config import get_settings
from mpags_cipher.core.exceptions import ProcessingError, WorkerTimeoutError
from mpags_cipher.models.schemas import CipherMode
from mpags_cipher.services.engines.base import Cipher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Chunk:
    """A contiguous slice of the text assigned to one worker."""

    index: int
    offset: int
    text: str
    phase: int = 0

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class ProcessingResult:
    """Output text together with the chunks that produced it."""

    output: str
    chunks: list[Chunk]


class ChunkedApplier:
    """
    Applies a cipher to text using a pool of worker threads.

    Worker count and the overall wait timeout come from settings unless
    given explicitly.
    """

    def __init__(self, workers: int | None = None, timeout: float | None = None):
        settings = get_settings()
        self.workers = workers if workers is not None else settings.worker_count
        self.timeout = timeout if timeout is not None else settings.worker_timeout_seconds

        if self.workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {self.workers}")
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")

    def plan(self, text: str, cipher: Cipher) -> list[Chunk]:
        """
        Split prepared text into chunks on cipher-safe boundaries.

        The text is divided into roughly equal slices, the last absorbing the
        remainder. Split points are then aligned by the cipher, and slices
        that end up empty are dropped.

        Args:
            text: Text already passed through cipher.prepare()
            cipher: The cipher that will process the chunks

        Returns:
            Chunks in text order, indexed from 0
        """
        count = min(self.workers, len(text))
        if count == 0:
            return []

        size = len(text) // count
        bounds = [0]
        for i in range(1, count):
            bounds.append(max(bounds[-1], cipher.align(text, i * size)))
        bounds.append(len(text))

        chunks: list[Chunk] = []
        for start, end in zip(bounds, bounds[1:]):
            if start == end:
                continue
            chunks.append(Chunk(
                index=len(chunks),
                offset=start,
                text=text[start:end],
                phase=cipher.phase_at(text, start),
            ))

        return chunks

    def process(self, text: str, cipher: Cipher, mode: CipherMode) -> str:
        """Apply the cipher to the whole text concurrently and return the output."""
        return self.run(text, cipher, mode).output

    def run(self, text: str, cipher: Cipher, mode: CipherMode) -> ProcessingResult:
        """
        Apply the cipher to the whole text concurrently.

        Args:
            text: Sanitized text
            cipher: A constructed cipher, shared read-only by all workers
            mode: Encrypt or decrypt

        Returns:
            ProcessingResult whose output is identical to
            cipher.apply_cipher(text, mode), with the chunks that were dispatched

        Raises:
            WorkerTimeoutError: If workers are still running after the timeout
            ProcessingError: If any worker raised
        """
        prepared = cipher.prepare(text, mode)
        chunks = self.plan(prepared, cipher)
        if not chunks:
            return ProcessingResult(output="", chunks=[])

        logger.debug(
            "Applying %s (%s) over %d chunk(s): %s",
            cipher.name,
            mode.value,
            len(chunks),
            [(c.offset, c.length, c.phase) for c in chunks],
        )

        executor = ThreadPoolExecutor(
            max_workers=len(chunks),
            thread_name_prefix="cipher-worker",
        )
        try:
            futures = [
                executor.submit(cipher.apply_cipher, chunk.text, mode, chunk.phase)
                for chunk in chunks
            ]
            _, not_done = wait(futures, timeout=self.timeout)
            if not_done:
                logger.error(
                    "%d of %d worker(s) did not finish within %ss",
                    len(not_done), len(futures), self.timeout,
                )
                raise WorkerTimeoutError(len(not_done), self.timeout)

            failures: dict[int, BaseException] = {}
            outputs: list[str] = []
            for chunk, future in zip(chunks, futures):
                exc = future.exception()
                if exc is not None:
                    logger.error("Worker for chunk %d failed: %r", chunk.index, exc)
                    failures[chunk.index] = exc
                else:
                    outputs.append(future.result())
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        if failures:
            raise ProcessingError(
                f"{len(failures)} of {len(chunks)} worker(s) failed",
                failures=failures,
            )

        return ProcessingResult(output="".join(outputs), chunks=chunks)
