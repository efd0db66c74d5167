# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-11
# Updated: 2026-01-13
# Description: TranscriptChunker
# -----------------------------------------------------------------------------
import logging
import re
from typing import Iterator, List, Tuple

import settings
from chunking.MeetingChunk import MeetingChunk
from utility.logging_utils import get_class_logger

# Preferred break points, strongest first. A tier wins if any of its
# separators occurs in the second half of the window.
SEPARATOR_TIERS: Tuple[Tuple[str, ...], ...] = (
    ("\n\n",),
    ("\n",),
    (". ", "? ", "! "),
    (" ",),
)

_WHITESPACE = re.compile(r"\s+")


class TranscriptChunks:
    """
    Lazy, restartable view over the chunks of one transcript.
    Each iteration re-runs the split, so boundaries are identical every time.
    """

    def __init__(
        self,
        chunker: "TranscriptChunker",
        transcript: str,
        *,
        project_name: str,
        department: str,
        date_iso: str,
    ) -> None:
        self._chunker = chunker
        self._transcript = transcript
        self.project_name = project_name
        self.department = department
        self.date_iso = date_iso

    def __iter__(self) -> Iterator[MeetingChunk]:
        index = 0
        for start, end in self._chunker.iter_spans(self._transcript):
            yield MeetingChunk(
                text=self._transcript[start:end],
                index=index,
                project_name=self.project_name,
                department=self.department,
                date_iso=self.date_iso,
                char_start=start,
                char_end=end,
            )
            index += 1


class TranscriptChunker:
    """
    Splits transcripts into overlapping character windows.

    Windows are at most `chunk_size_chars` long and end on the strongest
    separator found in their second half (paragraph, line, sentence, space),
    falling back to a hard cut. The next window starts `overlap_chars` before
    the previous end, moved forward to the start of a word.
    """

    def __init__(
        self,
        *,
        chunk_size_chars: int = settings.CHUNK_SIZE_CHARS,
        overlap_chars: int = settings.CHUNK_OVERLAP_CHARS,
        logger: logging.Logger | None = None,
    ):
        self.chunk_size_chars = chunk_size_chars
        self.overlap_chars = overlap_chars
        self.logger = logger or get_class_logger(self.__class__)

        # guard against bad config that can cause infinite loops
        if self.chunk_size_chars <= 0:
            raise ValueError(f"chunk_size_chars ({self.chunk_size_chars}) must be > 0")
        if not 0 <= self.overlap_chars < self.chunk_size_chars:
            raise ValueError(
                f"overlap_chars ({self.overlap_chars}) must be >= 0 and < chunk_size_chars ({self.chunk_size_chars})"
            )

    def _find_break(self, text: str, start: int, end: int) -> int:
        lo = start + max(1, self.chunk_size_chars // 2)
        for tier in SEPARATOR_TIERS:
            best = -1
            for sep in tier:
                pos = text.rfind(sep, lo, end)
                if pos != -1:
                    best = max(best, pos + len(sep))
            if best != -1:
                return best
        return end

    def _iter_raw_spans(self, text: str) -> Iterator[Tuple[int, int]]:
        n = len(text)
        start = 0
        while start < n:
            end = min(start + self.chunk_size_chars, n)
            if end < n:
                end = self._find_break(text, start, end)

            yield start, end

            if end >= n:
                return

            next_start = end - self.overlap_chars
            if self.overlap_chars and next_start > 0 and not text[next_start - 1].isspace():
                m = _WHITESPACE.search(text, next_start, end)
                if m:
                    next_start = m.end()

            start = max(next_start, start + 1)

    def iter_spans(self, transcript: str) -> Iterator[Tuple[int, int]]:
        """(start, end) offsets of every non-blank chunk, in order."""
        if not isinstance(transcript, str):
            raise TypeError("`transcript` must be a str")

        for start, end in self._iter_raw_spans(transcript):
            if transcript[start:end].strip():
                yield start, end

    def split_text(self, transcript: str) -> List[str]:
        chunks = [transcript[s:e] for s, e in self.iter_spans(transcript)]
        if chunks:
            self.logger.debug(
                "Chunking Summary: chunks=%d | avg_len=%.1f chars | size=%d overlap=%d",
                len(chunks),
                sum(len(c) for c in chunks) / len(chunks),
                self.chunk_size_chars,
                self.overlap_chars,
            )
        else:
            self.logger.warning("No chunks produced (transcript_len=%d)", len(transcript))
        return chunks

    def chunk_transcript(
        self,
        transcript: str,
        *,
        project_name: str,
        department: str,
        date_iso: str,
    ) -> TranscriptChunks:
        if not isinstance(transcript, str):
            raise TypeError("`transcript` must be a str")

        self.logger.info(
            "Chunking transcript project=%r department=%r len=%d chunk_size=%d overlap=%d",
            project_name,
            department,
            len(transcript),
            self.chunk_size_chars,
            self.overlap_chars,
        )
        return TranscriptChunks(
            self,
            transcript,
            project_name=project_name,
            department=department,
            date_iso=date_iso,
        )
