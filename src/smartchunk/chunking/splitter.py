"""Boundary-preserving splitter with sentence-aligned overlap.

Splitting happens in two passes:

1. The text is partitioned into coarse units. With structure
   preservation on, units are paragraphs, with header-only paragraphs
   attached to the paragraph that follows and every Q&A pair kept as
   its own unit. Otherwise the whole text is a single unit.
2. Each unit is segmented into sentences, which are folded greedily into
   groups no longer than ``max_chunk_size``. Every group after the first
   in a unit borrows the last sentence of the previous group as a prefix,
   plus earlier ones while the prefix stays within ``overlap``
   characters. Groups are closed early enough that prefix and group
   together fit in ``max_chunk_size + overlap``.

Chunk content is always a verbatim slice of the input, so the overlap
prefix of a chunk is exactly the tail of the chunk before it.
"""

import logging
import re

from smartchunk.chunking.sentences import segment_sentences
from smartchunk.chunking.structure import (
    CODE_FENCE_PATTERN,
    analyze_structure,
    is_question_line,
    meaningful_lines,
)
from smartchunk.models.chunk import RawChunk
from smartchunk.models.structure import DocumentStructure, SentenceSpan

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n")


def _strip_span(text: str, start: int, end: int) -> tuple[int, int] | None:
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    if start == end:
        return None
    return start, end


def _paragraph_spans(text: str) -> list[tuple[int, int]]:
    """Split text at blank lines, never inside a fenced code block."""
    fences = [match.span() for match in CODE_FENCE_PATTERN.finditer(text)]
    spans: list[tuple[int, int]] = []
    pos = 0

    for match in PARAGRAPH_BREAK.finditer(text):
        if any(start < match.start() < end for start, end in fences):
            continue
        span = _strip_span(text, pos, match.start())
        if span:
            spans.append(span)
        pos = match.end()

    span = _strip_span(text, pos, len(text))
    if span:
        spans.append(span)
    return spans


def _split_qa_block(text: str, start: int, end: int) -> list[tuple[int, int]]:
    """Cut a paragraph before every question line after its first line."""
    cuts = [start]
    pos = start
    while pos < end:
        newline = text.find("\n", pos, end)
        line_end = end if newline == -1 else newline
        if pos > start and is_question_line(text[pos:line_end]):
            cuts.append(pos)
        pos = line_end + 1

    units: list[tuple[int, int]] = []
    for unit_start, unit_end in zip(cuts, cuts[1:] + [end]):
        span = _strip_span(text, unit_start, unit_end)
        if span:
            units.append(span)
    return units


def partition_units(
    text: str,
    preserve_structure: bool,
    structure: DocumentStructure | None = None,
) -> list[tuple[int, int]]:
    """Divide text into coarse units that chunking never merges across.

    Args:
        text: The full document text.
        preserve_structure: When False the whole text is one unit.
        structure: Precomputed structure of ``text``; analyzed on demand
            when omitted.

    Returns:
        Ordered ``(start, end)`` spans of the units, whitespace-trimmed.
    """
    if not preserve_structure:
        span = _strip_span(text, 0, len(text))
        return [span] if span else []

    if structure is None:
        structure = analyze_structure(text)

    units: list[tuple[int, int]] = []
    pending_header_start: int | None = None
    last_end = 0

    for start, end in _paragraph_spans(text):
        last_end = end
        if not meaningful_lines(text[start:end]):
            # Headers and separators wait for the paragraph they introduce.
            if pending_header_start is None:
                pending_header_start = start
            continue

        blocks = _split_qa_block(text, start, end) if structure.has_qa_pairs else [(start, end)]
        for block_start, block_end in blocks:
            if pending_header_start is not None:
                block_start = pending_header_start
                pending_header_start = None
            units.append((block_start, block_end))

    if pending_header_start is not None:
        units.append((pending_header_start, last_end))

    return units


def _stripped_length(text: str, start: int, end: int) -> int:
    return len(text[start:end].strip())


def _overlap_start(previous: list[SentenceSpan], primary_start: int, overlap: int) -> int:
    """Find where the borrowed prefix of the next chunk begins.

    The last sentence of the previous group is always borrowed. Earlier
    sentences follow while the prefix, including the whitespace before
    the primary content, stays within ``overlap`` characters.
    """
    start = primary_start
    for sentence in reversed(previous):
        if start != primary_start and primary_start - sentence.start > overlap:
            break
        start = sentence.start
    return start


def _fits(
    text: str,
    content_start: int,
    primary_start: int,
    end: int,
    max_chunk_size: int,
    overlap: int,
) -> bool:
    return (
        _stripped_length(text, primary_start, end) <= max_chunk_size
        and _stripped_length(text, content_start, end) <= max_chunk_size + overlap
    )


def _is_header_only(text: str, start: int, end: int) -> bool:
    return not meaningful_lines(text[start:end])


def _chunk_unit(
    text: str, start: int, end: int, max_chunk_size: int, overlap: int
) -> list[RawChunk]:
    """Fold the sentences of one unit into chunks.

    Each chunk after the first borrows a prefix from the previous group
    and its primary content is sized so that prefix plus primary stays
    within ``max_chunk_size + overlap``. The prefix is dropped only when
    even the first sentence would not fit beside it. A sentence longer
    than the bound forms a chunk of its own, and header lines are never
    closed into a chunk without the sentence that follows them.
    """
    sentences = [
        span for span in segment_sentences(text[start:end], offset=start) if span.text.strip()
    ]

    chunks: list[RawChunk] = []
    previous: list[SentenceSpan] = []
    pos = 0

    while pos < len(sentences):
        first = sentences[pos]
        content_start = first.start
        if previous and overlap > 0:
            content_start = _overlap_start(previous, first.start, overlap)
            if not _fits(text, content_start, first.start, first.end, max_chunk_size, overlap):
                content_start = first.start

        group = [first]
        pos += 1
        while pos < len(sentences) and (
            _fits(text, content_start, first.start, sentences[pos].end, max_chunk_size, overlap)
            or _is_header_only(text, first.start, group[-1].end)
        ):
            group.append(sentences[pos])
            pos += 1

        primary_end = group[-1].end
        while primary_end > first.start and text[primary_end - 1].isspace():
            primary_end -= 1

        chunks.append(
            RawChunk(
                content=text[content_start:primary_end],
                start_offset=first.start,
                end_offset=primary_end,
            )
        )
        previous = group
    return chunks


def split_text(
    text: str,
    max_chunk_size: int,
    overlap: int,
    preserve_structure: bool = True,
    structure: DocumentStructure | None = None,
) -> list[RawChunk]:
    """Split text into size-bounded chunks that never cut a sentence.

    Args:
        text: The full document text.
        max_chunk_size: Maximum trimmed length of a chunk's primary
            content. Single sentences above it become oversized chunks.
        overlap: Characters borrowed from the previous chunk of the same
            unit, as whole sentences. At least one sentence is borrowed
            and the chunk never grows past ``max_chunk_size + overlap``.
        preserve_structure: Keep Q&A pairs and header sections together.
        structure: Precomputed structure of ``text``.

    Returns:
        Raw chunks in document order.
    """
    chunks: list[RawChunk] = []
    units = partition_units(text, preserve_structure, structure)
    for start, end in units:
        chunks.extend(_chunk_unit(text, start, end, max_chunk_size, overlap))

    logger.debug(
        "Split %d chars into %d units and %d raw chunks (max=%d, overlap=%d)",
        len(text),
        len(units),
        len(chunks),
        max_chunk_size,
        overlap,
    )
    return chunks
