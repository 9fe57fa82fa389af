"""Chunk previews with summary statistics for the review queue."""

import logging
from collections.abc import Mapping

from smartchunk.chunking.chunker import SmartChunker
from smartchunk.chunking.quality import get_quality_grade
from smartchunk.chunking.structure import (
    analyze_structure,
    classify_document_type,
    has_answer_marker,
    has_question_marker,
)
from smartchunk.config import ChunkingConfig, DocumentTypeConfig, QualityConfig
from smartchunk.models.chunk import Chunk
from smartchunk.models.preview import (
    ChunkPreview,
    DocumentPreview,
    PreviewSummary,
    PreviewWarning,
    QualityGrade,
)
from smartchunk.models.structure import DocumentType

logger = logging.getLogger(__name__)


def _preview_text(content: str, limit: int) -> str:
    if len(content) > limit:
        return content[:limit] + "..."
    return content


def _to_preview(chunk: Chunk, quality: QualityConfig) -> ChunkPreview:
    return ChunkPreview(
        index=chunk.index,
        content=chunk.content,
        content_preview=_preview_text(chunk.content, quality.preview_length),
        quality_score=chunk.quality_score,
        quality_grade=get_quality_grade(chunk.quality_score),
        is_qa_pair=chunk.metadata.is_qa_pair,
        has_header=chunk.metadata.has_header,
        is_table=chunk.metadata.is_table,
        is_list=chunk.metadata.is_list,
        auto_approved=chunk.auto_approved,
    )


def collect_warnings(chunks: list[Chunk], quality: QualityConfig) -> list[PreviewWarning]:
    """Aggregate length, Q&A and quality problems across chunks.

    Args:
        chunks: Scored chunks of one document.
        quality: Thresholds for the length and quality checks.

    Returns:
        One warning per problem type that occurs, in a fixed order.
    """
    checks = (
        (
            "too_short",
            lambda c: len(c.content) < quality.short_chunk_length,
            f"chunks shorter than {quality.short_chunk_length} characters",
        ),
        (
            "too_long",
            lambda c: len(c.content) > quality.long_chunk_length,
            f"chunks longer than {quality.long_chunk_length} characters",
        ),
        (
            "incomplete_qa",
            lambda c: has_question_marker(c.content) and not has_answer_marker(c.content),
            "Q&A pairs missing their answer",
        ),
        (
            "low_quality",
            lambda c: c.quality_score < quality.low_quality_threshold,
            f"chunks scoring below {quality.low_quality_threshold}",
        ),
    )

    warnings: list[PreviewWarning] = []
    for warning_type, predicate, description in checks:
        count = sum(1 for chunk in chunks if predicate(chunk))
        if count:
            warnings.append(
                PreviewWarning(type=warning_type, count=count, message=f"{count} {description}")
            )
    return warnings


def summarize(chunks: list[Chunk], quality: QualityConfig) -> PreviewSummary:
    """Compute totals, average quality, approval counts and grade spread."""
    total = len(chunks)
    auto_approved = sum(1 for chunk in chunks if chunk.auto_approved)

    distribution: dict[QualityGrade, int] = {"excellent": 0, "good": 0, "fair": 0, "poor": 0}
    for chunk in chunks:
        distribution[get_quality_grade(chunk.quality_score)] += 1

    return PreviewSummary(
        total_chunks=total,
        avg_quality_score=(
            round(sum(chunk.quality_score for chunk in chunks) / total, 2) if total else 0.0
        ),
        auto_approved_count=auto_approved,
        pending_count=total - auto_approved,
        grade_distribution=distribution,
        warnings=collect_warnings(chunks, quality),
    )


def build_preview(
    text: str,
    config: ChunkingConfig | None = None,
    quality: QualityConfig | None = None,
    document_types: Mapping[DocumentType, DocumentTypeConfig] | None = None,
) -> DocumentPreview:
    """Chunk a document and report what the review queue would receive.

    Args:
        text: Plain document text.
        config: Chunking options passed to the chunker.
        quality: Review thresholds; defaults apply when omitted.
        document_types: Sizing profile per document type.

    Returns:
        DocumentPreview with structure flags, chunk previews and summary.
    """
    config = config or ChunkingConfig()
    quality = quality or QualityConfig()

    chunks = SmartChunker(config, document_types=document_types, quality=quality).chunk(text)
    summary = summarize(chunks, quality)

    logger.info(
        "Preview: %d chunks, avg quality %.2f, %d auto-approved, %d warnings",
        summary.total_chunks,
        summary.avg_quality_score,
        summary.auto_approved_count,
        len(summary.warnings),
    )

    document_type = None
    if config.auto_detect_document_type:
        document_type = chunks[0].metadata.document_type if chunks else classify_document_type(text)

    return DocumentPreview(
        structure=analyze_structure(text),
        document_type=document_type,
        chunks=[_to_preview(chunk, quality) for chunk in chunks],
        summary=summary,
    )
