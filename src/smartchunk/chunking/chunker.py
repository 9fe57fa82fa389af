"""Smart chunking orchestrator: the public entry point of the engine."""

import logging
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from smartchunk.chunking.language import detect_language
from smartchunk.chunking.quality import calculate_quality_score, is_header_or_separator_only
from smartchunk.chunking.readability import calculate_readability_score, sentence_stats
from smartchunk.chunking.splitter import split_text
from smartchunk.chunking.structure import (
    analyze_structure,
    classify_document_type,
    has_answer_marker,
    has_question_marker,
)
from smartchunk.config import (
    DEFAULT_MAX_CHUNK_SIZE,
    DEFAULT_OVERLAP,
    DOCUMENT_TYPE_CONFIGS,
    ChunkingConfig,
    DocumentTypeConfig,
    QualityConfig,
)
from smartchunk.models.chunk import Chunk, ChunkMetadata, RawChunk
from smartchunk.models.structure import DocumentType

logger = logging.getLogger(__name__)


class ResolvedChunkingConfig(BaseModel):
    """Effective chunking settings for a single call."""

    model_config = ConfigDict(frozen=True)

    max_chunk_size: int
    overlap: int
    preserve_structure: bool
    document_type: DocumentType | None = None


def resolve_config(
    config: ChunkingConfig,
    document_type: DocumentType | None = None,
    document_types: Mapping[DocumentType, DocumentTypeConfig] = DOCUMENT_TYPE_CONFIGS,
) -> ResolvedChunkingConfig:
    """Resolve effective settings: explicit > document type > defaults.

    The document type profile sizes the chunks only when the caller did
    not give ``max_chunk_size``; its overlap is used only together with
    its size. Nonsensical values are clamped instead of rejected: the size
    is at least 1 and the overlap lies in ``[0, max_chunk_size // 2]``.

    Args:
        config: Caller-supplied options.
        document_type: Detected document type, or None when detection
            is disabled.
        document_types: Sizing profile per document type.

    Returns:
        The resolved configuration.
    """
    profile = None
    if config.auto_detect_document_type and document_type is not None:
        profile = document_types.get(document_type)

    if config.max_chunk_size is not None:
        max_chunk_size = config.max_chunk_size
        profile = None
    elif profile is not None:
        max_chunk_size = profile.max_chunk_size
    else:
        max_chunk_size = DEFAULT_MAX_CHUNK_SIZE

    if config.overlap is not None:
        overlap = config.overlap
    elif profile is not None:
        overlap = profile.overlap
    else:
        overlap = DEFAULT_OVERLAP

    max_chunk_size = max(1, max_chunk_size)
    overlap = max(0, min(overlap, max_chunk_size // 2))

    return ResolvedChunkingConfig(
        max_chunk_size=max_chunk_size,
        overlap=overlap,
        preserve_structure=config.preserve_structure,
        document_type=document_type if config.auto_detect_document_type else None,
    )


class SmartChunker:
    """Turns plain document text into scored, retrieval-ready chunks.

    Pipeline:
    1. Analyze structure and, if enabled, classify the document type
    2. Resolve the effective configuration
    3. Split into size-bounded chunks with sentence-aligned overlap
    4. Drop chunks without meaningful content
    5. Attach metadata, score quality and assign dense indices

    Args:
        config: Per-call chunking options. Defaults apply when omitted.
        document_types: Sizing profile per document type.
        quality: Review policy thresholds (auto-approval).
    """

    def __init__(
        self,
        config: ChunkingConfig | None = None,
        document_types: Mapping[DocumentType, DocumentTypeConfig] | None = None,
        quality: QualityConfig | None = None,
    ) -> None:
        self._config = config or ChunkingConfig()
        self._document_types = document_types or DOCUMENT_TYPE_CONFIGS
        self._quality = quality or QualityConfig()

    def chunk(self, text: str) -> list[Chunk]:
        """Split a document into chunks.

        Never raises on string input; text without usable content yields
        an empty list.

        Args:
            text: Plain text extracted by an upstream parser.

        Returns:
            Chunks with dense indices starting at 0.
        """
        if not text.strip():
            return []

        structure = analyze_structure(text)
        document_type = (
            classify_document_type(text) if self._config.auto_detect_document_type else None
        )
        resolved = resolve_config(self._config, document_type, self._document_types)

        raw_chunks = split_text(
            text,
            max_chunk_size=resolved.max_chunk_size,
            overlap=resolved.overlap,
            preserve_structure=resolved.preserve_structure,
            structure=structure,
        )

        chunks: list[Chunk] = []
        for raw in raw_chunks:
            if is_header_or_separator_only(raw.content):
                logger.debug(
                    "Dropping chunk without content at %d-%d", raw.start_offset, raw.end_offset
                )
                continue
            chunks.append(self._build_chunk(len(chunks), raw, resolved.document_type))

        logger.info(
            "Chunked %d chars into %d chunks (%d dropped, type=%s, max=%d, overlap=%d)",
            len(text),
            len(chunks),
            len(raw_chunks) - len(chunks),
            resolved.document_type,
            resolved.max_chunk_size,
            resolved.overlap,
        )
        return chunks

    def _build_chunk(
        self, index: int, raw: RawChunk, document_type: DocumentType | None
    ) -> Chunk:
        """Attach metadata and a quality score to a surviving raw chunk."""
        content = raw.content
        structure = analyze_structure(content)
        sentence_count, avg_sentence_length = sentence_stats(content)

        metadata = ChunkMetadata(
            start_offset=raw.start_offset,
            end_offset=raw.end_offset,
            is_qa_pair=has_question_marker(content) and has_answer_marker(content),
            has_header=structure.has_headers,
            is_table=structure.has_tables,
            is_list=structure.has_lists,
            language=detect_language(content),
            readability_score=calculate_readability_score(content),
            sentence_count=sentence_count,
            avg_sentence_length=avg_sentence_length,
            document_type=document_type,
        )
        quality_score = calculate_quality_score(content, metadata)

        return Chunk(
            index=index,
            content=content,
            quality_score=quality_score,
            auto_approved=quality_score >= self._quality.auto_approve_threshold,
            metadata=metadata,
        )


async def smart_chunk(text: str, config: ChunkingConfig | None = None) -> list[Chunk]:
    """Chunk a document; awaitable so it composes with async pipelines.

    Nothing suspends inside: the work is synchronous and free of shared
    state, so concurrent calls on different documents are safe.
    """
    return SmartChunker(config).chunk(text)
