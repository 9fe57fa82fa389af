"""Data models for the smart chunking engine."""

from smartchunk.models.chunk import Chunk, ChunkMetadata, RawChunk
from smartchunk.models.preview import (
    ChunkPreview,
    DocumentPreview,
    PreviewSummary,
    PreviewWarning,
    QualityGrade,
)
from smartchunk.models.structure import (
    DocumentStructure,
    DocumentType,
    Language,
    SentenceSpan,
)

__all__ = [
    "Chunk",
    "ChunkMetadata",
    "ChunkPreview",
    "DocumentPreview",
    "DocumentStructure",
    "DocumentType",
    "Language",
    "PreviewSummary",
    "PreviewWarning",
    "QualityGrade",
    "RawChunk",
    "SentenceSpan",
]
