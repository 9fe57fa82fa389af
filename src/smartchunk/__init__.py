"""Structure-aware chunking and quality scoring for RAG ingestion."""

from smartchunk.chunking import (
    SmartChunker,
    analyze_structure,
    build_preview,
    calculate_readability_score,
    classify_document_type,
    detect_language,
    is_header_or_separator_only,
    smart_chunk,
)
from smartchunk.config import ChunkingConfig, load_config
from smartchunk.models import Chunk, ChunkMetadata, DocumentStructure

__all__ = [
    "Chunk",
    "ChunkMetadata",
    "ChunkingConfig",
    "DocumentStructure",
    "SmartChunker",
    "analyze_structure",
    "build_preview",
    "calculate_readability_score",
    "classify_document_type",
    "detect_language",
    "is_header_or_separator_only",
    "load_config",
    "smart_chunk",
]
