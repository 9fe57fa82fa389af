"""Document chunking: structure analysis, segmentation, splitting and scoring."""

from smartchunk.chunking.chunker import (
    ResolvedChunkingConfig,
    SmartChunker,
    resolve_config,
    smart_chunk,
)
from smartchunk.chunking.language import detect_language
from smartchunk.chunking.preview import build_preview
from smartchunk.chunking.quality import (
    calculate_quality_score,
    get_quality_grade,
    is_header_or_separator_only,
)
from smartchunk.chunking.readability import calculate_readability_score
from smartchunk.chunking.sentences import segment_sentences, split_sentences
from smartchunk.chunking.splitter import partition_units, split_text
from smartchunk.chunking.structure import analyze_structure, classify_document_type

__all__ = [
    "ResolvedChunkingConfig",
    "SmartChunker",
    "analyze_structure",
    "build_preview",
    "calculate_quality_score",
    "calculate_readability_score",
    "classify_document_type",
    "detect_language",
    "get_quality_grade",
    "is_header_or_separator_only",
    "partition_units",
    "resolve_config",
    "segment_sentences",
    "smart_chunk",
    "split_sentences",
    "split_text",
]
