"""Chunk data models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from smartchunk.models.structure import DocumentType, Language


class RawChunk(BaseModel):
    """A size-bounded span produced by the splitter, before scoring.

    ``content`` includes any overlap prefix borrowed from the previous
    chunk; the offsets cover only the primary (non-overlap) region.
    """

    model_config = ConfigDict(frozen=True)

    content: str
    start_offset: int
    end_offset: int


class ChunkMetadata(BaseModel):
    """Structural and quality metadata attached to every chunk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    start_offset: int
    end_offset: int
    is_qa_pair: bool = Field(default=False, alias="isQAPair")
    has_header: bool = False
    is_table: bool = False
    is_list: bool = False
    language: Language = "mixed"
    readability_score: int = 0
    sentence_count: int = 0
    avg_sentence_length: float = 0.0
    document_type: DocumentType | None = None  # set only when auto-detection ran


class Chunk(BaseModel):
    """A retrieval-ready chunk of a document."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    index: int
    content: str
    quality_score: int
    auto_approved: bool = False
    metadata: ChunkMetadata
