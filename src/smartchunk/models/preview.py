"""Chunk preview data models consumed by the review queue."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from smartchunk.models.structure import DocumentStructure, DocumentType

QualityGrade = Literal["excellent", "good", "fair", "poor"]
WarningType = Literal["too_short", "too_long", "incomplete_qa", "low_quality"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ChunkPreview(_CamelModel):
    """A single chunk as shown before the document is committed."""

    index: int
    content: str
    content_preview: str
    quality_score: int
    quality_grade: QualityGrade
    is_qa_pair: bool = Field(default=False, alias="isQAPair")
    has_header: bool = False
    is_table: bool = False
    is_list: bool = False
    auto_approved: bool = False


class PreviewWarning(_CamelModel):
    """An aggregated problem found across the previewed chunks."""

    type: WarningType
    count: int
    message: str


class PreviewSummary(_CamelModel):
    """Aggregate statistics over all previewed chunks."""

    total_chunks: int = 0
    avg_quality_score: float = 0.0
    auto_approved_count: int = 0
    pending_count: int = 0
    grade_distribution: dict[QualityGrade, int] = Field(default_factory=dict)
    warnings: list[PreviewWarning] = Field(default_factory=list)


class DocumentPreview(_CamelModel):
    """Structure, chunks and summary for one previewed document."""

    structure: DocumentStructure
    document_type: DocumentType | None = None
    chunks: list[ChunkPreview] = Field(default_factory=list)
    summary: PreviewSummary = Field(default_factory=PreviewSummary)
