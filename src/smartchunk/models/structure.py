"""Document analysis data models for the chunking pipeline."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DocumentType = Literal["faq", "technical", "legal", "general"]
Language = Literal["ko", "en", "mixed"]


class DocumentStructure(BaseModel):
    """Structural features detected in a text.

    The flags are independent: a document can contain headers, Q&A
    pairs, tables and lists at the same time.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    has_headers: bool = False
    has_qa_pairs: bool = Field(default=False, alias="hasQAPairs")
    has_tables: bool = False
    has_lists: bool = False


class SentenceSpan(BaseModel):
    """A sentence located in the original text.

    ``end`` is exclusive and includes the trailing whitespace, so the
    spans of one segmentation tile the input without gaps.
    """

    model_config = ConfigDict(frozen=True)

    start: int
    end: int
    text: str
