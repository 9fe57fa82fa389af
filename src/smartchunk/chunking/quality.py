"""Chunk quality scoring and filtering.

Scores are heuristics combining length, structure, Q&A integrity,
sentence count and readability. The constants below are policy values,
tuned against the behavior the review queue expects rather than derived
from a formula.
"""

from smartchunk.chunking.structure import (
    has_answer_marker,
    has_question_marker,
    meaningful_lines,
)
from smartchunk.models.chunk import ChunkMetadata
from smartchunk.models.preview import QualityGrade

BASE_SCORE = 70

IDEAL_MIN_LENGTH = 100
IDEAL_MAX_LENGTH = 600
ACCEPTABLE_MAX_LENGTH = 800
EXCESSIVE_LENGTH = 1000
IDEAL_LENGTH_BONUS = 15
ACCEPTABLE_LENGTH_BONUS = 5
SHORT_PENALTY = 15
EXCESSIVE_LENGTH_PENALTY = 10

HEADER_BONUS = 5
LIST_BONUS = 3
TABLE_BONUS = 3

COMPLETE_QA_BONUS = 10
BROKEN_QA_PENALTY = 30

SENTENCE_SWEET_SPOT = (3, 10)
SENTENCE_COUNT_BONUS = 5

# Readability contributes (score - 50) / 5, i.e. -10 to +10.
READABILITY_PIVOT = 50
READABILITY_DIVISOR = 5

MIN_MEANINGFUL_LENGTH = 20

QUALITY_GRADES: tuple[tuple[int, QualityGrade], ...] = (
    (85, "excellent"),
    (70, "good"),
    (50, "fair"),
)


def is_header_or_separator_only(content: str) -> bool:
    """Return True for chunks with no usable content.

    Header lines, separator lines and blank lines are removed; the chunk
    is rejected when what remains is shorter than 20 characters. This
    covers empty, whitespace-only, header-only and separator-only chunks.

    Args:
        content: The chunk text.

    Returns:
        True if the chunk should be dropped.
    """
    remaining = " ".join(meaningful_lines(content)).strip()
    return len(remaining) < MIN_MEANINGFUL_LENGTH


def calculate_quality_score(content: str, metadata: ChunkMetadata) -> int:
    """Score a finished chunk's fitness for retrieval, from 0 to 100.

    Args:
        content: The chunk text, including any overlap prefix.
        metadata: Structural flags, sentence stats and readability of
            the chunk.

    Returns:
        Integer score clamped to [0, 100].
    """
    score = BASE_SCORE
    length = len(content.strip())

    if IDEAL_MIN_LENGTH <= length <= IDEAL_MAX_LENGTH:
        score += IDEAL_LENGTH_BONUS
    elif length < IDEAL_MIN_LENGTH:
        score -= SHORT_PENALTY
    elif length <= ACCEPTABLE_MAX_LENGTH:
        score += ACCEPTABLE_LENGTH_BONUS
    elif length > EXCESSIVE_LENGTH:
        score -= EXCESSIVE_LENGTH_PENALTY

    if metadata.has_header:
        score += HEADER_BONUS
    if metadata.is_list:
        score += LIST_BONUS
    if metadata.is_table:
        score += TABLE_BONUS

    has_question = has_question_marker(content)
    has_answer = has_answer_marker(content)
    if has_question and has_answer:
        score += COMPLETE_QA_BONUS
    elif has_question or has_answer:
        score -= BROKEN_QA_PENALTY

    low, high = SENTENCE_SWEET_SPOT
    if low <= metadata.sentence_count <= high:
        score += SENTENCE_COUNT_BONUS

    score += round((metadata.readability_score - READABILITY_PIVOT) / READABILITY_DIVISOR)

    return max(0, min(100, score))


def get_quality_grade(score: int) -> QualityGrade:
    """Map a quality score to its review grade."""
    for threshold, grade in QUALITY_GRADES:
        if score >= threshold:
            return grade
    return "poor"
