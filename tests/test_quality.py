"""Tests for chunk quality scoring, grading and filtering."""

import pytest

from smartchunk.chunking.quality import (
    calculate_quality_score,
    get_quality_grade,
    is_header_or_separator_only,
)
from smartchunk.models.chunk import ChunkMetadata


def _metadata(**overrides) -> ChunkMetadata:
    values = {"start_offset": 0, "end_offset": 0, "readability_score": 50, "sentence_count": 1}
    values.update(overrides)
    return ChunkMetadata(**values)


# ── Filtering ────────────────────────────────────────────────────────────────


class TestIsHeaderOrSeparatorOnly:
    @pytest.mark.parametrize(
        "content",
        [
            "",
            "   \n\n  ",
            "## 제목",
            "# Title\n## Subtitle",
            "---",
            "***\n___",
            "<hr>",
            "## 제목\n짧은 내용",
            "Title\n=====\n",
            "안녕",
        ],
    )
    def test_dropped(self, content: str) -> None:
        assert is_header_or_separator_only(content)

    @pytest.mark.parametrize(
        "content",
        [
            "## 제목\n이것은 충분히 긴 내용이며 20자를 넘습니다.",
            "이것은 의미 있는 충분히 긴 텍스트입니다.",
            "---\nThis line carries enough real content.",
        ],
    )
    def test_kept(self, content: str) -> None:
        assert not is_header_or_separator_only(content)


# ── Scoring ──────────────────────────────────────────────────────────────────


class TestCalculateQualityScore:
    def test_base_score_for_neutral_chunk(self) -> None:
        content = "x" * 700
        assert calculate_quality_score(content, _metadata()) == 75

    def test_ideal_length_with_good_readability(self) -> None:
        content = "가" * 150
        score = calculate_quality_score(content, _metadata(readability_score=100, sentence_count=4))
        assert score == 100

    def test_short_chunk_never_scores_100(self) -> None:
        content = "이것은 20자 이상이지만 100자 미만인 짧은 텍스트입니다."
        metadata = _metadata(
            readability_score=100,
            sentence_count=5,
            has_header=True,
            is_list=True,
            is_table=True,
        )
        score = calculate_quality_score(content, metadata)
        assert score == 81
        assert score < 100

    def test_excessive_length_is_penalized(self) -> None:
        assert calculate_quality_score("x" * 1200, _metadata()) == 60

    def test_structure_bonuses(self) -> None:
        content = "x" * 300
        plain = calculate_quality_score(content, _metadata())
        assert calculate_quality_score(content, _metadata(has_header=True)) == plain + 5
        assert calculate_quality_score(content, _metadata(is_list=True)) == plain + 3
        assert calculate_quality_score(content, _metadata(is_table=True)) == plain + 3

    def test_complete_qa_beats_broken_qa(self) -> None:
        complete = "Q: 배송은 얼마나 걸리나요?\nA: 보통 이틀 정도 걸립니다."
        question_only = "Q: 배송은 얼마나 걸리나요? 빠른 배송도 가능한가요?"
        answer_only = "A: 보통 이틀 정도 걸리며 빠른 배송도 가능합니다."
        metadata = _metadata()
        complete_score = calculate_quality_score(complete, metadata)
        assert complete_score == 65
        assert calculate_quality_score(question_only, metadata) == 25
        assert calculate_quality_score(answer_only, metadata) == 25
        assert complete_score > calculate_quality_score(question_only, metadata)

    def test_sentence_count_sweet_spot(self) -> None:
        content = "x" * 300
        assert calculate_quality_score(content, _metadata(sentence_count=3)) == 90
        assert calculate_quality_score(content, _metadata(sentence_count=10)) == 90
        assert calculate_quality_score(content, _metadata(sentence_count=11)) == 85

    def test_readability_contribution(self) -> None:
        content = "x" * 300
        assert calculate_quality_score(content, _metadata(readability_score=0)) == 75
        assert calculate_quality_score(content, _metadata(readability_score=100)) == 95

    def test_clamped_to_range(self) -> None:
        content = "Q: " + "x" * 1200
        score = calculate_quality_score(content, _metadata(readability_score=0))
        assert 0 <= score <= 100


class TestGetQualityGrade:
    @pytest.mark.parametrize(
        ("score", "grade"),
        [
            (100, "excellent"),
            (85, "excellent"),
            (84, "good"),
            (70, "good"),
            (69, "fair"),
            (50, "fair"),
            (49, "poor"),
            (0, "poor"),
        ],
    )
    def test_grade_boundaries(self, score: int, grade: str) -> None:
        assert get_quality_grade(score) == grade
