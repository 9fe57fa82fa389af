"""Tests for structure analysis and document classification."""

from smartchunk.chunking.structure import (
    analyze_structure,
    classify_document_type,
    count_qa_pairs,
    has_answer_marker,
    has_question_marker,
    meaningful_lines,
)

FAQ_TEXT = """
자주 묻는 질문 (FAQ)

Q: 배송은 얼마나 걸리나요?
A: 일반 배송은 2-3일, 빠른 배송은 1일 소요됩니다.

Q: 반품은 어떻게 하나요?
A: 구매일로부터 7일 이내 반품 신청 가능합니다.

Q: 포인트는 어떻게 적립되나요?
A: 구매 금액의 1%가 자동 적립됩니다.
"""

TECHNICAL_TEXT = """
# API 개발 가이드

## 설치 방법

다음 명령어로 SDK를 설치합니다:

```bash
npm install @sofa/sdk
```
"""

LEGAL_TEXT = """
# 이용약관

제1조 (목적)
이 약관은 회사가 제공하는 서비스의 이용조건 및 절차에 관한 사항을 규정함을 목적으로 합니다.

제2조 (정의)
"서비스"란 회사가 제공하는 모든 온라인 서비스를 의미합니다.

제3조 (면책조항)
회사는 천재지변 등 불가항력으로 인한 서비스 중단에 대해 책임지지 않습니다.
"""

GENERAL_TEXT = """
안녕하세요. 오늘은 날씨가 좋습니다.
이 문서는 특별한 형식이 없는 일반적인 텍스트입니다.
다양한 주제에 대해 이야기할 수 있습니다.
"""


# ── Structure analysis ───────────────────────────────────────────────────────


class TestAnalyzeStructure:
    def test_markdown_header(self) -> None:
        assert analyze_structure("# Title\n\nSome content").has_headers

    def test_underlined_header(self) -> None:
        assert analyze_structure("Title\n====\n\nSome content").has_headers
        assert analyze_structure("Title\n----\n\nSome content").has_headers

    def test_hash_without_space_is_not_header(self) -> None:
        assert not analyze_structure("#hashtag content").has_headers

    def test_english_qa(self) -> None:
        assert analyze_structure("Q: What is this?\nA: This is a test.").has_qa_pairs

    def test_korean_qa(self) -> None:
        assert analyze_structure("질문: 이것은 무엇인가요?\n답변: 테스트입니다.").has_qa_pairs

    def test_qa_markers_are_case_sensitive(self) -> None:
        assert not analyze_structure("q: lowercase question\na: lowercase answer").has_qa_pairs

    def test_table(self) -> None:
        assert analyze_structure("| Column 1 | Column 2 |\n| --- | --- |").has_tables

    def test_bullet_list(self) -> None:
        assert analyze_structure("- Item 1\n- Item 2\n- Item 3").has_lists
        assert analyze_structure("* Item\n+ Item").has_lists

    def test_numbered_list(self) -> None:
        assert analyze_structure("1. First item\n2. Second item").has_lists

    def test_separator_is_not_list(self) -> None:
        assert not analyze_structure("Text above\n\n---\n\nText below").has_lists

    def test_flags_are_independent(self) -> None:
        text = "# Guide\n\n- step one\n\n| a | b |\n\nQ: why?\nA: because."
        structure = analyze_structure(text)
        assert structure.has_headers
        assert structure.has_lists
        assert structure.has_tables
        assert structure.has_qa_pairs

    def test_plain_text_has_no_structure(self) -> None:
        structure = analyze_structure("Just a plain paragraph of text.")
        assert not structure.has_headers
        assert not structure.has_qa_pairs
        assert not structure.has_tables
        assert not structure.has_lists


class TestQaHelpers:
    def test_count_pairs_across_blank_lines(self) -> None:
        assert count_qa_pairs("Q: a?\nA: b.\n\nQ: c?\nA: d.") == 2

    def test_question_without_answer_is_not_a_pair(self) -> None:
        assert count_qa_pairs("Q: a?\nQ: b?\nA: c.") == 1

    def test_inline_markers(self) -> None:
        assert has_question_marker("Q: 질문입니다. A: 답변입니다.")
        assert has_answer_marker("Q: 질문입니다. A: 답변입니다.")
        assert has_question_marker("질문: 무엇인가요?")
        assert not has_question_marker("See the FAQ: it helps.")
        assert not has_answer_marker("IDEA: something")


class TestMeaningfulLines:
    def test_strips_headers_and_separators(self) -> None:
        assert meaningful_lines("## 제목\n---\n본문 내용") == ["본문 내용"]

    def test_strips_equals_underlined_title(self) -> None:
        assert meaningful_lines("Title\n=====\nBody") == ["Body"]

    def test_keeps_text_above_dash_rule(self) -> None:
        assert meaningful_lines("Body text\n---") == ["Body text"]


# ── Document classification ──────────────────────────────────────────────────


class TestClassifyDocumentType:
    def test_faq(self) -> None:
        assert classify_document_type(FAQ_TEXT) == "faq"

    def test_faq_heading_alone(self) -> None:
        assert classify_document_type("# FAQ\n\n배송은 보통 이틀 걸립니다.") == "faq"

    def test_technical_code_block(self) -> None:
        assert classify_document_type(TECHNICAL_TEXT) == "technical"

    def test_technical_keyword_density(self) -> None:
        text = "API 설치 방법: SDK를 설치하고 API 키를 설정합니다."
        assert classify_document_type(text) == "technical"

    def test_legal_articles(self) -> None:
        assert classify_document_type(LEGAL_TEXT) == "legal"

    def test_legal_keyword_density(self) -> None:
        text = "본 약관의 효력은 계약 체결 시 발생하며 책임은 회사에 있습니다."
        assert classify_document_type(text) == "legal"

    def test_legal_takes_precedence_over_faq(self) -> None:
        text = LEGAL_TEXT + "\nQ: 해지는 어떻게 하나요?\nA: 고객센터로 문의합니다.\n" \
            "Q: 환불이 되나요?\nA: 규정에 따릅니다.\n"
        assert classify_document_type(text) == "legal"

    def test_general(self) -> None:
        assert classify_document_type(GENERAL_TEXT) == "general"

    def test_empty_is_general(self) -> None:
        assert classify_document_type("") == "general"
