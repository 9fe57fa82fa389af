"""Structural analysis and document type classification."""

import logging
import re

from smartchunk.models.structure import DocumentStructure, DocumentType

logger = logging.getLogger(__name__)

# Line patterns, matched against a single line of text.
HEADER_LINE = re.compile(r"^\s{0,3}#{1,6}\s+\S")
EMPTY_HEADER_LINE = re.compile(r"^\s{0,3}#{1,6}\s*$")
UNDERLINE_LINE = re.compile(r"^\s*(?:={3,}|-{3,})\s*$")
SEPARATOR_LINE = re.compile(r"^[-*_=]{3,}$|^<hr\s*/?>$", re.IGNORECASE)
QUESTION_LINE = re.compile(r"^\s*(?:Q|질문)\s?[:：]")
ANSWER_LINE = re.compile(r"^\s*(?:A|답변)\s?[:：]")
LIST_LINE = re.compile(r"^\s*(?:[-*+•]|\d+\.)\s+\S")

# Inline markers, matched anywhere in a span.
QUESTION_MARKER = re.compile(r"(?<![A-Za-z])Q[:：]|질문[:：]")
ANSWER_MARKER = re.compile(r"(?<![A-Za-z])A[:：]|답변[:：]")

LEGAL_ARTICLE_PATTERN = re.compile(r"제\s*\d+\s*조|Article\s+\d+")
LEGAL_KEYWORD_PATTERN = re.compile(r"약관|조항|책임|효력|계약|면책|손해배상|준거법|해지")
FAQ_HEADING_PATTERN = re.compile(r"FAQ|자주\s*묻는\s*질문", re.IGNORECASE)
CODE_FENCE_PATTERN = re.compile(r"```.*?```", re.DOTALL)
TECHNICAL_KEYWORD_PATTERN = re.compile(
    r"설치|API|SDK|명령어|코드|함수|라이브러리|파라미터|엔드포인트|CLI"
)

MIN_LEGAL_ARTICLES = 2
MIN_FAQ_PAIRS = 2
MAX_FAQ_HEADING_LENGTH = 50
MIN_KEYWORD_HITS = 3
KEYWORD_DENSITY_PER_1000 = 3.0


def is_header_line(line: str) -> bool:
    return bool(HEADER_LINE.match(line) or EMPTY_HEADER_LINE.match(line))


def is_separator_line(line: str) -> bool:
    return bool(SEPARATOR_LINE.match(line.strip()))


def is_question_line(line: str) -> bool:
    return bool(QUESTION_LINE.match(line))


def is_answer_line(line: str) -> bool:
    return bool(ANSWER_LINE.match(line))


def is_table_line(line: str) -> bool:
    return line.count("|") >= 2


def is_list_line(line: str) -> bool:
    return not is_separator_line(line) and bool(LIST_LINE.match(line))


def has_question_marker(text: str) -> bool:
    return bool(QUESTION_MARKER.search(text))


def has_answer_marker(text: str) -> bool:
    return bool(ANSWER_MARKER.search(text))


def _has_underlined_header(lines: list[str]) -> bool:
    for previous, line in zip(lines, lines[1:]):
        if (
            previous.strip()
            and not is_separator_line(previous)
            and UNDERLINE_LINE.match(line)
        ):
            return True
    return False


def analyze_structure(text: str) -> DocumentStructure:
    """Detect headers, Q&A markers, tables and lists in a text.

    Each flag is set when at least one line anywhere in the text matches.

    Args:
        text: The text to analyze.

    Returns:
        DocumentStructure with the detected flags.
    """
    lines = text.split("\n")
    return DocumentStructure(
        has_headers=any(is_header_line(line) for line in lines) or _has_underlined_header(lines),
        has_qa_pairs=any(is_question_line(line) or is_answer_line(line) for line in lines),
        has_tables=any(is_table_line(line) for line in lines),
        has_lists=any(is_list_line(line) for line in lines),
    )


def count_qa_pairs(text: str) -> int:
    """Count question lines whose next non-blank line is an answer line."""
    lines = [line for line in text.split("\n") if line.strip()]
    return sum(
        1
        for line, following in zip(lines, lines[1:])
        if is_question_line(line) and is_answer_line(following)
    )


def meaningful_lines(text: str) -> list[str]:
    """Return the stripped lines that are not headers, separators or blank.

    Titles underlined with ``===`` count as headers. A ``---`` line is
    treated as a plain separator, leaving the line above it in place.
    """
    lines = [line.strip() for line in text.split("\n")]
    kept: list[str] = []
    for i, line in enumerate(lines):
        if not line or is_header_line(line) or is_separator_line(line):
            continue
        following = lines[i + 1] if i + 1 < len(lines) else ""
        if following.startswith("===") and is_separator_line(following):
            continue
        kept.append(line)
    return kept


def _keyword_dense(pattern: re.Pattern[str], text: str) -> bool:
    hits = len(pattern.findall(text))
    if hits < MIN_KEYWORD_HITS:
        return False
    density = hits * 1000 / max(len(text), 1)
    return density >= KEYWORD_DENSITY_PER_1000


def _has_faq_heading(text: str) -> bool:
    for line in text.split("\n"):
        title = line.strip().lstrip("#").strip()
        if title and len(title) <= MAX_FAQ_HEADING_LENGTH and FAQ_HEADING_PATTERN.search(title):
            return True
    return False


def classify_document_type(text: str) -> DocumentType:
    """Assign a coarse document type used for adaptive chunk sizing.

    Rules are evaluated in priority order and the first match wins:
    legal, then faq, then technical. Legal signals come first so that
    contractual text with a few questions is never sized as an FAQ.

    Args:
        text: The full document text.

    Returns:
        One of "legal", "faq", "technical" or "general".
    """
    if (
        len(LEGAL_ARTICLE_PATTERN.findall(text)) >= MIN_LEGAL_ARTICLES
        or _keyword_dense(LEGAL_KEYWORD_PATTERN, text)
    ):
        document_type: DocumentType = "legal"
    elif count_qa_pairs(text) >= MIN_FAQ_PAIRS or _has_faq_heading(text):
        document_type = "faq"
    elif CODE_FENCE_PATTERN.search(text) or _keyword_dense(TECHNICAL_KEYWORD_PATTERN, text):
        document_type = "technical"
    else:
        document_type = "general"

    logger.debug("Classified document (%d chars) as %s", len(text), document_type)
    return document_type
