"""Sentence segmentation for Korean, English and mixed text.

Boundaries are found by scanning whitespace-delimited tokens. A sentence
ends after a token that carries terminal punctuation, after a token that
ends in a Korean sentence-final ending, or wherever the whitespace
between two tokens contains a paragraph break. Each sentence keeps its
trailing whitespace, so joining the sentences reproduces the input.
"""

import re

from smartchunk.chunking.language import FINAL_BIEUP, final_consonant, is_hangul
from smartchunk.models.structure import SentenceSpan

TOKEN_PATTERN = re.compile(r"\S+")

TERMINAL_PUNCTUATION = frozenset(".!?。！？")
CLOSING_MARKS = "\"'”’)]」』"

ABBREVIATIONS = frozenset(
    {"mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st", "vs", "etc", "e.g", "i.e", "fig", "inc", "ltd"}
)

# -ㅂ니다 / -습니다 (declarative) and -ㅂ니까 / -습니까 (interrogative); the
# syllable before 니 must carry a ㅂ final consonant, which rules out the
# connective -니까 ("because").
FORMAL_ENDINGS = ("니다", "니까")
# 해요체: 해요, 이에요, 어요, 네요, 세요, 군요, ... all end in 요.
INFORMAL_ENDINGS = ("요", "죠")
PLAIN_ENDINGS = ("었다", "았다", "였다", "했다", "한다", "된다", "는다", "이다", "있다", "없다")
NOUNS_ENDING_IN_YO = ("필요", "중요", "주요", "개요", "수요", "강요", "동요")

PARTICLES = frozenset("을를이가은는")


def _strip_trailing_marks(token: str) -> str:
    return token.rstrip(CLOSING_MARKS)


def has_korean_final_ending(word: str) -> bool:
    """Return True if ``word`` ends in a Korean sentence-final ending.

    Trailing terminal punctuation and closing quotes are ignored.
    """
    core = _strip_trailing_marks(word).rstrip("".join(TERMINAL_PUNCTUATION))
    core = _strip_trailing_marks(core)
    if len(core) < 2 or not is_hangul(core[-1]):
        return False

    if core.endswith(FORMAL_ENDINGS):
        if core.endswith(("습니다", "습니까")):
            return True
        return len(core) >= 3 and final_consonant(core[-3]) == FINAL_BIEUP
    if core.endswith(INFORMAL_ENDINGS):
        return not core.endswith(NOUNS_ENDING_IN_YO)
    return core.endswith(PLAIN_ENDINGS)


def ends_with_complete_sentence(text: str) -> bool:
    """Return True if the trimmed text ends like a finished sentence."""
    trimmed = _strip_trailing_marks(text.strip())
    if not trimmed:
        return False
    if trimmed[-1] in TERMINAL_PUNCTUATION:
        return True
    return has_korean_final_ending(trimmed.split()[-1])


def _is_abbreviation(core: str, line_start: bool) -> bool:
    if not core.endswith("."):
        return False
    stem = core[:-1]
    if line_start and stem.isdigit():
        return True  # ordinal such as "1." opening a numbered list item
    if len(stem) == 1 and stem.isupper():
        return True  # initial such as "J."
    return stem.lower().lstrip("(\"'") in ABBREVIATIONS


def _is_detached_particle(token: str) -> bool:
    word = token.rstrip(",.!?")
    return len(word) == 1 and word in PARTICLES


def _ends_sentence(token: str, following: str, line_start: bool) -> bool:
    core = _strip_trailing_marks(token)
    if core and core[-1] in TERMINAL_PUNCTUATION:
        return not _is_abbreviation(core, line_start)
    if has_korean_final_ending(token):
        return not _is_detached_particle(following)
    return False


def segment_sentences(text: str, offset: int = 0) -> list[SentenceSpan]:
    """Split text into contiguous sentence spans.

    Args:
        text: The text to segment.
        offset: Added to every span position, so spans can refer to a
            larger document that ``text`` was sliced from.

    Returns:
        Ordered spans covering ``text`` from start to end. Empty input
        yields an empty list.
    """
    if not text:
        return []

    tokens = list(TOKEN_PATTERN.finditer(text))
    spans: list[SentenceSpan] = []
    start = 0
    # Only whitespace separates tokens, so a token opens a line exactly
    # when it is the first token or the gap before it holds a newline.
    line_start = True

    for token, following in zip(tokens, tokens[1:]):
        gap = text[token.end():following.start()]
        if gap.count("\n") >= 2 or _ends_sentence(token.group(), following.group(), line_start):
            end = following.start()
            spans.append(SentenceSpan(start=start + offset, end=end + offset, text=text[start:end]))
            start = end
        line_start = "\n" in gap

    spans.append(SentenceSpan(start=start + offset, end=len(text) + offset, text=text[start:]))
    return spans


def split_sentences(text: str) -> list[str]:
    return [span.text for span in segment_sentences(text)]


def count_sentences(text: str) -> int:
    """Count non-blank sentences in a text."""
    return sum(1 for span in segment_sentences(text) if span.text.strip())
