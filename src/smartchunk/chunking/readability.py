"""Heuristic readability scoring for text spans."""

from smartchunk.chunking.language import is_hangul, is_latin_letter
from smartchunk.chunking.sentences import ends_with_complete_sentence, segment_sentences

LONG_SENTENCE_THRESHOLD = 100
LONG_SENTENCE_BASE_PENALTY = 15
LONG_SENTENCE_MAX_PENALTY = 40
SHORT_SENTENCE_THRESHOLD = 10
SHORT_SENTENCE_PENALTY = 10

MIN_TOKENS_FOR_DIVERSITY = 5
LOW_DIVERSITY_RATIO = 0.3
LOW_DIVERSITY_PENALTY = 20
MODERATE_DIVERSITY_RATIO = 0.5
MODERATE_DIVERSITY_PENALTY = 10

MIN_ALPHANUMERIC_RATIO = 0.5
SYMBOL_HEAVY_PENALTY = 15

COMPLETENESS_BONUS = 5


def sentence_stats(text: str) -> tuple[int, float]:
    """Return the sentence count and average sentence length of a text.

    The average is measured in characters over the trimmed text; a text
    with content but no detectable boundary counts as one sentence.
    """
    trimmed = text.strip()
    if not trimmed:
        return 0, 0.0
    count = sum(1 for span in segment_sentences(trimmed) if span.text.strip())
    return count, round(len(trimmed) / max(count, 1), 1)


def _tokens(text: str) -> list[str]:
    words = (word.strip(".,!?;:\"'()[]{}<>·…。！？「」『』").lower() for word in text.split())
    return [word for word in words if len(word) > 1]


def calculate_readability_score(text: str) -> int:
    """Score how well-formed a text span is, from 0 to 100.

    Starts at 100 and applies penalties for very long or very short
    sentences, heavy vocabulary repetition and symbol-heavy content,
    plus a small bonus when the text ends on a complete sentence.

    Args:
        text: The span to score.

    Returns:
        Integer score clamped to [0, 100]; 0 for empty or blank input.
    """
    trimmed = text.strip()
    if not trimmed:
        return 0

    score = 100

    sentence_count, avg_length = sentence_stats(trimmed)
    if avg_length > LONG_SENTENCE_THRESHOLD:
        penalty = LONG_SENTENCE_BASE_PENALTY + int((avg_length - LONG_SENTENCE_THRESHOLD) / 10)
        score -= min(penalty, LONG_SENTENCE_MAX_PENALTY)
    elif avg_length < SHORT_SENTENCE_THRESHOLD and sentence_count > 1:
        score -= SHORT_SENTENCE_PENALTY

    tokens = _tokens(trimmed)
    if len(tokens) > MIN_TOKENS_FOR_DIVERSITY:
        diversity = len(set(tokens)) / len(tokens)
        if diversity < LOW_DIVERSITY_RATIO:
            score -= LOW_DIVERSITY_PENALTY
        elif diversity < MODERATE_DIVERSITY_RATIO:
            score -= MODERATE_DIVERSITY_PENALTY

    visible = [char for char in trimmed if not char.isspace()]
    alphanumeric = sum(
        1 for char in visible if is_hangul(char) or is_latin_letter(char) or char.isdigit()
    )
    if alphanumeric / len(visible) < MIN_ALPHANUMERIC_RATIO:
        score -= SYMBOL_HEAVY_PENALTY

    if ends_with_complete_sentence(trimmed):
        score += COMPLETENESS_BONUS

    return max(0, min(100, score))
