"""Script predicates and Korean/English language detection."""

from smartchunk.models.structure import Language

HANGUL_SYLLABLES = (0xAC00, 0xD7A3)
HANGUL_JAMO = (0x1100, 0x11FF)
HANGUL_COMPATIBILITY_JAMO = (0x3131, 0x318E)

# Final consonant (jongseong) index of ㅂ within a composed syllable.
FINAL_BIEUP = 17

# Below this minority/majority ratio the majority script wins.
MIXED_RATIO_THRESHOLD = 0.4


def is_hangul(char: str) -> bool:
    """Return True for Hangul syllables and jamo."""
    code = ord(char)
    return any(
        low <= code <= high
        for low, high in (HANGUL_SYLLABLES, HANGUL_JAMO, HANGUL_COMPATIBILITY_JAMO)
    )


def is_latin_letter(char: str) -> bool:
    """Return True for ASCII, Latin-1 and Latin Extended-A letters."""
    if "a" <= char <= "z" or "A" <= char <= "Z":
        return True
    code = ord(char)
    return 0x00C0 <= code <= 0x017F and char.isalpha()


def final_consonant(char: str) -> int:
    """Return the final consonant index of a composed Hangul syllable.

    Returns 0 when the syllable has no final consonant and -1 when
    ``char`` is not a composed syllable.
    """
    code = ord(char)
    if not HANGUL_SYLLABLES[0] <= code <= HANGUL_SYLLABLES[1]:
        return -1
    return (code - HANGUL_SYLLABLES[0]) % 28


def count_scripts(text: str) -> tuple[int, int]:
    """Count Hangul and Latin characters, ignoring everything else.

    Args:
        text: The text to analyze.

    Returns:
        A ``(korean, english)`` tuple of character counts.
    """
    korean = 0
    english = 0
    for char in text:
        if is_hangul(char):
            korean += 1
        elif is_latin_letter(char):
            english += 1
    return korean, english


def detect_language(text: str) -> Language:
    """Classify text as Korean, English or mixed by character counts.

    Text without letters of either script is reported as mixed, as is
    text where neither script outnumbers the other by more than 2.5:1.

    Args:
        text: The text to classify.

    Returns:
        Language code: "ko", "en", or "mixed".
    """
    korean, english = count_scripts(text)

    if korean == 0 and english == 0:
        return "mixed"
    if english == 0:
        return "ko"
    if korean == 0:
        return "en"

    if min(korean, english) / max(korean, english) >= MIXED_RATIO_THRESHOLD:
        return "mixed"
    return "ko" if korean > english else "en"
