"""Plain text file loading with encoding detection."""

import logging
from pathlib import Path

import chardet

logger = logging.getLogger(__name__)

MIN_ENCODING_CONFIDENCE = 0.7


def read_text_file(file_path: str | Path) -> str:
    """Read a plain text or Markdown file, detecting its encoding.

    Tries UTF-8 first, then uses chardet for fallback detection. Korean
    legacy encodings (EUC-KR, CP949) are common in uploaded documents.

    Args:
        file_path: Path to the text file.

    Returns:
        The file content as a string.

    Raises:
        FileNotFoundError: If file_path does not exist.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    raw_bytes = path.read_bytes()

    # Try UTF-8 first
    try:
        return raw_bytes.decode("utf-8")
    except UnicodeDecodeError:
        pass

    # Fallback to encoding detection
    detected = chardet.detect(raw_bytes)
    encoding = detected.get("encoding") or "utf-8"
    confidence = detected.get("confidence") or 0

    if confidence < MIN_ENCODING_CONFIDENCE:
        logger.warning(
            "Low confidence encoding detection for %s: %s (%.0f%%)",
            path,
            encoding,
            confidence * 100,
        )

    try:
        return raw_bytes.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        # Last resort: try cp949 (superset of EUC-KR)
        try:
            return raw_bytes.decode("cp949")
        except UnicodeDecodeError:
            logger.error("Failed to decode file: %s", path)
            return raw_bytes.decode("utf-8", errors="replace")
