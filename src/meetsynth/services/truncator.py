"""Boundary-aware text truncation."""

import re

DEFAULT_MAX_CHARS = 8000

TRUNCATION_NOTICE = (
    "\n\n[Content truncated due to length. Only the first part of the text "
    "was used for summarization.]"
)

# A sentence is a run of characters ending in one or more terminators
_SENTENCE_RE = re.compile(r"[^.!?]*[.!?]+")


def _accumulate(units: list[str], max_chars: int, separator: str = "") -> str:
    """Join leading units while the joined length stays within max_chars."""
    kept: list[str] = []
    length = 0
    for unit in units:
        added = len(unit) + (len(separator) if kept else 0)
        if length + added > max_chars:
            break
        kept.append(unit)
        length += added
    return separator.join(kept)


def truncate_text(text: str, max_chars: int = DEFAULT_MAX_CHARS) -> str:
    """Bound text to max_chars at a sentence or word boundary.

    Text already within budget is returned unchanged. Otherwise whole
    sentences are kept; if none fit, whole words; if not even one word fits,
    the text is cut at max_chars. Truncated results end with
    TRUNCATION_NOTICE, so the result never exceeds
    ``max_chars + len(TRUNCATION_NOTICE)`` characters.

    Raises:
        ValueError: If max_chars is not positive.
    """
    if max_chars <= 0:
        raise ValueError(f"max_chars must be positive, got {max_chars}")

    if len(text) <= max_chars:
        return text

    kept = _accumulate(_SENTENCE_RE.findall(text), max_chars).rstrip()
    if not kept:
        kept = _accumulate(text.split(), max_chars, separator=" ")
    if not kept:
        kept = text[:max_chars]

    return kept + TRUNCATION_NOTICE


def is_truncated(text: str) -> bool:
    """Check whether a text carries the truncation notice."""
    return text.endswith(TRUNCATION_NOTICE)
