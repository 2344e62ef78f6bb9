"""Keyword-threshold document type classifier."""

from typing import Literal

DocumentType = Literal["resume", "meeting", "general"]

RESUME: DocumentType = "resume"
MEETING: DocumentType = "meeting"
GENERAL: DocumentType = "general"

# Minimum distinct keyword hits before a specialised label is chosen
MIN_KEYWORD_HITS = 3

RESUME_KEYWORDS: frozenset[str] = frozenset({
    "experience",
    "skills",
    "education",
    "certifications",
    "employment",
    "qualifications",
    "work history",
    "career objective",
    "professional summary",
    "bachelor",
    "degree",
    "university",
    "internship",
    "proficient",
    "curriculum vitae",
    "references available",
})

MEETING_KEYWORDS: frozenset[str] = frozenset({
    "agenda",
    "participants",
    "minutes",
    "transcript",
    "attendees",
    "action item",
    "meeting",
    "discussed",
    "next steps",
    "follow-up",
    "adjourned",
    "standup",
    "speaker",
})


def _count_hits(lowered: str, keywords: frozenset[str]) -> int:
    """Count distinct keywords that occur as substrings."""
    return sum(1 for keyword in keywords if keyword in lowered)


def keyword_hits(text: str) -> tuple[int, int]:
    """Return (resume_hits, meeting_hits) for the text."""
    lowered = text.lower()
    return _count_hits(lowered, RESUME_KEYWORDS), _count_hits(lowered, MEETING_KEYWORDS)


def classify_text(text: str) -> DocumentType:
    """Guess the document type of a text.

    A label wins only when its hit count strictly exceeds the other's and
    reaches MIN_KEYWORD_HITS. Ties and sparse matches fall back to general.
    """
    resume_hits, meeting_hits = keyword_hits(text)

    if resume_hits > meeting_hits and resume_hits >= MIN_KEYWORD_HITS:
        return RESUME
    if meeting_hits > resume_hits and meeting_hits >= MIN_KEYWORD_HITS:
        return MEETING
    return GENERAL
