"""Instruction selection and generation request assembly."""

from dataclasses import dataclass

from meetsynth.services.classifier import MEETING, RESUME, DocumentType

SYSTEM_PROMPT = (
    "You are a professional summarizer. Provide clear, structured summaries "
    "based on the user's requirements."
)

RESUME_INSTRUCTIONS = (
    "Summarize this resume for a recruiter. Highlight the candidate's key "
    "skills, professional experience, education, and notable achievements. "
    "Use short sections with bullet points."
)

MEETING_DEFAULT_INSTRUCTIONS = (
    "Summarize in actionable bullet points: key decisions, action items with "
    "owners, and open questions."
)

GENERAL_DEFAULT_INSTRUCTIONS = (
    "Provide a comprehensive summary that captures the main points, "
    "important details, and conclusions."
)

USER_PROMPT_TEMPLATE = """Please analyze the following text and provide a summary based on the user's specific requirements.

TEXT:
{text}

USER REQUIREMENTS:
{instructions}

Please provide a well-structured, professional summary that addresses the user's specific needs. Format the response appropriately based on the requirements (e.g., bullet points, executive summary, action items)."""


@dataclass(frozen=True)
class GenerationRequest:
    """Everything the generation client needs for one call."""

    system_prompt: str
    user_prompt: str
    instructions: str
    document_type: DocumentType

    @property
    def messages(self) -> list[dict[str, str]]:
        """Chat-completions message list."""
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": self.user_prompt},
        ]


def build_instructions(document_type: DocumentType, user_instructions: str | None) -> str:
    """Pick the effective instructions for a document type.

    Resumes always get the fixed resume template. Other types use the
    user's instructions when given, else their type's default.
    """
    if document_type == RESUME:
        return RESUME_INSTRUCTIONS

    stripped = (user_instructions or "").strip()
    if stripped:
        return stripped

    if document_type == MEETING:
        return MEETING_DEFAULT_INSTRUCTIONS
    return GENERAL_DEFAULT_INSTRUCTIONS


def build_request(
    text: str,
    document_type: DocumentType,
    user_instructions: str | None,
) -> GenerationRequest:
    """Assemble the generation request for already-truncated text."""
    instructions = build_instructions(document_type, user_instructions)
    return GenerationRequest(
        system_prompt=SYSTEM_PROMPT,
        user_prompt=USER_PROMPT_TEMPLATE.format(text=text, instructions=instructions),
        instructions=instructions,
        document_type=document_type,
    )
