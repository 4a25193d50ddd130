from __future__ import annotations

from typing import Any, Dict, NamedTuple

from ..schemas.session import LANGUAGE_LABELS, InputKind, Language

DOCUMENT_SYSTEM_PROMPT = """
You are an expert presentation designer and business writer.
Turn the document you are given into a clear, professional slide deck.

Rules:
- Start with a short title slide that states the topic, then follow the document's own structure.
- Produce 6-12 slides. Each slide has a concise title and 3-6 bullets.
- Bullets are short statements (ideally 8-18 words), concrete, free of filler and repetition.
- Keep facts, figures and names exactly as they appear in the source; never invent data.
- End with a summary or key-takeaways slide.
- Write every title and bullet in the target language requested by the user, translating if needed.
Return only JSON matching the provided schema.
""".strip()

YOUTUBE_SYSTEM_PROMPT = """
You are an expert presentation designer who works from raw video transcripts.
Transcripts are noisy: they contain timestamps, filler words, repetitions, sponsor reads,
greetings and calls to subscribe. Clean all of that away before structuring the content.

Rules:
- Identify the speaker's main topic and the logical sections of the talk.
- Produce 6-12 slides. Each slide has a concise title and 3-6 bullets.
- Bullets capture the ideas, steps, examples and numbers the speaker actually gives; never invent data.
- Do not mention the video, the channel or the transcript itself unless it is the subject.
- End with a summary or key-takeaways slide.
- Write every title and bullet in the target language requested by the user, translating if needed.
Return only JSON matching the provided schema.
""".strip()

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "slides": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "bullets": {"type": "array", "items": {"type": "string"}},
                },
                "required": ["title", "bullets"],
            },
        },
    },
    "required": ["title", "slides"],
}


class PromptBundle(NamedTuple):
    system_instruction: str
    user_prompt: str
    response_schema: Dict[str, Any]


def build_prompt(text: str, language: Language, input_kind: InputKind) -> PromptBundle:
    """
    Pick the system instruction for the input kind and wrap the raw text in the user prompt.
    The text is embedded verbatim.
    """
    label = LANGUAGE_LABELS[Language(language)]

    if InputKind(input_kind) is InputKind.YOUTUBE:
        system_instruction = YOUTUBE_SYSTEM_PROMPT
        user_prompt = (
            f"Process this YouTube transcript and create a presentation in {label}. "
            f"Clean the content first: \n\n {text}"
        )
    else:
        system_instruction = DOCUMENT_SYSTEM_PROMPT
        user_prompt = f"Generate a professional presentation from the following document in {label}: \n\n {text}"

    return PromptBundle(system_instruction, user_prompt, RESPONSE_SCHEMA)
