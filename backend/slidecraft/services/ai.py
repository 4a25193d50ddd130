from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError as SchemaValidationError

from ..config import settings
from ..schemas.deck import Deck
from ..schemas.session import InputKind, Language
from .errors import SlidecraftError
from .prompts import PromptBundle, build_prompt

logger = logging.getLogger(__name__)


class ServiceError(SlidecraftError):
    default_message = "Generation failed. Please try again later."


class FormatError(SlidecraftError):
    default_message = "The AI response was not in the expected format. Please try again."


def select_model(extended_reasoning: bool) -> str:
    return settings.REASONING_MODEL if extended_reasoning else settings.FAST_MODEL


def _client() -> AsyncOpenAI:
    if not settings.AI_API_KEY:
        raise ServiceError("AI_API_KEY is not set")
    return AsyncOpenAI(api_key=settings.AI_API_KEY, base_url=settings.AI_BASE_URL, max_retries=0)


def _request_kwargs(bundle: PromptBundle, model: str, thinking_budget: Optional[int]) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {
        "model": model,
        "messages": [
            {"role": "system", "content": bundle.system_instruction},
            {"role": "user", "content": bundle.user_prompt},
        ],
        "response_format": {
            "type": "json_schema",
            "json_schema": {"name": "presentation", "schema": bundle.response_schema},
        },
    }
    if thinking_budget is not None:
        # Provider-specific block of the OpenAI-compatible endpoint
        kwargs["extra_body"] = {
            "extra_body": {"google": {"thinking_config": {"thinking_budget": thinking_budget}}}
        }
    return kwargs


def parse_deck(raw: Optional[str]) -> Deck:
    """
    Validate the model's text payload against the deck shape.
    Anything that is not `{title, slides: [{title, bullets}]}` with at least one slide is a FormatError.
    """
    try:
        data = json.loads(raw or "{}")
        return Deck.model_validate(data)
    except (json.JSONDecodeError, SchemaValidationError) as e:
        logger.warning("Failed to parse AI response: %s", e)
        raise FormatError() from e


async def generate_presentation(
    text: str,
    language: Language,
    input_kind: InputKind,
    extended_reasoning: bool = False,
    *,
    client: Optional[AsyncOpenAI] = None,
) -> Deck:
    """One request to the AI service, no retries, no streaming."""
    bundle = build_prompt(text, language, input_kind)
    model = select_model(extended_reasoning)
    budget = settings.THINKING_BUDGET if extended_reasoning and model == settings.REASONING_MODEL else None

    if client is None:
        client = _client()

    logger.info("Generating deck: model=%s input_kind=%s language=%s thinking_budget=%s chars=%d",
                model, InputKind(input_kind).value, Language(language).value, budget, len(text))
    try:
        resp = await client.chat.completions.create(**_request_kwargs(bundle, model, budget))
        raw_response = resp.choices[0].message.content if resp.choices else None
    except OpenAIError as e:
        logger.warning("AI call failed: %s", e)
        raise ServiceError(str(e) or None) from e
    except Exception as e:
        logger.exception("Unexpected failure talking to the AI service")
        raise ServiceError() from e

    logger.debug("=== RAW AI OUTPUT ===")
    logger.debug(raw_response)
    logger.debug("=== END RAW AI OUTPUT ===")
    return parse_deck(raw_response)
