"""Google Gemini API wrapper for the optional coaching collaborator."""

import asyncio
import json
import logging

from google import genai
from google.genai import types

from config import settings
from services.errors import CollaboratorUnavailableError

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - generative coaching disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_json(prompt: str, system_instruction: str | None = None) -> dict:
    """Send a prompt to Gemini and parse the JSON object it returns.

    Raises CollaboratorUnavailableError when no key is configured, the call
    fails or times out, or the reply is not a JSON object.
    """
    try:
        client = get_client()
    except Exception as e:
        logger.error("Failed to create Gemini client: %s", e)
        raise CollaboratorUnavailableError("Gemini client unavailable") from e
    if client is None:
        raise CollaboratorUnavailableError("Gemini not configured")

    try:
        response = await asyncio.wait_for(
            client.aio.models.generate_content(
                model=settings.gemini_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=system_instruction,
                    temperature=settings.coach_temperature,
                    max_output_tokens=4096,
                    response_mime_type="application/json",
                ),
            ),
            timeout=settings.coach_timeout_seconds,
        )
        text = response.text or ""
    except asyncio.TimeoutError as e:
        logger.warning("Gemini call timed out after %.1fs", settings.coach_timeout_seconds)
        raise CollaboratorUnavailableError("Gemini timed out") from e
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        raise CollaboratorUnavailableError("Gemini API error") from e

    try:
        data = json.loads(_strip_code_fences(text))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        raise CollaboratorUnavailableError("Gemini returned invalid JSON") from e

    if not isinstance(data, dict):
        raise CollaboratorUnavailableError("Gemini returned a non-object JSON value")
    return data
