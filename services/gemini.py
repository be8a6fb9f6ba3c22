# services/gemini.py
import functools
import logging

from google import genai
from google.genai import types

from config import settings

_LOG = logging.getLogger(__name__)


class GeminiNotConfigured(RuntimeError):
    """GEMINI_API_KEY is not set."""


def is_configured() -> bool:
    return bool(settings.gemini_api_key)


# ───────────── Client (lazy, one per process) ─────────────
@functools.lru_cache(maxsize=1)
def _client() -> genai.Client:
    if not is_configured():
        raise GeminiNotConfigured("GEMINI_API_KEY not set in environment")
    return genai.Client(api_key=settings.gemini_api_key)


# ───────────── Generation (sync) ─────────────
def generate(
    prompt: str,
    temperature: float = 0.7,
    max_output_tokens: int = 2000
) -> str:
    """Run a chat completion and return the LLM’s text response."""
    try:
        resp = _client().models.generate_content(
            model=settings.gemini_model,
            contents=[prompt],
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_output_tokens
            )
        )
        # take the first candidate’s text
        return resp.candidates[0].content.parts[0].text
    except Exception:
        _LOG.exception("Gemini generation failed")
        raise
