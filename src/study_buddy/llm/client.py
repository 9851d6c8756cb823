"""Gemini client factory.

The client is built once in the application lifespan and passed explicitly to
the generator. HttpRetryOptions is NOT configured -- any retrying is done by
tenacity in the generator, and is off by default.
"""

from google import genai
from google.genai import types

from study_buddy.config import Settings


def create_gemini_client(settings: Settings) -> genai.Client:
    """Return a Gemini client configured from settings."""
    return genai.Client(
        api_key=settings.gemini_api_key,
        http_options=types.HttpOptions(timeout=settings.gemini_timeout_ms),
    )
