"""Notes generator: topics + level -> GeneratedNotes via Gemini.

Wires the prompt, client and schema modules into the generation flow:
validate input, call Gemini in JSON mode, parse the raw text, then save the
result to the store on a best-effort basis.
"""

import logging
from dataclasses import dataclass

import httpx
from google import genai
from google.genai import types
from google.genai.errors import APIError, ClientError, ServerError
from pydantic import ValidationError as SchemaValidationError
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from study_buddy.cost import extract_usage, log_usage
from study_buddy.errors import GenerationError, PersistenceError, ResponseParseError, ValidationError
from study_buddy.llm.prompts import GEMINI_MODEL, build_prompt
from study_buddy.llm.schemas import NotesResponse
from study_buddy.models.domain import AcademicDomain
from study_buddy.models.notes import GeneratedNotes
from study_buddy.storage.repository import NoteStore, build_record

logger = logging.getLogger(__name__)


@dataclass
class GenerationOutcome:
    """Generated notes plus the stored row id (None when the save failed)."""

    notes: GeneratedNotes
    record_id: str | None = None


def split_topics(raw: str) -> list[str]:
    """Split comma-separated input into trimmed, non-empty topics, keeping order."""
    return [topic.strip() for topic in raw.split(",") if topic.strip()]


def _is_retryable(error: BaseException) -> bool:
    """Determine if a Gemini API error is transient and worth retrying.

    Returns True for server errors (5xx) and rate limits (429).
    Returns False for permanent client errors (400, 401, 403).
    """
    if isinstance(error, ServerError):
        return True
    if isinstance(error, ClientError) and error.code == 429:
        return True
    return False


async def _call_gemini(client: genai.Client, prompt: str, max_attempts: int = 1) -> object:
    """Call Gemini in JSON mode, retrying transient errors up to max_attempts total.

    Returns:
        Raw GenerateContentResponse (caller reads .text and usage_metadata).
    """
    retryer = AsyncRetrying(
        retry=retry_if_exception(_is_retryable),
        wait=wait_exponential_jitter(initial=1, max=30, jitter=2),
        stop=stop_after_attempt(max(1, max_attempts)),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    return await retryer(
        client.aio.models.generate_content,
        model=GEMINI_MODEL,
        contents=prompt,
        config=types.GenerateContentConfig(response_mime_type="application/json"),
    )


def parse_notes_response(text: str | None) -> NotesResponse:
    """Parse raw response text into {"notes": [TopicNote, ...]}.

    Raises:
        ResponseParseError: If the text is empty, not JSON, or lacks a valid notes list.
    """
    if not text:
        raise ResponseParseError("Model returned an empty response")
    try:
        return NotesResponse.model_validate_json(text)
    except SchemaValidationError as exc:
        raise ResponseParseError(
            f"Model response is not valid notes JSON ({exc.error_count()} error(s))"
        ) from exc


async def generate_notes(
    client: genai.Client,
    store: NoteStore,
    topics: str,
    domain: AcademicDomain,
    sub_level: str | None = None,
    owner_id: str | None = None,
    *,
    max_attempts: int = 1,
) -> GenerationOutcome:
    """Generate chapter notes for comma-separated topics and record them in history.

    Steps:
    1. Split and validate topics (no external call when empty)
    2. Build the prompt and call Gemini requesting JSON output
    3. Parse the raw text into TopicNote models
    4. Save to the store; a save failure is logged and does not fail the call

    Args:
        client: Configured Gemini client instance.
        store: History store for the best-effort save.
        topics: Raw comma-separated topics as typed by the user.
        domain: Academic domain.
        sub_level: Optional grade, semester or exam name.
        owner_id: Signed-in user id, or None for anonymous history.
        max_attempts: Total provider attempts for transient errors (1 = no retry).

    Raises:
        ValidationError: If no topics remain after splitting.
        GenerationError: If the provider call fails.
        ResponseParseError: If the provider text cannot be parsed.
    """
    topic_list = split_topics(topics)
    if not topic_list:
        raise ValidationError("Please enter at least one topic")
    sub_level = sub_level or None

    prompt = build_prompt(topic_list, domain, sub_level)

    try:
        response = await _call_gemini(client, prompt, max_attempts)
    except (APIError, httpx.HTTPError) as exc:
        logger.error("Gemini API error generating notes for %s", topic_list, exc_info=True)
        raise GenerationError(f"Failed to generate notes: {exc}") from exc

    log_usage(topic_list, GEMINI_MODEL, extract_usage(response))

    try:
        parsed = parse_notes_response(response.text)
    except ResponseParseError:
        logger.error("Unparseable Gemini response for %s", topic_list, exc_info=True)
        raise

    notes = GeneratedNotes(
        domain=domain,
        sub_level=sub_level,
        topics=topic_list,
        notes=parsed.notes,
    )

    record_id = None
    try:
        record = await store.save(build_record(notes, topics, owner_id))
        record_id = record.id
    except PersistenceError:
        # History is best-effort; the caller still gets the notes
        logger.error("Failed to save generated notes for %s", topic_list, exc_info=True)

    return GenerationOutcome(notes=notes, record_id=record_id)
