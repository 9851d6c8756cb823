"""LLM generation: prompt construction and structured notes via Gemini.

Public API:
    generate_notes(client, store, topics, domain, ...) -> GenerationOutcome
        Validates topics, calls Gemini in JSON mode, parses the response,
        and saves the result to history on a best-effort basis.
"""

from study_buddy.llm.client import create_gemini_client
from study_buddy.llm.generator import GenerationOutcome, generate_notes, split_topics
from study_buddy.llm.prompts import build_prompt
from study_buddy.llm.schemas import NotesResponse

__all__ = [
    "create_gemini_client",
    "generate_notes",
    "GenerationOutcome",
    "split_topics",
    "build_prompt",
    "NotesResponse",
]
