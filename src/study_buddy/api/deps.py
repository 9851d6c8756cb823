"""Request-scoped dependencies: shared services and the caller's identity."""

from dataclasses import dataclass

from fastapi import Depends, Request
from google import genai
from supabase import AsyncClient

from study_buddy.config import Settings
from study_buddy.identity import resolve_user_id
from study_buddy.storage.repository import NoteStore


@dataclass
class Services:
    """Everything a request needs, built once in the application lifespan."""

    settings: Settings
    gemini: genai.Client
    supabase: AsyncClient
    store: NoteStore


def get_services(request: Request) -> Services:
    """Return the services attached to the app at startup."""
    return request.app.state.services


async def get_user_id(
    request: Request,
    services: Services = Depends(get_services),
) -> str | None:
    """Resolve the Bearer token to a user id, or None for anonymous callers."""
    return await resolve_user_id(services.supabase, request.headers.get("Authorization"))
