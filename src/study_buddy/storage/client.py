"""Async Supabase client factory."""

from supabase import AsyncClient, acreate_client

from study_buddy.config import Settings


async def create_supabase_client(settings: Settings) -> AsyncClient:
    """Create an async Supabase client from settings.

    The lifespan creates one shared client for table access. Auth flows that
    establish a session create their own so no user session leaks into it.
    """
    return await acreate_client(settings.supabase_url, settings.supabase_key)
