"""Account endpoints."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from study_buddy.api.deps import Services, get_services
from study_buddy.identity import AuthSession, sign_in, sign_up

router = APIRouter(prefix="/auth", tags=["auth"])


class Credentials(BaseModel):
    email: str = Field(min_length=3)
    password: str = Field(min_length=6)


@router.post("/signup", response_model=AuthSession)
async def signup(body: Credentials, services: Services = Depends(get_services)) -> AuthSession:
    return await sign_up(services.settings, body.email, body.password)


@router.post("/login", response_model=AuthSession)
async def login(body: Credentials, services: Services = Depends(get_services)) -> AuthSession:
    return await sign_in(services.settings, body.email, body.password)
