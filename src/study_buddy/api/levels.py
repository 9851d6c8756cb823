"""Form metadata for the academic level selector."""

from fastapi import APIRouter

from study_buddy.models.domain import DOMAIN_PROFILES, AcademicDomain
from study_buddy.models.notes import CamelModel

router = APIRouter(tags=["levels"])


class LevelOption(CamelModel):
    domain: AcademicDomain
    sub_level_label: str
    sub_levels: list[str]
    default_sub_level: str


@router.get("/levels", response_model=list[LevelOption])
async def levels() -> list[LevelOption]:
    """Domains with their sub-level choices, in display order."""
    return [
        LevelOption(
            domain=domain,
            sub_level_label=profile.sub_level_label,
            sub_levels=list(profile.sub_levels),
            default_sub_level=profile.default_sub_level,
        )
        for domain, profile in DOMAIN_PROFILES.items()
    ]
