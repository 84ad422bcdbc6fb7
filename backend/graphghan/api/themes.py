"""
API routes for theme and year selection data.
"""

from fastapi import APIRouter, HTTPException

from graphghan.config import DEFAULT_THEME
from graphghan.engine.calendar_normalizer import available_years
from graphghan.engine.themes import THEMES
from graphghan.models.theme import ThemeOutput

router = APIRouter(prefix="/api/v1", tags=["themes"])


@router.get("/themes", response_model=list[ThemeOutput])
async def list_themes() -> list[ThemeOutput]:
    """All yarn themes with their six colors."""
    return [
        ThemeOutput(
            id=theme.id,
            label=theme.label,
            border_yarn=theme.border_yarn,
            is_default=theme.id == DEFAULT_THEME,
            colors=list(theme.colors),
        )
        for theme in THEMES.values()
    ]


@router.get("/years")
async def selectable_years(current_year: int) -> dict:
    """
    Years offered in the year picker, newest first.

    Args:
        current_year: The caller's current calendar year
    """
    try:
        return {"current_year": current_year, "years": available_years(current_year)}
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
