"""
Pydantic models for yarn color themes.
"""

from pydantic import BaseModel, ConfigDict, Field

from graphghan.config import ThemeId


class ColorRole(BaseModel):
    """One yarn color: a data level (0-4) or the border (5)."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=0, le=5)
    name: str
    hex: str = Field(..., pattern=r"^#[0-9a-fA-F]{6}$")
    description: str
    indicator: str = Field(..., min_length=1, max_length=1)


class Theme(BaseModel):
    """A named set of exactly six yarn colors."""

    model_config = ConfigDict(frozen=True)

    id: ThemeId
    label: str
    border_yarn: str = Field(..., description="Yarn used for the 2-square border")
    colors: tuple[ColorRole, ...] = Field(..., min_length=6, max_length=6)

    def color_for(self, level: int) -> ColorRole:
        return self.colors[level]


class ThemeOutput(BaseModel):
    """Theme description returned by the API."""

    id: ThemeId
    label: str
    border_yarn: str
    is_default: bool
    colors: list[ColorRole]
