"""
Yarn color themes.

Each theme is a fixed table of six colors: levels 0-4 plus the border.
Adding a theme means adding a ThemeId member and a table here.
"""

import logging
from typing import Optional, Union

from graphghan.config import BORDER_LEVEL, DEFAULT_THEME, LEVEL_INDICATORS, ThemeId
from graphghan.models.theme import ColorRole, Theme

logger = logging.getLogger(__name__)

_LEVEL_DESCRIPTIONS = {
    0: "Days with no commits",
    1: "Days with 1-2 commits",
    2: "Days with 3-5 commits",
    3: "Days with 6-8 commits",
    4: "Days with 9+ commits",
}


def _palette(names_and_hex: list[tuple[str, str]], border_description: str) -> tuple[ColorRole, ...]:
    roles = [
        ColorRole(
            level=level,
            name=name,
            hex=hex_code,
            description=_LEVEL_DESCRIPTIONS[level],
            indicator=LEVEL_INDICATORS[level],
        )
        for level, (name, hex_code) in enumerate(names_and_hex[:BORDER_LEVEL])
    ]
    border_name, border_hex = names_and_hex[BORDER_LEVEL]
    roles.append(ColorRole(
        level=BORDER_LEVEL,
        name=border_name,
        hex=border_hex,
        description=border_description,
        indicator=LEVEL_INDICATORS[BORDER_LEVEL],
    ))
    return tuple(roles)


THEMES: dict[ThemeId, Theme] = {
    ThemeId.LIGHT: Theme(
        id=ThemeId.LIGHT,
        label="Light",
        border_yarn="Cream",
        colors=_palette(
            [
                ("Cream", "#f8f9fa"),
                ("Light Green", "#c6e48b"),
                ("Medium Green", "#7bc96f"),
                ("Dark Green", "#239a3b"),
                ("Forest Green", "#196127"),
                ("Border", "#e9ecef"),
            ],
            "Border and year separators (cream)",
        ),
    ),
    ThemeId.DARK: Theme(
        id=ThemeId.DARK,
        label="Dark",
        border_yarn="Forest Green",
        colors=_palette(
            [
                ("Charcoal", "#343a40"),
                ("Light Green", "#9be9a8"),
                ("Medium Green", "#40c463"),
                ("Dark Green", "#30a14e"),
                ("Forest Green", "#216e39"),
                ("Border", "#196127"),
            ],
            "Border and year separators (forest green)",
        ),
    ),
    ThemeId.SPOOKY: Theme(
        id=ThemeId.SPOOKY,
        label="Spooky",
        border_yarn="Pumpkin Orange",
        colors=_palette(
            [
                ("Charcoal", "#2d2d2d"),
                ("Light Orange", "#fdd0a2"),
                ("Medium Orange", "#fdae6b"),
                ("Dark Orange", "#fd8d3c"),
                ("Burnt Orange", "#d94701"),
                ("Border", "#ff7518"),
            ],
            "Border and year separators (pumpkin orange)",
        ),
    ),
}


def resolve_theme_id(key: Optional[Union[str, ThemeId]]) -> ThemeId:
    """Map a theme key to a ThemeId, falling back to the default theme."""
    if isinstance(key, ThemeId):
        return key
    if isinstance(key, str):
        try:
            return ThemeId(key.strip().lower())
        except ValueError:
            pass
    logger.info("Unknown theme %r, using %s", key, DEFAULT_THEME.value)
    return DEFAULT_THEME


def get_theme(key: Optional[Union[str, ThemeId]] = None) -> Theme:
    """Theme for ``key``; unrecognized keys get the default theme."""
    return THEMES[resolve_theme_id(key)]
