"""
Graphghan configuration and constants.
"""

from enum import Enum


class ThemeId(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SPOOKY = "spooky"


DEFAULT_THEME = ThemeId.LIGHT

# Supported calendar years (4-digit Gregorian)
MIN_YEAR = 1000
MAX_YEAR = 9999

# How many years the year picker offers, counting back from the current one
YEAR_SELECTION_WINDOW = 10

# Grid geometry. One day is a 2x2 block of squares; weeks run left to right,
# weekdays (Sunday first) top to bottom.
WEEKS_PER_YEAR = 53
DAYS_PER_WEEK = 7
DAY_BLOCK_SIZE = 2
BORDER_WIDTH = 2

DATA_COLS = WEEKS_PER_YEAR * DAY_BLOCK_SIZE  # 106
DATA_ROWS = DAYS_PER_WEEK * DAY_BLOCK_SIZE  # 14
GRID_COLS = DATA_COLS + 2 * BORDER_WIDTH  # 110
GRID_ROWS = DATA_ROWS + 2 * BORDER_WIDTH  # 18

# Intensity levels
LEVEL_COUNT = 5  # data levels 0-4
BORDER_LEVEL = 5

# Inclusive upper count bound for levels 0-3; anything above is level 4
LEVEL_THRESHOLDS: list[tuple[int, int]] = [
    (0, 0),
    (2, 1),
    (5, 2),
    (8, 3),
]

# Symbol per level in the printable transcript
LEVEL_INDICATORS: dict[int, str] = {
    0: "0",
    1: "1",
    2: "2",
    3: "3",
    4: "4",
    BORDER_LEVEL: "B",
}

# Finished size of one corner-to-corner square, worsted yarn on a size H/8 hook
SQUARE_SIZE_INCHES = 3.0
CM_PER_INCH = 2.54

# Largest daily count the grid's int64 count arena can hold
MAX_DAILY_COUNT = 2**63 - 1
