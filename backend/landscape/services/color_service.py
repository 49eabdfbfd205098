"""
Color Mapping - entry -> display color.

Two modes:
- category: the category's registry color (fallback for unknown keys)
- temporal: position on a two-sided logarithmic time scale, sampled
  from a sequential blue colormap so that deep time is darkest.
"""
import math
from enum import Enum
from typing import Iterable

from matplotlib import colormaps
from matplotlib.colors import to_hex

from landscape.core.taxonomy import FALLBACK_COLOR, lookup_category
from landscape.schemas.entry import Entry

MIN_KEY = -4_500_000_000  # formation of the Earth
MAX_KEY = 2025            # present

_LOG_MIN = math.log10(abs(MIN_KEY) + 1)

TEMPORAL_COLORMAP = "Blues"


class ColorMode(str, Enum):
    CATEGORY = "category"
    TEMPORAL = "temporal"


def parse_color_mode(value: str) -> ColorMode:
    # "categorical" is accepted for the category mode as well
    if value == "categorical":
        return ColorMode.CATEGORY
    try:
        return ColorMode(value)
    except ValueError:
        raise ValueError(f"Unknown color mode: {value}")


def temporal_position(sort_key: float) -> float:
    """
    Normalised position t of a sort key on the temporal scale.

    Negative keys: t = 1 - log10(|k| + 1) / log10(|MIN_KEY| + 1), so the
    deep past tends to 0. Non-negative keys are compressed into the top
    decile: t = 0.9 + (k / MAX_KEY) * 0.1. The branches do not meet at
    zero (t -> 1 from below, t = 0.9 at zero); legends depend on this.
    """
    if sort_key < 0:
        return 1 - math.log10(abs(sort_key) + 1) / _LOG_MIN
    return 0.9 + (sort_key / MAX_KEY) * 0.1


def temporal_color(sort_key: float) -> str:
    t = temporal_position(sort_key)
    # Blues runs light -> dark, so the deep past (t near 0) samples the dark end
    x = min(max(1 - t, 0.0), 1.0)
    return to_hex(colormaps[TEMPORAL_COLORMAP](x))


def color_of(entry: Entry, mode: ColorMode = ColorMode.CATEGORY) -> str:
    """Display color of an entry in the given mode."""
    if mode == ColorMode.TEMPORAL:
        return temporal_color(entry.sort_key)
    if mode == ColorMode.CATEGORY:
        return lookup_category(entry.category).meta.color
    return FALLBACK_COLOR


def colors_for(entries: Iterable[Entry], mode: ColorMode = ColorMode.CATEGORY) -> dict[int, str]:
    """Batch helper: entry id -> color."""
    return {entry.id: color_of(entry, mode) for entry in entries}
