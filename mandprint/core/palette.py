"""Printable palette lookups — membership, nearness and nearest-colour search.

Query colours arrive as normalised float components (r, g, b[, a]) in the
0-1 range used by the colour picker. They are converted to 0-255 ints with
round(c * 255) before any comparison; everything after that is integer
arithmetic so exact-match and distance results always agree.

Malformed components (None, too short, non-numeric, NaN) never raise:
membership tests return False and searches return nothing.
"""

import logging
import math
from collections.abc import Sequence

import numpy as np

from mandprint.core.palette_data import PRINTABLE_COLORS

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]

# 33² — squared distance at or below which a colour prints "close enough"
NEAR_LIMIT = 33 * 33

PRINTABLE_SET: frozenset[RGB] = frozenset(PRINTABLE_COLORS)

PALETTE_ARRAY = np.array(PRINTABLE_COLORS, dtype=np.int64)
PALETTE_ARRAY.setflags(write=False)

# 3 * (2**30 + 255)**2 stays below 2**63
INT64_SAFE_CHANNEL = 2**30


def hex_to_rgb(hex_str: str) -> RGB | None:
    """Convert '#rrggbb' or '#rgb' to an (r, g, b) tuple. Returns None if invalid."""
    h = hex_str.strip().lstrip('#')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if len(h) != 6:
        return None
    try:
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
    except ValueError:
        return None


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'


def format_rgb(rgb: RGB) -> str:
    """Zero-padded 'rrr-ggg-bbb' label, e.g. (0, 73, 36) -> '000-073-036'."""
    return '-'.join(f'{c:03d}' for c in rgb)


def components(color) -> tuple[float, float, float] | None:
    """Extract the raw (r, g, b) float components, or None if the colour is malformed."""
    try:
        r, g, b = float(color[0]), float(color[1]), float(color[2])
    except (TypeError, ValueError, IndexError, KeyError):
        return None
    if not all(math.isfinite(c) for c in (r, g, b)):
        return None
    return (r, g, b)


def _round_half_away(x: float) -> int:
    # Python's round() is banker's rounding; picker colours round half away from zero
    if x >= 0:
        return math.floor(x + 0.5)
    return -math.floor(-x + 0.5)


def to_rgb(color) -> RGB | None:
    """Convert normalised components to 0-255 ints. None if malformed."""
    comps = components(color)
    if comps is None:
        return None
    r, g, b = comps
    return (_round_half_away(r * 255.0), _round_half_away(g * 255.0), _round_half_away(b * 255.0))


def to_components(rgb: RGB) -> tuple[float, float, float]:
    """Convert a 0-255 int triple back to normalised float components."""
    r, g, b = rgb
    return (r / 255.0, g / 255.0, b / 255.0)


def squared_distance(a: Sequence[int], b: Sequence[int]) -> int:
    """Squared Euclidean distance in RGB space. Exact integer, max 3 * 255² for in-range colours."""
    dr = int(a[0]) - int(b[0])
    dg = int(a[1]) - int(b[1])
    db = int(a[2]) - int(b[2])
    return dr * dr + dg * dg + db * db


def palette_distances(rgb: RGB) -> list[int]:
    """Squared distance from rgb to every palette entry, in palette order.

    Channels past INT64_SAFE_CHANNEL would overflow int64 squares, so those
    queries are scanned with Python ints instead.
    """
    if all(abs(c) <= INT64_SAFE_CHANNEL for c in rgb):
        diff = PALETTE_ARRAY - np.asarray(rgb, dtype=np.int64)
        return (diff * diff).sum(axis=1).tolist()
    return [squared_distance(rgb, entry) for entry in PRINTABLE_COLORS]


def is_member(rgb: RGB) -> bool:
    """True if the int triple is exactly a palette entry."""
    return tuple(rgb) in PRINTABLE_SET


def is_exact_member(color) -> bool:
    """True if the colour, after rounding to 0-255, is exactly in the palette."""
    rgb = to_rgb(color)
    if rgb is None:
        return False
    return is_member(rgb)


def minimum_distance(color) -> int | None:
    """Smallest squared distance from the colour to any palette entry."""
    rgb = to_rgb(color)
    if rgb is None:
        return None
    return min(palette_distances(rgb))


def is_near(color) -> bool:
    """True if the colour is in the palette or within NEAR_LIMIT of an entry."""
    if is_exact_member(color):
        return True
    dist = minimum_distance(color)
    return dist is not None and dist <= NEAR_LIMIT


def is_within_unit_cube(color) -> bool:
    """True if all three raw components lie in [0, 1]. Independent of the palette."""
    comps = components(color)
    if comps is None:
        return False
    return all(0.0 <= c <= 1.0 for c in comps)


def nearest_colors(color, num: int = 0) -> list[RGB]:
    """All palette entries tied for the minimum distance, in palette order.

    Ties are common and every tied entry is returned so a caller can offer
    each one as a substitute. The list is never empty for a well-formed
    colour; a malformed colour yields [].
    """
    rgb = to_rgb(color)
    if rgb is None:
        logger.debug('Color Number %d: components unavailable', num)
        return []
    logger.debug('Color Number %d(%s): Checking for closest', num, format_rgb(rgb))

    distances = palette_distances(rgb)
    min_dist = min(distances)
    nearest = [entry for entry, dist in zip(PRINTABLE_COLORS, distances) if dist == min_dist]

    for item in nearest:
        logger.debug('    closest: %s', item)
    return nearest


def printable_options(color, num: int = 0) -> list[tuple[float, float, float]]:
    """The nearest printable colours as normalised float components."""
    return [to_components(rgb) for rgb in nearest_colors(color, num)]
