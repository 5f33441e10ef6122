"""Per-colour and batch printability classification.

Each classifier takes normalised components and returns a bool, failing
closed (False) when the components cannot be read. batch_classify applies
one classifier to a list of Hue objects and returns the answers in the same
order, one per hue.
"""

import logging
from collections.abc import Callable, Sequence

from mandprint.core.palette import (
    format_rgb,
    is_exact_member,
    is_member,
    is_near,
    is_within_unit_cube,
    nearest_colors,
    to_rgb,
)
from mandprint.core.types import Hue

logger = logging.getLogger(__name__)

# Status glyphs shown beside a colour in the list
MARKER_PRINTABLE = ' '
MARKER_UNPRINTABLE = '!'


def _log_result(color, num: int, check: str, result: bool) -> None:
    rgb = to_rgb(color)
    if rgb is not None:
        logger.debug('Color Number %d(%s): %s: %s', num, format_rgb(rgb), check, result)


def classify_exact(color, num: int = 0) -> bool:
    result = is_exact_member(color)
    _log_result(color, num, 'in printable list', result)
    return result


def classify_near(color, num: int = 0) -> bool:
    result = is_near(color)
    _log_result(color, num, 'near printable list', result)
    return result


def classify_unit_cube(color, num: int = 0) -> bool:
    """Structural check only: are the raw components inside [0, 1]?"""
    result = is_within_unit_cube(color)
    _log_result(color, num, 'calculated printable', result)
    return result


def classify_closest(color, num: int = 0) -> bool:
    """True if the closest printable colours resolve to palette entries."""
    return any(is_member(rgb) for rgb in nearest_colors(color, num))


CLASSIFIERS: dict[str, Callable[..., bool]] = {
    'exact': classify_exact,
    'near': classify_near,
    'cube': classify_unit_cube,
    'closest': classify_closest,
}


def get_classifier(mode: str) -> Callable[..., bool]:
    if mode not in CLASSIFIERS:
        raise KeyError(f'Unknown mode: {mode}. Available: {", ".join(sorted(CLASSIFIERS))}')
    return CLASSIFIERS[mode]


def batch_classify(hues: Sequence[Hue], mode: str = 'exact') -> list[bool]:
    """Classify each hue independently. Output[i] answers hues[i]."""
    classifier = get_classifier(mode)
    return [classifier(hue.color, hue.num) for hue in hues]


def display_marker(color) -> str:
    """' ' if the colour prints exactly, '!' if the print may differ from the screen."""
    return MARKER_PRINTABLE if is_exact_member(color) else MARKER_UNPRINTABLE
