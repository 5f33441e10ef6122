"""Channel-priority orderings: sorted palette views and the colour-cube lattice.

A ChannelOrder names which channel is compared (or looped over) first,
second and third. The same ordering drives two different outputs:

  sorted_palette(order)      the printable palette, stable-sorted by that
                             channel priority (precomputed at import)
  enumerate_lattice(order)   all 8×8×8 lattice colours in nested-loop order,
                             outer loop = primary channel

Palette-browser grids show the 512 lattice colours as eight 8×8 slices
(two rows of four), see lattice_slices().
"""

import itertools
from enum import Enum
from types import MappingProxyType

from mandprint.core.palette import RGB, is_member, to_components
from mandprint.core.palette_data import PRINTABLE_COLORS

# Per-channel lattice levels, fixed — do not re-derive
LATTICE_LEVELS: tuple[int, ...] = (0, 36, 73, 109, 146, 182, 219, 255)
LATTICE_SIZE = len(LATTICE_LEVELS) ** 3

# Stands in for non-printable lattice points
BLANK: RGB = (255, 255, 255)

SLICE_SIZE = len(LATTICE_LEVELS) ** 2

_CHANNEL_INDEX = {'r': 0, 'g': 1, 'b': 2}


class ChannelOrder(Enum):
    RGB = 'rgb'
    RBG = 'rbg'
    GRB = 'grb'
    GBR = 'gbr'
    BRG = 'brg'
    BGR = 'bgr'

    @property
    def indices(self) -> tuple[int, int, int]:
        """Channel indices in priority order, e.g. GBR -> (1, 2, 0)."""
        i, j, k = (_CHANNEL_INDEX[c] for c in self.value)
        return (i, j, k)

    def key(self, rgb: RGB) -> tuple[int, int, int]:
        """Sort key: channel values rearranged into priority order."""
        i, j, k = self.indices
        return (rgb[i], rgb[j], rgb[k])

    @classmethod
    def parse(cls, name: str) -> 'ChannelOrder':
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ', '.join(o.value for o in cls)
            raise ValueError(f'Unknown channel order: {name!r}. Choose from {choices}') from None


def _build_views() -> MappingProxyType:
    # sorted() is stable, so equal keys keep base palette order
    return MappingProxyType(
        {order: tuple(sorted(PRINTABLE_COLORS, key=order.key)) for order in ChannelOrder}
    )


SORTED_VIEWS = _build_views()


def sorted_palette(order: ChannelOrder) -> tuple[RGB, ...]:
    """The printable palette sorted by the given channel priority."""
    return SORTED_VIEWS[order]


def palette_components(order: ChannelOrder | None = None) -> list[tuple[float, float, float]]:
    """Palette (base order, or a sorted view) as normalised float components."""
    colors = PRINTABLE_COLORS if order is None else SORTED_VIEWS[order]
    return [to_components(rgb) for rgb in colors]


def _from_priority(values: tuple[int, int, int], order: ChannelOrder) -> RGB:
    """Place values given in priority order back into (r, g, b) positions."""
    rgb = [0, 0, 0]
    for channel, value in zip(order.indices, values):
        rgb[channel] = value
    return (rgb[0], rgb[1], rgb[2])


def enumerate_lattice(order: ChannelOrder, printable_only: bool = False) -> list[RGB]:
    """Every lattice colour in nested-loop order for the channel priority.

    With printable_only, lattice points missing from the palette are replaced
    by BLANK rather than dropped, so the result is always LATTICE_SIZE long.
    """
    colors = []
    for values in itertools.product(LATTICE_LEVELS, repeat=3):
        rgb = _from_priority(values, order)
        if printable_only and not is_member(rgb):
            rgb = BLANK
        colors.append(rgb)
    return colors


def lattice_slices(colors: list[RGB]) -> list[list[RGB]]:
    """Split a lattice enumeration into eight consecutive 8×8 slices."""
    if len(colors) != LATTICE_SIZE:
        raise ValueError(f'Expected {LATTICE_SIZE} lattice colours, got {len(colors)}')
    return [colors[i : i + SLICE_SIZE] for i in range(0, LATTICE_SIZE, SLICE_SIZE)]
