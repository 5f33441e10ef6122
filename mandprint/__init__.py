"""mandprint — printable-colour checks and palette enumeration for MandArt."""

from mandprint.core.classify import (
    batch_classify,
    classify_exact,
    classify_near,
    classify_unit_cube,
    display_marker,
)
from mandprint.core.ordering import ChannelOrder, enumerate_lattice, sorted_palette
from mandprint.core.palette import nearest_colors, printable_options
from mandprint.core.types import Hue

__all__ = [
    'ChannelOrder',
    'Hue',
    'batch_classify',
    'classify_exact',
    'classify_near',
    'classify_unit_cube',
    'display_marker',
    'enumerate_lattice',
    'nearest_colors',
    'printable_options',
    'sorted_palette',
]
