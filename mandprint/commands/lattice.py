"""Enumerate the 8×8×8 colour cube in a channel-priority order.

Each channel takes the levels 0, 36, 73, 109, 146, 182, 219, 255. The
outer loop runs over the first channel of --order, the inner loop over the
last, giving 512 colours. With --printable-only, every lattice colour that
is not a printable palette entry is replaced by white, so the grid keeps
its 512 cells.

With --png PATH, saves the cube as a swatch sheet: eight 8×8 slices laid
out in two rows of four, one slice per value of the outer channel.

Example:
    mandprint lattice --order grb
    mandprint lattice --order rgb --printable-only --png ./tmp/cube.png
"""

import os

import numpy as np
from PIL import Image

from mandprint.core.ordering import ChannelOrder, enumerate_lattice, lattice_slices
from mandprint.core.palette import RGB, is_member
from mandprint.core.types import Command, Hue, Report

command = Command(
    name='lattice',
    help='All 512 colour-cube colours in channel-priority order (--printable-only, --png).',
    takes_colors=False,
)

CELL = 30  # swatch size in px
BORDER = 1
SLICE_GAP = 10
SLICE_COLUMNS = 4
BACKGROUND = (224, 224, 224)


def render_sheet(colors: list[RGB]) -> Image.Image:
    """Draw the 512 colours as two rows of four 8×8 slices."""
    slices = lattice_slices(colors)
    side = int(round(len(slices[0]) ** 0.5))
    pitch = CELL + 2 * BORDER
    slice_px = side * pitch
    rows = (len(slices) + SLICE_COLUMNS - 1) // SLICE_COLUMNS
    width = SLICE_COLUMNS * slice_px + (SLICE_COLUMNS - 1) * SLICE_GAP
    height = rows * slice_px + (rows - 1) * SLICE_GAP

    sheet = np.empty((height, width, 3), dtype=np.uint8)
    sheet[:, :] = BACKGROUND
    for s, swatches in enumerate(slices):
        top = (s // SLICE_COLUMNS) * (slice_px + SLICE_GAP)
        left = (s % SLICE_COLUMNS) * (slice_px + SLICE_GAP)
        for i, rgb in enumerate(swatches):
            y = top + (i // side) * pitch + BORDER
            x = left + (i % side) * pitch + BORDER
            sheet[y : y + CELL, x : x + CELL] = rgb
    return Image.fromarray(sheet)


@command.run
def run(hues: list[Hue], report: Report, args) -> None:
    order = ChannelOrder.parse(getattr(args, 'order', None) or 'rgb')
    printable_only = bool(getattr(args, 'printable_only', False))
    colors = enumerate_lattice(order, printable_only=printable_only)

    data: dict = {
        'order': order.value,
        'printable_only': printable_only,
        'count': len(colors),
    }
    if printable_only:
        data['blank_count'] = sum(1 for c in enumerate_lattice(order) if not is_member(c))

    png = getattr(args, 'png', None)
    if png:
        parent = os.path.dirname(png)
        if parent:
            os.makedirs(parent, exist_ok=True)
        render_sheet(colors).save(png)
        data['png'] = png

    data['colors'] = [list(c) for c in colors]
    report.add(f'lattice-{order.value}', 'lattice', data)
