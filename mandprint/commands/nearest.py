"""List the closest printable colours for each colour.

Computes the squared RGB distance from the colour to every palette entry
and returns ALL entries tied for the minimum, in palette order. Ties are
common; each tied entry is an equally good substitute.

Example:
    mandprint nearest 1,1,1 '#ff8000'
    mandprint nearest 0.2,0.4,0.9 --json
"""

from mandprint.core.palette import format_rgb, minimum_distance, nearest_colors, to_rgb
from mandprint.core.types import Command, Hue, Report

command = Command(
    name='nearest',
    help='All printable palette colours tied for closest to each colour.',
)


@command.run
def run(hues: list[Hue], report: Report, args) -> None:
    for hue in hues:
        rgb = to_rgb(hue.color)
        if rgb is None:
            report.add(hue.key, 'nearest', {'error': 'colour components unavailable'})
            continue

        closest = nearest_colors(hue.color, hue.num)
        report.add(
            hue.key,
            'nearest',
            {
                'rgb': format_rgb(rgb),
                'min_distance': minimum_distance(hue.color),
                'closest': [list(c) for c in closest],
            },
        )
