"""Check whether each colour prints as shown on screen.

For every colour reports:
  exact       rounded 0-255 colour is one of the printable palette entries
  near        exact, or squared RGB distance to the palette <= 33² (1089)
  in-cube     all raw components lie inside [0, 1] (a valid display colour)
  Δ²          squared distance to the closest printable colour
  marker      ' ' when the colour prints exactly, '!' when it may differ

Colours that are exact members count as printable in the summary.

Example:
    mandprint check '#004924' 0,73,36 0.5,0.5,1.2
"""

from mandprint.core.classify import (
    classify_exact,
    classify_near,
    classify_unit_cube,
    display_marker,
)
from mandprint.core.palette import format_rgb, minimum_distance, rgb_to_hex, to_rgb
from mandprint.core.types import Command, Hue, Report

command = Command(
    name='check',
    help='Exact, near and in-cube printability checks for each colour.',
)


@command.run
def run(hues: list[Hue], report: Report, args) -> None:
    for hue in hues:
        rgb = to_rgb(hue.color)
        if rgb is None:
            report.add(hue.key, 'check', {'error': 'colour components unavailable'})
            report.record_unprintable(hue.key)
            continue

        exact = classify_exact(hue.color, hue.num)
        report.add(
            hue.key,
            'check',
            {
                'rgb': format_rgb(rgb),
                'hex': rgb_to_hex(rgb) if all(0 <= c <= 255 for c in rgb) else None,
                'exact': exact,
                'near': classify_near(hue.color, hue.num),
                'unit_cube': classify_unit_cube(hue.color, hue.num),
                'min_distance': minimum_distance(hue.color),
                'marker': display_marker(hue.color),
            },
        )
        if exact:
            report.record_printable(hue.key)
        else:
            report.record_unprintable(hue.key)
