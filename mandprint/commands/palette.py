"""List the printable palette sorted by a channel priority.

--order picks the channel compared first, second and third
(rgb, rbg, grb, gbr, brg, bgr). The sort is stable, so the listing is
identical on every run.

Example:
    mandprint palette --order gbr
"""

from mandprint.core.ordering import ChannelOrder, sorted_palette
from mandprint.core.types import Command, Hue, Report

command = Command(
    name='palette',
    help='Printable palette sorted by channel priority (--order).',
    takes_colors=False,
)


@command.run
def run(hues: list[Hue], report: Report, args) -> None:
    order = ChannelOrder.parse(getattr(args, 'order', None) or 'rgb')
    colors = sorted_palette(order)
    report.add(
        f'palette-{order.value}',
        'palette',
        {
            'order': order.value,
            'count': len(colors),
            'colors': [list(c) for c in colors],
        },
    )
