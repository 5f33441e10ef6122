"""Report builder — text and JSON output for mandprint results."""

import json
from typing import Any

from mandprint.core.palette import format_rgb
from mandprint.core.types import Report

ROW_WIDTH = 8  # colours per line in listings, one lattice slice row


def _flag(value: bool) -> str:
    return '\u2713' if value else '\u2717'


def _rows(colors: list) -> list[str]:
    labels = [format_rgb(tuple(c)) for c in colors]
    return ['    ' + '  '.join(labels[i : i + ROW_WIDTH]) for i in range(0, len(labels), ROW_WIDTH)]


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [f'mandprint: {report.command}', '']

    for key, sections in report.entries.items():
        lines.append(f'── {key}')

        for name, data in sections.items():
            if 'error' in data:
                lines.append(f'  error: {data["error"]}')
            elif name == 'check':
                lines.append(
                    f'  [{data["marker"]}] {data["rgb"]}  exact {_flag(data["exact"])}  '
                    f'near {_flag(data["near"])}  in-cube {_flag(data["unit_cube"])}  '
                    f'Δ²={data["min_distance"]}'
                )
            elif name == 'nearest':
                lines.append(f'  {data["rgb"]}  Δ²={data["min_distance"]}  {len(data["closest"])} closest:')
                lines.extend(_rows(data['closest']))
            elif name == 'batch':
                lines.append(f'  {data["mode"]}: {_flag(data["printable"])}')
            elif name in ('palette', 'lattice') and 'colors' in data:
                header = f'  {data["order"]}: {data["count"]} colours'
                if data.get('printable_only'):
                    header += f' ({data["blank_count"]} blank)'
                lines.append(header)
                if data.get('png'):
                    lines.append(f'  png: {data["png"]}')
                lines.extend(_rows(data['colors']))
            else:
                for k, v in data.items():
                    lines.append(f'  {name}.{k}: {v}')

        lines.append('')

    total = report.printable_count + report.unprintable_count
    if total > 0:
        lines.append(
            f'PRINTABLE {report.printable_count}/{total} colours  '
            f'NOT PRINTABLE {report.unprintable_count}/{total} colours'
        )
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'command': report.command, 'entries': []}

    for key, sections in report.entries.items():
        obj['entries'].append({'name': key, **sections})

    obj['summary'] = {
        'total': report.printable_count + report.unprintable_count,
        'printable': report.printable_count,
        'unprintable': report.unprintable_count,
    }
    return json.dumps(obj, indent=2)
