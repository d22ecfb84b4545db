"""Report builder: text and JSON output for termpal results."""

import json
from typing import Any

from termpal.core.types import Report


def _format_palette(palette: dict[str, str]) -> list[str]:
    width = max(len(k) for k in palette)
    return [f'  {name:<{width}}  {value}' for name, value in palette.items()]


def _format_colour_rows(rows: list[dict[str, Any]]) -> list[str]:
    lines = []
    for row in rows:
        lines.append(
            f'  {row["hex"]}  n={row["count"]:<6} L={row["luminance"]:>5.1f} '
            f'S={row["saturation"]:.2f} V={row["vibrancy"]:.2f} H={row["hue"]:>5.1f} score={row["score"]:.1f}'
        )
    return lines


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.source:
        header = f'termpal: {report.source}'
        if report.width and report.height:
            header += f' (sampled {report.width}×{report.height})'
        lines.append(header)
        lines.append('')

    for name, data in report.sections.items():
        lines.append(f'── {name}')
        if name == 'extract':
            if 'theme_names' in data:
                names = data['theme_names']
                lines.append(f'  terminal theme: {names["terminal"]}   json theme: {names["json"]}')
            lines.extend(_format_palette(data['palette']))
            for check in data.get('checks', []):
                mark = '✓' if check['pass'] else '✗'
                lines.append(f'  {check["pair"]}: {check["ratio"]:.2f}:1 (min {check["min"]})  {mark}')
        elif name in ('census', 'diverse') and 'colours' in data:
            lines.append(f'  {len(data["colours"])} colours')
            lines.extend(_format_colour_rows(data['colours']))
        elif name == 'contrast':
            aa = '✓' if data['aa'] else '✗'
            aaa = '✓' if data['aaa'] else '✗'
            lines.append(f'  {data["foreground"]} on {data["background"]}: {data["ratio"]:.2f}:1  AA {aa}  AAA {aaa}')
            if data.get('adjusted') and data['adjusted'] != data['foreground']:
                lines.append(
                    f'  adjusted ({data["policy"]}): {data["adjusted"]} -> {data["adjusted_ratio"]:.2f}:1'
                    f' (min {data["min_ratio"]})'
                )
        else:
            # Generic fallback
            for k, v in data.items():
                lines.append(f'  {name}.{k}: {v}')
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total} checks  FAIL {report.fail_count}/{total} checks')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {}
    if report.source:
        obj['source'] = report.source
    if report.width and report.height:
        obj['sampled'] = {'width': report.width, 'height': report.height}
    obj.update(report.sections)
    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
    }
    return json.dumps(obj, indent=2)


def sample_to_dict(sample) -> dict[str, Any]:
    """JSON-friendly view of a ColourSample."""
    return {
        'hex': sample.hex,
        'count': sample.count,
        'luminance': round(sample.luminance, 1),
        'saturation': round(sample.saturation, 3),
        'vibrancy': round(sample.vibrancy, 3),
        'hue': round(sample.hue, 1),
        'score': round(sample.score, 2),
    }
