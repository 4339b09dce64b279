"""Report builder: text and JSON output for swatchkit results."""

import json
from typing import Any

from swatchkit.core.types import Report

PASS_MARK = '\u2713'
FAIL_MARK = '\u2717'


def _format_extract(data: dict[str, Any]) -> list[str]:
    lines = [f'  palette: {len(data.get("palette", []))} colours from {data.get("samples", 0)} samples']
    for entry in data.get('palette', []):
        pct = entry.get('pct', 0.0)
        lines.append(f'  {entry["hex"]}  rgb({entry["r"]}, {entry["g"]}, {entry["b"]})  {entry["count"]:>6}  {pct:5.1f}%')
    if 'exported' in data:
        lines.append(f'  saved: {data["exported"]}')
    return lines


def _format_contrast(data: dict[str, Any]) -> list[str]:
    lines = [f'  {data["foreground"]} on {data["background"]}  {data["ratio"]}:1']
    badges = '  '.join(f'{b["label"]} {PASS_MARK if b["pass"] else FAIL_MARK}' for b in data.get('badges', []))
    if badges:
        lines.append(f'  {badges}')
    return lines


def _format_sample(data: dict[str, Any]) -> list[str]:
    return [
        f'  step: {data.get("step", "?")}  max_samples: {data.get("max_samples", "?")}',
        f'  samples: {data.get("samples", 0)} opaque of {data.get("visited", "?")} visited',
    ]


_FORMATTERS = {
    'extract': _format_extract,
    'contrast': _format_contrast,
    'sample': _format_sample,
}


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.source:
        lines.append(f'swatchkit: {report.source} ({report.width}\u00d7{report.height})')
        lines.append('')

    for command_name, data in report.sections.items():
        lines.append(f'\u2500\u2500 {command_name}')
        formatter = _FORMATTERS.get(command_name)
        if formatter is not None:
            lines.extend(formatter(data))
        else:
            for k, v in data.items():
                lines.append(f'  {command_name}.{k}: {v}')
        lines.append('')

    for message in report.errors:
        lines.append(f'Error: {message}')
    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {}
    if report.source:
        obj['image'] = report.source
        obj['dimensions'] = {'width': report.width, 'height': report.height}
    obj.update(report.sections)
    obj['ok'] = report.ok
    if report.errors:
        obj['errors'] = list(report.errors)
    return json.dumps(obj, indent=2)
