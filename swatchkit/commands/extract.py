"""Extract a ranked palette of dominant colours from an image.

Grid-samples up to --max-samples opaque pixels (default 2500), clusters them
with k-means into --colors centres (clamped to 1-16, default 6) over
--iterations rounds (default 9), and lists each centre as hex with its pixel
count and share, most common first.

Initial centres are random; pass --seed (or SWATCHKIT_SEED) for repeatable
output.

With --name the palette is also written to <out_dir>/<name>.json, every
character outside [A-Za-z0-9] in the name replaced by '_'.

Example:
    swatchkit extract photo.jpg --colors 8
    swatchkit extract photo.jpg -n 5 --seed 1 --name "Sunset v2" --out-dir ./palettes
    swatchkit extract photo.jpg --json
"""

import json
import os
import re

from swatchkit.commands._imaging import open_image
from swatchkit.core import quantizer, sampler
from swatchkit.core.types import Command, PaletteEntry, Report

command = Command(
    name='extract',
    help='Extract a ranked palette of dominant colours from an image (k-means).',
)


def safe_filename(name: str) -> str:
    """Palette name as a file stem: non-alphanumerics become '_'."""
    return re.sub(r'[^a-zA-Z0-9]', '_', name) or 'palette'


def export_palette(name: str, palette: list[PaletteEntry], out_dir: str) -> str:
    """Write {name, colors} JSON and return its path."""
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, f'{safe_filename(name)}.json')
    with open(path, 'w', encoding='utf-8') as f:
        json.dump({'name': name.strip(), 'colors': [entry.hex for entry in palette]}, f, indent=2)
    return path


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('image', help='Path to image (PNG, JPG, ...)')
    parser.add_argument('-n', '--colors', type=int, default=None, help='Palette size, clamped to 1-16')
    parser.add_argument('-s', '--max-samples', type=int, default=None, help='Upper bound on sampled pixels')
    parser.add_argument('-i', '--iterations', type=int, default=None, help='k-means refinement rounds')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for centre initialisation')
    parser.add_argument('--name', default=None, help='Export the palette as JSON under this name')
    parser.add_argument('-o', '--out-dir', default='.', help='Directory for --name exports (default: cwd)')


@command.run
def run(report: Report, args) -> None:
    image = open_image(args.image, report)
    if image is None:
        return

    pixels = sampler.sample(image, args.max_samples)
    if sampler.is_sample_failure(pixels):
        report.fail('Image could not be sampled')
        return

    palette = quantizer.quantize(pixels, args.colors, args.iterations, seed=args.seed)
    data = {
        'samples': len(pixels),
        'palette': [entry.to_dict(total=len(pixels)) for entry in palette],
    }
    if args.name is not None:
        if not args.name.strip():
            report.fail('Please provide a palette name')
        else:
            data['exported'] = export_palette(args.name, palette, args.out_dir)
    report.add('extract', data)
