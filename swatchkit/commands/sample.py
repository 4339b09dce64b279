"""Show how an image would be grid-sampled before clustering.

Reports the grid step, how many coordinates the grid visits, and how many
of those were opaque and kept. Useful for choosing --max-samples.

Example:
    swatchkit sample photo.png --max-samples 1000
"""

import math

from swatchkit.commands._imaging import open_image
from swatchkit.core import sampler
from swatchkit.core.types import Command, Report

command = Command(
    name='sample',
    help='Report grid step and opaque sample count for an image.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('image', help='Path to image (PNG, JPG, ...)')
    parser.add_argument('-s', '--max-samples', type=int, default=None, help='Upper bound on sampled pixels')


@command.run
def run(report: Report, args) -> None:
    image = open_image(args.image, report)
    if image is None:
        return

    step = sampler.grid_step(image.width * image.height, args.max_samples)
    pixels = sampler.sample(image, args.max_samples)
    report.add(
        'sample',
        {
            'max_samples': args.max_samples,
            'step': step,
            'visited': math.ceil(image.width / step) * math.ceil(image.height / step),
            'samples': len(pixels),
        },
    )
