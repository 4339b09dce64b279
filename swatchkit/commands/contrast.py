"""WCAG contrast ratio between a foreground and a background colour.

Colours may be hex ('#1E293B', '1e293b', '#fff') or CSS 'rgb(30, 41, 59)' /
'rgba(...)'. Prints the ratio (1-21, two decimals) and three independent
badges: AA normal (>= 4.5), AA large (>= 3.0), AAA normal (>= 7.0).

Exits 1 if either colour cannot be parsed.

Example:
    swatchkit contrast '#000' '#FFFFFF'
    swatchkit contrast 'rgb(37, 99, 235)' '#fff'
    swatchkit contrast 1E293B F8FAFC --json
"""

from swatchkit.core.errors import InvalidColorInput
from swatchkit.core.luminance import check_contrast
from swatchkit.core.types import Command, Report

command = Command(
    name='contrast',
    help='WCAG contrast ratio and AA/AAA badges for two colours.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('foreground', help='Foreground colour (hex or rgb())')
    parser.add_argument('background', help='Background colour (hex or rgb())')


@command.run
def run(report: Report, args) -> None:
    try:
        result = check_contrast(args.foreground, args.background)
    except InvalidColorInput as exc:
        report.fail(str(exc))
        return
    report.add('contrast', result.to_dict())
