"""Image acquisition for commands that read a file.

Decoding lives outside the core: this opens the file with Pillow and hands
the decoded image on. Failures are recorded on the report.
"""

import os

from PIL import Image, UnidentifiedImageError

from swatchkit.core.types import Report


def open_image(path: str, report: Report) -> Image.Image | None:
    """Open and decode path, recording its size on the report."""
    if not os.path.isfile(path):
        report.fail(f'image not found: {path}')
        return None
    try:
        with Image.open(path) as img:
            img.load()
            image = img.convert('RGBA')
    except (UnidentifiedImageError, OSError) as exc:
        report.fail(f'could not load image {path}: {exc}')
        return None
    report.set_image(path, image.width, image.height)
    return image
