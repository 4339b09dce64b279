"""Defaults and environment-driven settings.

Precedence (first wins):
  1. CLI flags.
  2. OS environment variables (SWATCHKIT_*).
  3. A .env file: --env-file if given, else the first .env found walking up
     from cwd, stopping at the repo root (.git file or dir).

.env values never overwrite variables already present in os.environ.
Unparseable or non-positive values fall back to the defaults below.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from swatchkit.core.codec import clamp

logger = logging.getLogger(__name__)

DEFAULT_MAX_SAMPLES = 2500
DEFAULT_COLORS = 6
DEFAULT_ITERATIONS = 9
MIN_COLORS = 1
MAX_COLORS = 16

ENV_PREFIX = 'SWATCHKIT_'


@dataclass
class Settings:
    max_samples: int = DEFAULT_MAX_SAMPLES
    colors: int = DEFAULT_COLORS
    iterations: int = DEFAULT_ITERATIONS
    seed: int | None = None


def _positive_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(ENV_PREFIX + key)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning('ignoring %s%s=%r: not an integer', ENV_PREFIX, key, raw)
        return default
    if value < 1:
        logger.warning('ignoring %s%s=%r: must be >= 1', ENV_PREFIX, key, raw)
        return default
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read SWATCHKIT_MAX_SAMPLES / _COLORS / _ITERATIONS / _SEED."""
    env = os.environ if environ is None else environ
    seed_raw = env.get(ENV_PREFIX + 'SEED', '').strip()
    seed: int | None = None
    if seed_raw:
        try:
            seed = int(seed_raw)
        except ValueError:
            logger.warning('ignoring %sSEED=%r: not an integer', ENV_PREFIX, seed_raw)
    return Settings(
        max_samples=_positive_int(env, 'MAX_SAMPLES', DEFAULT_MAX_SAMPLES),
        colors=clamp(_positive_int(env, 'COLORS', DEFAULT_COLORS), MIN_COLORS, MAX_COLORS),
        iterations=_positive_int(env, 'ITERATIONS', DEFAULT_ITERATIONS),
        seed=seed,
    )


def find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, not crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; '#' comments, blank lines and 'export ' prefixes allowed."""
    values: dict[str, str] = {}
    for raw_line in path.read_text(encoding='utf-8').splitlines():
        line = raw_line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Populate os.environ from a .env file without overriding existing keys.

    Returns the file that was read, or None.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            logger.warning('env file not found: %s', env_file)
            return None
    else:
        path = find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path
