"""Configuration for colourset: environment variables and .env loading.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables (command-line flags override them):
  COLOURSET_HUE        base hue, 0-360 (360 = grey)
  COLOURSET_SHADE      base shade, 1-4 (anything else = random)
  COLOURSET_COUNT      number of alternative coloursets
  COLOURSET_SEED       seed for the random generator
  COLOURSET_MAX_TRIES  cap on rejection-sampling attempts (unset = no cap)
"""

import os
from dataclasses import dataclass
from pathlib import Path

from colourset.core.types import ConfigError

PREFIX = 'COLOURSET_'


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are stripped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)

    return path


def _int_var(name: str) -> int | None:
    raw = os.environ.get(PREFIX + name, '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f'{PREFIX}{name} must be an integer, got {raw!r}') from None


@dataclass
class Settings:
    hue: int | None = None
    shade: int | None = None
    count: int = 0
    seed: int | None = None
    max_tries: int | None = None


def load_settings() -> Settings:
    """Read COLOURSET_* variables from the environment."""
    count = _int_var('COUNT')
    return Settings(
        hue=_int_var('HUE'),
        shade=_int_var('SHADE'),
        count=count if count is not None else 0,
        seed=_int_var('SEED'),
        max_tries=_int_var('MAX_TRIES'),
    )
