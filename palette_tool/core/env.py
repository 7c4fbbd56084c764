"""Settings for palette-tool, read from the environment and .env files.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised keys:
  PALETTE_SIZE         number of entries `generate` produces (default 5)
  PALETTE_SEED         integer seed for the random base hue (default: fresh entropy)
  PALETTE_SHADE_STEPS  length of shade ramps (default 5)

Command-line flags override whatever is loaded here.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from palette_tool.core.engine import DEFAULT_COUNT, DEFAULT_STEPS


@dataclass(frozen=True)
class Settings:
    size: int = DEFAULT_COUNT
    seed: int | None = None
    shade_steps: int = DEFAULT_STEPS


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value, KEY="value" and `export KEY=value`."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip().removeprefix('export ').strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _int_setting(environ: Mapping[str, str], key: str, minimum: int | None = None) -> int | None:
    raw = environ.get(key, '').strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'{key} must be an integer, got {raw!r}') from None
    if minimum is not None and value < minimum:
        raise ValueError(f'{key} must be at least {minimum}, got {value}')
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environ (default: os.environ, after load_env())."""
    if environ is None:
        environ = os.environ
    size = _int_setting(environ, 'PALETTE_SIZE', minimum=1)
    steps = _int_setting(environ, 'PALETTE_SHADE_STEPS', minimum=1)
    return Settings(
        size=DEFAULT_COUNT if size is None else size,
        seed=_int_setting(environ, 'PALETTE_SEED', minimum=0),
        shade_steps=DEFAULT_STEPS if steps is None else steps,
    )
