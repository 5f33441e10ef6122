"""Environment variable loading and settings for mandprint.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Walking stops at .git so we never load a .env from outside the repo.
Only sets variables that are NOT already in os.environ.

Settings read after loading:
  MANDPRINT_LOG_LEVEL   logging level name (default WARNING)
  MANDPRINT_OUTPUT      'text' or 'json' (default text)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

OUTPUT_FORMATS = ('text', 'json')


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    output: str = 'text'


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
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
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

    parsed = _parse_dotenv(path)
    for key, value in parsed.items():
        if key not in os.environ:
            os.environ[key] = value

    return path


def settings() -> Settings:
    """Read mandprint settings from the environment. Bad values fall back to defaults."""
    level_name = os.environ.get('MANDPRINT_LOG_LEVEL', 'WARNING').strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    output = os.environ.get('MANDPRINT_OUTPUT', 'text').strip().lower()
    if output not in OUTPUT_FORMATS:
        output = 'text'

    return Settings(log_level=level, output=output)
