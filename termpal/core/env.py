""".env loading for termpal's TERMPAL_* settings.

Precedence (first wins):
  1. Variables already in the OS environment, never overwritten.
  2. The file given with --env-file.
  3. The nearest .env walking up from the working directory, stopping at
     the repository root (a .git directory, or a .git file in worktrees).

Lines look like KEY=value, KEY="value" or `export KEY=value`; blank lines
and # comments are skipped.
"""

import os
from pathlib import Path


def find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above `start`, never crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def parse_dotenv(path: Path) -> dict[str, str]:
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
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
    """Merge a .env into os.environ without overriding existing keys.

    Returns the file that was read, or None.
    """
    path = Path(env_file) if env_file else find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None
    for key, value in parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path
