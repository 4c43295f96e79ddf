from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


# Resolve installation dir (steel package directory)
_STEEL_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _STEEL_DIR / 'prelude' / 'prelude.scm'
_DEFAULT_LOGLEVEL = logging.WARNING


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var, '').strip()
    if not raw:
        return default
    return Path(raw)


def get_prelude_path() -> Path:
    p = path_from_env('STEEL_PRELUDE_PATH', _DEFAULT_PRELUDE)
    # a directory means "prelude.scm inside it"
    return p / 'prelude.scm' if p.is_dir() else p


def get_log_level() -> int:
    raw: Optional[str] = os.environ.get('STEEL_LOGLEVEL')
    if not raw:
        return _DEFAULT_LOGLEVEL
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = getattr(logging, raw.upper(), None)
    return level if isinstance(level, int) else _DEFAULT_LOGLEVEL
