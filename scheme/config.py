from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (scheme package directory)
_SCHEME_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_FILES = [_SCHEME_DIR / 'prelude' / 'prelude.scm']
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_files() -> List[Path]:
    return paths_from_env('SCHEME_PRELUDE_PATH', _DEFAULT_PRELUDE_FILES)


def get_recursion_limit() -> int:
    raw = os.environ.get('SCHEME_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return max(int(raw), 100)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT


def get_log_level() -> str:
    return os.environ.get('SCHEME_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
