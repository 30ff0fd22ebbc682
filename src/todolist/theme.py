"""Color & style helpers for the to-do shell.

Decisions:
- Important tasks render in the important color; the core only sets a flag.
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides via environment or a .env file in the working directory.
"""
from __future__ import annotations
import logging
import os, sys
from pathlib import Path
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

PALETTE_KEYS = ('TODO_PRIMARY', 'TODO_IMPORTANT', 'TODO_MUTED')

# Default palette
HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_IMPORTANT_DEFAULT = '#E5484D'
HEX_MUTED_DEFAULT = '#8B8D98'


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _is_hex(value: str) -> bool:
    h = value.strip().lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    idx = 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)
    return f"\033[38;5;{idx}m"


def read_env_file(path: Path) -> Dict[str, str]:
    """Palette overrides from a KEY=VALUE file; unknown keys and bad hex are skipped."""
    overrides: Dict[str, str] = {}
    if not path.exists():
        return overrides
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("could not read %s: %s", path, exc)
        return overrides
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = (part.strip() for part in line.split('=', 1))
        if k in PALETTE_KEYS and _is_hex(v):
            overrides[k] = '#' + v.lstrip('#')
        else:
            logger.debug("ignoring %s entry %r", path, k)
    return overrides


class Theme:
    """Resolved palette plus color enablement for one terminal."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None,
                 env_file: Optional[Path] = None, isatty: Optional[bool] = None):
        env = os.environ if environ is None else environ
        if isatty is None:
            isatty = sys.stdout.isatty()
        force = env.get('FORCE_COLOR', '').lower() in {'1', 'true', 'yes', 'on'}
        self.enabled: bool = (force or isatty) and env.get('NO_COLOR') is None
        colorterm = env.get('COLORTERM', '').lower()
        self.truecolor: bool = self.enabled and any(tok in colorterm for tok in ('truecolor', '24bit'))
        file_overrides = read_env_file(env_file if env_file is not None else Path.cwd() / '.env')

        def resolve(key: str, default: str) -> str:
            # priority: real env var > .env override > default
            value = env.get(key)
            if value and _is_hex(value):
                return '#' + value.strip().lstrip('#')
            return file_overrides.get(key, default)

        self.hex_primary = resolve('TODO_PRIMARY', HEX_PRIMARY_DEFAULT)
        self.hex_important = resolve('TODO_IMPORTANT', HEX_IMPORTANT_DEFAULT)
        self.hex_muted = resolve('TODO_MUTED', HEX_MUTED_DEFAULT)

        self.reset = self._code('0')
        self.bold = self._code('1')
        self.dim = self._code('2')
        self.header = self._from_hex(self.hex_primary) + self.bold
        self.number = self._from_hex(self.hex_primary)
        self.important = self._from_hex(self.hex_important) + self.bold
        self.empty = self.dim + self._from_hex(self.hex_muted)

    def _code(self, part: str) -> str:
        return f"\033[{part}m" if self.enabled else ''

    def _from_hex(self, hex_code: str) -> str:
        if not self.enabled:
            return ''
        r, g, b = _hex_to_rgb(hex_code)
        if self.truecolor:
            return f"\033[38;2;{r};{g};{b}m"
        return _fg_256(r, g, b)

    def color(self, text: str, *styles: str) -> str:
        if not self.enabled or not any(styles):
            return text
        return ''.join(styles) + text + self.reset
