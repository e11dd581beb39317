"""core/tuning.py — Host settings loaded from ``data/tuning.toml``.

Window size, frame rate and the available game speeds live in the TOML
file and are loaded once at startup.  The game *rules* are not tunable;
they are fixed in ``core.constants``.

    from core.tuning import get
    fps = get("app", "fps", 60)

Call ``reload()`` to re-read the file.
"""

from __future__ import annotations
import tomllib
from pathlib import Path


_data: dict = {}
_path: Path | None = None


def load(path: str | Path | None = None) -> None:
    """Load (or reload) settings from *path*.

    If *path* is ``None``, default to ``data/tuning.toml`` relative to
    the project root (one level above ``core/``).  A missing file is not
    an error: every reader passes its own default.
    """
    global _data, _path

    if path is None:
        path = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"
    else:
        path = Path(path)
    _path = path

    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        _data = {}
        return

    with open(path, "rb") as f:
        _data = tomllib.load(f)

    print(f"[TUNING] Loaded {_count_leaves(_data)} values from {path}")


def reload() -> None:
    """Re-read the settings file from disk."""
    load(_path)


def _walk(section_path: str):
    node = _data
    for part in section_path.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
        if node is None:
            return None
    return node if isinstance(node, dict) else None


def get(section: str, key: str, default=None):
    """Read a setting; *section* may be dotted (``"app.window"``).

    >>> get("session", "speed_steps", [1])
    [1, 2, 4]
    """
    node = _walk(section)
    if node is None:
        return default
    return node.get(key, default)


def section(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    node = _walk(section_path)
    return dict(node) if node is not None else {}


def _count_leaves(d: dict) -> int:
    return sum(_count_leaves(v) if isinstance(v, dict) else 1 for v in d.values())
