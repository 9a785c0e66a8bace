"""core/tuning.py — Data-driven tuning constants.

Gameplay numbers (decay rates, need thresholds and durations, dungeon
encounter cadence, actor speed, rewards) live in ``data/tuning.toml``
and are loaded once at startup.  Any module can read a value with::

    from core.tuning import get
    period = get("dungeon.descend", "spawn_period", 1.0)

Every call site passes its own default, so the simulation runs
unchanged when no file has been loaded (tests rely on this).

Hot-reload: call ``reload()`` to re-read the file.  In the debug view,
press F4.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib                # pip install tomli


_data: dict = {}
_path: Path | None = None


def load(path: str | Path | None = None) -> None:
    """Load (or reload) tuning constants from *path*.

    If *path* is ``None``, default to ``data/tuning.toml`` relative to
    the project root (one level above ``core/``).
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
    """Re-read the tuning file from disk (hot-reload)."""
    load(_path)


def get(section: str, key: str, default=None):
    """Read a tuning value.

    *section* uses dot-notation to traverse nested tables, e.g.
    ``"needs.durations"`` looks up ``[needs.durations]``.

    >>> get("needs.durations", "heal", 6.0)
    6.0
    """
    node = _lookup(section)
    if isinstance(node, dict):
        return node.get(key, default)
    return default


def section(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    node = _lookup(section_path)
    if isinstance(node, dict):
        return dict(node)
    return {}


def _lookup(section_path: str):
    node = _data
    for part in section_path.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
        if node is None:
            return None
    return node


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
