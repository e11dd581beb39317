"""components.vitals — Stat effect values shared by objects and choices."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from core.constants import STAT_NAMES, STAT_MIN, STAT_MAX


def clamp_stat(value: float) -> float:
    """Clamp *value* into the vital stat range [0, 100]."""
    return max(STAT_MIN, min(STAT_MAX, value))


@dataclass(frozen=True, slots=True)
class StatEffect:
    """Sparse stat deltas.

    ``None`` means "this stat is not touched" — it is never read as 0.
    A present 0 still counts as touched (and gets clamped, harmlessly).
    """
    energy: float | None = None
    sleep: float | None = None
    health: float | None = None

    @classmethod
    def from_table(cls, table: dict[str, Any]) -> "StatEffect":
        """Build from a TOML table such as ``{energy = 15, health = -5}``.

        Raises ``KeyError`` for keys that are not vital stats.
        """
        unknown = set(table) - set(STAT_NAMES)
        if unknown:
            raise KeyError(f"unknown stat(s): {', '.join(sorted(unknown))}")
        return cls(**{k: float(v) for k, v in table.items()})

    def items(self) -> list[tuple[str, float]]:
        """Return ``[(stat, delta), …]`` for the touched stats only."""
        return [(name, getattr(self, name)) for name in STAT_NAMES
                if getattr(self, name) is not None]

    @property
    def empty(self) -> bool:
        return not self.items()

    def describe(self) -> str:
        """Short label like ``"+15 energy  -5 health"`` for the UI."""
        return "  ".join(f"{delta:+g} {name}" for name, delta in self.items())
