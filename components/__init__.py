"""components — Immutable data records, organised by domain.

Submodules
----------
vitals    StatEffect, clamp_stat
catalog   Room, InteractionObject, EventChoice, NarrativeEvent
session   SessionState, Terminal, initial_state

All public names are re-exported here so code can simply do
``from components import SessionState``.
"""

# ── Vitals ───────────────────────────────────────────────────────────
from components.vitals import StatEffect, clamp_stat

# ── Static content ───────────────────────────────────────────────────
from components.catalog import Room, InteractionObject, EventChoice, NarrativeEvent

# ── Session ──────────────────────────────────────────────────────────
from components.session import SessionState, Terminal, initial_state

__all__ = [
    # vitals
    "StatEffect", "clamp_stat",
    # catalog
    "Room", "InteractionObject", "EventChoice", "NarrativeEvent",
    # session
    "SessionState", "Terminal", "initial_state",
]
