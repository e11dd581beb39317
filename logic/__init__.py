"""logic — Game rules package.

Every module here is pygame-free and works on immutable
``SessionState`` values: a rule takes a state and returns a new one.

Modules
-------
clock         time of day, day rollover, HH:MM / weekday formatting
vitals        per-tick decay + night regeneration, stat effects
outcome       win / loss evaluation
conditions    event id → eligibility predicate registry
interactions  one-shot room objects
scheduler     random narrative event selection
tick          the composed per-tick pipeline
session       GameSession, the player-facing orchestrator
"""
