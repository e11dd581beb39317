"""ui.commands — Command objects emitted by modals.

Modals never touch the session directly.  They return these and the
scene applies them, so every state change still goes through one of
``GameSession``'s operations.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class BeginSession:
    """Leave the welcome screen and start the clock."""


@dataclass(frozen=True, slots=True)
class ChooseOption:
    """Answer the pending narrative event."""
    index: int


@dataclass(frozen=True, slots=True)
class ResetSession:
    """Throw the session away and start over."""


UICommand = Union[BeginSession, ChooseOption, ResetSession]
