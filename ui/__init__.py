"""ui — Modal overlays for the house scene.

A ``ModalStack`` layers the welcome card, narrative event prompts and
the end-of-game card over the scene.  Modals return ``UICommand``s
instead of touching the session.
"""

from ui.modal import Modal, ModalStack
from ui.commands import BeginSession, ChooseOption, ResetSession, UICommand
from ui.event_modal import EventModal
from ui.cards import WelcomeModal, OutcomeModal

__all__ = [
    "Modal", "ModalStack",
    "BeginSession", "ChooseOption", "ResetSession", "UICommand",
    "EventModal", "WelcomeModal", "OutcomeModal",
]
