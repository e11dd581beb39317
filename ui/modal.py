"""ui.modal — Modal base class and ModalStack manager.

The welcome card, narrative event prompts and the end-of-game card are
``Modal`` subclasses.  While any modal is open the scene routes input to
the topmost one only; the session underneath keeps whatever running
state the rules gave it (an open event modal means the session is
already paused).
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ui.commands import UICommand


class Modal(ABC):
    """Base class for all overlays."""

    def on_open(self) -> None:
        """Called when this modal is pushed onto the stack."""

    def on_close(self) -> None:
        """Called when this modal is popped from the stack."""

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> list[UICommand]:
        """Process one pygame event and return commands for the scene."""

    @abstractmethod
    def draw(self, surface: pygame.Surface, app) -> None:
        """Render the modal onto *surface*."""


class ModalStack:
    """Ordered stack of ``Modal`` overlays (draw bottom → top, input top only)."""

    __slots__ = ("_stack",)

    def __init__(self) -> None:
        self._stack: list[Modal] = []

    @property
    def active(self) -> Modal | None:
        return self._stack[-1] if self._stack else None

    @property
    def is_open(self) -> bool:
        return bool(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, modal: Modal) -> None:
        self._stack.append(modal)
        modal.on_open()

    def pop(self) -> Modal | None:
        if not self._stack:
            return None
        modal = self._stack.pop()
        modal.on_close()
        return modal

    def clear(self) -> None:
        while self._stack:
            self.pop()

    def handle_event(self, event: pygame.event.Event) -> list:
        if self._stack:
            return self._stack[-1].handle_event(event)
        return []

    def draw(self, surface: pygame.Surface, app) -> None:
        for modal in self._stack:
            modal.draw(surface, app)
