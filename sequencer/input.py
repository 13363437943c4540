from __future__ import annotations
from typing import Iterable

import pygame


class MouseClickInput:
    """Edge-triggered mouse button state for the current frame.

    Feed it the frame's events before ticking the sequencer; pressed()
    is true only on the frame the button went down.
    """

    def __init__(self, button: int = 1):
        self.button = button
        self._pressed = False

    def feed(self, events: Iterable[pygame.event.Event]) -> None:
        self._pressed = False
        for e in events:
            if e.type == pygame.MOUSEBUTTONDOWN and getattr(e, "button", None) == self.button:
                self._pressed = True

    def pressed(self) -> bool:
        return self._pressed
