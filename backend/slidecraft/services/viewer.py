from __future__ import annotations

from typing import Callable

from ..schemas.deck import Deck, Slide
from .export import export_panel


class SlideViewer:
    """
    Cursor over one Deck. A new viewer is created for every Deck, so the cursor
    always starts at 0. Navigation is clamped: no wraparound.
    """

    def __init__(self, deck: Deck, on_dismiss: Callable[[], None]):
        self.deck = deck
        self.cursor = 0
        self.export_open = False
        self._on_dismiss = on_dismiss

    def __len__(self) -> int:
        return len(self.deck.slides)

    @property
    def current(self) -> Slide:
        return self.deck.slides[self.cursor]

    @property
    def position(self) -> int:
        return self.cursor + 1

    @property
    def has_prev(self) -> bool:
        return self.cursor > 0

    @property
    def has_next(self) -> bool:
        return self.cursor < len(self) - 1

    @property
    def progress(self) -> float:
        return round(self.position / len(self) * 100, 2)

    def next(self) -> None:
        if self.has_next:
            self.cursor += 1

    def prev(self) -> None:
        if self.has_prev:
            self.cursor -= 1

    def open_export(self) -> None:
        self.export_open = True

    def close_export(self) -> None:
        self.export_open = False

    def export_panel(self) -> dict:
        return export_panel()

    def dismiss(self) -> None:
        self._on_dismiss()
