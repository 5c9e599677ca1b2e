"""Mediator protocol - the game operations card effects are allowed to use."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from duocardgame.engine.card import Color

if TYPE_CHECKING:
    from duocardgame.engine.deck import Deck
    from duocardgame.engine.player import Player


class GameMediator(Protocol):
    """Single point through which effects reach shared game state."""

    def get_current_player(self) -> "Player":
        ...

    def move_to_next_player(self) -> None:
        """Advance the turn one seat in the current direction."""
        ...

    def get_deck(self) -> "Deck":
        """Return a private working copy of the deck."""
        ...

    def set_deck(self, deck: "Deck") -> None:
        """Commit a working deck back as the authoritative one."""
        ...

    def reverse_direction(self) -> None:
        ...

    def set_current_color(self, color: Color) -> None:
        ...

    def shuffle_hands(self) -> None:
        ...

    def select_dealer(self) -> "Player":
        ...

    def end_round(self) -> None:
        ...

    def record_event(self, event: str) -> None:
        """Append a line to the game history."""
        ...
