"""Strategy protocol - the decisions a player delegates."""

import random
from typing import Optional, Protocol, Sequence

from duocardgame.engine.card import Card, Color


class Strategy(Protocol):
    """Interface for player decision policies."""

    @property
    def name(self) -> str:
        """Short identifier for the strategy."""
        ...

    def choose_playable_card(
        self,
        hand: Sequence[Card],
        top_card: Card,
        rng: random.Random,
    ) -> Optional[Card]:
        """Pick a card from ``hand`` to play on ``top_card``.

        Args:
            hand: The player's cards, in hand order.
            top_card: The visible top of the discard pile.
            rng: The game's random source; use it for every random decision.

        Returns:
            A card from ``hand`` that is playable on ``top_card``, or None.
        """
        ...

    def choose_color(self, hand: Sequence[Card], rng: random.Random) -> Color:
        """Name a non-wild color after playing a wild-family card."""
        ...
