"""Player: a named hand of cards and a running score."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, List, Optional

from duocardgame.engine.card import Card, Color

if TYPE_CHECKING:
    from duocardgame.agent.protocol import Strategy


class Player:
    """A seat at the table.

    The hand is only changed through this class's own methods. Decisions are
    delegated to ``strategy``, which defaults to the color-preference policy.
    """

    def __init__(
        self,
        name: str,
        strategy: Optional["Strategy"] = None,
        rng: Optional[random.Random] = None,
    ):
        if strategy is None:
            from duocardgame.agents.heuristic import ColorPreferenceStrategy

            strategy = ColorPreferenceStrategy()
        self.name = name
        self.strategy = strategy
        self.rng = rng if rng is not None else random.Random()
        self._hand: List[Card] = []
        self._score = 0

    @property
    def hand(self) -> List[Card]:
        """A copy of the hand, in the order cards were received."""
        return list(self._hand)

    @property
    def score(self) -> int:
        return self._score

    def add_score(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"Score can only increase, got {points}")
        self._score += points

    def add_card(self, card: Card) -> None:
        self._hand.append(card)

    def remove_card(self, card: Card) -> None:
        """Remove this exact card instance from the hand."""
        for i, held in enumerate(self._hand):
            if held is card:
                del self._hand[i]
                return
        raise ValueError(f"Card {card} not in {self.name}'s hand")

    def clear_hand(self) -> None:
        self._hand = []

    def play_card(self, card: Card) -> Card:
        """Take ``card`` out of the hand; the caller puts it on the discard pile."""
        self.remove_card(card)
        return card

    def hand_score(self) -> int:
        return sum(c.score for c in self._hand)

    def choose_playable_card(self, top_card: Card) -> Optional[Card]:
        return self.strategy.choose_playable_card(self.hand, top_card, self.rng)

    def choose_color(self) -> Color:
        return self.strategy.choose_color(self.hand, self.rng)

    def __str__(self) -> str:
        return f"{self.name} [{' '.join(str(c) for c in self._hand)}]"

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, cards={len(self._hand)}, score={self._score})"
