"""Deck: draw pile and discard pile."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Iterable, List, Optional

from duocardgame.engine.card import ActionCard, ActionType, Card, Color, NumberCard
from duocardgame.engine.errors import DeckExhausted

if TYPE_CHECKING:
    from duocardgame.engine.player import Player

logger = logging.getLogger(__name__)

STANDARD_DECK_SIZE = 109

COLORED_ACTIONS = (ActionType.DRAW_TWO, ActionType.REVERSE, ActionType.SKIP)


def create_cards() -> List[Card]:
    """Create the standard 109-card set, unshuffled.

    - 4 colors x (one 0, two each of 1-9): 76 number cards
    - 4 colors x two each of Draw Two, Reverse, Skip: 24 cards
    - 4 Wild, 4 Wild Draw Four, 1 Shuffle Hands: 9 cards
    """
    cards: List[Card] = []

    for color in Color.playable():
        cards.append(NumberCard(color=color, number=0))
        for number in range(1, 10):
            cards.append(NumberCard(color=color, number=number))
            cards.append(NumberCard(color=color, number=number))

    for color in Color.playable():
        for action in COLORED_ACTIONS:
            cards.append(ActionCard(color=color, action=action))
            cards.append(ActionCard(color=color, action=action))

    for _ in range(4):
        cards.append(ActionCard(color=Color.WILD, action=ActionType.WILD))
        cards.append(ActionCard(color=Color.WILD, action=ActionType.WILD_DRAW_FOUR))
    cards.append(ActionCard(color=Color.WILD, action=ActionType.SHUFFLE_HANDS))

    return cards


class Deck:
    """Owns the draw pile (top is index 0) and the discard pile (top is last).

    A new deck holds the full standard set, shuffled. Pass ``cards`` to build
    a deck with a specific draw pile instead, in the given order.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        cards: Optional[Iterable[Card]] = None,
    ):
        self._rng = rng if rng is not None else random.Random()
        self.discard_pile: List[Card] = []
        if cards is None:
            self.draw_pile: List[Card] = create_cards()
            self.shuffle()
        else:
            self.draw_pile = list(cards)

    def __len__(self) -> int:
        return len(self.draw_pile) + len(self.discard_pile)

    def shuffle(self) -> None:
        self._rng.shuffle(self.draw_pile)

    def reshuffle(self) -> None:
        """Turn all but the top discard into a fresh, shuffled draw pile."""
        if len(self.discard_pile) <= 1:
            return
        top = self.discard_pile.pop()
        self.draw_pile.extend(self.discard_pile)
        self.discard_pile = [top]
        self.shuffle()
        logger.info("Reshuffled discard pile into draw pile (%d cards)", len(self.draw_pile))

    def draw_card(self) -> Card:
        if not self.draw_pile:
            self.reshuffle()
        if not self.draw_pile:
            raise DeckExhausted("No cards left to draw")
        return self.draw_pile.pop(0)

    def deal_cards(self, players: List["Player"], count: int) -> None:
        """Give each player ``count`` cards, one at a time in seat order."""
        for _ in range(count):
            for player in players:
                player.add_card(self.draw_card())
        logger.debug("Dealt %d cards to %d players", count, len(players))

    def get_top_discard_pile_card(self) -> Optional[Card]:
        return self.discard_pile[-1] if self.discard_pile else None

    def put_card_to_discard_pile(self, card: Card) -> None:
        self.discard_pile.append(card)

    def add_card_to_draw_pile(self, card: Card) -> None:
        self.draw_pile.append(card)

    def copy(self) -> "Deck":
        """Return an independent deck with copies of every card, sharing the rng."""
        clone = Deck(rng=self._rng, cards=[c.copy() for c in self.draw_pile])
        clone.discard_pile = [c.copy() for c in self.discard_pile]
        return clone
