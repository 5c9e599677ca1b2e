"""Strategy that plays any legal card at random."""

import random
from typing import Optional, Sequence

from duocardgame.engine.card import Card, Color


class RandomStrategy:
    name = "random"

    def choose_playable_card(
        self,
        hand: Sequence[Card],
        top_card: Card,
        rng: random.Random,
    ) -> Optional[Card]:
        playable = [c for c in hand if c.is_playable(top_card)]
        if not playable:
            return None
        return rng.choice(playable)

    def choose_color(self, hand: Sequence[Card], rng: random.Random) -> Color:
        return rng.choice(Color.playable())
