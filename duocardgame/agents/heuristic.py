"""Default built-in strategy: prefer color changes, keep wilds for last."""

import random
from collections import Counter
from typing import List, Optional, Sequence

from duocardgame.engine.card import Card, Color


def choose_majority_color(hand: Sequence[Card], rng: random.Random) -> Color:
    """Pick the non-wild color held most often, breaking ties at random.

    With no colored cards in hand any of the four colors may be named.
    """
    counts = Counter(c.color for c in hand if c.color is not Color.WILD)
    if not counts:
        return rng.choice(Color.playable())
    best = max(counts.values())
    # Declaration order keeps seeded runs reproducible.
    candidates = [color for color in Color.playable() if counts.get(color) == best]
    return rng.choice(candidates)


class ColorPreferenceStrategy:
    """Splits playable cards into same-color, other-color and wild groups.

    A coin flip decides whether to lead with the highest-scoring same-color
    card; otherwise a random other-color card is played, then the best
    same-color card, then a random wild.
    """

    name = "heuristic"

    def choose_playable_card(
        self,
        hand: Sequence[Card],
        top_card: Card,
        rng: random.Random,
    ) -> Optional[Card]:
        same_color: List[Card] = []
        other_color: List[Card] = []
        wilds: List[Card] = []

        for card in hand:
            if not card.is_playable(top_card):
                continue
            if card.color is Color.WILD:
                wilds.append(card)
            elif card.color == top_card.color:
                same_color.append(card)
            else:
                other_color.append(card)

        same_color.sort(key=lambda c: c.score, reverse=True)

        prefer_same_color = rng.random() < 0.5
        if prefer_same_color and same_color:
            return same_color[0]
        if other_color:
            return rng.choice(other_color)
        if same_color:
            return same_color[0]
        if wilds:
            return rng.choice(wilds)
        return None

    def choose_color(self, hand: Sequence[Card], rng: random.Random) -> Color:
        return choose_majority_color(hand, rng)
