"""Card types for the Duo card game.

A card is either a :class:`NumberCard` or an :class:`ActionCard`. The set is
closed; code that needs to branch on the kind does so with ``isinstance``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Union

from duocardgame.engine.errors import InvalidCardValue

if TYPE_CHECKING:
    from duocardgame.engine.mediator import GameMediator

logger = logging.getLogger(__name__)


class Color(str, Enum):
    """Card colors. WILD marks a wild-family card whose color is not chosen yet."""

    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    WILD = "wild"

    @classmethod
    def playable(cls) -> List["Color"]:
        """The four colors a player can name."""
        return [c for c in cls if c is not cls.WILD]


class ActionType(str, Enum):
    """Action card kinds."""

    DRAW_TWO = "draw_two"
    REVERSE = "reverse"
    SKIP = "skip"
    WILD = "wild"
    WILD_DRAW_FOUR = "wild_draw_four"
    SHUFFLE_HANDS = "shuffle_hands"

    @property
    def is_wild_family(self) -> bool:
        return self in (ActionType.WILD, ActionType.WILD_DRAW_FOUR, ActionType.SHUFFLE_HANDS)


ACTION_SCORES = {
    ActionType.DRAW_TWO: 20,
    ActionType.REVERSE: 20,
    ActionType.SKIP: 20,
    ActionType.WILD: 50,
    ActionType.WILD_DRAW_FOUR: 50,
    ActionType.SHUFFLE_HANDS: 40,
}


@dataclass(frozen=True)
class NumberCard:
    """A colored card numbered 0-9. Its score is its number."""

    color: Color
    number: int

    def __post_init__(self) -> None:
        if not isinstance(self.number, int) or not 0 <= self.number <= 9:
            raise InvalidCardValue(f"Number must be between 0 and 9, got {self.number!r}")
        if self.color is Color.WILD:
            raise InvalidCardValue("Number cards cannot be wild")

    @property
    def score(self) -> int:
        return self.number

    def is_playable(self, top_card: Card) -> bool:
        if isinstance(top_card, NumberCard):
            return self.color == top_card.color or self.number == top_card.number
        return self.color == top_card.color

    def execute_effect(self, mediator: "GameMediator") -> None:
        # An ordinary play just ends the turn.
        mediator.move_to_next_player()

    def copy(self) -> "NumberCard":
        return NumberCard(color=self.color, number=self.number)

    def describe(self) -> str:
        return f"{self.color.value}_{self.number}"

    def __str__(self) -> str:
        return self.describe()


@dataclass
class ActionCard:
    """A card whose effect changes turn order, color or hands.

    Wild-family cards start out WILD; playing one reassigns ``color`` to the
    color its player chose, and that sticks to this instance.
    """

    color: Color
    action: ActionType

    def __post_init__(self) -> None:
        if self.color is Color.WILD and not self.action.is_wild_family:
            raise InvalidCardValue(f"{self.action.value} cards must have a color")

    @property
    def score(self) -> int:
        return ACTION_SCORES[self.action]

    def is_playable(self, top_card: Card) -> bool:
        if self.action.is_wild_family:
            return True
        if self.color == top_card.color:
            return True
        return isinstance(top_card, ActionCard) and top_card.action is self.action

    def execute_effect(self, mediator: "GameMediator") -> None:
        """Apply this card's effect through ``mediator``.

        Effects only perform the extra turn movement their card causes; the
        round loop still ends the acting player's turn afterwards. So DrawTwo,
        Skip and WildDrawFour land on the victim, and the loop steps past them.
        """
        logger.info("Executing effect of %s", self.action.value)
        action = self.action
        if action is ActionType.DRAW_TWO:
            mediator.move_to_next_player()
            _force_draw(mediator, 2)
        elif action is ActionType.REVERSE:
            mediator.reverse_direction()
            mediator.record_event("direction reversed")
        elif action is ActionType.SKIP:
            mediator.move_to_next_player()
            mediator.record_event(f"{mediator.get_current_player().name} is skipped")
        elif action is ActionType.WILD:
            self._choose_color(mediator)
        elif action is ActionType.WILD_DRAW_FOUR:
            self._choose_color(mediator)
            mediator.move_to_next_player()
            _force_draw(mediator, 4)
        elif action is ActionType.SHUFFLE_HANDS:
            mediator.shuffle_hands()
            mediator.record_event("hands shuffled")
            self._choose_color(mediator)
        else:
            raise ValueError(f"Unknown action type: {action}")

    def _choose_color(self, mediator: "GameMediator") -> None:
        player = mediator.get_current_player()
        chosen = player.choose_color()
        mediator.set_current_color(chosen)
        self.color = chosen
        mediator.record_event(f"{player.name} chose {chosen.value}")

    def copy(self) -> "ActionCard":
        return ActionCard(color=self.color, action=self.action)

    def describe(self) -> str:
        if self.color is Color.WILD:
            return self.action.value
        return f"{self.color.value}_{self.action.value}"

    def __str__(self) -> str:
        return self.describe()


Card = Union[NumberCard, ActionCard]


def _force_draw(mediator: "GameMediator", count: int) -> None:
    """Make the current player draw ``count`` cards from a working copy of the deck.

    The whole draw succeeds or nothing changes: if the deck runs dry,
    DeckExhausted propagates before the deck is committed or the hand touched.
    """
    victim = mediator.get_current_player()
    deck = mediator.get_deck()
    drawn = [deck.draw_card() for _ in range(count)]
    mediator.set_deck(deck)
    for card in drawn:
        victim.add_card(card)
    mediator.record_event(f"{victim.name} drew {count} cards (penalty)")
