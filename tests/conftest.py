"""Shared fixtures and helpers."""

from typing import Dict, List, Optional

import pytest

from duocardgame.engine import ActionCard, ActionType, Card, Color, Deck, DuoCardGame, NumberCard
from duocardgame.engine.game import GamePhase


def num(color: Color, number: int) -> NumberCard:
    return NumberCard(color=color, number=number)


def act(color: Color, action: ActionType) -> ActionCard:
    return ActionCard(color=color, action=action)


def filler(count: int) -> List[Card]:
    """Plain green/yellow number cards for a draw pile."""
    colors = (Color.GREEN, Color.YELLOW)
    return [num(colors[i % 2], (i % 9) + 1) for i in range(count)]


def rig(
    game: DuoCardGame,
    hands: Dict[str, List[Card]],
    discard: List[Card],
    draw: Optional[List[Card]] = None,
    current: int = 0,
    direction: int = 1,
) -> None:
    """Put a started game into an exact position."""
    for player in game.players:
        player.clear_hand()
        for card in hands.get(player.name, []):
            player.add_card(card)
    deck = Deck(cards=filler(30) if draw is None else draw)
    deck.discard_pile = list(discard)
    game.set_deck(deck)
    game.current_player_index = current
    game.direction = direction
    game.current_color = discard[-1].color
    game.phase = GamePhase.IN_ROUND


def total_cards(game: DuoCardGame) -> int:
    return sum(len(p.hand) for p in game.players) + len(game.deck)


def all_card_ids(game: DuoCardGame) -> List[int]:
    ids = [id(c) for p in game.players for c in p.hand]
    ids += [id(c) for c in game.deck.draw_pile]
    ids += [id(c) for c in game.deck.discard_pile]
    return ids


@pytest.fixture
def three_player_game() -> DuoCardGame:
    game = DuoCardGame(["A", "B", "C"], seed=3)
    game.start_game()
    return game


@pytest.fixture
def four_player_game() -> DuoCardGame:
    game = DuoCardGame(["A", "B", "C", "D"], seed=4)
    game.start_game()
    return game


class RecordingSink:
    def __init__(self):
        self.snapshots = []

    def record(self, snapshot) -> None:
        self.snapshots.append(snapshot)
