"""Game engine for the Duo card game."""

from duocardgame.engine.card import ACTION_SCORES, ActionCard, ActionType, Card, Color, NumberCard
from duocardgame.engine.deck import STANDARD_DECK_SIZE, Deck, create_cards
from duocardgame.engine.errors import DeckExhausted, DuoCardGameError, InvalidCardValue
from duocardgame.engine.game import DuoCardGame, GamePhase
from duocardgame.engine.mediator import GameMediator
from duocardgame.engine.player import Player
from duocardgame.engine.snapshot import RoundSnapshot, SnapshotSink

__all__ = [
    "ACTION_SCORES",
    "ActionCard",
    "ActionType",
    "Card",
    "Color",
    "NumberCard",
    "STANDARD_DECK_SIZE",
    "Deck",
    "create_cards",
    "DeckExhausted",
    "DuoCardGameError",
    "InvalidCardValue",
    "DuoCardGame",
    "GamePhase",
    "GameMediator",
    "Player",
    "RoundSnapshot",
    "SnapshotSink",
]
