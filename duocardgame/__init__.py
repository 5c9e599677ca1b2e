"""Duo card game simulator."""

from duocardgame.engine import DuoCardGame, Player, RoundSnapshot
from duocardgame.orchestration import GameResult, GameRunner, run_tournament

__version__ = "0.1.0"

__all__ = [
    "DuoCardGame",
    "Player",
    "RoundSnapshot",
    "GameResult",
    "GameRunner",
    "run_tournament",
]
