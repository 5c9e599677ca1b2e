"""Game orchestration."""

from duocardgame.orchestration.game_runner import GameResult, GameRunner
from duocardgame.orchestration.tournament import run_tournament

__all__ = ["GameResult", "GameRunner", "run_tournament"]
