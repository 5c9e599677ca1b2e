"""Single game runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from duocardgame.config import Settings
from duocardgame.engine import DuoCardGame

if TYPE_CHECKING:
    from duocardgame.agent.protocol import Strategy
    from duocardgame.engine.snapshot import SnapshotSink

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[str]
    winner_score: int
    rounds: int
    scores: Tuple[Tuple[str, int], ...]


class GameRunner:
    """Runs a single game to completion: start, then rounds until someone wins."""

    def __init__(
        self,
        player_names: Optional[Sequence[str]] = None,
        *,
        num_players: Optional[int] = None,
        settings: Optional[Settings] = None,
        seed: Optional[int] = None,
        strategy: Optional["Strategy"] = None,
        sink: Optional["SnapshotSink"] = None,
        max_rounds: int = 1000,
    ):
        self._settings = settings or Settings()
        self._max_rounds = max_rounds
        self.game = DuoCardGame(
            player_names,
            num_players=num_players,
            seed=seed,
            strategy=strategy,
            sink=sink,
            **self._settings.game_kwargs(),
        )

    def run(self) -> GameResult:
        """Run the game and return the result."""
        game = self.game
        game.start_game()
        rounds = 0
        while not game.game_over and rounds < self._max_rounds:
            game.play_round()
            rounds += 1

        if not game.game_over:
            logger.warning("Game stopped after %d rounds without a winner", rounds)

        winner = game.winner
        return GameResult(
            winner=winner.name if winner else None,
            winner_score=winner.score if winner else 0,
            rounds=rounds,
            scores=game.scores(),
        )
