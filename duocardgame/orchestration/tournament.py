"""Tournament - run many games and aggregate results."""

import random
from collections import defaultdict
from typing import Any, Optional, Sequence

from duocardgame.config import Settings
from duocardgame.orchestration.game_runner import GameRunner


def run_tournament(
    num_games: int = 100,
    player_names: Optional[Sequence[str]] = None,
    *,
    num_players: Optional[int] = None,
    seed: Optional[int] = None,
    settings: Optional[Settings] = None,
    strategy: Any = None,
) -> dict[str, int]:
    """Play ``num_games`` independent games with the same seats.

    Each game gets its own seed drawn from one ``random.Random(seed)``, so a
    tournament is reproducible as a whole. Without names or a count, seats
    default to four players.

    Returns:
        Dict mapping player name to number of games won.
    """
    if player_names is None and num_players is None:
        num_players = 4
    wins: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for _ in range(num_games):
        runner = GameRunner(
            player_names,
            num_players=num_players,
            settings=settings,
            seed=rng.randint(0, 2**31 - 1),
            strategy=strategy,
        )
        result = runner.run()
        if result.winner:
            wins[result.winner] += 1

    return dict(wins)
