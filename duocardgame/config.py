"""Runtime settings, read from ``DUO_*`` environment variables.

The CLI loads a ``.env`` file first, so the same names can live there.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from duocardgame.engine.deck import STANDARD_DECK_SIZE
from duocardgame.engine.game import HAND_SIZE, MAX_TURNS_PER_ROUND, WIN_SCORE
from duocardgame.export.csv_sink import DEFAULT_CSV_PATH

ENV_PREFIX = "DUO_"


@dataclass(frozen=True)
class Settings:
    win_score: int = WIN_SCORE
    hand_size: int = HAND_SIZE
    min_players: int = 2
    max_players: int = 4
    max_turns_per_round: int = MAX_TURNS_PER_ROUND
    csv_path: str = DEFAULT_CSV_PATH
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``DUO_<FIELD>`` variables, e.g. ``DUO_WIN_SCORE=250``."""
        env = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None or raw == "":
                continue
            if f.type in (int, "int"):
                try:
                    values[f.name] = int(raw)
                except ValueError:
                    raise ValueError(f"{ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}")
            else:
                values[f.name] = raw
        settings = cls(**values)
        if settings.min_players < 2 or settings.min_players > settings.max_players:
            raise ValueError(
                f"Invalid player range: {settings.min_players}-{settings.max_players}"
            )
        if settings.hand_size < 1:
            raise ValueError(f"Hand size must be at least 1, got {settings.hand_size}")
        if settings.hand_size * settings.max_players + 1 > STANDARD_DECK_SIZE:
            raise ValueError(
                f"Cannot deal {settings.hand_size} cards to {settings.max_players} players "
                f"from a {STANDARD_DECK_SIZE}-card deck"
            )
        return settings

    def game_kwargs(self) -> dict:
        """Keyword arguments for :class:`~duocardgame.engine.game.DuoCardGame`."""
        return {
            "win_score": self.win_score,
            "hand_size": self.hand_size,
            "min_players": self.min_players,
            "max_players": self.max_players,
            "max_turns_per_round": self.max_turns_per_round,
        }
