"""End-of-round records handed to an external sink."""

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple


@dataclass(frozen=True)
class RoundSnapshot:
    """Scores after a round, in seat order.

    ``round_winner`` is None when the round was aborted. ``game_winner`` is
    set only on the record that ends the game.
    """

    round_number: int
    scores: Tuple[Tuple[str, int], ...]
    round_winner: Optional[str] = None
    game_winner: Optional[str] = None

    @property
    def player_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.scores)


class SnapshotSink(Protocol):
    """Receives one snapshot per completed round."""

    def record(self, snapshot: RoundSnapshot) -> None:
        ...
